from scorebook.domain.errors import ConfigError, Err, IngestError, Ok, Result, ScorebookError


class TestErrors:
    def test_ingest_error_is_scorebook_error(self) -> None:
        err = IngestError(message="bad row", source_detail="pas.csv", row_number=3)
        assert isinstance(err, ScorebookError)
        assert err.row_number == 3

    def test_config_error_default_keys(self) -> None:
        assert ConfigError(message="x").unrecognized_keys == ()


class TestResult:
    def _divide(self, a: int, b: int) -> Result[float, str]:
        if b == 0:
            return Err("division by zero")
        return Ok(a / b)

    def test_match_ok(self) -> None:
        match self._divide(6, 3):
            case Ok(value):
                assert value == 2.0
            case Err(_):
                raise AssertionError("expected Ok")

    def test_match_err(self) -> None:
        match self._divide(1, 0):
            case Ok(_):
                raise AssertionError("expected Err")
            case Err(error):
                assert error == "division by zero"

    def test_equality(self) -> None:
        assert Ok(1) == Ok(1)
        assert Err("a") != Err("b")
