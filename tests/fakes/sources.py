import csv
from typing import Any


class FakeRowSource:
    def __init__(self, rows: list[dict[str, Any]]) -> None:
        self._rows = rows

    @property
    def source_type(self) -> str:
        return "test"

    @property
    def source_detail(self) -> str:
        return "fake"

    def fetch(self, **params: Any) -> list[dict[str, Any]]:
        return self._rows


class ErrorRowSource:
    @property
    def source_type(self) -> str:
        return "test"

    @property
    def source_detail(self) -> str:
        return "error"

    def fetch(self, **params: Any) -> list[dict[str, Any]]:
        raise FileNotFoundError("no such file: error")


class MalformedRowSource:
    @property
    def source_type(self) -> str:
        return "test"

    @property
    def source_detail(self) -> str:
        return "malformed"

    def fetch(self, **params: Any) -> list[dict[str, Any]]:
        raise csv.Error("field larger than field limit")
