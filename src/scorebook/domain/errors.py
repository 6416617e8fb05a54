from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class ScorebookError:
    message: str


@dataclass(frozen=True)
class IngestError(ScorebookError):
    source_detail: str
    row_number: int | None = None


@dataclass(frozen=True)
class ConfigError(ScorebookError):
    unrecognized_keys: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E


Result: TypeAlias = Ok[T] | Err[E]
