import csv
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, Generic, Protocol, TypeVar

from scorebook.domain.defensive_event import DefensiveEvent
from scorebook.domain.errors import Err, IngestError, Ok, Result
from scorebook.domain.plate_appearance import PlateAppearance
from scorebook.ingest.column_maps import row_to_defensive_event, row_to_plate_appearance
from scorebook.ingest.csv_source import CsvSource

logger = logging.getLogger(__name__)


class RowSource(Protocol):
    @property
    def source_type(self) -> str: ...

    @property
    def source_detail(self) -> str: ...

    def fetch(self, **params: Any) -> list[dict[str, Any]]: ...


T = TypeVar("T")


class Loader(Generic[T]):
    """Decode every row from a source, stopping at the first bad row."""

    def __init__(self, source: RowSource, row_mapper: Callable[[dict[str, Any]], T]) -> None:
        self._source = source
        self._row_mapper = row_mapper

    def load(self, **fetch_params: Any) -> Result[list[T], IngestError]:
        logger.info("Loading rows from %s", self._source.source_detail)
        try:
            rows = self._source.fetch(**fetch_params)
        except (OSError, UnicodeDecodeError, csv.Error) as exc:
            logger.error("Fetch failed for %s: %s", self._source.source_detail, exc)
            return Err(IngestError(message=str(exc), source_detail=self._source.source_detail))

        records: list[T] = []
        # Row 1 is the CSV header.
        for row_number, row in enumerate(rows, start=2):
            try:
                records.append(self._row_mapper(row))
            except (KeyError, ValueError) as exc:
                logger.warning("Rejected row %d of %s: %s", row_number, self._source.source_detail, exc)
                return Err(
                    IngestError(
                        message=f"row {row_number}: {exc}",
                        source_detail=self._source.source_detail,
                        row_number=row_number,
                    )
                )

        logger.info("Loaded %d rows from %s", len(records), self._source.source_detail)
        return Ok(records)


def load_plate_appearances(path: str | Path) -> Result[list[PlateAppearance], IngestError]:
    return Loader(CsvSource(path), row_to_plate_appearance).load()


def load_defensive_events(path: str | Path) -> Result[list[DefensiveEvent], IngestError]:
    return Loader(CsvSource(path), row_to_defensive_event).load()
