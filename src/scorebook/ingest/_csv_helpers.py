from typing import Any


def strip_bom(text: str) -> str:
    """Strip a UTF-8 BOM from the start of text (spreadsheet exports include it)."""
    return text.removeprefix("\ufeff")


def normalize_row(row: dict[str | None, str | None]) -> dict[str, Any]:
    """Lower-case and trim headers; empty cells become None."""
    normalized: dict[str, Any] = {}
    for key, value in row.items():
        if key is None:
            continue
        cell = value.strip() if isinstance(value, str) else value
        normalized[strip_bom(key).strip().lower()] = None if cell == "" else cell
    return normalized
