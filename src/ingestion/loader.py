"""Load store catalogs from JSON into typed records."""

import json
from pathlib import Path
from typing import Any, Iterable, Iterator

import structlog
from pydantic import ValidationError

from src.models.catalog import StoreRecord

logger = structlog.get_logger()


class CatalogLoader:
    """Validate raw store listings into StoreRecords.

    Accepts either a bare list of stores or an object with a ``stores`` key.
    Records that fail validation are logged and skipped.
    """

    def __init__(self):
        self._stats = {
            "files_processed": 0,
            "records_loaded": 0,
            "records_skipped": 0,
        }

    @property
    def stats(self) -> dict:
        """Get loading statistics."""
        return self._stats.copy()

    def load_file(self, file_path: str | Path) -> list[StoreRecord]:
        """Load a single JSON catalog file."""
        file_path = Path(file_path)

        logger.info("loading_catalog_file", file_path=str(file_path))

        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        self._stats["files_processed"] += 1
        return self.load_data(data)

    def load_data(self, data: list[dict[str, Any]] | dict[str, Any]) -> list[StoreRecord]:
        """Load catalog data already parsed from JSON."""
        if isinstance(data, dict):
            data = data.get("stores", [])

        records = list(self.iter_records(data))

        logger.info(
            "catalog_loaded",
            record_count=len(records),
            stats=self._stats,
        )
        return records

    def iter_records(self, items: Iterable[dict[str, Any]]) -> Iterator[StoreRecord]:
        """Validate raw items one at a time, skipping invalid ones."""
        for index, item in enumerate(items):
            try:
                record = StoreRecord.model_validate(item)
            except ValidationError as e:
                self._stats["records_skipped"] += 1
                logger.error(
                    "store_record_invalid",
                    index=index,
                    store_id=item.get("id") if isinstance(item, dict) else None,
                    error_count=e.error_count(),
                )
                continue

            self._stats["records_loaded"] += 1
            yield record

    def reset_stats(self) -> None:
        """Reset loading statistics."""
        self._stats = {
            "files_processed": 0,
            "records_loaded": 0,
            "records_skipped": 0,
        }


def toggle_favorite(catalog: Iterable[StoreRecord], store_id: str) -> list[StoreRecord]:
    """Return a new catalog with one store's favorite flag flipped.

    Fields read by the filter engine are untouched, so a filtered view stays
    valid after the flip.
    """
    return [
        record.model_copy(update={"is_favorite": not record.is_favorite})
        if record.id == store_id
        else record
        for record in catalog
    ]
