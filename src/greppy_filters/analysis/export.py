"""Export symbol lists to JSON and CSV."""

import io
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from greppy_filters.config import config, SYMBOL_CSV_COLUMNS
from greppy_filters.config.logging_config import get_logger
from greppy_filters.filtering.predicate import (
    filter_records,
    is_dead,
    is_in_cycle,
    record_field,
    record_kind,
    record_path,
    record_refs,
)
from greppy_filters.filtering.spec import FilterSpec

logger = get_logger("export")


def _flag(value: bool) -> str:
    return "yes" if value else "no"


def symbols_to_frame(records: Iterable[Any]) -> pd.DataFrame:
    """
    Flatten symbol records into the CSV export layout.

    Synonymous backend fields are resolved the same way the predicate resolves
    them; dead and in_cycle become yes/no.

    Args:
        records: Symbol records.

    Returns:
        DataFrame with SYMBOL_CSV_COLUMNS.
    """
    rows = [
        {
            "name": record_field(record, "name"),
            "kind": record_kind(record),
            "file": record_path(record),
            "line": record_field(record, "line"),
            "refs": record_refs(record) or 0,
            "dead": _flag(is_dead(record)),
            "in_cycle": _flag(is_in_cycle(record)),
        }
        for record in records
    ]
    return pd.DataFrame(rows, columns=SYMBOL_CSV_COLUMNS)


class SymbolExporter:
    """Export symbol records to files or in-memory buffers."""

    def __init__(self, output_dir: Optional[Path] = None, project_name: Optional[str] = None):
        """
        Initialize exporter.

        Args:
            output_dir: Directory for file exports.
            project_name: Project name used in filenames and JSON payloads.
        """
        self.output_dir = output_dir or config.app.exports_path
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.project_name = project_name or config.app.project_name

    def _filename(self, prefix: str, extension: str) -> str:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        return f"{prefix}_{self.project_name}_{timestamp}.{extension}"

    def build_json_payload(self, records: List[Any]) -> Dict[str, Any]:
        """JSON export document: export time, project, count and symbols."""
        return {
            "exported_at": datetime.now(timezone.utc).isoformat(),
            "project": self.project_name,
            "total": len(records),
            "symbols": records,
        }

    def export_to_json(self, records: Iterable[Any], filename: Optional[str] = None) -> Path:
        """
        Export records to a JSON file.

        Args:
            records: Symbol records.
            filename: Output filename (generated if None).

        Returns:
            Path to exported file.
        """
        records = list(records)
        filepath = self.output_dir / (filename or self._filename("symbols", "json"))
        payload = self.build_json_payload(records)
        filepath.write_text(json.dumps(payload, indent=2, default=str), encoding="utf-8")

        logger.info(f"Exported {len(records)} symbols to {filepath}")
        return filepath

    def export_to_csv(self, records: Iterable[Any], filename: Optional[str] = None) -> Path:
        """
        Export records to a CSV file.

        Args:
            records: Symbol records.
            filename: Output filename (generated if None).

        Returns:
            Path to exported file.
        """
        df = symbols_to_frame(records)
        filepath = self.output_dir / (filename or self._filename("symbols", "csv"))
        df.to_csv(filepath, index=False, encoding="utf-8")

        logger.info(f"Exported {len(df)} symbols to {filepath}")
        return filepath

    def export_to_csv_buffer(self, records: Iterable[Any]) -> io.StringIO:
        """Export records to an in-memory CSV buffer (for HTTP downloads)."""
        buffer = io.StringIO()
        symbols_to_frame(records).to_csv(buffer, index=False)
        buffer.seek(0)
        return buffer

    def export_filtered(
        self,
        records: Iterable[Any],
        spec: FilterSpec,
        fmt: str = "json",
        filename: Optional[str] = None,
    ) -> Path:
        """
        Export only the records matching spec.

        Args:
            records: Symbol records.
            spec: Active filters.
            fmt: 'json' or 'csv'.
            filename: Output filename (generated if None).

        Returns:
            Path to exported file.
        """
        matched = filter_records(records, spec)
        if fmt == "csv":
            return self.export_to_csv(matched, filename)
        if fmt == "json":
            return self.export_to_json(matched, filename)
        raise ValueError(f"Unsupported export format: {fmt}")
