#!/usr/bin/env python3
"""
Parse report for a corpus of paths.

Parses every path with a chosen dialect, checks that format(parse(p))
rebuilds the input, and renders the result as an Excel workbook and/or a JSON
summary for automation.
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from .dialect import PathDialect
from .excel_writer import ExcelSheetData, read_excel_column, write_excel_workbook

logger = logging.getLogger(__name__)


@dataclass
class ParseRow:
    """A single parsed path with its components and round-trip result."""
    input: str
    root: str
    dir: str
    base: str
    ext: str
    name: str
    absolute: bool
    formatted: str

    @property
    def round_trip(self) -> bool:
        return self.formatted == self.input

    def to_excel_row(self) -> List[Any]:
        """Convert to Excel row maintaining column order."""
        return [
            self.input,
            self.root,
            self.dir,
            self.base,
            self.ext,
            self.name,
            self.absolute,
            self.formatted,
            self.round_trip,
        ]

    @staticmethod
    def get_headers() -> List[str]:
        return [
            "input",
            "root",
            "dir",
            "base",
            "ext",
            "name",
            "absolute",
            "formatted",
            "round_trip",
        ]


@dataclass
class ParseReport:
    dialect: str
    rows: List[ParseRow] = field(default_factory=list)
    processing_time: float = 0.0

    def failures(self) -> List[ParseRow]:
        return [row for row in self.rows if not row.round_trip]

    def summary(self) -> Dict[str, Any]:
        """Counts used for the JSON output and the Summary sheet."""
        total = len(self.rows)
        return {
            "dialect": self.dialect,
            "total": total,
            "absolute": sum(1 for row in self.rows if row.absolute),
            "rooted": sum(1 for row in self.rows if row.root),
            "with_extension": sum(1 for row in self.rows if row.ext),
            "round_trip_failures": len(self.failures()),
            "round_trip_rate": (total - len(self.failures())) / total if total else 1.0,
            "processing_time": round(self.processing_time, 4),
        }

    def to_sheets(self) -> List[ExcelSheetData]:
        round_trip_col = ParseRow.get_headers().index("round_trip")
        parsed = ExcelSheetData(
            name="Parsed",
            headers=ParseRow.get_headers(),
            rows=[row.to_excel_row() for row in self.rows],
            highlight_row=lambda values: values[round_trip_col] is False,
        )
        summary = ExcelSheetData(
            name="Summary",
            headers=["metric", "value"],
            rows=[[key, value] for key, value in self.summary().items()],
            as_table=False,
        )
        return [parsed, summary]


def parse_row(dialect: PathDialect, path: str) -> ParseRow:
    """Parse one path and format it back."""
    parsed = dialect.parse(path)
    return ParseRow(
        input=path,
        root=parsed.root,
        dir=parsed.dir,
        base=parsed.base,
        ext=parsed.ext,
        name=parsed.name,
        absolute=dialect.is_absolute(path),
        formatted=dialect.format(parsed),
    )


def build_report(
    paths: Iterable[str],
    dialect: PathDialect,
    progress_callback: Optional[Callable[[int], None]] = None,
) -> ParseReport:
    """
    Parse a corpus of paths into a ParseReport.

    Args:
        paths: Path strings to parse.
        dialect: Dialect used for parsing and formatting.
        progress_callback: Called with the number of rows processed so far.

    Returns:
        ParseReport with one row per input path.
    """
    start_time = time.time()
    report = ParseReport(dialect=dialect.name)

    logger.info("Parsing paths with the %s dialect", dialect.name)

    for path in paths:
        row = parse_row(dialect, path)
        if not row.round_trip:
            logger.warning("Round-trip mismatch for %r: formatted as %r", row.input, row.formatted)
        report.rows.append(row)
        if progress_callback:
            progress_callback(len(report.rows))

    report.processing_time = time.time() - start_time
    logger.info(
        "Parsed %s paths in %.3fs (%s round-trip failures)",
        len(report.rows),
        report.processing_time,
        len(report.failures()),
    )
    return report


def read_paths(
    filepath: Union[str, Path],
    limit: Optional[int] = None,
    sheet_name: Optional[str] = None,
) -> List[str]:
    """
    Read paths from a text file (one per line) or the 'input' column of an .xlsx file.

    Leading/trailing whitespace is part of a path, so lines only lose their
    line ending; blank lines are skipped.
    """
    filepath = Path(filepath)

    if filepath.suffix == ".xlsx":
        paths = read_excel_column(filepath, "input", sheet_name=sheet_name, limit=limit)
    else:
        paths = []
        with filepath.open("r", encoding="utf-8", errors="replace") as f:
            for line in f:
                line = line.rstrip("\r\n")
                if not line.strip():
                    continue
                paths.append(line)
                if limit and len(paths) >= limit:
                    break

    logger.debug("Read %s paths from %s", len(paths), filepath)
    return paths


def write_report(
    report: ParseReport,
    output_excel: Optional[Union[str, Path]] = None,
    output_json: Optional[Union[str, Path]] = None,
) -> Dict[str, Path]:
    """
    Write the report to the requested outputs.

    Returns:
        Mapping of output kind ("excel", "json") to the written path.
    """
    written: Dict[str, Path] = {}

    if output_excel:
        written["excel"] = write_excel_workbook(output_excel, report.to_sheets())
        logger.info("Wrote Excel report to %s", written["excel"])

    if output_json:
        json_path = Path(output_json)
        json_path.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "summary": report.summary(),
            "failures": [row.input for row in report.failures()],
        }
        with json_path.open("w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
        written["json"] = json_path
        logger.info("Wrote JSON summary to %s", json_path)

    return written
