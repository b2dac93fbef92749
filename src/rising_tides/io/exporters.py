"""
Export Module

Write flood analysis results to JSON.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence, Union

from ..analysis.tides import TideReport
from ..core.validation import validate_output_path


def export_report_json(
    report: Union[TideReport, Sequence[TideReport]],
    filepath: Union[str, Path],
) -> Path:
    """
    Export one report, or a list of reports, to a JSON file.

    Args:
        report: TideReport, or a sequence of them (e.g. from a sweep)
        filepath: Output file path

    Returns:
        Path to created file

    Raises:
        FilePermissionError: If the file cannot be written
    """
    filepath = validate_output_path(filepath, "report JSON")

    if isinstance(report, TideReport):
        data = report.to_dict()
    else:
        data = [r.to_dict() for r in report]

    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2)

    return filepath
