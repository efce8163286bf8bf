"""
Writers module for exporting inspection reports.

Module structure:
- json_writer.py: JSONWriter class for JSON report output
"""

from .json_writer import JSONWriter, ReportJSONEncoder, dumps_report, write_inspection_to_json

__all__ = [
    "JSONWriter",
    "ReportJSONEncoder",
    "dumps_report",
    "write_inspection_to_json",
]
