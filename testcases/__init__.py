"""Test report reading for project inspection."""

from .results import ReportParser, TestResultReader
from .surefire import ReportTestSuite, SurefireReportParser

__all__ = [
    "ReportParser",
    "ReportTestSuite",
    "SurefireReportParser",
    "TestResultReader",
]
