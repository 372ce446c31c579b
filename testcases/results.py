"""Failing-test extraction from persisted test reports."""

from typing import List, Optional, Protocol, Set

from .surefire import ReportTestSuite, SurefireReportParser


class ReportParser(Protocol):
    """Anything able to turn a reports directory into suite records."""

    def parse_report_files(self, directory) -> List[ReportTestSuite]:
        ...


class TestResultReader:
    """Reads the last test run of one module and names its failing tests."""

    __test__ = False  # not a pytest class

    def __init__(self, parser: Optional[ReportParser] = None):
        self.parser = parser or SurefireReportParser()

    def failing_tests(self, report_directory) -> Set[str]:
        """
        Return fully qualified names of suites with errors or failures.

        Raises:
            ReportReadFailure: Propagated from the parser
        """
        return {
            suite.full_class_name
            for suite in self.parser.parse_report_files(report_directory)
            if suite.is_failing
        }
