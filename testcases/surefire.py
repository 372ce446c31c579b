"""
Surefire report parsing.

Reads the TEST-*.xml files Maven Surefire leaves under
``target/surefire-reports`` and turns each <testsuite> into a
ReportTestSuite record.
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from loguru import logger

from inspector.errors import ReportReadFailure

REPORT_GLOB = "TEST-*.xml"


@dataclass(frozen=True)
class ReportTestSuite:
    """Summary of one executed test class.

    Attributes:
        full_class_name: Fully qualified test class (e.g. 'com.acme.FooTest')
        tests: Number of executed test cases
        errors: Test cases that raised an unexpected exception
        failures: Test cases whose assertions failed
        skipped: Test cases that were not run
    """
    full_class_name: str
    tests: int = 0
    errors: int = 0
    failures: int = 0
    skipped: int = 0

    @property
    def is_failing(self) -> bool:
        return self.errors + self.failures > 0


class SurefireReportParser:
    """Parses every Surefire XML report in a directory."""

    def __init__(self, pattern: str = REPORT_GLOB):
        self.pattern = pattern

    def parse_report_files(self, directory) -> List[ReportTestSuite]:
        """
        Parse all report files of a reports directory.

        Args:
            directory: The surefire-reports directory of one module

        Returns:
            One record per test suite; empty if the directory does not exist

        Raises:
            ReportReadFailure: If a report file is unreadable or malformed
        """
        report_dir = Path(directory)
        if not report_dir.is_dir():
            logger.debug(f"No test reports at {report_dir}")
            return []

        suites: List[ReportTestSuite] = []
        for report_file in sorted(report_dir.glob(self.pattern)):
            suites.extend(self.parse_report_file(report_file))
        return suites

    def parse_report_file(self, report_file: Path) -> List[ReportTestSuite]:
        try:
            root = ET.parse(report_file).getroot()
        except ET.ParseError as e:
            raise ReportReadFailure(report_file, f"XML parsing error: {e}")
        except OSError as e:
            raise ReportReadFailure(report_file, str(e))

        if root.tag == "testsuite":
            elements = [root]
        elif root.tag == "testsuites":
            elements = root.findall("testsuite")
        else:
            elements = root.findall(".//testsuite")
            if not elements:
                logger.warning(f"Unrecognized XML format in {report_file}, root tag: {root.tag}")

        suites = []
        for element in elements:
            suite = self._parse_suite(element, report_file)
            if suite is not None:
                suites.append(suite)
        return suites

    def _parse_suite(self, element: ET.Element, report_file: Path) -> Optional[ReportTestSuite]:
        testcases = element.findall("testcase")
        name = element.get("name")
        if not name:
            name = next((case.get("classname") for case in testcases if case.get("classname")), None)
        if not name:
            logger.warning(f"Test suite without a name in {report_file}")
            return None

        try:
            return ReportTestSuite(
                full_class_name=name,
                tests=self._count(element, "tests", len(testcases)),
                errors=self._count(
                    element, "errors", sum(1 for case in testcases if case.find("error") is not None)
                ),
                failures=self._count(
                    element, "failures", sum(1 for case in testcases if case.find("failure") is not None)
                ),
                skipped=self._count(
                    element, "skipped", sum(1 for case in testcases if case.find("skipped") is not None)
                ),
            )
        except ValueError as e:
            raise ReportReadFailure(report_file, f"invalid count in suite {name}: {e}")

    @staticmethod
    def _count(element: ET.Element, attribute: str, fallback: int) -> int:
        raw = element.get(attribute)
        if raw is None or not raw.strip():
            return fallback
        return int(raw)
