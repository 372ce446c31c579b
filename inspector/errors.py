"""Error taxonomy for project inspection."""

from typing import Optional


class ProjectInfoError(Exception):
    """Base error carrying a stable error code for log and CLI surfaces."""

    default_code = "PROJECT_INFO_ERROR"

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_code


class InvalidVersionFormat(ProjectInfoError):
    """A compliance-level string could not be parsed."""

    default_code = "INVALID_VERSION_FORMAT"

    def __init__(self, version: Optional[str], reason: str = "malformed version"):
        super().__init__(f"Invalid Java version {version!r}: {reason}")
        self.version = version


class ReportReadFailure(ProjectInfoError):
    """A persisted test report is unreadable or malformed."""

    default_code = "REPORT_READ_FAILURE"

    def __init__(self, path, reason: str):
        super().__init__(f"Cannot read test report {path}: {reason}")
        self.path = str(path)


class DependencyResolutionFailure(ProjectInfoError):
    """The test classpath of a module is not resolvable."""

    default_code = "DEPENDENCY_RESOLUTION_FAILURE"

    def __init__(self, module: str, reason: str):
        super().__init__(f"Cannot resolve test classpath of {module}: {reason}")
        self.module = module


class ProjectLoadError(ProjectInfoError):
    """The root project itself cannot be loaded."""

    default_code = "PROJECT_LOAD_ERROR"
