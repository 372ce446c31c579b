"""Build-configuration inspection for multi-module projects."""

from .aggregator import ProjectAggregator, aggregate
from .classpath import ClasspathResolver
from .descriptors import ModuleDescriptor, ProjectDescriptor
from .errors import (
    DependencyResolutionFailure,
    InvalidVersionFormat,
    ProjectInfoError,
    ProjectLoadError,
    ReportReadFailure,
)
from .module_inspector import ModuleInspector
from .version import parse_compliance_level

__all__ = [
    "ClasspathResolver",
    "DependencyResolutionFailure",
    "InvalidVersionFormat",
    "ModuleDescriptor",
    "ModuleInspector",
    "ProjectAggregator",
    "ProjectDescriptor",
    "ProjectInfoError",
    "ProjectLoadError",
    "ReportReadFailure",
    "aggregate",
    "parse_compliance_level",
]
