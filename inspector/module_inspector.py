"""Per-module build facts."""

import os
from typing import Callable, Optional, Sequence, Set, Tuple

from config import Config, create_module_logger
from project.base import BuildProject
from testcases import TestResultReader

from .classpath import ClasspathResolver
from .descriptors import ModuleDescriptor
from .errors import InvalidVersionFormat, ReportReadFailure
from .paths import absolute_path, existing_paths
from .version import parse_compliance_level

COMPILER_PLUGIN = "maven-compiler-plugin"
SOURCE_PROPERTY = "maven.compiler.source"
LEGACY_SOURCE_PROPERTY = "maven.compile.source"
JAVA_VERSION_PROPERTY = "java.version"
UNSET = "-1"

ComplianceLookup = Callable[[BuildProject], Optional[str]]


def compiler_plugin_source(module: BuildProject) -> Optional[str]:
    """<source> of the compiler plugin, unless it is an unresolved ${...}."""
    for plugin in module.build_plugins:
        if plugin.artifact_id != COMPILER_PLUGIN:
            continue
        source = plugin.configuration.get_child("source") if plugin.configuration else None
        if source is not None and source.value and not source.value.startswith("$"):
            return source.value
        return None
    return None


def property_lookup(key: str) -> ComplianceLookup:
    def lookup(module: BuildProject) -> Optional[str]:
        value = module.get_property(key)
        if value is None or value == UNSET:
            return None
        return value

    lookup.__name__ = f"property[{key}]"
    return lookup


# First source yielding a parsable value wins
COMPLIANCE_LOOKUPS: Tuple[ComplianceLookup, ...] = (
    compiler_plugin_source,
    property_lookup(SOURCE_PROPERTY),
    property_lookup(LEGACY_SOURCE_PROPERTY),
    property_lookup(JAVA_VERSION_PROPERTY),
)


class ModuleInspector:
    """Computes the ModuleDescriptor of a single module.

    Inspection never raises: a lookup that fails is logged and contributes
    an empty value so the rest of the module is still described.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        reader: Optional[TestResultReader] = None,
        classpath_resolver: Optional[ClasspathResolver] = None,
        lookups: Sequence[ComplianceLookup] = COMPLIANCE_LOOKUPS,
    ):
        self.config = config or Config()
        self.reader = reader or TestResultReader()
        self.classpath_resolver = classpath_resolver or ClasspathResolver()
        self.lookups = tuple(lookups)

    def inspect(self, module: BuildProject, name: Optional[str] = None) -> ModuleDescriptor:
        log = create_module_logger(module.name)
        descriptor = ModuleDescriptor(
            name=name or module.name,
            base_directory=absolute_path(module.base_directory),
            compliance_level=self.compliance_level(module),
            source_directories=self._guarded(module, "sources", self.source_directories),
            test_directories=self._guarded(module, "test sources", self.test_directories),
            output_directories=self._guarded(module, "output", self.output_directories),
            test_output_directories=self._guarded(module, "test output", self.test_output_directories),
            classpath_entries=self._guarded(module, "classpath", self.classpath_resolver.resolve),
            failing_tests=self._guarded(module, "failing tests", self.failing_tests),
        )
        log.debug(
            f"Inspected {descriptor.name}: level {descriptor.compliance_level}, "
            f"{len(descriptor.classpath_entries)} classpath entries, "
            f"{len(descriptor.failing_tests)} failing tests"
        )
        return descriptor

    def _guarded(self, module: BuildProject, what: str, compute: Callable[[BuildProject], Set[str]]) -> Set[str]:
        try:
            return compute(module)
        except (OSError, ValueError) as e:
            create_module_logger(module.name).warning(f"Could not resolve {what} of {module.name}: {e}")
            return set()

    def compliance_level(self, module: BuildProject) -> int:
        log = create_module_logger(module.name)
        for lookup in self.lookups:
            candidate = lookup(module)
            if candidate is None:
                continue
            try:
                level = parse_compliance_level(candidate)
            except InvalidVersionFormat as e:
                log.warning(f"Ignoring {lookup.__name__} of {module.name}: {e.message}")
                continue
            log.debug(f"Compliance level {level} of {module.name} from {lookup.__name__}")
            return level
        return self.config.default_compliance_level

    def source_directories(self, module: BuildProject) -> Set[str]:
        generated = os.path.join(module.output_directory, self.config.generated_sources_dir)
        return existing_paths([module.source_directory, generated])

    def test_directories(self, module: BuildProject) -> Set[str]:
        return existing_paths([module.test_source_directory])

    def output_directories(self, module: BuildProject) -> Set[str]:
        return existing_paths([module.output_directory])

    def test_output_directories(self, module: BuildProject) -> Set[str]:
        return existing_paths([module.test_output_directory])

    def report_directory(self, module: BuildProject) -> str:
        return os.path.join(module.build_directory, self.config.reports_dir)

    def failing_tests(self, module: BuildProject) -> Set[str]:
        try:
            return self.reader.failing_tests(self.report_directory(module))
        except ReportReadFailure as e:
            create_module_logger(module.name).warning(
                f"No failing tests known for {module.name}: {e.message}"
            )
            return set()
