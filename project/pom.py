"""
POM-backed implementation of the build project model.

Reads pom.xml files directly instead of asking Maven for the effective model.
The subset covered here is what inspection needs: declared name, properties
(with inheritance from a parent in the same reactor), build directories with
Maven defaults, build plugins with their configuration, and the module list.

The resolved test classpath is not computed here; it is read from the file
written by ``mvn dependency:build-classpath -Dmdep.outputFile=<file>``.
"""

import os
import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from loguru import logger

from inspector.errors import DependencyResolutionFailure, ProjectLoadError

from .base import BuildPlugin, BuildProject, PluginConfiguration

POM_FILE = "pom.xml"
DEFAULT_CLASSPATH_FILE = "classpath.txt"
LIFECYCLE_PLUGINS = ("maven-compiler-plugin",)

PLACEHOLDER_RE = re.compile(r"\$\{([^}]+)\}")
MAX_INTERPOLATION_PASSES = 10


def _strip_namespaces(root: ET.Element) -> ET.Element:
    """Drop the POM namespace so lookups can use bare tag names."""
    for element in root.iter():
        if isinstance(element.tag, str) and element.tag.startswith("{"):
            element.tag = element.tag.split("}", 1)[1]
    return root


def _text(element: Optional[ET.Element], path: str) -> Optional[str]:
    if element is None:
        return None
    child = element.find(path)
    if child is None or child.text is None:
        return None
    return child.text.strip()


def _read_pom(pom_path: Path) -> ET.Element:
    try:
        return _strip_namespaces(ET.parse(pom_path).getroot())
    except ET.ParseError as e:
        raise ProjectLoadError(f"Malformed POM {pom_path}: {e}")
    except OSError as e:
        raise ProjectLoadError(f"Cannot read POM {pom_path}: {e}")


class PomProject(BuildProject):
    """One module of a Maven reactor, backed by its pom.xml."""

    def __init__(
        self,
        pom_path: Path,
        parent: Optional["PomProject"] = None,
        classpath_file: str = DEFAULT_CLASSPATH_FILE,
        user_properties: Optional[Dict[str, str]] = None,
    ):
        self.pom_path = Path(os.path.abspath(pom_path))
        self.classpath_file = classpath_file
        self.user_properties = dict(user_properties or {})
        self._root = _read_pom(self.pom_path)
        self.parent = parent if self._inherits_from(parent) else None
        self._properties = self._collect_properties()

    def _inherits_from(self, candidate: Optional["PomProject"]) -> bool:
        declared = self._root.find("parent")
        if candidate is None or declared is None:
            return False
        return _text(declared, "artifactId") == candidate.artifact_id

    # ---- identity -------------------------------------------------------

    @property
    def artifact_id(self) -> str:
        return _text(self._root, "artifactId") or self.pom_path.parent.name

    @property
    def group_id(self) -> Optional[str]:
        return _text(self._root, "groupId") or _text(self._root, "parent/groupId")

    @property
    def version(self) -> Optional[str]:
        return _text(self._root, "version") or _text(self._root, "parent/version")

    @property
    def name(self) -> str:
        declared = _text(self._root, "name")
        if declared:
            return self.interpolate(declared)
        return self.artifact_id

    @property
    def base_directory(self) -> str:
        return str(self.pom_path.parent)

    @property
    def module_names(self) -> List[str]:
        modules = self._root.find("modules")
        if modules is None:
            return []
        return [m.text.strip() for m in modules.findall("module") if m.text and m.text.strip()]

    # ---- properties -----------------------------------------------------

    def _collect_properties(self) -> Dict[str, str]:
        properties: Dict[str, str] = {}
        if self.parent is not None:
            properties.update(self.parent._properties)
            # project.* of the parent must not leak into the child
            for key in list(properties):
                if key.startswith("project.") or key == "basedir":
                    del properties[key]

        declared = self._root.find("properties")
        if declared is not None:
            for prop in declared:
                if isinstance(prop.tag, str):
                    properties[prop.tag] = (prop.text or "").strip()

        properties.update(
            {
                "basedir": self.base_directory,
                "project.basedir": self.base_directory,
                "project.artifactId": self.artifact_id,
            }
        )
        if self.group_id:
            properties["project.groupId"] = self.group_id
        if self.version:
            properties["project.version"] = self.version
        properties.update(self.user_properties)
        return properties

    def interpolate(self, value: str) -> str:
        """Expand ${...} references; unknown references stay literal."""

        def replace(match: re.Match) -> str:
            key = match.group(1)
            if key == "project.build.directory":
                return self.build_directory
            return self._properties.get(key, match.group(0))

        for _ in range(MAX_INTERPOLATION_PASSES):
            expanded = PLACEHOLDER_RE.sub(replace, value)
            if expanded == value:
                break
            value = expanded
        return value

    def get_property(self, key: str) -> Optional[str]:
        if key not in self._properties:
            return None
        return self.interpolate(self._properties[key])

    # ---- build directories ---------------------------------------------

    def _build_path(self, tag: str, default: str) -> str:
        declared = _text(self._root, f"build/{tag}")
        if not declared and self.parent is not None and tag == "directory":
            # a parent's custom build directory is relative to each child
            declared = _text(self.parent._root, f"build/{tag}")
        raw = declared or default
        if tag == "directory":
            raw = PLACEHOLDER_RE.sub(
                lambda m: self._properties.get(m.group(1), m.group(0)), raw
            )
        else:
            raw = self.interpolate(raw)
        path = Path(raw)
        if not path.is_absolute():
            path = self.pom_path.parent / path
        return os.path.abspath(path)

    @property
    def build_directory(self) -> str:
        return self._build_path("directory", "target")

    @property
    def source_directory(self) -> str:
        return self._build_path("sourceDirectory", "src/main/java")

    @property
    def test_source_directory(self) -> str:
        return self._build_path("testSourceDirectory", "src/test/java")

    @property
    def output_directory(self) -> str:
        return self._build_path("outputDirectory", "${project.build.directory}/classes")

    @property
    def test_output_directory(self) -> str:
        return self._build_path("testOutputDirectory", "${project.build.directory}/test-classes")

    # ---- plugins --------------------------------------------------------

    def _configuration(self, element: Optional[ET.Element], name: str = "configuration"):
        if element is None:
            return None
        node = PluginConfiguration(name=name)
        text = (element.text or "").strip()
        if text:
            node.value = self.interpolate(text)
        for child in element:
            if isinstance(child.tag, str):
                node.children.append(self._configuration(child, child.tag))
        return node

    def _plugins_at(self, path: str) -> Dict[str, BuildPlugin]:
        plugins: Dict[str, BuildPlugin] = {}
        for element in self._root.findall(f"{path}/plugin"):
            artifact_id = _text(element, "artifactId")
            if not artifact_id:
                continue
            plugins[artifact_id] = BuildPlugin(
                artifact_id=artifact_id,
                group_id=_text(element, "groupId") or "org.apache.maven.plugins",
                version=_text(element, "version"),
                configuration=self._configuration(element.find("configuration")),
            )
        return plugins

    def _managed_plugins(self) -> Dict[str, BuildPlugin]:
        managed = self.parent._managed_plugins() if self.parent is not None else {}
        managed.update(self._plugins_at("build/pluginManagement/plugins"))
        return managed

    @staticmethod
    def _merge(managed: BuildPlugin, declared: BuildPlugin) -> BuildPlugin:
        """Overlay ``declared`` on ``managed``; configuration children override by name."""
        if managed.configuration is None:
            return declared
        merged = PluginConfiguration(name="configuration")
        overrides = declared.configuration.children if declared.configuration else []
        override_names = {child.name for child in overrides}
        merged.children = [
            child for child in managed.configuration.children if child.name not in override_names
        ] + list(overrides)
        return BuildPlugin(
            artifact_id=declared.artifact_id,
            group_id=declared.group_id,
            version=declared.version or managed.version,
            configuration=merged,
        )

    @property
    def build_plugins(self) -> List[BuildPlugin]:
        plugins: Dict[str, BuildPlugin] = {}
        if self.parent is not None:
            plugins.update({p.artifact_id: p for p in self.parent.build_plugins})
        for artifact_id, declared in self._plugins_at("build/plugins").items():
            inherited = plugins.get(artifact_id)
            plugins[artifact_id] = self._merge(inherited, declared) if inherited else declared

        managed = self._managed_plugins()
        # bound to the default lifecycle even when <plugins> never names them
        for artifact_id in LIFECYCLE_PLUGINS:
            if artifact_id in managed and artifact_id not in plugins:
                plugins[artifact_id] = BuildPlugin(
                    artifact_id=artifact_id,
                    group_id=managed[artifact_id].group_id,
                    version=managed[artifact_id].version,
                )
        return [
            self._merge(managed[artifact_id], plugin) if artifact_id in managed else plugin
            for artifact_id, plugin in plugins.items()
        ]

    # ---- classpath ------------------------------------------------------

    def test_classpath_elements(self) -> List[str]:
        classpath_path = Path(self.build_directory) / self.classpath_file
        try:
            content = classpath_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise DependencyResolutionFailure(
                self.name, f"{classpath_path} not found, run mvn dependency:build-classpath first"
            )
        except OSError as e:
            raise DependencyResolutionFailure(self.name, str(e))

        elements = [self.test_output_directory, self.output_directory]
        for entry in content.replace("\n", os.pathsep).split(os.pathsep):
            entry = entry.strip()
            if entry:
                elements.append(entry)
        return elements


def load_reactor(
    root_dir,
    classpath_file: str = DEFAULT_CLASSPATH_FILE,
    user_properties: Optional[Dict[str, str]] = None,
) -> Tuple[PomProject, List[PomProject]]:
    """
    Load the root project and every module reachable through <modules>.

    Modules are listed depth-first in declaration order with the root first.
    A module that cannot be loaded is logged and skipped; only a failure on
    the root pom is fatal.

    Returns:
        Tuple of (root project, flat module list including the root)

    Raises:
        ProjectLoadError: If the root pom.xml is missing or malformed
    """
    root_path = Path(root_dir)
    root_pom = root_path if root_path.is_file() else root_path / POM_FILE
    if not root_pom.exists():
        raise ProjectLoadError(f"No {POM_FILE} found at {root_path}")

    root = PomProject(root_pom, classpath_file=classpath_file, user_properties=user_properties)
    modules: List[PomProject] = []
    visited = set()

    def visit(project: PomProject) -> None:
        visited.add(str(project.pom_path))
        modules.append(project)
        for module_name in project.module_names:
            module_pom = Path(project.base_directory) / module_name
            if not module_pom.name.endswith(".xml"):
                module_pom = module_pom / POM_FILE
            module_pom = Path(os.path.abspath(module_pom))
            if str(module_pom) in visited:
                continue
            try:
                child = PomProject(
                    module_pom,
                    parent=project,
                    classpath_file=classpath_file,
                    user_properties=user_properties,
                )
            except ProjectLoadError as e:
                logger.warning(f"Skipping module '{module_name}' of {project.artifact_id}: {e.message}")
                continue
            visit(child)

    visit(root)
    logger.debug(f"Loaded reactor of {len(modules)} module(s) from {root.base_directory}")
    return root, modules
