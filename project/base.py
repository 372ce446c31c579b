"""Read-only view of a build module as exposed by the host build tool."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class PluginConfiguration:
    """One node of a plugin's <configuration> tree."""

    name: str
    value: Optional[str] = None
    children: List["PluginConfiguration"] = field(default_factory=list)

    def get_child(self, name: str) -> Optional["PluginConfiguration"]:
        for child in self.children:
            if child.name == name:
                return child
        return None

    @classmethod
    def from_dict(cls, name: str, values: Dict[str, object]) -> "PluginConfiguration":
        """Build a tree from nested dictionaries, e.g. {"source": "1.8"}."""
        node = cls(name=name)
        for key, value in values.items():
            if isinstance(value, dict):
                node.children.append(cls.from_dict(key, value))
            else:
                node.children.append(cls(name=key, value=None if value is None else str(value)))
        return node


@dataclass
class BuildPlugin:
    """A declared build plugin and its configuration."""

    artifact_id: str
    group_id: str = "org.apache.maven.plugins"
    version: Optional[str] = None
    configuration: Optional[PluginConfiguration] = None


class BuildProject(ABC):
    """Accessors the inspector needs from one module of the reactor."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Declared module name."""

    @property
    @abstractmethod
    def base_directory(self) -> str:
        """Absolute path of the module directory."""

    @property
    @abstractmethod
    def build_plugins(self) -> List[BuildPlugin]:
        """Plugins declared in the module's build section."""

    @abstractmethod
    def get_property(self, key: str) -> Optional[str]:
        """Return a module property, or None when it is not set."""

    @property
    @abstractmethod
    def source_directory(self) -> str:
        pass

    @property
    @abstractmethod
    def test_source_directory(self) -> str:
        pass

    @property
    @abstractmethod
    def output_directory(self) -> str:
        pass

    @property
    @abstractmethod
    def test_output_directory(self) -> str:
        pass

    @property
    @abstractmethod
    def build_directory(self) -> str:
        """Root of the build tree, e.g. <basedir>/target."""

    @abstractmethod
    def test_classpath_elements(self) -> List[str]:
        """
        Resolved test-scope classpath.

        Raises:
            DependencyResolutionFailure: If dependencies are not resolved yet
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.base_directory!r})"
