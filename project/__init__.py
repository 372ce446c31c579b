"""Build project model: the read-only interface and its pom.xml implementation."""

from .base import BuildPlugin, BuildProject, PluginConfiguration
from .pom import PomProject, load_reactor

__all__ = ["BuildPlugin", "BuildProject", "PluginConfiguration", "PomProject", "load_reactor"]
