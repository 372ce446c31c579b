"""Reactor-wide aggregation of module descriptors."""

from typing import Dict, List, Optional, Sequence, Set

from loguru import logger

from project.base import BuildProject

from .descriptors import PATH_SET_FIELDS, ROOT_MODULE_NAME, ModuleDescriptor, ProjectDescriptor
from .module_inspector import ModuleInspector
from .paths import absolute_path


class ProjectAggregator:
    """Builds the ProjectDescriptor of a root project and its reactor."""

    def __init__(self, inspector: Optional[ModuleInspector] = None):
        self.inspector = inspector or ModuleInspector()

    def aggregate(self, root: BuildProject, modules: Sequence[BuildProject]) -> ProjectDescriptor:
        """
        Inspect every module and merge the results.

        Args:
            root: The project the tool was invoked on
            modules: Reactor modules in build order, usually including the root

        Returns:
            Root descriptor whose path sets are the union of all modules and
            whose module list keeps the reactor order
        """
        root_directory = absolute_path(root.base_directory)
        logger.info(f"Aggregating {len(modules)} module(s) under {root_directory}")

        root_info = self.inspector.inspect(root, name=ROOT_MODULE_NAME)
        infos: List[ModuleDescriptor] = []
        for module in modules:
            if module is root:
                infos.append(root_info)
                continue
            infos.append(self.inspector.inspect(module, name=self.module_name(module, root_directory)))

        union: Dict[str, Set[str]] = {name: set(getattr(root_info, name)) for name in PATH_SET_FIELDS}
        for info in infos:
            for name in PATH_SET_FIELDS:
                union[name].update(getattr(info, name))

        return ProjectDescriptor(
            base_directory=root_directory,
            compliance_level=root_info.compliance_level,
            modules=infos,
            **union,
        )

    @staticmethod
    def module_name(module: BuildProject, root_directory: str) -> str:
        if absolute_path(module.base_directory) == root_directory:
            return ROOT_MODULE_NAME
        return module.name


def aggregate(root: BuildProject, modules: Sequence[BuildProject], config=None) -> ProjectDescriptor:
    """Aggregate with a default inspector built from ``config``."""
    return ProjectAggregator(ModuleInspector(config=config)).aggregate(root, modules)
