"""Effective test classpath of a module."""

import os
from typing import Set

from config import create_module_logger
from project.base import BuildProject

from .errors import DependencyResolutionFailure
from .paths import absolute_path


class ClasspathResolver:
    """Resolved test-scope classpath minus the module's own output directories."""

    def resolve(self, module: BuildProject) -> Set[str]:
        log = create_module_logger(module.name)
        own_outputs = {
            absolute_path(module.output_directory),
            absolute_path(module.test_output_directory),
        }
        try:
            elements = module.test_classpath_elements()
        except DependencyResolutionFailure as e:
            log.warning(f"Empty classpath for {module.name}: {e.message}")
            return set()

        classpath = set()
        for element in elements:
            path = absolute_path(element)
            if path in own_outputs:
                continue
            if os.path.exists(path):
                classpath.add(path)
            else:
                log.debug(f"Dropping missing classpath entry {path}")
        return classpath
