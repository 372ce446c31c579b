"""Descriptor models emitted to consumers of the project metadata."""

import json
from typing import Any, Dict, List, Set

from pydantic import BaseModel, ConfigDict, Field, field_serializer

ROOT_MODULE_NAME = "root"

PATH_SET_FIELDS = (
    "source_directories",
    "test_directories",
    "output_directories",
    "test_output_directories",
    "classpath_entries",
    "failing_tests",
)


def _to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


class _DescriptorBase(BaseModel):
    """Shared fields for the root and per-module descriptors."""

    model_config = ConfigDict(frozen=True, alias_generator=_to_camel, populate_by_name=True)

    base_directory: str
    compliance_level: int
    source_directories: Set[str] = Field(default_factory=set)
    test_directories: Set[str] = Field(default_factory=set)
    output_directories: Set[str] = Field(default_factory=set)
    test_output_directories: Set[str] = Field(default_factory=set)
    classpath_entries: Set[str] = Field(default_factory=set)
    failing_tests: Set[str] = Field(default_factory=set)

    @field_serializer(*PATH_SET_FIELDS)
    def _sorted(self, values: Set[str]) -> List[str]:
        return sorted(values)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dictionary with camelCase keys."""
        return self.model_dump(by_alias=True)


class ModuleDescriptor(_DescriptorBase):
    """Build facts of one reactor module."""

    name: str

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        # name leads the module object
        return {"name": data.pop("name"), **data}


class ProjectDescriptor(_DescriptorBase):
    """Root-level view of the whole reactor."""

    modules: List[ModuleDescriptor] = Field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["modules"] = [module.to_dict() for module in self.modules]
        return data

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, text: str) -> "ProjectDescriptor":
        return cls.model_validate_json(text)
