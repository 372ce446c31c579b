"""Shared reporting utilities."""

from .utils import (
    build_module_table,
    render_condensed_summary,
    render_descriptor_json,
    truncate_list,
)

__all__ = [
    "build_module_table",
    "render_condensed_summary",
    "render_descriptor_json",
    "truncate_list",
]
