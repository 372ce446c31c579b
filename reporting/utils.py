"""Utility helpers for rendering project descriptors."""

from __future__ import annotations

from typing import Any, Iterable, List

from rich.table import Table

from inspector.descriptors import ProjectDescriptor

DEFAULT_MAX_LIST_ITEMS = 3


def truncate_list(items: Iterable[Any], max_items: int = DEFAULT_MAX_LIST_ITEMS) -> str:
    """Return a comma-separated string capped at *max_items* with a suffix when truncated."""
    if not items:
        return ""

    materialized = [str(item) for item in items if item is not None and str(item).strip()]
    if not materialized:
        return ""

    if len(materialized) <= max_items:
        return ", ".join(materialized)

    visible = materialized[:max_items]
    remaining = len(materialized) - max_items
    return f"{', '.join(visible)} (+{remaining} more)"


def render_descriptor_json(descriptor: ProjectDescriptor, indent: int = 2) -> str:
    """Serialize the descriptor; keys keep the model order and sets are sorted."""
    return descriptor.to_json(indent=indent)


def render_condensed_summary(descriptor: ProjectDescriptor) -> str:
    """Render a compact multi-line summary for console/log surfaces."""
    lines = [
        f"📂 Project: {descriptor.base_directory}",
        f"☕ Compliance level: {descriptor.compliance_level}",
        f"🧩 Modules: {len(descriptor.modules)}",
        f"📁 Sources: {len(descriptor.source_directories)}, tests: {len(descriptor.test_directories)}",
        f"📦 Classpath entries: {len(descriptor.classpath_entries)}",
    ]

    failing: List[str] = sorted(descriptor.failing_tests)
    if failing:
        lines.append(f"❌ Failing tests ({len(failing)}): {truncate_list(failing)}")
    else:
        lines.append("✅ No failing tests recorded")
    return "\n".join(lines)


def build_module_table(descriptor: ProjectDescriptor) -> Table:
    """One row per reactor module, in reactor order."""
    table = Table(title="Reactor modules")
    table.add_column("Module", style="cyan")
    table.add_column("Level", justify="right")
    table.add_column("Sources", justify="right")
    table.add_column("Tests", justify="right")
    table.add_column("Classpath", justify="right")
    table.add_column("Failing tests")

    for module in descriptor.modules:
        table.add_row(
            module.name,
            str(module.compliance_level),
            str(len(module.source_directories)),
            str(len(module.test_directories)),
            str(len(module.classpath_entries)),
            truncate_list(sorted(module.failing_tests)) or "-",
        )
    return table
