"""Main CLI interface for project-info."""

import sys
from typing import Dict, Tuple

import click
from loguru import logger
from rich.console import Console

from config import Config, LogLevel, OutputFormat, get_config, set_config
from inspector import ModuleInspector, ProjectAggregator, ProjectLoadError
from project import load_reactor
from reporting import build_module_table, render_condensed_summary, render_descriptor_json

__version__ = "0.1.0"

# Diagnostics go to stderr; stdout carries only the descriptor
console = Console(stderr=True)


def parse_user_properties(definitions: Tuple[str, ...]) -> Dict[str, str]:
    """Turn repeated ``-D key=value`` options into a property map."""
    properties = {}
    for definition in definitions:
        key, sep, value = definition.partition("=")
        key = key.strip()
        if not key:
            raise click.BadParameter(f"Invalid property definition: {definition!r}")
        # like Maven, a bare -Dkey means "true"
        properties[key] = value if sep else "true"
    return properties


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Set the logging level",
)
@click.option("--log-file", type=click.Path(), help="Path to log file")
@click.option("--verbose", is_flag=True, help="Enable verbose debugging output with detailed logs")
@click.pass_context
def cli(ctx, log_level, log_file, verbose):
    """project-info: describe the build configuration of a Maven reactor."""

    config = Config.from_env()

    # Override with CLI options if provided
    if log_level:
        config.log_level = LogLevel(log_level)
    if log_file:
        config.log_file = log_file
    if verbose:
        config.verbose = verbose

    set_config(config)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config


@cli.command()
@click.argument("project_dir", default=".", type=click.Path(exists=True, file_okay=True, dir_okay=True))
@click.option(
    "--classpath-file",
    help="Resolved classpath file name under each module's build directory (default: classpath.txt)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.JSON.value,
    show_default=True,
    help="Output format",
)
@click.option("--indent", type=int, default=2, show_default=True, help="JSON indentation")
@click.option("-D", "defines", multiple=True, help="Property override, e.g. -D maven.compiler.source=11")
@click.pass_context
def info(ctx, project_dir, classpath_file, output_format, indent, defines):
    """Print the project descriptor of PROJECT_DIR."""
    config: Config = (ctx.obj or {}).get("config") or get_config()
    if classpath_file:
        config.classpath_file = classpath_file

    try:
        root, modules = load_reactor(
            project_dir,
            classpath_file=config.classpath_file,
            user_properties=parse_user_properties(defines),
        )
    except ProjectLoadError as e:
        logger.error(f"Project loading failed: {e.message}")
        console.print(f"[bold red]❌ {e.message}[/bold red]")
        sys.exit(1)

    aggregator = ProjectAggregator(ModuleInspector(config=config))
    descriptor = aggregator.aggregate(root, modules)

    if output_format == OutputFormat.SUMMARY.value:
        out = Console()
        out.print(render_condensed_summary(descriptor))
        out.print(build_module_table(descriptor))
    else:
        click.echo(render_descriptor_json(descriptor, indent=indent))


@cli.command()
def version():
    """Show project-info version information."""
    click.echo(f"project-info version {__version__}")


if __name__ == "__main__":
    cli()
