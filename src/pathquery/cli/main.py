"""CLI entry point for pathquery-lang.

Invoked as::

    pathquery [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m pathquery.cli.main

Commands
--------
parse       Parse a PathQuery XML file and dump the query
compat      Check whether a version satisfies a required version
tools       Show which tools are suitable for a model and entity set
plugins     List tools registered through entry-points
version     Show version information
"""
from __future__ import annotations

import json
import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from pathquery.query.nodes import Query

console = Console()
err_console = Console(stderr=True)


def _read_source(path: str) -> str:
    """Read a source file, exiting on error."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)


def _load_data(path: str) -> Any:
    """Load a JSON or YAML document, exiting on error."""
    text = _read_source(path)
    try:
        if path.endswith((".yaml", ".yml")):
            return yaml.safe_load(text)
        return json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        err_console.print(f"[red]Error:[/red] Cannot decode {path}: {exc}")
        sys.exit(1)


def _parse_or_exit(source: str, path: str) -> "Query":
    """Parse PathQuery XML, printing the error and exiting on failure."""
    from pathquery.parser import QueryParseError, parse_query

    try:
        return parse_query(source)
    except QueryParseError as exc:
        err_console.print(f"[red]Parse error[/red] in {path}: {exc}")
        sys.exit(1)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="pathquery-lang")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """PathQuery XML parsing and tool capability filtering."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from pathquery import TOOL_API_VERSION, __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]pathquery-lang[/bold]", f"v{__version__}")
    table.add_row("Tool API", str(TOOL_API_VERSION))
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# parse command
# ---------------------------------------------------------------------------


@cli.command(name="parse")
@click.argument("file", type=click.Path(exists=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    help="Query output format",
)
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
def parse_command(file: str, output_format: str, output: str | None) -> None:
    """Parse a PathQuery XML file and dump the query.

    FILE is the path to the XML file to parse.
    """
    from pathquery.query import QuerySerializer

    source = _read_source(file)
    query = _parse_or_exit(source, file)

    serializer = QuerySerializer()

    if output_format.lower() == "json":
        text = serializer.to_json(query, indent=2)
        lang = "json"
    else:
        text = serializer.to_yaml(query)
        lang = "yaml"

    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]Query written to[/green] {output}")
    else:
        console.print(Syntax(text, lang))


# ---------------------------------------------------------------------------
# compat command
# ---------------------------------------------------------------------------


@cli.command(name="compat")
@click.argument("required")
@click.argument("actual")
def compat_command(required: str, actual: str) -> None:
    """Check whether version ACTUAL satisfies version REQUIRED.

    Exits with status 0 when compatible and 1 otherwise.

    Examples:

    \b
        pathquery compat 2.1 2.3
        pathquery compat 2.1.0 2.1
    """
    from pathquery.version import compatible

    if compatible(required, actual):
        console.print(f"[green]compatible[/green] {actual} satisfies {required}")
        sys.exit(0)
    console.print(f"[red]incompatible[/red] {actual} does not satisfy {required}")
    sys.exit(1)


# ---------------------------------------------------------------------------
# tools command
# ---------------------------------------------------------------------------


@cli.command(name="tools")
@click.argument("manifests", nargs=-1, required=True, type=click.Path(exists=False))
@click.option("--model", "model_file", required=True, help="JSON/YAML file keyed by model field names")
@click.option("--entities", "entities_file", required=True, help="JSON/YAML file of class name to entity record")
@click.option("--api-version", type=int, default=None, help="Override the host tool-API version")
def tools_command(
    manifests: tuple[str, ...],
    model_file: str,
    entities_file: str,
    api_version: int | None,
) -> None:
    """Show which tools are suitable for a model and an entity set.

    MANIFESTS are JSON or YAML tool manifest files; each tool is named
    after its file stem.
    """
    from pathquery.plugins import ToolAlreadyRegisteredError, ToolRegistry
    from pathquery.tools import TOOL_API_VERSION, ToolConfigError

    model = _load_data(model_file) or {}
    entities = _load_data(entities_file) or {}
    if not isinstance(entities, Mapping) or not all(
        isinstance(record, Mapping) for record in entities.values()
    ):
        err_console.print(
            f"[red]Error:[/red] {entities_file}: expected a mapping of class name to entity record"
        )
        sys.exit(1)

    registry = ToolRegistry("cli")
    for manifest in manifests:
        try:
            registry.register_manifest(Path(manifest).stem, _load_data(manifest) or {})
        except ToolConfigError as exc:
            err_console.print(f"[red]Error:[/red] {manifest}: {exc}")
            sys.exit(1)
        except ToolAlreadyRegisteredError:
            err_console.print(
                f"[red]Error:[/red] {manifest}: another manifest is already named "
                f"{Path(manifest).stem!r}; tool names come from file stems"
            )
            sys.exit(1)

    suitable = registry.suitable_tools(
        model,
        entities,
        api_version=TOOL_API_VERSION if api_version is None else api_version,
    )

    table = Table(title="Tool suitability", show_lines=True)
    table.add_column("Tool", style="bold")
    table.add_column("Status", min_width=10)
    table.add_column("Entities")
    for name in registry.list_tools():
        if name in suitable:
            table.add_row(name, "[green]shown[/green]", ", ".join(sorted(suitable[name])))
        else:
            table.add_row(name, "[dim]hidden[/dim]", "")
    console.print(table)
    console.print(f"\n[bold]{len(suitable)}[/bold] of {len(registry)} tool(s) suitable")


# ---------------------------------------------------------------------------
# plugins command
# ---------------------------------------------------------------------------


@cli.command(name="plugins")
def plugins_command() -> None:
    """List all tools registered from entry-points."""
    from pathquery.plugins import ToolRegistry

    registry = ToolRegistry("entry-points")
    registry.load_entrypoints()

    if not len(registry):
        console.print("[bold]Registered tools:[/bold]")
        console.print("  (No tools registered. Install a tool package to see entries here.)")
        return

    table = Table(title="Registered tools")
    table.add_column("Tool", style="bold")
    table.add_column("Version")
    table.add_column("Accepts")
    table.add_column("Classes")
    for name in registry.list_tools():
        config = registry.get(name)
        classes = "*" if config.accepts_any_class else ", ".join(sorted(config.class_names))
        table.add_row(name, str(config.version), ", ".join(sorted(config.accepts)), classes)
    console.print(table)


if __name__ == "__main__":
    cli()
