"""List command: show the components available in the registry."""

import click
from rich.console import Console
from rich.table import Table

from rds_ui.cli.error_boundary import cli_error_boundary
from rds_ui.core.context import RdsContext
from rds_ui.core.registry import RegistryIndex


def build_components_table(index: RegistryIndex) -> Table:
    table = Table(title=index.name or "Registry components", show_lines=False)
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Dependencies", style="dim")
    table.add_column("Registry dependencies", style="dim")

    for key, entry in sorted(index.components.items()):
        table.add_row(
            key,
            entry.name,
            ", ".join(entry.dependencies) or "-",
            ", ".join(entry.registry_dependencies) or "-",
        )
    return table


@click.command("list")
@click.pass_obj
@cli_error_boundary
def list_cmd(ctx: RdsContext) -> None:
    """List components available in the registry."""
    index = ctx.registry.fetch_index()
    if not index.components:
        ctx.feedback.detail("Registry has no components.")
        return

    Console().print(build_components_table(index))
