import logging
import os

import click

from rds_ui.cli.commands.add import add_cmd
from rds_ui.cli.commands.init import init_cmd
from rds_ui.cli.commands.list_cmd import list_cmd
from rds_ui.core.context import create_context
from rds_ui.version import __version__

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_ENV_VAR = "RDS_UI_DEBUG"


def configure_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__, prog_name="adms-rds-ui")
@click.option("--debug", is_flag=True, help="Show debug logs and full stack traces for errors.")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """CLI for adding ADMS RDS UI components to your project."""
    debug = debug or bool(os.getenv(DEBUG_ENV_VAR))
    configure_logging(debug)
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(debug=debug)
        ctx.call_on_close(ctx.obj.registry.close)


cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(list_cmd)


def main() -> None:
    """CLI entry point used by the `adms-rds-ui` console script."""
    cli()


if __name__ == "__main__":
    main()
