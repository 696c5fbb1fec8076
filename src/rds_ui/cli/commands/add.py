"""Add command: copy registry components into the project."""

import logging

import click

from rds_ui.cli.ensure import Ensure
from rds_ui.cli.error_boundary import cli_error_boundary
from rds_ui.core.config import RdsConfig, load_config
from rds_ui.core.context import RdsContext
from rds_ui.core.materializer import ConflictPolicy, materialize_component
from rds_ui.core.prompter import Choice
from rds_ui.core.registry import RegistryIndex
from rds_ui.core.resolver import (
    ResolutionResult,
    missing_lib_dependencies,
    resolve_components,
    split_requested,
)

logger = logging.getLogger(__name__)


def _warn_missing_libs(ctx: RdsContext, config: RdsConfig, lib_keys: list[str], lead: str) -> None:
    for key in missing_lib_dependencies(lib_keys, config, ctx.cwd):
        ctx.feedback.warning(f"{lead}⚠ Missing {key}. Run `adms-rds-ui init` to install it.")


def _prompt_for_components(ctx: RdsContext, index: RegistryIndex) -> list[str]:
    choices = [Choice(title=entry.name, value=key) for key, entry in index.components.items()]
    return ctx.prompter.multiselect("Which components would you like to add?", choices)


def _print_usage(ctx: RdsContext, config: RdsConfig, resolution: ResolutionResult) -> None:
    components_path = config.relative_to_src(config.components_dir)
    ctx.feedback.info("\n✅ Done!\n")
    ctx.feedback.info("Usage:")
    for component in resolution.requested_components:
        name = component.entry.name
        ctx.feedback.info(f'  import {{ {name} }} from "{config.alias}/{components_path}/{name}";')
    ctx.feedback.info("")


def add_components(
    ctx: RdsContext,
    components: list[str],
    *,
    yes: bool,
    overwrite: bool,
) -> None:
    """Resolve, materialize and install dependencies for the requested components.

    Args:
        ctx: Application context
        components: Requested registry keys; empty triggers an interactive
            multi-select
        yes: Skip prompts; existing files are skipped unless overwrite is set
        overwrite: Replace existing files without prompting

    Raises:
        ConfigError: If rds-ui.json cannot be loaded
        RegistryError: If the registry or a component file cannot be fetched
        UnknownComponentError: If a requested or required component is not in
            the registry (raised before any file is written)
    """
    config = load_config(ctx.cwd)

    ctx.feedback.detail("Fetching registry...")
    index = ctx.registry.fetch_index()

    if not components:
        components = _prompt_for_components(ctx, index)

    if not components:
        ctx.feedback.detail("No components selected.")
        return

    lib_keys, component_keys = split_requested(components)
    _warn_missing_libs(ctx, config, lib_keys, lead="")

    if not component_keys:
        ctx.feedback.detail("Lib dependencies are installed via `adms-rds-ui init`.")
        return

    resolution = resolve_components(index, component_keys)
    policy = ConflictPolicy(assume_yes=yes, overwrite=overwrite)
    # Destinations written or skipped so far, shared across every component in the run.
    handled: set[str] = set()

    for component in resolution.requested_components:
        ctx.feedback.info(f"\n📦 Adding {component.entry.name}...\n")
        materialize_component(ctx, config, component.entry, policy, handled)

    _warn_missing_libs(ctx, config, list(resolution.lib_deps), lead="\n")

    dependencies = resolution.dependency_components
    if dependencies:
        ctx.feedback.warning("\n⚠ Installing required component dependencies...")
        for component in dependencies:
            ctx.feedback.info(f"\n📦 Adding {component.entry.name}...\n")
            materialize_component(
                ctx, config, component.entry, policy.non_interactive(), handled
            )

    if resolution.npm_deps:
        ctx.feedback.info("\n📦 Installing dependencies...\n")
        ctx.installer.install(ctx.cwd, list(resolution.npm_deps))

    _print_usage(ctx, config, resolution)


@click.command("add")
@click.argument("components", nargs=-1)
@click.option("-y", "--yes", is_flag=True, help="Skip prompts.")
@click.option("-o", "--overwrite", is_flag=True, help="Overwrite existing files.")
@click.pass_obj
@cli_error_boundary
def add_cmd(ctx: RdsContext, components: tuple[str, ...], yes: bool, overwrite: bool) -> None:
    """Add components to your project.

    Omit COMPONENTS to pick from the registry interactively. Registry
    dependencies are added too, and npm dependencies are installed once with
    the project's package manager.

    Examples:

        adms-rds-ui add button

        adms-rds-ui add button label --yes --overwrite
    """
    Ensure.initialized(ctx.cwd)
    logger.debug("add: components=%s yes=%s overwrite=%s", components, yes, overwrite)
    add_components(ctx, list(components), yes=yes, overwrite=overwrite)
