"""Init command: bootstrap a consumer project."""

import posixpath

import click

from rds_ui.cli.ensure import Ensure
from rds_ui.cli.error_boundary import cli_error_boundary
from rds_ui.core.config import (
    CONFIG_FILE,
    RdsConfig,
    config_exists,
    default_config,
    save_config,
)
from rds_ui.core.context import RdsContext
from rds_ui.core.materializer import project_path
from rds_ui.core.project_setup import update_tsconfig, update_vite_config
from rds_ui.core.resolver import dedupe
from rds_ui.core.transformer import transform_alias_imports

# Runtime dependency of every component, installed alongside lib and styles deps.
BASE_DEPENDENCIES = ["reka-ui"]


def prompt_for_config(ctx: RdsContext) -> RdsConfig:
    defaults = default_config()
    src_dir = ctx.prompter.text("Where is your src directory?", defaults.src_dir)
    alias = ctx.prompter.text("What alias do you use for src imports?", defaults.alias)
    components_dir = ctx.prompter.text(
        "Where should components be installed?", defaults.components_dir
    )
    components_alias = ctx.prompter.text(
        "What alias for components? (leave empty to use main alias)", ""
    )
    lib_dir = ctx.prompter.text("Where should lib/utils.ts go?", defaults.lib_dir)
    styles_dir = ctx.prompter.text("Where should styles/tokens go?", defaults.styles_dir)

    return RdsConfig(
        alias=alias,
        src_dir=src_dir,
        components_dir=components_dir,
        components_alias=components_alias,
        lib_dir=lib_dir,
        styles_dir=styles_dir,
    )


def _write_registry_files(
    ctx: RdsContext, files: list[str], target_dir: str, config: RdsConfig | None
) -> None:
    """Copy registry files flat into target_dir, rewriting `@/` when config is given."""
    for registry_path in files:
        file_name = posixpath.basename(registry_path)
        dest_path = project_path(ctx.cwd, posixpath.join(target_dir, file_name))
        content = ctx.registry.fetch_file(registry_path)
        if config is not None:
            content = transform_alias_imports(content, config)
        dest_path.parent.mkdir(parents=True, exist_ok=True)
        dest_path.write_text(content, encoding="utf-8")
        ctx.feedback.success(f"✓ Created {target_dir}/{file_name}")


def _report_vite(ctx: RdsContext, config: RdsConfig) -> None:
    status = update_vite_config(ctx.cwd, config)
    if status == "created":
        ctx.feedback.success("✓ Created vite.config.ts")
    elif status == "updated":
        ctx.feedback.success("✓ Updated vite.config.ts with alias")
    else:
        ctx.feedback.detail("  vite.config.ts already has alias configured")


def _report_tsconfig(ctx: RdsContext, config: RdsConfig) -> None:
    for message in update_tsconfig(ctx.cwd, config):
        if message.startswith("⚠"):
            ctx.feedback.warning(message)
        else:
            ctx.feedback.success(message)


def initialize_project(ctx: RdsContext, *, yes: bool) -> None:
    """Create rds-ui.json, wire aliases, and copy the shared lib and style files.

    Raises:
        ConfigError: If an existing tsconfig cannot be parsed
        RegistryError: If the registry or one of its files cannot be fetched
    """
    ctx.feedback.info("\n🚀 Initializing ADMS RDS UI...\n")

    Ensure.project_manifest(ctx.cwd)

    pm = ctx.installer.detect(ctx.cwd)
    ctx.feedback.detail(f"Detected package manager: {pm}\n")

    if config_exists(ctx.cwd) and not yes:
        if not ctx.prompter.confirm(f"{CONFIG_FILE} already exists. Overwrite?", default=False):
            ctx.feedback.detail("Cancelled.")
            return

    config = default_config() if yes else prompt_for_config(ctx)

    for directory in (config.components_dir, config.lib_dir, config.styles_dir):
        (ctx.cwd / directory).mkdir(parents=True, exist_ok=True)
    ctx.feedback.success("✓ Created directories")

    _report_vite(ctx, config)
    _report_tsconfig(ctx, config)

    ctx.feedback.detail("\nFetching registry...")
    index = ctx.registry.fetch_index()

    utils = index.lib.get("utils")
    lib_dependencies: list[str] = []
    if utils is not None:
        _write_registry_files(ctx, utils.files, config.lib_dir, config)
        lib_dependencies = utils.dependencies
    else:
        ctx.feedback.warning("⚠ Registry has no lib/utils entry")

    _write_registry_files(ctx, index.styles.files, config.styles_dir, None)

    save_config(ctx.cwd, config)
    ctx.feedback.success(f"✓ Created {CONFIG_FILE}")

    deps = dedupe([*lib_dependencies, *index.styles.dependencies, *BASE_DEPENDENCIES])
    ctx.feedback.info("\n📦 Installing dependencies...\n")
    if ctx.installer.install(ctx.cwd, deps):
        ctx.feedback.success("\n✓ Dependencies installed")

    styles_path = config.relative_to_src(config.styles_dir)
    ctx.feedback.info("\n✅ ADMS RDS UI initialized!\n")
    ctx.feedback.info("Next steps:")
    ctx.feedback.detail("  1. Import styles in your main.ts:")
    ctx.feedback.info(f'     import "{config.alias}/{styles_path}/styles.scss";')
    ctx.feedback.detail("  2. Add a component:")
    ctx.feedback.info("     npx @adms-rds-ui/cli add button\n")


@click.command("init")
@click.option("-y", "--yes", is_flag=True, help="Skip prompts and use defaults.")
@click.pass_obj
@cli_error_boundary
def init_cmd(ctx: RdsContext, yes: bool) -> None:
    """Initialize ADMS RDS UI in your project.

    Creates rds-ui.json, the components, lib and styles directories, adds
    path aliases to vite.config.ts and tsconfig.json, and copies the shared
    utilities and styles from the registry.
    """
    initialize_project(ctx, yes=yes)
