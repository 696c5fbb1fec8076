"""Rewrite registry import paths to a consumer's aliases.

Registry sources import shared code through two fixed specifiers,
`@/lib/utils` and `@/components/ui`. These are rewritten to whatever the
consumer configured in rds-ui.json. Pure text transformation, no I/O.
"""

import re

from rds_ui.core.config import RdsConfig

LIB_UTILS_PATTERN = re.compile(r"@/lib/utils")
COMPONENTS_UI_PATTERN = re.compile(r"@/components/ui")
ALIAS_PREFIX_PATTERN = re.compile(r"@/")


def transform_imports(content: str, config: RdsConfig) -> str:
    """Rewrite the shared utils and UI component root specifiers.

    - `@/lib/utils` -> `{alias}/{libDir relative to srcDir}/utils`
    - `@/components/ui` -> `componentsAlias` when configured, otherwise
      `{alias}/{componentsDir relative to srcDir}`

    Content without either specifier is returned unchanged.
    """
    lib_path = config.relative_to_src(config.lib_dir)
    content = LIB_UTILS_PATTERN.sub(lambda _: f"{config.alias}/{lib_path}/utils", content)

    if config.components_alias:
        components_target = config.components_alias
    else:
        components_target = f"{config.alias}/{config.relative_to_src(config.components_dir)}"
    return COMPONENTS_UI_PATTERN.sub(lambda _: components_target, content)


def transform_alias_imports(content: str, config: RdsConfig) -> str:
    """Rewrite every `@/` prefix to `{alias}/` (used for lib files during init)."""
    return ALIAS_PREFIX_PATTERN.sub(lambda _: f"{config.alias}/", content)
