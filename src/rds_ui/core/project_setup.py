"""Path alias wiring for `init`.

Teaches the consumer's build (vite.config.ts) and type checker (tsconfig.json)
about the configured aliases. Existing files are edited in place; existing
alias entries are never replaced or duplicated.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Literal

from rds_ui.core.config import RdsConfig
from rds_ui.core.errors import ConfigError

logger = logging.getLogger(__name__)

ViteStatus = Literal["created", "updated", "exists"]

VITE_CONFIG_TEMPLATE = """import {{ defineConfig }} from "vite";
import vue from "@vitejs/plugin-vue";
import path from "path";

export default defineConfig({{
  plugins: [vue()],
  resolve: {{
    alias: {{
{alias_lines}
    }},
  }},
}});
"""


def build_vite_aliases(config: RdsConfig) -> dict[str, str]:
    aliases = {config.alias: f"./{config.src_dir}"}
    if config.components_alias:
        aliases[config.components_alias] = f"./{config.components_dir}"
    return aliases


def build_ts_paths(config: RdsConfig) -> dict[str, list[str]]:
    paths = {f"{config.alias}/*": [f"./{config.src_dir}/*"]}
    if config.components_alias:
        paths[f"{config.components_alias}/*"] = [f"./{config.components_dir}/*"]
    return paths


def _alias_lines(aliases: dict[str, str]) -> str:
    return "\n".join(
        f'      "{key}": path.resolve(__dirname, "{value}"),' for key, value in aliases.items()
    )


def render_vite_config(config: RdsConfig) -> str:
    return VITE_CONFIG_TEMPLATE.format(alias_lines=_alias_lines(build_vite_aliases(config)))


def insert_vite_aliases(content: str, config: RdsConfig) -> str:
    """Insert alias entries into existing vite config source.

    Tries, in order: an existing `alias: {` block, an existing `resolve: {`
    block, then the `defineConfig({` call. Adds `import path from "path";`
    when the file does not import it.
    """
    lines = _alias_lines(build_vite_aliases(config))

    if "resolve:" in content and "alias:" in content:
        content = re.sub(r"(alias:\s*\{)", lambda m: f"{m.group(1)}\n{lines}", content, count=1)
    elif "resolve:" in content:
        block = f"    alias: {{\n{lines}\n    }},"
        content = re.sub(r"(resolve:\s*\{)", lambda m: f"{m.group(1)}\n{block}", content, count=1)
    else:
        block = f"  resolve: {{\n    alias: {{\n{lines}\n    }},\n  }},"
        content = re.sub(
            r"(defineConfig\(\s*)\{", lambda m: f"{m.group(1)}{{\n{block}", content, count=1
        )

    if 'import path from "path"' not in content and "import path from 'path'" not in content:
        content = f'import path from "path";\n{content}'

    return content


def update_vite_config(project_dir: Path, config: RdsConfig) -> ViteStatus:
    """Create or update vite.config.ts with the configured aliases.

    Returns:
        "created" when the file was written from the template, "exists" when
        the alias was already configured, "updated" otherwise
    """
    vite_path = project_dir / "vite.config.ts"

    if not vite_path.exists():
        vite_path.write_text(render_vite_config(config), encoding="utf-8")
        return "created"

    content = vite_path.read_text(encoding="utf-8")
    if f'"{config.alias}"' in content:
        return "exists"

    vite_path.write_text(insert_vite_aliases(content, config), encoding="utf-8")
    return "updated"


def merge_paths(
    existing: dict[str, list[str]] | None, new_paths: dict[str, list[str]]
) -> dict[str, list[str]]:
    """Add new path aliases without replacing any existing key."""
    merged = dict(existing) if existing else {}
    for key, value in new_paths.items():
        if key not in merged:
            merged[key] = value
    return merged


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"Could not parse {path.name} as JSON: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a JSON object in {path.name}")
    return data


def _write_json(path: Path, data: dict[str, Any]) -> None:
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def _apply_paths(
    ts_config: dict[str, Any], paths: dict[str, list[str]], *, force_base: bool
) -> None:
    options = ts_config.setdefault("compilerOptions", {})
    if force_base or "baseUrl" not in options:
        options["baseUrl"] = "."
    options["paths"] = merge_paths(options.get("paths"), paths)


def default_tsconfig(config: RdsConfig) -> dict[str, Any]:
    return {
        "compilerOptions": {
            "target": "ES2020",
            "module": "ESNext",
            "moduleResolution": "bundler",
            "strict": True,
            "jsx": "preserve",
            "skipLibCheck": True,
            "baseUrl": ".",
            "paths": build_ts_paths(config),
        },
        "include": [f"{config.src_dir}/**/*", f"{config.src_dir}/**/*.vue"],
        "exclude": ["node_modules", "dist"],
    }


def _uses_project_references(ts_config: dict[str, Any]) -> bool:
    references = ts_config.get("references")
    files = ts_config.get("files")
    return (
        isinstance(references, list)
        and len(references) > 0
        and isinstance(files, list)
        and len(files) == 0
    )


def _includes_src(ts_config: dict[str, Any]) -> bool:
    include = ts_config.get("include")
    if not isinstance(include, list):
        return False
    return any(isinstance(i, str) and ("src/" in i or i.startswith("src")) for i in include)


def update_tsconfig(project_dir: Path, config: RdsConfig) -> list[str]:
    """Create or merge path aliases into tsconfig.json.

    With project references (non-empty `references`, empty `files`), each
    referenced config that includes src files gets the paths too, and the
    root config is updated for editor support.

    Returns:
        Messages describing what was done, in order. Messages starting with
        "⚠" are warnings.
    """
    ts_path = project_dir / "tsconfig.json"
    paths = build_ts_paths(config)

    if not ts_path.exists():
        _write_json(ts_path, default_tsconfig(config))
        return ["✓ Created tsconfig.json"]

    ts_config = _read_json(ts_path)

    if not _uses_project_references(ts_config):
        _apply_paths(ts_config, paths, force_base=False)
        _write_json(ts_path, ts_config)
        return ["✓ Updated tsconfig.json with paths"]

    messages: list[str] = []
    app_config_updated = False
    for ref in ts_config["references"]:
        ref_name = ref.get("path") if isinstance(ref, dict) else None
        if not ref_name:
            continue
        ref_path = project_dir / ref_name
        if ref_path.suffix != ".json":
            ref_path = ref_path.with_name(f"{ref_path.name}.json")
        if not ref_path.exists():
            logger.debug("Referenced tsconfig not found: %s", ref_path)
            continue

        ref_config = _read_json(ref_path)
        if _includes_src(ref_config):
            _apply_paths(ref_config, paths, force_base=True)
            _write_json(ref_path, ref_config)
            messages.append(f"✓ Updated {ref_path.name} with paths")
            app_config_updated = True

    _apply_paths(ts_config, paths, force_base=False)
    _write_json(ts_path, ts_config)

    if app_config_updated:
        messages.append("✓ Updated tsconfig.json with paths")
    else:
        messages.append(
            "⚠ Could not find app tsconfig to update. You may need to add paths manually."
        )
    return messages
