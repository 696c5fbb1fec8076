"""Dependency resolution for `add`.

Expands requested registry keys into the full set of components to
materialize plus the npm packages they need. Resolution is a worklist walk
over `registryDependencies` with a visited set, so every component is
resolved once and cyclic registries terminate.
"""

import logging
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

from rds_ui.core.config import RdsConfig
from rds_ui.core.errors import UnknownComponentError
from rds_ui.core.registry import ComponentEntry, RegistryIndex, is_lib_key, lib_name

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ResolvedComponent:
    key: str
    entry: ComponentEntry
    requested: bool


@dataclass(frozen=True)
class ResolutionResult:
    """Outcome of resolving one `add` request.

    Attributes:
        components: Components to materialize, requested ones first (in request
            order) followed by dependencies in breadth-first discovery order
        npm_deps: Deduplicated npm packages across every resolved component
        registry_deps: Deduplicated registry dependencies, minus the request
        lib_deps: lib/ keys that were requested or depended upon
    """

    components: tuple[ResolvedComponent, ...]
    npm_deps: tuple[str, ...]
    registry_deps: tuple[str, ...]
    lib_deps: tuple[str, ...]

    @property
    def requested_components(self) -> list[ResolvedComponent]:
        return [c for c in self.components if c.requested]

    @property
    def dependency_components(self) -> list[ResolvedComponent]:
        return [c for c in self.components if not c.requested]


def dedupe(items: Iterable[T]) -> list[T]:
    """Remove duplicates, keeping first-seen order."""
    return list(dict.fromkeys(items))


def split_requested(requested: Iterable[str]) -> tuple[list[str], list[str]]:
    """Split keys into (lib keys, component keys), preserving order."""
    keys = dedupe(requested)
    return [k for k in keys if is_lib_key(k)], [k for k in keys if not is_lib_key(k)]


def resolve_components(index: RegistryIndex, requested: Iterable[str]) -> ResolutionResult:
    """Compute the transitive closure of the requested registry keys.

    Every requested component key is validated before the walk starts, and
    every discovered component dependency is validated as it is reached, so an
    unknown key fails the whole request before anything is written.

    Args:
        index: Registry index for this invocation
        requested: Keys as given by the user; lib/ keys are accepted and routed
            to lib_deps

    Raises:
        UnknownComponentError: If a requested key or a component dependency is
            not in the registry
    """
    requested_keys = dedupe(requested)
    requested_libs, requested_components = split_requested(requested_keys)
    available = index.component_keys()

    for key in requested_components:
        if key not in index.components:
            raise UnknownComponentError(key, available)

    pending: deque[tuple[str, bool]] = deque((key, True) for key in requested_components)
    visited: set[str] = set()
    components: list[ResolvedComponent] = []
    all_npm_deps: list[str] = []
    all_registry_deps: list[str] = []

    while pending:
        key, is_requested = pending.popleft()
        if key in visited:
            continue
        visited.add(key)

        entry = index.components[key]
        components.append(ResolvedComponent(key=key, entry=entry, requested=is_requested))
        all_npm_deps.extend(entry.dependencies)
        all_registry_deps.extend(entry.registry_dependencies)

        for dep in entry.registry_dependencies:
            if is_lib_key(dep):
                continue
            if dep not in index.components:
                raise UnknownComponentError(dep, available, required_by=key)
            if dep in visited:
                logger.debug("Skipping already resolved dependency %s (from %s)", dep, key)
                continue
            pending.append((dep, False))

    registry_deps = [dep for dep in dedupe(all_registry_deps) if dep not in requested_keys]
    lib_deps = dedupe([*requested_libs, *(dep for dep in registry_deps if is_lib_key(dep))])

    logger.debug(
        "Resolved %d component(s): %s; npm=%s; libs=%s",
        len(components),
        [c.key for c in components],
        dedupe(all_npm_deps),
        lib_deps,
    )

    return ResolutionResult(
        components=tuple(components),
        npm_deps=tuple(dedupe(all_npm_deps)),
        registry_deps=tuple(registry_deps),
        lib_deps=tuple(lib_deps),
    )


def lib_dependency_path(key: str, config: RdsConfig, project_dir: Path) -> Path:
    """Local file a lib/ key is expected at: lib/utils -> {libDir}/utils.ts."""
    return project_dir / config.lib_dir / f"{lib_name(key)}.ts"


def missing_lib_dependencies(
    lib_deps: Iterable[str], config: RdsConfig, project_dir: Path
) -> list[str]:
    """Return the lib/ keys whose file is not present in the project."""
    return [
        key for key in lib_deps if not lib_dependency_path(key, config, project_dir).exists()
    ]
