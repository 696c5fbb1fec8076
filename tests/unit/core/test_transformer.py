"""Tests for import path rewriting."""

from dataclasses import replace

import pytest

from rds_ui.core.config import RdsConfig, default_config
from rds_ui.core.transformer import transform_alias_imports, transform_imports

BUTTON_SOURCE = """<script setup lang="ts">
import { cn } from "@/lib/utils";
import { Label } from "@/components/ui/Label";
import { ref } from "vue";
import { Primitive } from "reka-ui";
</script>
"""


@pytest.fixture
def tilde_config() -> RdsConfig:
    return replace(default_config(), alias="~", lib_dir="src/shared", components_dir="src/ui")


def test_rewrites_utils_and_components_to_configured_alias(tilde_config: RdsConfig) -> None:
    result = transform_imports(BUTTON_SOURCE, tilde_config)

    assert 'import { cn } from "~/shared/utils";' in result
    assert 'import { Label } from "~/ui/Label";' in result


def test_components_alias_takes_precedence(tilde_config: RdsConfig) -> None:
    config = replace(tilde_config, components_alias="@ui")

    result = transform_imports(BUTTON_SOURCE, config)

    assert 'import { Label } from "@ui/Label";' in result
    assert 'import { cn } from "~/shared/utils";' in result


def test_unrelated_imports_are_untouched(tilde_config: RdsConfig) -> None:
    result = transform_imports(BUTTON_SOURCE, tilde_config)

    assert 'import { ref } from "vue";' in result
    assert 'import { Primitive } from "reka-ui";' in result


def test_directories_outside_src_are_used_as_is() -> None:
    config = replace(default_config(), lib_dir="lib", components_dir="components")

    result = transform_imports(BUTTON_SOURCE, config)

    assert '"@/lib/utils"' in result
    assert '"@/components/Label"' in result


@pytest.mark.parametrize(
    "content",
    [
        "",
        'import { computed } from "vue";\n',
        'import helper from "@/composables/useThing";\n',
    ],
)
def test_no_match_is_a_no_op(tilde_config: RdsConfig, content: str) -> None:
    assert transform_imports(content, tilde_config) == content


def test_transform_is_idempotent(tilde_config: RdsConfig) -> None:
    once = transform_imports(BUTTON_SOURCE, tilde_config)

    assert transform_imports(once, tilde_config) == once


def test_default_config_leaves_registry_specifiers_unchanged() -> None:
    assert transform_imports(BUTTON_SOURCE, default_config()) == BUTTON_SOURCE


def test_alias_imports_rewrites_every_at_prefix(tilde_config: RdsConfig) -> None:
    content = 'import a from "@/lib/a";\nimport b from "@/composables/b";\nimport c from "vue";\n'

    result = transform_alias_imports(content, tilde_config)

    assert result == (
        'import a from "~/lib/a";\nimport b from "~/composables/b";\nimport c from "vue";\n'
    )
