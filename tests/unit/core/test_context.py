"""Tests for context creation."""

from pathlib import Path
from unittest.mock import patch

from rds_ui.core.context import RdsContext, create_context
from rds_ui.core.package_manager import RealPackageInstaller
from rds_ui.core.prompter import ClickPrompter
from rds_ui.core.registry import REGISTRY_ENV_VAR, LocalRegistrySource
from rds_ui.core.registry.fake import FakeRegistrySource
from rds_ui.core.user_feedback import InteractiveFeedback
from tests.fakes.package_installer import FakePackageInstaller
from tests.fakes.prompter import FakePrompter
from tests.fakes.user_feedback import FakeUserFeedback


def test_create_context_wires_real_implementations(tmp_path: Path) -> None:
    """create_context uses the interactive collaborators and the selected registry."""
    with patch.dict("os.environ", {REGISTRY_ENV_VAR: str(tmp_path)}):
        ctx = create_context(debug=True, cwd=tmp_path)

    assert isinstance(ctx.registry, LocalRegistrySource)
    assert ctx.registry.root == tmp_path
    assert isinstance(ctx.prompter, ClickPrompter)
    assert isinstance(ctx.installer, RealPackageInstaller)
    assert isinstance(ctx.feedback, InteractiveFeedback)
    assert ctx.cwd == tmp_path
    assert ctx.debug is True


def test_create_context_defaults_to_current_directory(tmp_path: Path) -> None:
    with patch.dict("os.environ", {REGISTRY_ENV_VAR: str(tmp_path)}):
        with patch("rds_ui.core.context.Path.cwd", return_value=tmp_path):
            ctx = create_context(debug=False)

    assert ctx.cwd == tmp_path


def test_for_test_defaults_to_fakes() -> None:
    ctx = RdsContext.for_test()

    assert isinstance(ctx.registry, FakeRegistrySource)
    assert isinstance(ctx.prompter, FakePrompter)
    assert isinstance(ctx.installer, FakePackageInstaller)
    assert isinstance(ctx.feedback, FakeUserFeedback)
    assert ctx.cwd == Path("/fake/project")
    assert ctx.debug is False
