"""Application context with dependency injection.

The RdsContext dataclass holds every collaborator a command needs (registry
access, prompting, package installation, user feedback) and is created once
at the CLI entry point, then threaded through click's context object.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from rds_ui.core.package_manager import PackageInstaller, RealPackageInstaller
from rds_ui.core.prompter import ClickPrompter, Prompter
from rds_ui.core.registry import RegistrySource, select_registry_source
from rds_ui.core.user_feedback import InteractiveFeedback, UserFeedback

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RdsContext:
    """Immutable context holding all dependencies for rds-ui operations.

    Attributes:
        registry: Source of the registry index and component files
        prompter: Interactive question/answer capability
        installer: Package manager detection and dependency installation
        feedback: User-facing progress and diagnostic output
        cwd: Consumer project root (current working directory at invocation)
        debug: Show full stack traces instead of clean error messages
    """

    registry: RegistrySource
    prompter: Prompter
    installer: PackageInstaller
    feedback: UserFeedback
    cwd: Path
    debug: bool

    @staticmethod
    def for_test(
        registry: RegistrySource | None = None,
        prompter: Prompter | None = None,
        installer: PackageInstaller | None = None,
        feedback: UserFeedback | None = None,
        cwd: Path | None = None,
        debug: bool = False,
    ) -> "RdsContext":
        """Create test context with fakes for anything not provided.

        Args:
            registry: Registry source. If None, creates an empty FakeRegistrySource.
            prompter: Prompter. If None, creates a FakePrompter with no scripted answers.
            installer: Package installer. If None, creates a FakePackageInstaller.
            feedback: User feedback. If None, creates a FakeUserFeedback.
            cwd: Project root (defaults to Path("/fake/project"))
            debug: Whether to enable debug mode (default False)

        Example:
            >>> from rds_ui.core.registry.fake import FakeRegistrySource
            >>> ctx = RdsContext.for_test(registry=FakeRegistrySource(index), cwd=tmp_path)
        """
        from tests.fakes.package_installer import FakePackageInstaller
        from tests.fakes.prompter import FakePrompter
        from tests.fakes.user_feedback import FakeUserFeedback

        from rds_ui.core.registry.fake import FakeRegistrySource

        return RdsContext(
            registry=registry if registry is not None else FakeRegistrySource(),
            prompter=prompter if prompter is not None else FakePrompter(),
            installer=installer if installer is not None else FakePackageInstaller(),
            feedback=feedback if feedback is not None else FakeUserFeedback(),
            cwd=cwd if cwd is not None else Path("/fake/project"),
            debug=debug,
        )


def create_context(*, debug: bool, cwd: Path | None = None) -> RdsContext:
    """Create production context with real implementations.

    Called once at CLI entry point. The registry source is selected here, by
    checking for a local registry before falling back to HTTPS.
    """
    feedback = InteractiveFeedback()
    registry = select_registry_source()
    logger.debug("Registry source: %s", registry.describe())

    return RdsContext(
        registry=registry,
        prompter=ClickPrompter(),
        installer=RealPackageInstaller(feedback),
        feedback=feedback,
        cwd=cwd if cwd is not None else Path.cwd(),
        debug=debug,
    )
