"""User-facing diagnostic output."""

from abc import ABC, abstractmethod

import click

from rds_ui.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing progress and diagnostic output.

    Core operations (materializer, installer) report through ctx.feedback
    instead of echoing directly, so tests can capture exactly what a user
    would have seen.

    Usage:
        ctx.feedback.info("Fetching registry...")
        ctx.feedback.success("✓ Created src/components/ui/Button/Button.vue")
        ctx.feedback.warning("⚠ Missing lib/utils. Run `adms-rds-ui init` to install it.")
        ctx.feedback.error("❌ Failed to install dependencies")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message."""

    @abstractmethod
    def detail(self, message: str) -> None:
        """Show low-emphasis message (skips, commands being run)."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show non-fatal warning."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message."""


class InteractiveFeedback(UserFeedback):
    """Styled feedback written to the terminal."""

    def info(self, message: str) -> None:
        user_output(click.style(message, fg="cyan"))

    def detail(self, message: str) -> None:
        user_output(click.style(message, dim=True))

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))

    def warning(self, message: str) -> None:
        user_output(click.style(message, fg="yellow"))

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))
