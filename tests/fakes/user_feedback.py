"""Fake UserFeedback that captures messages for assertions."""

from rds_ui.core.user_feedback import UserFeedback


class FakeUserFeedback(UserFeedback):
    """Captures every message as (level, text) in call order."""

    def __init__(self) -> None:
        self._messages: list[tuple[str, str]] = []

    @property
    def messages(self) -> list[tuple[str, str]]:
        return self._messages

    def texts(self, level: str | None = None) -> list[str]:
        """Message texts, optionally filtered to a single level."""
        return [text for lvl, text in self._messages if level is None or lvl == level]

    def output(self) -> str:
        """All messages joined with newlines, as a user would have read them."""
        return "\n".join(self.texts())

    def info(self, message: str) -> None:
        self._messages.append(("info", message))

    def detail(self, message: str) -> None:
        self._messages.append(("detail", message))

    def success(self, message: str) -> None:
        self._messages.append(("success", message))

    def warning(self, message: str) -> None:
        self._messages.append(("warning", message))

    def error(self, message: str) -> None:
        self._messages.append(("error", message))
