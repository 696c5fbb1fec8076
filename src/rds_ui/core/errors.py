"""Well-known failures raised by the registry workflow.

These are caught at the CLI error boundary and rendered without a stack trace.
"""


class RdsUiError(Exception):
    """Base class for predictable, user-facing failures."""


class ConfigError(RdsUiError):
    """Project is missing rds-ui.json or package.json, or the config is invalid."""


class RegistryError(RdsUiError):
    """Registry index or a registry file could not be read."""


class UnknownComponentError(RdsUiError):
    """A requested (or depended-upon) component key is not in the registry."""

    def __init__(self, key: str, available: list[str], required_by: str | None = None) -> None:
        self.key = key
        self.available = available
        self.required_by = required_by
        if required_by is None:
            message = f"Unknown component: {key}"
        else:
            message = f"Unknown component: {key} (required by {required_by})"
        super().__init__(f"{message}\nAvailable: {', '.join(available)}")
