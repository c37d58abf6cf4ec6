"""Custom exception hierarchy for teamdeck.

Exception Hierarchy:
    TeamdeckError (base)
    ├── ClipboardError - clipboard backends
    │   ├── ClipboardUnavailableError - no usable backend
    │   └── ClipboardWriteError - a backend refused the write
    ├── CatalogError - lookups against the static catalog
    └── ConfigurationError - settings/configuration issues

Clipboard errors are diagnostic only: the copy-feedback flow logs them and
carries on. CLI commands turn any TeamdeckError into a red message and a
non-zero exit.

Usage:
    from teamdeck.exceptions import ClipboardWriteError

    try:
        subprocess.run(["pbcopy"], input=data, check=True)
    except subprocess.CalledProcessError as e:
        raise ClipboardWriteError("pbcopy failed", backend="pbcopy") from e
"""

from typing import Any, Optional


class TeamdeckError(Exception):
    """Base exception for all teamdeck errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., keys, backends)
        retryable: Whether this error might succeed on retry
    """

    def __init__(
        self,
        message: str,
        *,
        retryable: bool = False,
        **context: Any,
    ) -> None:
        self.message = message
        self.context = context
        self.retryable = retryable
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# Clipboard Errors
# =============================================================================


class ClipboardError(TeamdeckError):
    """Base exception for clipboard operations."""

    pass


class ClipboardUnavailableError(ClipboardError):
    """No clipboard backend is usable in this environment."""

    def __init__(self, message: str = "No clipboard backend available", **context: Any) -> None:
        super().__init__(message, **context)


class ClipboardWriteError(ClipboardError):
    """Writing to the clipboard failed."""

    def __init__(
        self,
        message: str = "Clipboard write failed",
        *,
        backend: Optional[str] = None,
        stderr: Optional[str] = None,
        **context: Any,
    ) -> None:
        if backend:
            context["backend"] = backend
        if stderr:
            context["stderr"] = stderr[:200] + "..." if len(stderr) > 200 else stderr
        super().__init__(message, **context)


# =============================================================================
# Catalog & Configuration Errors
# =============================================================================


class CatalogError(TeamdeckError):
    """A catalog lookup referenced an unknown entry."""

    def __init__(
        self,
        message: str = "Unknown catalog entry",
        *,
        key: Optional[str] = None,
        **context: Any,
    ) -> None:
        if key is not None:
            context["key"] = key
        super().__init__(message, **context)


class ConfigurationError(TeamdeckError):
    """Invalid or missing configuration."""

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)
