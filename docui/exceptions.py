"""Custom exception hierarchy for docui.

Exception Hierarchy:
    DocuiError (base)
    ├── UnknownPanelError - focus switch to a panel that was never registered
    ├── DuplicateIdentifierError - two panels registered under one id
    ├── OverlayBusyError - an overlay was opened while another is active
    ├── UnknownCommandError - an input form names a command nobody registered
    └── ClientError - any failure reported by the container engine
        └── NotFoundError - inspect/remove of a resource that does not exist

The first four are programming errors: fatal at start-up, and a core
invariant violation afterwards. ClientError is always recoverable; the
dispatcher turns it into a transient message on the focused panel.

Usage:
    from docui.exceptions import ClientError

    try:
        client.remove_image(image_id)
    except ClientError as e:
        ctx.flash(str(e))
"""

from typing import Any, Optional, Sequence


class DocuiError(Exception):
    """Base exception for all docui errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., panel ids)
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
# Registration / invariant errors
# =============================================================================


class UnknownPanelError(DocuiError):
    """A panel id that is not registered with the PanelManager."""

    def __init__(self, panel_id: str) -> None:
        self.panel_id = panel_id
        super().__init__("Unknown panel", panel_id=panel_id)


class DuplicateIdentifierError(DocuiError):
    """A panel id that is already registered."""

    def __init__(self, panel_id: str) -> None:
        self.panel_id = panel_id
        super().__init__("Panel already registered", panel_id=panel_id)


class OverlayBusyError(DocuiError):
    """An overlay is already active; it must be closed first."""

    def __init__(self, active: str) -> None:
        self.active = active
        super().__init__("Another overlay is already open", active=active)


class UnknownCommandError(DocuiError):
    """An input form was submitted to a command id with no handler."""

    def __init__(self, command_id: str) -> None:
        self.command_id = command_id
        super().__init__("Unknown command", command_id=command_id)


# =============================================================================
# Container engine errors
# =============================================================================


class ClientError(DocuiError):
    """The container engine reported a failure.

    The message is the engine's own stderr when it produced one, so it can be
    shown to the user as-is.
    """

    def __init__(
        self,
        message: str,
        *,
        command: Optional[Sequence[str]] = None,
        returncode: Optional[int] = None,
    ) -> None:
        self.command = list(command) if command else []
        self.returncode = returncode
        super().__init__(message)


class NotFoundError(ClientError):
    """The requested resource does not exist."""

    def __init__(self, resource_id: str, **kwargs: Any) -> None:
        self.resource_id = resource_id
        super().__init__(f"No such object: {resource_id}", **kwargs)
