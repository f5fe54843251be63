"""Domain error types."""


class WorkspaceError(Exception):
    """Base class for recoverable workspace errors. Raised before any state changes."""


class EmptyNameError(WorkspaceError):
    """Raised when a variable name is blank after trimming."""


class DuplicateVariableError(WorkspaceError):
    """Raised when adding a variable whose name is already in use."""


class LastItemError(WorkspaceError):
    """Raised when deleting the last remaining template or signature group."""


class UnknownItemError(WorkspaceError):
    """Raised when selecting a template or group id that does not exist."""
