"""Error types raised by rendering and filesystem passes."""


class ProfileDirsError(Exception):
    """Base error carrying a message and a context dict."""

    def __init__(self, message, *, context=None):
        self.message = message
        self.context = context or {}
        super().__init__(message)


class PreconditionError(ProfileDirsError, ValueError):
    """Invalid input handed to a pure component by its caller."""


class FilesystemError(ProfileDirsError):
    """A directory could not be created or removed.

    Aborts the enclosing pass; `action` and `path` tell the operator what
    was attempted where.
    """

    def __init__(self, action, path, reason):
        self.action = action
        self.path = path
        self.reason = reason
        super().__init__(
            f"{action} failed for {path}: {reason}",
            context={"action": action, "path": str(path)},
        )
