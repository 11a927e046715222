"""Exceptions raised by error-state."""


class LogWriteError(OSError):
    """The error log file could not be opened or written.

    Subclasses :class:`OSError` so callers already guarding file I/O keep
    working. The underlying exception is available as ``__cause__``.
    """

    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not write error log {path!r}: {reason}")
        self.path = path
        self.reason = reason
