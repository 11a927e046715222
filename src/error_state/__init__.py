"""error-state: record, print and log application errors and warnings."""

from .errors import LogWriteError
from .models import Notice, NoticeKind
from .state import DEFAULT_LOG_FILENAME, MAX_LOG_FILENAME_LENGTH, ErrorState

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_LOG_FILENAME",
    "ErrorState",
    "LogWriteError",
    "MAX_LOG_FILENAME_LENGTH",
    "Notice",
    "NoticeKind",
]
