"""The ErrorState reporting object.

An :class:`ErrorState` remembers whether an error or a warning has been
reported, keeps the flag of the most recent one of each, prints notices to
stdout and writes the latest error to a log file. Reporting an error
terminates the process unless ``exit_on_error`` has been switched off.

Instances are meant to be created once by the calling application and passed
to whatever needs to report. Nothing here is module-global.
"""

import logging
import sys
from typing import Callable

import click

from .cli_utils import warn
from .errors import LogWriteError
from .models import Notice, NoticeKind

logger = logging.getLogger(__name__)

DEFAULT_LOG_FILENAME = "error_log.txt"
# Longer names are cut to this many characters on assignment, without error.
MAX_LOG_FILENAME_LENGTH = 256


class ErrorState:
    """Error and warning status for one logical unit of work.

    Parameters
    ----------
    log_filename:
        File that :meth:`log_error` overwrites. Subject to
        :data:`MAX_LOG_FILENAME_LENGTH`.
    exit_on_error:
        If ``True`` (default), :meth:`report_error` terminates the process
        with the reported flag as exit code.
    terminate:
        Called with the exit code when an error terminates the process.
        Defaults to :func:`sys.exit`.
    """

    def __init__(
        self,
        log_filename: str = DEFAULT_LOG_FILENAME,
        exit_on_error: bool = True,
        terminate: Callable[[int], object] | None = None,
    ) -> None:
        self._log_filename = ""
        self._error_occurred = False
        self._warning_occurred = False
        self._error_flag = 0
        self._warning_flag = 0
        self._exit_on_error = exit_on_error
        self._terminate = terminate if terminate is not None else sys.exit
        self.set_log_filename(log_filename)

    def __repr__(self) -> str:
        return (
            f"ErrorState(log_filename={self.get_log_filename()!r}, "
            f"error_occurred={self._error_occurred}, error_flag={self._error_flag}, "
            f"warning_occurred={self._warning_occurred}, warning_flag={self._warning_flag}, "
            f"exit_on_error={self._exit_on_error})"
        )

    # -- Log filename ----------------------------------------------------------

    def get_log_filename(self) -> str:
        """Return the log filename with trailing blanks removed."""
        return self._log_filename.rstrip(" ")

    def set_log_filename(self, name: str) -> None:
        """Store at most the first :data:`MAX_LOG_FILENAME_LENGTH` characters of ``name``.

        The path is not checked here; an unusable path only fails when
        :meth:`log_error` tries to open it.
        """
        if len(name) > MAX_LOG_FILENAME_LENGTH:
            logger.debug(
                "Truncating log filename from %d to %d characters",
                len(name), MAX_LOG_FILENAME_LENGTH,
            )
        self._log_filename = name[:MAX_LOG_FILENAME_LENGTH]

    log_filename = property(get_log_filename, set_log_filename)

    # -- Exit policy -----------------------------------------------------------

    def get_exit_on_error(self) -> bool:
        return self._exit_on_error

    def set_exit_on_error(self, value: bool) -> None:
        self._exit_on_error = value

    exit_on_error = property(get_exit_on_error, set_exit_on_error)

    # -- Reporting -------------------------------------------------------------

    def report_error(self, function_name: str, message: str, flag: int) -> None:
        """Report an error condition.

        Prints the error notice, records ``flag``, overwrites the log file
        and then, if ``exit_on_error`` is set, terminates with ``flag`` as the
        exit code.

        If the log file cannot be written a warning goes to stderr. The
        process still terminates when ``exit_on_error`` is set. Otherwise, or
        if an injected ``terminate`` returns, the :class:`LogWriteError` is
        raised once the status has been recorded.

        Parameters
        ----------
        function_name:
            Name of the function in which the error was encountered.
        message:
            The error message, printed verbatim.
        flag:
            The error flag. Also the process exit code on termination, so
            nonzero values should be used for genuine errors.
        """
        notice = Notice(NoticeKind.ERROR, function_name, message, flag)
        _echo(notice)

        self._error_occurred = True
        self._error_flag = flag
        logger.debug("Error reported by %r with flag %d", function_name, flag)

        log_failure: LogWriteError | None = None
        try:
            self.log_error(function_name, message, flag)
        except LogWriteError as exc:
            warn(str(exc))
            log_failure = exc

        if self._exit_on_error:
            logger.debug("Terminating with exit code %d", flag)
            self._terminate(flag)
        if log_failure is not None:
            raise log_failure

    def report_warning(self, function_name: str, message: str, flag: int) -> None:
        """Report a warning and return to the caller.

        Warnings are printed and recorded only; they never touch the log file
        and never terminate.
        """
        _echo(Notice(NoticeKind.WARNING, function_name, message, flag))
        self._warning_occurred = True
        self._warning_flag = flag
        logger.debug("Warning reported by %r with flag %d", function_name, flag)

    def log_error(self, function_name: str, message: str, flag: int) -> None:
        """Write the error notice to the log file, replacing its contents.

        Does not read or change the recorded status, so it can be used on
        its own.

        Raises
        ------
        LogWriteError
            If the file cannot be opened or written.
        """
        path = self.get_log_filename()
        text = Notice(NoticeKind.ERROR, function_name, message, flag).render()
        # Encoded up front so an unencodable message leaves the old file alone.
        # surrogateescape writes undecodable argv bytes back out unchanged.
        try:
            data = text.encode("utf-8", errors="surrogateescape")
        except UnicodeEncodeError as exc:
            raise LogWriteError(path, str(exc)) from exc
        try:
            with open(path, "wb") as f:
                f.write(data)
        except OSError as exc:
            raise LogWriteError(path, exc.strerror or str(exc)) from exc
        logger.debug("Wrote error log %s", path)

    # -- Status ----------------------------------------------------------------

    def has_error_occurred(self) -> bool:
        return self._error_occurred

    def reset_error_status(self) -> None:
        """Clear the error status and set the error flag back to zero."""
        self._error_occurred = False
        self._error_flag = 0

    def has_warning_occurred(self) -> bool:
        return self._warning_occurred

    def reset_warning_status(self) -> None:
        """Clear the warning status and set the warning flag back to zero."""
        self._warning_occurred = False
        self._warning_flag = 0

    def get_error_flag(self) -> int:
        """Flag of the most recent error, or 0 if none since the last reset."""
        return self._error_flag

    def get_warning_flag(self) -> int:
        """Flag of the most recent warning, or 0 if none since the last reset."""
        return self._warning_flag


def _echo(notice: Notice) -> None:
    # A broken stdout must not keep the status from being recorded.
    # color=True stops click from stripping escape sequences off non-TTYs.
    try:
        click.echo(notice.render(), nl=False, color=True)
    except (OSError, UnicodeEncodeError) as exc:
        logger.warning("Could not print %s notice: %s", notice.kind.value.lower(), exc)
