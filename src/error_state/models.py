"""Core data models for error-state."""

from dataclasses import dataclass
from enum import Enum


class NoticeKind(Enum):
    """Severity of a reported notice."""

    ERROR = "ERROR"
    WARNING = "WARNING"


@dataclass(frozen=True)
class Notice:
    """A single error or warning notice, as printed and logged."""

    kind: NoticeKind
    function_name: str
    message: str
    flag: int = 0

    @property
    def header(self) -> str:
        return f"***** {self.kind.value} *****"

    def lines(self) -> list[str]:
        """Return the notice as a list of lines, blank first and last.

        Only errors carry the ``Error Flag`` line; warnings keep their flag
        out of the printed block.
        """
        lines = ["", self.header, f"Function: {self.function_name}"]
        if self.kind is NoticeKind.ERROR:
            lines.append(f"Error Flag: {self.flag}")
        lines += ["Message:", self.message, ""]
        return lines

    def render(self) -> str:
        return "\n".join(self.lines()) + "\n"
