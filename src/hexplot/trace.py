"""Human-readable trace output."""

from .commands import Color
from .config import KeywordConfig
from .geometry import Point

SEPARATOR = " "
NEWLINE = "\n"
TERMINATOR = ";"


class TraceWriter:
    """Accumulates trace lines such as ``PEN DOWN;`` or ``MV (0, 0) (5, 5);``.

    Keywords are looked up by symbolic name ("pen up", "move", ...).
    """

    def __init__(self, keywords: KeywordConfig | None = None):
        self.keywords = keywords or KeywordConfig()
        self._parts: list[str] = []

    def _begin_line(self, name: str):
        if self._parts:
            self._parts.append(NEWLINE)
        self._parts.append(self.keywords.lookup(name))

    def clear(self):
        self._begin_line("clear")
        self.terminate()

    def pen(self, down: bool):
        state = self.keywords.lookup("pen down" if down else "pen up")
        self._begin_line("pen")
        self._parts.append(SEPARATOR + state)
        self.terminate()

    def color(self, color: Color):
        self._begin_line("set color")
        for value in color:
            self._parts.append(f"{SEPARATOR}{value}")
        self.terminate()

    def begin_move(self):
        self._begin_line("move")

    def point(self, point: Point):
        self._parts.append(f"{SEPARATOR}{point}")

    def terminate(self):
        self._parts.append(TERMINATOR)

    def getvalue(self) -> str:
        return "".join(self._parts)
