"""Stateful interpreter turning a hex instruction stream into a trace.

Moves are clipped against the work area. Pen and color changes made while
the pen is outside are not traced until the pen comes back inside, and pen
up/down lines are inserted wherever a move crosses the border.
"""

import logging
from dataclasses import dataclass, field, replace

from . import codec
from .commands import (
    BLACK,
    COMMAND_CODES,
    Clear,
    Color,
    Command,
    CommandCode,
    MovePen,
    PenUpDown,
    SetColor,
    build_command,
)
from .config import Config
from .errors import HexplotError, MalformedHexError, ParseError, UnknownCommandError
from .geometry import Point
from .segment import Segment, clip
from .trace import TraceWriter

logger = logging.getLogger(__name__)

PEN_UP = PenUpDown(False)
PEN_DOWN = PenUpDown(True)


@dataclass
class InterpreterState:
    """Pen position, pen state and color carried between commands."""

    current_point: Point = field(default_factory=Point)
    pen_down: bool = False
    # Pen state and color as of the last time the pen was inside the work area
    last_visible_pen_down: bool = False
    color: Color = BLACK
    last_visible_color: Color = BLACK
    # Whether the next move token has to open a new move line
    begin_new_line: bool = True

    def reset(self):
        self.current_point = Point()
        self.pen_down = False
        self.last_visible_pen_down = False
        self.color = BLACK
        self.last_visible_color = BLACK

    def copy(self) -> "InterpreterState":
        return replace(self)


class CommandInterpreter:
    """Parses instruction streams; state persists across calls until a Clear."""

    def __init__(self, config: Config | None = None, state: InterpreterState | None = None):
        self.config = config or Config()
        self.rect = self.config.work_area.rect()
        self.state = state or InterpreterState()

    def reset(self):
        self.state = InterpreterState()

    def parse(self, data: str) -> str:
        """Parse a hex instruction stream and return its trace.

        Raises ParseError on any failure, leaving the interpreter state as it
        was before the call.
        """
        if not data:
            raise ParseError(0, data) from MalformedHexError("Empty input")

        state = self.state.copy()
        trace = TraceWriter(self.config.keywords)

        code: CommandCode | None = None
        parameters: list[int] = []
        hi_token: str | None = None
        start = 0
        try:
            length = len(data)
            while start < length:
                end = start + codec.BYTE_LENGTH
                if end > length:
                    raise MalformedHexError("Odd number of characters")

                token = data[start:end]
                value = codec.decode_byte(token)

                if value in COMMAND_CODES:
                    # Parameters seen before the first command are discarded;
                    # a pending hi byte stays pending across the command byte
                    if code is not None:
                        self._execute(state, trace, build_command(code, parameters))
                    code = CommandCode(value)
                    parameters = []
                elif hi_token is None:
                    hi_token = token
                else:
                    parameters.append(codec.decode(hi_token, token))
                    hi_token = None
                start = end

            # An unpaired trailing byte is dropped
            if code is not None:
                self._execute(state, trace, build_command(code, parameters))
        except HexplotError as e:
            logger.debug("Parse failed at offset %d: %s", start, e)
            raise ParseError(start, data) from e

        self.state = state
        return trace.getvalue()

    def execute(self, commands: list[Command]) -> str:
        """Run already-built commands and return their trace."""
        state = self.state.copy()
        trace = TraceWriter(self.config.keywords)
        for command in commands:
            self._execute(state, trace, command)
        self.state = state
        return trace.getvalue()

    def _execute(self, state: InterpreterState, trace: TraceWriter, command: Command, force: bool = False):
        """Dispatch a command.

        ``force`` marks commands inserted by a move crossing the border; they
        are traced even though the pen is outside.
        """
        logger.debug("%s %s", "Synthetic" if force else "Command", command)
        if isinstance(command, Clear):
            self._clear(state, trace)
        elif isinstance(command, PenUpDown):
            self._pen(state, trace, command.down, force)
        elif isinstance(command, SetColor):
            self._color(state, trace, command.color, force)
        elif isinstance(command, MovePen):
            self._move(state, trace, command.offsets)
        else:
            raise UnknownCommandError(f"Unknown command: {command!r}")
        state.begin_new_line = True

    def _visible(self, state: InterpreterState) -> bool:
        return self.rect.contains(state.current_point)

    def _clear(self, state: InterpreterState, trace: TraceWriter):
        state.reset()
        trace.clear()

    def _pen(self, state: InterpreterState, trace: TraceWriter, down: bool, force: bool):
        state.pen_down = down
        visible = self._visible(state)
        if visible:
            state.last_visible_pen_down = down

        if visible or force:
            # Color changes made outside the work area are traced here
            if state.color != state.last_visible_color:
                state.last_visible_color = state.color
                self._execute(state, trace, SetColor(state.color), force=True)
            trace.pen(down)

    def _color(self, state: InterpreterState, trace: TraceWriter, color: Color, force: bool):
        state.color = color
        visible = self._visible(state)
        if visible:
            state.last_visible_color = color
        if visible or force:
            trace.color(color)

    def _move(self, state: InterpreterState, trace: TraceWriter, offsets: tuple[tuple[int, int], ...]):
        needs_terminator = False
        last = len(offsets) - 1
        for i, (dx, dy) in enumerate(offsets):
            line = Segment(state.current_point, state.current_point.offset(dx, dy))
            state.current_point = line.end

            # With the pen up only the final position matters. A pen lifted by
            # leaving the work area still counts as down until it comes back.
            drawing = state.pen_down or state.last_visible_pen_down
            if not drawing and i != last:
                continue

            clipped = clip(line, self.rect)
            if clipped is None:
                continue

            start_kept = clipped.start == line.start
            end_kept = needs_terminator = clipped.end == line.end

            if start_kept and end_kept:
                self._add_point(state, trace, line.end)
                continue

            if not start_kept:
                # Entering the work area
                self._add_point(state, trace, clipped.start)
                if state.last_visible_pen_down or state.pen_down:
                    trace.terminate()
                    self._execute(state, trace, PEN_DOWN, force=True)

            self._add_point(state, trace, clipped.end)

            if not end_kept:
                # Leaving the work area
                trace.terminate()
                self._execute(state, trace, PEN_UP, force=True)

        if needs_terminator:
            trace.terminate()

    def _add_point(self, state: InterpreterState, trace: TraceWriter, point: Point):
        if state.begin_new_line:
            trace.begin_move()
            state.begin_new_line = False
        trace.point(point)
