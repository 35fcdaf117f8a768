"""Plotter commands and their wire codes."""

from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple, Union

from . import codec
from .errors import ArityError


class CommandCode(IntEnum):
    CLEAR = 0xF0
    PEN_UP_DOWN = 0x80
    SET_COLOR = 0xA0
    MOVE_PEN = 0xC0


COMMAND_CODES = frozenset(CommandCode)


class Color(NamedTuple):
    red: int
    green: int
    blue: int
    alpha: int


BLACK = Color(0, 0, 0, 0)


@dataclass(frozen=True)
class Clear:
    code = CommandCode.CLEAR

    def parameters(self) -> list[int]:
        return []


@dataclass(frozen=True)
class PenUpDown:
    down: bool
    code = CommandCode.PEN_UP_DOWN

    def parameters(self) -> list[int]:
        return [1 if self.down else 0]


@dataclass(frozen=True)
class SetColor:
    color: Color
    code = CommandCode.SET_COLOR

    def parameters(self) -> list[int]:
        return list(self.color)


@dataclass(frozen=True)
class MovePen:
    offsets: tuple[tuple[int, int], ...]
    code = CommandCode.MOVE_PEN

    def parameters(self) -> list[int]:
        return [value for offset in self.offsets for value in offset]


Command = Union[Clear, PenUpDown, SetColor, MovePen]


def build_command(code: CommandCode, parameters: list[int]) -> Command:
    """Build a command from its code and decoded parameters, checking arity."""
    count = len(parameters)
    if code == CommandCode.CLEAR and count == 0:
        return Clear()
    if code == CommandCode.PEN_UP_DOWN and count == 1:
        return PenUpDown(parameters[0] != 0)
    if code == CommandCode.SET_COLOR and count == 4:
        return SetColor(Color(*parameters))
    if code == CommandCode.MOVE_PEN and count and count % 2 == 0:
        pairs = zip(parameters[::2], parameters[1::2])
        return MovePen(tuple(pairs))
    raise ArityError(code, count)


def assemble(commands: list[Command]) -> str:
    """Encode commands into a hex instruction stream."""
    parts = []
    for command in commands:
        parts.append(f"{int(command.code):02X}")
        parts.extend(codec.encode(value) for value in command.parameters())
    return "".join(parts)
