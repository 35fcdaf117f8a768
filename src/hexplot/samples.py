"""Sample instruction streams."""

from dataclasses import dataclass, field

from .commands import Clear, Color, Command, MovePen, PenUpDown, SetColor, assemble


@dataclass
class Sample:
    name: str
    description: str
    commands: list[Command] = field(default_factory=list)

    @property
    def data(self) -> str:
        return assemble(self.commands)


SAMPLES = {
    "clear": Sample(
        name="clear",
        description="Clear the canvas",
        commands=[Clear()],
    ),
    "square": Sample(
        name="square",
        description="Red square drawn inside the work area",
        commands=[
            Clear(),
            SetColor(Color(255, 0, 0, 255)),
            PenUpDown(True),
            MovePen(((4000, 0), (0, 4000), (-4000, 0), (0, -4000))),
            PenUpDown(False),
        ],
    ),
    "clipped": Sample(
        name="clipped",
        description="Line that leaves the work area and comes back",
        commands=[
            Clear(),
            PenUpDown(True),
            MovePen(((4000, 0), (8000, 0), (-8000, 0))),
            PenUpDown(False),
        ],
    ),
    "deferred-color": Sample(
        name="deferred-color",
        description="Color set outside the work area, traced on re-entry",
        commands=[
            Clear(),
            PenUpDown(True),
            MovePen(((6000, 0), (4000, 0))),
            SetColor(Color(0, 0, 255, 255)),
            MovePen(((-8000, 0),)),
            PenUpDown(False),
        ],
    ),
}


def get_sample(name: str) -> Sample:
    """Get a sample by name."""
    if name not in SAMPLES:
        raise KeyError(f"Unknown sample: {name}")
    return SAMPLES[name]


def list_samples() -> list[str]:
    """List available sample names."""
    return list(SAMPLES.keys())
