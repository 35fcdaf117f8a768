"""Configuration management."""

import json
from pathlib import Path

from pydantic import BaseModel

from .codec import MAX_VALUE, MIN_VALUE
from .geometry import Rect


class KeywordConfig(BaseModel):
    """Keyword strings used in the trace output."""

    clear: str = "CLR"
    pen: str = "PEN"
    pen_up: str = "UP"
    pen_down: str = "DOWN"
    set_color: str = "CO"
    move: str = "MV"

    def lookup(self, name: str) -> str:
        """Look up a keyword by its symbolic name, e.g. "pen up"."""
        key = name.strip().lower().replace(" ", "_")
        if key not in type(self).model_fields:
            raise KeyError(name)
        return getattr(self, key)


class WorkAreaConfig(BaseModel):
    left: int = MIN_VALUE
    top: int = MIN_VALUE
    right: int = MAX_VALUE
    bottom: int = MAX_VALUE

    def rect(self) -> Rect:
        return Rect(self.left, self.top, self.right, self.bottom)


class Config(BaseModel):
    keywords: KeywordConfig = KeywordConfig()
    work_area: WorkAreaConfig = WorkAreaConfig()

    @classmethod
    def load(cls, path: str | Path = "configs/hexplot.json") -> "Config":
        with open(path) as f:
            return cls(**json.load(f))

    def save(self, path: str | Path = "configs/hexplot.json"):
        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=4)
