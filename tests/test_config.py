"""Tests for configuration."""

import json

import pytest

from hexplot.commands import Color
from hexplot.config import Config, KeywordConfig, WorkAreaConfig
from hexplot.geometry import BOUNDING_SQUARE, Point, Rect
from hexplot.trace import TraceWriter


def test_default_work_area_is_bounding_square():
    assert Config().work_area.rect() == BOUNDING_SQUARE


def test_keyword_lookup_by_symbolic_name():
    keywords = KeywordConfig()
    assert keywords.lookup("pen up") == "UP"
    assert keywords.lookup("pen down") == "DOWN"
    assert keywords.lookup("set color") == "CO"
    assert keywords.lookup("Move") == "MV"
    assert keywords.lookup("clear") == "CLR"


def test_keyword_lookup_unknown():
    with pytest.raises(KeyError):
        KeywordConfig().lookup("rotate")


def test_save_and_load(config_file):
    data = json.loads(config_file.read_text())
    assert data["keywords"]["move"] == "MV"
    assert Config.load(config_file) == Config()


def test_load_partial_config(tmp_path):
    path = tmp_path / "custom.json"
    path.write_text(json.dumps({"keywords": {"clear": "CLEAR"}, "work_area": {"right": 100, "bottom": 100}}))
    config = Config.load(path)
    assert config.keywords.clear == "CLEAR"
    assert config.keywords.move == "MV"
    assert config.work_area.rect() == Rect(-8192, -8192, 100, 100)


def test_work_area_rect():
    assert WorkAreaConfig(left=0, top=0, right=10, bottom=10).rect() == Rect(0, 0, 10, 10)


def test_trace_uses_keyword_lookup():
    class UpperKeywords(KeywordConfig):
        def lookup(self, name: str) -> str:
            return name.upper()

    trace = TraceWriter(UpperKeywords())
    trace.clear()
    trace.pen(True)
    trace.color(Color(1, 2, 3, 4))
    trace.begin_move()
    trace.point(Point(5, 6))
    trace.terminate()
    assert trace.getvalue() == "CLEAR;\nPEN PEN DOWN;\nSET COLOR 1 2 3 4;\nMOVE (5, 6);"
