"""Shared test fixtures."""

from __future__ import annotations

import pytest

from hexplot.config import Config
from hexplot.interpreter import CommandInterpreter


@pytest.fixture
def interpreter():
    return CommandInterpreter()


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "hexplot.json"
    Config().save(path)
    return path
