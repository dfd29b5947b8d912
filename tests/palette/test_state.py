# tests/palette/test_state.py
"""Tests for the session state model."""

import pytest
from pydantic import ValidationError

from darwin_palette.config.enums import PaletteStatus
from darwin_palette.palette.state import EngineState


def test_initial_state():
    state = EngineState()
    assert state.status is PaletteStatus.CLOSED
    assert state.selected_index == -1
    assert state.is_loading is False


def test_status_follows_query():
    state = EngineState(is_open=True)
    assert state.status is PaletteStatus.OPEN_EMPTY
    state.query = "asma"
    assert state.status is PaletteStatus.OPEN_QUERYING
    state.query = "   "
    assert state.status is PaletteStatus.OPEN_EMPTY


def test_selected_index_lower_bound():
    state = EngineState()
    with pytest.raises(ValidationError):
        state.selected_index = -2


def test_reset():
    state = EngineState(is_open=True, query="asma", selected_index=3)
    state.reset()
    assert state.query == ""
    assert state.selected_index == -1
    assert state.is_open is True
