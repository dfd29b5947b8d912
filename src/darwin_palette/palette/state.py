# darwin_palette/palette/state.py
"""Session state owned by the selection state machine."""

from __future__ import annotations

from pydantic import BaseModel, Field

from darwin_palette.config.enums import PaletteStatus


class EngineState(BaseModel):
    """Open/closed flag, query, highlighted index and corpus loading flag."""

    is_open: bool = False
    query: str = ""
    selected_index: int = Field(default=-1, ge=-1, description="-1 = nothing highlighted")
    is_loading: bool = False

    model_config = {"validate_assignment": True}

    @property
    def status(self) -> PaletteStatus:
        if not self.is_open:
            return PaletteStatus.CLOSED
        if self.query.strip():
            return PaletteStatus.OPEN_QUERYING
        return PaletteStatus.OPEN_EMPTY

    def reset(self) -> None:
        """Clear the query and highlight (on close or commit)."""
        self.query = ""
        self.selected_index = -1
