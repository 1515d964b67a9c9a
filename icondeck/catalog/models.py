"""
IconEntry Data Model.

Pydantic model for one named, renderable catalog item.
"""
from typing import Any
from pydantic import BaseModel, ConfigDict, Field


class IconEntry(BaseModel):
    """
    Data model for a single catalog icon.

    Attributes:
        name: Unique identifier within the registry
        renderer: Opaque capability that draws the glyph (component,
            callable, file path...). Never inspected by the catalog.

    Example:
        entry = IconEntry(name="ArrowLeft", renderer=arrow_left_component)
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., min_length=1, description="Unique identifier")
    renderer: Any = Field(None, description="Opaque glyph renderer")

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"IconEntry(name={self.name!r})"
