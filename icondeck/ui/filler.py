"""
Presentation-only filler numbers (fake icon counts, file sizes, ids).

Uses its own random generator; nothing here reads or affects catalog,
query or selection state.
"""
import random
from typing import Optional


class FillerText:
    """
    Seeded source of decorative numbers.

    Example:
        filler = FillerText(seed=7)
        filler.text("icon_count")  # "1234 icons"
    """

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def icon_count(self) -> int:
        return self._random.randrange(5000)

    def file_size_kb(self) -> int:
        return self._random.randrange(500)

    def svg_id(self) -> int:
        return self._random.randrange(9999)

    def text(self, kind: str) -> str:
        """Render one filler value for a page's filler kind."""
        if kind == "icon_count":
            return f"{self.icon_count()} icons"
        if kind == "file_size":
            return f"Vector • {self.file_size_kb()}kb"
        if kind == "svg_id":
            return f"SVG_ID: {self.svg_id()}"
        raise ValueError(f"Unknown filler kind: {kind}")
