"""
Page profiles - per-theme configuration for the icon browser.

Each theme page supplies only its grouping policy and interaction
flavour; the filtering/grouping/selection engine is shared.
"""
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict

from icondeck.catalog.snippets import SnippetType
from icondeck.ui.cardview.models.grouping import (
    AlphabeticalPolicy,
    FixedSlicesPolicy,
    GroupingPolicy,
)


class PageProfile(BaseModel):
    """
    Configuration of one theme page.

    Attributes:
        key: Stable identifier
        title: Display title
        route: Path the page is mounted on
        policy: Grouping policy (None for a flat grid)
        split_groups: Apply a feature split inside every group
        has_drawer: Clicking an icon opens the detail drawer
        click_copies: Snippet copied when an icon is clicked (flat pages)
        filler: Presentation-only filler kind shown next to icons
    """
    model_config = ConfigDict(frozen=True)

    key: str
    title: str
    route: str
    policy: Optional[GroupingPolicy] = None
    split_groups: bool = False
    has_drawer: bool = False
    click_copies: Optional[SnippetType] = SnippetType.NAME
    filler: Optional[str] = None


COLLECTION_HOME = PageProfile(
    key="collection_home",
    title="Icônes",
    route="/",
    policy=FixedSlicesPolicy.from_ranges(
        ("Recent", 0, 4),
        ("Material", 4, 8),
        ("UI 24px", 8, 20),
    ),
    click_copies=None,
    filler="icon_count",
)

COLLECTION_HOME2 = PageProfile(
    key="collection_home2",
    title="Icônes Weekly",
    route="/2",
    policy=FixedSlicesPolicy.from_ranges(
        ("Recent Additions", 0, 5),
        ("Material Design", 5, 10),
        ("User Interface", 10, 15),
        ("Brand Logos", 15, 20),
        ("System Icons", 20, 25),
    ),
    split_groups=True,
    click_copies=None,
)

COLLECTION_DETAIL = PageProfile(
    key="collection_detail",
    title="Collection",
    route="/collection/<name>",
    policy=AlphabeticalPolicy(),
    has_drawer=True,
    click_copies=None,
)

DAILY = PageProfile(key="daily", title="The Daily Icon", route="/daily", filler="file_size")
BAUHAUS = PageProfile(key="bauhaus", title="Bauhaus", route="/bauhaus")
CANDY = PageProfile(key="candy", title="Candy", route="/candy")
DARKROOM = PageProfile(key="darkroom", title="Darkroom", route="/darkroom")
INK = PageProfile(key="ink", title="Ink", route="/ink")
TERMINAL = PageProfile(key="terminal", title="Terminal", route="/terminal", filler="svg_id")

PAGE_PROFILES: Dict[str, PageProfile] = {
    profile.key: profile
    for profile in (
        COLLECTION_HOME,
        COLLECTION_HOME2,
        COLLECTION_DETAIL,
        DAILY,
        BAUHAUS,
        CANDY,
        DARKROOM,
        INK,
        TERMINAL,
    )
}


def get_page_profile(key: str) -> PageProfile:
    """
    Look up a page profile.

    Raises:
        KeyError: Unknown page key
    """
    try:
        return PAGE_PROFILES[key]
    except KeyError:
        raise KeyError(f"Unknown page: {key!r}") from None


def list_page_keys() -> List[str]:
    return list(PAGE_PROFILES)
