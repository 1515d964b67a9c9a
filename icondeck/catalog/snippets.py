"""
Snippet generation - text payloads referencing an icon.

Used by the detail drawer's copy actions. Name-based snippets only need
the icon name; the SVG-based ones (svg, data URL, base64, CSS) need the
icon's markup, see read_svg().
"""
import base64
import re
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from icondeck.core.config import SnippetSettings

_SEPARATORS = re.compile(r"[:\-_\s]+")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_SVG_MARKUP = re.compile(r"^\s*(<\?xml[^>]*\?>\s*)?<svg[\s>]")


class SnippetType(str, Enum):
    """Supported snippet formats."""
    NAME = "name"
    COMPONENT = "component"
    JSX = "jsx"
    IMPORT = "import"
    ICONIFY = "iconify"
    URL = "url"
    SVG = "svg"
    DATA_URL = "data_url"
    BASE64 = "base64"
    CSS = "css"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def requires_svg(self) -> bool:
        return self in _SVG_TYPES


_LABELS = {
    SnippetType.NAME: "Name",
    SnippetType.COMPONENT: "Component",
    SnippetType.JSX: "JSX",
    SnippetType.IMPORT: "Import",
    SnippetType.ICONIFY: "Iconify",
    SnippetType.URL: "URL",
    SnippetType.SVG: "SVG",
    SnippetType.DATA_URL: "Data URL",
    SnippetType.BASE64: "Base64",
    SnippetType.CSS: "CSS",
}

_SVG_TYPES = frozenset({SnippetType.SVG, SnippetType.DATA_URL, SnippetType.BASE64, SnippetType.CSS})
def to_component_name(name: str) -> str:
    """
    Convert an icon name to a PascalCase component name.

    Example:
        to_component_name("arrow-left")  # "ArrowLeft"
        to_component_name("mdi:home")    # "MdiHome"
    """
    parts = [part for part in _SEPARATORS.split(name) if part]
    return "".join(part[0].upper() + part[1:] for part in parts)


def to_kebab_name(name: str) -> str:
    """
    Convert a component-style name to kebab-case.

    Example:
        to_kebab_name("ArrowLeft")  # "arrow-left"
        to_kebab_name("Grid3x3")    # "grid3x3"
    """
    words = []
    for part in _SEPARATORS.split(name):
        if part:
            words.extend(_CAMEL_BOUNDARY.split(part))
    return "-".join(word.lower() for word in words if word)


def read_svg(renderer: Any) -> Optional[str]:
    """
    Get SVG markup from an entry renderer.

    Path renderers (SvgDirectoryIconSource) are read as UTF-8; strings
    are returned when they already hold `<svg ...>` markup. Anything else
    (components, callables) has no markup and gives None.
    """
    if isinstance(renderer, Path):
        return renderer.read_text(encoding="utf-8")
    if isinstance(renderer, str) and _SVG_MARKUP.match(renderer):
        return renderer
    return None


def svg_to_base64(svg: str) -> str:
    return base64.b64encode(svg.encode("utf-8")).decode("ascii")


def _encode_svg_for_css(svg: str) -> str:
    return (
        svg.replace("#", "%23")
        .replace("<", "%3C")
        .replace(">", "%3E")
        .replace('"', "'")
        .replace("\n", " ")
        .replace("\r", "")
    )


def svg_to_data_url(svg: str) -> str:
    """
    Encode SVG markup as a data URL.

    Picks the shorter of the base64 and the percent-escaped form.
    """
    encoded = f"data:image/svg+xml;base64,{svg_to_base64(svg)}"
    escaped = f"data:image/svg+xml,{_encode_svg_for_css(svg)}"
    return encoded if len(encoded) < len(escaped) else escaped


def generate(
    name: str,
    snippet_type: SnippetType,
    settings: Optional[SnippetSettings] = None,
    svg: Optional[str] = None,
) -> str:
    """
    Generate a snippet for an icon name.

    Args:
        name: Icon name as stored in the registry
        snippet_type: Output format
        settings: Package / iconify configuration
        svg: Icon markup, required by the SVG-based formats

    Returns:
        Snippet text

    Raises:
        ValueError: SVG-based format requested without markup
    """
    settings = settings or SnippetSettings()
    snippet_type = SnippetType(snippet_type)
    component = to_component_name(name)
    icon_id = f"{settings.iconify_prefix}:{to_kebab_name(name)}"

    if snippet_type is SnippetType.NAME:
        return name
    if snippet_type is SnippetType.COMPONENT:
        return component
    if snippet_type is SnippetType.JSX:
        return f"<{component} />"
    if snippet_type is SnippetType.IMPORT:
        return f"import {{ {component} }} from '{settings.package}';"
    if snippet_type is SnippetType.ICONIFY:
        return f'<span class="iconify" data-icon="{icon_id}"></span>'
    if snippet_type is SnippetType.URL:
        api = settings.iconify_api.rstrip("/")
        return f"{api}/{settings.iconify_prefix}/{to_kebab_name(name)}.svg"

    if svg is None:
        raise ValueError(f"{snippet_type.label} snippet for {name!r} needs SVG markup")
    if snippet_type is SnippetType.SVG:
        return svg
    if snippet_type is SnippetType.DATA_URL:
        return svg_to_data_url(svg)
    if snippet_type is SnippetType.BASE64:
        return svg_to_base64(svg)
    if snippet_type is SnippetType.CSS:
        return f"background: url('{svg_to_data_url(svg)}') no-repeat center center / contain;"

    raise ValueError(f"Unsupported snippet type: {snippet_type}")
