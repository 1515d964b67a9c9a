"""
Catalog Package - icon entries, sources, registry, routes and snippets.
"""
from icondeck.catalog.models import IconEntry
from icondeck.catalog.sources import (
    IconSource,
    MappingIconSource,
    ModuleIconSource,
    SvgDirectoryIconSource,
)
from icondeck.catalog.registry import IconRegistry, load_registry
from icondeck.catalog.routes import DetailView, detail_path, parse_detail_path, resolve_detail
from icondeck.catalog.snippets import (
    SnippetType,
    generate,
    read_svg,
    svg_to_base64,
    svg_to_data_url,
    to_component_name,
    to_kebab_name,
)

__all__ = [
    "IconEntry",
    "IconSource",
    "MappingIconSource",
    "ModuleIconSource",
    "SvgDirectoryIconSource",
    "IconRegistry",
    "load_registry",
    "DetailView",
    "detail_path",
    "parse_detail_path",
    "resolve_detail",
    "SnippetType",
    "generate",
    "read_svg",
    "svg_to_base64",
    "svg_to_data_url",
    "to_component_name",
    "to_kebab_name",
]
