"""
Icon sources - collaborators that enumerate named glyph renderers.

A source only enumerates; it never filters icon/non-icon exports and never
truncates. Both are the registry's job.
"""
import inspect
from pathlib import Path
from types import ModuleType
from typing import Any, Iterable, Iterator, Mapping, Protocol, Tuple, Union, runtime_checkable
from loguru import logger


@runtime_checkable
class IconSource(Protocol):
    """Read-only, enumerable catalog of named renderers."""

    def exports(self) -> Iterable[Tuple[str, Any]]:
        """Yield (name, renderer) pairs in enumeration order."""
        ...


class MappingIconSource:
    """
    Explicit registration table.

    Example:
        source = MappingIconSource({"Home": home_icon, "Star": star_icon})
    """

    def __init__(self, mapping: Mapping[str, Any]):
        self._mapping = dict(mapping)

    def exports(self) -> Iterator[Tuple[str, Any]]:
        yield from self._mapping.items()

    def __len__(self) -> int:
        return len(self._mapping)


class ModuleIconSource:
    """
    Enumerates the public exports of an icon module.

    Honours `__all__` when the module defines it, otherwise walks the
    module namespace in definition order. Private names and submodules
    are skipped.
    """

    def __init__(self, module: ModuleType):
        self._module = module

    def exports(self) -> Iterator[Tuple[str, Any]]:
        namespace = vars(self._module)
        names = getattr(self._module, "__all__", None)
        if names is None:
            names = list(namespace.keys())

        for name in names:
            if name.startswith("_"):
                continue
            value = namespace.get(name)
            if value is None or inspect.ismodule(value):
                continue
            yield name, value


class SvgDirectoryIconSource:
    """
    Enumerates `*.svg` files in a directory, sorted by file name.

    The icon name is the file stem, the renderer the file path.
    """

    def __init__(self, directory: Union[str, Path]):
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def exports(self) -> Iterator[Tuple[str, Path]]:
        if not self._directory.is_dir():
            raise FileNotFoundError(f"Icon directory not found: {self._directory}")

        files = sorted(self._directory.glob("*.svg"), key=lambda p: p.name)
        logger.debug(f"Found {len(files)} SVG files in {self._directory}")
        for path in files:
            yield path.stem, path
