"""Template loaders for the sitefold build.

Loaders provide template source to the fragment resolver and page builders.
They implement `get_source(name)` returning `(source, filename)`.

Built-in Loaders:
- `FileSystemLoader`: Load from filesystem directories
- `DictLoader`: Load from in-memory dictionary (testing/embedded)

A template that exists but is empty is treated the same as a missing one,
so callers only ever need to handle `TemplateNotFoundError`.

"""

from __future__ import annotations

from difflib import get_close_matches
from pathlib import Path
from typing import Protocol

from sitefold.environment.exceptions import TemplateNotFoundError


class Loader(Protocol):
    """Anything that can hand out template source by name."""

    def get_source(self, name: str) -> tuple[str, str | None]: ...

    def list_templates(self) -> list[str]: ...

    def filename_for(self, name: str) -> str: ...


class FileSystemLoader:
    """Load templates from filesystem directories.

    Directories are searched in order; the first matching file wins.

    Example:
            >>> loader = FileSystemLoader("src/main/resources/templates/fragments")
            >>> source, filename = loader.get_source("hero.html")
            >>> print(filename)
            'src/main/resources/templates/fragments/hero.html'

    Raises:
        TemplateNotFoundError: If template is missing, unreadable or empty

    """

    __slots__ = ("_encoding", "_paths")

    def __init__(
        self,
        paths: str | Path | list[str | Path],
        encoding: str = "utf-8",
    ):
        if isinstance(paths, (str, Path)):
            paths = [paths]
        self._paths = [Path(p) for p in paths]
        self._encoding = encoding

    def filename_for(self, name: str) -> str:
        """Path the template would be read from (first search path)."""
        for base in self._paths:
            path = base / name
            if path.is_file():
                return str(path)
        return str(self._paths[0] / name) if self._paths else name

    def get_source(self, name: str) -> tuple[str, str]:
        """Load template source from filesystem."""
        for base in self._paths:
            path = base / name
            if not path.is_file():
                continue
            # newline="" keeps CRLF line endings byte-for-byte
            try:
                with path.open(encoding=self._encoding, newline="") as f:
                    source = f.read()
            except (OSError, UnicodeDecodeError) as e:
                raise TemplateNotFoundError(f"Cannot read {path}: {e}") from e
            if not source:
                raise TemplateNotFoundError(f"Template '{name}' is empty: {path}")
            return source, str(path)

        raise TemplateNotFoundError(
            f"Template '{name}' not found in: {', '.join(str(p) for p in self._paths)}"
        )

    def list_templates(self) -> list[str]:
        """List all HTML templates in search paths."""
        templates = set()
        for base in self._paths:
            if base.is_dir():
                for path in base.rglob("*.html"):
                    templates.add(path.relative_to(base).as_posix())
        return sorted(templates)


class DictLoader:
    """Load templates from an in-memory dictionary.

    Maps template names to source strings. Useful for tests and for
    callers that already hold fragment sources in memory.

    Example:
            >>> loader = DictLoader({
            ...     "hero.html": '<section th:fragment="heroBlock">Hi</section>',
            ... })
            >>> resolve(host_html, loader)

    Raises:
        TemplateNotFoundError: If template name not in mapping, or maps to ""

    """

    __slots__ = ("_mapping",)

    def __init__(self, mapping: dict[str, str]):
        self._mapping = mapping

    def filename_for(self, name: str) -> str:
        return name

    def get_source(self, name: str) -> tuple[str, None]:
        source = self._mapping.get(name)
        if source is None:
            available = sorted(self._mapping.keys())
            msg = f"Template '{name}' not found"
            matches = get_close_matches(name, available, n=1, cutoff=0.6)
            if matches:
                msg += f". Did you mean '{matches[0]}'?"
            elif available:
                msg += f". Available: {', '.join(available[:10])}"
                if len(available) > 10:
                    msg += f" ... ({len(available)} total)"
            raise TemplateNotFoundError(msg)
        if not source:
            raise TemplateNotFoundError(f"Template '{name}' is empty")
        return source, None

    def list_templates(self) -> list[str]:
        return sorted(self._mapping.keys())
