"""Fragment resolution: inline ``th:replace`` placeholders into a host page.

A placeholder is an empty ``<div>`` carrying a Thymeleaf replace directive:

    <div th:replace="~{fragments/hero :: heroBlock}"></div>

It is replaced by the element in ``fragments/hero.html`` that carries
``th:fragment="heroBlock"``. A ``th:block`` wrapper contributes only its
inner content; any other tag is kept with its attributes.

Matching is a regex scan, not an HTML parse. The fragment body ends at the
first closing tag with the fragment's own tag name, so a fragment must not
nest another element with the same tag name. The first definition with a
given name wins.

Each placeholder is resolved independently in a single pass. Inlined
fragment content is never rescanned for further placeholders.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from sitefold.environment.exceptions import FragmentNotFoundError, TemplateNotFoundError
from sitefold.environment.loaders import FileSystemLoader, Loader
from sitefold.utils.constants import FRAGMENT_SUFFIX, TRANSPARENT_GROUP_TAG

logger = logging.getLogger(__name__)

_PLACEHOLDER_RE = re.compile(
    r'<div[^>]*\sth:replace="~\{fragments/(.*?)\s::\s(.*?)\}"[^>]*></div>',
    re.MULTILINE,
)

_FRAGMENT_NAME_RE = re.compile(r'\sth:fragment="([^"]*)"')


@dataclass(frozen=True, slots=True)
class ResolveResult:
    """Resolved page plus the placeholders that could not be inlined.

    Attributes:
        html: Host document with every placeholder substituted
        missing: ``(file_stem, fragment_name)`` pairs, in document order
    """

    html: str
    missing: tuple[tuple[str, str], ...] = ()


def missing_fragment_comment(file_stem: str, fragment_name: str) -> str:
    return f"<!-- Missing fragment {file_stem} :: {fragment_name} -->"


def find_placeholders(host_doc: str) -> list[tuple[str, str]]:
    """Return ``(file_stem, fragment_name)`` for each placeholder, in order."""
    return [(m.group(1), m.group(2)) for m in _PLACEHOLDER_RE.finditer(host_doc)]


def list_fragment_names(fragment_doc: str) -> list[str]:
    """Return every ``th:fragment`` name defined in a document, in order."""
    return _FRAGMENT_NAME_RE.findall(fragment_doc)


def extract_fragment(
    fragment_doc: str,
    fragment_name: str,
    filename: str | None = None,
) -> str:
    """Extract the markup for one named fragment.

    Args:
        fragment_doc: Source of the fragment document
        fragment_name: Value of the ``th:fragment`` attribute to find
        filename: Used in the error message only

    Returns:
        Inner content for a ``th:block`` wrapper, otherwise the whole
        element rebuilt from its tag, its remaining attributes and its body.

    Raises:
        FragmentNotFoundError: If no element carries that fragment name
    """
    pattern = re.compile(
        r"<([a-zA-Z0-9:]+)([^>]*?)\sth:fragment=\""
        + re.escape(fragment_name)
        + r"\"([^>]*)>([\s\S]*?)</\1>",
        re.MULTILINE,
    )
    m = pattern.search(fragment_doc)
    if m is None:
        raise FragmentNotFoundError(fragment_name, filename)

    tag, before, after, inner = m.groups()
    if tag.lower() == TRANSPARENT_GROUP_TAG:
        return inner
    return f"<{tag}{before}{after}>{inner}</{tag}>"


def _as_loader(fragments: Loader | str | Path) -> Loader:
    if isinstance(fragments, (str, Path)):
        return FileSystemLoader(fragments)
    return fragments


def resolve_with_report(host_doc: str, fragments: Loader | str | Path) -> ResolveResult:
    """Inline every placeholder and report the ones that failed.

    Args:
        host_doc: Page template containing placeholders
        fragments: Loader for fragment documents, or the fragments directory

    Returns:
        ResolveResult with the substituted page and the unresolved pairs.
        Unresolved placeholders become a ``Missing fragment`` HTML comment.
    """
    loader = _as_loader(fragments)
    missing: list[tuple[str, str]] = []

    def _substitute(match: re.Match[str]) -> str:
        file_stem, fragment_name = match.group(1), match.group(2)
        name = f"{file_stem}{FRAGMENT_SUFFIX}"
        try:
            source, filename = loader.get_source(name)
            return extract_fragment(source, fragment_name, filename)
        except (TemplateNotFoundError, FragmentNotFoundError):
            logger.warning(
                "Unable to inline fragment %s from %s",
                fragment_name,
                loader.filename_for(name),
            )
            missing.append((file_stem, fragment_name))
            return missing_fragment_comment(file_stem, fragment_name)

    html = _PLACEHOLDER_RE.sub(_substitute, host_doc)
    return ResolveResult(html=html, missing=tuple(missing))


def resolve(host_doc: str, fragments: Loader | str | Path) -> str:
    """Inline every placeholder in ``host_doc``.

    Example:
            >>> loader = DictLoader({
            ...     "hero.html": '<section class="hero" th:fragment="heroBlock">Hi</section>',
            ... })
            >>> resolve('<div th:replace="~{fragments/hero :: heroBlock}"></div>', loader)
            '<section class="hero">Hi</section>'
    """
    return resolve_with_report(host_doc, fragments).html
