"""Text transforms applied to assembled pages.

- `sanitize`: strip Thymeleaf namespace and ``th:*`` attributes
- `inject_secret`: add a ``value`` to the contact form's access-key input
- `rewrite_resume_links`: point resume links at the statically copied PDF

All three are pure ``str -> str`` functions.
"""

from __future__ import annotations

import html
import logging
import re

from sitefold.utils.constants import (
    ACCESS_KEY_ENV,
    DEFAULT_RESUME_FILENAME,
    RESUME_OUTPUT_SUBDIR,
    TEMPLATING_PREFIX,
    THYMELEAF_NAMESPACE,
)

logger = logging.getLogger(__name__)

_NAMESPACE_RE = re.compile(r'\sxmlns:th="' + re.escape(THYMELEAF_NAMESPACE) + '"')
_TEMPLATING_ATTR_RE = re.compile(r"\s(" + re.escape(TEMPLATING_PREFIX) + r'[a-zA-Z-]+)="[^"]*"')
_VALUE_ATTR_RE = re.compile(r"\svalue\s*=", re.IGNORECASE)
_QUOTED_RE = re.compile(r"\"[^\"]*\"|'[^']*'")

# Same shape the contact form script accepts before submitting
_ACCESS_KEY_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def sanitize(doc: str) -> str:
    """Remove ``xmlns:th`` declarations and every ``th:*`` attribute.

    An attribute only matches when preceded by whitespace, so ``data-th:x``
    and attribute values that merely mention ``th:`` are left alone.
    Removal repeats until nothing matches, which makes the result stable
    under a second call.
    """
    out = doc
    while True:
        out, n_ns = _NAMESPACE_RE.subn("", out)
        out, n_attr = _TEMPLATING_ATTR_RE.subn("", out)
        if not (n_ns or n_attr):
            return out


def is_valid_access_key(value: str) -> bool:
    """True if ``value`` is a version-4 UUID, the shape the form requires."""
    return _ACCESS_KEY_RE.match(value) is not None


def _input_pattern(element_id: str) -> re.Pattern[str]:
    return re.compile(
        r'(<input\b[^>]*?\sid="' + re.escape(element_id) + r'"[^>]*?)(\s*/?>)',
        re.IGNORECASE,
    )


def _has_value_attribute(tag_open: str) -> bool:
    # Blank out quoted values so text like placeholder="a value=b" is ignored
    return _VALUE_ATTR_RE.search(_QUOTED_RE.sub('""', tag_open)) is not None


def inject_secret(doc: str, element_id: str, value: str | None) -> str:
    """Set the ``value`` attribute of the ``<input>`` with ``id=element_id``.

    Args:
        doc: Page markup
        element_id: ``id`` of the target input element
        value: Secret to inject; ``None`` or ``""`` means not configured

    Returns:
        The page with ``value="..."`` added just before the tag's closing
        bracket. The page is returned unchanged when the secret is not
        configured, the element is absent, or it already has a value.
    """
    if not value:
        logger.warning("%s is not set. Contact form will not submit.", ACCESS_KEY_ENV)
        return doc

    if not is_valid_access_key(value):
        logger.warning(
            "%s does not look like a UUID; the contact form will reject it.",
            ACCESS_KEY_ENV,
        )

    m = _input_pattern(element_id).search(doc)
    if m is None:
        logger.debug("No <input id=%r> found; secret not injected", element_id)
        return doc

    pre, end = m.group(1), m.group(2)
    if _has_value_attribute(pre):
        logger.debug("<input id=%r> already has a value; left unchanged", element_id)
        return doc

    injected = f'{pre} value="{html.escape(value, quote=True)}"{end}'
    return doc[: m.start()] + injected + doc[m.end() :]


def rewrite_resume_links(doc: str, resume_filename: str = DEFAULT_RESUME_FILENAME) -> str:
    """Point the resume page's server routes at the static PDF copy."""
    target = f"/{RESUME_OUTPUT_SUBDIR}/{resume_filename}"
    return (
        doc.replace('href="/resume?download=true"', f'href="{target}" download')
        .replace('href="/resume"', f'href="{target}"')
        .replace('src="/resume"', f'src="{target}"')
    )
