"""Exceptions for the sitefold build.

Exception Hierarchy:
SiteBuildError (base)
├── TemplateNotFoundError     # Loader cannot find or read a template
├── FragmentNotFoundError     # Fragment name absent from a fragment document
└── OutputError               # Output directory cannot be written

Only ``TemplateNotFoundError`` for the host page is fatal. Everything else
is caught inside ``build_all()`` and reported as a warning.

Example:
    ```
    S-TPL-001: Template 'home.html' not found in: src/main/resources/templates
    ```

"""

from __future__ import annotations

from enum import Enum

from sitefold.environment import terminal

# ---------------------------------------------------------------------------
# Error codes
# ---------------------------------------------------------------------------

class ErrorCode(Enum):
    """Searchable error codes for build errors.

    Format: S-{CATEGORY}-{NUMBER}
    Categories: TPL (template loading), FRG (fragment lookup), OUT (output)
    """

    # Template loading errors (S-TPL-xxx)
    TEMPLATE_NOT_FOUND = "S-TPL-001"

    # Fragment errors (S-FRG-xxx)
    FRAGMENT_NOT_FOUND = "S-FRG-001"

    # Output errors (S-OUT-xxx)
    OUTPUT_NOT_WRITABLE = "S-OUT-001"

    @property
    def category(self) -> str:
        """Error category (e.g., 'template', 'fragment', 'output')."""
        prefix = self.value.split("-")[1]
        return {
            "TPL": "template",
            "FRG": "fragment",
            "OUT": "output",
        }.get(prefix, "unknown")


class SiteBuildError(Exception):
    """Base exception for all sitefold errors.

    Enables broad exception handling at the CLI boundary:

        >>> try:
        ...     build_all(config)
        ... except SiteBuildError as e:
        ...     print(e.format_compact(), file=sys.stderr)

    Attributes:
        code: Optional ErrorCode for searchable error identification.
    """

    code: ErrorCode | None = None

    def format_compact(self) -> str:
        """Format error as a short terminal diagnostic.

        Format::

            S-TPL-001: Template 'home.html' not found in: templates

        Returns:
            The message, prefixed with the error code unless it already
            contains it.
        """
        header = str(self)
        code = self.code.value if self.code else None
        if code and code in header:
            code = None
        return terminal.format_error_header(code, header)


class TemplateNotFoundError(SiteBuildError):
    """Template not found by the configured loader.

    Raised by ``FileSystemLoader.get_source()`` when no search path holds the
    requested file, or when the file is empty.

    Example:
            >>> loader.get_source("home.html")
        TemplateNotFoundError: Template 'home.html' not found in: templates

    """

    code: ErrorCode | None = ErrorCode.TEMPLATE_NOT_FOUND


class FragmentNotFoundError(SiteBuildError):
    """No ``th:fragment`` element with the requested name.

    Attributes:
        fragment_name: The name that was searched for
        filename: Fragment document that was searched
    """

    code: ErrorCode | None = ErrorCode.FRAGMENT_NOT_FOUND

    def __init__(self, fragment_name: str, filename: str | None = None):
        self.fragment_name = fragment_name
        self.filename = filename
        where = filename or "<fragment>"
        super().__init__(f"Fragment '{fragment_name}' not found in {where}")


class OutputError(SiteBuildError):
    """Output directory or file cannot be written."""

    code: ErrorCode | None = ErrorCode.OUTPUT_NOT_WRITABLE
