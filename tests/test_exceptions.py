"""Tests for the exception hierarchy and error codes."""

import pytest

from sitefold.environment import terminal
from sitefold.environment.exceptions import (
    ErrorCode,
    FragmentNotFoundError,
    OutputError,
    SiteBuildError,
    TemplateNotFoundError,
)


@pytest.fixture(autouse=True)
def _no_colors(monkeypatch):
    monkeypatch.setattr(terminal, "_USE_COLORS", False)


@pytest.mark.parametrize(
    ("code", "category"),
    [
        (ErrorCode.TEMPLATE_NOT_FOUND, "template"),
        (ErrorCode.FRAGMENT_NOT_FOUND, "fragment"),
        (ErrorCode.OUTPUT_NOT_WRITABLE, "output"),
    ],
)
def test_error_code_category(code, category) -> None:
    assert code.category == category


@pytest.mark.parametrize(
    "exc_type", [TemplateNotFoundError, FragmentNotFoundError, OutputError]
)
def test_all_errors_share_base(exc_type) -> None:
    assert issubclass(exc_type, SiteBuildError)


def test_format_compact_is_one_line_with_code() -> None:
    err = TemplateNotFoundError("Template 'home.html' not found in: templates")
    assert err.format_compact() == "S-TPL-001: Template 'home.html' not found in: templates"
    assert "http" not in err.format_compact()


def test_format_compact_without_code() -> None:
    assert SiteBuildError("boom").format_compact() == "boom"


def test_format_compact_does_not_repeat_code() -> None:
    err = OutputError("S-OUT-001 cannot write")
    assert err.format_compact().splitlines()[0] == "S-OUT-001 cannot write"


def test_fragment_not_found_message() -> None:
    err = FragmentNotFoundError("heroBlock", "fragments/hero.html")
    assert str(err) == "Fragment 'heroBlock' not found in fragments/hero.html"
    assert err.filename == "fragments/hero.html"
    assert str(FragmentNotFoundError("x")) == "Fragment 'x' not found in <fragment>"
