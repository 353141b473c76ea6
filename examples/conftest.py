"""Fixtures for the sitefold examples.

Every example directory holds a ``site/`` project tree and an ``app.py``
exposing ``build_site(out_dir)``. The ``built_site`` fixture builds the
example next to the requesting test into its own ``tmp_path``.
"""

import runpy
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest

from sitefold import BuildReport


@dataclass(frozen=True, slots=True)
class BuiltSite:
    """Result of building one example site.

    Attributes:
        app: Globals of the example's ``app.py``
        report: What the build produced
    """

    app: dict[str, Any]
    report: BuildReport

    @property
    def out_dir(self) -> Path:
        return self.report.out_dir

    def page(self, name: str) -> str:
        """Read an output page without translating its line endings."""
        with (self.out_dir / name).open(encoding="utf-8", newline="") as f:
            return f.read()


@pytest.fixture
def built_site(request: pytest.FixtureRequest, tmp_path: Path) -> BuiltSite:
    """Build the sibling example into ``tmp_path / "public"``."""
    app = runpy.run_path(str(Path(request.path).parent / "app.py"))
    report = app["build_site"](tmp_path / "public")
    return BuiltSite(app=app, report=report)
