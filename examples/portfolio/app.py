"""Portfolio site -- the full build on a real template tree.

Builds ``site/``: four fragments inlined into the home page, Thymeleaf
attributes stripped, the contact form key injected, and the resume page
pointed at the static PDF.

Run:
    WEB3FORMS_ACCESS_KEY=<uuid> python app.py [OUT_DIR]
"""

import os
import sys
import tempfile
from pathlib import Path

from sitefold import BuildConfig, BuildReport, build_all

SITE_ROOT = Path(__file__).parent / "site"

# Placeholder key with the shape the contact form accepts
DEMO_ACCESS_KEY = "6f1c2a3b-4d5e-4f60-8a7b-9c0d1e2f3a4b"


def build_site(out_dir: Path, access_key: str = DEMO_ACCESS_KEY) -> BuildReport:
    """Build the portfolio into ``out_dir``."""
    config = BuildConfig.for_root(SITE_ROOT, out_dir=out_dir, access_key=access_key)
    return build_all(config)


if __name__ == "__main__":
    key = os.environ.get("WEB3FORMS_ACCESS_KEY") or DEMO_ACCESS_KEY
    if len(sys.argv) > 1:
        report = build_site(Path(sys.argv[1]), key)
        print(f"Wrote {len(report.pages)} page(s) and {len(report.copied)} asset(s) to {report.out_dir}")
    else:
        with tempfile.TemporaryDirectory(prefix="sitefold-portfolio-") as tmp:
            report = build_site(Path(tmp), key)
            print((report.out_dir / "index.html").read_text(encoding="utf-8"))
