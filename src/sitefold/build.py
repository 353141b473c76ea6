"""Static site assembly.

``build_all()`` produces the deployable site in ``config.out_dir``:

1. Copy static assets (recursive) and resume documents (flat)
2. ``index.html``: resolve fragments, sanitize, inject the form secret
3. ``resume.html`` (optional): rewrite resume links, sanitize

Only a missing ``home.html`` stops the build. Unresolved fragments, a
missing secret and missing optional inputs are logged and recorded on
the returned ``BuildReport``.
"""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from sitefold.config import BuildConfig
from sitefold.environment.exceptions import OutputError, TemplateNotFoundError
from sitefold.environment.loaders import FileSystemLoader
from sitefold.fragments import resolve_with_report
from sitefold.markup import (
    inject_secret,
    is_valid_access_key,
    rewrite_resume_links,
    sanitize,
)
from sitefold.utils.constants import (
    ACCESS_KEY_ENV,
    ACCESS_KEY_INPUT_ID,
    HOME_TEMPLATE,
    INDEX_OUTPUT,
    RESUME_OUTPUT,
    RESUME_OUTPUT_SUBDIR,
    RESUME_TEMPLATE,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BuildReport:
    """What a build produced.

    Attributes:
        out_dir: Output root
        pages: Page files written
        copied: Asset files copied
        missing_fragments: Unresolved ``(file_stem, fragment_name)`` pairs
        warnings: Operator-facing warning messages
    """

    out_dir: Path
    pages: list[Path] = field(default_factory=list)
    copied: list[Path] = field(default_factory=list)
    missing_fragments: list[tuple[str, str]] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.warnings


def _ensure_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputError(f"Cannot create directory {path}: {e}") from e


def _write_page(path: Path, html: str) -> None:
    try:
        path.write_text(html, encoding="utf-8", newline="")
    except OSError as e:
        raise OutputError(f"Cannot write {path}: {e}") from e
    logger.debug("Wrote %s", path)


def _copy_file(src: str | Path, target: Path) -> None:
    try:
        shutil.copyfile(src, target)
    except OSError as e:
        raise OutputError(f"Cannot copy {src} to {target}: {e}") from e
    logger.debug("Copied %s", target)


def _clean_output(config: BuildConfig) -> None:
    """Remove ``config.out_dir`` unless it holds one of the build inputs.

    Raises:
        OutputError: If the output directory is, or contains, the project
            root or an input directory, or cannot be removed
    """
    out_dir = config.out_dir.resolve()
    inputs = (
        config.root,
        config.templates_dir,
        config.fragments_dir,
        config.static_dir,
        config.resume_dir,
    )
    for source in inputs:
        if source.resolve().is_relative_to(out_dir):
            raise OutputError(
                f"Refusing to clean {config.out_dir}: it contains build input {source}"
            )

    logger.debug("Removing %s", config.out_dir)
    try:
        shutil.rmtree(config.out_dir)
    except OSError as e:
        raise OutputError(f"Cannot remove {config.out_dir}: {e}") from e


def copy_tree(src: Path, dest: Path) -> list[Path]:
    """Recursively copy regular files from ``src`` into ``dest``.

    Directories are recreated; symlinks and other special entries are
    skipped. Returns the destination paths of the copied files.
    """
    copied: list[Path] = []
    _ensure_dir(dest)
    with os.scandir(src) as entries:
        for entry in sorted(entries, key=lambda e: e.name):
            target = dest / entry.name
            if entry.is_dir(follow_symlinks=False):
                copied.extend(copy_tree(Path(entry.path), target))
            elif entry.is_file(follow_symlinks=False):
                _copy_file(entry.path, target)
                copied.append(target)
    return copied


def copy_files(src: Path, dest: Path) -> list[Path]:
    """Copy the regular files directly under ``src`` into ``dest``."""
    copied: list[Path] = []
    for path in sorted(src.iterdir()):
        if path.is_file():
            target = dest / path.name
            _copy_file(path, target)
            copied.append(target)
    return copied


def build_index(config: BuildConfig, report: BuildReport | None = None) -> Path:
    """Assemble ``index.html`` from ``home.html`` and its fragments.

    Raises:
        TemplateNotFoundError: If ``home.html`` is missing, unreadable or empty
    """
    home_html, _ = FileSystemLoader(config.templates_dir).get_source(HOME_TEMPLATE)

    result = resolve_with_report(home_html, FileSystemLoader(config.fragments_dir))
    html = sanitize(result.html)
    html = inject_secret(html, ACCESS_KEY_INPUT_ID, config.access_key)

    out_path = config.out_dir / INDEX_OUTPUT
    _write_page(out_path, html)

    if report is not None:
        report.pages.append(out_path)
        for file_stem, fragment_name in result.missing:
            report.missing_fragments.append((file_stem, fragment_name))
            report.warnings.append(f"Missing fragment {file_stem} :: {fragment_name}")
        if not config.access_key:
            report.warnings.append(f"{ACCESS_KEY_ENV} is not set")
        elif not is_valid_access_key(config.access_key):
            report.warnings.append(f"{ACCESS_KEY_ENV} does not look like a UUID")
    return out_path


def build_resume_page(config: BuildConfig, report: BuildReport | None = None) -> Path | None:
    """Write ``resume.html`` if its template exists; otherwise do nothing."""
    try:
        resume_html, _ = FileSystemLoader(config.templates_dir).get_source(RESUME_TEMPLATE)
    except TemplateNotFoundError:
        return None

    html = rewrite_resume_links(resume_html, config.resume_filename)
    html = sanitize(html)

    out_path = config.out_dir / RESUME_OUTPUT
    _write_page(out_path, html)
    if report is not None:
        report.pages.append(out_path)
    return out_path


def build_all(config: BuildConfig) -> BuildReport:
    """Build the whole site into ``config.out_dir``.

    Raises:
        TemplateNotFoundError: If ``home.html`` cannot be read
        OutputError: If the output directory cannot be written, or a clean
            build would remove the project's own inputs
    """
    out_dir = config.out_dir
    report = BuildReport(out_dir=out_dir)

    if config.clean and out_dir.exists():
        _clean_output(config)
    _ensure_dir(out_dir)

    if config.static_dir.is_dir():
        report.copied.extend(copy_tree(config.static_dir, out_dir))

    resume_out = out_dir / RESUME_OUTPUT_SUBDIR
    _ensure_dir(resume_out)
    if config.resume_dir.is_dir():
        report.copied.extend(copy_files(config.resume_dir, resume_out))

    build_index(config, report)
    build_resume_page(config, report)

    logger.info("Static site generated in: %s", out_dir)
    return report
