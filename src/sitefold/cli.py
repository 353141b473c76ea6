"""Command-line entry point.

Usage:
    sitefold build                      # Build ./public from ./src/main/resources
    sitefold build --root site --clean  # Fresh build of another checkout
    sitefold fragments                  # List every fragment a page can reference
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from sitefold import __version__
from sitefold.build import build_all
from sitefold.config import BuildConfig
from sitefold.console import setup_logging
from sitefold.environment import terminal
from sitefold.environment.exceptions import SiteBuildError, TemplateNotFoundError
from sitefold.environment.loaders import FileSystemLoader
from sitefold.fragments import list_fragment_names
from sitefold.utils.constants import DEFAULT_RESUME_FILENAME, FRAGMENT_SUFFIX

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sitefold",
        description="Inline Thymeleaf fragments into a static portfolio site",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="Build the static site")
    build.add_argument("--root", type=Path, default=Path("."), help="Project root")
    build.add_argument("--out", type=Path, help="Output directory (default: <root>/public)")
    build.add_argument(
        "--resume-file",
        default=DEFAULT_RESUME_FILENAME,
        help="Resume PDF the resume page links to",
    )
    build.add_argument("--clean", action="store_true", help="Remove output directory first")
    verbosity = build.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log every file")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings")

    fragments = sub.add_parser("fragments", help="List fragment definitions")
    fragments.add_argument("--root", type=Path, default=Path("."), help="Project root")
    return parser


def _run_build(args: argparse.Namespace) -> int:
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    setup_logging(level)

    config = BuildConfig.from_env(
        root=args.root,
        out_dir=args.out,
        resume_filename=args.resume_file,
        clean=args.clean,
    )
    report = build_all(config)

    if not args.quiet:
        mark = terminal.success("✓") if report.ok else terminal.warning("!")
        print(
            f"{mark} Built {len(report.pages)} page(s), "
            f"copied {len(report.copied)} file(s), "
            f"{len(report.warnings)} warning(s)"
        )
    return 0


def _run_fragments(args: argparse.Namespace) -> int:
    setup_logging(logging.WARNING)
    config = BuildConfig.for_root(args.root)
    loader = FileSystemLoader(config.fragments_dir)
    templates = loader.list_templates()
    if not templates:
        print(f"No fragment documents in {config.fragments_dir}")
        return 0

    for name in templates:
        stem = name.removesuffix(FRAGMENT_SUFFIX)
        try:
            source, _ = loader.get_source(name)
        except TemplateNotFoundError as e:
            logger.warning("Skipping %s: %s", name, e)
            continue
        for fragment_name in list_fragment_names(source):
            print(f"{stem} :: {fragment_name}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "build":
            return _run_build(args)
        return _run_fragments(args)
    except SiteBuildError as e:
        print(e.format_compact(), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
