"""Pytest configuration and fixtures for sitefold tests."""

import logging
from pathlib import Path

import pytest

from sitefold import BuildConfig, DictLoader

from .sites import ACCESS_KEY, CONTACT_HTML, HEADER_HTML, HERO_HTML, write_site


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """A complete project tree with every optional input present."""
    return write_site(tmp_path)


@pytest.fixture
def config(site_root: Path) -> BuildConfig:
    """BuildConfig for ``site_root`` with a valid access key."""
    return BuildConfig.for_root(site_root, access_key=ACCESS_KEY)


@pytest.fixture
def fragment_loader() -> DictLoader:
    """In-memory fragment documents matching the on-disk fixture."""
    return DictLoader(
        {
            "header.html": HEADER_HTML,
            "hero.html": HERO_HTML,
            "contact.html": CONTACT_HTML,
        }
    )


@pytest.fixture(autouse=True)
def _reset_sitefold_logger():
    """Undo handler and level changes made by ``setup_logging()``."""
    logger = logging.getLogger("sitefold")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
