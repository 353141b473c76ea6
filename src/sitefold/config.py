"""Build configuration.

Every path and the contact-form secret live on one frozen ``BuildConfig``.
The environment is read only in ``BuildConfig.from_env()``; everything
downstream receives the config explicitly.

Example:
    >>> config = BuildConfig.from_env(root="~/sites/portfolio")
    >>> config.out_dir
    PosixPath('/home/me/sites/portfolio/public')
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from sitefold.utils.constants import (
    ACCESS_KEY_ENV,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_RESUME_FILENAME,
    FRAGMENTS_SUBDIR,
    RESOURCES_DIR,
)


@dataclass(frozen=True, slots=True)
class BuildConfig:
    """Paths and settings for one build.

    Use ``for_root()`` or ``from_env()`` rather than the constructor; they
    derive the directory layout from the project root.

    Attributes:
        root: Project root
        templates_dir: Holds ``home.html`` and optional ``resume.html``
        fragments_dir: Fragment documents referenced by placeholders
        static_dir: Copied recursively into ``out_dir``
        resume_dir: Files copied into ``out_dir/resume``
        out_dir: Build output
        access_key: Contact form secret, ``None`` when not configured
        resume_filename: PDF the resume page links to
        clean: Remove ``out_dir`` before building
    """

    root: Path
    templates_dir: Path
    fragments_dir: Path
    static_dir: Path
    resume_dir: Path
    out_dir: Path
    access_key: str | None = None
    resume_filename: str = DEFAULT_RESUME_FILENAME
    clean: bool = False

    @classmethod
    def for_root(cls, root: str | Path = ".", **overrides: Any) -> BuildConfig:
        """Config with every directory derived from ``root``.

        Any keyword overrides the derived value. Overriding ``templates_dir``
        also moves the default ``fragments_dir`` along with it.
        """
        root = Path(root).expanduser()
        resources = root.joinpath(*RESOURCES_DIR)
        templates = Path(overrides.pop("templates_dir", None) or resources / "templates")
        paths = {
            "fragments_dir": templates / FRAGMENTS_SUBDIR,
            "static_dir": resources / "static",
            "resume_dir": resources / "resume",
            "out_dir": root / DEFAULT_OUTPUT_DIR,
        }
        for name in paths:
            if overrides.get(name) is not None:
                paths[name] = Path(overrides.pop(name))
            else:
                overrides.pop(name, None)
        if "access_key" in overrides:
            overrides["access_key"] = overrides["access_key"] or None
        return cls(root=root, templates_dir=templates, **paths, **overrides)

    @classmethod
    def from_env(
        cls,
        root: str | Path = ".",
        environ: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> BuildConfig:
        """Config for ``root`` with the secret read from the environment.

        An empty ``WEB3FORMS_ACCESS_KEY`` counts as unset. An explicit
        ``access_key`` override wins over the environment.
        """
        env = os.environ if environ is None else environ
        if overrides.get("access_key") is None:
            overrides["access_key"] = env.get(ACCESS_KEY_ENV) or None
        return cls.for_root(root, **overrides)
