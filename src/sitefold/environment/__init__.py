"""Build environment: loaders, exceptions and terminal helpers."""

from sitefold.environment.exceptions import (
    ErrorCode,
    FragmentNotFoundError,
    OutputError,
    SiteBuildError,
    TemplateNotFoundError,
)
from sitefold.environment.loaders import DictLoader, FileSystemLoader, Loader

__all__ = [
    "DictLoader",
    "ErrorCode",
    "FileSystemLoader",
    "FragmentNotFoundError",
    "Loader",
    "OutputError",
    "SiteBuildError",
    "TemplateNotFoundError",
]
