"""sitefold — build a static portfolio site from Thymeleaf templates.

Inlines ``th:replace`` fragment placeholders into the home page, strips
Thymeleaf attributes, injects the contact form secret, and copies static
assets and resume documents into a deployable output directory.

Quickstart:
    >>> from sitefold import BuildConfig, build_all
    >>> report = build_all(BuildConfig.from_env(root="."))
    >>> report.pages
    [PosixPath('public/index.html'), PosixPath('public/resume.html')]

Single page:
    >>> from sitefold import DictLoader, resolve, sanitize
    >>> loader = DictLoader({"hero.html": '<th:block th:fragment="hi">Hi</th:block>'})
    >>> sanitize(resolve('<div th:replace="~{fragments/hero :: hi}"></div>', loader))
    'Hi'

Pipeline:
home.html → resolve → sanitize → inject_secret → public/index.html
resume.html → rewrite_resume_links → sanitize → public/resume.html

"""

from sitefold.build import BuildReport, build_all, build_index, build_resume_page
from sitefold.config import BuildConfig
from sitefold.environment import (
    DictLoader,
    ErrorCode,
    FileSystemLoader,
    FragmentNotFoundError,
    OutputError,
    SiteBuildError,
    TemplateNotFoundError,
)
from sitefold.fragments import (
    ResolveResult,
    extract_fragment,
    find_placeholders,
    list_fragment_names,
    resolve,
    resolve_with_report,
)
from sitefold.markup import inject_secret, rewrite_resume_links, sanitize

__version__ = "0.1.0"

__all__ = [
    "BuildConfig",
    "BuildReport",
    "DictLoader",
    "ErrorCode",
    "FileSystemLoader",
    "FragmentNotFoundError",
    "OutputError",
    "ResolveResult",
    "SiteBuildError",
    "TemplateNotFoundError",
    "build_all",
    "build_index",
    "build_resume_page",
    "extract_fragment",
    "find_placeholders",
    "inject_secret",
    "list_fragment_names",
    "resolve",
    "resolve_with_report",
    "rewrite_resume_links",
    "sanitize",
]
