"""Marker literals shared by the sitefold build.

These must match the existing Thymeleaf templates exactly.
"""

from __future__ import annotations

# Templating namespace and attribute prefix stripped from output
THYMELEAF_NAMESPACE = "http://www.thymeleaf.org"
TEMPLATING_PREFIX = "th:"

# Wrapper tag whose own open/close tags are dropped on extraction
TRANSPARENT_GROUP_TAG = "th:block"

# Placeholder targets live under this subdirectory of the templates dir
FRAGMENTS_SUBDIR = "fragments"
FRAGMENT_SUFFIX = ".html"

# Contact form secret
ACCESS_KEY_ENV = "WEB3FORMS_ACCESS_KEY"
ACCESS_KEY_INPUT_ID = "web3formsAccessKey"

# Page templates
HOME_TEMPLATE = "home.html"
RESUME_TEMPLATE = "resume.html"
INDEX_OUTPUT = "index.html"
RESUME_OUTPUT = "resume.html"
RESUME_OUTPUT_SUBDIR = "resume"
DEFAULT_RESUME_FILENAME = "VarshithResume.pdf"

# Source tree layout relative to the project root
RESOURCES_DIR = ("src", "main", "resources")
DEFAULT_OUTPUT_DIR = "public"
