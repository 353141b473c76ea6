"""Sample project trees shared by the sitefold tests."""

from pathlib import Path

HOME_HTML = """<!DOCTYPE html>
<html lang="en" xmlns:th="http://www.thymeleaf.org">
<head><title th:text="${title}">Portfolio</title></head>
<body>
<div th:replace="~{fragments/header :: siteHeader}"></div>
<div th:replace="~{fragments/hero :: heroBlock}"></div>
<div th:replace="~{fragments/contact :: contactForm}"></div>
</body>
</html>
"""

HEADER_HTML = """<html xmlns:th="http://www.thymeleaf.org">
<th:block th:fragment="siteHeader">
  <header id="header"><nav><a href="#about">About</a></nav></header>
</th:block>
</html>
"""

HERO_HTML = """<html xmlns:th="http://www.thymeleaf.org">
<section class="hero" th:fragment="heroBlock" th:classappend="${x}">
  <h1>Hello</h1>
</section>
</html>
"""

CONTACT_HTML = """<html xmlns:th="http://www.thymeleaf.org">
<section id="contact" th:fragment="contactForm">
  <form action="https://api.web3forms.com/submit" method="POST">
    <input type="hidden" name="access_key" id="web3formsAccessKey">
    <input type="text" name="name">
  </form>
</section>
</html>
"""

RESUME_HTML = """<html xmlns:th="http://www.thymeleaf.org">
<body>
<iframe src="/resume" th:title="${t}"></iframe>
<a href="/resume">Open</a>
<a href="/resume?download=true">Download</a>
</body>
</html>
"""

ACCESS_KEY = "0f8fad5b-d9cb-469f-a165-70867728950e"


def write_site(root: Path, *, resume: bool = True, home: str | None = HOME_HTML) -> Path:
    """Lay out a minimal project tree under ``root``."""
    resources = root / "src" / "main" / "resources"
    templates = resources / "templates"
    fragments = templates / "fragments"
    fragments.mkdir(parents=True)

    if home is not None:
        (templates / "home.html").write_text(home, encoding="utf-8")
    if resume:
        (templates / "resume.html").write_text(RESUME_HTML, encoding="utf-8")
    (fragments / "header.html").write_text(HEADER_HTML, encoding="utf-8")
    (fragments / "hero.html").write_text(HERO_HTML, encoding="utf-8")
    (fragments / "contact.html").write_text(CONTACT_HTML, encoding="utf-8")

    css = resources / "static" / "css"
    css.mkdir(parents=True)
    (css / "style.css").write_text("body { margin: 0; }\n", encoding="utf-8")
    js = resources / "static" / "js"
    js.mkdir(parents=True)
    (js / "script.js").write_text("console.log('hi');\n", encoding="utf-8")

    pdfs = resources / "resume"
    pdfs.mkdir(parents=True)
    (pdfs / "VarshithResume.pdf").write_bytes(b"%PDF-1.4\n%%EOF\n")
    return root


def assert_contains(result: str, *expected_parts: str) -> None:
    """Assert ``result`` contains all expected parts."""
    for part in expected_parts:
        assert part in result, (
            f"Output missing expected content:\n"
            f"  Missing: {part!r}\n"
            f"  Actual: {result!r}"
        )
