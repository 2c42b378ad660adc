"""Constants for the pkgdocs pipeline."""

from __future__ import annotations

import re
from types import SimpleNamespace
from typing import List, Tuple

# defaults

DEFAULTS = SimpleNamespace(
    MAX_RESULTS=10,
    COMBINED_MAX_RESULTS=5,
    CONTEXT_SIZE=100,
    RESULT_CONTEXT_SIZE=200,
    SUMMARY_MAX_LENGTH=500,
)

ELLIPSIS = "..."

# labels used as SearchResult.source and as keys of labelled text blocks

SOURCE_LABELS = SimpleNamespace(
    SECTION="Section: {title}",
    INDEXED_SECTION="Section {index}: {title}",
    CODE_BLOCK="Code Block {index}",
    FUNCTION="Function {index}",
    LINE="Line {index}",
    GO_FUNCTION="Function: {name}",
    GO_TYPE="Type: {name}",
    WHOLE_DOCUMENT="Package Documentation",
)

PYDOC_SECTIONS = SimpleNamespace(
    DESCRIPTION="Description",
    FUNCTIONS="Functions",
    CLASSES="Classes",
)

# section headings

IRRELEVANT_HEADING_PATTERNS = [
    r"license",
    r"contributor",
    r"author",
    r"acknowledge?ment",
    r"changelog",
    r"release note",
    r"sponsor",
    r"donation",
    r"contributing",
    r"code[ -]of[ -]conduct",
    r"security",
]

RELEVANT_HEADING_PATTERNS = [
    r"usage",
    r"example",
    r"api",
    r"documentation",
    r"getting[ -]started",
    r"installation",
    r"quick[ -]?start",
    r"guide",
    r"tutorial",
    r"how[ -]to",
    r"features",
    r"overview",
    r"introduction",
    r"function",
    r"method",
    r"class",
    r"interface",
    r"module",
    r"package",
]

API_HEADING_PATTERNS = [
    r"api",
    r"reference",
    r"documentation",
    r"function",
    r"method",
    r"class",
    r"interface",
]

EXAMPLE_HEADING_PATTERNS = [
    r"example",
    r"usage",
    r"getting[ -]started",
    r"quick[ -]?start",
    r"tutorial",
    r"how[ -]to",
]

# levels 1 and 2 are kept unless their title is irrelevant
TOP_LEVEL_HEADING_MAX = 2

# function signatures, one entry per ecosystem, tried in order against every block

_JS_SIGNATURE = (
    r"^[ \t]*(?:export[ \t]+)?(?:default[ \t]+)?(?:async[ \t]+)?(?:"
    r"function\*?[ \t]*[A-Za-z0-9_$]+[ \t]*(?:<[^>\n]*>)?\([^)]*\)(?:[ \t]*:[ \t]*[^{=\n]+)?"
    # arrow functions only count when the parameter list is followed by =>
    r"|(?:const|let|var)[ \t]+[A-Za-z0-9_$]+[ \t]*=[ \t]*(?:async[ \t]+)?(?:<[^>\n]*>)?"
    r"\([^)]*\)(?:[ \t]*:[ \t]*[^{=\n]+)?(?=[ \t]*=>)"
    r")"
)
_PYTHON_SIGNATURE = (
    r"^[ \t]*(?:async[ \t]+)?def[ \t]+[A-Za-z0-9_]+[ \t]*\([^)]*\)"
    r"(?:[ \t]*->[ \t]*[^:\n]+)?(?=[ \t]*:)"
)
_GO_SIGNATURE = (
    r"^[ \t]*func[ \t]+(?:\([^)]*\)[ \t]*)?[A-Za-z0-9_]+[ \t]*(?:\[[^\]\n]*\])?"
    r"\([^)]*\)[ \t]*(?:\([^)]*\)|[^{\n]+)?"
)
_JAVA_SIGNATURE = (
    r"^[ \t]*(?:(?:public|private|protected)[ \t]+)?(?:(?:static|final|abstract|synchronized)[ \t]+)*"
    r"(?!(?:return|await|new|throw|else|yield|def|func|fn|function|async|const|let|var|pub)\b)"
    r"[A-Za-z0-9_<>\[\],?]+[ \t]+[A-Za-z0-9_]+[ \t]*\([^)]*\)"
)
_RUST_SIGNATURE = (
    r"^[ \t]*(?:pub(?:\([^)\n]*\))?[ \t]+)?(?:const[ \t]+)?(?:async[ \t]+)?(?:unsafe[ \t]+)?"
    r"fn[ \t]+[A-Za-z0-9_]+[ \t]*(?:<(?:[^<>\n]|<[^<>\n]*>)*>)?[ \t]*\([^)]*\)"
    r"(?:[ \t]*->[ \t]*[^{\n]+)?"
)
_SWIFT_SIGNATURE = (
    r"^[ \t]*(?:(?:public|private|internal|open|fileprivate)[ \t]+)?(?:(?:static|class)[ \t]+)?"
    r"func[ \t]+[A-Za-z0-9_]+[ \t]*(?:<[^>\n]*>)?[ \t]*\([^)]*\)"
    r"(?:[ \t]*(?:async[ \t]+)?(?:throws[ \t]+)?->[ \t]*[^{\n]+)?"
)

SIGNATURE_PATTERNS: List[Tuple[str, "re.Pattern[str]"]] = [
    ("javascript", re.compile(_JS_SIGNATURE, re.MULTILINE)),
    ("python", re.compile(_PYTHON_SIGNATURE, re.MULTILINE)),
    ("go", re.compile(_GO_SIGNATURE, re.MULTILINE)),
    ("java", re.compile(_JAVA_SIGNATURE, re.MULTILINE)),
    ("rust", re.compile(_RUST_SIGNATURE, re.MULTILINE)),
    ("swift", re.compile(_SWIFT_SIGNATURE, re.MULTILINE)),
]

# html

HTML_MAIN_CONTENT_SELECTORS = [
    "main",
    "article",
    "#content",
    ".content",
    "#main",
    ".main",
    "[role='main']",
    ".documentation",
    "#documentation",
]

HTML_CHROME_SELECTORS = "nav, header, footer, .navigation, .sidebar, .menu, .ads, .comments"

HTML_HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]

# loaders

SUPPORTED_URL_SCHEMES = ("http://", "https://")
STDIN_SOURCE = "-"
