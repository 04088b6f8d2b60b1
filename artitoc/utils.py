import os
import re
from typing import Iterable, Sequence

from .config import LATEX_ESCAPES

_QUOTES = {
    "\u201C": "``",
    "\u201D": "''",
    "\u2018": "`",
    "\u2019": "'",
}
_ESCAPE_MAP = {"\\": r"\textbackslash{}", **_QUOTES, **LATEX_ESCAPES}
_ESCAPE_RE = re.compile("|".join(re.escape(ch) for ch in _ESCAPE_MAP))


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)


def escape_latex(text: str) -> str:
    """Escape special LaTeX characters in text."""
    # Single pass, so the braces of \textbackslash{} are not escaped again
    return _ESCAPE_RE.sub(lambda m: _ESCAPE_MAP[m.group(0)], text)


def join_names(names: Sequence[str], and_text: str = ", and ", and2_text: str = " and ") -> str:
    """
    Join names as prose: "A", "A and B", "A, B, and C".

    and2_text separates exactly two names; and_text comes before the last of
    three or more, every other pair is separated by ", ".
    """
    if not names:
        return ""
    if len(names) == 1:
        return names[0]
    if len(names) == 2:
        return names[0] + and2_text + names[1]
    return ", ".join(names[:-1]) + and_text + names[-1]


def join_pages(pages: Iterable[str]) -> str:
    return ", ".join(pages)
