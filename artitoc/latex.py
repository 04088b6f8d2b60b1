from typing import Dict, List

from .config import CONJUNCTIONS, DEFAULT_LANG, PAGE_ANCHOR_PREFIX
from .models import Article
from .names import sorted_authors
from .utils import escape_latex, join_names, join_pages

DEFAULT_AND, DEFAULT_AND2 = CONJUNCTIONS[DEFAULT_LANG]


def _text(value: str, escape: bool) -> str:
    # .atoc fields are written by LaTeX and are already LaTeX source.
    return escape_latex(value) if escape else value


def page_ref(page: int, links: bool = True) -> str:
    if not links:
        return str(page)
    return rf"\hyperlink{{{PAGE_ANCHOR_PREFIX}{page}}}{{{page}}}"


def render_toc(
    articles: List[Article],
    and_text: str = DEFAULT_AND,
    and2_text: str = DEFAULT_AND2,
    escape: bool = False,
) -> str:
    """
    Render the table of contents, one \\tocTitle/\\tocAuthors pair per article.

    Articles and their authors keep input order.
    """
    lines = []
    for article in articles:
        authors = [_text(name, escape) for name in article.authors]
        lines.append(rf"  \tocTitle{{{_text(article.title, escape)}}}{{{article.page}}}")
        lines.append(rf"  \tocAuthors{{{join_names(authors, and_text, and2_text)}}}")
    return "".join(line + "\n" for line in lines)


def render_author_index(
    author_pages: Dict[str, List[int]],
    escape: bool = False,
    links: bool = True,
) -> str:
    """
    Render one tabular row per author, alphabetized by sort key:

        Doe, Jane \\dotfill & \\hyperlink{page.1}{1}, \\hyperlink{page.5}{5} \\\\

    Pages appear in the order they were first seen, repeats included.
    """
    lines = []
    for display_name, pages in sorted_authors(author_pages):
        refs = join_pages(page_ref(page, links) for page in pages)
        lines.append(rf"{_text(display_name, escape)} \dotfill & {refs} \\")
    return "".join(line + "\n" for line in lines)
