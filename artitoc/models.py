from dataclasses import dataclass, field
from typing import Dict, List, Union


@dataclass(frozen=True)
class TitleEvent:
    page: int
    title: str


@dataclass(frozen=True)
class AuthorEvent:
    page: int
    first: str
    last: str

    @property
    def display_name(self) -> str:
        """Index form, "Last, First"."""
        return f"{self.last}, {self.first}"

    @property
    def full_name(self) -> str:
        """Table-of-contents form, "First Last"."""
        return f"{self.first} {self.last}"


@dataclass(frozen=True)
class Unparsed:
    lineno: int
    raw: str


Event = Union[TitleEvent, AuthorEvent, Unparsed]


@dataclass
class Article:
    title: str
    page: int
    # "First Last" names in the order they were declared
    authors: List[str] = field(default_factory=list)


@dataclass
class AtocIndex:
    articles: List[Article] = field(default_factory=list)
    # "Last, First" -> pages in first-seen order, duplicates kept
    author_pages: Dict[str, List[int]] = field(default_factory=dict)
