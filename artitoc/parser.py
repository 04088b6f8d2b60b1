import re
from typing import Callable, Iterable, Iterator, List, Tuple

from .config import AUTHOR_LINE_RE, TITLE_LINE_RE
from .models import AuthorEvent, Event, TitleEvent, Unparsed


class AtocFormatError(ValueError):
    """A recognized line carries a page field that is not a number."""

    def __init__(self, lineno: int, value: str):
        super().__init__(f"line {lineno}: invalid page number {value!r}")
        self.lineno = lineno
        self.value = value


def _page(value: str, lineno: int) -> int:
    try:
        return int(value)
    except ValueError:
        raise AtocFormatError(lineno, value) from None


def _title(match: re.Match, lineno: int) -> Event:
    return TitleEvent(page=_page(match.group(1), lineno), title=match.group(2))


def _author(match: re.Match, lineno: int) -> Event:
    return AuthorEvent(
        page=_page(match.group(1), lineno),
        first=match.group(2),
        last=match.group(3),
    )


LINE_RULES: List[Tuple[re.Pattern, Callable[[re.Match, int], Event]]] = [
    (TITLE_LINE_RE, _title),
    (AUTHOR_LINE_RE, _author),
]


def parse_line(line: str, lineno: int) -> Event:
    """
    Turn one line of a .atoc file into an event.

    Rules are tried in order; a line that matches none of them comes back as
    Unparsed so the caller can report it and carry on.
    """
    text = line.rstrip("\r\n")
    for pattern, build in LINE_RULES:
        match = pattern.match(text)
        if match:
            return build(match, lineno)
    return Unparsed(lineno=lineno, raw=text)


def read_events(lines: Iterable[str], log_fn: Callable[[str], None]) -> Iterator[Event]:
    """Yield title/author events, reporting lines that could not be parsed."""
    for lineno, line in enumerate(lines, start=1):
        event = parse_line(line, lineno)
        if isinstance(event, Unparsed):
            log_fn(f"line {event.lineno}: could not parse: {event.raw}")
            continue
        yield event
