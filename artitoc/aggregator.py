from typing import Iterable, Optional

from .models import Article, AtocIndex, AuthorEvent, Event, TitleEvent


class AtocCollector:
    """Accumulates articles and author pages from a stream of events."""

    def __init__(self, index: Optional[AtocIndex] = None):
        self.index = index if index is not None else AtocIndex()

    @property
    def current_article(self) -> Optional[Article]:
        return self.index.articles[-1] if self.index.articles else None

    def on_title(self, page: int, title: str) -> Article:
        article = Article(title=title, page=page)
        self.index.articles.append(article)
        return article

    def on_author(self, page: int, first: str, last: str) -> None:
        event = AuthorEvent(page=page, first=first, last=last)
        self.index.author_pages.setdefault(event.display_name, []).append(page)
        article = self.current_article
        # Authors seen before any title still go into the index, not the TOC.
        if article is not None:
            article.authors.append(event.full_name)

    def feed(self, event: Event) -> None:
        if isinstance(event, TitleEvent):
            self.on_title(event.page, event.title)
        elif isinstance(event, AuthorEvent):
            self.on_author(event.page, event.first, event.last)

    def collect(self, events: Iterable[Event]) -> AtocIndex:
        for event in events:
            self.feed(event)
        return self.index
