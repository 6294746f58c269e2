from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from ..errors import NotFoundError
from .aliases import AliasResolver
from .bible_loader import Translation, TranslationBook
from .canon import Canon, CanonicalBook


@dataclass(frozen=True)
class BookQuery:
    raw: str
    needle: str
    normalized: str
    canonical: Optional[CanonicalBook]


Strategy = Callable[[BookQuery, Translation], Optional[TranslationBook]]


def _first(books: Sequence[TranslationBook], predicate: Callable[[TranslationBook], bool]) -> Optional[TranslationBook]:
    return next((book for book in books if predicate(book)), None)


def match_code(query: BookQuery, translation: Translation) -> Optional[TranslationBook]:
    return _first(translation.books, lambda b: b.code.lower() == query.needle)


def match_name(query: BookQuery, translation: Translation) -> Optional[TranslationBook]:
    return _first(translation.books, lambda b: b.name.lower() == query.needle)


def match_alias(query: BookQuery, translation: Translation) -> Optional[TranslationBook]:
    return _first(translation.books, lambda b: b.name.lower() == query.normalized)


def match_canon(query: BookQuery, translation: Translation) -> Optional[TranslationBook]:
    if query.canonical is None:
        return None
    code = query.canonical.code.lower()
    return _first(translation.books, lambda b: b.code.lower() == code)


def match_partial(query: BookQuery, translation: Translation) -> Optional[TranslationBook]:
    if not query.needle:
        return None

    def contains(book: TranslationBook) -> bool:
        name = book.name.lower()
        return query.needle in name or name in query.needle

    return _first(translation.books, contains)


# Order matters: the first strategy returning a book wins.
DEFAULT_STRATEGIES: Sequence[Strategy] = (
    match_code,
    match_name,
    match_alias,
    match_canon,
    match_partial,
)


class BookLocator:
    def __init__(self, canon: Canon, aliases: AliasResolver, strategies: Sequence[Strategy] = DEFAULT_STRATEGIES):
        self.canon = canon
        self.aliases = aliases
        self.strategies: List[Strategy] = list(strategies)

    def query(self, token: str) -> BookQuery:
        needle = token.lower().strip()
        return BookQuery(
            raw=token,
            needle=needle,
            normalized=self.aliases.normalize(needle),
            canonical=self.canon.lookup(needle) or self.canon.get(self.canon.convert_to_code(needle)),
        )

    def find_book(self, translation: Translation, token: str) -> TranslationBook:
        query = self.query(token)
        for strategy in self.strategies:
            book = strategy(query, translation)
            if book is not None:
                return book
        raise NotFoundError(f"Book '{token}' (searched as '{query.normalized}')")


def find_chapter(book: TranslationBook, number: int) -> List[str]:
    if number < 1 or number > len(book.chapters):
        raise NotFoundError(f"Chapter {number} in book '{book.name}'")
    return book.chapters[number - 1]


def find_verse(chapter: List[str], number: int) -> str:
    if number < 1 or number > len(chapter):
        raise NotFoundError(f"Verse {number} in chapter")
    return chapter[number - 1]
