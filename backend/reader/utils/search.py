from dataclasses import dataclass
from typing import List

from .bible_loader import Translation, iter_verses

DEFAULT_SEARCH_LIMIT = 20


@dataclass
class VerseMatch:
    book_code: str
    book_name: str
    chapter: int
    verse: int
    text: str
    reference: str


def search_verses(translation: Translation, query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> List[VerseMatch]:
    """Case-insensitive substring scan in book, chapter, verse order; stops at ``limit``."""
    results: List[VerseMatch] = []
    if limit < 1:
        return results

    term = query.lower()
    for book, chapter, verse, text in iter_verses(translation):
        if term not in text.lower():
            continue
        results.append(
            VerseMatch(
                book_code=book.code,
                book_name=book.name,
                chapter=chapter,
                verse=verse,
                text=text,
                reference=f"{book.name} {chapter}:{verse}",
            )
        )
        if len(results) >= limit:
            break
    return results
