from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..errors import ValidationError, validate_number
from .bible_loader import Translation, TranslationBook
from .canon import Canon


@dataclass
class VerseRef:
    number: int
    reference: str


@dataclass
class ChapterRef:
    number: int
    reference: str
    verse_count: int
    # verse to land on: last verse when stepping back, first when stepping forward
    verse: Optional[int] = None
    book_code: Optional[str] = None
    book_name: Optional[str] = None


@dataclass
class ChapterPagination:
    prev: Optional[ChapterRef] = None
    next: Optional[ChapterRef] = None


@dataclass
class VersePagination:
    prev_verse: Optional[VerseRef] = None
    next_verse: Optional[VerseRef] = None
    prev_chapter: Optional[ChapterRef] = None
    next_chapter: Optional[ChapterRef] = None


@dataclass
class VerseText:
    verse: int
    text: str


def _chapter_ref(book: TranslationBook, number: int, **extra) -> ChapterRef:
    return ChapterRef(
        number=number,
        reference=f"{book.name} {number}",
        verse_count=len(book.chapters[number - 1]),
        **extra,
    )


def chapter_pagination(book: TranslationBook, chapter_num: int) -> ChapterPagination:
    """Neighbouring chapters inside ``book``; None at either edge of the book."""
    is_first = chapter_num == 1
    is_last = chapter_num == len(book.chapters)
    return ChapterPagination(
        prev=None if is_first else _chapter_ref(book, chapter_num - 1),
        next=None if is_last else _chapter_ref(book, chapter_num + 1),
    )


def extended_chapter_pagination(
    book: TranslationBook, chapter_num: int, translation: Translation, canon: Canon
) -> ChapterPagination:
    """Like chapter_pagination, but steps into the previous/next book at a book edge.

    Neighbouring books follow canonical order, restricted to the books the
    translation actually contains. Books missing from the canon fall back to
    translation order.
    """
    pagination = chapter_pagination(book, chapter_num)
    if pagination.prev is None:
        target = _neighbour_book(book, -1, translation, canon)
        if target is not None and target.chapters:
            pagination.prev = _chapter_ref(
                target,
                len(target.chapters),
                book_code=target.code,
                book_name=canon.name_pt(target.code) or target.name,
            )
    if pagination.next is None:
        target = _neighbour_book(book, 1, translation, canon)
        if target is not None and target.chapters:
            pagination.next = _chapter_ref(
                target,
                1,
                book_code=target.code,
                book_name=canon.name_pt(target.code) or target.name,
            )
    return pagination


def _neighbour_book(book: TranslationBook, step: int, translation: Translation, canon: Canon) -> Optional[TranslationBook]:
    by_code = {b.code.lower(): b for b in translation.books}
    if canon.index_of(book.code) is not None:
        neighbour = canon.neighbour(book.code, step, by_code)
        return by_code[neighbour.code] if neighbour else None

    position = next((i for i, b in enumerate(translation.books) if b is book), None)
    if position is None:
        return None
    position += step
    if 0 <= position < len(translation.books):
        return translation.books[position]
    return None


def verse_pagination(book: TranslationBook, chapter_num: int, verse_num: int) -> VersePagination:
    current = book.chapters[chapter_num - 1]
    is_first_verse = verse_num == 1
    is_last_verse = verse_num == len(current)
    is_first_chapter = chapter_num == 1
    is_last_chapter = chapter_num == len(book.chapters)

    pagination = VersePagination()
    if not is_first_verse:
        pagination.prev_verse = VerseRef(verse_num - 1, f"{book.name} {chapter_num}:{verse_num - 1}")
    if not is_last_verse:
        pagination.next_verse = VerseRef(verse_num + 1, f"{book.name} {chapter_num}:{verse_num + 1}")
    if is_first_verse and not is_first_chapter:
        pagination.prev_chapter = _chapter_ref(book, chapter_num - 1, verse=len(book.chapters[chapter_num - 2]))
    if is_last_verse and not is_last_chapter:
        pagination.next_chapter = _chapter_ref(book, chapter_num + 1, verse=1)
    return pagination


def filter_verses_by_range(
    chapter: List[str], from_: Optional[str] = None, to: Optional[str] = None
) -> List[VerseText]:
    from_verse = validate_number(from_, "from") if from_ else 1
    to_verse = validate_number(to, "to") if to else len(chapter)

    if from_verse > to_verse:
        raise ValidationError("'from' cannot be greater than 'to'")

    return [
        VerseText(verse=i + 1, text=chapter[i])
        for i in range(from_verse - 1, min(to_verse, len(chapter)))
    ]


def chapter_range(book: TranslationBook, from_chapter: int, to_chapter: int) -> List[Tuple[int, List[str]]]:
    if from_chapter > to_chapter:
        raise ValidationError("'from' chapter cannot be greater than 'to' chapter")
    if from_chapter < 1 or to_chapter > len(book.chapters):
        raise ValidationError(f"Chapter range {from_chapter}-{to_chapter} is invalid for book '{book.name}'")
    return [(number, book.chapters[number - 1]) for number in range(from_chapter, to_chapter + 1)]
