import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ..config import Settings, get_settings
from ..dependencies import get_registry, get_translation
from ..errors import NotFoundError, ValidationError, validate_number
from ..registry import BibleRegistry
from ..schemas import (
    BookData,
    BookInfoResponse,
    BookListItem,
    BookListResponse,
    BookSearchResponse,
    BookSearchResult,
    ChapterInfo,
    ChapterPaginationRead,
    ChapterRangeResponse,
    ChapterResponse,
    ChapterSummary,
    ErrorResponse,
    PassageResponse,
    SearchResponse,
    TranslationListResponse,
    TranslationRead,
    VerseDetail,
    VerseMatchRead,
    VersePaginationRead,
    VerseRead,
    VerseResponse,
)
from ..utils.bible_loader import Translation, TranslationBook
from ..utils.locator import find_chapter, find_verse
from ..utils.pagination import (
    chapter_pagination,
    chapter_range,
    extended_chapter_pagination,
    filter_verses_by_range,
    verse_pagination,
)
from ..utils.search import search_verses
from ..utils.verse_range import SINGLE_TOKEN, format_verse_range, format_verse_reference, parse_verse_range

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/bible",
    tags=["bible"],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)

NO_SUMMARY = "No summary available."


def translation_read(registry: BibleRegistry, key: str) -> TranslationRead:
    return TranslationRead.model_validate(registry.store.info(key))


def book_data(registry: BibleRegistry, key: str, book: TranslationBook) -> BookData:
    summaries = registry.store.info(key).summaries
    return BookData(
        code=book.code,
        name=book.name,
        name_pt=registry.canon.name_pt(book.code),
        summary=summaries.get(book.code) or NO_SUMMARY,
        chapters=len(book.chapters),
    )


def chapter_response(
    registry: BibleRegistry,
    translation: Translation,
    book: TranslationBook,
    chapter_num: int,
    verses: List[VerseRead],
    *,
    cross_books: bool,
) -> ChapterResponse:
    chapter = book.chapters[chapter_num - 1]
    if cross_books:
        pagination = extended_chapter_pagination(book, chapter_num, translation, registry.canon)
    else:
        pagination = chapter_pagination(book, chapter_num)
    return ChapterResponse(
        translation=translation_read(registry, translation.key),
        book=book_data(registry, translation.key, book),
        chapter=ChapterInfo(number=chapter_num, name=f"{book.name} {chapter_num}", total_verses=len(chapter)),
        verses=verses,
        pagination=ChapterPaginationRead.model_validate(pagination),
    )


@router.get("/translations", response_model=TranslationListResponse)
def list_translations(registry: BibleRegistry = Depends(get_registry)) -> TranslationListResponse:
    return TranslationListResponse(
        translations=[TranslationRead.model_validate(info) for info in registry.store.available()]
    )


@router.get("/books/search", response_model=BookSearchResponse)
def search_books(
    q: str = Query(..., description="Prefix of a book code, name or abbreviation"),
    registry: BibleRegistry = Depends(get_registry),
) -> BookSearchResponse:
    results = []
    for name in registry.aliases.search(q):
        code = registry.canon.code_from_name(name)
        results.append(BookSearchResult(name=name, code=code, name_pt=registry.canon.name_pt(code) if code else None))
    return BookSearchResponse(query=q, books=results)


@router.get("/{translation_key}/books", response_model=BookListResponse)
def list_books(
    translation: Translation = Depends(get_translation),
    registry: BibleRegistry = Depends(get_registry),
) -> BookListResponse:
    books = [
        BookListItem(
            code=book.code,
            name=book.name,
            name_pt=registry.canon.name_pt(book.code),
            chapters=len(book.chapters),
            aliases=sorted(registry.aliases.aliases_for(book.name)),
        )
        for book in translation.books
    ]
    return BookListResponse(translation=translation.key, books=books)


@router.get("/{translation_key}/search", response_model=SearchResponse)
def search(
    q: str = Query(..., description="Case-insensitive text to look for"),
    limit: Optional[str] = Query(None),
    translation: Translation = Depends(get_translation),
    settings: Settings = Depends(get_settings),
) -> SearchResponse:
    if not q.strip():
        raise ValidationError("Search query must not be empty")
    max_results = validate_number(limit, "limit") if limit else settings.search_default_limit

    matches = search_verses(translation, q, max_results)
    logger.debug("Search %r in %s returned %s matches", q, translation.key, len(matches))
    return SearchResponse(
        query=q,
        translation=translation.key,
        limit=max_results,
        total=len(matches),
        results=[VerseMatchRead.model_validate(match) for match in matches],
    )


@router.get("/{translation_key}/{book}", response_model=BookInfoResponse)
def read_book(
    book: str,
    translation: Translation = Depends(get_translation),
    registry: BibleRegistry = Depends(get_registry),
) -> BookInfoResponse:
    found = registry.locator.find_book(translation, book)
    return BookInfoResponse(
        translation=translation.key,
        code=found.code,
        name=found.name,
        display_name=registry.canon.name_pt(found.code) or found.name,
        chapters=[
            ChapterSummary(chapter=i + 1, name=f"{found.name} {i + 1}", verses=len(chapter))
            for i, chapter in enumerate(found.chapters)
        ],
        total_chapters=len(found.chapters),
        total_verses=found.total_verses,
    )


@router.get("/{translation_key}/{book}/chapters", response_model=ChapterRangeResponse)
def read_chapters(
    book: str,
    from_: str = Query(..., alias="from"),
    to: str = Query(...),
    translation: Translation = Depends(get_translation),
    registry: BibleRegistry = Depends(get_registry),
) -> ChapterRangeResponse:
    found = registry.locator.find_book(translation, book)
    selected = chapter_range(found, validate_number(from_, "from"), validate_number(to, "to"))
    return ChapterRangeResponse(
        translation=translation_read(registry, translation.key),
        book=book_data(registry, translation.key, found),
        chapters=[
            chapter_response(
                registry,
                translation,
                found,
                number,
                [VerseRead(verse=i + 1, text=text) for i, text in enumerate(verses)],
                cross_books=False,
            )
            for number, verses in selected
        ],
    )


@router.get("/{translation_key}/{book}/{chapter}", response_model=ChapterResponse)
def read_chapter(
    book: str,
    chapter: str,
    from_: Optional[str] = Query(None, alias="from"),
    to: Optional[str] = Query(None),
    translation: Translation = Depends(get_translation),
    registry: BibleRegistry = Depends(get_registry),
) -> ChapterResponse:
    found = registry.locator.find_book(translation, book)
    chapter_num = validate_number(chapter, "chapter")
    verses = filter_verses_by_range(find_chapter(found, chapter_num), from_, to)
    return chapter_response(
        registry,
        translation,
        found,
        chapter_num,
        [VerseRead.model_validate(v) for v in verses],
        cross_books=True,
    )


@router.get("/{translation_key}/{book}/{chapter}/{verses}", response_model=VerseResponse | PassageResponse)
def read_verses(
    book: str,
    chapter: str,
    verses: str,
    translation: Translation = Depends(get_translation),
    registry: BibleRegistry = Depends(get_registry),
) -> VerseResponse | PassageResponse:
    found = registry.locator.find_book(translation, book)
    chapter_num = validate_number(chapter, "chapter")
    chapter_verses = find_chapter(found, chapter_num)
    chapter_name = f"{found.name} {chapter_num}"

    if SINGLE_TOKEN.match(verses.strip()):
        verse_num = validate_number(verses, "verse")
        text = find_verse(chapter_verses, verse_num)
        return VerseResponse(
            translation=translation_read(registry, translation.key),
            book=book_data(registry, translation.key, found),
            chapter=ChapterInfo(number=chapter_num, name=chapter_name),
            verse=VerseDetail(number=verse_num, text=text, reference=f"{chapter_name}:{verse_num}"),
            pagination=VersePaginationRead.model_validate(verse_pagination(found, chapter_num, verse_num)),
        )

    selection = parse_verse_range(verses, max_verse=len(chapter_verses))
    if selection is None:
        raise ValidationError(f"Invalid verse range '{verses}'")
    if not selection:
        raise NotFoundError(f"Verses {verses} in chapter {chapter_name}")

    return PassageResponse(
        translation=translation_read(registry, translation.key),
        book=book_data(registry, translation.key, found),
        chapter=ChapterInfo(number=chapter_num, name=chapter_name, total_verses=len(chapter_verses)),
        reference=format_verse_reference(found.name, chapter_num, selection),
        share_path=f"/{found.code}/{chapter_num}/{format_verse_range(selection)}",
        verses=[VerseRead(verse=number, text=chapter_verses[number - 1]) for number in selection],
    )
