from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    error: str
    code: str
    status_code: int


class HealthResponse(BaseModel):
    status: str
    cached_translations: int


class TranslationRead(BaseModel):
    key: str
    name: str
    language: str
    description: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class TranslationListResponse(BaseModel):
    translations: List[TranslationRead]


class BookData(BaseModel):
    code: str
    name: str
    name_pt: Optional[str] = None
    summary: str
    chapters: int


class BookListItem(BaseModel):
    code: str
    name: str
    name_pt: Optional[str] = None
    chapters: int
    aliases: List[str] = Field(default_factory=list)


class BookListResponse(BaseModel):
    translation: str
    books: List[BookListItem]


class BookSearchResult(BaseModel):
    name: str
    code: Optional[str] = None
    name_pt: Optional[str] = None


class BookSearchResponse(BaseModel):
    query: str
    books: List[BookSearchResult]


class ChapterSummary(BaseModel):
    chapter: int
    name: str
    verses: int


class BookInfoResponse(BaseModel):
    translation: str
    code: str
    name: str
    display_name: str
    chapters: List[ChapterSummary]
    total_chapters: int
    total_verses: int


class VerseRead(BaseModel):
    verse: int
    text: str

    model_config = ConfigDict(from_attributes=True)


class ChapterInfo(BaseModel):
    number: int
    name: str
    total_verses: Optional[int] = None


class VerseRefRead(BaseModel):
    number: int
    reference: str

    model_config = ConfigDict(from_attributes=True)


class ChapterRefRead(BaseModel):
    number: int
    reference: str
    verse_count: int
    verse: Optional[int] = None
    book_code: Optional[str] = None
    book_name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class ChapterPaginationRead(BaseModel):
    prev: Optional[ChapterRefRead] = None
    next: Optional[ChapterRefRead] = None

    model_config = ConfigDict(from_attributes=True)


class VersePaginationRead(BaseModel):
    prev_verse: Optional[VerseRefRead] = None
    next_verse: Optional[VerseRefRead] = None
    prev_chapter: Optional[ChapterRefRead] = None
    next_chapter: Optional[ChapterRefRead] = None

    model_config = ConfigDict(from_attributes=True)


class ChapterResponse(BaseModel):
    translation: TranslationRead
    book: BookData
    chapter: ChapterInfo
    verses: List[VerseRead]
    pagination: ChapterPaginationRead


class ChapterRangeResponse(BaseModel):
    translation: TranslationRead
    book: BookData
    chapters: List[ChapterResponse]


class VerseDetail(BaseModel):
    number: int
    text: str
    reference: str


class VerseResponse(BaseModel):
    translation: TranslationRead
    book: BookData
    chapter: ChapterInfo
    verse: VerseDetail
    pagination: VersePaginationRead


class PassageResponse(BaseModel):
    translation: TranslationRead
    book: BookData
    chapter: ChapterInfo
    reference: str
    share_path: str
    verses: List[VerseRead]


class VerseMatchRead(BaseModel):
    book_code: str
    book_name: str
    chapter: int
    verse: int
    text: str
    reference: str

    model_config = ConfigDict(from_attributes=True)


class SearchResponse(BaseModel):
    query: str
    translation: str
    limit: int
    total: int
    results: List[VerseMatchRead]
