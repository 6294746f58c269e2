import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..config import get_settings

logger = logging.getLogger(__name__)

DEFAULT_TRANSLATION_NAMES = {"nva": "Nova Versão de Acesso Livre (NVA)"}


@dataclass
class TranslationBook:
    code: str
    name: str
    chapters: List[List[str]]

    @property
    def total_verses(self) -> int:
        return sum(len(chapter) for chapter in self.chapters)


@dataclass
class Translation:
    key: str
    books: List[TranslationBook]


@dataclass
class TranslationInfo:
    key: str
    name: str
    language: str = "pt-BR"
    description: Optional[str] = None
    summaries: Dict[str, str] = field(default_factory=dict)


def parse_translation(key: str, data: Any) -> Translation:
    """Validate a decoded ``<key>_bible.json`` payload and build a Translation."""
    if not isinstance(data, list):
        raise ValueError(f"Translation {key} must be a list of books")
    books: List[TranslationBook] = []
    for position, raw in enumerate(data, start=1):
        if not isinstance(raw, dict):
            raise ValueError(f"Book #{position} in {key} is not an object")
        code = raw.get("code")
        name = raw.get("name")
        chapters = raw.get("chapters")
        if not isinstance(code, str) or not isinstance(name, str):
            raise ValueError(f"Book #{position} in {key} needs string 'code' and 'name'")
        if not isinstance(chapters, list) or not all(
            isinstance(chapter, list) and all(isinstance(verse, str) for verse in chapter) for chapter in chapters
        ):
            raise ValueError(f"Book {code} in {key} must hold chapters as lists of verse strings")
        books.append(TranslationBook(code=code, name=name, chapters=chapters))
    return Translation(key=key, books=books)


class BibleLoader:
    def __init__(self, assets_dir: Path | None = None):
        self.assets_dir = assets_dir or get_settings().bible_assets_path

    def list_translations(self) -> List[str]:
        if not self.assets_dir.exists():
            return []
        return sorted(
            p.name for p in self.assets_dir.iterdir() if p.is_dir() and (p / f"{p.name}_bible.json").exists()
        )

    def load_meta(self, key: str) -> Dict[str, Any]:
        meta_path = self.assets_dir / key / f"{key}_meta.json"
        meta: Dict[str, Any] = {}
        if meta_path.exists():
            with meta_path.open("r", encoding="utf-8") as f:
                meta = json.load(f)
        return meta

    def load_translation(self, key: str) -> Translation:
        data_path = self.assets_dir / key / f"{key}_bible.json"
        if not data_path.exists():
            raise FileNotFoundError(f"Bible JSON not found for translation {key}")
        logger.info("Loading translation %s from %s", key, data_path)
        with data_path.open("r", encoding="utf-8") as f:
            return parse_translation(key, json.load(f))

    def load_info(self, key: str) -> TranslationInfo:
        meta = self.load_meta(key)
        return TranslationInfo(
            key=key,
            name=meta.get("name") or DEFAULT_TRANSLATION_NAMES.get(key, key),
            language=meta.get("language") or "pt-BR",
            description=meta.get("description"),
            summaries=dict(meta.get("summaries") or {}),
        )


def iter_verses(translation: Translation) -> Iterable[Tuple[TranslationBook, int, int, str]]:
    """Yield (book, chapter, verse, text) in book, chapter, verse order."""
    for book in translation.books:
        for chapter_index, chapter in enumerate(book.chapters):
            for verse_index, text in enumerate(chapter):
                yield book, chapter_index + 1, verse_index + 1, text
