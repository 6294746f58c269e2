"""Convert a raw translation dump into the ``<key>_bible.json`` layout the API serves.

The raw dump holds verse objects::

    {"books": [{"name": "Genesis", "chapters": [{"chapter": 1, "verses": [{"verse": 1, "text": "..."}]}]}]}

The stored layout is a list of ``{"code", "name", "chapters": [[verse, ...], ...]}``.
"""

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from backend.reader.config import get_settings
from backend.reader.utils.bible_loader import parse_translation
from backend.reader.utils.canon import CANONICAL_BOOKS, Canon

logger = logging.getLogger(__name__)

# Book titles used by the raw dumps that differ from the canonical English names.
RAW_BOOK_NAMES: Dict[str, str] = {
    "I Samuel": "1sm",
    "II Samuel": "2sm",
    "I Kings": "1rs",
    "II Kings": "2rs",
    "I Chronicles": "1cr",
    "II Chronicles": "2cr",
    "I Maccabees": "1mc",
    "II Maccabees": "2mc",
    "I Corinthians": "1co",
    "II Corinthians": "2co",
    "I Thessalonians": "1ts",
    "II Thessalonians": "2ts",
    "I Timothy": "1tm",
    "II Timothy": "2tm",
    "I Peter": "1pe",
    "II Peter": "2pe",
    "I John": "1jo",
    "II John": "2jo",
    "III John": "3jo",
    "Revelation of John": "ap",
}


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )


def resolve_code(canon: Canon, raw_name: str) -> Optional[str]:
    code = RAW_BOOK_NAMES.get(raw_name.strip())
    if code:
        return code
    book = canon.lookup(raw_name)
    return book.code if book else None


def format_chapter(raw_chapter: Dict[str, Any]) -> List[str]:
    verses = sorted(raw_chapter.get("verses") or [], key=lambda v: int(v["verse"]))
    return [str(verse["text"]).strip() for verse in verses]


def transform_translation(raw: Dict[str, Any], canon: Canon) -> List[Dict[str, Any]]:
    books = raw.get("books")
    if not isinstance(books, list):
        raise ValueError("Invalid structure: missing 'books' array")

    formatted: List[Dict[str, Any]] = []
    for raw_book in books:
        raw_name = str(raw_book.get("name", ""))
        code = resolve_code(canon, raw_name)
        if not code:
            logger.warning("Could not find code for book: %s", raw_name)
            continue
        formatted.append(
            {
                "code": code,
                "name": canon.name_en(code) or raw_name,
                "chapters": [format_chapter(chapter) for chapter in raw_book.get("chapters") or []],
            }
        )
    return formatted


def write_translation(formatted: List[Dict[str, Any]], assets_dir: Path, key: str, *, force: bool) -> Path:
    # fail early on anything the API would refuse to load
    parse_translation(key, formatted)

    target_dir = assets_dir / key
    target = target_dir / f"{key}_bible.json"
    if target.exists() and not force:
        raise SystemExit(f"{target} already exists (use --force to overwrite)")
    target_dir.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as f:
        json.dump(formatted, f, ensure_ascii=False, indent=2)
    return target


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Format a raw translation dump for the Bible API")
    parser.add_argument("--input", type=Path, required=True, help="Raw translation JSON file")
    parser.add_argument("--key", required=True, help="Translation key, e.g. nva")
    parser.add_argument("--assets-dir", type=Path, help="Override the default Bible assets directory")
    parser.add_argument("--force", action="store_true", help="Overwrite an existing formatted translation")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    configure_logging(args.verbose)

    if not args.input.exists():
        raise SystemExit(f"Input file not found: {args.input}")
    with args.input.open("r", encoding="utf-8") as f:
        raw = json.load(f)

    canon = Canon(CANONICAL_BOOKS)
    try:
        formatted = transform_translation(raw, canon)
    except ValueError as exc:
        raise SystemExit(f"Skipping {args.input}: {exc}")

    assets_dir = (args.assets_dir or get_settings().bible_assets_path).resolve()
    target = write_translation(formatted, assets_dir, args.key, force=args.force)
    logger.info("Created %s with %s books", target, len(formatted))


if __name__ == "__main__":
    main()
