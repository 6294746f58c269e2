import re
from typing import List, Optional, Sequence

RANGE_TOKEN = re.compile(r"^(?P<start>\d+)-(?P<end>\d+)$", re.ASCII)
SINGLE_TOKEN = re.compile(r"^\d+$", re.ASCII)


def parse_verse_range(expr: str, max_verse: Optional[int] = None) -> Optional[List[int]]:
    """Parse "5", "5-7", "5,7,9-11" into sorted, unique verse numbers.

    Returns None for malformed input so callers can choose between a 400 and a
    404. A range token always expands to every verse it spans, even when the
    shared selection skipped some of them.

    With ``max_verse`` set, ranges stop expanding at it and single numbers above
    it are dropped, so a well-formed expression lying past the end of a chapter
    yields an empty list.
    """
    if expr is None:
        return None

    verses: List[int] = []
    for part in expr.split(","):
        token = part.strip()

        match = RANGE_TOKEN.match(token)
        if match:
            start = int(match.group("start"))
            end = int(match.group("end"))
            if start < 1 or end < start:
                return None
            if max_verse is not None:
                end = min(end, max_verse)
            verses.extend(range(start, end + 1))
            continue

        if not SINGLE_TOKEN.match(token):
            return None
        verse = int(token)
        if verse < 1:
            return None
        if max_verse is None or verse <= max_verse:
            verses.append(verse)

    return sorted(set(verses))


def format_verse_range(verses: Sequence[int]) -> str:
    """Collapse verse numbers into the expression parse_verse_range accepts."""
    parts: List[str] = []
    ordered = sorted(set(verses))
    i = 0
    while i < len(ordered):
        start = ordered[i]
        while i + 1 < len(ordered) and ordered[i + 1] == ordered[i] + 1:
            i += 1
        end = ordered[i]
        parts.append(str(start) if start == end else f"{start}-{end}")
        i += 1
    return ",".join(parts)


def format_verse_reference(book_name: str, chapter: int, verses: Sequence[int]) -> str:
    if len(verses) == 1:
        return f"{book_name} {chapter}:{verses[0]}"
    # always shown as a first-last span, matching the share link
    return f"{book_name} {chapter}:{verses[0]}-{verses[-1]}"
