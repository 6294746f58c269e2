from dataclasses import dataclass
from typing import Container, Dict, Iterator, List, Optional, Sequence


@dataclass(frozen=True)
class CanonicalBook:
    code: str
    name_en: str
    name_pt: str


# Canonical order. The deuterocanonical books sit at their Catholic positions so
# the 66-book order is preserved when they are absent from a translation.
CANONICAL_BOOKS: Sequence[CanonicalBook] = (
    CanonicalBook("gn", "Genesis", "Gênesis"),
    CanonicalBook("ex", "Exodus", "Êxodo"),
    CanonicalBook("lv", "Leviticus", "Levítico"),
    CanonicalBook("nm", "Numbers", "Números"),
    CanonicalBook("dt", "Deuteronomy", "Deuteronômio"),
    CanonicalBook("js", "Joshua", "Josué"),
    CanonicalBook("jz", "Judges", "Juízes"),
    CanonicalBook("rt", "Ruth", "Rute"),
    CanonicalBook("1sm", "1 Samuel", "1 Samuel"),
    CanonicalBook("2sm", "2 Samuel", "2 Samuel"),
    CanonicalBook("1rs", "1 Kings", "1 Reis"),
    CanonicalBook("2rs", "2 Kings", "2 Reis"),
    CanonicalBook("1cr", "1 Chronicles", "1 Crônicas"),
    CanonicalBook("2cr", "2 Chronicles", "2 Crônicas"),
    CanonicalBook("ed", "Ezra", "Esdras"),
    CanonicalBook("ne", "Nehemiah", "Neemias"),
    CanonicalBook("tb", "Tobit", "Tobias"),
    CanonicalBook("jt", "Judith", "Judite"),
    CanonicalBook("et", "Esther", "Ester"),
    CanonicalBook("1mc", "1 Maccabees", "1 Macabeus"),
    CanonicalBook("2mc", "2 Maccabees", "2 Macabeus"),
    CanonicalBook("jb", "Job", "Jó"),
    CanonicalBook("sl", "Psalms", "Salmos"),
    CanonicalBook("pv", "Proverbs", "Provérbios"),
    CanonicalBook("ec", "Ecclesiastes", "Eclesiastes"),
    CanonicalBook("ct", "Song of Solomon", "Cânticos"),
    CanonicalBook("sb", "Wisdom", "Sabedoria"),
    CanonicalBook("eclo", "Sirach", "Eclesiástico"),
    CanonicalBook("is", "Isaiah", "Isaías"),
    CanonicalBook("jr", "Jeremiah", "Jeremias"),
    CanonicalBook("lm", "Lamentations", "Lamentações"),
    CanonicalBook("br", "Baruch", "Baruque"),
    CanonicalBook("ez", "Ezekiel", "Ezequiel"),
    CanonicalBook("dn", "Daniel", "Daniel"),
    CanonicalBook("os", "Hosea", "Oséias"),
    CanonicalBook("jl", "Joel", "Joel"),
    CanonicalBook("am", "Amos", "Amós"),
    CanonicalBook("ob", "Obadiah", "Obadias"),
    CanonicalBook("jn", "Jonah", "Jonas"),
    CanonicalBook("mq", "Micah", "Miquéias"),
    CanonicalBook("na", "Nahum", "Naum"),
    CanonicalBook("hc", "Habakkuk", "Habacuque"),
    CanonicalBook("sf", "Zephaniah", "Sofonias"),
    CanonicalBook("ag", "Haggai", "Ageu"),
    CanonicalBook("zc", "Zechariah", "Zacarias"),
    CanonicalBook("ml", "Malachi", "Malaquias"),
    CanonicalBook("mt", "Matthew", "Mateus"),
    CanonicalBook("mc", "Mark", "Marcos"),
    CanonicalBook("lc", "Luke", "Lucas"),
    CanonicalBook("jo", "John", "João"),
    CanonicalBook("at", "Acts", "Atos"),
    CanonicalBook("rm", "Romans", "Romanos"),
    CanonicalBook("1co", "1 Corinthians", "1 Coríntios"),
    CanonicalBook("2co", "2 Corinthians", "2 Coríntios"),
    CanonicalBook("gl", "Galatians", "Gálatas"),
    CanonicalBook("ef", "Ephesians", "Efésios"),
    CanonicalBook("fp", "Philippians", "Filipenses"),
    CanonicalBook("cl", "Colossians", "Colossenses"),
    CanonicalBook("1ts", "1 Thessalonians", "1 Tessalonicenses"),
    CanonicalBook("2ts", "2 Thessalonians", "2 Tessalonicenses"),
    CanonicalBook("1tm", "1 Timothy", "1 Timóteo"),
    CanonicalBook("2tm", "2 Timothy", "2 Timóteo"),
    CanonicalBook("tt", "Titus", "Tito"),
    CanonicalBook("fm", "Philemon", "Filemom"),
    CanonicalBook("hb", "Hebrews", "Hebreus"),
    CanonicalBook("tg", "James", "Tiago"),
    CanonicalBook("1pe", "1 Peter", "1 Pedro"),
    CanonicalBook("2pe", "2 Peter", "2 Pedro"),
    CanonicalBook("1jo", "1 John", "1 João"),
    CanonicalBook("2jo", "2 John", "2 João"),
    CanonicalBook("3jo", "3 John", "3 João"),
    CanonicalBook("jd", "Jude", "Judas"),
    CanonicalBook("ap", "Revelation", "Apocalipse"),
)


class Canon:
    """Read-only view over the canonical book table."""

    def __init__(self, books: Sequence[CanonicalBook] = CANONICAL_BOOKS):
        self.books = tuple(books)
        self._by_code: Dict[str, CanonicalBook] = {book.code: book for book in self.books}
        self._position: Dict[str, int] = {book.code: i for i, book in enumerate(self.books)}

    def __iter__(self) -> Iterator[CanonicalBook]:
        return iter(self.books)

    def __len__(self) -> int:
        return len(self.books)

    def codes(self) -> List[str]:
        return [book.code for book in self.books]

    def get(self, code: str) -> Optional[CanonicalBook]:
        return self._by_code.get(code.lower())

    def lookup(self, token: str) -> Optional[CanonicalBook]:
        """Exact, case-insensitive match on code, English name or Portuguese name."""
        needle = token.lower().strip()
        for book in self.books:
            if needle in (book.code.lower(), book.name_en.lower(), book.name_pt.lower()):
                return book
        return None

    def index_of(self, code: str) -> Optional[int]:
        return self._position.get(code.lower())

    def neighbour(self, code: str, step: int, present: Container[str]) -> Optional[CanonicalBook]:
        """Nearest book before (step=-1) or after (step=1) ``code`` whose code is in ``present``."""
        position = self.index_of(code)
        if position is None:
            return None
        position += step
        while 0 <= position < len(self.books):
            candidate = self.books[position]
            if candidate.code in present:
                return candidate
            position += step
        return None

    def name_en(self, code: str) -> Optional[str]:
        book = self.get(code)
        return book.name_en if book else None

    def name_pt(self, code: str) -> Optional[str]:
        book = self.get(code)
        return book.name_pt if book else None

    def is_valid_code(self, code: str) -> bool:
        return code in self._by_code

    def code_from_name(self, name: str) -> Optional[str]:
        normalized = name.lower()
        for book in self.books:
            if book.name_en.lower() == normalized:
                return book.code
        return None

    def convert_to_code(self, param: str) -> str:
        """Map a legacy URL book parameter to a code, returning it unchanged when unknown."""
        if self.is_valid_code(param):
            return param
        code = self.code_from_name(param)
        if code:
            return code
        compact = "".join(param.lower().split())
        for book in self.books:
            if book.name_en.lower().replace(" ", "") == compact:
                return book.code
        return param
