import logging
from typing import Dict, List, Mapping, Optional, Sequence, Set, Tuple

from .canon import CANONICAL_BOOKS, Canon

logger = logging.getLogger(__name__)

# Supplementary abbreviations keyed by canonical code. Codes, English names and
# Portuguese names are registered separately and need not be repeated here.
BOOK_ABBREVIATIONS: Mapping[str, Sequence[str]] = {
    # Old Testament
    "gn": ["gen", "ge"],
    "ex": ["exo", "exod"],
    "lv": ["lev", "le"],
    "nm": ["num", "nu"],
    "dt": ["deu", "deut", "de"],
    "js": ["jos", "josh", "jo"],
    "jz": ["jdg", "judg", "jg"],
    "rt": ["rut", "ru"],
    "1sm": ["1sa", "1sam", "1s", "1samuel"],
    "2sm": ["2sa", "2sam", "2s", "2samuel"],
    "1rs": ["1ki", "1kgs", "1k", "1kings", "1reis"],
    "2rs": ["2ki", "2kgs", "2k", "2kings", "2reis"],
    "1cr": ["1ch", "1chr", "1c", "1chronicles", "1crônicas", "1cronicas"],
    "2cr": ["2ch", "2chr", "2c", "2chronicles", "2crônicas", "2cronicas"],
    "ed": ["ezr", "ez"],
    "ne": ["neh"],
    "tb": ["tob", "to"],
    "jt": ["jdt", "jd"],
    "et": ["est", "es"],
    "1mc": ["1ma", "1m", "1maccabees", "1macabeus"],
    "2mc": ["2ma", "2m", "2maccabees", "2macabeus"],
    "jb": ["job"],
    "sl": ["psa", "ps", "psm", "pss", "psalm", "salmo"],
    "pv": ["pro", "prov", "pr"],
    "ec": ["ecc", "eccl", "qoh"],
    "ct": ["sng", "ss", "sos", "song", "songofsolomon", "song of songs", "cantares", "cânticos dos cânticos"],
    "sb": ["wis", "wi"],
    "eclo": ["sir", "si", "ecclesiasticus"],
    "is": ["isa"],
    "jr": ["jer", "je"],
    "lm": ["lam", "la"],
    "br": ["bar", "ba"],
    "ez": ["eze", "ezk"],
    "dn": ["dan", "da"],
    "os": ["hos", "ho", "oseias"],
    "jl": ["joe"],
    "am": ["amo", "amos"],
    "ob": ["oba", "obad"],
    "jn": ["jon"],
    "mq": ["mic", "mi", "miqueias"],
    "na": ["nah"],
    "hc": ["hab", "ha"],
    "sf": ["zep", "zeph", "ze"],
    "ag": ["hag", "hg"],
    "zc": ["zec", "zech"],
    "ml": ["mal", "ma"],
    # New Testament
    "mt": ["mat", "matt", "ma"],
    "mc": ["mrk", "mk", "mr"],
    "lc": ["luk", "lk", "lu"],
    "jo": ["joh", "jn", "jhn", "joao"],
    "at": ["act", "ac"],
    "rm": ["rom", "ro"],
    "1co": ["1cor", "1c", "1corinthians", "1coríntios"],
    "2co": ["2cor", "2c", "2corinthians", "2coríntios"],
    "gl": ["gal", "ga"],
    "ef": ["eph", "ep"],
    "fp": ["phi", "php", "phil", "ph"],
    "cl": ["col", "co"],
    "1ts": ["1th", "1thess", "1t", "1thessalonians", "1tessalonicenses"],
    "2ts": ["2th", "2thess", "2t", "2thessalonians", "2tessalonicenses"],
    "1tm": ["1ti", "1tim", "1timothy", "1timóteo"],
    "2tm": ["2ti", "2tim", "2timothy", "2timóteo"],
    "tt": ["tit", "ti"],
    "fm": ["phm", "pm", "phlm"],
    "hb": ["heb", "he"],
    "tg": ["jam", "jas", "ja"],
    "1pe": ["1pt", "1p", "1pet", "1peter", "1pedro"],
    "2pe": ["2pt", "2p", "2pet", "2peter", "2pedro"],
    "1jo": ["1jn", "1j", "1john", "1joão"],
    "2jo": ["2jn", "2j", "2john", "2joão"],
    "3jo": ["3jn", "3j", "3john", "3joão"],
    "jd": ["jud", "ju"],
    "ap": ["rev", "re", "rv", "apoc"],
}


def _key(token: str) -> str:
    return token.lower().strip()


class AliasResolver:
    """Reverse lookup from any book alias to its canonical (English) name.

    Every key is registered in canonical order: code, English name, Portuguese
    name and the supplementary abbreviations. A key registered by two books
    resolves to the last one.
    """

    def __init__(
        self,
        canon: Optional[Canon] = None,
        abbreviations: Mapping[str, Sequence[str]] = BOOK_ABBREVIATIONS,
    ):
        self.canon = canon or Canon(CANONICAL_BOOKS)
        self.abbreviations = abbreviations
        self.collisions: List[Tuple[str, str, str]] = []
        self._index: Dict[str, str] = {}

        for book in self.canon:
            name = _key(book.name_en)
            for token in self._tokens_for(book.code):
                self._register(token, name)

        if self.collisions:
            logger.warning("%s book aliases resolve to more than one book; last registration wins", len(self.collisions))
            for alias, previous, winner in self.collisions:
                logger.debug("Alias %r reassigned from %r to %r", alias, previous, winner)

        self._reverse: Dict[str, Set[str]] = {}
        for alias, name in self._index.items():
            self._reverse.setdefault(name, set()).add(alias)

    def _tokens_for(self, code: str) -> List[str]:
        book = self.canon.get(code)
        tokens = [book.code, book.name_en, book.name_pt] if book else [code]
        tokens.extend(self.abbreviations.get(code, []))
        return [_key(token) for token in tokens if token and token.strip()]

    def _register(self, alias: str, name: str) -> None:
        previous = self._index.get(alias)
        if previous is not None and previous != name:
            self.collisions.append((alias, previous, name))
        self._index[alias] = name

    def normalize(self, token: str) -> str:
        key = _key(token)
        return self._index.get(key, key)

    def is_known(self, token: str) -> bool:
        return _key(token) in self._index

    def aliases_for(self, name: str) -> Set[str]:
        target = self.normalize(name)
        return set(self._reverse.get(target, {_key(name)}))

    def search(self, prefix: str) -> List[str]:
        needle = _key(prefix)
        matches: List[str] = []
        for book in self.canon:
            if any(token.startswith(needle) for token in self._tokens_for(book.code)):
                matches.append(book.name_en)
        return matches
