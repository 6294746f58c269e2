import pytest

from backend.reader.utils.aliases import BOOK_ABBREVIATIONS, AliasResolver
from backend.reader.utils.canon import CANONICAL_BOOKS, Canon, CanonicalBook


@pytest.fixture(scope="module")
def aliases():
    return AliasResolver()


class TestCanon:
    """Unit tests for the canonical book table."""

    def test_codes_are_unique(self):
        codes = [book.code for book in CANONICAL_BOOKS]
        assert len(codes) == len(set(codes)) == 73

    def test_every_abbreviation_list_belongs_to_a_canonical_book(self):
        assert set(BOOK_ABBREVIATIONS) <= {book.code for book in CANONICAL_BOOKS}

    def test_lookup_by_code_english_and_portuguese_name(self):
        canon = Canon()
        assert canon.lookup("GN").code == "gn"
        assert canon.lookup("genesis").code == "gn"
        assert canon.lookup(" Gênesis ").code == "gn"
        assert canon.lookup("apocalipse").code == "ap"
        assert canon.lookup("nope") is None

    def test_neighbour_skips_books_not_present(self):
        canon = Canon()
        present = {"gn", "ex", "mt"}
        assert canon.neighbour("ex", 1, present).code == "mt"
        assert canon.neighbour("mt", -1, present).code == "ex"
        assert canon.neighbour("gn", -1, present) is None
        assert canon.neighbour("unknown", 1, present) is None

    def test_protestant_order_is_preserved(self):
        canon = Canon()
        assert canon.index_of("ne") < canon.index_of("et") < canon.index_of("jb")
        assert canon.index_of("ml") < canon.index_of("mt")

    def test_convert_to_code_handles_legacy_names(self):
        canon = Canon()
        assert canon.convert_to_code("gn") == "gn"
        assert canon.convert_to_code("Genesis") == "gn"
        assert canon.convert_to_code("1 samuel") == "1sm"
        assert canon.convert_to_code("songofsolomon") == "ct"
        assert canon.convert_to_code("whatever") == "whatever"


class TestAliasResolver:
    """Unit tests for alias normalization."""

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("gn", "genesis"),
            ("Gen", "genesis"),
            ("  GÊNESIS ", "genesis"),
            ("1sm", "1 samuel"),
            ("1samuel", "1 samuel"),
            ("salmos", "psalms"),
            ("ap", "revelation"),
            ("joão", "john"),
        ],
    )
    def test_normalize_known_tokens(self, aliases, token, expected):
        assert aliases.normalize(token) == expected

    def test_normalize_unknown_falls_back_to_lowercased_input(self, aliases):
        assert aliases.normalize("  Unknown Book ") == "unknown book"
        assert aliases.is_known("Unknown Book") is False

    def test_is_known(self, aliases):
        assert aliases.is_known("GN")
        assert aliases.is_known("Êxodo")

    def test_last_registration_wins_on_collision(self, aliases):
        # "jo" is a Joshua abbreviation and John's code; John comes later
        assert aliases.normalize("jo") == "john"
        # "jd" is a Judith abbreviation and Jude's code
        assert aliases.normalize("jd") == "jude"
        assert ("jo", "joshua", "john") in aliases.collisions

    def test_custom_table_collision(self):
        canon = Canon(
            [
                CanonicalBook("aa", "Alpha", "Alfa"),
                CanonicalBook("bb", "Beta", "Beta"),
            ]
        )
        resolver = AliasResolver(canon, {"aa": ["x"], "bb": ["x"]})
        assert resolver.normalize("x") == "beta"
        assert resolver.collisions == [("x", "alpha", "beta")]

    @pytest.mark.parametrize("book", CANONICAL_BOOKS, ids=lambda b: b.code)
    def test_every_alias_normalizes_like_the_book_name(self, aliases, book):
        for alias in aliases.aliases_for(book.name_en):
            assert aliases.normalize(alias) == aliases.normalize(book.name_en)

    def test_aliases_for(self, aliases):
        result = aliases.aliases_for("Genesis")
        assert {"gn", "genesis", "gênesis", "gen", "ge"} <= result
        assert aliases.aliases_for("Nothing") == {"nothing"}

    def test_search_by_prefix(self, aliases):
        assert aliases.search("gen") == ["Genesis"]
        result = aliases.search("1 c")
        assert result == ["1 Chronicles", "1 Corinthians"]

    def test_search_has_no_duplicates_and_keeps_canonical_order(self, aliases):
        result = aliases.search("j")
        assert len(result) == len(set(result))
        canon = Canon()
        positions = [canon.index_of(canon.code_from_name(name)) for name in result]
        assert positions == sorted(positions)
        assert "John" in result and "Joshua" in result
