import pytest

from backend.reader.errors import NotFoundError
from backend.reader.utils.aliases import AliasResolver
from backend.reader.utils.bible_loader import Translation, TranslationBook
from backend.reader.utils.canon import Canon
from backend.reader.utils.locator import (
    DEFAULT_STRATEGIES,
    BookLocator,
    find_chapter,
    find_verse,
    match_alias,
    match_canon,
    match_code,
    match_name,
    match_partial,
)


@pytest.fixture(scope="module")
def locator():
    canon = Canon()
    return BookLocator(canon, AliasResolver(canon))


class TestFindBook:
    """Unit tests for BookLocator.find_book."""

    @pytest.mark.parametrize("code", ["gn", "ex", "mt", "jo"])
    def test_every_code_resolves_to_its_book(self, locator, translation, code):
        assert locator.find_book(translation, code).code == code
        assert locator.find_book(translation, code.upper()).code == code

    def test_end_to_end_lookup(self, locator, translation):
        book = locator.find_book(translation, "genesis")
        chapter = find_chapter(book, 1)
        assert find_verse(chapter, 2) == "B"

    def test_portuguese_name_and_code_return_the_same_record(self, locator, translation):
        assert locator.find_book(translation, "Gênesis") is locator.find_book(translation, "gn")

    def test_abbreviation(self, locator, translation):
        assert locator.find_book(translation, "Gen").code == "gn"
        assert locator.find_book(translation, "matt").code == "mt"

    def test_code_wins_over_alias(self, locator):
        # "jn" is Jonah's code and also a John abbreviation
        translation = Translation(
            key="t",
            books=[
                TranslationBook("jn", "Jonah", [["x"]]),
                TranslationBook("jo", "John", [["y"]]),
            ],
        )
        assert locator.find_book(translation, "jn").name == "Jonah"
        assert locator.find_book(translation, "jhn").name == "John"

    def test_canon_cross_reference_when_translation_names_differ(self, locator):
        translation = Translation(key="t", books=[TranslationBook("gn", "Livro Primeiro", [["x"]])])
        assert locator.find_book(translation, "Genesis").code == "gn"

    def test_whitespace_free_english_name(self, locator):
        translation = Translation(
            key="t",
            books=[TranslationBook("ct", "Cânticos", [["x"]]), TranslationBook("2rs", "Reis II", [["y"]])],
        )
        assert locator.find_book(translation, "songofsolomon").code == "ct"
        assert locator.find_book(translation, "SongOfSolomon").code == "ct"
        assert locator.query("2kings").canonical.code == "2rs"
        assert locator.find_book(translation, "2 Kings").code == "2rs"

    def test_partial_match(self, locator, translation):
        assert locator.find_book(translation, "exodu").code == "ex"
        assert locator.find_book(translation, "the gospel of matthew").code == "mt"

    def test_unknown_book(self, locator, translation):
        with pytest.raises(NotFoundError) as exc_info:
            locator.find_book(translation, "Zzz")
        assert exc_info.value.status_code == 404
        assert "Book 'Zzz' (searched as 'zzz') not found" == exc_info.value.message

    def test_blank_token_does_not_match_everything(self, locator, translation):
        with pytest.raises(NotFoundError):
            locator.find_book(translation, "   ")


class TestStrategies:
    """The fallback order is an explicit, ordered list."""

    def test_default_order(self):
        assert list(DEFAULT_STRATEGIES) == [match_code, match_name, match_alias, match_canon, match_partial]

    def test_each_strategy_alone(self, locator, translation):
        query = locator.query("Gênesis")
        assert match_code(query, translation) is None
        assert match_name(query, translation) is None
        assert match_alias(query, translation).code == "gn"
        assert match_canon(query, translation).code == "gn"

    def test_custom_strategy_list(self, translation):
        canon = Canon()
        only_codes = BookLocator(canon, AliasResolver(canon), strategies=[match_code])
        assert only_codes.find_book(translation, "gn").code == "gn"
        with pytest.raises(NotFoundError):
            only_codes.find_book(translation, "Genesis")


class TestChapterAndVerse:
    def test_chapter_bounds(self, translation):
        book = translation.books[0]
        assert find_chapter(book, 3) == ["G", "H"]
        with pytest.raises(NotFoundError):
            find_chapter(book, 0)
        with pytest.raises(NotFoundError):
            find_chapter(book, len(book.chapters) + 1)

    def test_verse_bounds(self, translation):
        chapter = translation.books[0].chapters[0]
        assert find_verse(chapter, 1) == "A"
        assert find_verse(chapter, 3) == "C"
        with pytest.raises(NotFoundError):
            find_verse(chapter, 0)
        with pytest.raises(NotFoundError):
            find_verse(chapter, 4)
