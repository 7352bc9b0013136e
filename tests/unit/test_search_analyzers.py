"""Unit tests for the standard, keyword and simple analyzers."""

import pytest

from resource_search.search.analyzers import (
    KeywordAnalyzer,
    LetterTokenizer,
    LowercaseFilter,
    RegexTokenizer,
    SimpleAnalyzer,
    StandardAnalyzer,
    StopFilter,
    Token,
    get_analyzer,
)


def _texts(tokens):
    return [token.text for token in tokens]


@pytest.mark.unit
class TestStandardAnalyzer:
    """Word tokens, lower-cased, stop words removed."""

    def test_lowercases_and_splits_words(self):
        assert _texts(StandardAnalyzer()("Prod Web Server")) == ["prod", "web", "server"]

    def test_drops_stopwords_and_renumbers_positions(self):
        tokens = StandardAnalyzer()("the web of things")

        assert _texts(tokens) == ["web", "things"]
        assert [t.position for t in tokens] == [0, 1]

    def test_keeps_digits_and_underscores_inside_words(self):
        assert _texts(StandardAnalyzer()("prod_web-01")) == ["prod_web", "01"]

    def test_no_stemming(self):
        assert _texts(StandardAnalyzer()("databases")) == ["databases"]

    def test_custom_stopwords(self):
        assert _texts(StandardAnalyzer(stopwords=["web"])("the web")) == ["the"]


@pytest.mark.unit
class TestKeywordAnalyzer:
    def test_whole_value_is_one_token(self):
        tokens = KeywordAnalyzer()("Prod-Web 01")

        assert _texts(tokens) == ["Prod-Web 01"]
        assert tokens[0].end_char == len("Prod-Web 01")

    def test_empty_text_returns_empty(self):
        assert KeywordAnalyzer()("") == []


@pytest.mark.unit
class TestSimpleAnalyzer:
    def test_letter_runs_only(self):
        assert _texts(SimpleAnalyzer()("prod-web-01")) == ["prod", "web"]

    def test_unicode_letters_are_kept(self):
        assert _texts(SimpleAnalyzer()("Zürich_DC2")) == ["zürich", "dc"]

    def test_stop_words_are_not_removed(self):
        assert _texts(SimpleAnalyzer()("the web")) == ["the", "web"]


@pytest.mark.unit
def test_regex_tokenizer_tracks_offsets():
    tokens = list(RegexTokenizer()("ab cd"))

    assert [(t.start_char, t.end_char) for t in tokens] == [(0, 2), (3, 5)]


@pytest.mark.unit
def test_letter_tokenizer_splits_on_digits():
    assert _texts(LetterTokenizer()("abc123def")) == ["abc", "def"]


@pytest.mark.unit
def test_lowercase_filter_preserves_lowercase_tokens():
    token = Token(text="web", position=0, start_char=0, end_char=3)

    assert list(LowercaseFilter()([token]))[0] is token


@pytest.mark.unit
def test_stop_filter_is_case_insensitive():
    token = Token(text="The", position=0, start_char=0, end_char=3)

    assert list(StopFilter()([token])) == []


@pytest.mark.unit
def test_token_copy_with_overrides_fields():
    token = Token(text="Web", position=2, start_char=4, end_char=7)

    copied = token.copy_with(text="web")

    assert copied.text == "web"
    assert copied.position == 2
    assert token.text == "Web"


@pytest.mark.unit
class TestGetAnalyzer:
    def test_none_defaults_to_standard(self):
        assert isinstance(get_analyzer(None), StandardAnalyzer)

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("standard", StandardAnalyzer), ("KEYWORD", KeywordAnalyzer), ("simple", SimpleAnalyzer)],
    )
    def test_known_names(self, name, expected):
        assert isinstance(get_analyzer(name), expected)

    def test_unknown_name_lists_available(self):
        with pytest.raises(ValueError, match="Unknown analyzer 'stemming'"):
            get_analyzer("stemming")
