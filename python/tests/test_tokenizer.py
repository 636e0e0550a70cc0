"""
Tests for phrase cleaning and word tokenization.
"""

from namecraft.naming.parsers import capitalize_word, clean_text, tokenize
from namecraft.naming.styles import NamingStyle


class TestTokenize:
    """Splitting phrases written in any casing convention."""

    def test_plain_phrase(self):
        assert tokenize("user name") == ["user", "name"]

    def test_camel_and_pascal(self):
        assert tokenize("userName") == ["user", "Name"]
        assert tokenize("UserName") == ["User", "Name"]

    def test_separators(self):
        test_cases = [
            ("user_name", ["user", "name"]),
            ("USER_NAME", ["USER", "NAME"]),
            ("user-name", ["user", "name"]),
            ("_user_name", ["user", "name"]),
            ("user  name\tid", ["user", "name", "id"]),
        ]
        for text, expected in test_cases:
            assert tokenize(text) == expected, text

    def test_digit_followed_by_uppercase_is_a_boundary(self):
        assert tokenize("ab1Cd") == ["ab1", "Cd"]

    def test_acronym_ends_before_capitalized_word(self):
        assert tokenize("HTTPServer") == ["HTTP", "Server"]
        assert tokenize("parseXMLFile") == ["parse", "XML", "File"]

    def test_single_letter_middle_word(self):
        test_cases = [
            ("getAValue", ["get", "A", "Value"]),
            ("isAFile", ["is", "A", "File"]),
            ("HasAKey", ["Has", "A", "Key"]),
        ]
        for text, expected in test_cases:
            assert tokenize(text) == expected, text

    def test_trailing_capitals_stay_together(self):
        # Known limit: consecutive single-letter words cannot be told apart
        assert tokenize("xYZ") == ["x", "YZ"]
        assert tokenize("AB") == ["AB"]

    def test_non_ascii_run_is_one_token(self):
        assert tokenize("用户数量") == ["用户数量"]

    def test_blank_input(self):
        assert tokenize("") == []
        assert tokenize("   ") == []

    def test_separators_only_returns_trimmed_input(self):
        assert tokenize(" __ ") == ["__"]

    def test_never_empty_for_non_blank_input(self):
        for text in ["a", "-", "x_y", "Ünïcode", "42"]:
            assert tokenize(text), text


class TestCleanText:
    """Punctuation removal before tokenization."""

    def test_strips_punctuation_and_whitespace(self):
        assert clean_text("  user's name! ") == "users name"

    def test_keeps_hyphens_and_underscores(self):
        assert clean_text("user-name") == "user-name"
        assert clean_text("user_name") == "user_name"

    def test_keeps_unicode_letters(self):
        assert clean_text("用户数量？") == "用户数量"


class TestCapitalizeWord:
    def test_normalizes_mixed_case(self):
        assert capitalize_word("uSER") == "User"
        assert capitalize_word("x") == "X"
        assert capitalize_word("") == ""


class TestTokenizerProperties:
    """Tokenize/transform round trips over ASCII word lists."""

    def test_idempotent_for_every_style(self, sample_words):
        for words in sample_words:
            for style in NamingStyle:
                once = style.transform(words)
                assert style.transform(tokenize(once)) == once, (words, style)

    def test_round_trip_validates(self, sample_words):
        for words in sample_words:
            for style in NamingStyle:
                name = style.transform(tokenize(style.transform(words)))
                assert style.validate(name), (words, style, name)
