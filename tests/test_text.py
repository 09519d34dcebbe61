import pytest

from classicprogs import text


@pytest.mark.parametrize(
    "value, expected",
    [("thank_you", "uoy_knaht"), ("Hello World", "dlroW olleH"), ("Hello", "olleH")],
)
def test_reverse_examples(value, expected):
    assert text.reverse(value) == expected


def test_reverse_twice_is_identity():
    assert text.reverse(text.reverse("abc xyz!")) == "abc xyz!"


@pytest.mark.parametrize("value", ["toot", "racecar", "", "a"])
def test_palindromes(value):
    assert text.is_palindrome(value) is True


@pytest.mark.parametrize("value", ["swiss", "Toot", "ab"])
def test_not_palindromes(value):
    assert text.is_palindrome(value) is False


def test_count_vowels_consonants_example():
    assert text.count_vowels_consonants("thankyou!!") == (3, 5)


def test_count_vowels_consonants_ignores_non_letters():
    vowels, consonants = text.count_vowels_consonants("HELLO 123 world")
    plain_v, plain_c = text.count_vowels_consonants("helloworld")
    assert (vowels, consonants) == (plain_v, plain_c)


def test_to_upper_example():
    assert text.to_upper("hello world") == "HELLO WORLD"


def test_to_upper_leaves_non_ascii_alone():
    assert text.to_upper("é-z1") == "é-Z1"


def test_count_words_example():
    assert text.count_words("C is a powerful language") == 5


def test_count_words_ignores_extra_whitespace():
    assert text.count_words("  C is\ta powerful\nlanguage  \n") == text.count_words(
        "C is a powerful language"
    )


def test_count_words_empty():
    assert text.count_words("   ") == 0


def test_char_frequencies_example():
    freq = text.char_frequencies("apple")
    assert freq == {"a": 1, "p": 2, "l": 1, "e": 1}
    assert list(freq) == sorted(freq)


def test_char_frequencies_total_matches_length():
    sample = "mississippi river"
    assert sum(text.char_frequencies(sample).values()) == len(sample)


@pytest.mark.parametrize(
    "value, expected", [("swiss", "w"), ("programming", "p"), ("aabbcc", None)]
)
def test_first_non_repeating(value, expected):
    assert text.first_non_repeating(value) == expected


def test_longest_word_example():
    sentence = "The quick brown fox jumped over the lazy dog"
    assert text.longest_word(sentence) == "jumped"


def test_longest_word_prefers_first_of_equal_length():
    assert text.longest_word("cat dog") == "cat"


def test_longest_word_of_blank_sentence():
    assert text.longest_word("   ") == ""


@pytest.mark.parametrize("value, expected", [("babad", "bab"), ("cbbd", "bb")])
def test_longest_palindrome_examples(value, expected):
    assert text.longest_palindrome(value) == expected


def test_longest_palindrome_result_is_palindromic_substring():
    sample = "forgeeksskeegfor"
    result = text.longest_palindrome(sample)
    assert result in sample
    assert text.is_palindrome(result)
    assert len(result) > 1


def test_longest_palindrome_empty():
    assert text.longest_palindrome("") == ""


def test_caesar_example():
    assert text.caesar_encrypt("Hello", 3) == "Khoor"


def test_caesar_round_trip():
    message = "Attack at Dawn, 42!"
    assert text.caesar_encrypt(text.caesar_encrypt(message, 7), 26 - 7) == message


def test_caesar_full_rotation_is_identity():
    assert text.caesar_encrypt("Hello", 26) == "Hello"


def test_anagrams():
    assert text.are_anagrams("listen", "silent") is True
    assert text.are_anagrams("listen", "silence") is False
    assert text.are_anagrams("abc", "abd") is False


@pytest.mark.parametrize(
    "op, expected", [("+", 1), ("-", 1), ("*", 2), ("/", 2), ("^", 3), ("(", 0)]
)
def test_precedence(op, expected):
    assert text.precedence(op) == expected


def test_infix_to_postfix_example():
    assert text.infix_to_postfix("A+B*C") == "ABC*+"


def test_infix_to_postfix_parentheses():
    assert text.infix_to_postfix("(A+B)*C") == "AB+C*"


def test_infix_to_postfix_keeps_operands_in_order():
    result = text.infix_to_postfix("a*(b-c)/d")
    assert [ch for ch in result if ch.isalnum()] == list("abcd")
    assert "(" not in result and ")" not in result