import re

import pytest

from codedrills.strings import (
    compress,
    freq_alphabets,
    gcd_of_strings,
    is_subsequence,
    length_of_longest_substring,
    max_vowels,
    merge_alternately,
    reverse_string,
    reverse_vowels,
    reverse_words,
)


def _encode(word):
    parts = []
    for letter in word:
        number = ord(letter) - ord("a") + 1
        parts.append(f"{number}#" if number >= 10 else str(number))
    return "".join(parts)


def _expand(chars):
    text = "".join(chars)
    return "".join(
        letter * (int(count) if count else 1)
        for letter, count in re.findall(r"(\D)(\d*)", text)
    )


def test_freq_alphabets_main_example():
    assert freq_alphabets("10#11#12") == "jkab"


@pytest.mark.parametrize("word", ["", "abc", "jkz", "azbycx", "leetcode"])
def test_freq_alphabets_round_trip(word):
    assert freq_alphabets(_encode(word)) == word


@pytest.mark.parametrize("text", ["#", "1#", "0", "27#", "01#"])
def test_freq_alphabets_rejects_bad_codes(text):
    with pytest.raises(ValueError):
        freq_alphabets(text)


def test_gcd_of_strings_common_base():
    assert gcd_of_strings("ABCABC", "ABC") == "ABC"


def test_gcd_of_strings_no_common_divisor():
    assert gcd_of_strings("ABCDEF", "ABC") == ""


@pytest.mark.parametrize(
    "str1, str2", [("ABABAB", "ABAB"), ("XXXX", "XXXXXX"), ("ABC", "ABC")]
)
def test_gcd_of_strings_divides_both(str1, str2):
    base = gcd_of_strings(str1, str2)
    assert base
    assert base * (len(str1) // len(base)) == str1
    assert base * (len(str2) // len(base)) == str2


def test_is_subsequence_by_deletion():
    t = "ahbgdc"
    assert is_subsequence(t[::2], t) is True
    assert is_subsequence("", t) is True
    assert is_subsequence(t, t) is True


def test_is_subsequence_wrong_order():
    assert is_subsequence("axc", "ahbgdc") is False
    assert is_subsequence("ca", "abc") is False


def test_is_subsequence_against_empty():
    assert is_subsequence("a", "") is False


def test_length_of_longest_substring_main_example():
    assert length_of_longest_substring("abcabcbb") == 3


def test_length_of_longest_substring_distinct_characters():
    text = "qwertyuiop"
    assert length_of_longest_substring(text) == len(text)
    assert length_of_longest_substring("") == 0


def test_length_of_longest_substring_bounds():
    text = "pwwkewdvdf"
    result = length_of_longest_substring(text)
    assert 1 <= result <= len(set(text))


def test_max_vowels_all_vowels_fill_window():
    assert max_vowels("aeiouaeiou", 4) == 4


def test_max_vowels_no_vowels():
    assert max_vowels("bcdfgh", 3) == 0


def test_max_vowels_uppercase_not_counted():
    assert max_vowels("AEIOU", 2) == 0


def test_max_vowels_bounded_by_window_and_count():
    text = "acdfeghijo"
    result = max_vowels(text, 4)
    assert result <= 4
    assert result <= sum(ch in "aeiou" for ch in text)


def test_max_vowels_negative_window():
    with pytest.raises(ValueError):
        max_vowels("abc", -1)


def test_merge_alternately_main_example():
    assert merge_alternately("abcd", "pq") == "apbqcd"


def test_merge_alternately_with_empty_word():
    assert merge_alternately("abc", "") == "abc"
    assert merge_alternately("", "xyz") == "xyz"


def test_merge_alternately_preserves_letters():
    word1, word2 = "hello", "world!"
    merged = merge_alternately(word1, word2)
    assert sorted(merged) == sorted(word1 + word2)
    assert merged[0::2][: len(word1)] == word1


def test_reverse_string_in_place():
    chars = list("hello")
    original = list(chars)
    assert reverse_string(chars) is None
    assert chars[0] == original[-1]
    assert chars[-1] == original[0]
    reverse_string(chars)
    assert chars == original


def test_reverse_vowels_twice_restores():
    text = "leetcode"
    once = reverse_vowels(text)
    assert once != text
    assert reverse_vowels(once) == text


def test_reverse_vowels_keeps_consonants():
    text = "Programming In Ease"
    result = reverse_vowels(text)
    for before, after in zip(text, result):
        if before not in "aeiouAEIOU":
            assert before == after
    assert sorted(result) == sorted(text)


def test_reverse_vowels_without_vowels():
    assert reverse_vowels("rhythm") == "rhythm"


def test_reverse_words_collapses_spaces():
    assert reverse_words("  hello   world  ") == "world hello"


def test_reverse_words_twice_normalises():
    text = "the sky  is blue"
    assert reverse_words(reverse_words(text)) == " ".join(text.split())


@pytest.mark.parametrize(
    "text", ["a", "abbbbbbbbbbbb", "aabbccc", "abc", "zzzzzzzzzzzzzzzzzzzzzzzzz"]
)
def test_compress_round_trip(text):
    chars = list(text)
    length = compress(chars)
    assert length == len(chars)
    assert length <= len(text)
    assert _expand(chars) == text


def test_compress_without_runs_unchanged():
    chars = list("abc")
    assert compress(chars) == 3
    assert chars == ["a", "b", "c"]