from hypothesis import given
from hypothesis import strategies as st

import pytest

from algobox.strings import (
    all_palindromic_numbers,
    is_palindrome,
    is_pangram,
    next_palindrome,
    palindrome_partitions,
    z_function,
)

small_text = st.text(alphabet="ab", max_size=8)


def test_is_palindrome_source_word():
    assert is_palindrome("aabb") is False
    assert is_palindrome("abba") is True


@given(st.text(max_size=20))
def test_mirrored_text_is_palindrome(text):
    assert is_palindrome(text + text[::-1])


def test_partitions_small_example():
    assert list(palindrome_partitions("aab")) == [["a", "a", "b"], ["aa", "b"]]


def test_partitions_of_empty_text():
    assert list(palindrome_partitions("")) == [[]]


@given(small_text)
def test_partitions_are_valid_and_distinct(text):
    parts = list(palindrome_partitions(text))
    for split in parts:
        assert "".join(split) == text
        assert all(piece and is_palindrome(piece) for piece in split)
    assert len({tuple(split) for split in parts}) == len(parts)
    assert list(text) in parts


def test_partitions_source_word_includes_pairs():
    parts = list(palindrome_partitions("aabb"))
    assert ["aa", "bb"] in parts
    assert parts[0] == list("aabb")


def test_pangram():
    assert is_pangram("thequickbrownfoxjumpsoverthelazydog") is True
    assert is_pangram("thequickbrownfoxjumpsoverthelazycat") is False


def test_next_palindrome_all_nines_grows():
    assert next_palindrome("99") == "101"


@given(st.integers(min_value=1, max_value=10**9))
def test_next_palindrome_invariants(number):
    result = next_palindrome(str(number))
    assert is_palindrome(result)
    assert int(result) > number


def test_next_palindrome_is_smallest():
    for number in range(1, 2000):
        result = int(next_palindrome(str(number)))
        assert not any(is_palindrome(str(k)) for k in range(number + 1, result))


@pytest.mark.parametrize("bad", ["", "12a", "-5", "1 2"])
def test_next_palindrome_rejects_non_digits(bad):
    with pytest.raises(ValueError):
        next_palindrome(bad)


def test_z_function_repeated_letter():
    assert z_function("aaaaa") == [0, 4, 3, 2, 1]


def test_z_function_empty():
    assert z_function("") == []


@given(small_text)
def test_z_function_is_longest_prefix_match(text):
    z = z_function(text)
    assert len(z) == len(text)
    if text:
        assert z[0] == 0
    for i in range(1, len(text)):
        length = z[i]
        assert text[:length] == text[i : i + length]
        assert i + length == len(text) or text[length] != text[i + length]


def test_all_palindromic_source_example():
    assert all_palindromic_numbers([121, 221, 21]) is False


def test_all_palindromic_true_and_empty():
    assert all_palindromic_numbers([121, 1, 1331]) is True
    assert all_palindromic_numbers([]) is False