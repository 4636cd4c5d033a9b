import pytest

from solvebook.strings import (
    array_strings_are_equal,
    interpret,
    is_anagram,
    longest_common_prefix,
    most_words_found,
    next_greatest_letter,
    next_greatest_letter_linear,
    restore_string,
    reverse_words,
)


def test_array_strings_equal_true():
    assert array_strings_are_equal(["ab", "c"], ["a", "bc"])


def test_array_strings_equal_false():
    assert not array_strings_are_equal(["a", "cb"], ["ab", "c"])


def test_interpret_goal():
    assert interpret("G()(al)") == "Goal"


def test_interpret_plain_g():
    assert interpret("GGG") == "GGG"


def test_interpret_empty():
    assert interpret("") == ""


@pytest.mark.parametrize("command", ["X", "G(", "(a)"])
def test_interpret_invalid_raises(command):
    with pytest.raises(ValueError):
        interpret(command)


def test_longest_common_prefix_example():
    assert longest_common_prefix(["flower", "flow", "flight"]) == "fl"


def test_longest_common_prefix_is_prefix_of_all():
    words = ["interstellar", "internet", "interval", "inter"]
    prefix = longest_common_prefix(words)
    assert all(word.startswith(prefix) for word in words)
    assert prefix == "inter"


def test_longest_common_prefix_none_shared():
    assert longest_common_prefix(["dog", "racecar", "car"]) == ""


def test_longest_common_prefix_single():
    assert longest_common_prefix(["alone"]) == "alone"


def test_longest_common_prefix_empty_raises():
    with pytest.raises(ValueError):
        longest_common_prefix([])


def test_most_words_found():
    sentences = ["one two", "a b c d", "single"]
    assert most_words_found(sentences) == len(sentences[1].split())


def test_most_words_found_empty():
    assert most_words_found([]) == 0


def test_reverse_words_example():
    assert reverse_words("  hello world  ") == "world hello"


@pytest.mark.parametrize("text", ["the sky is blue", "a  good   example", "one"])
def test_reverse_words_twice_normalizes(text):
    assert reverse_words(reverse_words(text)) == " ".join(text.split())


@pytest.mark.parametrize("text", ["", "    "])
def test_reverse_words_no_words_raises(text):
    with pytest.raises(ValueError):
        reverse_words(text)


def test_restore_string_identity():
    assert restore_string("abc", [0, 1, 2]) == "abc"


def test_restore_string_places_characters():
    s = "codeleet"
    indices = [4, 5, 6, 7, 0, 2, 1, 3]
    result = restore_string(s, indices)
    assert sorted(result) == sorted(s)
    for ch, index in zip(s, indices):
        assert result[index] == ch


def test_is_anagram_true():
    assert is_anagram("anagram", "nagaram")


def test_is_anagram_false():
    assert not is_anagram("rat", "car")


@pytest.mark.parametrize(
    "target,expected", [("a", "c"), ("c", "f"), ("d", "f"), ("g", "j"), ("j", "c"), ("z", "c")]
)
def test_next_greatest_letter(target, expected):
    letters = ["c", "f", "j"]
    assert next_greatest_letter(letters, target) == expected
    assert next_greatest_letter_linear(letters, target) == expected


def test_next_greatest_letter_variants_agree():
    letters = ["a", "a", "b", "e", "e", "m", "x"]
    for code in range(ord("a"), ord("z") + 1):
        target = chr(code)
        assert next_greatest_letter(letters, target) == next_greatest_letter_linear(letters, target)


@pytest.mark.parametrize("func", [next_greatest_letter, next_greatest_letter_linear])
def test_next_greatest_letter_empty_raises(func):
    with pytest.raises(ValueError):
        func([], "a")