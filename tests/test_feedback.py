import itertools

import numpy as np
import pytest

from devilish_wordle.errors import MalformedWordError
from devilish_wordle.feedback import (
    ABSENT, EXACT, PRESENT, WIN, classify, compute_feedback_matrix,
    feedback_digits, feedback_to_emoji, feedback_to_string, string_to_feedback,
    word_to_chars, words_to_chars,
)

from .conftest import SMALL_WORDS


def marked_letters(guess, target, letter):
    digits = feedback_digits(classify(guess, target))
    return sum(1 for g, d in zip(guess, digits) if g == letter and d in (PRESENT, EXACT))


def test_win_code_is_all_exact():
    assert WIN == 242
    assert feedback_to_string(WIN) == "GGGGG"
    assert classify("abide", "abide") == WIN


def test_no_matches():
    assert classify("cargo", "dimly") == 0
    assert feedback_to_string(0) == "BBBBB"


def test_known_patterns():
    assert feedback_to_string(classify("abide", "cargo")) == "YBBBB"
    assert feedback_to_string(classify("abide", "dimly")) == "BBYYB"
    assert feedback_to_string(classify("speed", "erase")) == "YBYYB"


def test_exact_claimed_before_present():
    # A single left-to-right pass would call the second 'b' present.
    assert feedback_to_string(classify("aabbb", "ababa")) == "GYYGB"


def test_repeated_letter_conservation():
    assert feedback_to_string(classify("sassy", "glass")) == "YYBGB"
    assert marked_letters("sassy", "glass", "s") == 2


def test_speed_erase_conservation():
    assert marked_letters("speed", "erase", "e") <= "erase".count("e")
    assert marked_letters("speed", "erase", "s") == 1


@pytest.mark.parametrize("guess,target", list(itertools.product(SMALL_WORDS[:12], repeat=2)))
def test_properties_hold_for_all_pairs(guess, target):
    code = classify(guess, target)
    digits = feedback_digits(code)

    exact = sum(1 for d in digits if d == EXACT)
    assert exact == sum(1 for g, t in zip(guess, target) if g == t)

    assert (code == WIN) == (guess == target)

    for letter in set(guess):
        assert marked_letters(guess, target, letter) <= target.count(letter)


def test_matrix_matches_classify():
    words = SMALL_WORDS[:10]
    chars = words_to_chars(words)
    matrix = compute_feedback_matrix(chars, chars)
    assert matrix.shape == (10, 10)
    assert matrix.dtype == np.uint8
    for i, g in enumerate(words):
        for j, t in enumerate(words):
            assert matrix[i, j] == classify(g, t)


def test_word_to_chars():
    assert list(word_to_chars("abcdz")) == [0, 1, 2, 3, 25]


@pytest.mark.parametrize("word", ["aaaab", "bbbbb", "abcd", "abcdef", "Abcde", "ab-de"])
def test_malformed_words_rejected(word):
    with pytest.raises(MalformedWordError):
        classify(word, "abide")
    with pytest.raises(MalformedWordError):
        classify("abide", word)


def test_three_repeats_allowed():
    assert classify("eerie", "eerie") == WIN
    assert classify("mamma", "eerie") == 0


def test_pattern_string_round_trip():
    assert string_to_feedback("GGGGG") == WIN
    assert string_to_feedback("bbbbb") == 0
    assert string_to_feedback("YBBBB") == 1
    assert string_to_feedback("BBBBG") == 2 * 81
    code = classify("sassy", "glass")
    assert string_to_feedback(feedback_to_string(code)) == code


def test_pattern_string_errors():
    with pytest.raises(ValueError):
        string_to_feedback("GGGGX")
    with pytest.raises(ValueError):
        string_to_feedback("GGG")
    with pytest.raises(ValueError):
        feedback_to_string(243)


def test_emoji():
    assert feedback_to_emoji(WIN) == "🟩" * 5
    assert feedback_to_emoji(ABSENT) == "⬛" * 5
