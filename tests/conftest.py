import pytest

from devilish_wordle import Dictionary, KnuthStrategy


THREE_WORDS = ["abide", "cargo", "dimly"]

SMALL_WORDS = [
    "abide", "cargo", "dimly", "speed", "erase", "sassy", "glass", "crane",
    "slate", "mules", "pupup", "fjord", "tiger", "ninja", "hover", "quick",
    "salet", "brown", "eerie", "mamma", "jazzy", "later", "water", "hater",
]


@pytest.fixture
def three_words():
    return Dictionary(THREE_WORDS)


@pytest.fixture
def small_dictionary():
    return Dictionary(SMALL_WORDS)


@pytest.fixture
def small_strategy(small_dictionary):
    return KnuthStrategy(small_dictionary)


@pytest.fixture
def dictionary_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(THREE_WORDS + ["", "Crane", "toolong", "ab-de", "abc"]) + "\n")
    return path
