import pytest

from jshell.tokenizer import (
    DEFAULT_DELIMITERS,
    candidate_paths,
    count_words,
    split_words,
)

SENTENCE = (
    "On m'appelle le Chevalier Blanc, je vais et je viens au secours des gens."
)


def test_split_simple_command():
    assert split_words("  ls   -l\t") == ["ls", "-l"]


def test_split_mixed_whitespace():
    assert split_words("echo\a\bone\v\ftwo\rthree\n") == ["echo", "one", "two", "three"]


@pytest.mark.parametrize("text", ["", "   ", DEFAULT_DELIMITERS])
def test_no_words(text):
    assert split_words(text) == []
    assert count_words(text) == 0


@pytest.mark.parametrize(
    "text", [SENTENCE, "a", "  a  b  ", "x\ty\nz", "single", "\t\tlead"]
)
def test_count_matches_split(text):
    assert count_words(text) == len(split_words(text))


def test_words_contain_no_delimiters():
    words = split_words(SENTENCE)
    assert all(word and not any(ch in DEFAULT_DELIMITERS for ch in word) for word in words)
    assert " ".join(words) == SENTENCE


def test_custom_charset():
    assert split_words("a,,b;c", ",;") == ["a", "b", "c"]


def test_empty_charset_keeps_whole_text():
    assert split_words("no split here", "") == ["no split here"]
    assert count_words("no split here", "") == 1


def test_candidate_paths_worked_example():
    assert candidate_paths("ABCD:EFGH:IJKL", "plus") == [
        "ABCD/plus",
        "EFGH/plus",
        "IJKL/plus",
    ]


def test_candidate_paths_skip_empty_segments():
    assert candidate_paths("::/bin::/usr/bin:", "ls") == ["/bin/ls", "/usr/bin/ls"]


def test_candidate_paths_empty_list():
    assert candidate_paths("", "ls") == []