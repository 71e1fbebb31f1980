from wordtarget.core.text import count_lines, count_words, normalize_whitespace, split_lines


def test_count_words_basic():
    assert count_words("") == 0
    assert count_words("   ") == 0
    assert count_words("one") == 1
    assert count_words("one  two") == 2


def test_count_words_newlines_and_tabs():
    assert count_words("alpha\nbeta\t\tgamma\r\n") == 3
    assert count_words("\n\n\n") == 0


def test_count_words_strips_tag_noise():
    # "< " up to the next "<" is dropped
    assert count_words("keep < drop this<b> end") == 3
    # ordinary markup is only whitespace split
    assert count_words("<p>Hello world</p>") == 2


def test_count_words_unchanged_by_normalization():
    for text in ["a  b\n\nc", "  lead trail  ", "x < y z< w", "\t"]:
        assert count_words(text) == count_words(normalize_whitespace(text))


def test_count_words_punctuation_is_part_of_word():
    assert count_words("Hello, world! - ok") == 4


def test_count_lines_trailing_newline():
    assert count_lines("a\nb\nc") == 3
    assert count_lines("a\nb\n") == 3
    assert count_lines("") == 1


def test_split_lines_keeps_carriage_return():
    assert split_lines("a\r\nb") == ["a\r", "b"]
