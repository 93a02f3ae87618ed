import pytest

from ftkit.strbuilder import CHUNK_SIZE, StringBuilder


def test_empty_builder():
    builder = StringBuilder()
    assert builder.build() == ""
    assert len(builder) == 0
    assert builder.chunk_count() == 1


def test_add_str_whole_and_prefix():
    builder = StringBuilder()
    assert builder.add_str("hello") is True
    assert builder.add_str("world", 3) is True
    assert builder.build() == "hello" + "world"[:3]
    assert len(builder) == len(builder.build())


def test_add_str_zero_length_adds_nothing():
    builder = StringBuilder()
    assert builder.add_str("abc", 0) is True
    assert builder.build() == ""


@pytest.mark.parametrize("text, length", [("", 0), (None, 3), ("abc", -1)])
def test_add_str_refuses(text, length):
    builder = StringBuilder()
    assert builder.add_str(text, length) is False
    assert builder.build() == ""


def test_add_str_length_too_long():
    with pytest.raises(ValueError):
        StringBuilder().add_str("abc", 4)


def test_add_char_sequence():
    builder = StringBuilder()
    for ch in "python":
        builder.add_char(ch)
    assert builder.build() == "python"


@pytest.mark.parametrize("bad", ["", "ab"])
def test_add_char_rejects_non_single(bad):
    with pytest.raises(ValueError):
        StringBuilder().add_char(bad)


def test_set_chars():
    builder = StringBuilder()
    assert builder.set_chars("x", 5) is True
    assert builder.build() == "x" * 5


@pytest.mark.parametrize("c, length", [("\0", 3), ("", 3), ("x", -2)])
def test_set_chars_refuses(c, length):
    builder = StringBuilder()
    assert builder.set_chars(c, length) is False
    assert len(builder) == 0


def test_exactly_full_chunk_stays_single():
    builder = StringBuilder()
    builder.add_str("a" * CHUNK_SIZE)
    assert builder.chunk_count() == 1
    builder.add_char("b")
    assert builder.chunk_count() == 2
    assert builder.build() == "a" * CHUNK_SIZE + "b"


def test_long_text_spans_chunks():
    text = "".join(chr(ord("a") + i % 26) for i in range(CHUNK_SIZE * 2 + 44))
    builder = StringBuilder()
    builder.add_str(text)
    assert builder.build() == text
    assert len(builder) == len(text)
    assert builder.chunk_count() == 3


def test_set_chars_spans_chunks():
    builder = StringBuilder()
    builder.add_str("head")
    builder.set_chars("-", CHUNK_SIZE)
    assert builder.build() == "head" + "-" * CHUNK_SIZE
    assert builder.chunk_count() == 2


def test_mixed_operations_concatenate():
    pieces = ["abc", "d" * 200, "e", "f" * 130]
    builder = StringBuilder()
    builder.add_str(pieces[0])
    builder.set_chars("d", 200)
    builder.add_char("e")
    builder.add_str(pieces[3], len(pieces[3]))
    assert builder.build() == "".join(pieces)
    assert str(builder) == builder.build()
    assert builder.chunk_count() == -(-len(builder) // CHUNK_SIZE)