import pytest

from ftkit.dumps import bindump, hexdump


def _hex_roundtrip(dump, bpl):
    out = b""
    for line in dump.splitlines():
        out += bytes.fromhex(line[: 3 * bpl - 1])
    return out


def _bin_roundtrip(dump, bpl):
    out = []
    for line in dump.splitlines():
        groups = line[: 11 * bpl - 1].split()
        for high, low in zip(groups[::2], groups[1::2]):
            out.append(int(high + low, 2))
    return bytes(out)


def test_hexdump_worked_example():
    assert hexdump(b"ABC", 4) == "41 42 43   |ABC |\n"


def test_hexdump_non_printable_shown_as_dots():
    line = hexdump(b"\x00\xff", 2)
    assert line.split("|")[1] == ".."


@pytest.mark.parametrize("bpl", [1, 3, 8, 16])
def test_hexdump_roundtrip(bpl):
    data = bytes(range(256))
    assert _hex_roundtrip(hexdump(data, bpl), bpl) == data


@pytest.mark.parametrize("bpl", [1, 5, 16])
def test_hexdump_line_width(bpl):
    data = bytes(range(40))
    lines = hexdump(data, bpl).split("\n")[:-1]
    assert all(len(line) == 4 * bpl + 1 for line in lines)
    assert len(lines) == -(-len(data) // bpl)


def test_hexdump_text_column():
    data = b"hello world"
    line = hexdump(data, 16)
    assert line[3 * 16 : 3 * 16 + len(data)] == data.decode()


def test_hexdump_empty():
    assert hexdump(b"", 4) == ""


def test_hexdump_bad_width():
    with pytest.raises(ValueError):
        hexdump(b"abc", 0)


def test_bindump_worked_example():
    assert bindump(b"A", 1) == "0100 0001 |41|\n"


@pytest.mark.parametrize("bpl", [1, 2, 7, 16])
def test_bindump_roundtrip(bpl):
    data = bytes(range(0, 256, 3))
    assert _bin_roundtrip(bindump(data, bpl), bpl) == data


@pytest.mark.parametrize("bpl", [1, 4, 16])
def test_bindump_line_width(bpl):
    data = bytes(range(30))
    lines = bindump(data, bpl).split("\n")[:-1]
    assert all(len(line) == 13 * bpl + 1 for line in lines)
    assert len(lines) == -(-len(data) // bpl)


def test_bindump_hex_column_roundtrip():
    data = bytes(range(20))
    bpl = 8
    out = b""
    for line in bindump(data, bpl).splitlines():
        out += bytes.fromhex(line[11 * bpl : 13 * bpl].strip())
    assert out == data


def test_bindump_bad_width():
    with pytest.raises(ValueError):
        bindump(b"x", -1)


def test_bindump_empty():
    assert bindump(b"", 8) == ""