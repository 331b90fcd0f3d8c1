import pytest

from pipex.edit import strdup, striteri, strjoin, strlcat, strlcpy, strmapi


def test_strjoin_concatenates():
    result = strjoin("Hola ", "mundo")
    assert result.startswith("Hola ")
    assert result.endswith("mundo")
    assert len(result) == len("Hola ") + len("mundo")


def test_strjoin_with_empty_parts():
    assert strjoin("", "buenas") == "buenas"
    assert strjoin("buenas", "") == "buenas"
    assert strjoin("", "") == ""


def test_strdup_copies_whole_string():
    original = "Hola buenas noches"
    assert strdup(original) == original
    assert strdup("") == ""


def test_strdup_stops_at_nul():
    assert strdup("abc\0def") == "abc"


def test_strmapi_applies_function():
    text = "hola, buenassfghsfgh"
    assert strmapi(text, lambda _i, c: c.upper()) == text.upper()


def test_strmapi_passes_indices_in_order():
    seen = []

    def record(index, char):
        seen.append(index)
        return char

    text = "Drugs"
    assert strmapi(text, record) == text
    assert seen == list(range(len(text)))


def test_striteri_modifies_list_in_place():
    chars = list("Drugs")
    assert striteri(chars, lambda _i, c: c.upper()) is None
    assert "".join(chars) == "Drugs".upper()


def test_striteri_on_bytearray():
    data = bytearray(b"drugs")
    striteri(data, lambda _i, b: b - 32)
    assert bytes(data) == b"drugs".upper()


def test_striteri_none_keeps_items():
    chars = list("HOLA")
    indices = []
    striteri(chars, lambda i, _c: indices.append(i))
    assert chars == list("HOLA")
    assert indices == list(range(4))


def test_strlcpy_truncates():
    src = b"Hello, world!"
    dst = bytearray(6)
    assert strlcpy(dst, src, len(dst)) == len(src)
    assert bytes(dst[:5]) == src[:5]
    assert dst[5] == 0


def test_strlcpy_full_copy():
    src = b"HOLA"
    dst = bytearray(b"x" * 10)
    assert strlcpy(dst, src, len(dst)) == len(src)
    assert bytes(dst[:4]) == src
    assert dst[4] == 0
    assert bytes(dst[5:]) == b"x" * 5


def test_strlcpy_size_zero_writes_nothing():
    dst = bytearray(b"buenas")
    assert strlcpy(dst, b"HOLA", 0) == 4
    assert bytes(dst) == b"buenas"


def test_strlcpy_source_stops_at_nul():
    dst = bytearray(10)
    assert strlcpy(dst, b"HOLA\0xyz", 10) == 4
    assert bytes(dst[:5]) == b"HOLA\0"


def test_strlcpy_size_larger_than_buffer():
    with pytest.raises(ValueError):
        strlcpy(bytearray(3), b"HOLA", 5)


def test_strlcat_appends():
    dst = bytearray(b"Hola " + bytes(45))
    result = strlcat(dst, b"mundo", 50)
    assert result == len(b"Hola ") + len(b"mundo")
    assert bytes(dst[:result]) == b"Hola " + b"mundo"
    assert dst[result] == 0


def test_strlcat_truncates():
    dst = bytearray(b"Hola " + bytes(5))
    result = strlcat(dst, b"mundo", 7)
    assert result == len(b"Hola ") + len(b"mundo")
    assert bytes(dst[:6]) == b"Hola " + b"mundo"[:1]
    assert dst[6] == 0


def test_strlcat_size_not_past_destination():
    dst = bytearray(b"Hola\0\0\0\0")
    before = bytes(dst)
    assert strlcat(dst, b"mundo", 3) == 3 + len(b"mundo")
    assert bytes(dst) == before


def test_strlcat_negative_size():
    with pytest.raises(ValueError):
        strlcat(bytearray(4), b"a", -1)