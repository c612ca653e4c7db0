"""
Тесты для Byte Mixing (xor_strings)
"""

import pytest

from dp_numerics.core.contracts.errors import InvalidArgumentError
from dp_numerics.core.math.byte_mixing import xor_strings


class TestXorStrings:
    """xor_strings"""

    def test_same_length(self) -> None:
        result = xor_strings(b"foo", b"bar")
        assert result[0] == ord("f") ^ ord("b")
        assert result[1] == ord("o") ^ ord("a")
        assert result[2] == ord("o") ^ ord("r")

    def test_shorter_operand_repeated(self) -> None:
        result = xor_strings(b"foobar", b"baz")
        assert len(result) == 6
        assert result[3] == ord("b") ^ ord("b")
        assert result[4] == ord("a") ^ ord("a")
        assert result[5] == ord("z") ^ ord("r")

    def test_symmetric(self) -> None:
        assert xor_strings(b"baz", b"foobar") == xor_strings(b"foobar", b"baz")

    def test_empty_operand_returns_other(self) -> None:
        assert xor_strings(b"foo", b"") == b"foo"
        assert xor_strings(b"", b"foo") == b"foo"

    def test_both_empty(self) -> None:
        assert xor_strings(b"", b"") == b""

    def test_involution(self) -> None:
        key = b"ABCDEFGHIJKLMNOP"
        data = b"seed material for the noise generator"
        assert xor_strings(xor_strings(data, key), key) == data

    def test_bytes_like_operands(self) -> None:
        assert xor_strings(bytearray(b"\x0f"), memoryview(b"\xf0")) == b"\xff"

    @pytest.mark.parametrize("first, second", [("foo", b"bar"), (b"foo", "bar")])
    def test_str_rejected(self, first, second) -> None:
        with pytest.raises(InvalidArgumentError, match="bytes-like"):
            xor_strings(first, second)

    @pytest.mark.parametrize(
        "first, second", [(b"ab", 3), (0, b"ab"), (b"ab", [1, 2]), (None, b"")]
    )
    def test_non_bytes_like_rejected(self, first, second) -> None:
        """int не превращается в буфер из нулей"""
        with pytest.raises(InvalidArgumentError, match="bytes-like"):
            xor_strings(first, second)
