"""
Byte Mixing — смешивание seed/key материала для генерации случайности.
"""

from itertools import cycle

from dp_numerics.core.contracts.errors import InvalidArgumentError


def xor_strings(first: bytes, second: bytes) -> bytes:
    """
    Побайтовый XOR двух последовательностей.

    Более короткий операнд циклически повторяется до длины более длинного;
    длина результата равна длине более длинного. XOR с пустым операндом
    возвращает другой операнд без изменений.

    Args:
        first: Bytes-like операнд
        second: Bytes-like операнд

    Returns:
        bytes длины max(len(first), len(second))

    Raises:
        InvalidArgumentError: Если операнд не bytes-like (str, int, ...)

    Examples:
        >>> xor_strings(b"foo", b"")
        b'foo'
        >>> xor_strings(b"", b"")
        b''
    """
    for operand in (first, second):
        if not isinstance(operand, (bytes, bytearray, memoryview)):
            raise InvalidArgumentError(
                f"xor_strings operands must be bytes-like, not {type(operand).__name__}"
            )

    first, second = bytes(first), bytes(second)
    longer, shorter = (first, second) if len(first) >= len(second) else (second, first)
    if not shorter:
        return longer
    return bytes(x ^ y for x, y in zip(longer, cycle(shorter)))
