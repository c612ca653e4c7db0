"""Текстовое представление чисел для сообщений об ошибках и диагностики."""


def format_number(value: int | float) -> str:
    """
    Детерминированное короткое представление числа.

    Целочисленные float печатаются без дробной части, остальные — через
    repr (кратчайшее round-trip представление).

    Examples:
        >>> format_number(1.0)
        '1'
        >>> format_number(-0.25)
        '-0.25'
        >>> format_number(float("inf"))
        'inf'
        >>> format_number(1e200)
        '1e+200'
    """
    if isinstance(value, int):
        return str(value)

    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text
