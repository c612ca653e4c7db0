"""
Error taxonomy для числового слоя

Три вида ошибок:
- OVERFLOW: результат не представим в числовом виде. Восстановимая ошибка,
  НЕ бросается: сообщается через SafeResult.error вместе с clamped значением.
- INVALID_ARGUMENT: нарушение предусловия (валидация параметров механизма).
- DOMAIN_EDGE: явный отказ на границе домена (qnorm(0), erfinv(2), NaN → int)
  вместо молчаливого clamp.

Исключения наследуют ValueError, чтобы вызывающий код мог ловить их
стандартным способом.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Код вида ошибки"""

    OVERFLOW = "overflow"
    INVALID_ARGUMENT = "invalid_argument"
    DOMAIN_EDGE = "domain_edge"


class NumericsError(Exception):
    """Базовое исключение числового слоя."""

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgumentError(NumericsError, ValueError):
    """
    Нарушение предусловия.

    Сообщение содержит имя поля (вставляется дословно) и нарушенное
    ограничение; передаётся вызывающему без изменений.
    """

    kind = ErrorKind.INVALID_ARGUMENT


class DomainEdgeError(InvalidArgumentError):
    """
    Аргумент на границе или вне домена функции.

    Подкласс InvalidArgumentError: ловится как invalid-argument.
    """

    kind = ErrorKind.DOMAIN_EDGE
