"""
Errors — Исключения строковых утилит

Две политики ошибок:
- Парсинг/предикаты: никогда не бросают, возвращают sentinel (0, False, default)
- Нарушение предусловия (None там, где значение обязательно, выход за границы):
  InvalidArgumentError с именем параметра
"""


class InvalidArgumentError(ValueError):
    """
    Нарушено предусловие вызова.

    Вызывающий код должен исправить аргументы, повтор с теми же данными
    всегда даст ту же ошибку.

    Attributes:
        param_name: Имя параметра, не прошедшего проверку
    """

    def __init__(self, param_name: str, message: str | None = None):
        self.param_name = param_name
        super().__init__(message or f"{param_name} is invalid")


class ConversionError(ValueError):
    """Сегмент строки не конвертируется в целевой тип (split_to)."""

    def __init__(self, segment: str, target: type):
        self.segment = segment
        self.target = target
        super().__init__(f"cannot convert {segment!r} to {target.__name__}")


class DecryptionError(Exception):
    """
    Расшифровка не удалась: неверный ключ, подмена ciphertext или associated data.

    Никогда не возвращаем "мусорный" plaintext вместо исключения.
    """
    pass
