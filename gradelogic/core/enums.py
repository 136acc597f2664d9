# gradelogic/core/enums.py
from enum import Enum


class CheckKind(str, Enum):
    """
    Вид отдельной проверки. Определяет, к какой категории ошибок
    относится проваленный результат.
    """
    SYNTAX = "SYNTAX"            # Файл пуст или не парсится
    LOAD = "LOAD"                # Модуль не загрузился
    CAPABILITY = "CAPABILITY"    # Наличие обязательной функции
    STRUCTURAL = "STRUCTURAL"    # Проверка по синтаксическому дереву
    BEHAVIORAL = "BEHAVIORAL"    # Проверка по результату вызова

    def __str__(self):
        return self.value


class CheckStatus(str, Enum):
    """
    Исход одной проверки.
    """
    PASSED = "PASSED"
    FAILED = "FAILED"

    def __str__(self):
        return self.value
