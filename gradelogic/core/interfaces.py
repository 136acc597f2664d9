from typing import Optional


class GraderError(Exception):
    """Базовое исключение для ошибок проверки упражнений"""

    def __init__(self, message: str, exercise_id: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.exercise_id = exercise_id


class SourceSyntaxError(GraderError):
    """Исходный файл пуст или не разбирается парсером"""

    def __init__(self, message: str, path: Optional[str] = None,
                 lineno: Optional[int] = None):
        super().__init__(message)
        self.path = path
        self.lineno = lineno


class ModuleLoadError(GraderError):
    """Материализованный модуль не удалось загрузить или выполнить"""
    pass


class MissingCapabilityError(GraderError):
    """Обязательная функция отсутствует или не является вызываемой"""
    pass


class StructuralMismatch(GraderError):
    """Структура функции не соответствует требованию упражнения"""
    pass


class BehavioralMismatch(GraderError):
    """Функция вернула не то, что ожидалось"""
    pass
