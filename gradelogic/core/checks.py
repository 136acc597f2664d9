import ast
from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence, Tuple

from . import tree_query
from .value_checks import ValuePredicate, deep_equal

# Отличает "ожидаемое значение не задано" от ожидаемого None
_MISSING = object()


class StructuralCheck(ABC):
    """
    Проверка формы функции по синтаксическому дереву исходного файла.
    """

    def __init__(self, fn_name: str):
        self.fn_name = fn_name

    @property
    @abstractmethod
    def description(self) -> str:
        """Человекочитаемое требование для отчета."""
        pass

    @abstractmethod
    def evaluate(self, tree: ast.Module, source_text: str) -> bool:
        pass

    def __repr__(self):
        return f"{type(self).__name__}({self.description!r})"


class FunctionContainsBinding(StructuralCheck):

    def __init__(self, fn_name: str, binding_name: str):
        super().__init__(fn_name)
        self.binding_name = binding_name

    @property
    def description(self) -> str:
        return f'функция "{self.fn_name}" должна содержать переменную "{self.binding_name}"'

    def evaluate(self, tree: ast.Module, source_text: str) -> bool:
        return tree_query.function_contains_binding(tree, self.fn_name, self.binding_name)


class FunctionReturnsBinding(StructuralCheck):

    def __init__(self, fn_name: str, binding_name: str):
        super().__init__(fn_name)
        self.binding_name = binding_name

    @property
    def description(self) -> str:
        return f'функция "{self.fn_name}" должна возвращать переменную "{self.binding_name}"'

    def evaluate(self, tree: ast.Module, source_text: str) -> bool:
        return tree_query.function_returns_binding(tree, self.fn_name, self.binding_name)


class FunctionBodyContainsText(StructuralCheck):
    """Текстовый поиск подстроки после объявления функции (см. function_body_contains_text)."""

    def __init__(self, fn_name: str, text: str, hint: Optional[str] = None):
        super().__init__(fn_name)
        self.text = text
        self.hint = hint

    @property
    def description(self) -> str:
        if self.hint:
            return f'{self.fn_name}() должна использовать {self.hint}'
        return f'функция "{self.fn_name}" должна содержать "{self.text}"'

    def evaluate(self, tree: ast.Module, source_text: str) -> bool:
        return tree_query.function_body_contains_text(source_text, self.fn_name, self.text)


class BehavioralCheck:
    """
    Вызов функции с заданными аргументами и проверка результата:
    глубокое сравнение с ожидаемым значением либо предикат.
    """

    def __init__(self, fn_name: str, args: Sequence[Any] = (), expected: Any = _MISSING,
                 predicate: Optional[ValuePredicate] = None, description: Optional[str] = None):
        if (expected is _MISSING) == (predicate is None):
            raise ValueError("Нужно задать ровно одно из: expected или predicate")
        self.fn_name = fn_name
        self.args: Tuple[Any, ...] = tuple(args)
        self.expected = expected
        self.predicate = predicate
        self._description = description

    def call_text(self) -> str:
        return f"{self.fn_name}({', '.join(repr(a) for a in self.args)})"

    def expectation_text(self) -> str:
        if self.predicate is not None:
            return f"значение, которое {self.predicate.description}"
        return repr(self.expected)

    @property
    def description(self) -> str:
        if self._description:
            return self._description
        return f"{self.call_text()} должна вернуть {self.expectation_text()}"

    def evaluate(self, value: Any) -> bool:
        if self.predicate is not None:
            return self.predicate(value)
        return deep_equal(value, self.expected)

    def __repr__(self):
        return f"BehavioralCheck({self.description!r})"
