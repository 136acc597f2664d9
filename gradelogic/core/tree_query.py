import ast
import re
from typing import List, Optional, Union

from .interfaces import SourceSyntaxError
from .types import FunctionRecord

_FUNCTION_NODES = (ast.FunctionDef, ast.AsyncFunctionDef)

Body = Union[ast.Module, List[ast.stmt]]


def parse_source(text: str, filename: str = "<exercise>") -> ast.Module:
    """
    Разбирает исходный текст в синтаксическое дерево.

    Args:
        text: Содержимое файла ученика
        filename: Имя файла для сообщений об ошибках

    Returns:
        Корневой узел ast.Module

    Raises:
        SourceSyntaxError: Если файл пуст или содержит синтаксическую ошибку
    """
    if not text.strip():
        raise SourceSyntaxError(f"{filename} не должен быть пустым", path=filename)
    try:
        return ast.parse(text, filename=filename)
    except SyntaxError as e:
        raise SourceSyntaxError(
            f"{filename} содержит синтаксическую ошибку (строка {e.lineno}): {e.msg}",
            path=filename, lineno=e.lineno,
        )
    except ValueError as e:
        # ast.parse бросает ValueError на нулевых байтах в исходнике
        raise SourceSyntaxError(f"{filename} не удалось разобрать: {e}", path=filename)


def _statements(tree_or_body: Body) -> List[ast.stmt]:
    if isinstance(tree_or_body, ast.Module):
        return tree_or_body.body
    return list(tree_or_body)


def top_level_functions(tree_or_body: Body) -> List[str]:
    """Имена функций верхнего уровня в порядке объявления (дубликаты сохраняются)."""
    return [stmt.name for stmt in _statements(tree_or_body) if isinstance(stmt, _FUNCTION_NODES)]


def find_function(tree_or_body: Body, fn_name: str) -> Optional[FunctionRecord]:
    """
    Ищет функцию верхнего уровня по точному имени.
    Вложенные функции не рассматриваются. При повторном объявлении
    возвращается последнее: именно его связывает интерпретатор.
    """
    found = None
    for stmt in _statements(tree_or_body):
        if isinstance(stmt, _FUNCTION_NODES) and stmt.name == fn_name:
            found = FunctionRecord(name=stmt.name, body=stmt.body, node=stmt)
    return found


# --- Обход тела функции ---

class ScopedBodyVisitor(ast.NodeVisitor):
    """
    Обходит инструкции и выражения тела функции в порядке документа,
    не заходя во вложенные области видимости (def, async def, lambda, class).
    Останавливается после первого совпадения.
    """

    def __init__(self):
        self.found = False

    def visit(self, node):
        if self.found:
            return None
        return super().visit(node)

    def _skip_nested_scope(self, node):
        return None

    visit_FunctionDef = _skip_nested_scope
    visit_AsyncFunctionDef = _skip_nested_scope
    visit_Lambda = _skip_nested_scope
    visit_ClassDef = _skip_nested_scope

    def search(self, body: List[ast.stmt]) -> bool:
        for stmt in body:
            self.visit(stmt)
            if self.found:
                break
        return self.found


def _target_names(target: ast.AST) -> List[str]:
    if isinstance(target, ast.Name):
        return [target.id]
    if isinstance(target, (ast.Tuple, ast.List)):
        names = []
        for element in target.elts:
            names.extend(_target_names(element))
        return names
    if isinstance(target, ast.Starred):
        return _target_names(target.value)
    # Атрибуты и подписки не объявляют новых имен
    return []


class BindingDeclarationFinder(ScopedBodyVisitor):
    """
    Ищет объявление локального имени: присваивание, цель цикла for,
    имя после with ... as или except ... as.
    """

    def __init__(self, binding_name: str):
        super().__init__()
        self.binding_name = binding_name

    def _check_targets(self, *targets):
        for target in targets:
            if self.binding_name in _target_names(target):
                self.found = True
                return

    def visit_Assign(self, node: ast.Assign):
        self._check_targets(*node.targets)
        self.generic_visit(node)

    def visit_AnnAssign(self, node: ast.AnnAssign):
        # 'huh: None' без значения тоже считается объявлением
        self._check_targets(node.target)
        self.generic_visit(node)

    def visit_NamedExpr(self, node: ast.NamedExpr):
        self._check_targets(node.target)
        self.generic_visit(node)

    def visit_For(self, node: ast.For):
        self._check_targets(node.target)
        self.generic_visit(node)

    visit_AsyncFor = visit_For

    def visit_withitem(self, node: ast.withitem):
        if node.optional_vars is not None:
            self._check_targets(node.optional_vars)
        self.generic_visit(node)

    def visit_ExceptHandler(self, node: ast.ExceptHandler):
        if node.name == self.binding_name:
            self.found = True
            return
        self.generic_visit(node)


class IdentifierReturnFinder(ScopedBodyVisitor):
    """Ищет 'return <имя>', где возвращается именно переменная, а не выражение."""

    def __init__(self, binding_name: str):
        super().__init__()
        self.binding_name = binding_name

    def visit_Return(self, node: ast.Return):
        if isinstance(node.value, ast.Name) and node.value.id == self.binding_name:
            self.found = True


def declares_binding(body: List[ast.stmt], binding_name: str) -> bool:
    return BindingDeclarationFinder(binding_name).search(body)


def returns_binding(body: List[ast.stmt], binding_name: str) -> bool:
    return IdentifierReturnFinder(binding_name).search(body)


def function_contains_binding(tree_or_body: Body, fn_name: str, binding_name: str) -> bool:
    """Объявляет ли функция fn_name переменную binding_name?"""
    record = find_function(tree_or_body, fn_name)
    if record is None:
        return False
    return declares_binding(record.body, binding_name)


def function_returns_binding(tree_or_body: Body, fn_name: str, binding_name: str) -> bool:
    """Возвращает ли функция fn_name переменную binding_name?"""
    record = find_function(tree_or_body, fn_name)
    if record is None:
        return False
    return returns_binding(record.body, binding_name)


def function_body_contains_text(source_text: str, fn_name: str, expression_text: str) -> bool:
    """
    Грубая текстовая проверка: ищет expression_text в тексте модуля,
    начиная с объявления функции fn_name и до конца файла.

    Совпадение может найтись в комментарии, строке или в следующей
    функции. Упражнения опираются на это поведение.
    """
    match = re.search(r"\bdef\s+" + re.escape(fn_name) + r"\s*\(", source_text)
    if match is None:
        return False
    return expression_text in source_text[match.start():]
