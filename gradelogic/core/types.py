"""
Общие типы для проекта GradeLogic.
Централизованное определение структур данных проверки упражнений.
"""

import ast
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, List, Optional, Tuple, TypedDict, Literal, TYPE_CHECKING

from .enums import CheckKind, CheckStatus

if TYPE_CHECKING:
    from .checks import StructuralCheck, BehavioralCheck


# ============================================================================
# Базовые типы для конфигурации
# ============================================================================

class LoggingSection(TypedDict, total=False):
    """Секция 'logging' словаря конфигурации"""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    format: Literal["SIMPLE", "DETAILED", "JSON"]
    directory: str
    file_max_mb: int
    file_backup_count: int


class ConfigDict(TypedDict, total=False):
    """Словарь конфигурации, который возвращает EnvConfigLoader"""
    exercises_dir: str
    modules_dir: str
    source_pattern: str
    exercises_to_run: List[str]
    report_file: str
    show_progress: bool
    logging: LoggingSection


# ============================================================================
# Исходные файлы и производные от них представления
# ============================================================================

@dataclass(frozen=True)
class SourceUnit:
    """Один файл ученика. Содержимое не меняется в рамках запуска."""
    path: Path
    content: str

    @property
    def name(self) -> str:
        return self.path.name


@dataclass
class FunctionRecord:
    """Функция верхнего уровня: имя и последовательность инструкций тела."""
    name: str
    body: List[ast.stmt]
    node: ast.AST


@dataclass
class MaterializedModule:
    """Текст модуля с таблицей экспортов, записанный во временную директорию."""
    source: SourceUnit
    path: Path
    text: str
    function_names: List[str]


# ============================================================================
# Описание упражнения
# ============================================================================

@dataclass
class ExerciseSpec:
    """Минимальный контракт, которому должен удовлетворять файл упражнения."""
    exercise_id: str
    title: str
    source_path: Path
    required_functions: List[str] = field(default_factory=list)
    structural_checks: List["StructuralCheck"] = field(default_factory=list)
    behavioral_checks: List["BehavioralCheck"] = field(default_factory=list)

    @property
    def filename(self) -> str:
        return self.source_path.name


# ============================================================================
# Типы для результатов проверки
# ============================================================================

@dataclass
class VerificationResult:
    """Результат одной проверки"""
    kind: CheckKind
    description: str
    passed: bool
    failure_message: Optional[str] = None
    exercise_id: Optional[str] = None
    function_name: Optional[str] = None

    @property
    def status(self) -> CheckStatus:
        return CheckStatus.PASSED if self.passed else CheckStatus.FAILED

    def to_dict(self) -> Dict[str, Any]:
        return {
            'exercise_id': self.exercise_id,
            'kind': str(self.kind),
            'function_name': self.function_name,
            'description': self.description,
            'status': str(self.status),
            'failure_message': self.failure_message,
        }


@dataclass
class ExerciseReport:
    """Все результаты одного упражнения в порядке выполнения"""
    spec: ExerciseSpec
    results: List[VerificationResult] = field(default_factory=list)

    @property
    def passed_count(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed_count(self) -> int:
        return sum(1 for r in self.results if not r.passed)

    @property
    def all_passed(self) -> bool:
        return bool(self.results) and self.failed_count == 0


@dataclass
class SyntaxGateResult:
    """
    Итог первой фазы: деревья всех успешно разобранных файлов и
    проваленные результаты для остальных. Передается во вторую фазу явно.
    """
    units: List[SourceUnit] = field(default_factory=list)
    trees: Dict[Path, ast.Module] = field(default_factory=dict)
    results: List[VerificationResult] = field(default_factory=list)

    @property
    def all_valid(self) -> bool:
        return all(r.passed for r in self.results)


@dataclass
class RunReport:
    """Сводный результат запуска"""
    syntax: SyntaxGateResult
    exercises: List[ExerciseReport] = field(default_factory=list)
    phase2_ran: bool = False

    def all_results(self) -> List[VerificationResult]:
        results = list(self.syntax.results)
        for exercise in self.exercises:
            results.extend(exercise.results)
        return results

    def totals(self) -> Tuple[int, int]:
        """Возвращает (пройдено, провалено) по всем результатам."""
        results = self.all_results()
        passed = sum(1 for r in results if r.passed)
        return passed, len(results) - passed

    @property
    def exit_code(self) -> int:
        _, failed = self.totals()
        return 0 if self.phase2_ran and failed == 0 else 1
