import ast
import copy
import logging
from pathlib import Path
from typing import Dict, Any, Iterable, List, Optional, Tuple

from gradelogic.exercises.registry import build_registry
from .checks import BehavioralCheck, StructuralCheck
from .config_validator import GraderConfig
from .enums import CheckKind
from .interfaces import (
    BehavioralMismatch, GraderError, MissingCapabilityError, ModuleLoadError,
    SourceSyntaxError, StructuralMismatch,
)
from .materializer import capabilities, load_module, scratch_directory, write_module
from .progress_tracker import ProgressTracker
from .tree_query import parse_source
from .types import (
    ExerciseReport, ExerciseSpec, RunReport, SourceUnit, SyntaxGateResult, VerificationResult,
)

# Просто получаем логгер в начале файла. Он уже настроен!
log = logging.getLogger(__name__)


def safe_repr(value: Any) -> str:
    """repr значения ученика; при падении __repr__ возвращает заглушку с именем типа."""
    try:
        return repr(value)
    except Exception:
        return f"<unrepresentable {type(value).__name__}>"


def describe_exception(error: BaseException) -> str:
    try:
        text = str(error)
    except Exception:
        text = "<сообщение недоступно>"
    return f"{type(error).__name__}: {text}" if text else type(error).__name__


def discover_source_units(exercises_dir: Path, pattern: str = "*.py") -> List[SourceUnit]:
    """Файлы учеников в лексикографическом порядке путей."""
    paths = sorted(p for p in Path(exercises_dir).glob(pattern) if p.is_file())
    return [SourceUnit(path=p, content=p.read_text(encoding='utf-8', errors='replace')) for p in paths]


def check_syntax(units: Iterable[SourceUnit]) -> SyntaxGateResult:
    """
    Фаза 1: пытается разобрать каждый файл.
    Ошибка в одном файле не останавливает проверку остальных,
    но делает gate.all_valid ложным.
    """
    gate = SyntaxGateResult(units=list(units))
    for unit in gate.units:
        description = f"{unit.name} должен быть корректным кодом Python"
        try:
            tree = parse_source(unit.content, unit.name)
        except SourceSyntaxError as e:
            log.error("❌ %s", e.message, extra={'check_kind': str(CheckKind.SYNTAX)})
            gate.results.append(VerificationResult(
                kind=CheckKind.SYNTAX, description=description, passed=False, failure_message=e.message,
            ))
            continue
        gate.trees[unit.path] = tree
        gate.results.append(VerificationResult(kind=CheckKind.SYNTAX, description=description, passed=True))
    return gate


class ExerciseRunner:
    """
    Оркестрирует полный цикл проверки: синтаксический фильтр по всем файлам,
    затем материализация, загрузка и проверки каждого упражнения по порядку.
    """

    def __init__(self, config: Dict[str, Any], registry: Optional[Dict[str, ExerciseSpec]] = None):
        self.config = GraderConfig.from_dict(config)
        if registry is None:
            registry = build_registry(self.config.exercises_dir, self.config.exercises_to_run)
        self.registry = registry

    def run(self) -> RunReport:
        log.info("🔎 ЭТАП 1: Проверка синтаксиса файлов в %s", self.config.exercises_dir)
        units = discover_source_units(self.config.exercises_dir, self.config.source_pattern)
        gate = check_syntax(units)
        report = RunReport(syntax=gate)

        if not gate.all_valid:
            log.error("❌ Найдены синтаксические ошибки. Проверка упражнений пропущена.")
            return report

        log.info("🧪 ЭТАП 2: Проверка упражнений (%d шт.)", len(self.registry))
        report.phase2_ran = True
        progress = ProgressTracker(len(self.registry), echo=self.config.show_progress)
        try:
            with scratch_directory(self.config.modules_dir) as modules_dir:
                for spec in self.registry.values():
                    exercise_report = self.verify_exercise(spec, gate, modules_dir)
                    report.exercises.append(exercise_report)
                    log.info("  - %s: пройдено %d, провалено %d", spec.exercise_id,
                             exercise_report.passed_count, exercise_report.failed_count)
                    progress.update(spec.exercise_id)
        finally:
            progress.close()

        passed, failed = report.totals()
        log.info("✅ Проверка завершена. Пройдено: %d, провалено: %d", passed, failed)
        return report

    # --- Проверка одного упражнения ---

    def verify_exercise(self, spec: ExerciseSpec, gate: SyntaxGateResult,
                        modules_dir: Path) -> ExerciseReport:
        exercise_report = ExerciseReport(spec=spec)
        try:
            unit, tree = self._source_for(spec, gate)
            materialized = write_module(unit, tree, modules_dir)
            module = load_module(materialized)
        except ModuleLoadError as e:
            e.exercise_id = spec.exercise_id
            exercise_report.results.append(self._failed(
                CheckKind.LOAD, f"Не удалось загрузить {spec.filename}", e))
            return exercise_report

        table = capabilities(module)
        for fn_name in spec.required_functions:
            exercise_report.results.append(self._check_capability(spec, table, fn_name))
        for check in spec.structural_checks:
            exercise_report.results.append(self._check_structure(spec, check, tree, unit.content))
        for check in spec.behavioral_checks:
            exercise_report.results.append(self._check_behavior(spec, check, table))
        return exercise_report

    def _source_for(self, spec: ExerciseSpec, gate: SyntaxGateResult) -> Tuple[SourceUnit, ast.Module]:
        """
        Дерево берется из результата первой фазы. Файл, который не попал под
        шаблон поиска, читается и разбирается здесь же.
        """
        for unit in gate.units:
            if unit.path == spec.source_path and unit.path in gate.trees:
                return unit, gate.trees[unit.path]

        if not spec.source_path.is_file():
            raise ModuleLoadError(f"Файл {spec.source_path} не найден", spec.exercise_id)
        unit = SourceUnit(path=spec.source_path,
                          content=spec.source_path.read_text(encoding='utf-8', errors='replace'))
        try:
            tree = parse_source(unit.content, unit.name)
        except SourceSyntaxError as e:
            raise ModuleLoadError(e.message, spec.exercise_id) from e
        return unit, tree

    @staticmethod
    def _failed(kind: CheckKind, description: str, error: GraderError,
                fn_name: Optional[str] = None) -> VerificationResult:
        log.debug("✗ %s", error.message, extra={'exercise_id': error.exercise_id, 'check_kind': str(kind)})
        return VerificationResult(kind=kind, description=description, passed=False,
                                  failure_message=error.message, exercise_id=error.exercise_id,
                                  function_name=fn_name)

    @staticmethod
    def _passed(kind: CheckKind, description: str, spec: ExerciseSpec,
                fn_name: Optional[str] = None) -> VerificationResult:
        return VerificationResult(kind=kind, description=description, passed=True,
                                  exercise_id=spec.exercise_id, function_name=fn_name)

    def _check_capability(self, spec: ExerciseSpec, table: Dict[str, Any], fn_name: str) -> VerificationResult:
        description = f'{spec.filename} должен содержать функцию "{fn_name}"'
        if callable(table.get(fn_name)):
            return self._passed(CheckKind.CAPABILITY, description, spec, fn_name)
        error = MissingCapabilityError(
            f'функция "{fn_name}" не найдена в {spec.source_path.as_posix()}', spec.exercise_id)
        return self._failed(CheckKind.CAPABILITY, description, error, fn_name)

    def _check_structure(self, spec: ExerciseSpec, check: StructuralCheck,
                         tree: ast.Module, source_text: str) -> VerificationResult:
        if check.evaluate(tree, source_text):
            return self._passed(CheckKind.STRUCTURAL, check.description, spec, check.fn_name)
        error = StructuralMismatch(f"{spec.exercise_id}: {check.description}", spec.exercise_id)
        return self._failed(CheckKind.STRUCTURAL, check.description, error, check.fn_name)

    def _check_behavior(self, spec: ExerciseSpec, check: BehavioralCheck,
                        table: Dict[str, Any]) -> VerificationResult:
        fn = table.get(check.fn_name)
        if not callable(fn):
            error = BehavioralMismatch(
                f'{spec.exercise_id}: функция "{check.fn_name}" не найдена, {check.call_text()} не вызвана',
                spec.exercise_id)
            return self._failed(CheckKind.BEHAVIORAL, check.description, error, check.fn_name)

        # Копия аргументов: функция ученика может изменять их на месте
        args = copy.deepcopy(check.args)
        try:
            value = fn(*args)
        except (Exception, SystemExit) as e:
            error = BehavioralMismatch(
                f"{spec.exercise_id}: {check.call_text()} бросила исключение {describe_exception(e)}",
                spec.exercise_id)
            return self._failed(CheckKind.BEHAVIORAL, check.description, error, check.fn_name)

        try:
            matched = check.evaluate(value)
        except Exception as e:
            error = BehavioralMismatch(
                f"{spec.exercise_id}: результат {check.call_text()} не удалось проверить: "
                f"{describe_exception(e)}",
                spec.exercise_id)
            return self._failed(CheckKind.BEHAVIORAL, check.description, error, check.fn_name)

        if matched:
            return self._passed(CheckKind.BEHAVIORAL, check.description, spec, check.fn_name)
        error = BehavioralMismatch(
            f"{spec.exercise_id}: {check.call_text()} вернула {safe_repr(value)}, "
            f"ожидалось {check.expectation_text()}",
            spec.exercise_id)
        return self._failed(CheckKind.BEHAVIORAL, check.description, error, check.fn_name)
