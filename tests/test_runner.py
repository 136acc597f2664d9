import math

import pytest

from gradelogic.core.checks import BehavioralCheck, FunctionContainsBinding, FunctionReturnsBinding
from gradelogic.core.enums import CheckKind
from gradelogic.core.runner import ExerciseRunner, check_syntax, discover_source_units
from gradelogic.core.types import ExerciseSpec
from gradelogic.core.value_checks import IS_NAN, IS_NUMBER, ValuePredicate


def zero_spec(exercises_dir, filename="zero.py"):
    return ExerciseSpec(
        exercise_id="zero",
        title="Ноль",
        source_path=exercises_dir / filename,
        required_functions=["make_zero"],
        structural_checks=[
            FunctionContainsBinding("make_zero", "zilch"),
            FunctionReturnsBinding("make_zero", "zilch"),
        ],
        behavioral_checks=[BehavioralCheck("make_zero", expected=0)],
    )


def divide_spec(exercises_dir):
    return ExerciseSpec(
        exercise_id="divide",
        title="Деление",
        source_path=exercises_dir / "math.py",
        required_functions=["divide"],
        behavioral_checks=[
            BehavioralCheck("divide", (4, 2), expected=2),
            BehavioralCheck("divide", (3.14, 0), expected=math.inf),
            BehavioralCheck("divide", (0, 0), predicate=IS_NAN),
        ],
    )


def kinds(results):
    return [r.kind for r in results]


class TestSyntaxGate:
    """Фаза 1: синтаксический фильтр"""

    def test_discovery_is_sorted(self, write_source, exercises_dir):
        write_source("b.py", "x = 1\n")
        write_source("a.py", "x = 1\n")
        write_source("notes.txt", "not python")
        units = discover_source_units(exercises_dir)
        assert [u.name for u in units] == ["a.py", "b.py"]

    def test_every_file_gets_a_result(self, write_source, exercises_dir):
        write_source("a.py", "def f():\n    return 1\n")
        write_source("b.py", "def f(:\n    pass\n")
        write_source("c.py", "")
        write_source("d.py", "x = [1, 2\n")

        gate = check_syntax(discover_source_units(exercises_dir))

        assert [r.passed for r in gate.results] == [True, False, False, False]
        assert all(r.kind == CheckKind.SYNTAX for r in gate.results)
        assert not gate.all_valid
        assert list(gate.trees) == [exercises_dir / "a.py"]

    def test_syntax_error_skips_phase_two(self, write_source, exercises_dir, modules_dir,
                                           grader_config, monkeypatch):
        write_source("zero.py", "def make_zero():\n    zilch = 0\n    return zilch\n")
        write_source("broken.py", "def make_zero(:\n")

        calls = []
        monkeypatch.setattr(ExerciseRunner, "verify_exercise", lambda self, *args: calls.append(args))
        report = ExerciseRunner(grader_config, {"zero": zero_spec(exercises_dir)}).run()

        assert not report.phase2_ran
        assert report.exercises == []
        assert calls == []
        assert not modules_dir.exists()
        assert report.exit_code == 1
        assert report.totals() == (1, 1)

    def test_empty_directory_runs_phase_two(self, grader_config):
        report = ExerciseRunner(grader_config, {}).run()
        assert report.phase2_ran
        assert report.exit_code == 0


class TestExerciseVerification:
    """Фаза 2: загрузка, наличие функций, структура, поведение"""

    def test_declared_and_returned_binding_passes(self, write_source, exercises_dir, grader_config):
        write_source("zero.py", """
            def make_zero():
                zilch = 0
                return zilch
        """)
        report = ExerciseRunner(grader_config, {"zero": zero_spec(exercises_dir)}).run()

        exercise = report.exercises[0]
        assert kinds(exercise.results) == [
            CheckKind.CAPABILITY, CheckKind.STRUCTURAL, CheckKind.STRUCTURAL, CheckKind.BEHAVIORAL,
        ]
        assert exercise.all_passed
        assert report.exit_code == 0

    def test_literal_return_fails_structure_but_not_behavior(self, write_source, exercises_dir,
                                                             grader_config):
        write_source("zero.py", "def make_zero():\n    return 0\n")
        report = ExerciseRunner(grader_config, {"zero": zero_spec(exercises_dir)}).run()

        results = report.exercises[0].results
        structural = [r for r in results if r.kind == CheckKind.STRUCTURAL]
        behavioral = [r for r in results if r.kind == CheckKind.BEHAVIORAL]
        assert [r.passed for r in structural] == [False, False]
        assert structural[0].failure_message == 'zero: функция "make_zero" должна содержать переменную "zilch"'
        assert [r.passed for r in behavioral] == [True]
        assert report.exit_code == 1

    def test_unguarded_division_fails_only_zero_divisor_cases(self, write_source, exercises_dir,
                                                              grader_config):
        write_source("math.py", "def divide(a, b):\n    return a / b\n")
        report = ExerciseRunner(grader_config, {"divide": divide_spec(exercises_dir)}).run()

        behavioral = [r for r in report.exercises[0].results if r.kind == CheckKind.BEHAVIORAL]
        assert [r.passed for r in behavioral] == [True, False, False]
        assert "ZeroDivisionError" in behavioral[1].failure_message
        assert "divide(3.14, 0)" in behavioral[1].failure_message

    def test_guarded_division_passes(self, write_source, exercises_dir, grader_config):
        write_source("math.py", """
            import math

            def divide(a, b):
                if b == 0:
                    return math.nan if a == 0 else math.copysign(math.inf, a)
                return a / b
        """)
        report = ExerciseRunner(grader_config, {"divide": divide_spec(exercises_dir)}).run()
        assert report.exercises[0].all_passed

    def test_missing_function_gives_one_capability_failure(self, write_source, exercises_dir,
                                                           grader_config):
        write_source("math.py", "def add(a, b):\n    return a + b\n")
        spec = ExerciseSpec(
            exercise_id="math", title="Сложение и вычитание", source_path=exercises_dir / "math.py",
            required_functions=["add", "sub"],
        )
        report = ExerciseRunner(grader_config, {"math": spec}).run()

        results = report.exercises[0].results
        failed = [r for r in results if not r.passed]
        assert len(results) == 2
        assert len(failed) == 1
        assert failed[0].kind == CheckKind.CAPABILITY
        assert failed[0].function_name == "sub"
        assert failed[0].failure_message.startswith('функция "sub" не найдена')

    def test_behavior_of_missing_function_fails_without_call(self, write_source, exercises_dir,
                                                             grader_config):
        write_source("zero.py", "x = 1\n")
        report = ExerciseRunner(grader_config, {"zero": zero_spec(exercises_dir)}).run()

        behavioral = [r for r in report.exercises[0].results if r.kind == CheckKind.BEHAVIORAL]
        assert not behavioral[0].passed
        assert "не вызвана" in behavioral[0].failure_message

    def test_exception_in_one_check_does_not_stop_others(self, write_source, exercises_dir,
                                                         grader_config):
        write_source("calc.py", """
            def explode():
                raise KeyError('nope')

            def answer():
                return 42
        """)
        spec = ExerciseSpec(
            exercise_id="calc", title="Калькулятор", source_path=exercises_dir / "calc.py",
            behavioral_checks=[
                BehavioralCheck("explode", expected=1),
                BehavioralCheck("answer", expected=42),
            ],
        )
        report = ExerciseRunner(grader_config, {"calc": spec}).run()

        first, second = report.exercises[0].results
        assert not first.passed
        assert "KeyError" in first.failure_message
        assert second.passed

    def test_wrong_value_message(self, write_source, exercises_dir, grader_config):
        write_source("zero.py", "def make_zero():\n    zilch = 1\n    return zilch\n")
        report = ExerciseRunner(grader_config, {"zero": zero_spec(exercises_dir)}).run()

        behavioral = report.exercises[0].results[-1]
        assert behavioral.failure_message == "zero: make_zero() вернула 1, ожидалось 0"

    def test_arguments_are_copied_before_call(self, write_source, exercises_dir, grader_config):
        write_source("props.py", """
            def add_prop(obj, key, value):
                obj[key] = value
                return obj
        """)
        original = {"id": 1}
        check = BehavioralCheck("add_prop", (original, "a", 2), expected={"id": 1, "a": 2})
        spec = ExerciseSpec(exercise_id="props", title="Свойства",
                            source_path=exercises_dir / "props.py", behavioral_checks=[check, check])
        report = ExerciseRunner(grader_config, {"props": spec}).run()

        assert report.exercises[0].all_passed
        assert original == {"id": 1}

    def test_load_failure_skips_remaining_checks(self, write_source, exercises_dir, grader_config):
        write_source("zero.py", """
            def make_zero():
                zilch = 0
                return zilch

            raise RuntimeError('top-level failure')
        """)
        write_source("other.py", "def make_zero():\n    zilch = 0\n    return zilch\n")
        registry = {
            "zero": zero_spec(exercises_dir),
            "other": zero_spec(exercises_dir, "other.py"),
        }
        report = ExerciseRunner(grader_config, registry).run()

        broken, healthy = report.exercises
        assert kinds(broken.results) == [CheckKind.LOAD]
        assert not broken.results[0].passed
        assert "RuntimeError" in broken.results[0].failure_message
        assert broken.results[0].exercise_id == "zero"
        assert healthy.all_passed

    def test_missing_source_file_is_load_failure(self, exercises_dir, grader_config):
        report = ExerciseRunner(grader_config, {"zero": zero_spec(exercises_dir)}).run()

        results = report.exercises[0].results
        assert kinds(results) == [CheckKind.LOAD]
        assert "не найден" in results[0].failure_message

    def test_exercise_order_follows_registry(self, write_source, exercises_dir, grader_config):
        write_source("a.py", "def make_zero():\n    zilch = 0\n    return zilch\n")
        write_source("b.py", "def make_zero():\n    zilch = 0\n    return zilch\n")
        registry = {"b": zero_spec(exercises_dir, "b.py"), "a": zero_spec(exercises_dir, "a.py")}
        report = ExerciseRunner(grader_config, registry).run()
        assert [e.spec.filename for e in report.exercises] == ["b.py", "a.py"]


class TestFaultsAfterCall:
    """Ошибка при разборе возвращенного значения проваливает только одну проверку"""

    @pytest.fixture
    def healthy_spec(self, write_source, exercises_dir):
        write_source("zero.py", "def make_zero():\n    zilch = 0\n    return zilch\n")
        return zero_spec(exercises_dir)

    def run_pair(self, grader_config, spec, healthy_spec):
        registry = {spec.exercise_id: spec, "zero": healthy_spec}
        return ExerciseRunner(grader_config, registry).run()

    def test_overflow_in_predicate(self, write_source, exercises_dir, modules_dir,
                                   grader_config, healthy_spec):
        write_source("huge.py", """
            def make_a_number():
                my_num = 10 ** 400
                return my_num

            def answer():
                return 42
        """)
        as_float = ValuePredicate("приводится к float", lambda value: not math.isnan(float(value)))
        spec = ExerciseSpec(
            exercise_id="huge", title="Большие числа", source_path=exercises_dir / "huge.py",
            behavioral_checks=[
                BehavioralCheck("make_a_number", predicate=as_float),
                BehavioralCheck("make_a_number", predicate=IS_NUMBER),
                BehavioralCheck("answer", expected=42),
            ],
        )
        report = self.run_pair(grader_config, spec, healthy_spec)

        huge, zero = report.exercises
        assert [r.passed for r in huge.results] == [False, True, True]
        assert huge.results[0].kind == CheckKind.BEHAVIORAL
        assert "OverflowError" in huge.results[0].failure_message
        assert zero.all_passed
        assert report.exit_code == 1
        assert not modules_dir.exists()

    def test_broken_repr_in_failure_message(self, write_source, exercises_dir, modules_dir,
                                            grader_config, healthy_spec):
        write_source("weird.py", """
            class Weird:
                def __repr__(self):
                    raise ValueError('r')

            def make_weird():
                return Weird()

            def answer():
                return 42
        """)
        spec = ExerciseSpec(
            exercise_id="weird", title="Странное значение", source_path=exercises_dir / "weird.py",
            behavioral_checks=[
                BehavioralCheck("make_weird", expected=0),
                BehavioralCheck("answer", expected=42),
            ],
        )
        report = self.run_pair(grader_config, spec, healthy_spec)

        weird, zero = report.exercises
        first, second = weird.results
        assert not first.passed
        assert "<unrepresentable Weird>" in first.failure_message
        assert second.passed
        assert zero.all_passed
        assert not modules_dir.exists()

    def test_exception_during_comparison(self, write_source, exercises_dir, modules_dir,
                                         grader_config, healthy_spec):
        write_source("sneaky.py", """
            class Sneaky(dict):
                def __len__(self):
                    raise RuntimeError('len failed')

            def make_dict():
                return Sneaky(number_one=1)

            def answer():
                return 42
        """)
        spec = ExerciseSpec(
            exercise_id="sneaky", title="Словарь с сюрпризом", source_path=exercises_dir / "sneaky.py",
            behavioral_checks=[
                BehavioralCheck("make_dict", expected={"number_one": 1}),
                BehavioralCheck("answer", expected=42),
            ],
        )
        report = self.run_pair(grader_config, spec, healthy_spec)

        sneaky, zero = report.exercises
        first, second = sneaky.results
        assert not first.passed
        assert "RuntimeError: len failed" in first.failure_message
        assert second.passed
        assert zero.all_passed
        assert not modules_dir.exists()


class TestScratchCleanup:
    """Временная директория модулей удаляется при любом исходе"""

    def test_removed_after_success(self, write_source, exercises_dir, modules_dir, grader_config):
        write_source("zero.py", "def make_zero():\n    zilch = 0\n    return zilch\n")
        ExerciseRunner(grader_config, {"zero": zero_spec(exercises_dir)}).run()
        assert not modules_dir.exists()

    def test_removed_after_failures(self, write_source, exercises_dir, modules_dir, grader_config):
        write_source("zero.py", "raise SystemExit(1)\n")
        report = ExerciseRunner(grader_config, {"zero": zero_spec(exercises_dir)}).run()
        assert report.exit_code == 1
        assert not modules_dir.exists()

    def test_removed_after_unexpected_error(self, write_source, exercises_dir, modules_dir,
                                            grader_config, monkeypatch):
        write_source("zero.py", "def make_zero():\n    zilch = 0\n    return zilch\n")

        def crash(*args, **kwargs):
            raise RuntimeError("непредвиденная ошибка")

        monkeypatch.setattr(ExerciseRunner, "_check_behavior", crash)
        with pytest.raises(RuntimeError):
            ExerciseRunner(grader_config, {"zero": zero_spec(exercises_dir)}).run()
        assert not modules_dir.exists()


class TestRunnerConfig:
    """Раннер строит реестр из конфигурации"""

    def test_registry_filter_from_config(self, grader_config):
        grader_config['exercises_to_run'] = ["104-strings", "100-numbers"]
        runner = ExerciseRunner(grader_config)
        assert list(runner.registry) == ["100-numbers", "104-strings"]

    def test_modules_dir_equal_to_exercises_dir_is_rejected(self, exercises_dir):
        with pytest.raises(ValueError):
            ExerciseRunner({'exercises_dir': str(exercises_dir), 'modules_dir': str(exercises_dir)})
