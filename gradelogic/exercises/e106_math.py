import math
from typing import List

from gradelogic.core.checks import BehavioralCheck
from gradelogic.core.value_checks import IS_NAN
from gradelogic.exercises.abstract_exercise import AbstractExercise


def _table(fn_name, cases):
    return [BehavioralCheck(fn_name, args, expected=expected) for args, expected in cases]


class MathExercise(AbstractExercise):
    exercise_id = "106-math"
    title = "Арифметика"
    filename = "106-math.py"

    def required_functions(self) -> List[str]:
        return ["add99", "add", "difference", "multiply", "divide", "mod"]

    def behavioral_checks(self) -> List[BehavioralCheck]:
        checks = _table("add99", [
            ((1,), 100), ((-56,), 43), ((99,), 198), ((0,), 99), ((3.14,), 102.14),
        ])
        checks += _table("add", [
            ((1, 1), 2), ((0, 0), 0), ((99, 1), 100), ((3.14, 0), 3.14), ((3.14, 1000), 1003.14),
        ])
        checks += _table("difference", [
            ((1, 1), 0), ((0, 0), 0), ((99, 1), 98), ((3.14, 0), 3.14), ((3.14, 1000), -996.86),
        ])
        checks += _table("multiply", [
            ((1, 1), 1), ((0, 0), 0), ((99, 1), 99), ((3.14, 0), 0), ((3.14, 1000), 3140),
        ])
        checks += _table("divide", [
            ((1, 1), 1), ((4, 2), 2), ((100, 20), 5), ((1, 2), 0.5), ((4.2, 2.1), 2), ((99, 1), 99),
        ])
        # Деление на ноль по правилам IEEE 754, а не ZeroDivisionError
        checks.append(BehavioralCheck("divide", (0, 0), predicate=IS_NAN))
        checks.append(BehavioralCheck("divide", (3.14, 0), expected=math.inf))
        checks.append(BehavioralCheck("divide", (3.14, 1000), expected=0.00314))
        checks += _table("mod", [
            ((1, 1), 0), ((99, 1), 0), ((99, 22), 11), ((3.14, 1000), 3.14),
        ])
        checks.append(BehavioralCheck("mod", (0, 0), predicate=IS_NAN))
        checks.append(BehavioralCheck("mod", (3.14, 0), predicate=IS_NAN))
        return checks
