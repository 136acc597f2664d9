from typing import List

from gradelogic.core.checks import BehavioralCheck, StructuralCheck
from gradelogic.core.value_checks import IS_FLOAT, IS_INTEGER, IS_NUMBER
from gradelogic.exercises.abstract_exercise import AbstractExercise


class NumbersExercise(AbstractExercise):
    exercise_id = "100-numbers"
    title = "Числа"
    filename = "100-numbers.py"

    def required_functions(self) -> List[str]:
        return ["make_a_number", "make_an_integer", "make_a_float", "make_zero"]

    def structural_checks(self) -> List[StructuralCheck]:
        return (
            self.declare_and_return("make_a_number", "my_num")
            + self.declare_and_return("make_an_integer", "my_int")
            + self.declare_and_return("make_a_float", "my_float")
            + self.declare_and_return("make_zero", "zilch")
        )

    def behavioral_checks(self) -> List[BehavioralCheck]:
        return [
            BehavioralCheck("make_a_number", predicate=IS_NUMBER),
            BehavioralCheck("make_an_integer", predicate=IS_INTEGER),
            BehavioralCheck("make_a_float", predicate=IS_FLOAT),
            BehavioralCheck("make_zero", expected=0),
        ]
