from typing import List

from gradelogic.core.checks import BehavioralCheck, StructuralCheck
from gradelogic.core.value_checks import IS_BOOLEAN
from gradelogic.exercises.abstract_exercise import AbstractExercise


class NoneBooleansExercise(AbstractExercise):
    exercise_id = "102-none-booleans"
    title = "None и логические значения"
    filename = "102-none-booleans.py"

    def required_functions(self) -> List[str]:
        return ["make_nothing", "make_boolean", "make_true", "make_false", "make_null"]

    def structural_checks(self) -> List[StructuralCheck]:
        return (
            self.declare_and_return("make_nothing", "huh")
            + self.declare_and_return("make_boolean", "my_bool")
            + self.declare_and_return("make_true", "yup")
            + self.declare_and_return("make_false", "nope")
            + self.declare_and_return("make_null", "nothing_much")
        )

    def behavioral_checks(self) -> List[BehavioralCheck]:
        return [
            BehavioralCheck("make_nothing", expected=None),
            BehavioralCheck("make_boolean", predicate=IS_BOOLEAN),
            BehavioralCheck("make_true", expected=True),
            BehavioralCheck("make_false", expected=False),
            BehavioralCheck("make_null", expected=None),
        ]
