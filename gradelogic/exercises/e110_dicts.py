from typing import List

from gradelogic.core.checks import BehavioralCheck, FunctionContainsBinding, StructuralCheck
from gradelogic.core.value_checks import has_key_count
from gradelogic.exercises.abstract_exercise import AbstractExercise


class DictsExercise(AbstractExercise):
    exercise_id = "110-dicts"
    title = "Словари"
    filename = "110-dicts.py"

    def required_functions(self) -> List[str]:
        return ["three_numbers", "many_types", "key_access", "add_key",
                "large_dict", "nested_list", "nested_lookup"]

    def structural_checks(self) -> List[StructuralCheck]:
        return (
            self.declare_and_return("add_key", "best_fruit")
            + [FunctionContainsBinding("large_dict", "bootcamp_student")]
        )

    def behavioral_checks(self) -> List[BehavioralCheck]:
        return [
            BehavioralCheck("three_numbers",
                            expected={"number_one": 1, "number_two": 2, "number_three": 3}),
            BehavioralCheck("many_types", expected={"name": "banana", "count": 42, "delicious": True}),
            BehavioralCheck("key_access", expected="banana"),
            BehavioralCheck("add_key",
                            expected={"name": "banana", "count": 42, "delicious": True, "color": "yellow"}),
            BehavioralCheck("large_dict", predicate=has_key_count(8)),
            BehavioralCheck("nested_list", expected="salmon"),
            BehavioralCheck("nested_lookup", expected="Susan"),
        ]
