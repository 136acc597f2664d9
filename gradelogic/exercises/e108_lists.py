from typing import List

from gradelogic.core.checks import BehavioralCheck, FunctionBodyContainsText, StructuralCheck
from gradelogic.exercises.abstract_exercise import AbstractExercise


class ListsExercise(AbstractExercise):
    exercise_id = "108-lists"
    title = "Списки"
    filename = "108-lists.py"

    def required_functions(self) -> List[str]:
        return ["three_fruits", "multiple_types", "index_access", "use_len",
                "use_append", "use_pop", "use_index", "use_join"]

    def structural_checks(self) -> List[StructuralCheck]:
        return [
            FunctionBodyContainsText("index_access", "people[2]", hint="доступ по индексу"),
            FunctionBodyContainsText("use_len", "len(", hint="функцию len()"),
            FunctionBodyContainsText("use_append", ".append(", hint="метод .append()"),
            FunctionBodyContainsText("use_pop", ".pop(", hint="метод .pop()"),
            FunctionBodyContainsText("use_index", ".index(", hint="метод .index()"),
            FunctionBodyContainsText("use_join", ".join(", hint="метод .join()"),
        ]

    def behavioral_checks(self) -> List[BehavioralCheck]:
        return [
            BehavioralCheck("three_fruits", expected=["Apple", "Banana", "Cherry"]),
            BehavioralCheck("multiple_types",
                            expected=["Skateboard", None, 8.75, "Eiffel Tower", 44, 7, True, None]),
            BehavioralCheck("index_access", expected="Jimmy"),
            BehavioralCheck("use_len", expected=3),
            BehavioralCheck("use_append", expected=["a", "b", "c", "d"]),
            BehavioralCheck("use_pop", expected=["a", "b"]),
            BehavioralCheck("use_index", expected=3),
            BehavioralCheck("use_join", expected="a-b-c-d-e-f"),
        ]
