from typing import List

from gradelogic.core.checks import BehavioralCheck, FunctionBodyContainsText, StructuralCheck
from gradelogic.exercises.abstract_exercise import AbstractExercise

TAR_PIT_ABSTRACT = (
    'Complexity is the single major difficulty in the successful development of large-scale software systems. '
    'Following Brooks we distinguish accidental from essential difficulty, but disagree with his premise that most complexity remaining in contemporary systems is essential. '
    'We identify common causes of complexity and discuss general approaches which can be taken to eliminate them where they are accidental in nature. '
    'To make things more concrete we then give an outline for a potential complexity-minimizing approach based on functional programming and Codd’s relational model of data.'
)

CHORUS = 'Who let the dogs out?'


class StringsExercise(AbstractExercise):
    exercise_id = "104-strings"
    title = "Строки"
    filename = "104-strings.py"

    def required_functions(self) -> List[str]:
        return ["hello_world", "hello_name", "abstract_length", "make_loud", "make_quiet"]

    def structural_checks(self) -> List[StructuralCheck]:
        return [
            FunctionBodyContainsText("abstract_length", "len(tar_pit_abstract)", hint="функцию len()"),
            FunctionBodyContainsText("make_loud", ".upper()", hint="метод .upper()"),
            FunctionBodyContainsText("make_quiet", ".lower()", hint="метод .lower()"),
        ]

    def behavioral_checks(self) -> List[BehavioralCheck]:
        return [
            BehavioralCheck("hello_world", expected="Hello, world!"),
            BehavioralCheck("hello_name", ["Bob"], expected="Hello, Bob!"),
            BehavioralCheck("hello_name", [""], expected="Hello, !"),
            BehavioralCheck("abstract_length", expected=len(TAR_PIT_ABSTRACT),
                            description='abstract_length() должна вернуть длину строки "tar_pit_abstract"'),
            BehavioralCheck("make_loud", expected=CHORUS.upper()),
            BehavioralCheck("make_quiet", ["ABC"], expected="abc"),
            BehavioralCheck("make_quiet", ["abc"], expected="abc"),
            BehavioralCheck("make_quiet", ["XyZ"], expected="xyz"),
            BehavioralCheck("make_quiet", ["AAA bbb CCC"], expected="aaa bbb ccc"),
            BehavioralCheck("make_quiet", [""], expected=""),
        ]
