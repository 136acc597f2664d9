from typing import List

from gradelogic.core.checks import BehavioralCheck
from gradelogic.exercises.abstract_exercise import AbstractExercise

USER = {
    "id": 1,
    "first_name": "Wittie",
    "last_name": "Armall",
    "email": "warmall0@earthlink.net",
    "gender": "Male",
    "ip_address": "60.13.194.247",
}

USER2 = {
    "id": 2,
    "first_name": "Allys",
    "last_name": "Maceur",
    "email": "amaceur1@youtube.com",
    "gender": "Female",
    "ip_address": "190.63.227.21",
}

USER3 = {
    "id": 3,
    "first_name": "Micah",
    "last_name": "Cockney",
    "email": "mcockney2@cafepress.com",
    "gender": "Male",
    "ip_address": "44.60.248.14",
}


class DictFunctionsExercise(AbstractExercise):
    exercise_id = "200-dicts"
    title = "Функции над словарями"
    filename = "200-dicts.py"

    def required_functions(self) -> List[str]:
        return ["get_value", "add_prop", "get_keys"]

    def behavioral_checks(self) -> List[BehavioralCheck]:
        return [
            BehavioralCheck("get_value", [USER, "email"], expected="warmall0@earthlink.net"),
            BehavioralCheck("get_value", [USER, "id"], expected=1),
            BehavioralCheck("add_prop", [USER2, "age", 30], expected={**USER2, "age": 30}),
            BehavioralCheck("get_keys", [USER3], expected=list(USER3.keys())),
        ]
