# gradelogic/exercises/registry.py
import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple, Type

from gradelogic.core.types import ExerciseSpec
from gradelogic.exercises.abstract_exercise import AbstractExercise
from gradelogic.exercises.e100_numbers import NumbersExercise
from gradelogic.exercises.e102_none_booleans import NoneBooleansExercise
from gradelogic.exercises.e104_strings import StringsExercise
from gradelogic.exercises.e106_math import MathExercise
from gradelogic.exercises.e108_lists import ListsExercise
from gradelogic.exercises.e110_dicts import DictsExercise
from gradelogic.exercises.e200_dicts import DictFunctionsExercise

log = logging.getLogger(__name__)

# Порядок в кортеже == порядок проверки
EXERCISES: Tuple[Type[AbstractExercise], ...] = (
    NumbersExercise,
    NoneBooleansExercise,
    StringsExercise,
    MathExercise,
    ListsExercise,
    DictsExercise,
    DictFunctionsExercise,
)


def build_registry(exercises_dir: Path,
                   exercises_to_run: Optional[Iterable[str]] = None) -> Dict[str, ExerciseSpec]:
    """
    Собирает упорядоченное отображение id упражнения -> ExerciseSpec.

    Args:
        exercises_dir: Директория с файлами учеников
        exercises_to_run: Необязательный фильтр по id; пустой фильтр означает "все"

    Returns:
        Словарь в порядке EXERCISES
    """
    wanted = set(exercises_to_run or [])
    registry: Dict[str, ExerciseSpec] = {}
    for exercise_class in EXERCISES:
        exercise = exercise_class()
        if wanted and exercise.exercise_id not in wanted:
            continue
        registry[exercise.exercise_id] = exercise.to_spec(exercises_dir)

    missing = wanted - set(registry)
    if missing:
        log.warning("⚠️ Некоторые упражнения из 'exercises_to_run' не найдены: %s", ", ".join(sorted(missing)))

    log.debug("Упражнения для проверки: %s", list(registry))
    return registry
