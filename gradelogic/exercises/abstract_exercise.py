from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from gradelogic.core.checks import (
    BehavioralCheck, FunctionContainsBinding, FunctionReturnsBinding, StructuralCheck,
)
from gradelogic.core.types import ExerciseSpec


class AbstractExercise(ABC):
    """
    Абстрактный базовый класс ("контракт") для всех упражнений.
    Каждое упражнение описывает минимальные требования к одному файлу ученика.
    """
    exercise_id: str = ""
    title: str = ""
    filename: str = ""

    @abstractmethod
    def required_functions(self) -> List[str]:
        """Имена функций, которые обязаны быть в файле, в порядке проверки."""
        pass

    def structural_checks(self) -> List[StructuralCheck]:
        return []

    @abstractmethod
    def behavioral_checks(self) -> List[BehavioralCheck]:
        pass

    def to_spec(self, exercises_dir: Path) -> ExerciseSpec:
        """Собирает декларативное описание упражнения для раннера."""
        return ExerciseSpec(
            exercise_id=self.exercise_id,
            title=self.title,
            source_path=Path(exercises_dir) / self.filename,
            required_functions=self.required_functions(),
            structural_checks=self.structural_checks(),
            behavioral_checks=self.behavioral_checks(),
        )

    @staticmethod
    def declare_and_return(fn_name: str, binding_name: str) -> List[StructuralCheck]:
        """Типичная пара: функция объявляет переменную и возвращает именно ее."""
        return [
            FunctionContainsBinding(fn_name, binding_name),
            FunctionReturnsBinding(fn_name, binding_name),
        ]
