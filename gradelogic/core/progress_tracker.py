import logging

log = logging.getLogger(__name__)


class ProgressTracker:
    """
    Печатает строки PROGRESS по мере проверки упражнений.
    Формат рассчитан на разбор внешними системами, поэтому не меняется.
    """

    def __init__(self, total: int, echo: bool = True):
        """
        Args:
            total (int): Сколько упражнений будет проверено.
            echo (bool): Печатать ли строки в stdout (в журнал пишутся всегда).
        """
        self.total = total
        self.done = 0
        self.exercise_id = ""
        self.echo = echo

    @property
    def percent(self) -> float:
        return self.done * 100 / self.total if self.total > 0 else 0.0

    def _emit(self, message: str):
        if self.echo:
            print(message, flush=True)
        log.info(message)

    def update(self, exercise_id: str):
        self.done += 1
        self.exercise_id = exercise_id
        self._emit(f"PROGRESS: {self.done}/{self.total} ({self.percent:.1f}%) - Exercise: {exercise_id}")

    def close(self):
        """Финальная строка; если часть упражнений не дошла до update, догоняем счетчик."""
        if self.done < self.total:
            self.done = self.total
            self._emit(f"PROGRESS: {self.done}/{self.total} ({self.percent:.1f}%) - Exercise: {self.exercise_id}")
        self._emit(f"PROGRESS: Completed {self.total}/{self.total} (100.0%)")
