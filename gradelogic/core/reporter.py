import logging
from typing import List

import pandas as pd

from .types import ExerciseReport, RunReport, VerificationResult

log = logging.getLogger(__name__)

PASS_MARK = "✓"
FAIL_MARK = "✗"


class ConsoleReporter:
    """
    Форматирует результаты запуска: вложенные группы проверок для консоли
    и сводную таблицу по упражнениям в формате Markdown.
    """

    def __init__(self, indent: str = "  "):
        self.indent = indent

    def _result_lines(self, result: VerificationResult, depth: int) -> List[str]:
        pad = self.indent * depth
        mark = PASS_MARK if result.passed else FAIL_MARK
        lines = [f"{pad}{mark} {result.description}"]
        if not result.passed and result.failure_message:
            lines.append(f"{pad}{self.indent}{result.failure_message}")
        return lines

    def _exercise_lines(self, exercise: ExerciseReport) -> List[str]:
        lines = [f"{self.indent}{exercise.spec.title} ({exercise.spec.filename})"]
        for result in exercise.results:
            lines.extend(self._result_lines(result, 2))
        return lines

    def render(self, report: RunReport) -> str:
        lines = ["Синтаксис Python"]
        for result in report.syntax.results:
            lines.extend(self._result_lines(result, 1))
        if not report.syntax.results:
            lines.append(f"{self.indent}(файлы упражнений не найдены)")

        if not report.phase2_ran:
            lines.append("")
            lines.append("Проверка упражнений пропущена: сначала исправьте синтаксические ошибки.")
        else:
            lines.append("")
            lines.append("Упражнения")
            for exercise in report.exercises:
                lines.extend(self._exercise_lines(exercise))

        passed, failed = report.totals()
        lines.append("")
        lines.append(f"Пройдено: {passed}, провалено: {failed}")
        return "\n".join(lines) + "\n"

    @staticmethod
    def summary_frame(report: RunReport) -> pd.DataFrame:
        """Одна строка на упражнение: пройдено, провалено, всего и доля."""
        rows = []
        for exercise in report.exercises:
            total = len(exercise.results)
            rows.append({
                'Упражнение': exercise.spec.exercise_id,
                'Файл': exercise.spec.filename,
                'Пройдено': exercise.passed_count,
                'Провалено': exercise.failed_count,
                'Всего': total,
                'Score': exercise.passed_count / total if total else 0.0,
            })
        columns = ['Упражнение', 'Файл', 'Пройдено', 'Провалено', 'Всего', 'Score']
        return pd.DataFrame(rows, columns=columns)

    def to_markdown(self, report: RunReport) -> str:
        df = self.summary_frame(report)
        header = "# Результаты проверки упражнений\n\n"
        header += f"*Сформировано: {pd.Timestamp.now().strftime('%Y-%m-%d %H:%M:%S')}*\n\n"

        if not report.phase2_ran:
            failed = [r for r in report.syntax.results if not r.passed]
            body = "Проверка упражнений пропущена из-за синтаксических ошибок:\n\n"
            body += "\n".join(f"- {r.failure_message}" for r in failed) + "\n"
            return header + body

        if df.empty:
            return header + "Нет данных для отображения.\n"

        df = df.copy()
        df['Score'] = df['Score'].apply(lambda x: f"{x:.1%}")
        try:
            table = df.to_markdown(index=False)
        except ImportError:
            log.error("Для генерации Markdown-таблиц требуется библиотека 'tabulate'. Пожалуйста, установите ее: pip install tabulate")
            table = df.to_string(index=False)

        passed, failed = report.totals()
        return header + table + f"\n\n**Итого:** пройдено {passed}, провалено {failed}\n"
