import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Добавляем корень проекта в sys.path для запуска без установки пакета
project_root = Path(__file__).parent.parent
sys.path.append(str(project_root))

from gradelogic.core.config_loader import EnvConfigLoader  # noqa: E402
from gradelogic.core.config_validator import GraderConfig  # noqa: E402
from gradelogic.core.logger import setup_logging  # noqa: E402
from gradelogic.core.reporter import ConsoleReporter  # noqa: E402
from gradelogic.core.runner import ExerciseRunner  # noqa: E402


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Проверка упражнений учеников")
    parser.add_argument("--exercises-dir", help="Директория с файлами упражнений")
    parser.add_argument("--modules-dir", help="Временная директория материализованных модулей")
    parser.add_argument("--only", nargs="+", metavar="ID", help="Проверить только эти упражнения")
    parser.add_argument("--report", help="Куда записать сводку в формате Markdown")
    parser.add_argument("--no-progress", action="store_true", help="Не выводить строки PROGRESS")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """
    Главная функция запуска проверки упражнений.
    Возвращает код завершения: 0 - все проверки пройдены.
    """
    args = parse_args(argv)

    try:
        dotenv_path = project_root / ".env"
        if dotenv_path.exists():
            # 'utf-8-sig' умеет обрабатывать и игнорировать BOM
            load_dotenv(dotenv_path=dotenv_path, encoding='utf-8-sig')

        config = EnvConfigLoader(prefix="GL").load_config()
        if args.exercises_dir:
            config["exercises_dir"] = args.exercises_dir
        if args.modules_dir:
            config["modules_dir"] = args.modules_dir
        if args.only:
            config["exercises_to_run"] = args.only
        if args.report:
            config["report_file"] = args.report
        if args.no_progress:
            config["show_progress"] = False

        grader_config = GraderConfig.from_dict(config)
        setup_logging({'logging': grader_config.logging})
    except (ValueError, TypeError) as e:
        print(f"ERROR: Не удалось загрузить конфигурацию: {e}", file=sys.stderr)
        return 2

    log = logging.getLogger(__name__)
    log.info("🚀 Запуск проверки упражнений из %s", grader_config.exercises_dir)

    runner = ExerciseRunner(config)
    report = runner.run()

    reporter = ConsoleReporter()
    print(reporter.render(report))

    if grader_config.report_file:
        report_file = Path(grader_config.report_file)
        report_file.parent.mkdir(parents=True, exist_ok=True)
        report_file.write_text(reporter.to_markdown(report), encoding='utf-8')
        log.info("✅ Сводка сохранена: %s", report_file)

    return report.exit_code


if __name__ == "__main__":
    sys.exit(main())
