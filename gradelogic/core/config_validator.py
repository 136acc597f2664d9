from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, List, Optional, Union

VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_FORMATS = ["SIMPLE", "DETAILED", "JSON"]


@dataclass
class LoggingConfig:
    """Конфигурация логирования"""
    level: str = "INFO"
    format: str = "SIMPLE"
    directory: str = "logs"
    file_max_mb: int = 10
    file_backup_count: int = 5

    def __post_init__(self):
        self.level = str(self.level).upper()
        self.format = str(self.format).upper()

        if self.level not in VALID_LEVELS:
            raise ValueError(f"Неверный уровень логирования: {self.level}. Допустимые: {VALID_LEVELS}")

        if self.format not in VALID_FORMATS:
            raise ValueError(f"Неверный формат логирования: {self.format}. Допустимые: {VALID_FORMATS}")

        if int(self.file_max_mb) < 1:
            raise ValueError(f"file_max_mb должно быть >= 1, получено: {self.file_max_mb}")


@dataclass
class GraderConfig:
    """Конфигурация проверки упражнений"""
    exercises_dir: Union[str, Path] = "exercises"
    modules_dir: Union[str, Path] = "exercises-modules"
    source_pattern: str = "*.py"
    exercises_to_run: List[str] = field(default_factory=list)
    report_file: Optional[Union[str, Path]] = None
    show_progress: bool = True
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self):
        self.exercises_dir = Path(self.exercises_dir)
        self.modules_dir = Path(self.modules_dir)
        if self.report_file:
            self.report_file = Path(self.report_file)

        if isinstance(self.exercises_to_run, str):
            self.exercises_to_run = [item.strip() for item in self.exercises_to_run.split(',') if item.strip()]

        if not self.source_pattern:
            raise ValueError("source_pattern не может быть пустым")

        if self.modules_dir.resolve() == self.exercises_dir.resolve():
            # Директория модулей удаляется целиком после проверки
            raise ValueError("modules_dir не может совпадать с exercises_dir")

        if isinstance(self.logging, dict):
            known = {k: v for k, v in self.logging.items() if k in LoggingConfig.__dataclass_fields__}
            self.logging = LoggingConfig(**known)

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "GraderConfig":
        """Строит конфигурацию из словаря, игнорируя неизвестные ключи."""
        known = {name: config[name] for name in cls.__dataclass_fields__ if name in config}
        return cls(**known)
