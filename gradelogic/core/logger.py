import json
import logging
import logging.handlers
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Dict, Any, List, Optional, Union

from .config_validator import LoggingConfig

LOG_FILE_NAME = "grader.log"


class LogFormat(Enum):
    """Стили вывода журнала."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


class StructuredFormatter(logging.Formatter):
    """
    Форматтер с тремя стилями: короткая строка, подробный блок
    с местом вызова и одна JSON-запись на сообщение.
    """
    PATTERNS = {
        LogFormat.SIMPLE: '%(asctime)s - %(name)-28s - %(levelname)-8s - %(message)s',
        LogFormat.DETAILED: '%(asctime)s - %(name)s - %(levelname)s [%(funcName)s:%(lineno)d]\n%(message)s\n'
                            + '-' * 80,
    }
    # Поля, которые раннер передает через extra=
    EXTRA_KEYS = ('exercise_id', 'check_kind')

    def __init__(self, format_type: LogFormat = LogFormat.DETAILED):
        self.format_type = format_type
        super().__init__(self.PATTERNS.get(format_type), datefmt='%Y-%m-%d %H:%M:%S')

    def _as_json(self, record: logging.LogRecord) -> str:
        entry = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        entry.update({key: getattr(record, key) for key in self.EXTRA_KEYS
                      if getattr(record, key, None) is not None})
        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)

    def format(self, record):
        if self.format_type == LogFormat.JSON:
            return self._as_json(record)
        return super().format(record)


def _logging_section(config: Dict[str, Any]) -> LoggingConfig:
    section: Union[LoggingConfig, Dict[str, Any]] = config.get('logging') or {}
    if isinstance(section, LoggingConfig):
        return section
    known = {k: v for k, v in section.items() if k in LoggingConfig.__dataclass_fields__}
    return LoggingConfig(**known)


def _build_handlers(log_config: LoggingConfig, level: int) -> List[logging.Handler]:
    log_dir = Path(log_config.directory)
    log_dir.mkdir(parents=True, exist_ok=True)

    # В консоль только предупреждения и ошибки: отчет печатается отдельно
    console = logging.StreamHandler()
    console.setLevel(max(level, logging.WARNING))
    console.setFormatter(StructuredFormatter(LogFormat.SIMPLE))

    log_file = logging.handlers.RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=int(log_config.file_max_mb) * 1024 * 1024,
        backupCount=int(log_config.file_backup_count),
        encoding='utf-8',
    )
    log_file.setLevel(level)
    log_file.setFormatter(StructuredFormatter(LogFormat[log_config.format]))
    return [console, log_file]


def setup_logging(config: Optional[Dict[str, Any]] = None) -> Path:
    """
    Настраивает корневой логгер по секции 'logging' конфигурации.
    Вызывается один раз при старте; повторный вызов заменяет обработчики.

    Args:
        config: Словарь с ключом 'logging' (dict или LoggingConfig)

    Returns:
        Путь к файлу журнала
    """
    log_config = _logging_section(config or {})
    level = logging.getLevelName(log_config.level)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    for handler in _build_handlers(log_config, level):
        root_logger.addHandler(handler)

    log_path = Path(log_config.directory) / LOG_FILE_NAME
    logging.getLogger(__name__).info("✅ Логирование настроено: уровень %s, файл %s", log_config.level, log_path)
    return log_path
