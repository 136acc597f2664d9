# gradelogic/core/config_loader.py
import json
import logging
import os
import re
from typing import Any, Dict, List, Mapping, Optional, cast

from dotenv import load_dotenv

from .types import ConfigDict

log = logging.getLogger(__name__)

_FLOAT_RE = re.compile(r"^-?\d+\.\d+$")
_INT_RE = re.compile(r"^-?\d+$")

# GL_LOGGING_LEVEL -> config['logging']['level']
NESTED_SECTIONS = ('logging',)
LIST_KEYS = ('exercises_to_run',)


def convert_value(raw: str) -> Any:
    """Строка из окружения -> bool, int, float, JSON-список или исходная строка."""
    value = raw.strip()
    if value.lower() in ('true', 'yes', 'on'):
        return True
    if value.lower() in ('false', 'no', 'off'):
        return False
    if _INT_RE.match(value):
        return int(value)
    if _FLOAT_RE.match(value):
        return float(value)
    if value.startswith('[') and value.endswith(']'):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            log.warning("Не удалось разобрать JSON-список: %s", value)
    return value


def split_list(raw: str) -> List[str]:
    """'a, b' или '["a", "b"]' -> ['a', 'b']"""
    converted = convert_value(raw)
    if isinstance(converted, list):
        return [str(item).strip() for item in converted if str(item).strip()]
    return [item.strip() for item in raw.split(',') if item.strip()]


class EnvConfigLoader:
    """
    Собирает словарь конфигурации из переменных окружения с префиксом
    (по умолчанию GL_). Файл .env подхватывается через python-dotenv.
    """

    def __init__(self, prefix: str = "GL", load_env_file: bool = True,
                 environ: Optional[Mapping[str, str]] = None):
        self.prefix = prefix
        if load_env_file:
            load_dotenv()
        source = os.environ if environ is None else environ
        marker = f"{prefix}_"
        self.env_vars: Dict[str, str] = {
            key[len(marker):].lower(): value for key, value in source.items() if key.startswith(marker)
        }

    def _section_of(self, key: str):
        for section in NESTED_SECTIONS:
            if key.startswith(section + '_'):
                return section, key[len(section) + 1:]
        return None, key

    def load_config(self) -> ConfigDict:
        """
        Загружает конфигурацию.

        Переменные GL_LOGGING_<KEY> попадают во вложенную секцию 'logging',
        GL_EXERCISES_TO_RUN принимает JSON-список или строку через запятую.
        """
        config: Dict[str, Any] = {}
        for key, raw in sorted(self.env_vars.items()):
            section, name = self._section_of(key)
            if section is not None:
                config.setdefault(section, {})[name] = convert_value(raw)
            elif key in LIST_KEYS:
                config[key] = split_list(raw)
            else:
                config[key] = convert_value(raw)

        log.debug("Загружено параметров конфигурации с префиксом %s_: %d", self.prefix, len(self.env_vars))
        return cast(ConfigDict, config)
