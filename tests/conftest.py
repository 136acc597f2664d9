import logging
import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def exercises_dir(tmp_path):
    path = tmp_path / "exercises"
    path.mkdir()
    return path


@pytest.fixture
def modules_dir(tmp_path):
    return tmp_path / "exercises-modules"


@pytest.fixture
def write_source(exercises_dir):
    """Записывает файл ученика (с удалением общего отступа) и возвращает путь."""
    def _write(name: str, text: str) -> Path:
        path = exercises_dir / name
        path.write_text(textwrap.dedent(text), encoding='utf-8')
        return path
    return _write


@pytest.fixture
def grader_config(exercises_dir, modules_dir):
    return {
        'exercises_dir': str(exercises_dir),
        'modules_dir': str(modules_dir),
        'show_progress': False,
    }


@pytest.fixture
def restore_logging():
    """setup_logging перенастраивает корневой логгер; возвращаем все как было."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
