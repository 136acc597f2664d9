import ast
import importlib.util
import logging
import re
import shutil
import sys
from contextlib import contextmanager
from itertools import count
from pathlib import Path
from types import ModuleType
from typing import Dict, Any, Iterator, List, Optional

from .interfaces import ModuleLoadError
from .tree_query import top_level_functions
from .types import MaterializedModule, SourceUnit

log = logging.getLogger(__name__)

MODULE_SUFFIX = ".module"
EXPORTS_TABLE = "__exports__"

_SQUIGGLY_LINE = "# " + "~" * 77 + "\n"
EXPORTS_BLOCK = (
    "\n\n\n\n\n"
    + _SQUIGGLY_LINE
    + "# Module Exports (automatically generated)\n"
    + _SQUIGGLY_LINE
    + f"{EXPORTS_TABLE} = {{}}\n"
)

# Уникальные имена модулей в пределах процесса
_load_counter = count(1)


def export_statement(fn_name: str) -> str:
    return f"{EXPORTS_TABLE}[{fn_name!r}] = {fn_name}"


def materialize(text: str, function_names: List[str]) -> str:
    """
    Дописывает к тексту ученика блок экспортов: по одной строке на каждую
    функцию верхнего уровня в порядке объявления. Чистая функция.
    """
    return text + EXPORTS_BLOCK + "\n".join(export_statement(name) for name in function_names) + "\n\n\n"


def module_path(source_path: Path, modules_dir: Path) -> Path:
    """exercises/104-strings.py --> exercises-modules/104-strings.module.py"""
    return Path(modules_dir) / f"{source_path.stem}{MODULE_SUFFIX}{source_path.suffix}"


def write_module(unit: SourceUnit, tree: ast.Module, modules_dir: Path) -> MaterializedModule:
    """Материализует файл ученика и записывает его во временную директорию."""
    modules_dir = Path(modules_dir)
    modules_dir.mkdir(parents=True, exist_ok=True)

    function_names = top_level_functions(tree)
    text = materialize(unit.content, function_names)
    path = module_path(unit.path, modules_dir)
    path.write_text(text, encoding='utf-8')
    log.debug("Материализован модуль %s (функций: %d)", path, len(function_names))
    return MaterializedModule(source=unit, path=path, text=text, function_names=function_names)


def _unique_module_name(path: Path) -> str:
    stem = re.sub(r"\W", "_", path.stem)
    return f"gradelogic_exercise_{stem}_{next(_load_counter)}"


def load_module(materialized: MaterializedModule) -> ModuleType:
    """
    Загружает материализованный модуль как независимую единицу.

    Модуль регистрируется в sys.modules только на время выполнения,
    поэтому загрузки разных файлов не влияют друг на друга.

    Raises:
        ModuleLoadError: Если модуль не удалось загрузить или выполнить
    """
    module_name = _unique_module_name(materialized.path)
    spec = importlib.util.spec_from_file_location(module_name, materialized.path)
    if spec is None or spec.loader is None:
        raise ModuleLoadError(f"Не удалось прочитать {materialized.path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except (Exception, SystemExit) as e:
        raise ModuleLoadError(
            f"Не удалось загрузить {materialized.source.name}: {type(e).__name__}: {e}"
        ) from e
    finally:
        sys.modules.pop(module_name, None)
    return module


def capabilities(module: ModuleType) -> Dict[str, Any]:
    """Таблица экспортов модуля: имя функции -> объект."""
    table: Optional[Dict[str, Any]] = getattr(module, EXPORTS_TABLE, None)
    if not isinstance(table, dict):
        return {}
    return dict(table)


@contextmanager
def scratch_directory(modules_dir: Path) -> Iterator[Path]:
    """Создает временную директорию модулей и гарантированно удаляет ее."""
    modules_dir = Path(modules_dir)
    modules_dir.mkdir(parents=True, exist_ok=True)
    log.debug("Создана директория модулей: %s", modules_dir)
    try:
        yield modules_dir
    finally:
        shutil.rmtree(modules_dir, ignore_errors=True)
        log.debug("Директория модулей удалена: %s", modules_dir)
