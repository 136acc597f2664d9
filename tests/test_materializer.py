import sys
from pathlib import Path

import pytest

from gradelogic.core.interfaces import ModuleLoadError
from gradelogic.core.materializer import (
    EXPORTS_BLOCK, capabilities, export_statement, load_module, materialize, module_path,
    scratch_directory, write_module,
)
from gradelogic.core.tree_query import parse_source
from gradelogic.core.types import SourceUnit


def make_unit(tmp_path: Path, name: str, text: str) -> SourceUnit:
    path = tmp_path / name
    path.write_text(text, encoding='utf-8')
    return SourceUnit(path=path, content=text)


class TestMaterialize:
    """Построение текста модуля с таблицей экспортов"""

    def test_appends_one_export_per_function_in_order(self):
        text = "def b():\n    return 2\n\ndef a():\n    return 1\n"
        result = materialize(text, ["b", "a"])

        assert result.startswith(text)
        assert result.endswith(EXPORTS_BLOCK + "__exports__['b'] = b\n__exports__['a'] = a\n\n\n")

    def test_is_deterministic(self):
        text = "def f():\n    pass\n"
        assert materialize(text, ["f"]) == materialize(text, ["f"])

    def test_zero_functions_gives_empty_table(self):
        result = materialize("x = 1\n", [])
        assert "__exports__ = {}" in result
        assert "__exports__[" not in result

    def test_export_statement(self):
        assert export_statement("make_zero") == "__exports__['make_zero'] = make_zero"

    def test_module_path(self):
        path = module_path(Path("exercises/104-strings.py"), Path("exercises-modules"))
        assert path == Path("exercises-modules/104-strings.module.py")


class TestLoadModule:
    """Загрузка материализованных модулей"""

    def test_exports_only_top_level_functions(self, tmp_path):
        text = "def outer():\n    def inner():\n        return 1\n    return inner\n\nVALUE = 3\n"
        unit = make_unit(tmp_path, "sample.py", text)
        materialized = write_module(unit, parse_source(text), tmp_path / "modules")

        assert materialized.path == tmp_path / "modules" / "sample.module.py"
        assert materialized.path.read_text(encoding='utf-8') == materialized.text
        assert materialized.function_names == ["outer"]

        table = capabilities(load_module(materialized))
        assert list(table) == ["outer"]
        assert table["outer"]()() == 1

    def test_duplicate_function_resolves_to_last(self, tmp_path):
        text = "def f():\n    return 1\n\ndef f():\n    return 2\n"
        unit = make_unit(tmp_path, "dup.py", text)
        materialized = write_module(unit, parse_source(text), tmp_path / "modules")

        assert materialized.text.count("__exports__['f'] = f") == 2
        assert capabilities(load_module(materialized))["f"]() == 2

    def test_same_function_names_in_different_files_are_independent(self, tmp_path):
        modules = tmp_path / "modules"
        first = make_unit(tmp_path, "one.py", "def value():\n    return 1\n")
        second = make_unit(tmp_path, "two.py", "def value():\n    return 2\n")

        table_one = capabilities(load_module(write_module(first, parse_source(first.content), modules)))
        table_two = capabilities(load_module(write_module(second, parse_source(second.content), modules)))

        assert table_one["value"]() == 1
        assert table_two["value"]() == 2

    def test_module_is_not_left_in_sys_modules(self, tmp_path):
        unit = make_unit(tmp_path, "clean.py", "def f():\n    pass\n")
        before = set(sys.modules)
        load_module(write_module(unit, parse_source(unit.content), tmp_path / "modules"))
        assert set(sys.modules) - before == set()

    @pytest.mark.parametrize("text, error_name", [
        ("raise RuntimeError('boom')\n", "RuntimeError"),
        ("import a_module_that_does_not_exist_anywhere\n", "ModuleNotFoundError"),
        ("undefined_name + 1\n", "NameError"),
        ("import sys\nsys.exit(3)\n", "SystemExit"),
    ])
    def test_runtime_failure_becomes_load_error(self, tmp_path, text, error_name):
        unit = make_unit(tmp_path, "bad.py", text)
        materialized = write_module(unit, parse_source(text), tmp_path / "modules")

        with pytest.raises(ModuleLoadError) as exc_info:
            load_module(materialized)
        assert error_name in exc_info.value.message
        assert "bad.py" in exc_info.value.message


class TestScratchDirectory:
    """Временная директория модулей"""

    def test_removed_after_normal_exit(self, tmp_path):
        target = tmp_path / "exercises-modules"
        with scratch_directory(target) as modules_dir:
            (modules_dir / "x.module.py").write_text("", encoding='utf-8')
            assert target.is_dir()
        assert not target.exists()

    def test_removed_after_exception(self, tmp_path):
        target = tmp_path / "exercises-modules"
        with pytest.raises(RuntimeError):
            with scratch_directory(target) as modules_dir:
                (modules_dir / "x.module.py").write_text("", encoding='utf-8')
                raise RuntimeError("проверка упала")
        assert not target.exists()
