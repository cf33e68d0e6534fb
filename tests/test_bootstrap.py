from __future__ import annotations

from pathlib import Path

import pytest

from adapters.function_provider import PluginLoader
from bootstrap import build_registry
from config import Settings

_DECLINING_PLUGIN = "def plugin_func(name, value):\n    return False, 0.0\n"

_NAMED_PLUGIN = '''
PLUGIN_NAME = "shared"


def plugin_func(name, value):
    return True, {result}
'''


@pytest.fixture
def loader():
    loader = PluginLoader()
    yield loader
    loader.unload_all()


def _write(directory: Path, filename: str, source: str) -> None:
    (directory / filename).write_text(source, encoding="utf-8")


def test_plugin_named_like_builtin_does_not_break_startup(tmp_path, loader):
    _write(tmp_path, "math.py", _DECLINING_PLUGIN)

    registry = build_registry(Settings(plugins_dir=str(tmp_path)), loader)

    assert [p.name for p in registry] == ["math", "math-2"]
    assert registry.apply("cos", 0.0) == 1.0


def test_plugin_named_like_remote_provider(tmp_path, loader):
    _write(tmp_path, "remote.py", _DECLINING_PLUGIN)
    settings = Settings(
        plugins_dir=str(tmp_path),
        remote_provider_url="http://calc.test/apply",
        builtin_functions=False,
    )

    registry = build_registry(settings, loader)

    assert [p.name for p in registry] == ["remote", "remote-2"]


def test_duplicate_plugin_name_keeps_first_and_skips_rest(tmp_path, loader):
    _write(tmp_path, "a_first.py", _NAMED_PLUGIN.format(result="1.0"))
    _write(tmp_path, "b_second.py", _NAMED_PLUGIN.format(result="2.0"))

    registry = build_registry(Settings(plugins_dir=str(tmp_path)), loader)

    assert [p.name for p in registry] == ["shared", "math"]
    assert registry.apply("sin", 0.0) == 1.0


def test_registration_order_is_plugins_then_builtin(tmp_path, loader):
    _write(tmp_path, "halver.py", "def plugin_func(name, value):\n    return True, value / 2\n")

    registry = build_registry(Settings(plugins_dir=str(tmp_path)), loader)

    assert [info.kind for info in registry.describe()] == ["plugin", "builtin"]
