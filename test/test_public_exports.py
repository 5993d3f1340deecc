from __future__ import annotations

import importlib
import pathlib
import types

import pytest

from markstyle import _typing as _t

root = pathlib.Path(__file__).parent.parent / "markstyle"
files = [file for file in root.glob("*.py") if not file.name.startswith("_")]


@pytest.mark.parametrize("file", files, ids=[file.name for file in files])
def test_export_consistency(file: pathlib.Path):
    path = "markstyle." + file.name.removesuffix(".py")
    module = importlib.import_module(path)
    exported = set(module.__all__)
    missing = set()
    for name, value in module.__dict__.items():
        if name.startswith("_") or name in exported:
            continue
        if isinstance(value, (types.ModuleType, _t.TypeVar)):
            continue
        if obj_module := getattr(value, "__module__", None):
            if obj_module != path:
                continue
        missing.add(name)

    assert not missing, "some items are missing from __all__"


def test_package_exports():
    import markstyle

    for name in markstyle.__all__:
        assert hasattr(markstyle, name)
