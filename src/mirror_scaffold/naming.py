from __future__ import annotations

from pathlib import Path

from .errors import MalformedTestPathError

INIT_FILE = "__init__.py"
TEST_PREFIX = "test_"


def is_init_file(name: str) -> bool:
    return name == INIT_FILE


def transformed_name(name: str) -> str:
    """Return the test-tree name for a source entry basename.

    Package init files keep their name so the mirrored tree stays importable;
    every other file or directory gets the ``test_`` prefix.
    """
    if is_init_file(name):
        return name
    return f"{TEST_PREFIX}{name}"


def split_test_path(path: str | Path) -> tuple[Path, str]:
    """Split a destination path into (build parent, root name).

    ``.`` names the current directory itself. Only an empty path or a bare
    filesystem root has no parent to build under.
    """
    if not str(path):
        raise MalformedTestPathError(path)
    p = Path(path)
    if p == Path("."):
        return p, "."
    if not p.name:
        raise MalformedTestPathError(path)
    return p.parent, p.name
