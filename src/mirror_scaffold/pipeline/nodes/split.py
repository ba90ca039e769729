from __future__ import annotations

from typing import Any

from ...naming import split_test_path


def split_node(state: dict[str, Any]) -> dict[str, Any]:
    build_root, root_name = split_test_path(state["test_path"])
    return {"build_root": str(build_root), "root_name": root_name}
