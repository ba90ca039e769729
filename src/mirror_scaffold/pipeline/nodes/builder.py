from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from ..schemas import DirectoryEntry

logger = logging.getLogger(__name__)


def _create_dir(path: Path, created: list[Path] | None) -> None:
    if path.exists():
        logger.debug("exists, skipping %s", path)
        return
    path.mkdir()
    logger.debug("created directory %s", path)
    if created is not None:
        created.append(path)


def _create_file(path: Path, created: list[Path] | None) -> None:
    if path.exists():
        logger.debug("exists, skipping %s", path)
        return
    path.touch(exist_ok=False)
    logger.debug("created file %s", path)
    if created is not None:
        created.append(path)


def build_tree(
    plan: DirectoryEntry, parent_path: str | Path, created: list[Path] | None = None
) -> Path:
    """Materialize ``plan`` under ``parent_path`` and return the plan's root path.

    Only missing paths are created; anything already on disk is left alone,
    whatever its type. Files are created before subdirectories are descended.
    Creation errors propagate and leave the partial tree in place.
    """
    root = Path(parent_path) / plan.name
    _create_dir(root, created)
    for file in plan.files:
        _create_file(root / file.name, created)
    for sub_dir in plan.subdirectories:
        build_tree(sub_dir, root, created)
    return root


def builder_node(state: dict[str, Any]) -> dict[str, Any]:
    plan = DirectoryEntry.model_validate(state["plan"])
    created: list[Path] = []
    root = build_tree(plan, state["build_root"], created)
    report = f"root={root} created={len(created)}"
    return {"created": [str(p) for p in created], "report": report}
