from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from ...errors import UnsupportedEntryError
from ...naming import transformed_name
from ..schemas import DirectoryEntry, FileEntry

logger = logging.getLogger(__name__)


def plan_tree(source_path: str | Path, test_dir_name: str) -> DirectoryEntry:
    """Describe the test tree mirroring ``source_path``, rooted at ``test_dir_name``.

    A source path that cannot be opened as a directory plans as empty.
    Entries are visited in the order the filesystem reports them. Symlinks and
    special files abort planning with UnsupportedEntryError.
    """
    test_dir = DirectoryEntry(name=test_dir_name)
    try:
        it = os.scandir(source_path)
    except OSError as exc:
        logger.debug("source %s not readable as a directory (%s); planning empty", source_path, exc)
        return test_dir

    with it:
        for entry in it:
            if entry.is_file(follow_symlinks=False):
                test_dir.register_file(FileEntry(name=transformed_name(entry.name)))
            elif entry.is_dir(follow_symlinks=False):
                sub_dir = plan_tree(entry.path, transformed_name(entry.name))
                test_dir.register_directory(sub_dir)
            else:
                raise UnsupportedEntryError(entry.path)
    return test_dir


def planner_node(state: dict[str, Any]) -> dict[str, Any]:
    plan = plan_tree(state["source_path"], state["root_name"])
    return {"plan": plan.model_dump()}
