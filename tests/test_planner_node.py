import os
from pathlib import Path

import pytest
from mirror_scaffold.errors import UnsupportedEntryError
from mirror_scaffold.naming import transformed_name
from mirror_scaffold.pipeline.nodes.planner import plan_tree, planner_node
from mirror_scaffold.pipeline.schemas import DirectoryEntry, FileEntry


def _make_src(tmp_path: Path) -> Path:
    src = tmp_path / "src"
    (src / "sub").mkdir(parents=True)
    (src / "module.py").write_text("x = 1\n")
    (src / "__init__.py").write_text("")
    (src / "sub" / "helpers.py").write_text("")
    return src


def test_plan_tree_example(tmp_path: Path) -> None:
    plan = plan_tree(_make_src(tmp_path), "tests")
    assert plan.name == "tests"
    assert sorted(f.name for f in plan.files) == ["__init__.py", "test_module.py"]
    assert plan.subdirectories == [
        DirectoryEntry(name="test_sub", files=[FileEntry(name="test_helpers.py")])
    ]


def test_plan_tree_is_repeatable(tmp_path: Path) -> None:
    src = _make_src(tmp_path)
    (src / "sub" / "deeper").mkdir()
    (src / "sub" / "deeper" / "__init__.py").write_text("")
    assert plan_tree(src, "tests") == plan_tree(src, "tests")


def test_plan_tree_missing_source_is_empty(tmp_path: Path) -> None:
    plan = plan_tree(tmp_path / "nope", "tests")
    assert plan == DirectoryEntry(name="tests")


def test_plan_tree_source_is_a_file(tmp_path: Path) -> None:
    f = tmp_path / "lonely.py"
    f.write_text("")
    assert plan_tree(f, "tests") == DirectoryEntry(name="tests")


def test_plan_tree_empty_subdirectory(tmp_path: Path) -> None:
    src = tmp_path / "src"
    (src / "pkg").mkdir(parents=True)
    plan = plan_tree(src, "t")
    assert plan.subdirectories == [DirectoryEntry(name="test_pkg")]


def test_plan_tree_root_name_kept_verbatim(tmp_path: Path) -> None:
    src = _make_src(tmp_path)
    assert plan_tree(src, "my_tests").name == "my_tests"


def test_symlink_aborts_planning(tmp_path: Path) -> None:
    src = _make_src(tmp_path)
    os.symlink(src / "module.py", src / "sub" / "link.py")
    with pytest.raises(UnsupportedEntryError) as exc:
        plan_tree(src, "tests")
    assert exc.value.path == src / "sub" / "link.py"


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="needs mkfifo")
def test_fifo_aborts_planning(tmp_path: Path) -> None:
    src = _make_src(tmp_path)
    os.mkfifo(src / "pipe")
    with pytest.raises(UnsupportedEntryError):
        plan_tree(src, "tests")


def test_planner_node_returns_dumped_plan(tmp_path: Path) -> None:
    src = _make_src(tmp_path)
    out = planner_node({"source_path": str(src), "root_name": "tests"})
    assert "plan" in out
    plan = out["plan"]
    assert plan["name"] == "tests"
    assert {f["name"] for f in plan["files"]} == {"__init__.py", "test_module.py"}
    assert [d["name"] for d in plan["subdirectories"]] == ["test_sub"]


def test_plan_tree_keeps_filesystem_order(tmp_path: Path) -> None:
    src = tmp_path / "src"
    src.mkdir()
    for n in ("zeta.py", "alpha.py", "__init__.py", "mid.py"):
        (src / n).write_text("")
    with os.scandir(src) as it:
        expected = [transformed_name(e.name) for e in it]
    plan = plan_tree(src, "tests")
    assert [f.name for f in plan.files] == expected
