from __future__ import annotations

from typing import Any, TypedDict, cast

from langgraph.graph import END, StateGraph

from .nodes.builder import builder_node
from .nodes.planner import planner_node
from .nodes.split import split_node


class State(TypedDict, total=False):
    source_path: str
    test_path: str

    build_root: str
    root_name: str
    plan: dict[str, Any]
    created: list[str]
    report: str


def build_graph(dry_run: bool = False) -> Any:
    """Compile split -> planner -> builder; ``dry_run`` stops after planning."""
    g = StateGraph(State)
    g.add_node("split", cast(Any, split_node))
    g.add_node("planner", cast(Any, planner_node))
    g.set_entry_point("split")
    g.add_edge("split", "planner")
    if dry_run:
        g.add_edge("planner", END)
    else:
        g.add_node("builder", cast(Any, builder_node))
        g.add_edge("planner", "builder")
        g.add_edge("builder", END)
    return g.compile()
