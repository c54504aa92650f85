"""Build the LangGraph evaluation graph for the "=" action."""
from langgraph.graph import StateGraph, END, START
from rpncalc.graph.state import State
from rpncalc.graph.nodes import (
    initialize_node, guard_node, evaluate_node,
    make_record_node, finalize_node, route_after_guard
)
from rpncalc.history.store import HistoryStore


def build_graph(history: HistoryStore):
    """Build and return the compiled evaluation graph writing to `history`."""
    graph = StateGraph(State)

    graph.add_node("initialize", initialize_node)
    graph.add_node("guard", guard_node)
    graph.add_node("evaluate", evaluate_node)
    graph.add_node("record", make_record_node(history))
    graph.add_node("finalize", finalize_node)

    graph.add_edge(START, "initialize")
    graph.add_edge("initialize", "guard")
    graph.add_conditional_edges(
        "guard",
        route_after_guard,
        {"evaluate": "evaluate", "finalize": "finalize", END: END},
    )
    graph.add_edge("evaluate", "record")
    graph.add_edge("record", "finalize")
    graph.add_edge("finalize", END)

    return graph.compile()


if __name__ == "__main__":
    graph = build_graph(HistoryStore())
    print("Graph built successfully!")
    print(f"Nodes: {list(graph.nodes.keys())}")
