from enum import Enum
import logging
import time
from langgraph.graph import END
from rpncalc.config import ERROR_TAG
from rpncalc.evaluator.errors import ErrorKind
from rpncalc.graph.state import State, build_initial_state
from rpncalc.guards.policy import apply_guards, should_skip
from rpncalc.history.store import HistoryStore
from rpncalc.observability.telemetry import log_calculation, log_node_entry, log_node_exit
from rpncalc.tools.calculator import calculate_detailed, format_result


class NodeName(str, Enum):
    INITIALIZE = "initialize"
    GUARD = "guard"
    EVALUATE = "evaluate"
    RECORD = "record"
    FINALIZE = "finalize"


def initialize_node(state: State) -> State:
    """Initialize the state."""
    state = build_initial_state(state["expression"])
    return state


def guard_node(state: State) -> State:
    """Skip blank or error-indicator input, and fail overlong input."""
    expression = state["expression"]

    if should_skip(expression):
        logging.debug(f"Nothing to evaluate in '{expression}'")
        state["skipped"] = True
        return state

    passed, error = apply_guards(expression)
    if not passed:
        logging.warning(f"Expression refused by guard: {error}")
        state["error_kind"] = ErrorKind.INVALID_EXPRESSION.value
    return state


def route_after_guard(state: State) -> str:
    """Pick the next node once guards have run."""
    if state["skipped"]:
        return END
    if state["error_kind"] is not None:
        return NodeName.FINALIZE.value
    return NodeName.EVALUATE.value


def evaluate_node(state: State) -> State:
    log_node_entry(NodeName.EVALUATE.value, state)
    expression = state["expression"]

    start = time.perf_counter()
    outcome = calculate_detailed(expression)
    duration_ms = (time.perf_counter() - start) * 1000

    if outcome.ok:
        state["value"] = outcome.value
        log_calculation(expression, format_result(outcome.value), None, duration_ms)
    else:
        state["error_kind"] = outcome.error.value
        log_calculation(expression, None, outcome.error.value, duration_ms)

    log_node_exit(NodeName.EVALUATE.value, state)
    return state


def make_record_node(history: HistoryStore):
    """Build the node that appends successful calculations to `history`."""

    def record_node(state: State) -> State:
        if state["error_kind"] is None and state["value"] is not None:
            entry = history.add(state["expression"], format_result(state["value"]))
            state["history_entry"] = entry.to_dict()
        return state

    return record_node


def finalize_node(state: State) -> State:
    """Render the outcome as display text."""
    if state["error_kind"] is not None:
        state["display_text"] = ERROR_TAG
    else:
        state["display_text"] = format_result(state["value"])
    log_node_exit(NodeName.FINALIZE.value, state)
    return state
