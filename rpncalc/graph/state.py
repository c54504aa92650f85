from typing import TypedDict, Dict, Optional


class State(TypedDict):
    expression: str
    skipped: bool
    value: Optional[float]
    error_kind: Optional[str]
    display_text: Optional[str]
    history_entry: Optional[Dict]


def build_initial_state(expression: str) -> State:
    state = State(
        expression=expression,
        skipped=False,
        value=None,
        error_kind=None,
        display_text=None,
        history_entry=None)
    return state
