"""A calculator session: display, history and the evaluation graph."""
import logging
from typing import List, Optional

from rpncalc.graph.build_graph import build_graph
from rpncalc.graph.state import build_initial_state
from rpncalc.history.store import HistoryStore
from rpncalc.keypad.display import Display
from rpncalc.keypad.registry import Action, resolve_action

logger = logging.getLogger(__name__)

EMPTY_HISTORY_MESSAGE = "No history saved."


class CalculatorSession:
    """Dispatches keypad symbols to display, evaluation and history actions."""

    def __init__(self, history: HistoryStore, graph=None, display: Optional[Display] = None):
        self.history = history
        self.graph = graph if graph is not None else build_graph(history)
        self.display = display or Display()
        self.history_visible = False

    def press(self, symbol: str) -> str:
        """Handle one keypad press and return the display text."""
        action = resolve_action(symbol)
        logger.debug(f"Key '{symbol}' -> {action.value}")

        if action in (Action.APPEND_DIGIT, Action.APPEND_OPERATOR):
            self.display.append(symbol)
        elif action == Action.CLEAR:
            self.display.clear()
        elif action == Action.EVALUATE:
            self.evaluate()
        elif action == Action.TOGGLE_HISTORY:
            self.toggle_history()
        return self.display.value

    def press_all(self, symbols: str) -> str:
        """Press each character of `symbols` in turn."""
        for symbol in symbols:
            self.press(symbol)
        return self.display.value

    def evaluate(self) -> str:
        """Run the evaluation graph on the current display text."""
        result = self.graph.invoke(build_initial_state(self.display.value))
        if result["skipped"]:
            return self.display.value
        self.display.show(result["display_text"])
        return self.display.value

    def toggle_history(self) -> bool:
        self.history_visible = not self.history_visible
        return self.history_visible

    def history_lines(self) -> List[str]:
        """Formatted history entries, newest first."""
        entries = self.history.entries()
        if not entries:
            return [EMPTY_HISTORY_MESSAGE]
        return [entry.format() for entry in entries]
