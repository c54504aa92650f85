"""CLI interface for the calculator."""
import sys
from rpncalc.config import LOG_LEVEL, HISTORY_FILE
from rpncalc.history.store import HistoryStore
from rpncalc.keypad.display import Display
from rpncalc.keypad.session import CalculatorSession
from rpncalc.observability.telemetry import format_trace_summary, clear_trace
from rpncalc.observability.logging_config import configure_logging

# Configure logging before any session is built
configure_logging(LOG_LEVEL)

USAGE = "Usage: python -m rpncalc.app [--trace] 'expression' | --history"


def main(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(USAGE)
        sys.exit(1)

    session = CalculatorSession(HistoryStore(HISTORY_FILE))

    if args == ["--history"]:
        for line in session.history_lines():
            print(line)
        return

    show_trace = "--trace" in args
    args = [a for a in args if a != "--trace"]
    expression = " ".join(args)
    clear_trace()  # Clear trace for fresh run

    session.display = Display(expression)
    result = session.evaluate()

    if show_trace:
        print(format_trace_summary())
    print(result)


if __name__ == "__main__":
    main()
