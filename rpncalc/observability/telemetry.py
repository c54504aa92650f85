"""Observability and telemetry for calculator sessions."""
import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional
from datetime import datetime
from enum import Enum
from rpncalc.config import TRACE_LIMIT

logger = logging.getLogger(__name__)


class RecordType(str, Enum):
    """Types of trace records."""
    CALCULATION = "calculation"
    NODE_ENTRY = "node_entry"
    NODE_EXIT = "node_exit"


@dataclass
class TraceRecord:
    """Base class for trace records."""
    timestamp: datetime

    def to_dict(self) -> Dict[str, Any]:
        """Convert record to dictionary for serialization."""
        record_type = getattr(self, 'record_type', None)
        return {
            "timestamp": self.timestamp.isoformat(),
            "type": record_type.value if record_type else "unknown",
            **{k: v for k, v in self.__dict__.items() if k not in ("timestamp", "record_type")}
        }


@dataclass
class CalculationRecord(TraceRecord):
    """Record for one pass through the evaluator."""
    expression: str
    result: Optional[str]
    error_kind: Optional[str]
    duration_ms: float
    record_type: RecordType = field(default=RecordType.CALCULATION, init=False)


@dataclass
class NodeEntryRecord(TraceRecord):
    """Record for node entry."""
    node_name: str
    expression: str
    record_type: RecordType = field(default=RecordType.NODE_ENTRY, init=False)


@dataclass
class NodeExitRecord(TraceRecord):
    """Record for node exit."""
    node_name: str
    display_text: Optional[str] = None
    record_type: RecordType = field(default=RecordType.NODE_EXIT, init=False)


# In-memory trace storage, oldest records dropped past TRACE_LIMIT
_trace_log: deque = deque(maxlen=TRACE_LIMIT)


def log_calculation(expression: str, result: Optional[str],
                    error_kind: Optional[str], duration_ms: float):
    """Log an evaluation with timing."""
    record = CalculationRecord(
        timestamp=datetime.now(),
        expression=expression,
        result=result,
        error_kind=error_kind,
        duration_ms=duration_ms
    )
    _trace_log.append(record)
    outcome = result if error_kind is None else f"error: {error_kind}"
    logger.info(f"Calculated '{expression[:100]}' -> {outcome} ({duration_ms:.2f}ms)")


def log_node_entry(node_name: str, state: Dict):
    """Log when entering a node."""
    record = NodeEntryRecord(
        timestamp=datetime.now(),
        node_name=node_name,
        expression=state.get("expression", "")[:50]
    )
    _trace_log.append(record)
    logger.debug(f"Entering node: {node_name}")


def log_node_exit(node_name: str, state: Dict):
    """Log when exiting a node."""
    record = NodeExitRecord(
        timestamp=datetime.now(),
        node_name=node_name,
        display_text=state.get("display_text")
    )
    _trace_log.append(record)
    logger.debug(f"Exiting node: {node_name}")


def get_trace() -> List[TraceRecord]:
    """Get the full trace log."""
    return list(_trace_log)


def get_trace_dicts() -> List[Dict[str, Any]]:
    """Get trace log as list of dictionaries."""
    return [record.to_dict() for record in _trace_log]


def get_calculations() -> List[CalculationRecord]:
    """Get all calculation records."""
    return [r for r in _trace_log if isinstance(r, CalculationRecord)]


def clear_trace():
    """Clear the trace log."""
    _trace_log.clear()


def format_trace_summary() -> str:
    """Format a human-readable trace summary."""
    if not _trace_log:
        return "No trace data"

    lines = ["\n=== Calculator Execution Trace ==="]
    for record in _trace_log:
        timestamp = record.timestamp.strftime("%H:%M:%S")
        if isinstance(record, CalculationRecord):
            outcome = record.result if record.error_kind is None else record.error_kind
            lines.append(
                f"[{timestamp}] CALC: {record.expression} -> {outcome} ({record.duration_ms:.2f}ms)")
        elif isinstance(record, NodeEntryRecord):
            lines.append(f"[{timestamp}] ENTER: {record.node_name}")
        elif isinstance(record, NodeExitRecord):
            lines.append(f"[{timestamp}] EXIT: {record.node_name}")

    return "\n".join(lines)
