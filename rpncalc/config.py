"""Configuration management for the calculator."""
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Per-user state; created lazily by the history store on first write
DATA_DIR = Path(os.getenv("DATA_DIR", str(Path.home() / ".rpncalc")))
HISTORY_FILE = Path(os.getenv("HISTORY_FILE", str(DATA_DIR / "history.json")))

HISTORY_LIMIT = int(os.getenv("HISTORY_LIMIT", "50"))
DISPLAY_DECIMALS = int(os.getenv("DISPLAY_DECIMALS", "8"))
ERROR_TAG = os.getenv("ERROR_TAG", "Error")
MAX_EXPRESSION_LENGTH = int(os.getenv("MAX_EXPRESSION_LENGTH", "256"))

TRACE_LIMIT = int(os.getenv("TRACE_LIMIT", "200"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
