"""Logging utilities"""

import json
from datetime import datetime
from zoneinfo import ZoneInfo

LOG_FILE = "log.jsonl"


def warn(message):
    """Console warning, same shape as every other status line"""
    print(f"  ⚠️ {message}")


def log_result(status, detail="", log_file=LOG_FILE, **fields):
    """Append one run event to the JSONL log and echo it"""
    result = {
        "timestamp": datetime.now(ZoneInfo("Europe/London")).isoformat(),
        "status": status,
    }
    if detail:
        result["detail"] = detail
    result.update(fields)

    with open(log_file, "a", encoding="utf-8") as f:
        f.write(json.dumps(result) + "\n")

    print(f"[{status}] {detail}" if detail else f"[{status}]")
