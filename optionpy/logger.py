from __future__ import annotations
import sys, datetime as _dt, json
from typing import Optional, Dict, Any


_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


class ConsoleLogger:
    """Single-line records on stderr, as text or compact JSON."""

    def __init__(self, name: str = "optionpy", level: str = "INFO", json_output: bool = False, context: Optional[Dict[str, Any]] = None):
        self.name = name
        self.level_name = level.upper() if level.upper() in _LEVELS else "INFO"
        self.json_output = json_output
        self.context = dict(context or {})

    def set_level(self, level: str) -> None:
        # unknown names keep the current level
        if level.upper() in _LEVELS:
            self.level_name = level.upper()

    def bind(self, **fields: Any) -> "ConsoleLogger":
        return ConsoleLogger(self.name, self.level_name, self.json_output, {**self.context, **fields})

    def enabled(self, level: str) -> bool:
        return _LEVELS[level] >= _LEVELS[self.level_name]

    def log(self, level: str, msg: str, **fields: Any) -> None:
        level = level.upper()
        if not self.enabled(level):
            return
        ts = _dt.datetime.now(_dt.timezone.utc).isoformat()
        all_fields = {**self.context, **fields}
        if self.json_output:
            data: Dict[str, Any] = {"ts": ts, "name": self.name, "level": level, "msg": msg}
            if all_fields:
                data["fields"] = all_fields
            print(json.dumps(data, separators=(",", ":"), default=repr), file=sys.stderr)
        else:
            extras = "".join(f" {k}={v}" for k, v in sorted(all_fields.items()))
            print(f"[{ts}] {self.name} {level}: {msg}{extras}", file=sys.stderr)

    def debug(self, msg: str, **fields: Any) -> None: self.log("DEBUG", msg, **fields)


_default = ConsoleLogger()


def default_logger() -> ConsoleLogger:
    return _default
