import os
import threading
import config

_LEVEL_COLORS = {
    "WARN": "\x1b[33m",
    "ERROR": "\x1b[31m",
    "DEBUG": "\x1b[2m",
}


def enabled(scope, level="INFO"):
    if level == "DEBUG" and not getattr(config, "LOG_DEBUG", False):
        return False
    if scope == "WORLDGEN" and level in ("INFO", "DEBUG") and not getattr(config, "LOG_WORLDGEN", True):
        return False
    return True


def log(scope, msg, level="INFO"):
    if not enabled(scope, level):
        return
    pid = os.getpid()
    thread = threading.current_thread().name
    text = f"[{level} pid{pid} thr{thread} {scope}] {msg}"
    use_color = getattr(config, "LOG_COLOR", True) and os.getenv("NO_COLOR") is None
    if use_color and level in _LEVEL_COLORS:
        text = f"{_LEVEL_COLORS[level]}{text}\x1b[0m"
    print(text)
