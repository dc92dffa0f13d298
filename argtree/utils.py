# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Logging setup for tools built on argtree."""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler

LOG_MODE_ENV = "ARGTREE_LOG_MODE"
JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
TEXT_LOG_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"
CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
    except OSError:
        return False
    return any(marker in content for marker in CONTAINER_MARKERS)


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
        return handler
    raise ValueError(f"Invalid log mode: {mode}")


def _file_handler(log_filename: str, as_json: bool) -> logging.Handler:
    handler = logging.FileHandler(log_filename, "a", "UTF-8")
    if as_json:
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
    else:
        handler.setFormatter(
            logging.Formatter(TEXT_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
    return handler


def setup_logging(
    mode: str | None = None,
    log_filename: str = "argtree.log",
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Route log records to the console and to `log_filename`.

    argtree only emits records on the "argtree" logger; applications call this
    once at startup. `mode` is "cli" (rich console) or "json" (structured lines on
    stderr). When omitted it comes from `ARGTREE_LOG_MODE`, then defaults to "json"
    inside containers and "cli" elsewhere.

    Raises:
        ValueError: If `mode` is not "cli" or "json". Existing handlers are kept.
    """
    if not mode:
        mode = os.getenv(LOG_MODE_ENV) or ("json" if running_in_container() else "cli")

    console_handler = _console_handler(mode)
    console_handler.setLevel(console_log_level)
    file_handler = _file_handler(log_filename, json_log_to_file)
    file_handler.setLevel(file_log_level)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    root.addHandler(console_handler)
    root.addHandler(file_handler)

    logging.getLogger("argtree").debug("Logging initialized in '%s' mode.", mode)
