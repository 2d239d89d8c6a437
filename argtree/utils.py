# Argtree CLI Resolver — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py
Logging set-up for applications built on argtree and for the argtree CLI."""
from __future__ import annotations

import logging
import os
from pathlib import Path

from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
TEXT_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"
CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")


def running_in_container() -> bool:
    """True when PID 1 belongs to a container runtime, where JSON logs are the default."""
    try:
        content = Path("/proc/1/cgroup").read_text(encoding="UTF-8")
    except OSError:
        return False
    return any(marker in content for marker in CONTAINER_MARKERS)


def setup_logging(
    mode: str | None = None,
    verbose: bool = False,
    log_file: str | Path | None = None,
) -> logging.Logger:
    """
    Route the "argtree" logger to the console and, optionally, a file.

    Handlers are attached to the "argtree" logger only, replacing any attached by
    an earlier call; the application's root logger is left alone.

    Args:
        mode (str | None): "cli" for Rich console output or "json" for one JSON
            object per record. Defaults to `ARGTREE_LOG_MODE`, else "json" inside
            a container and "cli" elsewhere. The log file uses the same format.
        verbose (bool): Show resolution steps (DEBUG) on the console instead of
            warnings only.
        log_file (str | Path | None): Append every record, DEBUG included, here.

    Raises:
        ValueError: If `mode` is not "cli" or "json".
    """
    if not mode:
        mode = os.getenv("ARGTREE_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )
    if mode not in ("cli", "json"):
        raise ValueError(f"Invalid log mode: {mode}")

    logger = logging.getLogger("argtree")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    if mode == "cli":
        console_handler: logging.Handler = RichHandler(
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    else:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(JsonFormatter(JSON_FORMAT))
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, "a", "UTF-8")
        file_handler.setLevel(logging.DEBUG)
        if mode == "json":
            file_handler.setFormatter(JsonFormatter(JSON_FORMAT))
        else:
            file_handler.setFormatter(
                logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
            )
        logger.addHandler(file_handler)

    logger.debug("Logging initialized in '%s' mode.", mode)
    return logger
