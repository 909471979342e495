"""
Progress logging for the GPX export.

Messages always go to the console. While an export runs with ``--log-file``,
the same lines are mirrored into that file, so a long run over a full
registry dump leaves a record of which files were read.

Usage:
    from mastr2gpx.utils.logging import log, open_log_file, close_log_file

    open_log_file("export.log")
    try:
        log("Reading file EinheitenSolar_1.xml")
    finally:
        close_log_file()
"""

import threading
from pathlib import Path
from typing import Union


# One mirror file per thread, so concurrent exports do not mix their logs
_thread_local = threading.local()


def log(message: str) -> None:
    """
    Print a message and mirror it to the current thread's log file, if any.

    Example:
        >>> log("Reading file EinheitenSolar_1.xml")
        Reading file EinheitenSolar_1.xml
    """
    print(message)
    log_file = getattr(_thread_local, "log_file", None)
    if log_file is not None:
        log_file.write(message + "\n")
        log_file.flush()


def open_log_file(path: Union[str, Path]) -> None:
    """
    Start mirroring log() output of the current thread to path.

    A previously opened mirror file is closed first. The file is truncated.

    Raises:
        OSError: if the file cannot be created
    """
    close_log_file()
    _thread_local.log_file = open(path, "w", encoding="utf-8")


def close_log_file() -> None:
    """Stop mirroring and close the log file. Safe to call when none is open."""
    log_file = getattr(_thread_local, "log_file", None)
    _thread_local.log_file = None
    if log_file is not None:
        log_file.close()
