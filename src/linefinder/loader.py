from __future__ import annotations
import logging
import os
from typing import List

from .config import ENCODING
from .errors import DocumentLoadError

log = logging.getLogger(__name__)


def read_lines(path: str | os.PathLike[str]) -> List[str]:
    """
    Read every physical line of a text file, without line terminators.
    Undecodable bytes are dropped. A missing/unreadable file or a file with
    no lines raises DocumentLoadError.
    """
    try:
        with open(path, "r", encoding=ENCODING, errors="ignore") as f:
            lines = [ln.rstrip("\r\n") for ln in f]
    except OSError as e:
        raise DocumentLoadError(f"could not open {os.fspath(path)}: {e.strerror or e}") from e

    if not lines:
        raise DocumentLoadError(f"{os.fspath(path)} has no lines")
    log.info("Read %d lines from %s", len(lines), os.fspath(path))
    return lines


def read_queries(path: str | os.PathLike[str]) -> List[str]:
    """One query per line of the file."""
    return read_lines(path)
