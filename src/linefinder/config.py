from __future__ import annotations
import os

# characters that separate words; runs of them collapse to a single space
WORD_BREAKS: frozenset[str] = frozenset(" (),.!:;\"“‘’”—")

# document searched when the CLI gets no arguments
DEFAULT_DOCUMENT: str = "./lepanto.txt"

# reading mode for documents and query files
ENCODING: str = "utf-8"

# scan mode for DocumentIndex:
# - "serial" single pass in document order
# - "threads" / "procs" shard the entries across a pool
SCAN_MODE: str = "serial"

_cpu = os.cpu_count() or 4
DEFAULT_WORKERS_THREADS = _cpu * 2
DEFAULT_WORKERS_PROCS = _cpu

# below this many entries a pool costs more than it saves
PARALLEL_MIN_LINES: int = 2_000
