# src/linefinder/index.py
from __future__ import annotations

import logging
from concurrent.futures import Executor, ThreadPoolExecutor, ProcessPoolExecutor
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from . import config as CFG
from .errors import EmptyIndexError
from .models import FindResult, IndexEntry, LineProfile
from .scoring import PERFECT, score

log = logging.getLogger(__name__)

# (score, line_no, position in entries)
_Best = Tuple[float, int, int]


def _better(cur: Optional[_Best], cand: _Best) -> _Best:
    """Higher score wins; on equal score the earlier line wins."""
    if cur is None:
        return cand
    if cand[0] > cur[0]:
        return cand
    if cand[0] == cur[0] and cand[1] < cur[1]:
        return cand
    return cur


def _scan(entries: Sequence[IndexEntry], query: LineProfile, offset: int = 0) -> Optional[_Best]:
    """Linear scan in stored order. Stops at the first exact match."""
    best: Optional[_Best] = None
    for pos, entry in enumerate(entries, start=offset):
        s = score(entry.profile, query)
        if s == PERFECT:
            return (s, entry.line_no, pos)
        if best is None or s > best[0]:
            best = (s, entry.line_no, pos)
    return best


# entries of the index a process-pool worker was started for
_worker_entries: Tuple[IndexEntry, ...] = ()


def _init_worker(entries: Tuple[IndexEntry, ...]) -> None:
    global _worker_entries
    _worker_entries = entries


def _scan_worker_shard(start: int, stop: int, query: LineProfile) -> Optional[_Best]:
    return _scan(_worker_entries[start:stop], query, start)


class DocumentIndex:
    """
    One LineProfile per non-empty line of a document, in document order.

    Empty lines are skipped but line numbers are kept, so a result always
    points back at the source line (0-based).

    The scan is serial by default. With mode "threads" or "procs" and enough
    entries, the entries are split into contiguous shards and the shard
    winners are reduced by score, then by lowest line number. That gives the
    same answer as the serial scan. The pool is started on the first sharded
    search and kept until close().
    """

    def __init__(self, lines: Iterable[str], *, mode: Optional[str] = None,
                 workers: Optional[int] = None) -> None:
        self._lines: List[str] = list(lines)
        self._entries: Tuple[IndexEntry, ...] = tuple(
            IndexEntry(line_no=i, original=raw, profile=LineProfile.from_text(raw))
            for i, raw in enumerate(self._lines)
            if len(raw) > 0
        )
        self.mode = (mode or CFG.SCAN_MODE).lower()
        if self.mode not in ("serial", "threads", "procs"):
            raise ValueError(f"Unsupported scan mode: {self.mode}")
        if workers is None:
            workers = CFG.DEFAULT_WORKERS_THREADS if self.mode == "threads" else CFG.DEFAULT_WORKERS_PROCS
        self.workers = max(1, int(workers))
        self._pool: Optional[Executor] = None
        if self.mode != "serial" and self.workers == 1:
            log.info("Only one worker for mode=%s; scanning serially", self.mode)
        log.info("Indexed %d of %d lines (mode=%s)", len(self._entries), len(self._lines), self.mode)

    # ------------- container -------------

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[IndexEntry]:
        return iter(self._entries)

    @property
    def entries(self) -> Tuple[IndexEntry, ...]:
        return self._entries

    def line(self, line_no: int) -> str:
        """Raw text of a document line, empty lines included."""
        return self._lines[line_no]

    # ------------- search -------------

    def fuzzy_find(self, query: Union[LineProfile, str]) -> int:
        """Line number of the line that best matches the query."""
        return self.best_match(query).line_no

    def best_match(self, query: Union[LineProfile, str]) -> FindResult:
        """Best matching line, with its score. Raises EmptyIndexError on an empty index."""
        if not self._entries:
            raise EmptyIndexError("cannot search a document with no non-empty lines")
        if isinstance(query, str):
            query = LineProfile.from_text(query)

        if self._use_pool():
            best = self._scan_sharded(query)
        else:
            best = _scan(self._entries, query)

        # entries is non-empty, so a scan always yields a candidate
        assert best is not None
        s, line_no, pos = best
        return FindResult(line_no=line_no, line=self._entries[pos].original,
                          score=s, exact=s == PERFECT)

    # ------------- internals -------------

    def _use_pool(self) -> bool:
        return (self.mode != "serial" and self.workers > 1
                and len(self._entries) >= CFG.PARALLEL_MIN_LINES)

    def _bounds(self) -> List[Tuple[int, int]]:
        n = len(self._entries)
        size = -(-n // self.workers)
        return [(start, min(start + size, n)) for start in range(0, n, size)]

    def _executor(self, shard_count: int) -> Executor:
        # one pool per index; process workers receive the entries once
        if self._pool is None:
            workers = min(self.workers, shard_count)
            if self.mode == "threads":
                self._pool = ThreadPoolExecutor(max_workers=workers)
            else:
                self._pool = ProcessPoolExecutor(max_workers=workers, initializer=_init_worker,
                                                 initargs=(self._entries,))
            log.info("Started %s pool with %d workers", self.mode, workers)
        return self._pool

    def _scan_sharded(self, query: LineProfile) -> Optional[_Best]:
        bounds = self._bounds()
        ex = self._executor(len(bounds))
        if self.mode == "threads":
            futures = [ex.submit(_scan, self._entries[start:stop], query, start) for start, stop in bounds]
        else:
            futures = [ex.submit(_scan_worker_shard, start, stop, query) for start, stop in bounds]
        best: Optional[_Best] = None
        for fut in futures:
            cand = fut.result()
            if cand is not None:
                best = _better(best, cand)
        return best

    # ------------- teardown -------------

    def close(self) -> None:
        """Shut down the scan pool, if one was started."""
        if self._pool is not None:
            self._pool.shutdown()
            self._pool = None

    def __enter__(self) -> "DocumentIndex":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
