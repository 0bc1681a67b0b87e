# linefinder/engine.py
from __future__ import annotations

import logging
import os
from typing import Iterable, List, Optional

from .index import DocumentIndex
from .loader import read_lines
from .models import FindResult, LineProfile

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - document loading (loader.read_lines),
      - the per-line profile index (DocumentIndex),
      - best-match search (DocumentIndex.best_match).

    Public API (used by the CLI and the web app):
      * build(lines, ...): index lines already in memory
      * load(path, ...):   read a document and index it
      * find(query):       best matching line for one query
      * find_many(queries)
      * shutdown():        drop the index
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self.index: Optional[DocumentIndex] = None
        self.source: Optional[str] = None

    def build(
        self,
        lines: Iterable[str],
        *,
        mode: Optional[str] = None,       # "serial" | "threads" | "procs"
        workers: Optional[int] = None,
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)

        idx = DocumentIndex(lines, mode=mode, workers=workers)
        if len(idx) == 0:
            # still usable as an object, but every search will raise
            log.warning("Document has no non-empty lines")
        if self.index is not None:
            self.index.close()
        self.index = idx
        self.source = None
        log.info("Engine build() complete: entries=%d", len(idx))

    def load(
        self,
        path: str | os.PathLike[str],
        *,
        mode: Optional[str] = None,
        workers: Optional[int] = None,
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
        log.info("Loading document from %s", os.fspath(path))
        lines = read_lines(path)
        self.build(lines, mode=mode, workers=workers, verbose=verbose)
        self.source = os.fspath(path)

    # ------------- query -------------

    def find(self, query: str | LineProfile) -> FindResult:
        if self.index is None:
            raise RuntimeError("Engine not initialized. Call build() or load() first.")
        result = self.index.best_match(query)
        log.info("Query matched line %d (score=%.4f, exact=%s)", result.line_no, result.score, result.exact)
        return result

    def find_many(self, queries: Iterable[str]) -> List[FindResult]:
        return [self.find(q) for q in queries]

    # ------------- teardown -------------

    def shutdown(self) -> None:
        if self.index is not None:
            self.index.close()
        self.index = None
        self.source = None
        log.info("Engine shutdown complete")
