"""
Line Finder

Finds the line of a text document most similar to an unordered set of words,
using a fuzzy containment score rather than exact or substring matching.
Handy for locating a poem line from a remembered fragment.

The module is split into:
- Text normalization (lowercase, collapsed word breaks)
- Line profiles (word and character counts)
- Scoring (containment plus longest-shared-run measures)
- The document index and the engine that loads documents into it

Example Usage:
    from linefinder import Engine

    eng = Engine()
    eng.load("./lepanto.txt")
    result = eng.find("his head a flag")
    print(result.line_no, result.line)
"""

# src/linefinder/__init__.py
from .engine import Engine
from .errors import DocumentLoadError, EmptyIndexError, LineFinderError
from .index import DocumentIndex
from .models import FindResult, LineProfile
from .normalize import normalize
from .scoring import score

__version__ = "1.0.0"
__all__ = [
    "Engine", "DocumentIndex", "LineProfile", "FindResult",
    "normalize", "score",
    "LineFinderError", "EmptyIndexError", "DocumentLoadError",
]
