"""
Grammars sub-package for chartfile.

Contains the per-line event grammars used by the section reader.

Design: Strategy Pattern
- base.py defines the BaseGrammar ABC and the LineScanner all grammars share.
- events.py implements one grammar per event tag (N, S, B, TS, E) and the
  GRAMMARS dispatch table keyed by tag.

The section reader (section.py) picks a grammar from the line's tag token
and hands it the full line; the grammar either returns one event or raises
MalformedEventError.
"""

from chartfile.grammars.base import BaseGrammar, LineScanner
from chartfile.grammars.events import (
    DEFAULT_TS_DENOMINATOR,
    GRAMMARS,
    BpmGrammar,
    GenericGrammar,
    NoteGrammar,
    SpecialGrammar,
    TimeSigGrammar,
)

__all__ = [
    "BaseGrammar",
    "LineScanner",
    "GRAMMARS",
    "DEFAULT_TS_DENOMINATOR",
    "NoteGrammar",
    "SpecialGrammar",
    "BpmGrammar",
    "TimeSigGrammar",
    "GenericGrammar",
]
