"""Count function calls in Go source with a small state machine."""

from __future__ import annotations

from collections import Counter
from enum import IntEnum


class _Event(IntEnum):
    LETTER = 0
    UNDERSCORE = 1
    NUMBER = 2
    DOUBLE_QUOTE = 3
    APOSTROPHE = 4
    BACKSLASH = 5
    NEW_LINE = 6
    BLANK = 7
    OPEN_PAREN = 8
    POINT = 9
    OTHER = 10


class _State(IntEnum):
    LINE_START = 0
    SKIP_LINE = 1
    CONTINUE = 2
    SKIP_WORD = 3
    IGNORE_NEXT = 4
    IN_STRING = 5
    STRING_ESCAPE = 6
    NAME_START = 7
    NAME_MIDDLE = 8
    NAME_POINT = 9
    NAME_END = 10


_S = _State

# One row per state, one column per event, in the order of _Event.
_TRANSITIONS: tuple[tuple[_State, ...], ...] = (
    # LINE_START
    (_S.SKIP_LINE, _S.SKIP_LINE, _S.SKIP_LINE, _S.SKIP_LINE, _S.SKIP_LINE,
     _S.SKIP_LINE, _S.LINE_START, _S.CONTINUE, _S.SKIP_LINE, _S.SKIP_LINE,
     _S.SKIP_LINE),
    # SKIP_LINE
    (_S.SKIP_LINE, _S.SKIP_LINE, _S.SKIP_LINE, _S.SKIP_LINE, _S.SKIP_LINE,
     _S.SKIP_LINE, _S.LINE_START, _S.SKIP_LINE, _S.SKIP_LINE, _S.SKIP_LINE,
     _S.SKIP_LINE),
    # CONTINUE
    (_S.NAME_START, _S.NAME_START, _S.SKIP_WORD, _S.IN_STRING, _S.IGNORE_NEXT,
     _S.IGNORE_NEXT, _S.LINE_START, _S.CONTINUE, _S.CONTINUE, _S.SKIP_WORD,
     _S.SKIP_WORD),
    # SKIP_WORD
    (_S.SKIP_WORD, _S.SKIP_WORD, _S.SKIP_WORD, _S.IN_STRING, _S.IGNORE_NEXT,
     _S.IGNORE_NEXT, _S.LINE_START, _S.CONTINUE, _S.CONTINUE, _S.SKIP_WORD,
     _S.SKIP_WORD),
    # IGNORE_NEXT
    (_S.CONTINUE, _S.CONTINUE, _S.CONTINUE, _S.CONTINUE, _S.CONTINUE,
     _S.IGNORE_NEXT, _S.CONTINUE, _S.CONTINUE, _S.CONTINUE, _S.CONTINUE,
     _S.CONTINUE),
    # IN_STRING
    (_S.IN_STRING, _S.IN_STRING, _S.IN_STRING, _S.CONTINUE, _S.IN_STRING,
     _S.STRING_ESCAPE, _S.IN_STRING, _S.IN_STRING, _S.IN_STRING, _S.IN_STRING,
     _S.IN_STRING),
    # STRING_ESCAPE
    (_S.IN_STRING, _S.IN_STRING, _S.IN_STRING, _S.IN_STRING, _S.IN_STRING,
     _S.IN_STRING, _S.IN_STRING, _S.IN_STRING, _S.IN_STRING, _S.IN_STRING,
     _S.IN_STRING),
    # NAME_START
    (_S.NAME_MIDDLE, _S.NAME_MIDDLE, _S.NAME_MIDDLE, _S.IN_STRING,
     _S.IGNORE_NEXT, _S.IGNORE_NEXT, _S.LINE_START, _S.CONTINUE, _S.NAME_END,
     _S.NAME_MIDDLE, _S.NAME_MIDDLE),
    # NAME_MIDDLE
    (_S.NAME_MIDDLE, _S.NAME_MIDDLE, _S.NAME_MIDDLE, _S.IN_STRING,
     _S.IGNORE_NEXT, _S.IGNORE_NEXT, _S.LINE_START, _S.CONTINUE, _S.NAME_END,
     _S.NAME_POINT, _S.NAME_MIDDLE),
    # NAME_POINT
    (_S.NAME_MIDDLE, _S.NAME_MIDDLE, _S.NAME_MIDDLE, _S.IN_STRING,
     _S.IGNORE_NEXT, _S.IGNORE_NEXT, _S.LINE_START, _S.CONTINUE, _S.SKIP_WORD,
     _S.CONTINUE, _S.NAME_MIDDLE),
    # NAME_END
    (_S.NAME_START, _S.NAME_START, _S.SKIP_WORD, _S.IN_STRING, _S.IGNORE_NEXT,
     _S.IGNORE_NEXT, _S.LINE_START, _S.CONTINUE, _S.CONTINUE, _S.SKIP_WORD,
     _S.CONTINUE),
)

_SINGLE_EVENTS = {
    "_": _Event.LETTER,
    '"': _Event.DOUBLE_QUOTE,
    "'": _Event.APOSTROPHE,
    "\\": _Event.BACKSLASH,
    "\n": _Event.NEW_LINE,
    "\t": _Event.BLANK,
    " ": _Event.BLANK,
    "(": _Event.OPEN_PAREN,
    ".": _Event.POINT,
}


def _event(ch: str) -> _Event:
    if "a" <= ch <= "z" or "A" <= ch <= "Z":
        return _Event.LETTER
    if "0" <= ch <= "9":
        return _Event.NUMBER
    return _SINGLE_EVENTS.get(ch, _Event.OTHER)


def count_calls(code: str | bytes) -> Counter[str]:
    """Return how often each function is called in indented lines of ``code``.

    A call is a name, possibly dotted, directly followed by '('. Lines that
    do not start with a blank, string literals and the keyword ``func`` are
    ignored.
    """
    text = code.decode("latin-1") if isinstance(code, bytes) else code
    calls: Counter[str] = Counter()
    state = _State.LINE_START
    start: int | None = None
    for position, ch in enumerate(text):
        state = _TRANSITIONS[state][_event(ch)]
        if state is _State.NAME_START:
            start = position
        elif state is _State.NAME_END:
            if start is not None:
                name = text[start:position]
                if name != "func":
                    calls[name] += 1
                start = None
        elif state not in (_State.NAME_MIDDLE, _State.NAME_POINT):
            start = None
    return calls


def function_frequency(code: str | bytes) -> list[str]:
    """Return the three most called functions in ``code``, most called first.

    Functions called equally often keep the order of their first call.
    Fewer names are returned when fewer functions are called.
    """
    calls = count_calls(code)
    ranked = sorted(calls, key=lambda name: -calls[name])
    return ranked[:3]