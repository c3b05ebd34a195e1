"""Short Title Derivation — raw prompt text to a concise chat/session display label.

Invariants:
    - derive_short_title is total: every str input yields a str, never raises
    - Output never exceeds TITLE_MAX_LENGTH characters
    - Non-empty input always yields non-empty output
    - Input that is pure terminal noise falls back to a verbatim slice of the ORIGINAL input
    - No escape-sequence fragment survives stripping (terminators are consumed)

Design Decisions:
    - One alternation for escapes, ordered CSI → OSC → charset → bare ESC+char:
      the specific shapes must win before the two-char fallback eats their introducer
    - OSC body is non-greedy: stops at the FIRST BEL or ESC-backslash, never spans two titles
    - Clause boundary beats length cut: a short first clause reads better than a word-wrapped slice
    - Word-boundary floor of 20: below that a hard 50-char cut keeps more of the request
"""

import re

TITLE_MAX_LENGTH = 50
WORD_BOUNDARY_FLOOR = 20

# Matched case-insensitively at the start of the trimmed text, each followed by whitespace.
FILLER_PREFIXES: tuple[str, ...] = (
    "please",
    "can you",
    "i need you to",
    "could you",
    "i want you to",
)

_ESCAPE_RE = re.compile(
    r"\x1b\[[0-9;?]*[a-zA-Z]"         # CSI: colors, cursor movement, erase
    r"|\x1b\].*?(?:\x07|\x1b\\)"      # OSC: window title etc., BEL or ST terminated
    r"|\x1b[()][0-9A-B]"              # charset designation
    r"|\x1b."                         # any other two-char escape
)
# C0 controls minus \t \n \v \f \r, plus DEL
_CONTROL_RE = re.compile(r"[\x00-\x08\x0e-\x1f\x7f]")
_FILLER_RE = re.compile(
    r"^(?:" + "|".join(re.escape(p) + r"\s+" for p in FILLER_PREFIXES) + r")",
    re.IGNORECASE,
)
_CLAUSE_END_RE = re.compile(r"[.,;:\n]")


def strip_terminal_noise(text: str) -> str:
    """Remove escape sequences first, then any stray control characters."""
    return _CONTROL_RE.sub("", _ESCAPE_RE.sub("", text))


def strip_filler_prefix(text: str) -> str:
    """Drop one leading conversational lead-in ("please ", "could you ", ...)."""
    return _FILLER_RE.sub("", text, count=1)


def shorten_to_title(text: str) -> str:
    """Cut text at its first clause boundary, or at a word boundary past the budget.

    A clause mark at index 0 is ignored (it would leave nothing) and the text
    falls through to length-based shortening instead.
    """
    clause = _CLAUSE_END_RE.search(text)
    if clause and 0 < clause.start() <= TITLE_MAX_LENGTH:
        return text[:clause.start()]
    if len(text) <= TITLE_MAX_LENGTH:
        return text
    space_idx = _last_whitespace_at_or_before(text, TITLE_MAX_LENGTH)
    cut = space_idx if space_idx > WORD_BOUNDARY_FLOOR else TITLE_MAX_LENGTH
    return text[:cut]


def capitalize_first(text: str) -> str:
    """Uppercase the first character only; unlike str.capitalize, the rest is untouched."""
    return text[:1].upper() + text[1:]


def derive_short_title(prompt: str) -> str:
    """Derive a display title (<= 50 chars) from a raw prompt.

    Strips terminal escapes and control bytes, trims, removes a filler
    lead-in, then shortens and capitalizes. If nothing is left after
    cleaning, the first 50 characters of the untouched prompt are returned
    as-is so the caller always has some label to show.
    """
    text = strip_filler_prefix(strip_terminal_noise(prompt).strip())
    if not text:
        return prompt[:TITLE_MAX_LENGTH]
    # upper() can expand one char ("ß" -> "SS"); budget applies after it
    return capitalize_first(shorten_to_title(text))[:TITLE_MAX_LENGTH]


def _last_whitespace_at_or_before(text: str, limit: int) -> int:
    """Index of the last whitespace char in text[:limit + 1], or -1."""
    for idx in range(min(limit, len(text) - 1), -1, -1):
        if text[idx].isspace():
            return idx
    return -1
