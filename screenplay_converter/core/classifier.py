"""Segment classification: explicit mode dispatch with pattern fallback.

WHY: Most lines in a screenplay draft are written without a keyword —
``EXT. DOCKS - NIGHT`` or ``alex: (Quietly) Get in.`` — because the
shape of the line already says what it is. Keywords exist for the cases
a pattern cannot decide (directions, transitions, montages). This module
turns each segment into exactly one Block, or raises a syntax error that
points at the source line.

HOW: classify_segment() joins the segment's fragments and substitutes
the title placeholders. If the mode keyword is one of MODES, the
keyword's content rule decides the block. Otherwise the keyword is
glued back onto the text and the fallback predicates are tried in a
fixed order: scene heading, all-caps header, named speech. The first
that matches wins; if none does, the segment is a syntax error.

RULES:
- Keywords are case-sensitive
- montage / mon-end must be bare; TODO may be bare or carry a note
- direct / parens / speech / subhead / trans / chyron / scene need content
- Explicit ``scene`` content must itself look like a scene heading; the
  keyword is not part of the rendered heading
- Fallback order: scene → header → named speech → error
- The scene counter advances only for accepted scene headings
- Named speech parentheticals must start with an uppercase letter
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from screenplay_converter.core.errors import ScriptSyntaxError
from screenplay_converter.core.ir import Block, BlockKind, DocumentContext, Segment

# Scene slug: INT./EXT. marker, location, " - ", time of day, no lowercase.
SCENE_RE = re.compile(r"^(?:INT\.|EXT\.) [^a-z]+ - [^a-z]+$")

# NAME[ (O.S.)|(V.O.)]: content
SPEECH_RE = re.compile(
    r"^(?P<name>[A-Za-z][\w'\-]*(?: \((?:O\.S\.|V\.O\.)\))?):\s+(?P<content>\S.*)$"
)

# Parenthetical, plain run, or a stray parenthesis (which rejects the line).
_RUN_RE = re.compile(r"\([^()]*\)|[^()]+|[()]")

_BARE_HEADERS = {
    "montage": "BEGIN MONTAGE:",
    "mon-end": "END MONTAGE.",
    "TODO": "TODO =========================",
}

_CONTENT_KINDS = {
    "direct": BlockKind.DIRECTION,
    "parens": BlockKind.PARENTHETICAL,
    "speech": BlockKind.SPEECH,
    "subhead": BlockKind.SUBHEADING,
    "trans": BlockKind.TRANSITION,
    "chyron": BlockKind.CHYRON,
}

MODES = frozenset(_BARE_HEADERS) | frozenset(_CONTENT_KINDS) | {"scene"}


def is_scene_heading(text: str) -> bool:
    return SCENE_RE.match(text) is not None


def is_header(text: str) -> bool:
    """True when *text* has no lowercase letters."""
    return not any(c.islower() for c in text)


def split_speech_runs(content: str) -> Optional[List[Tuple[BlockKind, str]]]:
    """Split named-speech content into ordered parenthetical/speech runs.

    WHY: A character's line can interleave delivery notes with speech —
    ``I am speaking (Mood) hello there`` — and each run renders as its
    own fragment, in source order.

    HOW: Tokenize left to right into balanced ``( … )`` groups and plain
    runs. Blank plain runs (the spaces between groups) are skipped.

    RULES:
    - Parentheticals must start with an uppercase letter
    - A stray "(" or ")" means the content is not speech
    - At least one non-blank speech run is required

    Returns:
        List of (kind, text) pairs, or None if *content* is not speech.
    """
    runs: List[Tuple[BlockKind, str]] = []
    has_speech = False
    for match in _RUN_RE.finditer(content):
        token = match.group(0)
        if token in ("(", ")"):
            return None
        if token.startswith("("):
            if not token[1:2].isupper():
                return None
            runs.append((BlockKind.PARENTHETICAL, token))
            continue
        token = token.strip()
        if token:
            runs.append((BlockKind.SPEECH, token))
            has_speech = True
    return runs if has_speech else None


def match_named_speech(whole: str, line: int) -> Optional[Block]:
    """Return a NAMED_SPEECH block if *whole* is ``name: content``."""
    m = SPEECH_RE.match(whole)
    if m is None:
        return None
    runs = split_speech_runs(m.group("content"))
    if runs is None:
        return None
    return Block(
        kind=BlockKind.NAMED_SPEECH,
        name=m.group("name").upper(),
        line=line,
        parts=[Block(kind=kind, text=text, line=line) for kind, text in runs],
    )


def _scene_block(heading: str, line: int, context: DocumentContext) -> Block:
    return Block(
        kind=BlockKind.SCENE,
        text=heading.upper(),
        line=line,
        number=context.next_scene(),
    )


def _classify_explicit(mode: str, text: str, line: int, context: DocumentContext) -> Block:
    if mode in _BARE_HEADERS:
        if not text:
            return Block(kind=BlockKind.HEADER, text=_BARE_HEADERS[mode], line=line)
        if mode == "TODO":
            return Block(kind=BlockKind.HEADER, text="TODO: {}".format(text.upper()), line=line)
        raise ScriptSyntaxError(line, "newline", "mode declaration '{}'".format(mode))

    if not text:
        raise ScriptSyntaxError(line, "content", "mode declaration '{}'".format(mode))

    if mode == "scene":
        if not is_scene_heading(text):
            raise ScriptSyntaxError(line, "scene heading", "mode declaration 'scene'")
        return _scene_block(text, line, context)

    kind = _CONTENT_KINDS[mode]
    if kind is BlockKind.PARENTHETICAL:
        text = "({})".format(text)
    elif kind in (BlockKind.SUBHEADING, BlockKind.TRANSITION):
        text = text.upper()
    return Block(kind=kind, text=text, line=line)


def _classify_implicit(whole: str, line: int, context: DocumentContext) -> Block:
    if is_scene_heading(whole):
        return _scene_block(whole, line, context)
    if is_header(whole):
        return Block(kind=BlockKind.HEADER, text=whole, line=line)
    block = match_named_speech(whole, line)
    if block is not None:
        return block
    raise ScriptSyntaxError(line, "mode declaration", "new line")


def classify_segment(segment: Segment, context: DocumentContext) -> Block:
    """Classify one segment into a Block.

    WHY: This is the single decision point of the pipeline: every kept
    segment becomes exactly one block, and every block becomes exactly
    one rendered fragment.

    HOW: Join fragments, substitute placeholders, then dispatch on the
    mode keyword or fall back to pattern matching on the whole line.

    Args:
        segment: Segment from the segmenter.
        context: The run's document context. Its scene counter is
                 advanced for accepted scene headings.

    Returns:
        The classified Block.

    Raises:
        ScriptSyntaxError: If the segment matches no rule.
    """
    text = context.substitute(segment.text)
    mode = segment.mode

    if mode in MODES:
        return _classify_explicit(mode, text, segment.line, context)

    if mode is None:
        whole = text
    else:
        whole = "{} {}".format(context.substitute(mode), text).strip()
    return _classify_implicit(whole, segment.line, context)
