"""Intermediate representation dataclasses for parsed screenplays.

WHY: The dialect is line-oriented and loosely typed: a segment is just a
mode keyword and some text. Formatters (HTML, plain text) each need to
know what a segment *is* — a scene heading, a named speech, a
transition — but render it differently. The IR provides a single,
well-typed form that all formatters consume, decoupling classification
from rendering.

HOW: Five types form the pipeline's vocabulary:
  Segment          — one logical authoring unit from the segmenter
  BlockKind        — closed set of block kinds
  Block            — one classified block (one rendered fragment)
  DocumentContext  — scene counter and captured title/subtitle
  Screenplay       — the assembled document handed to formatters
SceneRange is the excerpt filter passed into the assembler.

RULES:
- Line numbers are 1-based physical lines of the source text
- A bare keyword segment (``montage``) has an empty fragment list
- Only SCENE blocks carry a number; numbers start at 1 and never repeat
- NAMED_SPEECH blocks carry their parenthetical/speech runs in ``parts``
- DocumentContext is owned by exactly one conversion run
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from screenplay_converter.config import SUBTITLE_PLACEHOLDER, TITLE_PLACEHOLDER


@dataclass
class Segment:
    """One logical authoring unit, possibly spanning several physical lines.

    RULES:
    - line: 1-based line number of the segment's first physical line
    - mode: first whitespace-delimited token of the first line, or None
      for segments read without mode splitting (title, subtitle)
    - fragments: trimmed text of each physical line, backslashes removed
    """

    line: int
    mode: str | None
    fragments: list[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Fragments joined with single spaces."""
        return " ".join(self.fragments).strip()


class BlockKind(str, enum.Enum):
    """Closed set of semantic block kinds.

    Inherits from str so values compare and serialize as plain strings.
    """

    HEADER = "header"
    DIRECTION = "direction"
    PARENTHETICAL = "parenthetical"
    SPEECH = "speech"
    SUBHEADING = "subheading"
    TRANSITION = "transition"
    CHYRON = "chyron"
    SCENE = "scene"
    NAMED_SPEECH = "named_speech"


@dataclass
class Block:
    """A single classified block of the screenplay.

    WHY: Every segment that survives classification becomes exactly one
    rendered fragment. The Block holds what the formatter needs and no
    more: final display text, the scene ordinal for headings, and the
    ordered runs of a named speech.

    RULES:
    - text: display text, already uppercased where the kind requires it
      (scene, subheading, transition, TODO headers); parentheticals
      include their surrounding parentheses
    - number: scene ordinal for SCENE blocks, None otherwise
    - name: uppercased character name for NAMED_SPEECH blocks
    - parts: PARENTHETICAL/SPEECH blocks of a NAMED_SPEECH, in source order
    - line: source line of the segment the block came from
    """

    kind: BlockKind
    text: str = ""
    line: int = 0
    number: int | None = None
    name: str | None = None
    parts: list[Block] = field(default_factory=list)


@dataclass
class DocumentContext:
    """Mutable state threaded through classification of one document.

    RULES:
    - scene starts at 0 and only ever increases, one step per accepted
      scene heading
    - title/subtitle are captured once from the first two segments
    """

    title: str
    subtitle: str
    scene: int = 0

    def next_scene(self) -> int:
        """Advance the scene counter and return the new ordinal."""
        self.scene += 1
        return self.scene

    def substitute(self, text: str) -> str:
        """Replace the title/subtitle placeholders in *text*."""
        text = text.replace(SUBTITLE_PLACEHOLDER, self.subtitle)
        return text.replace(TITLE_PLACEHOLDER, self.title)


@dataclass(frozen=True)
class SceneRange:
    """Half-open range of scene ordinals: ``start <= n < stop``."""

    start: int
    stop: int

    def __contains__(self, scene: object) -> bool:
        return isinstance(scene, int) and self.start <= scene < self.stop


@dataclass
class Screenplay:
    """The assembled document that formatters receive.

    RULES:
    - blocks: kept blocks in document order (already range-filtered)
    - scene_count: value of the scene counter when streaming stopped
    - excerpt: True when a scene range was applied; formatters omit the
      title block for excerpts
    """

    title: str
    subtitle: str
    blocks: list[Block] = field(default_factory=list)
    scene_count: int = 0
    excerpt: bool = False
