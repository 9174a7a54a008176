"""Plain text screenplay formatter with column indentation.

WHY: Authors want to proof a draft without going through the HTML and
PDF toolchain — in a terminal, a diff, or an email. This formatter lays
the blocks out the way a typed screenplay page would, using only
indentation, and doubles as proof that the block vocabulary is not tied
to HTML.

HOW: Each block renders as one paragraph followed by a blank line.
Character names, parentheticals and speech are indented to their
conventional columns; transitions are pushed right. Scene numerals are
space-padded to a fixed width.

RULES:
- Title and subtitle open full documents; excerpts start with the first block
- Indents: speech 10, parenthetical 15, name 20, transition 40 columns
- Chyrons carry a ``CHYRON: `` label
- Named speech lines are not separated by blank lines
- No trailing whitespace on any line
- Output suffix: ".txt"; media type: "text/plain"
"""

from __future__ import annotations

from screenplay_converter.core.ir import Block, BlockKind, Screenplay
from screenplay_converter.formatters.base import BaseFormatter, scene_padding

_INDENTS = {
    BlockKind.SPEECH: 10,
    BlockKind.PARENTHETICAL: 15,
    BlockKind.TRANSITION: 40,
}
NAME_INDENT = 20


def _line(block: Block) -> str:
    """One block (never NAMED_SPEECH) as a single indented line."""
    if block.kind is BlockKind.SCENE:
        return "{}{} {}".format(scene_padding(block.number, " "), block.number, block.text)
    if block.kind is BlockKind.CHYRON:
        return "CHYRON: {}".format(block.text)
    return " " * _INDENTS.get(block.kind, 0) + block.text


class PlainTextFormatter(BaseFormatter):
    """Formatter that produces an indented plain text screenplay."""

    @property
    def name(self) -> str:
        return "Plain Text"

    @property
    def suffix(self) -> str:
        return ".txt"

    @property
    def media_type(self) -> str:
        return "text/plain"

    def preamble(self, screenplay: Screenplay) -> str:
        if screenplay.excerpt:
            return ""
        return "{}\n{}\n\n".format(screenplay.title, screenplay.subtitle)

    def render_block(self, block: Block) -> str:
        if block.kind is BlockKind.NAMED_SPEECH:
            lines = [" " * NAME_INDENT + (block.name or "")]
            lines.extend(_line(part) for part in block.parts)
        else:
            lines = [_line(block)]
        return "\n".join(lines) + "\n\n"

    def closing(self, screenplay: Screenplay) -> str:
        return ""
