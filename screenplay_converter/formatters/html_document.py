"""HTML formatter with classed block containers for the PDF renderer.

WHY: The screenplay is typeset by an external HTML-to-PDF renderer
driven by a stylesheet. The stylesheet keys off a small, fixed set of
``<div class="…">`` containers, so this formatter's job is to map each
block kind onto the right container and nothing else.

HOW: preamble() opens the page and, for full documents, adds the title
and subtitle blocks. render_block() maps each BlockKind onto its
container; scene numerals are left-padded with ``&nbsp;`` so headings
line up. closing() closes the page.

RULES:
- Container classes: title, subtitle, header, direct, parens, speech,
  name, trans, scene
- Subheadings are ``<h2>`` inside a header div; scene headings are ``<h1>``
- Chyrons render as directions with a ``CHYRON: `` label
- Every fragment line ends with a newline
- Author text is escaped (&, <, >); padding entities are not
- The stylesheet href is escaped with quotes, as an attribute value
- Excerpts (scene ranges) omit the title and subtitle blocks
- Output suffix: ".html"; media type: "text/html"
"""

from __future__ import annotations

import html
from typing import List

from screenplay_converter.config import STYLESHEET_HREF
from screenplay_converter.core.ir import Block, BlockKind, Screenplay
from screenplay_converter.formatters.base import BaseFormatter, scene_padding

PAD_GLYPH = "&nbsp;"

_SIMPLE_CLASSES = {
    BlockKind.HEADER: "header",
    BlockKind.DIRECTION: "direct",
    BlockKind.PARENTHETICAL: "parens",
    BlockKind.SPEECH: "speech",
    BlockKind.TRANSITION: "trans",
}


def _esc(text: str) -> str:
    return html.escape(text, quote=False)


def _div(css_class: str, inner: str) -> str:
    return '<div class="{}">{}</div>\n'.format(css_class, inner)


class HTMLFormatter(BaseFormatter):
    """Formatter that produces the classed-div HTML document."""

    def __init__(self, stylesheet: str = STYLESHEET_HREF) -> None:
        self.stylesheet = stylesheet

    @property
    def name(self) -> str:
        return "HTML"

    @property
    def suffix(self) -> str:
        return ".html"

    @property
    def media_type(self) -> str:
        return "text/html"

    def preamble(self, screenplay: Screenplay) -> str:
        head = (
            '<html><head><link rel="stylesheet" href="{}"/></head>'
            '<body><div class="page">\n'.format(html.escape(self.stylesheet))
        )
        if screenplay.excerpt:
            return head
        return (
            head
            + _div("title", "<h1>{}</h1>".format(_esc(screenplay.title)))
            + _div("subtitle", "<h2>{}</h2>".format(_esc(screenplay.subtitle)))
        )

    def render_block(self, block: Block) -> str:
        kind = block.kind
        if kind in _SIMPLE_CLASSES:
            return _div(_SIMPLE_CLASSES[kind], _esc(block.text))
        if kind is BlockKind.SUBHEADING:
            return _div("header", "<h2>{}</h2>".format(_esc(block.text)))
        if kind is BlockKind.CHYRON:
            return _div("direct", "CHYRON: {}".format(_esc(block.text)))
        if kind is BlockKind.SCENE:
            return _div("scene", "<h1>{}{} {}</h1>".format(
                scene_padding(block.number, PAD_GLYPH), block.number, _esc(block.text),
            ))
        if kind is BlockKind.NAMED_SPEECH:
            lines: List[str] = [_div("name", _esc(block.name or ""))]
            lines.extend(self.render_block(part) for part in block.parts)
            return "".join(lines)
        raise ValueError("Unknown block kind: {!r}".format(kind))

    def closing(self, screenplay: Screenplay) -> str:
        return "</div></body></html>"
