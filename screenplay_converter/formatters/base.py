"""Abstract base formatter and output container.

WHY: Every output format consumes the same Screenplay IR but produces
different markup. This base class enforces a consistent interface so the
CLI (and any future caller) can work with any formatter generically.

HOW: BaseFormatter is an ABC. Subclasses provide a ``name``, a file
``suffix`` and ``media_type``, and three rendering hooks: preamble(),
render_block() and closing(). The concrete format() method stitches
them together around the screenplay's blocks. FormatterOutput is a
plain dataclass bundling the suffix with its content and MIME type.

RULES:
- Subclasses MUST implement ``name``, ``suffix``, ``media_type``,
  ``preamble()``, ``render_block()`` and ``closing()``
- render_block() returns exactly one fragment per block
- ``format()`` returns a list with one FormatterOutput
- The caller is responsible for prepending the source filename stem
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

from screenplay_converter.config import SCENE_NUMBER_WIDTH
from screenplay_converter.core.ir import Block, Screenplay


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the source stem,
                e.g. ``".html"`` → ``"draft.html"``.
        content: The rendered document.
        media_type: MIME type for the content, e.g. ``"text/html"``.
    """

    suffix: str
    content: str
    media_type: str


def scene_padding(number: int, glyph: str) -> str:
    """Left padding for a scene numeral: ``max(0, 4 - digits)`` glyphs."""
    return glyph * max(0, SCENE_NUMBER_WIDTH - len(str(number)))


class BaseFormatter(ABC):
    """Abstract base for all output formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement the rendering hooks and metadata properties
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'HTML'."""

    @property
    @abstractmethod
    def suffix(self) -> str:
        """Output file suffix, e.g. '.html'."""

    @property
    @abstractmethod
    def media_type(self) -> str:
        """MIME type of the rendered document."""

    @abstractmethod
    def preamble(self, screenplay: Screenplay) -> str:
        """Document opening; includes the title block unless excerpt."""

    @abstractmethod
    def render_block(self, block: Block) -> str:
        """Render one block as one fragment."""

    @abstractmethod
    def closing(self, screenplay: Screenplay) -> str:
        """Document closing."""

    def format(self, screenplay: Screenplay) -> List[FormatterOutput]:
        """Render the Screenplay IR into a complete document.

        Args:
            screenplay: The assembled IR with title, subtitle and kept blocks.

        Returns:
            A single-element list containing the rendered document.
        """
        parts = [self.preamble(screenplay)]
        parts.extend(self.render_block(block) for block in screenplay.blocks)
        parts.append(self.closing(screenplay))
        return [
            FormatterOutput(
                suffix=self.suffix,
                content="".join(parts),
                media_type=self.media_type,
            )
        ]
