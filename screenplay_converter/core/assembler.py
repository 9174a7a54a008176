"""Document assembly: title capture, block streaming, and scene-range filtering.

WHY: The segmenter and classifier work one segment at a time. Someone
has to drive them over a whole source: capture the title and subtitle
that every screenplay starts with, thread one DocumentContext through
every classification, keep or drop blocks for an excerpt, and hand a
complete Screenplay IR to a formatter.

HOW: assemble_screenplay() reads the first two segments without mode
splitting as title and subtitle, then classifies the rest in order.
With a SceneRange, a block is kept only while the scene counter is in
range and streaming stops once the counter reaches the range's stop.
outline_scenes() returns just the scene headings.

RULES:
- Missing title or subtitle fails before any block is classified
- Without a range every block is kept
- With a range, scene-less blocks are kept or dropped by the counter
  value at the time they are classified (no lookahead)
- Streaming stops as soon as the counter reaches range.stop; later
  segments are never classified
- Any syntax error aborts the whole conversion
"""

from __future__ import annotations

import logging
from typing import List, Optional

from screenplay_converter.core.classifier import classify_segment
from screenplay_converter.core.errors import ScriptStructureError
from screenplay_converter.core.ir import (
    Block,
    BlockKind,
    DocumentContext,
    SceneRange,
    Screenplay,
)
from screenplay_converter.core.segmenter import Segments

logger = logging.getLogger(__name__)


def read_title_block(segments: Segments) -> DocumentContext:
    """Consume the title and subtitle segments and build the run's context.

    Raises:
        ScriptStructureError: If the source has fewer than two segments.
    """
    title = segments.read_plain()
    if title is None:
        raise ScriptStructureError(1, "title", "beginning")
    subtitle = segments.read_plain()
    if subtitle is None:
        raise ScriptStructureError(title.line, "subtitle", "title")
    logger.debug("Title %r (line %d), subtitle %r (line %d)",
                 title.text, title.line, subtitle.text, subtitle.line)
    return DocumentContext(title=title.text, subtitle=subtitle.text)


def assemble_screenplay(
    source: str,
    scene_range: Optional[SceneRange] = None,
) -> Screenplay:
    """Parse a screenplay source into the Screenplay IR.

    Args:
        source: The complete screenplay text.
        scene_range: Optional excerpt filter on scene ordinals.

    Returns:
        Screenplay with the kept blocks in document order.

    Raises:
        ScriptStructureError: If the title or subtitle is missing.
        ScriptSyntaxError: If any streamed segment cannot be classified.
    """
    segments = Segments(source)
    context = read_title_block(segments)
    blocks: List[Block] = []

    for segment in segments:
        block = classify_segment(segment, context)
        if scene_range is None:
            blocks.append(block)
            continue
        if context.scene >= scene_range.stop:
            logger.debug("Scene %d is past the requested range; stopping at line %d",
                         context.scene, segment.line)
            break
        if context.scene in scene_range:
            blocks.append(block)

    logger.info("Assembled %d blocks, %d scenes", len(blocks), context.scene)

    return Screenplay(
        title=context.title,
        subtitle=context.subtitle,
        blocks=blocks,
        scene_count=context.scene,
        excerpt=scene_range is not None,
    )


def outline_scenes(source: str) -> List[Block]:
    """Return the SCENE blocks of a screenplay, in order.

    Runs the full pipeline, so syntax errors anywhere in the source are
    reported just as they are for a conversion.
    """
    screenplay = assemble_screenplay(source)
    return [b for b in screenplay.blocks if b.kind is BlockKind.SCENE]
