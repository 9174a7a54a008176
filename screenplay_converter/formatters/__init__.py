"""Output formatter registry — pluggable format hub.

WHY: The CLI and convert() need a single lookup to find the right
formatter by name. A central dict makes it trivial to add new formats:
create the formatter class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["html"]()``.
convert() runs the core pipeline and one formatter over a source text.

RULES:
- Keys are snake_case identifiers (used in the --format CLI flag)
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from screenplay_converter.config import DEFAULT_FORMAT
from screenplay_converter.core.assembler import assemble_screenplay
from screenplay_converter.core.ir import SceneRange
from screenplay_converter.formatters.html_document import HTMLFormatter
from screenplay_converter.formatters.plain_text import PlainTextFormatter

if TYPE_CHECKING:
    from screenplay_converter.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "html": HTMLFormatter,
    "plain_text": PlainTextFormatter,
}


def convert(
    source: str,
    scene_range: Optional[SceneRange] = None,
    format_key: str = DEFAULT_FORMAT,
) -> str:
    """Convert a screenplay source into a rendered document.

    Args:
        source: The complete screenplay text.
        scene_range: Optional excerpt filter on scene ordinals.
        format_key: Key into FORMATTERS (default from config).

    Returns:
        The assembled document text.

    Raises:
        KeyError: If *format_key* is not a registered formatter.
        ScriptError: On any structural or syntax error.
    """
    formatter = FORMATTERS[format_key]()
    screenplay = assemble_screenplay(source, scene_range)
    return formatter.format(screenplay)[0].content
