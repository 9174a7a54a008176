"""Exceptions raised while converting a screenplay.

WHY: Authors need to know exactly which line to fix. Every failure of
the pipeline carries the line number, what the parser expected there,
and what came before it.

HOW: ScriptError is the common base (a ValueError, matching how the
rest of the package reports bad input). ScriptSyntaxError carries the
diagnostic fields; ScriptStructureError marks a document that is
missing its title or subtitle.

RULES:
- Every error is fatal to the conversion; nothing is downgraded
- str(error) is the author-facing message:
  ``line N - invalid syntax (expected X after Y)``
"""

from __future__ import annotations


class ScriptError(ValueError):
    """Base class for all screenplay conversion errors."""


class ScriptSyntaxError(ScriptError):
    """A segment could not be classified.

    Attributes:
        linenum: 1-based source line of the offending segment.
        expected: Description of what the parser expected.
        after: Description of what preceded it.
    """

    def __init__(self, linenum: int, expected: str, after: str) -> None:
        self.linenum = linenum
        self.expected = expected
        self.after = after
        super().__init__(
            "line {} - invalid syntax (expected {} after {})".format(linenum, expected, after)
        )


class ScriptStructureError(ScriptSyntaxError):
    """The document is missing its leading title or subtitle segment."""
