"""Screenplay Converter — line-oriented screenplay markup to rendered documents.

WHY: Authors draft screenplays in a terse plain-text dialect (mode
keywords, ``NAME: speech`` lines, ``* `` comments, trailing-backslash
continuation). Nothing downstream can lay that out directly. This
package turns the dialect into a typed block IR and renders it through
pluggable formatters (HTML for the PDF renderer, plain text for review).

HOW: Three-stage pipeline — segment (line preprocessing and
continuation joining), classify (segment → Block with scene counting),
format (pluggable formatters). Each stage is independently testable.

RULES:
- All formatters consume the same Screenplay IR
- Adding a new output format = one new formatter module, no core changes
- Any syntax error is fatal; no partial document is ever produced
"""

__version__ = "0.1.0"
