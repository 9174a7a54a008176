"""Configuration constants, grammar markers, and .env loading.

WHY: Centralizes the markers of the screenplay dialect and the
rendering defaults so they are easy to find and override. The grammar
markers are plain data, not buried in the segmenter or classifier.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level strings, ints, and sets. Rendering defaults can be
overridden via environment variables.

RULES:
- COMMENT_MARKER starts an inline comment that runs to end of line
- A line equal to SENTINEL (after trimming) ends the parseable input
- A line ending in CONTINUATION continues onto the next kept line
- Placeholders are replaced verbatim in joined segment text
- Environment overrides never change the grammar, only rendering
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Grammar markers
# ---------------------------------------------------------------------------

COMMENT_MARKER = "* "
SENTINEL = "***"
CONTINUATION = "\\"

TITLE_PLACEHOLDER = "$title"
SUBTITLE_PLACEHOLDER = "$subtitle"

SCENE_NUMBER_WIDTH = 4
"""Scene numerals are left-padded to this many characters."""

# ---------------------------------------------------------------------------
# Input files
# ---------------------------------------------------------------------------

SUPPORTED_INPUT_EXTENSIONS: set[str] = {".txt"}
"""Screenplay source extensions accepted by the CLI (lowercase, with dot)."""

# ---------------------------------------------------------------------------
# Rendering defaults
# ---------------------------------------------------------------------------

STYLESHEET_HREF = os.getenv("SCREENPLAY_STYLESHEET", "../res/style.css")
DEFAULT_FORMAT = os.getenv("SCREENPLAY_DEFAULT_FORMAT", "html")
