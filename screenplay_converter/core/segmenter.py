"""Line preprocessing and segment assembly.

WHY: The dialect is written one physical line at a time, but authors
annotate with inline comments, leave blank lines for readability, wrap
long directions with a trailing backslash, and park notes after a
``***`` line at the end of the file. The classifier needs none of that:
it wants one logical segment at a time, with its mode keyword split off
and its source line number kept for diagnostics.

HOW: preprocess_lines() is a generator over (line number, trimmed text)
pairs: it cuts each line at the first comment marker, drops blank
lines, and stops after yielding the sentinel. Segments wraps that
generator in a single-pass iterator that joins continued lines. A
segment's first line is split on its first whitespace run into mode
keyword and remainder; read_plain() reads a segment without that split
(used for the title and subtitle).

RULES:
- Comment marker is the literal "* "; everything from it on is dropped
- A line equal to "***" (after trimming) ends the input; nothing after
  it is ever read
- A line ending in "\\" continues onto the next kept line
- The sentinel inside a continued segment closes that segment and ends
  the sequence
- A first line with no whitespace is a bare keyword segment with no
  fragments
- Input that ends mid-continuation drops the unfinished segment
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Tuple

from screenplay_converter.config import COMMENT_MARKER, CONTINUATION, SENTINEL
from screenplay_converter.core.ir import Segment

logger = logging.getLogger(__name__)


def strip_comment(line: str) -> str:
    """Return *line* cut at the first inline comment marker."""
    return line.split(COMMENT_MARKER, 1)[0]


def preprocess_lines(source: str) -> Iterator[Tuple[int, str]]:
    """Yield (line number, trimmed text) for every meaningful source line.

    WHY: Blank and comment-only lines carry no content but the original
    line numbers are needed for error messages, so filtering happens
    here, before segmenting, with numbering preserved.

    HOW: Enumerate physical lines from 1, splitting on "\\n" only
    (form feeds and Unicode line separators stay inside a line), strip
    the comment tail, trim, skip empties. The sentinel line itself is
    yielded so the segmenter can see where the input ends, then the
    generator returns.

    Args:
        source: The complete screenplay text.

    Yields:
        (1-based line number, trimmed line text) pairs.
    """
    for num, raw in enumerate(source.split("\n"), start=1):
        line = strip_comment(raw).strip()
        if not line:
            continue
        yield num, line
        if line == SENTINEL:
            return


def split_mode(line: str) -> Tuple[str, Optional[str]]:
    """Split a segment's first line into mode keyword and remainder.

    Returns (line, None) when the line has no whitespace.
    """
    parts = line.split(None, 1)
    if len(parts) == 1:
        return parts[0], None
    return parts[0], parts[1]


class Segments:
    """Lazy, single-pass sequence of segments over a screenplay source.

    WHY: Segments are consumed one at a time and the assembler may stop
    early (scene range exceeded), so the source is never segmented more
    than necessary.

    HOW: Pulls lines from preprocess_lines(). Each call to __next__
    builds one segment, following continuation backslashes. Once the
    sentinel has been seen the one-shot ``terminated`` flag ends the
    sequence for good.

    RULES:
    - Not restartable; iterating again continues where it stopped
    - Segment.line is the line number of the segment's first line
    """

    def __init__(self, source: str) -> None:
        self._lines = preprocess_lines(source)
        self.terminated = False

    def __iter__(self) -> "Segments":
        return self

    def __next__(self) -> Segment:
        segment = self._read(split=True)
        if segment is None:
            raise StopIteration
        return segment

    def read_plain(self) -> Optional[Segment]:
        """Read the next segment without splitting off a mode keyword.

        Returns None when the sequence has ended.
        """
        return self._read(split=False)

    def _read(self, split: bool) -> Optional[Segment]:
        if self.terminated:
            return None

        head = next(self._lines, None)
        if head is None:
            return None
        linenum, line = head
        if line == SENTINEL:
            self.terminated = True
            return None

        mode: Optional[str] = None
        if split:
            mode, rest = split_mode(line)
            if rest is None:
                return Segment(line=linenum, mode=mode, fragments=[])
            line = rest

        fragments = []
        while line.endswith(CONTINUATION):
            fragments.append(line[:-len(CONTINUATION)].strip())
            nxt = next(self._lines, None)
            if nxt is None:
                logger.warning(
                    "Input ended inside the continued segment at line %d; segment dropped",
                    linenum,
                )
                return None
            line = nxt[1]
            if line == SENTINEL:
                self.terminated = True
                return Segment(line=linenum, mode=mode, fragments=fragments)

        fragments.append(line.strip())
        return Segment(line=linenum, mode=mode, fragments=fragments)
