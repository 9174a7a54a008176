"""Command-line interface for the Screenplay Converter.

WHY: Authors convert drafts from the terminal, usually the whole script
and sometimes a few scenes for a table read. The CLI wires together
file validation, the parsing pipeline, formatter selection, and file
saving behind a single command.

HOW: Uses argparse to accept an input ``.txt`` file, an optional output
path, a scene range, an output format, and an outline mode. Status
messages go to stderr; the document goes to the output file (next to
the source by default) or to stdout with ``-o -``.

RULES:
- Positional argument: input screenplay path; must end in ".txt"
- -s/--scenes: "N" selects scene N, "A-B" selects scenes A..B inclusive
- --format: one key of FORMATTERS (default from config)
- --outline: list scene headings instead of converting
- Output naming: {stem}{suffix}, numeric suffix for conflicts (draft-2.html)
- Status output goes to stderr (not stdout)
- Exit codes: 0 success, 1 usage or input error, 2 conversion error
- A failed conversion never writes an output file
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

from screenplay_converter import __version__
from screenplay_converter.config import DEFAULT_FORMAT, SUPPORTED_INPUT_EXTENSIONS
from screenplay_converter.core.assembler import assemble_screenplay, outline_scenes
from screenplay_converter.core.errors import ScriptError
from screenplay_converter.core.ir import SceneRange
from screenplay_converter.formatters import FORMATTERS
from screenplay_converter.formatters.base import FormatterOutput


FORMAT_GUIDE = """Format guide:
  scene   [CONTENT]               Begin new scene
  trans   [CONTENT]               Transition annotation
  direct  [CONTENT]               Action lines
  subhead [CONTENT]               Subheading
  chyron  [CONTENT]               Title or text
  parens  [CONTENT]               Parenthetical
  speech  [CONTENT]               Character speech
  montage                         Begin scene montage
  mon-end                         End scene montage
  TODO    [NOTE]                  Visible TODO marker
  [NAME]: [CONTENT]               Named character speech
  [NAME]: ([PARENS]) [CONTENT]    Named character speech with parenthetical
  \\                               Continue on the next line
  *                               Inline notes section
  ***                             End (notes section)
"""


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so ``-o -`` can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str, code: int = 1) -> NoReturn:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(code)


def parse_scene_range(value: str) -> SceneRange:
    """Parse a ``-s`` argument into a half-open SceneRange.

    RULES:
    - "N"   → SceneRange(N, N + 1)
    - "A-B" → SceneRange(A, B + 1)  (B inclusive on the command line)
    - Non-integers raise ValueError; so does B < A

    Args:
        value: The raw command-line value.

    Returns:
        The parsed SceneRange.
    """
    if "-" in value:
        start_s, stop_s = value.split("-", 1)
        try:
            start, stop = int(start_s), int(stop_s)
        except ValueError:
            raise ValueError("range argument was not integer: {}".format(value)) from None
        if stop < start:
            raise ValueError("range end is before range start: {}".format(value))
        return SceneRange(start, stop + 1)
    try:
        start = int(value)
    except ValueError:
        raise ValueError("scene argument was not integer: {}".format(value)) from None
    return SceneRange(start, start + 1)


def _resolve_output_path(stem: str, suffix: str, output_dir: Path) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    WHY: Authors re-run the converter after every edit pass; silently
    overwriting an earlier render would lose the version being compared.

    HOW: Try {stem}{suffix}; on conflict insert -2, -3, … before the
    suffix until a free name is found.
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    counter = 2
    while True:
        candidate = output_dir / "{}-{}{}".format(stem, counter, suffix)
        if not candidate.exists():
            return candidate
        counter += 1


def _write_output(output: FormatterOutput, input_path: Path, target: Optional[str]) -> Optional[Path]:
    """Write a formatter output; returns the path, or None for stdout."""
    if target == "-":
        sys.stdout.write(output.content)
        return None
    if target:
        path = Path(target)
    else:
        path = _resolve_output_path(input_path.stem, output.suffix, input_path.parent)
    path.write_text(output.content, encoding="utf-8")
    return path


def _print_outline(source: str) -> None:
    for block in outline_scenes(source):
        print("{}\tline {}\t{}".format(block.number, block.line, block.text))


def _run(args: argparse.Namespace) -> None:
    input_path = Path(args.input_file)

    if input_path.suffix.lower() not in SUPPORTED_INPUT_EXTENSIONS:
        _fail("expected a '.txt' file as input: {}".format(input_path))

    scene_range: Optional[SceneRange] = None
    if args.scenes:
        try:
            scene_range = parse_scene_range(args.scenes)
        except ValueError as e:
            _fail(str(e))

    try:
        source = input_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _fail("could not read {}: {}".format(input_path, e))

    try:
        if args.outline:
            _print_outline(source)
            return

        if args.format not in FORMATTERS:
            _fail("unknown format '{}'; available: {}".format(
                args.format, ", ".join(sorted(FORMATTERS))))
        formatter = FORMATTERS[args.format]()
        _status("Converting {} ({})...".format(input_path.name, formatter.name))
        screenplay = assemble_screenplay(source, scene_range)
        outputs = formatter.format(screenplay)
    except ScriptError as e:
        _fail("failed to convert {}: {}".format(input_path.name, e), code=2)

    _status("  {} scenes, {} blocks".format(screenplay.scene_count, len(screenplay.blocks)))
    for output in outputs:
        path = _write_output(output, input_path, args.output)
        if path is not None:
            _status("Saved: {}".format(path))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without running a conversion.
    """
    parser = argparse.ArgumentParser(
        prog="screenplay_converter",
        description="Convert a screenplay written in the line-oriented markup "
                    "dialect into an HTML (or plain text) document.",
        epilog=FORMAT_GUIDE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "input_file",
        help="Path to the '.txt' screenplay source.",
    )

    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output file path, or '-' for stdout (default: next to the input).",
    )

    parser.add_argument(
        "-s", "--scenes",
        default=None,
        metavar="RANGE",
        help="Output selected scenes without the title block, e.g. '3' or '2-5'.",
    )

    parser.add_argument(
        "--format",
        default=DEFAULT_FORMAT,
        choices=sorted(FORMATTERS.keys()),
        help="Output format (default: %(default)s).",
    )

    parser.add_argument(
        "--outline",
        action="store_true",
        help="List scene numbers, source lines and headings instead of converting.",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log pipeline details to stderr.",
    )

    parser.add_argument(
        "-v", "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )
    _run(args)


if __name__ == "__main__":
    main()
