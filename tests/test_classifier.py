"""Unit tests for segment classification.

WHY: The classifier decides what every line of the screenplay *is*.
A wrong decision renders a speech as a header, numbers a scene twice,
or accepts a typo the author should have been told about.

HOW: Tests cover each classification rule:
  - Explicit keywords and their content requirements
  - Scene heading recognition, numbering, and keyword stripping
  - Implicit fallback order: scene → header → named speech → error
  - Named speech run splitting (parenthetical/speech order)
  - Placeholder substitution
  - Error diagnostics (line, expected, after)

RULES:
- Segments are built with the real segmenter so mode splitting matches
  what the assembler sees.
- The context fixture is titled "Title" / "Subtitle".
"""

import pytest

from screenplay_converter.core.classifier import (
    MODES,
    classify_segment,
    is_header,
    is_scene_heading,
    split_speech_runs,
)
from screenplay_converter.core.errors import ScriptSyntaxError
from screenplay_converter.core.ir import BlockKind, DocumentContext
from screenplay_converter.core.segmenter import Segments


def classify(line, context):
    return classify_segment(next(Segments(line)), context)


def runs(block):
    return [(part.kind, part.text) for part in block.parts]


class TestExplicitBareModes:
    """montage / mon-end / TODO without content become fixed headers."""

    @pytest.mark.parametrize("line,text", [
        ("montage", "BEGIN MONTAGE:"),
        ("mon-end", "END MONTAGE."),
        ("TODO", "TODO ========================="),
    ])
    def test_fixed_header(self, context, line, text):
        block = classify(line, context)
        assert block.kind is BlockKind.HEADER
        assert block.text == text

    @pytest.mark.parametrize("mode", ["montage", "mon-end"])
    def test_content_rejected(self, context, mode):
        with pytest.raises(ScriptSyntaxError) as exc:
            classify("{} begins here".format(mode), context)
        assert exc.value.expected == "newline"
        assert exc.value.after == "mode declaration '{}'".format(mode)

    def test_todo_with_content(self, context):
        block = classify("TODO rewrite the chase", context)
        assert block.kind is BlockKind.HEADER
        assert block.text == "TODO: REWRITE THE CHASE"


class TestExplicitContentModes:
    """direct / parens / speech / subhead / trans / chyron need content."""

    def test_direct(self, context):
        block = classify("direct The door creaks open.", context)
        assert block.kind is BlockKind.DIRECTION
        assert block.text == "The door creaks open."

    def test_parens_wrapped(self, context):
        block = classify("parens whispering", context)
        assert block.kind is BlockKind.PARENTHETICAL
        assert block.text == "(whispering)"

    def test_speech(self, context):
        block = classify("speech Nobody move.", context)
        assert block.kind is BlockKind.SPEECH
        assert block.text == "Nobody move."

    def test_subhead_uppercased(self, context):
        block = classify("subhead part one", context)
        assert block.kind is BlockKind.SUBHEADING
        assert block.text == "PART ONE"

    def test_trans_uppercased(self, context):
        block = classify("trans smash cut to:", context)
        assert block.kind is BlockKind.TRANSITION
        assert block.text == "SMASH CUT TO:"

    def test_chyron_keeps_case(self, context):
        block = classify("chyron Three years later", context)
        assert block.kind is BlockKind.CHYRON
        assert block.text == "Three years later"

    @pytest.mark.parametrize("mode", ["direct", "parens", "speech", "subhead", "trans", "chyron", "scene"])
    def test_missing_content(self, context, mode):
        with pytest.raises(ScriptSyntaxError) as exc:
            classify(mode, context)
        assert exc.value.expected == "content"
        assert exc.value.after == "mode declaration '{}'".format(mode)

    def test_keywords_are_case_sensitive(self, context):
        # "Direct" is not a keyword, and the line is neither a header nor speech
        with pytest.raises(ScriptSyntaxError) as exc:
            classify("Direct The door opens.", context)
        assert exc.value.expected == "mode declaration"

    def test_continued_content_joined(self, context):
        block = classify_segment(next(Segments("direct one \\\ntwo \\\nthree\n")), context)
        assert block.text == "one two three"

    def test_mode_set(self):
        assert MODES == {
            "montage", "mon-end", "TODO", "direct", "parens",
            "speech", "subhead", "trans", "chyron", "scene",
        }


class TestSceneHeadings:
    """Scene headings are numbered 1, 2, 3, … in document order."""

    def test_implicit_scene(self, context):
        block = classify("EXT. LOC - DAY", context)
        assert block.kind is BlockKind.SCENE
        assert block.text == "EXT. LOC - DAY"
        assert block.number == 1
        assert context.scene == 1

    def test_explicit_and_implicit_render_identically(self):
        implicit = classify("EXT. LOC - DAY", DocumentContext("T", "S"))
        explicit = classify("scene EXT. LOC - DAY", DocumentContext("T", "S"))
        assert implicit.text == explicit.text == "EXT. LOC - DAY"
        assert implicit.number == explicit.number == 1

    def test_numbers_increase(self, context):
        numbers = [
            classify(line, context).number
            for line in ("INT. A - DAY", "scene EXT. B - NIGHT", "INT. C - DAWN")
        ]
        assert numbers == [1, 2, 3]

    def test_explicit_scene_requires_heading(self, context):
        with pytest.raises(ScriptSyntaxError) as exc:
            classify("scene somewhere nice", context)
        assert exc.value.expected == "scene heading"
        assert exc.value.after == "mode declaration 'scene'"

    def test_failed_scene_not_counted(self, context):
        with pytest.raises(ScriptSyntaxError):
            classify("scene INT. lowercase - day", context)
        assert context.scene == 0
        assert classify("INT. HALL - DAY", context).number == 1

    @pytest.mark.parametrize("text,expected", [
        ("INT. KITCHEN - DAY", True),
        ("EXT. ROOF, LATER - NIGHT (1999)", True),
        ("INT. Kitchen - DAY", False),
        ("INT. KITCHEN DAY", False),
        ("INT KITCHEN - DAY", False),
        ("HELLO INT. KITCHEN - DAY", False),
    ])
    def test_scene_pattern(self, text, expected):
        assert is_scene_heading(text) is expected


class TestImplicitFallbackOrder:
    """scene → header → named speech → error."""

    def test_all_caps_header(self, context):
        block = classify("FADE IN:", context)
        assert block.kind is BlockKind.HEADER
        assert block.text == "FADE IN:"

    def test_header_beats_speech(self, context):
        block = classify("ALEX: STOP!", context)
        assert block.kind is BlockKind.HEADER
        assert block.text == "ALEX: STOP!"

    def test_scene_beats_header(self, context):
        assert classify("INT. HALL - DAY", context).kind is BlockKind.SCENE

    def test_unrecognized_line(self, context):
        with pytest.raises(ScriptSyntaxError) as exc:
            classify("the door opens", context)
        assert exc.value.expected == "mode declaration"
        assert exc.value.after == "new line"

    def test_is_header(self):
        assert is_header("CUT TO BLACK.")
        assert not is_header("Cut to black.")


class TestNamedSpeech:
    """name: content splits into ordered parenthetical/speech runs."""

    def test_plain_speech(self, context):
        block = classify("alex: I am speaking hello there", context)
        assert block.kind is BlockKind.NAMED_SPEECH
        assert block.name == "ALEX"
        assert runs(block) == [(BlockKind.SPEECH, "I am speaking hello there")]

    def test_leading_parenthetical(self, context):
        block = classify("alex: (Mood) I am speaking hello there", context)
        assert runs(block) == [
            (BlockKind.PARENTHETICAL, "(Mood)"),
            (BlockKind.SPEECH, "I am speaking hello there"),
        ]

    def test_inline_parenthetical_order_preserved(self, context):
        block = classify("alex: I am speaking (Mood) hello there", context)
        assert runs(block) == [
            (BlockKind.SPEECH, "I am speaking"),
            (BlockKind.PARENTHETICAL, "(Mood)"),
            (BlockKind.SPEECH, "hello there"),
        ]

    def test_trailing_parenthetical(self, context):
        block = classify("alex: Fine. (Beat)", context)
        assert runs(block) == [
            (BlockKind.SPEECH, "Fine."),
            (BlockKind.PARENTHETICAL, "(Beat)"),
        ]

    @pytest.mark.parametrize("qualifier", ["O.S.", "V.O."])
    def test_offscreen_qualifier(self, context, qualifier):
        block = classify("sam ({}): Over here.".format(qualifier), context)
        assert block.name == "SAM ({})".format(qualifier)
        assert runs(block) == [(BlockKind.SPEECH, "Over here.")]

    def test_mixed_case_name(self, context):
        assert classify("Alex: Hi.", context).name == "ALEX"

    def test_lowercase_parenthetical_rejected(self, context):
        with pytest.raises(ScriptSyntaxError):
            classify("alex: hello (laughs) there", context)

    def test_parenthetical_only_rejected(self, context):
        with pytest.raises(ScriptSyntaxError):
            classify("alex: (Mood)", context)

    def test_unbalanced_parenthesis_rejected(self, context):
        with pytest.raises(ScriptSyntaxError):
            classify("alex: wait (Beat here", context)

    def test_block_line_numbers(self, context):
        block = classify_segment(next(Segments("\n\nalex: (Mood) Hi.\n")), context)
        assert block.line == 3
        assert all(part.line == 3 for part in block.parts)

    def test_split_speech_runs_none_for_non_speech(self):
        assert split_speech_runs("(Beat) (Pause)") is None


class TestPlaceholders:
    """$title and $subtitle are replaced before classification."""

    def test_title_in_direction(self, context):
        assert classify("direct A poster for $title.", context).text == "A poster for Title."

    def test_subtitle_in_speech(self, context):
        block = classify("alex: Did you read $subtitle?", context)
        assert runs(block) == [(BlockKind.SPEECH, "Did you read Subtitle?")]

    def test_title_uppercased_in_subhead(self, context):
        assert classify("subhead $title", context).text == "TITLE"


class TestDiagnostics:
    """Errors carry the source line and a readable message."""

    def test_line_number_and_message(self, context):
        segment = next(Segments("\n* note\n\ndirect\n"))
        with pytest.raises(ScriptSyntaxError) as exc:
            classify_segment(segment, context)
        assert exc.value.linenum == 4
        assert str(exc.value) == (
            "line 4 - invalid syntax (expected content after mode declaration 'direct')"
        )

    def test_syntax_error_is_value_error(self, context):
        with pytest.raises(ValueError):
            classify("what is this", context)
