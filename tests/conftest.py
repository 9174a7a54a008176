"""Shared test fixtures for the screenplay_converter test suite.

WHY: Most test modules need the same realistic screenplay source and the
exact HTML it must produce. Centralizing both here keeps every test on
one authoritative sample.

HOW: SAMPLE_SCRIPT exercises every block kind, comments, blank lines,
continuation, placeholders and the trailing-notes sentinel. EXPECTED_BODY
is the HTML body (everything between preamble and closing) it renders to.

RULES:
- Line numbers referenced by tests are the physical lines of SAMPLE_SCRIPT
- Scenes: 1 EXT. DOCKS (line 5), 2 INT. CAR (line 12), 3 EXT. HIGHWAY (line 18)
- Anything after the ``***`` line would be a syntax error if it were read
"""

from typing import Dict, List

import pytest

from screenplay_converter.core.ir import DocumentContext


SAMPLE_SCRIPT = (
    "The Long Night\n"                                      # 1
    "Draft Two\n"                                           # 2
    "\n"                                                    # 3
    "* opening notes\n"                                     # 4
    "EXT. DOCKS - NIGHT\n"                                  # 5
    "direct Rain hammers the pier. \\\n"                    # 6
    "  A lone figure waits.\n"                              # 7
    "alex: (Quietly) Get in the car.\n"                     # 8
    "sam (O.S.): I can't see you.\n"                        # 9
    "trans cut to:\n"                                       # 10
    "\n"                                                    # 11
    "scene INT. CAR - CONTINUOUS\n"                         # 12
    "montage\n"                                             # 13
    "direct The wipers beat. * fix timing\n"                # 14
    "mon-end\n"                                             # 15
    "alex: We never saw $title coming. (Beat) Drive.\n"     # 16
    "CUT TO BLACK.\n"                                       # 17
    "EXT. HIGHWAY - DAWN\n"                                 # 18
    "TODO\n"                                                # 19
    "TODO fix the ending\n"                                 # 20
    "***\n"                                                 # 21
    "notes that would not parse at all\n"                   # 22
)

SCENE_1_BODY: List[str] = [
    '<div class="scene"><h1>&nbsp;&nbsp;&nbsp;1 EXT. DOCKS - NIGHT</h1></div>\n',
    '<div class="direct">Rain hammers the pier. A lone figure waits.</div>\n',
    '<div class="name">ALEX</div>\n'
    '<div class="parens">(Quietly)</div>\n'
    '<div class="speech">Get in the car.</div>\n',
    '<div class="name">SAM (O.S.)</div>\n'
    '<div class="speech">I can\'t see you.</div>\n',
    '<div class="trans">CUT TO:</div>\n',
]

SCENE_2_BODY: List[str] = [
    '<div class="scene"><h1>&nbsp;&nbsp;&nbsp;2 INT. CAR - CONTINUOUS</h1></div>\n',
    '<div class="header">BEGIN MONTAGE:</div>\n',
    '<div class="direct">The wipers beat.</div>\n',
    '<div class="header">END MONTAGE.</div>\n',
    '<div class="name">ALEX</div>\n'
    '<div class="speech">We never saw The Long Night coming.</div>\n'
    '<div class="parens">(Beat)</div>\n'
    '<div class="speech">Drive.</div>\n',
    '<div class="header">CUT TO BLACK.</div>\n',
]

SCENE_3_BODY: List[str] = [
    '<div class="scene"><h1>&nbsp;&nbsp;&nbsp;3 EXT. HIGHWAY - DAWN</h1></div>\n',
    '<div class="header">TODO =========================</div>\n',
    '<div class="header">TODO: FIX THE ENDING</div>\n',
]

EXPECTED_BODY = "".join(SCENE_1_BODY + SCENE_2_BODY + SCENE_3_BODY)


@pytest.fixture
def sample_script():
    """The sample screenplay source."""
    return SAMPLE_SCRIPT


@pytest.fixture
def context():
    """A fresh document context titled 'Title' / 'Subtitle'."""
    return DocumentContext(title="Title", subtitle="Subtitle")


@pytest.fixture
def expected_body():
    """HTML body rendered from the sample screenplay (no preamble/closing)."""
    return EXPECTED_BODY


@pytest.fixture
def scene_bodies() -> Dict[int, str]:
    """HTML body fragments of the sample screenplay, keyed by scene number."""
    return {
        1: "".join(SCENE_1_BODY),
        2: "".join(SCENE_2_BODY),
        3: "".join(SCENE_3_BODY),
    }
