import pytest

from quillmark.markdownnode import MarkdownNode, NodeType
from quillmark.outline import Outline, heading_label


def heading(line, level):
    return MarkdownNode(NodeType.HEADING, start_line=line, end_line=line, heading_level=level)


TEXT = "# A\npara\n## B\nmore\n# C"


@pytest.fixture
def outline():
    result = Outline()
    result.reload([heading(1, 1), heading(3, 2), heading(5, 1)], TEXT)
    return result


def test_label_for_plain_line():
    assert heading_label(1, "Title") == "   Title"


def test_label_indents_by_level():
    assert heading_label(2, "Title") == "    " + heading_label(1, "Title")
    assert heading_label(3, "## X") == "    " * 2 + heading_label(1, "## X")


def test_label_drops_closing_hashes():
    assert heading_label(1, "# Title ##") == heading_label(1, "# Title")
    assert heading_label(1, "# Title").endswith("Title")


def test_reload_records_positions(outline):
    assert len(outline) == 3
    assert [entry.position for entry in outline] == [
        0,
        TEXT.index("## B"),
        TEXT.index("# C"),
    ]
    assert [entry.level for entry in outline] == [1, 2, 1]


def test_reload_skips_headings_outside_text():
    result = Outline()
    result.reload([heading(1, 1), heading(9, 1)], "# A")
    assert len(result) == 1


def test_find_heading_exact(outline):
    for row, entry in enumerate(outline):
        assert outline.find_heading(entry.position) == row
    assert outline.find_heading(1) == -1


def test_find_heading_insertion_point(outline):
    assert outline.find_heading(1, False) == 1
    assert outline.find_heading(len(TEXT) + 5, False) == len(outline)


def test_current_row_sections(outline):
    b = outline[1].position
    assert outline.current_row(0) == 0
    assert outline.current_row(b - 1) == 0
    assert outline.current_row(b) == 1
    assert outline.current_row(len(TEXT)) == 2


def test_current_row_before_first_heading():
    result = Outline()
    result.reload([heading(2, 1)], "intro\n# H")
    assert result.current_row(0) is None
    assert result.current_row(-1) is None


def test_current_row_empty_outline():
    assert Outline().current_row(0) is None
    assert len(Outline()) == 0