from fsminspect.domain.header import (
    detect_table_cells,
    detect_table_lines,
    parse_header_cells,
    parse_header_text,
    spec_row_from_tokens,
)

SAMPLE = """SOENEN INSPECTION REPORT FORMAT NO: QA/F/21 REV 02
PART NUMBER / LEVEL / HAND : 5300A123 / B / l
ROOT WIDTH OF FSM 245.5 mm FSM LENGTH : 2000 mm
TOTAL HOLES COUNT : 24  KB & PC Code Spec 12 / 34
1 PW 1 B 150 101 13
2 PW 2 B 1000 102 9x12
3 PW 3 B 1850 103 9 x 12
"""


def test_parse_header_text():
    h = parse_header_text(SAMPLE)
    assert (h.part_number, h.level, h.hand) == ("5300A123", "B", "L")
    assert h.root_width == 245.5
    assert h.fsm_length == 2000.0
    assert h.total_holes == 24
    assert (h.kb_spec, h.pc_spec) == ("12", "34")
    assert h.format_no.startswith("QA/F/21")


def test_missing_labels_leave_fields_empty():
    h = parse_header_text("nothing useful here")
    assert h.part_number is None
    assert h.fsm_length is None
    assert h.total_holes is None
    assert parse_header_text(None).kb_spec is None


def test_detect_table_lines():
    lines = detect_table_lines(SAMPLE)
    assert len(lines) == 3
    assert lines[0] == ["1", "PW", "1", "B", "150", "101", "13"]


def test_spec_row_from_tokens_rejoins_spaced_slot():
    lines = detect_table_lines(SAMPLE)
    row = spec_row_from_tokens(lines[2], 3)
    assert row.spec_dia_raw == "9x12"
    assert row.x == 1850.0
    assert row.spec_yz == 103.0
    assert row.press == "PW"


def test_spec_row_short_and_non_numeric():
    row = spec_row_from_tokens(["4", "PW", "4", "B", "n/a"], 4)
    assert row.x is None
    assert row.spec_yz is None
    assert row.spec_dia_raw is None
    assert not row.is_blank


def test_parse_header_cells_and_table_cells():
    matrix = [
        ["PART NUMBER / LEVEL / HAND :", "7700X9 / A / R", None],
        ["FSM LENGTH", "1500", "mm"],
        ["Sl No", "Press", "Sel ID"],
        [1, "PW", "1", "B", 120, "80,5", "11"],
        ["2", "PW", "2", "B", "700", "81", "9*12"],
        ["", "", ""],
    ]
    h = parse_header_cells(matrix)
    assert h.part_number == "7700X9"
    assert h.hand == "R"
    assert h.fsm_length == 1500.0
    table = detect_table_cells(matrix)
    assert len(table) == 2
    row = spec_row_from_tokens(table[0], 1)
    assert row.x == 120.0
    assert row.spec_yz == 80.5


def test_decimal_comma_lengths():
    h = parse_header_text("ROOT WIDTH 245,5 mm\nFSM LENGTH : 1999,5 mm")
    assert h.root_width == 245.5
    assert h.fsm_length == 1999.5
