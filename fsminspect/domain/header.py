"""Best-effort scan of an inspection document's header and table lines.

Works on text that a collaborator already pulled out of the PDF text layer,
or on a cell matrix read from a spreadsheet. Labels that are not found leave
the corresponding field as None.
"""

import logging
import re
from typing import List, Optional, Sequence

from .dimension import is_slot_text
from .types import HeaderInfo, SpecRow
from ..shared.constants import COL_PRESS, COL_REF, COL_SEL_ID, COL_SPEC_DIA, COL_SPEC_YZ, COL_X
from ..shared.utils import clean_text, try_parse_float

log = logging.getLogger(__name__)


_NUM = r"(\d+(?:[.,]\d+)?)"

_PART_RE = re.compile(
    r"PART\s*NUMBER\s*/\s*LEVEL\s*/\s*HAND\s*[:\-]?\s*([A-Z0-9]+)\s*/\s*([A-Z0-9]+)\s*/\s*([A-Z0-9]+)",
    re.IGNORECASE,
)
_ROOT_WIDTH_RE = re.compile(rf"ROOT\s*WIDTH.*?{_NUM}\s*mm", re.IGNORECASE)
_FSM_LENGTH_RE = re.compile(rf"FSM\s*LENGTH.*?{_NUM}\s*mm", re.IGNORECASE)
_TOTAL_HOLES_RE = re.compile(r"TOTAL\s*HOLES\s*COUNT\D*?(\d+)", re.IGNORECASE)
_KB_PC_RE = re.compile(r"KB.*?Spec.*?(\d+)\s*/\s*(\d+)", re.IGNORECASE)
_FORMAT_NO_RE = re.compile(r"FORMAT\s*NO\.?\s*[:\-]?\s*([A-Z0-9][A-Z0-9/\- ]*)", re.IGNORECASE)

_TABLE_LINE_RE = re.compile(r"^\d+\s")
_SLOT_SEPARATORS = {"x", "X", "×", "*"}


def _length(m) -> Optional[float]:
    return try_parse_float(m.group(1)) if m else None


def parse_header_text(text: str) -> HeaderInfo:
    t = text or ""
    fields = {}

    m = _PART_RE.search(t)
    if m:
        fields.update(part_number=m.group(1), level=m.group(2), hand=m.group(3).upper())

    fields["root_width"] = _length(_ROOT_WIDTH_RE.search(t))
    fields["fsm_length"] = _length(_FSM_LENGTH_RE.search(t))

    m = _TOTAL_HOLES_RE.search(t)
    if m:
        fields["total_holes"] = int(m.group(1))

    m = _KB_PC_RE.search(t)
    if m:
        fields.update(kb_spec=m.group(1), pc_spec=m.group(2))

    m = _FORMAT_NO_RE.search(t)
    if m:
        fields["format_no"] = m.group(1).strip() or None

    return HeaderInfo(**fields)


def matrix_lines(matrix: Sequence[Sequence]) -> List[str]:
    # a label cell and its value cell end up on the same line
    out = []
    for line in matrix:
        parts = [clean_text(c) for c in line]
        out.append(" ".join(p for p in parts if p))
    return out


def parse_header_cells(matrix: Sequence[Sequence]) -> HeaderInfo:
    return parse_header_text("\n".join(matrix_lines(matrix)))


def detect_table_lines(text: str) -> List[List[str]]:
    lines = [s.strip() for s in (text or "").split("\n")]
    return [ln.split() for ln in lines if ln and _TABLE_LINE_RE.match(ln)]


def detect_table_cells(matrix: Sequence[Sequence]) -> List[List[str]]:
    out = []
    for line in matrix:
        if not line:
            continue
        f = try_parse_float(line[0])
        if f is None or f != int(f) or f < 1:
            continue
        out.append(["" if c is None else str(c).strip() for c in line])
    return out


def _spec_dia_token(tokens: Sequence[str]) -> Optional[str]:
    # "9 x 12" split by whitespace comes back as three tokens
    tail = ["" if t is None else str(t).strip() for t in tokens[COL_SPEC_DIA:COL_SPEC_DIA + 3]]
    if not tail:
        return None
    if len(tail) == 3 and tail[1] in _SLOT_SEPARATORS and is_slot_text("".join(tail)):
        return "".join(tail)
    if len(tail) >= 2 and (tail[0][-1:] in _SLOT_SEPARATORS or tail[1][:1] in _SLOT_SEPARATORS):
        if is_slot_text(tail[0] + tail[1]):
            return tail[0] + tail[1]
    return clean_text(tail[0])


def spec_row_from_tokens(tokens: Sequence[str], seq: int) -> SpecRow:
    def tok(i):
        return clean_text(tokens[i]) if i < len(tokens) else None

    x, yz = try_parse_float(tok(COL_X)), try_parse_float(tok(COL_SPEC_YZ))
    if tok(COL_X) is not None and x is None:
        log.debug("row %d: non-numeric x %r", seq, tok(COL_X))
    return SpecRow(
        seq=seq,
        press=tok(COL_PRESS),
        sel_id=tok(COL_SEL_ID),
        ref=tok(COL_REF),
        x=x,
        spec_yz=yz,
        spec_dia_raw=_spec_dia_token(tokens),
    )