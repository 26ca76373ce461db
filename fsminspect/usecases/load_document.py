import logging
from typing import List, Optional, Sequence

from ..domain.header import (
    detect_table_cells,
    detect_table_lines,
    parse_header_cells,
    parse_header_text,
    spec_row_from_tokens,
)
from ..domain.rules import evaluate_row
from ..domain.types import EMPTY_ACTUAL, HeaderInfo, InspectionDocument, SpecRow
from ..shared.config import TolerancePolicy, get_policy
from ..shared.constants import MAX_ROWS

log = logging.getLogger(__name__)


def _build_rows(table: List[List[str]]) -> List[SpecRow]:
    return [spec_row_from_tokens(tokens, i + 1) for i, tokens in enumerate(table)]


def build_document(header: HeaderInfo, rows: Sequence[SpecRow],
                   policy: Optional[TolerancePolicy] = None) -> InspectionDocument:
    policy = policy or get_policy()
    rows = list(rows)
    if len(rows) > MAX_ROWS:
        log.warning("table has %d rows, only the first %d are kept", len(rows), MAX_ROWS)
        rows = rows[:MAX_ROWS]
    # short tables are padded so every row index is addressable
    rows.extend(SpecRow.blank(i + 1) for i in range(len(rows), MAX_ROWS))
    rows = tuple(rows)
    actuals = (EMPTY_ACTUAL,) * len(rows)
    verdicts = tuple(evaluate_row(r, EMPTY_ACTUAL, header.fsm_length, policy) for r in rows)
    return InspectionDocument(header=header, rows=rows, actuals=actuals, verdicts=verdicts)


def load_from_text(text: str, policy: Optional[TolerancePolicy] = None) -> InspectionDocument:
    header = parse_header_text(text)
    table = detect_table_lines(text)
    log.info("parsed header %s and %d table rows from text", header.part_number or "-", len(table))
    return build_document(header, _build_rows(table), policy)


def load_from_matrix(matrix: Sequence[Sequence], policy: Optional[TolerancePolicy] = None) -> InspectionDocument:
    header = parse_header_cells(matrix)
    table = detect_table_cells(matrix)
    log.info("parsed header %s and %d table rows from cells", header.part_number or "-", len(table))
    return build_document(header, _build_rows(table), policy)
