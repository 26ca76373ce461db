from typing import Iterable, Optional

from .dimension import parse_dimension
from .offset import compute_offset, predicted_center
from .tolerance import offset_ok, offset_tolerance, size_ok
from .types import (
    BLANK_VERDICT,
    ActualMeasurement,
    AuxCheck,
    RowResult,
    RowVerdict,
    SpecRow,
)
from ..shared.config import TolerancePolicy, get_policy


INCOMPLETE = "incomplete"
EVALUATED = "evaluated"


def combine(size: Optional[bool], offset: Optional[bool]) -> RowResult:
    # a definitive failure decides the row, a missing input never passes it
    if size is False or offset is False:
        return RowResult.NOK
    if size is True and offset is True:
        return RowResult.OK
    return RowResult.UNDETERMINED


def evaluate_row(row: SpecRow, actual: ActualMeasurement, fsm_length: Optional[float],
                 policy: Optional[TolerancePolicy] = None) -> RowVerdict:
    if row.is_blank:
        return BLANK_VERDICT
    policy = policy or get_policy()

    dim = parse_dimension(row.spec_dia_raw, policy)
    s_ok = size_ok(dim, actual, policy)

    tol = offset_tolerance(row.x, fsm_length, policy)
    dev = compute_offset(row.spec_yz, dim, actual.axis, policy)
    o_ok = offset_ok(dev, tol)

    return RowVerdict(
        offset=dev,
        predicted_center=predicted_center(row.spec_yz, dim),
        tolerance=tol,
        size_ok=s_ok,
        offset_ok=o_ok,
        result=combine(s_ok, o_ok),
    )


def row_state(verdict: RowVerdict) -> str:
    if verdict.result is RowResult.UNDETERMINED:
        return INCOMPLETE
    return EVALUATED


def has_outstanding_nok(verdicts: Iterable[RowVerdict], aux_checks: Iterable[AuxCheck] = ()) -> bool:
    if any(v.result is RowResult.NOK for v in verdicts):
        return True
    return any(c.ok is False for c in aux_checks)
