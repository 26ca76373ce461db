import logging
from dataclasses import replace
from typing import List, Optional

from ..domain.rules import evaluate_row
from ..domain.types import ActualMeasurement, AuxCheck, HeaderActuals, InspectionDocument
from ..shared.config import TolerancePolicy, get_policy
from ..shared.constants import MAX_AUX_CHECKS
from ..shared.errors import RowIndexError

log = logging.getLogger(__name__)


def _replaced(items: tuple, index: int, value) -> tuple:
    return items[:index] + (value,) + items[index + 1:]


def reevaluate(doc: InspectionDocument, policy: Optional[TolerancePolicy] = None) -> InspectionDocument:
    policy = policy or get_policy()
    fsm_length = doc.fsm_length
    verdicts = tuple(evaluate_row(r, a, fsm_length, policy) for r, a in zip(doc.rows, doc.actuals))
    return replace(doc, verdicts=verdicts)


def set_row_actual(doc: InspectionDocument, index: int, actual: ActualMeasurement,
                   policy: Optional[TolerancePolicy] = None) -> InspectionDocument:
    if not 0 <= index < len(doc.rows):
        raise RowIndexError(index, len(doc.rows))
    policy = policy or get_policy()
    # only the edited row changes
    verdict = evaluate_row(doc.rows[index], actual, doc.fsm_length, policy)
    return replace(
        doc,
        actuals=_replaced(doc.actuals, index, actual),
        verdicts=_replaced(doc.verdicts, index, verdict),
    )


def set_header_actuals(doc: InspectionDocument, header_actuals: HeaderActuals,
                       policy: Optional[TolerancePolicy] = None) -> InspectionDocument:
    new = replace(doc, header_actuals=header_actuals)
    if new.fsm_length != doc.fsm_length:
        # edge-zone membership depends on the part length
        log.debug("FSM length %s -> %s, re-evaluating all rows", doc.fsm_length, new.fsm_length)
        return reevaluate(new, policy)
    return new


def set_aux_check(doc: InspectionDocument, index: int, check: AuxCheck) -> InspectionDocument:
    if not 0 <= index < MAX_AUX_CHECKS:
        raise RowIndexError(index, MAX_AUX_CHECKS, what="aux check")
    checks = list(doc.aux_checks)
    while len(checks) <= index:
        checks.append(AuxCheck(label=f"Hole check {len(checks) + 1}"))
    checks[index] = check
    return replace(doc, aux_checks=tuple(checks))


def header_checks(doc: InspectionDocument) -> List[AuxCheck]:
    h, a = doc.header, doc.header_actuals
    total = None if h.total_holes is None else str(h.total_holes)
    return [
        AuxCheck("Total holes count", actual=a.holes_act, spec=total, compare=True),
        AuxCheck("KB code", actual=a.kb_act, spec=h.kb_spec, compare=True),
        AuxCheck("PC code", actual=a.pc_act, spec=h.pc_spec, compare=True),
    ]
