from dataclasses import dataclass, field
from typing import List

from ..domain.rules import has_outstanding_nok
from ..domain.types import InspectionDocument, RowResult
from .update_actual import header_checks


@dataclass
class Report:
    total: int = 0
    ok: int = 0
    nok: int = 0
    undetermined: int = 0
    nok_rows: List[int] = field(default_factory=list)
    failed_checks: List[str] = field(default_factory=list)
    has_outstanding_nok: bool = False


def build_report(doc: InspectionDocument) -> Report:
    rep = Report()
    for row, verdict in zip(doc.rows, doc.verdicts):
        # padding rows are not counted
        if row.is_blank:
            continue
        rep.total += 1
        if verdict.result is RowResult.OK:
            rep.ok += 1
        elif verdict.result is RowResult.NOK:
            rep.nok += 1
            rep.nok_rows.append(row.seq)
        else:
            rep.undetermined += 1
    checks = list(doc.aux_checks) + header_checks(doc)
    rep.failed_checks = [c.label for c in checks if c.ok is False]
    rep.has_outstanding_nok = has_outstanding_nok(doc.verdicts, checks)
    return rep
