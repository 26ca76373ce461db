"""Evaluate an inspection document given as JSON.

    {"text": "...", "header_actuals": {...}, "actuals": [{...}, ...],
     "aux_checks": [{"label": "...", "actual": "Y"}, ...]}

"cells" (a list of rows of cell strings) may be given instead of "text".
Exit code 1 when the document has outstanding NOK items, 2 on bad input.
"""

import argparse
import json
import logging
import sys

from .logging_setup import setup_logging
from ..domain.types import ActualMeasurement, AuxCheck, HeaderActuals
from ..shared.errors import InspectionError
from ..shared.utils import fmt_num
from ..usecases.load_document import load_from_matrix, load_from_text
from ..usecases.recompute_report import build_report
from ..usecases.update_actual import set_aux_check, set_header_actuals, set_row_actual

log = logging.getLogger(__name__)

_ACTUAL_KEYS = ("value_from_edge", "diameter", "height", "width", "axis")
_HEADER_KEYS = ("fsm_serial", "holes_act", "matrix_used", "kb_act", "pc_act",
                "root_width_act", "fsm_length_act")


def _list_of_dicts(payload: dict, key: str) -> list:
    items = payload.get(key) or []
    if not isinstance(items, list) or not all(isinstance(i, dict) or i is None for i in items):
        raise InspectionError(f"'{key}' must be a list of objects")
    return items


def load_payload(payload: dict):
    if "cells" in payload:
        cells = payload["cells"]
        if not isinstance(cells, list) or not all(isinstance(r, list) for r in cells):
            raise InspectionError("'cells' must be a list of rows")
        doc = load_from_matrix(cells)
    elif "text" in payload:
        if not isinstance(payload["text"], str):
            raise InspectionError("'text' must be a string")
        doc = load_from_text(payload["text"])
    else:
        raise InspectionError("document needs 'text' or 'cells'")

    hdr = payload.get("header_actuals") or {}
    if not isinstance(hdr, dict):
        raise InspectionError("'header_actuals' must be an object")
    if not isinstance(hdr.get("inspectors") or [], list):
        raise InspectionError("'inspectors' must be a list")
    if hdr:
        fields = {k: (None if hdr.get(k) is None else str(hdr[k])) for k in _HEADER_KEYS}
        inspectors = tuple(str(n) for n in hdr.get("inspectors") or ())
        doc = set_header_actuals(doc, HeaderActuals(inspectors=inspectors, **fields))

    for i, raw in enumerate(_list_of_dicts(payload, "actuals")):
        if raw:
            doc = set_row_actual(doc, i, ActualMeasurement.from_raw(**{k: raw.get(k) for k in _ACTUAL_KEYS}))

    for i, raw in enumerate(_list_of_dicts(payload, "aux_checks")):
        if raw is None:
            continue
        doc = set_aux_check(doc, i, AuxCheck(label=str(raw.get("label") or f"Hole check {i + 1}"),
                                             actual=raw.get("actual")))
    return doc


def render(doc) -> str:
    lines = []
    for row, v in zip(doc.rows, doc.verdicts):
        if row.is_blank:
            continue
        lines.append("%3d  x=%-8s yz=%-8s dia=%-8s offset=%-6s %s" % (
            row.seq, fmt_num(row.x), fmt_num(row.spec_yz), row.spec_dia_raw or "",
            fmt_num(v.offset), v.result.value or "-"))
    rep = build_report(doc)
    lines.append(f"rows: {rep.total}  OK: {rep.ok}  NOK: {rep.nok}  open: {rep.undetermined}")
    if rep.failed_checks:
        lines.append("failed checks: " + ", ".join(rep.failed_checks))
    if rep.has_outstanding_nok:
        lines.append("outstanding NOK items, confirm before export")
    return "\n".join(lines)


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(prog="fsminspect", description="FSM inspection verdicts")
    ap.add_argument("document", help="JSON document, '-' for stdin")
    ap.add_argument("--log-level", default="WARNING")
    args = ap.parse_args(argv)

    setup_logging(args.log_level)
    try:
        if args.document == "-":
            payload = json.load(sys.stdin)
        else:
            with open(args.document, encoding="utf-8") as f:
                payload = json.load(f)
        if not isinstance(payload, dict):
            raise InspectionError("document must be a JSON object")
        doc = load_payload(payload)
    except (OSError, json.JSONDecodeError, InspectionError) as e:
        log.error("cannot read %s: %s", args.document, e)
        return 2

    print(render(doc))
    has_nok = build_report(doc).has_outstanding_nok
    return 1 if has_nok else 0


if __name__ == "__main__":
    sys.exit(main())
