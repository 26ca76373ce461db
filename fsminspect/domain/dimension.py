import logging
import re
from typing import Optional

from .types import UNKNOWN, Dimension, Hole, Slot, UnknownDimension
from ..shared.config import TolerancePolicy, get_policy
from ..shared.utils import normalize_num_str, try_parse_float

log = logging.getLogger(__name__)


_NUM_RE = r"\d+(?:\.\d+)?|\.\d+"
_SLOT_RE = re.compile(rf"^({_NUM_RE})\s*[xX×*]\s*({_NUM_RE})$")


def parse_dimension(raw, policy: Optional[TolerancePolicy] = None) -> Dimension:
    """Spec-dia cell -> Hole, Slot or UnknownDimension. Never raises.

    "9x12", "9X12", "9×12", "9*12" (spaces allowed) are slots; the first
    number is the height unless the policy says "minmax".
    """
    if raw is None or isinstance(raw, bool):
        return UNKNOWN
    if isinstance(raw, (int, float)):
        f = try_parse_float(raw)
        return Hole(f) if f is not None and f > 0 else UnknownDimension(str(raw))

    s = normalize_num_str(raw)
    if not s:
        return UNKNOWN

    m = _SLOT_RE.fullmatch(s)
    if m:
        a, b = float(m.group(1)), float(m.group(2))
        policy = policy or get_policy()
        if policy.slot_height_convention == "minmax":
            a, b = min(a, b), max(a, b)
        return Slot(height=a, width=b)

    f = try_parse_float(s)
    if f is not None and f > 0:
        return Hole(f)

    log.debug("unparseable spec dia %r", raw)
    return UnknownDimension(str(raw).strip())


def is_slot_text(s) -> bool:
    return _SLOT_RE.fullmatch(normalize_num_str(s)) is not None
