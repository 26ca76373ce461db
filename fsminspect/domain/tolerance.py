from typing import Optional

from .types import Dimension, Hole, Slot, ActualMeasurement
from ..shared.config import TolerancePolicy, get_policy
from ..shared.constants import EPS
from ..shared.utils import try_parse_float


def in_band(actual: float, lo: float, hi: float) -> bool:
    return lo - EPS <= actual <= hi + EPS


def hole_allowance(spec: float, policy: Optional[TolerancePolicy] = None) -> float:
    policy = policy or get_policy()
    # only small holes get the tighter band, (10.7, 11.7) falls to the wide one
    if spec <= policy.small_hole_limit_mm + EPS:
        return policy.small_hole_allowance_mm
    return policy.hole_allowance_mm


def hole_size_ok(spec: Optional[float], actual: Optional[float],
                 policy: Optional[TolerancePolicy] = None) -> Optional[bool]:
    spec, actual = try_parse_float(spec), try_parse_float(actual)
    if spec is None or actual is None:
        return None
    return in_band(actual, spec, spec + hole_allowance(spec, policy))


def side_ok(spec: float, actual: Optional[float],
            policy: Optional[TolerancePolicy] = None) -> Optional[bool]:
    spec, actual = try_parse_float(spec), try_parse_float(actual)
    if spec is None or actual is None:
        return None
    policy = policy or get_policy()
    return in_band(actual, spec, spec + policy.slot_allowance_mm)


def slot_size_ok(slot: Slot, actual_height: Optional[float], actual_width: Optional[float],
                 policy: Optional[TolerancePolicy] = None) -> Optional[bool]:
    h = side_ok(slot.height, actual_height, policy)
    w = side_ok(slot.width, actual_width, policy)
    # one side missing -> whole slot unknown, even if the other side fails
    if h is None or w is None:
        return None
    return h and w


def size_ok(dim: Dimension, actual: ActualMeasurement,
            policy: Optional[TolerancePolicy] = None) -> Optional[bool]:
    if isinstance(dim, Hole):
        return hole_size_ok(dim.diameter, actual.diameter, policy)
    if isinstance(dim, Slot):
        return slot_size_ok(dim, actual.height, actual.width, policy)
    return None


def offset_tolerance(x: Optional[float], fsm_length: Optional[float],
                     policy: Optional[TolerancePolicy] = None) -> float:
    """Half-width of the offset band for a station at axial position x.

    Stations within edge_zone_mm of either end of the part get the wider
    edge band. Without a numeric x and part length the station is treated
    as not near an edge.
    """
    policy = policy or get_policy()
    x, fsm_length = try_parse_float(x), try_parse_float(fsm_length)
    if x is None or fsm_length is None or fsm_length <= 0:
        return policy.nominal_tolerance_mm
    if x <= policy.edge_zone_mm + EPS or x >= fsm_length - policy.edge_zone_mm - EPS:
        return policy.edge_tolerance_mm
    return policy.nominal_tolerance_mm


def offset_ok(deviation: Optional[float], tolerance: float) -> Optional[bool]:
    deviation = try_parse_float(deviation)
    if deviation is None:
        return None
    return abs(deviation) <= tolerance + EPS
