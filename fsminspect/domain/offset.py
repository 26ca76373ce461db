from typing import Optional

from .types import Dimension
from ..shared.config import TolerancePolicy, get_policy
from ..shared.utils import try_parse_float


def predicted_center(spec_yz: Optional[float], dim: Dimension) -> Optional[float]:
    # spec_yz is measured to the hole edge, the centre sits one radius further
    spec_yz, radius = try_parse_float(spec_yz), try_parse_float(dim.effective_radius)
    if spec_yz is None or radius is None:
        return None
    return spec_yz + radius


def compute_offset(spec_yz: Optional[float], dim: Dimension, actual_axis: Optional[float],
                   policy: Optional[TolerancePolicy] = None) -> Optional[float]:
    actual_axis = try_parse_float(actual_axis)
    if actual_axis is None:
        return None
    policy = policy or get_policy()
    if policy.offset_rule == "difference":
        spec_yz = try_parse_float(spec_yz)
        if spec_yz is None:
            return None
        return actual_axis - spec_yz
    center = predicted_center(spec_yz, dim)
    if center is None:
        return None
    return abs(actual_axis - center)
