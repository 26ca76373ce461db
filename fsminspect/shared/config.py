"""Tolerance policy.

Every business rule constant of the engine lives here so it can be audited
and changed through the environment (``FSM_EDGE_TOLERANCE_MM=2.0``) or a
``.env`` file instead of code edits.
"""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings

from .constants import (
    EDGE_TOLERANCE_MM,
    EDGE_ZONE_MM,
    HOLE_ALLOWANCE_MM,
    NOMINAL_TOLERANCE_MM,
    SLOT_ALLOWANCE_MM,
    SMALL_HOLE_ALLOWANCE_MM,
    SMALL_HOLE_LIMIT_MM,
)


class TolerancePolicy(BaseSettings):
    # offset band
    nominal_tolerance_mm: float = Field(NOMINAL_TOLERANCE_MM, ge=0)
    edge_tolerance_mm: float = Field(EDGE_TOLERANCE_MM, ge=0)
    edge_zone_mm: float = Field(EDGE_ZONE_MM, ge=0)

    # size band, lower bound is always the spec value
    small_hole_limit_mm: float = Field(SMALL_HOLE_LIMIT_MM, gt=0)
    small_hole_allowance_mm: float = Field(SMALL_HOLE_ALLOWANCE_MM, ge=0)
    hole_allowance_mm: float = Field(HOLE_ALLOWANCE_MM, ge=0)
    slot_allowance_mm: float = Field(SLOT_ALLOWANCE_MM, ge=0)

    # "first": first number of "HxW" is the height (Option A)
    # "minmax": the smaller number is the height
    slot_height_convention: Literal["first", "minmax"] = "first"

    # "projection": |actual - (spec_yz + radius)|, "difference": actual - spec_yz
    offset_rule: Literal["projection", "difference"] = "projection"

    model_config = {
        "env_prefix": "FSM_",
        "env_file": ".env",
        "case_sensitive": False,
        "frozen": True,
        "extra": "ignore",
    }


_policy_cache: Optional[TolerancePolicy] = None


def get_policy() -> TolerancePolicy:
    global _policy_cache
    if _policy_cache is None:
        _policy_cache = TolerancePolicy()
    return _policy_cache


def reset_policy_cache() -> None:
    global _policy_cache
    _policy_cache = None
