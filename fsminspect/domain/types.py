from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union

from ..shared.constants import NOK_MARKS, OK_MARKS
from ..shared.utils import clean_text, normalize_num_str, try_parse_float


class RowResult(Enum):
    OK = "OK"
    NOK = "NOK"
    UNDETERMINED = ""


@dataclass(frozen=True)
class Hole:
    diameter: float

    @property
    def effective_radius(self) -> float:
        return self.diameter / 2.0


@dataclass(frozen=True)
class Slot:
    height: float
    width: float

    @property
    def effective_radius(self) -> float:
        return self.height / 2.0


@dataclass(frozen=True)
class UnknownDimension:
    raw: str = ""

    @property
    def effective_radius(self) -> None:
        return None


Dimension = Union[Hole, Slot, UnknownDimension]

UNKNOWN = UnknownDimension()


@dataclass(frozen=True)
class HeaderInfo:
    part_number: Optional[str] = None
    level: Optional[str] = None
    hand: Optional[str] = None
    fsm_length: Optional[float] = None
    root_width: Optional[float] = None
    kb_spec: Optional[str] = None
    pc_spec: Optional[str] = None
    total_holes: Optional[int] = None
    format_no: Optional[str] = None


@dataclass(frozen=True)
class HeaderActuals:
    fsm_serial: Optional[str] = None
    inspectors: Tuple[str, ...] = ()
    holes_act: Optional[str] = None
    matrix_used: Optional[str] = None
    kb_act: Optional[str] = None
    pc_act: Optional[str] = None
    root_width_act: Optional[str] = None
    fsm_length_act: Optional[str] = None

    @property
    def fsm_length(self) -> Optional[float]:
        return try_parse_float(self.fsm_length_act)


@dataclass(frozen=True)
class SpecRow:
    seq: int
    press: Optional[str] = None
    sel_id: Optional[str] = None
    ref: Optional[str] = None
    x: Optional[float] = None
    spec_yz: Optional[float] = None
    spec_dia_raw: Optional[str] = None

    @classmethod
    def blank(cls, seq: int) -> "SpecRow":
        return cls(seq=seq)

    @property
    def is_blank(self) -> bool:
        return (self.x is None and self.spec_yz is None and not self.spec_dia_raw
                and not self.press and not self.sel_id and not self.ref)


@dataclass(frozen=True)
class ActualMeasurement:
    value_from_edge: Optional[float] = None  # informational only
    diameter: Optional[float] = None
    height: Optional[float] = None
    width: Optional[float] = None
    axis: Optional[float] = None

    @classmethod
    def from_raw(cls, value_from_edge=None, diameter=None, height=None,
                 width=None, axis=None) -> "ActualMeasurement":
        return cls(
            value_from_edge=try_parse_float(value_from_edge),
            diameter=try_parse_float(diameter),
            height=try_parse_float(height),
            width=try_parse_float(width),
            axis=try_parse_float(axis),
        )


EMPTY_ACTUAL = ActualMeasurement()


@dataclass(frozen=True)
class RowVerdict:
    offset: Optional[float] = None
    predicted_center: Optional[float] = None
    tolerance: Optional[float] = None
    size_ok: Optional[bool] = None
    offset_ok: Optional[bool] = None
    result: RowResult = RowResult.UNDETERMINED


BLANK_VERDICT = RowVerdict()


@dataclass(frozen=True)
class AuxCheck:
    # Y/N mark when spec is not compared, else spec vs act match
    label: str
    actual: Optional[str] = None
    spec: Optional[str] = None
    compare: bool = False

    @property
    def ok(self) -> Optional[bool]:
        act = clean_text(self.actual)
        if act is None:
            return None
        if not self.compare:
            mark = act.upper()
            if mark in OK_MARKS:
                return True
            if mark in NOK_MARKS:
                return False
            return None
        spec = clean_text(self.spec)
        if spec is None:
            return None
        a, s = try_parse_float(act), try_parse_float(spec)
        if a is not None and s is not None:
            return a == s
        return normalize_num_str(act).upper() == normalize_num_str(spec).upper()


@dataclass(frozen=True)
class InspectionDocument:
    header: HeaderInfo = field(default_factory=HeaderInfo)
    header_actuals: HeaderActuals = field(default_factory=HeaderActuals)
    rows: Tuple[SpecRow, ...] = ()
    actuals: Tuple[ActualMeasurement, ...] = ()
    verdicts: Tuple[RowVerdict, ...] = ()
    aux_checks: Tuple[AuxCheck, ...] = ()

    @property
    def fsm_length(self) -> Optional[float]:
        # measured length wins over the drawing value once entered
        act = self.header_actuals.fsm_length
        return act if act is not None else try_parse_float(self.header.fsm_length)
