# models.py
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

from config.chart_settings import DEFAULT_TIMESTEP_UNIT, TIMESTEP_UNITS


def _as_list(value: Any) -> List[Any]:
    """Arrays from the backend are only trusted when they really are arrays."""
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


@dataclass
class ValueSet:
    """Statistics for one value mode (real or nominal)."""
    mean: List[float] = field(default_factory=list)
    percentiles: Dict[str, List[float]] = field(default_factory=dict)
    simulation_data: List[List[float]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Optional["ValueSet"]:
        if not isinstance(data, dict):
            return None
        return cls(
            mean=_as_list(data.get("mean")),
            percentiles={str(k): _as_list(v) for k, v in _as_dict(data.get("percentiles")).items()},
            simulation_data=_as_list(data.get("simulation_data")),
        )


@dataclass
class AggregatedResult:
    timesteps: List[int] = field(default_factory=list)
    real: Optional[ValueSet] = None
    nominal: Optional[ValueSet] = None
    # Probability of destitution per timestep, shared by both value modes
    destitution: Optional[List[float]] = None

    @classmethod
    def from_dict(cls, data: Any) -> Optional["AggregatedResult"]:
        if not isinstance(data, dict):
            return None
        destitution = data.get("destitution")
        return cls(
            timesteps=_as_list(data.get("timesteps")),
            real=ValueSet.from_dict(data.get("real")),
            nominal=ValueSet.from_dict(data.get("nominal")),
            destitution=list(destitution) if isinstance(destitution, (list, tuple)) else None,
        )


@dataclass
class PortfolioResult:
    timesteps: List[int] = field(default_factory=list)
    real: Optional[ValueSet] = None
    nominal: Optional[ValueSet] = None

    @classmethod
    def from_dict(cls, data: Any) -> "PortfolioResult":
        data = _as_dict(data)
        return cls(
            timesteps=_as_list(data.get("timesteps")),
            real=ValueSet.from_dict(data.get("real")),
            nominal=ValueSet.from_dict(data.get("nominal")),
        )


@dataclass
class SimulationResult:
    timestep_unit: str = DEFAULT_TIMESTEP_UNIT
    aggregated: Optional[AggregatedResult] = None
    # Insertion order is kept: the first portfolio supplies the timestep grid
    individual_portfolios: Dict[str, PortfolioResult] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Optional["SimulationResult"]:
        if not isinstance(data, dict):
            return None

        unit = data.get("timestep_unit")
        if unit not in TIMESTEP_UNITS:
            unit = DEFAULT_TIMESTEP_UNIT

        portfolios = {
            str(pid): PortfolioResult.from_dict(p)
            for pid, p in _as_dict(data.get("individual_portfolios")).items()
        }
        return cls(
            timestep_unit=unit,
            aggregated=AggregatedResult.from_dict(data.get("aggregated")),
            individual_portfolios=portfolios,
        )


@dataclass
class SimulationResponse:
    """Envelope returned by the simulation backend."""
    success: bool
    result: Optional[SimulationResult] = None
    error: Optional[str] = None
    traceback: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulationResponse":
        return cls(
            success=bool(data.get("success", False)),
            result=SimulationResult.from_dict(data.get("result")),
            error=data.get("error"),
            traceback=data.get("traceback"),
        )


@dataclass
class Plan:
    start_age: int
    plan_end_age: int

    @classmethod
    def from_dict(cls, data: Any) -> Optional["Plan"]:
        if not isinstance(data, dict):
            return None
        try:
            return cls(start_age=int(data["start_age"]), plan_end_age=int(data["plan_end_age"]))
        except (KeyError, TypeError, ValueError):
            return None


@dataclass
class HistogramBin:
    min: float
    max: float
    count: int
    label: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
