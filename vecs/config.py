from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class Tolerance:
    """
    Numerical tolerances for approximate comparison and strict normalization.

    Exact equality (``==``) never uses these values; they only apply where a
    tolerance is asked for explicitly.

    Parameters
    ----------
    rtol
        Relative tolerance used by ``isclose`` (same meaning as in ``numpy.isclose``).
    atol
        Absolute tolerance used by ``isclose``.
    eps
        Smallest length ``unit()`` accepts before refusing to normalize.
    """
    rtol: float = 1e-9
    atol: float = 1e-12
    eps: float = 1e-15

    def __post_init__(self) -> None:
        object.__setattr__(self, "rtol", float(self.rtol))
        object.__setattr__(self, "atol", float(self.atol))
        object.__setattr__(self, "eps", float(self.eps))
        self.validate()

    def validate(self) -> None:
        if not self.rtol >= 0:
            raise ValueError(f"tolerance.rtol must be >= 0, got {self.rtol}.")
        if not self.atol >= 0:
            raise ValueError(f"tolerance.atol must be >= 0, got {self.atol}.")
        if not self.eps > 0:
            raise ValueError(f"tolerance.eps must be > 0, got {self.eps}.")

    def to_dict(self) -> dict[str, Any]:
        return {
            "rtol": float(self.rtol),
            "atol": float(self.atol),
            "eps": float(self.eps),
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Tolerance":
        unknown = set(d) - {"rtol", "atol", "eps"}
        if unknown:
            raise ValueError(f"Unknown tolerance fields: {sorted(unknown)}")
        return cls(**{k: float(v) for k, v in d.items()})


DEFAULT_TOLERANCE = Tolerance()
