import argparse
from dataclasses import dataclass
from typing import Optional, Tuple

from .draw import DEFAULT_CENTER


@dataclass
class RouteGeomConfig:
    """Configuration for the routegeom CLI."""

    log_level: str = "WARNING"
    precision: Optional[int] = None
    exact_distance: bool = False
    default_center: Tuple[float, float] = DEFAULT_CENTER

    def __post_init__(self):
        if self.precision is not None and self.precision < 0:
            raise ValueError(f"precision must be non-negative, got {self.precision}")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "RouteGeomConfig":
        return cls(
            log_level=args.log_level,
            precision=args.precision,
            exact_distance=args.exact,
            default_center=tuple(args.center) if args.center else DEFAULT_CENTER,
        )
