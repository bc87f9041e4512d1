from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PlotSettings:
    num_points: int = 100        # samples per plotted curve
    margin_ratio: float = 0.2    # padding on each side of the data, as a share of its x-span
    min_data_points: int = 5
    trace_decimals: int = 6
    latex_approx: bool = True    # use decimal approximations in LaTeX output
    latex_decimals: int = 3      # digits after decimal point when approx is on

    def __post_init__(self) -> None:
        if not (50 <= self.num_points <= 500):
            raise ValueError(f"num_points must be in [50, 500], got {self.num_points}")
        if self.margin_ratio < 0:
            raise ValueError(f"margin_ratio cannot be negative, got {self.margin_ratio}")
        if self.min_data_points < 1:
            raise ValueError(f"min_data_points must be positive, got {self.min_data_points}")
        if not (0 <= self.trace_decimals <= 12):
            raise ValueError(f"trace_decimals must be in [0, 12], got {self.trace_decimals}")
        if not (0 <= self.latex_decimals <= 10):
            raise ValueError(f"latex_decimals must be in [0, 10], got {self.latex_decimals}")
