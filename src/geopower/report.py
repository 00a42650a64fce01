"""Console table of OAT sensitivity results."""

import math

from geopower.types import SensitivityResult

NAME_WIDTH = 20
NOT_AVAILABLE = "N/A"


def _sci(value: float) -> str:
    return f"{value:.2e}" if math.isfinite(value) else NOT_AVAILABLE


def _pct(value: float) -> str:
    return f"{value * 100:.2f} %" if math.isfinite(value) else NOT_AVAILABLE


def format_row(result: SensitivityResult) -> str:
    return (
        f"{result.name:<{NAME_WIDTH}} | {_sci(result.absolute_change)} | "
        f"{_pct(result.relative_change)}"
    )


def format_table(results: list[SensitivityResult]) -> str:
    """Fixed-width table: factor, absolute change [GWe], relative change [%].

    Non-finite values (e.g. relative change against a zero baseline) are
    shown as N/A, never as a number.
    """
    lines = [
        "OAT Sensitivity Analysis Results:",
        "-" * 34,
        f"{'Factor':<{NAME_WIDTH}} | Absolute Change | Relative Change",
        "-" * 42,
    ]
    lines.extend(format_row(r) for r in results)
    degenerate = [r.name for r in results if r.is_degenerate]
    if degenerate:
        lines.append(
            f"N/A: baseline power is zero, relative change undefined for "
            f"{', '.join(degenerate)}"
        )
    return "\n".join(lines)


def print_table(results: list[SensitivityResult]) -> None:
    print(format_table(results))
