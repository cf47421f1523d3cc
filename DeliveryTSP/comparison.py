from __future__ import annotations

from typing import List, Optional, Sequence

from DeliveryTSP.solvers.base import RouteResult


def best_result(results: Sequence[RouteResult]) -> Optional[RouteResult]:
    """Shortest result; the earliest one wins ties."""
    best = None
    for result in results:
        if best is None or result.distance < best.distance:
            best = result
    return best


def excess_percent(result: RouteResult, best: RouteResult) -> float:
    """How much longer ``result`` is than ``best``, in percent."""
    if best.distance <= 0 or result.distance <= 0:
        return 0.0
    return (result.distance / best.distance - 1.0) * 100.0


def format_time(time_ms: float) -> str:
    return "< 1ms" if time_ms < 1 else f"{time_ms:.1f}ms"


def summarize(results: Sequence[RouteResult]) -> str:
    best = best_result(results)
    if best is None:
        return "No results."
    width = max(len(r.algorithm) for r in results)
    header = f"{'algorithm':<{width}} | {'distance':>10} | {'time':>8} | {'vs best':>8} | status"
    lines: List[str] = [header, "-" * len(header)]
    for r in results:
        gap = "best" if r.distance == best.distance else f"+{excess_percent(r, best):.1f}%"
        lines.append(
            f"{r.algorithm:<{width}} | {r.distance:10.2f} | {format_time(r.time_ms):>8} | {gap:>8} | {r.status}"
        )
    return "\n".join(lines)


__all__ = ["best_result", "excess_percent", "format_time", "summarize"]
