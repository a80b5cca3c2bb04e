from __future__ import annotations

import time
from collections import deque
from dataclasses import asdict, dataclass
from typing import Any, Deque, Dict, List, Tuple

OUTCOMES: Tuple[str, ...] = ("hit", "miss", "error")


@dataclass
class InverseRecord:
    op: str
    outcome: str
    trace_tag: str
    shape: Tuple[int, int] | None
    epoch: int | None
    elapsed_s: float
    error: str | None
    timestamp: float


def _epoch(cache: Any) -> int | None:
    try:
        return int(getattr(cache, "epoch"))
    except Exception:
        return None


def _shape(cache: Any) -> Tuple[int, int] | None:
    shape = getattr(cache, "shape", None)
    if isinstance(shape, tuple) and len(shape) == 2:
        return int(shape[0]), int(shape[1])
    return None


class InverseObservability:
    """Per-call trace of cached inverse lookups.

    Records are plain dicts so callers can inspect them without importing
    anything from this module. Not synchronised: a single recorder assumes
    the same single-threaded use as the caches it observes.
    """

    def __init__(self, *, max_records: int = 256, enabled: bool = True) -> None:
        self._enabled = bool(enabled)
        self._counter = 0
        self._records: Deque[dict[str, Any]] = deque(maxlen=int(max_records))
        self._last: dict[str, dict[str, Any]] = {}
        self._stats: Dict[str, int] = {k: 0 for k in OUTCOMES}

    def set_enabled(self, value: bool) -> bool:
        self._enabled = bool(value)
        return self._enabled

    def is_enabled(self) -> bool:
        return self._enabled

    def clear(self) -> None:
        self._counter = 0
        self._records.clear()
        self._last.clear()
        for k in OUTCOMES:
            self._stats[k] = 0

    def _record(self, record: InverseRecord) -> dict[str, Any]:
        payload = asdict(record)
        self._records.append(payload)
        self._last["__latest__"] = payload
        self._last[record.outcome] = payload
        self._stats[record.outcome] += 1
        return payload

    def record(
        self,
        cache: Any,
        *,
        outcome: str,
        started: float,
        error: BaseException | None = None,
    ) -> dict[str, Any] | None:
        if outcome not in OUTCOMES:
            raise ValueError(f"unknown outcome {outcome!r}; expected one of {OUTCOMES}")
        if not self._enabled:
            return None

        self._counter += 1
        record = InverseRecord(
            op="inverse",
            outcome=outcome,
            trace_tag=f"inverse:{self._counter}",
            shape=_shape(cache),
            epoch=_epoch(cache),
            elapsed_s=max(0.0, time.perf_counter() - started),
            error=type(error).__name__ if error is not None else None,
            timestamp=time.time(),
        )
        return self._record(record)

    def last(self, outcome: str | None = None) -> dict[str, Any] | None:
        key = outcome or "__latest__"
        payload = self._last.get(key)
        if payload is None:
            return None
        return dict(payload)

    def records(self) -> List[dict[str, Any]]:
        return [dict(r) for r in self._records]

    def stats(self) -> Dict[str, int]:
        return dict(self._stats)


# Module-level singleton helpers (optional convenience)
_default_observability = InverseObservability()


def default_instance() -> InverseObservability:
    return _default_observability
