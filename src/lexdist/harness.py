from __future__ import annotations

"""Run pair files through the distance engine and summarise the results."""

import logging
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from statistics import mean
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from .config import DistanceSettings, TextPair
from .engine import levenshtein, prepare_sequences
from .utils import jsonio

logger = logging.getLogger(__name__)


class InputTooLongError(ValueError):
    """Raised when an input exceeds the configured ``max_length``."""


@dataclass
class DistanceRecord:
    pair_id: str
    fast_mode: bool
    len_a: int
    len_b: int
    distance: int
    normalized: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def check_length(
    sequence: Sequence[Any], max_length: Optional[int], *, label: str = "input"
) -> None:
    """Reject *sequence* when a ceiling is set and it holds more elements."""

    if max_length is not None and len(sequence) > max_length:
        raise InputTooLongError(
            f"{label} has {len(sequence)} elements, above max_length={max_length}"
        )


class PairHarness:
    def __init__(self, settings: Optional[DistanceSettings] = None):
        self.settings = settings or DistanceSettings()

    def run_pair(self, pair: TextPair) -> DistanceRecord:
        fast_mode = self.settings.fast_mode if pair.fast_mode is None else pair.fast_mode
        seq_a, seq_b = prepare_sequences(pair.a, pair.b, fast_mode)
        check_length(seq_a, self.settings.max_length, label=f"{pair.pair_id}.a")
        check_length(seq_b, self.settings.max_length, label=f"{pair.pair_id}.b")
        if fast_mode and not (pair.a.isascii() and pair.b.isascii()):
            logger.debug("Pair %s is measured in bytes but is not ASCII", pair.pair_id)
        distance = levenshtein(seq_a, seq_b)
        longest = max(len(seq_a), len(seq_b))
        return DistanceRecord(
            pair_id=pair.pair_id,
            fast_mode=fast_mode,
            len_a=len(seq_a),
            len_b=len(seq_b),
            distance=distance,
            normalized=(distance / longest) if longest else 0.0,
        )

    def run_pairs(
        self, pairs: Iterable[TextPair], *, run_dir: Optional[Path] = None
    ) -> List[DistanceRecord]:
        results = [self.run_pair(pair) for pair in pairs]
        logger.info("Measured %d pairs", len(results))
        if run_dir is not None:
            persist_run(results, run_dir, settings=self.settings)
        return results


def summarise(records: Sequence[Mapping[str, Any]]) -> Dict[str, Any]:
    if not records:
        return {
            "num_pairs": 0,
            "total_distance": 0,
            "avg_distance": 0.0,
            "max_distance": 0,
            "avg_normalized": 0.0,
            "exact_matches": 0,
        }

    distances = [int(record.get("distance", 0)) for record in records]
    normalized = [float(record.get("normalized", 0.0)) for record in records]
    return {
        "num_pairs": len(records),
        "total_distance": sum(distances),
        "avg_distance": mean(float(distance) for distance in distances),
        "max_distance": max(distances),
        "avg_normalized": mean(normalized),
        "exact_matches": distances.count(0),
    }


def persist_run(
    run_records: Iterable[DistanceRecord],
    run_dir: Path,
    *,
    settings: DistanceSettings,
) -> None:
    records = [record.to_dict() for record in run_records]
    run_dir.mkdir(parents=True, exist_ok=True)
    jsonio.write_jsonl(run_dir / "trace.jsonl", records)
    summary = {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "settings": settings.model_dump(mode="json"),
        **summarise(records),
    }
    jsonio.write_json(run_dir / "summary.json", summary)
    logger.info("Run artefacts written to %s", run_dir)


def load_trace(run_path: Path) -> List[Dict[str, Any]]:
    trace_path = run_path / "trace.jsonl" if run_path.is_dir() else run_path
    if not trace_path.exists():
        raise FileNotFoundError(f"Trace not found at {trace_path}")
    return jsonio.read_jsonl(trace_path)


def write_report(run_path: Path, destination: Optional[Path] = None) -> Path:
    records = load_trace(run_path)
    run_dir = run_path if run_path.is_dir() else run_path.parent
    target = destination or (run_dir / "report.json")
    jsonio.write_json(target, {"summary": summarise(records), "records": records})
    return target
