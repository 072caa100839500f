from __future__ import annotations

"""Reading and writing the JSON / JSONL files used for pairs and traces."""

import json
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Tuple


def write_json(path: Path, payload: Any, *, indent: int = 2) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=indent, ensure_ascii=False)
        handle.write("\n")


def iter_jsonl(path: Path) -> Iterator[Tuple[int, Any]]:
    """Yield ``(line_number, value)`` for every non-blank line of *path*.

    A line that is not valid JSON raises ``ValueError`` naming the file and line.
    """

    with path.open("r", encoding="utf-8") as handle:
        for line_number, line in enumerate(handle, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                value = json.loads(line)
            except json.JSONDecodeError as exc:
                raise ValueError(
                    f"Invalid JSON on line {line_number} of {path}: {exc}"
                ) from exc
            yield line_number, value


def read_jsonl(path: Path) -> List[Any]:
    return [value for _, value in iter_jsonl(path)]


def write_jsonl(path: Path, rows: Iterable[Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        for row in rows:
            handle.write(json.dumps(row, ensure_ascii=False) + "\n")
