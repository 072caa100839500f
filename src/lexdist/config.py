from __future__ import annotations

"""Settings and pair-file schemas, plus the loaders that read them."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError

from .utils import jsonio

logger = logging.getLogger(__name__)


class DistanceSettings(BaseModel):
    """How pairs are measured when no per-pair override is given."""

    fast_mode: bool = False
    max_length: Optional[int] = Field(default=None, gt=0)
    label: Optional[str] = None


class TextPair(BaseModel):
    """One line of a pairs file."""

    pair_id: str
    a: str
    b: str
    fast_mode: Optional[bool] = None


@dataclass(frozen=True)
class ProjectPaths:
    """Convenience holder for the bundled data directories."""

    project_root: Path
    data_dir: Path
    settings_dir: Path
    pairs_dir: Path


def _default_paths() -> ProjectPaths:
    root = Path(__file__).resolve().parents[2]
    data_dir = root / "data"
    return ProjectPaths(
        project_root=root,
        data_dir=data_dir,
        settings_dir=data_dir / "settings",
        pairs_dir=data_dir / "pairs",
    )


PATHS = _default_paths()


class SettingsNotFoundError(FileNotFoundError):
    """Raised when a settings name or path cannot be located."""


class PairSetNotFoundError(FileNotFoundError):
    """Raised when a pairs file cannot be located."""


def _resolve(name_or_path: Union[str, Path], directory: Path, suffix: str) -> Path:
    candidate = Path(name_or_path)
    if candidate.suffix or candidate.parent != Path("."):
        return candidate
    return directory / f"{candidate.name}{suffix}"


def load_settings(
    name_or_path: Union[str, Path] = "default", *, paths: ProjectPaths = PATHS
) -> DistanceSettings:
    """Load settings by bundled name (``data/settings/<name>.yaml``) or file path."""

    settings_path = _resolve(name_or_path, paths.settings_dir, ".yaml")
    if not settings_path.exists():
        raise SettingsNotFoundError(
            f"Unknown settings '{name_or_path}' at {settings_path}"
        )
    with settings_path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid settings in {settings_path}: {exc}") from exc
    try:
        settings = DistanceSettings.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid settings in {settings_path}: {exc}") from exc
    logger.debug("Loaded settings from %s: %s", settings_path, settings)
    return settings


def load_pairs(
    name_or_path: Union[str, Path], *, paths: ProjectPaths = PATHS
) -> List[TextPair]:
    """Read every pair from a JSONL file, numbering rows that carry no ``pair_id``."""

    pairs_path = _resolve(name_or_path, paths.pairs_dir, ".jsonl")
    if not pairs_path.exists():
        raise PairSetNotFoundError(f"Unknown pair set '{name_or_path}' at {pairs_path}")
    pairs: List[TextPair] = []
    for line_number, entry in jsonio.iter_jsonl(pairs_path):
        if isinstance(entry, dict):
            entry.setdefault("pair_id", f"pair-{len(pairs)}")
        try:
            pairs.append(TextPair.model_validate(entry))
        except ValidationError as exc:
            raise ValueError(
                f"Invalid pair on line {line_number} of {pairs_path}: {exc}"
            ) from exc
    logger.debug("Loaded %d pairs from %s", len(pairs), pairs_path)
    return pairs


def list_available_settings(paths: ProjectPaths = PATHS) -> List[str]:
    """Return the bundled settings names."""

    return sorted(p.stem for p in paths.settings_dir.glob("*.yaml"))


def list_available_pair_sets(paths: ProjectPaths = PATHS) -> List[str]:
    """Return the bundled pair-set names."""

    return sorted(p.stem for p in paths.pairs_dir.glob("*.jsonl"))
