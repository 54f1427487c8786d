"""Simulation summaries (versioned JSON) and replay frames (one encoded state per JSONL line)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

SCHEMA_VERSION = 1


def save_result_json(path: Path, payload: dict[str, Any]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps({"schema_version": SCHEMA_VERSION, **payload}, indent=2))
    return path


def load_result_json(path: Path) -> dict[str, Any]:
    """Read a summary written by `save_result_json`; other schema versions are rejected."""
    data = json.loads(Path(path).read_text())
    version = data.get("schema_version") if isinstance(data, dict) else None
    if version != SCHEMA_VERSION:
        raise ValueError(f"{path}: expected results schema_version {SCHEMA_VERSION}, got {version!r}")
    return data


def save_frames_jsonl(path: Path, frames: Iterable[dict[str, Any]]) -> Path:
    """Write one encoded game state per line."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        for frame in frames:
            f.write(json.dumps(frame) + "\n")
    return path


def load_frames_jsonl(path: Path) -> list[dict[str, Any]]:
    frames = []
    with open(path, "r") as f:
        for line in f:
            line = line.strip()
            if line:
                frames.append(json.loads(line))
    return frames
