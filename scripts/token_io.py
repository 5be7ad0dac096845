"""Read token definitions from disk and write generated artifacts."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from token_errors import MalformedSourceError, SourceUnavailableError

SOURCE_NAMES = ("tokens.json", "tokens.yaml", "tokens.yml")
YAML_SUFFIXES = {".yaml", ".yml"}


def find_source(directory: Path) -> Path:
    """Return the first token definition present in directory."""
    for name in SOURCE_NAMES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    raise SourceUnavailableError(
        f"no token definition in {directory} (looked for {', '.join(SOURCE_NAMES)})"
    )


class FileTokenSource:
    """Token tree stored as JSON or YAML.

    Duplicate keys resolve last-write-wins, as both parsers do.
    """

    def __init__(self, path: Path):
        self.path = path

    def load(self) -> Any:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise SourceUnavailableError(f"missing token definition {self.path}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceUnavailableError(f"cannot read {self.path}: {exc}") from exc

        if self.path.suffix.lower() in YAML_SUFFIXES:
            try:
                return yaml.safe_load(text)
            except yaml.YAMLError as exc:
                raise MalformedSourceError(f"invalid YAML in {self.path}: {exc}") from exc
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise MalformedSourceError(f"invalid JSON in {self.path}: {exc}") from exc


class DirectoryTokenSink:
    """Writes each artifact as a UTF-8 file under out_dir."""

    def __init__(self, out_dir: Path):
        self.out_dir = out_dir
        self.written: list[Path] = []

    def write(self, name: str, content: str) -> Path:
        self.out_dir.mkdir(parents=True, exist_ok=True)
        target = self.out_dir / name
        with open(target, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        self.written.append(target)
        return target
