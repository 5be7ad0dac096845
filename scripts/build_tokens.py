#!/usr/bin/env python3
"""
Build the Altrex design-token artifacts.

Reads assets/design/tokens.json (or tokens.yaml) and writes
dist/tokens.css, dist/tokens.js, dist/tokens.styl, dist/tokens.d.ts
and dist/index.js.

Usage: python3 scripts/build_tokens.py
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from token_emit import render_all
from token_errors import TokenBuildError
from token_flatten import flatten
from token_io import DirectoryTokenSink, FileTokenSource, find_source

ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT / 'assets/design'
DIST_DIR = ROOT / 'dist'


def log_info(message: str) -> None:
    print(f"[tokens] {message}")


def log_warn(message: str) -> None:
    print(f"[tokens] warning: {message}", file=sys.stderr)


def log_error(message: str) -> None:
    print(f"[tokens] error: {message}", file=sys.stderr)


def build(src_dir: Path | None = None, out_dir: Path | None = None) -> list[Path]:
    source = FileTokenSource(find_source(src_dir or SRC_DIR))
    tree = source.load()
    # All artifacts render before the first write.
    artifacts = render_all(tree)
    count = len(flatten(tree))
    if not count:
        log_warn(f"{source.path} defines no tokens")

    sink = DirectoryTokenSink(out_dir or DIST_DIR)
    for artifact in artifacts:
        sink.write(artifact.name, artifact.content)

    log_info(f"generated {count} design tokens from {source.path}")
    for path in sink.written:
        log_info(f"  -> {path}")
    return sink.written


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.parse_args(argv)
    try:
        build()
    except (TokenBuildError, OSError) as exc:
        log_error(str(exc))
        return 1
    log_info("build complete")
    return 0


if __name__ == '__main__':
    raise SystemExit(main(sys.argv[1:]))
