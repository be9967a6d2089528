#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import os
import sys
from pathlib import Path

import console_output as out

def move_path(directory, before, after):
    """Moves directory/before to directory/after, creating parent folders as needed."""
    directory = Path(directory)
    src = directory / before
    dst = directory / after
    if not src.exists():
        raise FileNotFoundError(f"Cannot move missing path: {src}")
    dst.parent.mkdir(parents=True, exist_ok=True)
    os.replace(src, dst)
    out.ok(f"{before} is renamed to {after}")
    return dst

def prune_empty_dirs(root):
    """Removes empty folders below root, deepest first. The root itself is kept."""
    root = Path(root)
    removed = 0
    for current, dirs, files in os.walk(root, topdown=False):
        path = Path(current)
        if path == root: continue
        if not any(path.iterdir()):
            path.rmdir()
            removed += 1
    if removed:
        out.info(f"  Pruned {removed} empty folders")
    return removed

if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: path_mover.py <root> [before after]")
        sys.exit(1)
    if len(sys.argv) > 3:
        move_path(sys.argv[1], sys.argv[2], sys.argv[3])
    prune_empty_dirs(sys.argv[1])
