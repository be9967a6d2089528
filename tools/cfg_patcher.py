#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import re
import sys
from pathlib import Path

import console_output as out
from encoding_detector import read_text

# --- CONFIGURATION ---
CFG_PREFIXES = ("cc_", "cc_names_")

def token_pattern(before):
    """A reference is the old name following a `key ` run, never a bare or leading token."""
    return re.compile(r"([0-9a-z_]+\s+)" + re.escape(before), re.IGNORECASE)

def replace_lines(text, before, after):
    """Rewrites references line by line, keeping the file's line ending. Returns (text, count)."""
    newline = "\r\n" if "\r\n" in text else "\n"
    regex = token_pattern(before)
    replaced = 0
    lines = []
    for line in re.split(r"\r?\n", text):
        if regex.search(line):
            line = regex.sub(lambda m: m.group(1) + after, line, count=1)
            replaced += 1
        lines.append(line)
    return newline.join(lines), replaced

def patch_cfg(directory, before, after, prefix):
    """
    Renames {prefix}{before}.cfg to {prefix}{after}.cfg and rewrites the
    references inside it. Returns the number of replaced lines, or None when
    the file is absent.
    """
    directory = Path(directory)
    before_cfg = directory / f"{prefix}{before}.cfg"
    after_cfg = directory / f"{prefix}{after}.cfg"
    if not before_cfg.exists():
        out.warn(f"{before_cfg.name} is not found, operation is skipped")
        return None

    text, enc = read_text(before_cfg)
    before_cfg.replace(after_cfg)
    out.info(f"  {before_cfg.name} -> {after_cfg.name} (opened as {enc.name}, confidence: {enc.confidence}%)")

    text, replaced = replace_lines(text, before, after)
    with open(after_cfg, "w", encoding="utf-8", newline="") as f:
        f.write(text)
    out.ok(f"{after_cfg.name} is replaced ({replaced} lines)")
    return replaced

if __name__ == "__main__":
    if len(sys.argv) < 4:
        print("Usage: cfg_patcher.py <model_dir> <old_name> <new_name> [prefix]")
        sys.exit(1)
    prefixes = [sys.argv[4]] if len(sys.argv) > 4 else CFG_PREFIXES
    for p in prefixes:
        patch_cfg(sys.argv[1], sys.argv[2], sys.argv[3], p)
