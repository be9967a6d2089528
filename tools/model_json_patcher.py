#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import json
import re
import sys
from dataclasses import dataclass
from pathlib import Path

import console_output as out
from encoding_detector import read_text

# --- CONFIGURATION ---
MODEL_EXT = ".model3.json"

@dataclass(frozen=True)
class AffectedItem:
    before: str
    after: str

def iter_leaves(node, path=()):
    """Yields (key_path, value) for every leaf of a nested dict/list tree."""
    if isinstance(node, dict):
        items = node.items()
    elif isinstance(node, list):
        items = enumerate(node)
    else:
        yield path, node
        return
    for key, child in items:
        yield from iter_leaves(child, path + (key,))

def set_leaf(root, path, value):
    node = root
    for key in path[:-1]:
        node = node[key]
    node[path[-1]] = value

def rewrite_values(doc, before, after):
    """
    Rewrites string leaves of the form "<before>.<rest>" in place.
    Returns the list of AffectedItem in document order.
    """
    regex = re.compile("^" + re.escape(before) + r"\.")
    affected = []
    # A bare string document has no key path to write back to
    if isinstance(doc, str): return affected
    for path, value in list(iter_leaves(doc)):
        if not isinstance(value, str) or not regex.search(value): continue
        replaced = regex.sub(lambda m: after + ".", value, count=1)
        set_leaf(doc, path, replaced)
        affected.append(AffectedItem(value, replaced))
    return affected

def patch_model_json(directory, before, after, ext=MODEL_EXT):
    """
    Renames {before}{ext} to {after}{ext} and rewrites the file references
    it holds. Returns the affected items so the referenced files can be moved.
    """
    directory = Path(directory)
    before_json = directory / f"{before}{ext}"
    after_json = directory / f"{after}{ext}"
    if not before_json.exists():
        out.warn(f"{before_json.name} is not found, operation is skipped")
        return []

    text, enc = read_text(before_json)
    before_json.replace(after_json)
    out.info(f"  {before_json.name} -> {after_json.name} (opened as {enc.name}, confidence: {enc.confidence}%)")

    doc = json.loads(text)
    affected = rewrite_values(doc, before, after)
    with open(after_json, "w", encoding="utf-8", newline="") as f:
        f.write(json.dumps(doc, indent=2, ensure_ascii=False))
    out.ok(f"{after_json.name} is replaced ({len(affected)} string values)")
    return affected

if __name__ == "__main__":
    if len(sys.argv) < 4:
        print("Usage: model_json_patcher.py <model_dir> <old_name> <new_name>")
        sys.exit(1)
    for item in patch_model_json(sys.argv[1], sys.argv[2], sys.argv[3]):
        print(f"  {item.before} -> {item.after}")
