#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import os
import platform
import shutil
import sys
from pathlib import Path

import console_output as out

# --- CONFIGURATION ---
OBJECTS_SUBPATH = ("Steam", "steamapps", "common", "FaceRig", "Mod", "VP", "PC_CustomData", "Objects")
OBJECTS_ENV = "FACERIG_OBJECTS_DIR"

def is_windows():
    return sys.platform == "win32"

def get_objects_dir():
    """FaceRig's custom objects folder, or None if it cannot be derived."""
    override = os.getenv(OBJECTS_ENV)
    if override: return Path(override)
    var = "ProgramFiles(x86)" if platform.architecture()[0] == "64bit" else "ProgramFiles"
    program_files = os.getenv(var) or os.getenv("ProgramFiles")
    if not program_files: return None
    return Path(program_files).joinpath(*OBJECTS_SUBPATH)

def install(model_dir, force, prompter):
    """
    Copies a renamed model into FaceRig. Returns the install path, or None when
    skipped. Declining the overwrite only skips this step.
    """
    if not is_windows():
        out.warn("--install switch is available only on Windows, operation is skipped")
        return None
    objects_dir = get_objects_dir()
    if objects_dir is None or not objects_dir.is_dir():
        out.warn("FaceRig install directory is not found, operation is skipped")
        return None

    model_dir = Path(model_dir)
    target = objects_dir / model_dir.name
    if target.exists():
        if not force and not prompter.confirm(f"{target} already exists, remove it and continue operation?"):
            out.warn("Install operation is canceled by user")
            return None
        if target.is_dir():
            shutil.rmtree(target)
        else:
            target.unlink()
        out.info(f"  {target} is deleted")

    shutil.copytree(model_dir, target)
    out.ok(f"Installation is completed:\n     => {target}")
    return target
