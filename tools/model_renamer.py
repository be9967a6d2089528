#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import argparse
import json
import shutil
import subprocess
import sys
from pathlib import Path

import console_output as out
from cfg_patcher import CFG_PREFIXES, patch_cfg
from confirm_prompt import ConsolePrompter
from facerig_installer import install
from icon_labeler import COMPOSITORS, get_compositor, patch_icon
from model_json_patcher import MODEL_EXT, patch_model_json
from path_mover import move_path, prune_empty_dirs
from rename_job import ConfigError, OperationCanceled, RenameJob, RenameReport

# FaceRig Model Renamer
# Copies a model folder under a new name and rewrites every reference to the old one.

def prepare_dest(job, prompter):
    dest = Path(job.dest)
    if not dest.exists(): return
    if not job.force and not prompter.confirm(f"{dest} already exists, remove it and continue operation?"):
        raise OperationCanceled("Operation is canceled")
    if dest.is_dir():
        shutil.rmtree(dest)
    else:
        dest.unlink()
    out.info(f"  {dest} is deleted")

def run_rename(job, prompter=None):
    """
    Runs the whole pipeline for one job. Nothing is rolled back on failure:
    dest may be left half patched, source is only removed after success.
    """
    if prompter is None: prompter = ConsolePrompter()
    job.validate()
    compositor = get_compositor(job.compositor) if job.icon_label else None

    source, dest = Path(job.source), Path(job.dest)
    before, after = job.old_name, job.new_name
    report = RenameReport(before, after)
    out.banner(f"🔁 [Model Renamer] {before} -> {after}")

    prepare_dest(job, prompter)
    out.info(f"  Copying {source} to {dest}")
    shutil.copytree(source, dest)

    affected = patch_model_json(dest, before, after, MODEL_EXT)
    report.json_values = len(affected)
    seen = set()
    for item in affected:
        # The same file may be referenced more than once
        if item.before in seen: continue
        seen.add(item.before)
        move_path(dest, item.before, item.after)
        report.moved.append((item.before, item.after))

    for prefix in CFG_PREFIXES:
        report.cfg_lines[prefix] = patch_cfg(dest, before, after, prefix)
    report.icon_label = patch_icon(dest, before, after, job.icon_label, compositor)
    report.pruned = prune_empty_dirs(dest)

    if job.delete_source:
        shutil.rmtree(source)
        report.source_deleted = True
        out.info(f"  {source} is deleted")
    if job.install:
        report.installed_to = install(dest, job.force, prompter)

    out.info(f"\n✨ Rename complete: {dest}")
    return report

def build_parser():
    parser = argparse.ArgumentParser(description="FaceRig Model Renamer: copy a model folder under a new name")
    parser.add_argument("-s", "--src", "--source", dest="source", help="Source model directory")
    parser.add_argument("-d", "--dest", "--destination", dest="dest", help="Destination model directory")
    parser.add_argument("-N", "--no-dupl", "--no-duplication", dest="delete_source", action="store_true",
                        help="Delete the source after a successful rename")
    parser.add_argument("-f", "--force", action="store_true", help="Overwrite without asking")
    parser.add_argument("-i", "--icon-label", action="store_true", help="Stamp the new name's suffix onto the icon")
    parser.add_argument("-I", "--install", action="store_true", help="Copy the result into FaceRig (Windows only)")
    parser.add_argument("--compositor", choices=sorted(COMPOSITORS), default="magick",
                        help="Icon label renderer (default: magick)")
    return parser

def job_from_args(args):
    return RenameJob(
        source=Path(args.source) if args.source else None,
        dest=Path(args.dest) if args.dest else None,
        force=args.force,
        delete_source=args.delete_source,
        icon_label=args.icon_label,
        install=args.install,
        compositor=args.compositor,
    )

def main(argv=None, prompter=None):
    args = build_parser().parse_args(argv)
    try:
        run_rename(job_from_args(args), prompter)
    except ConfigError as e:
        out.fail(e)
        return 2
    except OperationCanceled as e:
        out.fail(e)
        return 1
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or b"").decode(errors="replace").strip()
        out.fail(f"Image tool failed ({' '.join(map(str, e.cmd))}): {detail}")
        return 1
    except json.JSONDecodeError as e:
        out.fail(f"Invalid model descriptor: {e}")
        return 1
    except UnicodeDecodeError as e:
        out.fail(f"Could not decode model file: {e}")
        return 1
    except OSError as e:
        out.fail(e)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
