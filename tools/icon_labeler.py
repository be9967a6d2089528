#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import re
import shutil
import subprocess
import sys
import tempfile
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

import console_output as out
from rename_job import ConfigError

# --- CONFIGURATION ---
ICON_TEMPLATE = "ico_{}.png"
LABEL_POINTSIZE = 32
LABEL_PADDING = 8       # px on every side of the text
LABEL_OFFSET_Y = 8      # px above the bottom edge
BACKGROUND_BLEND = 50   # percent
LABEL_FONTS = ["Courier New", "cour.ttf", "DejaVuSansMono.ttf", "LiberationMono-Regular.ttf"]

def extract_label(name):
    """The trailing alphanumeric run of a model name, e.g. 'hiyori_v2' -> 'v2'."""
    return re.search(r"[A-Za-z0-9]*$", name).group(0)

class LabelCompositor:
    """Stamps a short text label onto the bottom-left corner of an icon, in place."""

    def apply(self, icon_path, label):
        raise NotImplementedError

class MagickCompositor(LabelCompositor):
    """Renders the label through the ImageMagick CLI. Any failed call raises CalledProcessError."""

    def __init__(self, binary="magick"):
        self.binary = binary

    def run(self, args):
        subprocess.run([self.binary] + args, capture_output=True, check=True)

    def apply(self, icon_path, label):
        icon_path = Path(icon_path)
        padding = f"{LABEL_PADDING}x{LABEL_PADDING}"
        geometry = f"+0+{LABEL_OFFSET_Y}"
        with tempfile.TemporaryDirectory(prefix="facerig_ico_") as tmpdir:
            tmp = Path(tmpdir)
            lbl, bkg = tmp / "lbl.png", tmp / "bkg.png"
            cmp1, cmp2 = tmp / "cmp1.png", tmp / "cmp2.png"
            # A. White label on transparent, padded on all sides
            self.run(["-background", "transparent", "-fill", "white", "-family", "Courier New",
                      "-pointsize", str(LABEL_POINTSIZE), f"label:{label}",
                      "-gravity", "southeast", "-splice", padding,
                      "-gravity", "northwest", "-splice", padding, str(lbl)])
            # B. Solid black plate of the same size
            self.run([str(lbl), "-fill", "black", "-draw", "color 0,0 reset", str(bkg)])
            # C. Half-blend the plate, then D. the label on top
            self.run(["composite", "-gravity", "southwest", "-geometry", geometry,
                      "-blend", str(BACKGROUND_BLEND), str(bkg), str(icon_path), str(cmp1)])
            self.run(["composite", "-gravity", "southwest", "-geometry", geometry,
                      str(lbl), str(cmp1), str(cmp2)])
            shutil.copyfile(cmp2, icon_path)

class PillowCompositor(LabelCompositor):
    """Same geometry as MagickCompositor, drawn in-process with Pillow."""

    def load_font(self):
        for name in LABEL_FONTS:
            try:
                return ImageFont.truetype(name, LABEL_POINTSIZE)
            except OSError:
                continue
        return ImageFont.load_default(size=LABEL_POINTSIZE)

    def render_label(self, label):
        font = self.load_font()
        left, top, right, bottom = font.getbbox(label)
        size = (right - left + 2 * LABEL_PADDING, bottom - top + 2 * LABEL_PADDING)
        mask = Image.new("RGBA", size, (0, 0, 0, 0))
        ImageDraw.Draw(mask).text((LABEL_PADDING - left, LABEL_PADDING - top), label, font=font, fill="white")
        return mask

    def apply(self, icon_path, label):
        with Image.open(icon_path) as img:
            icon = img.convert("RGBA")
        mask = self.render_label(label)
        alpha = round(255 * BACKGROUND_BLEND / 100)
        plate = Image.new("RGBA", mask.size, (0, 0, 0, alpha))
        anchor = (0, icon.height - mask.height - LABEL_OFFSET_Y)

        for overlay in (plate, mask):
            layer = Image.new("RGBA", icon.size, (0, 0, 0, 0))
            layer.paste(overlay, anchor)
            icon = Image.alpha_composite(icon, layer)
        icon.save(icon_path, format="PNG")

COMPOSITORS = {
    "magick": MagickCompositor,
    "pillow": PillowCompositor,
}

def get_compositor(name):
    if name not in COMPOSITORS:
        raise ConfigError(f"Unknown compositor '{name}' (choose from: {', '.join(COMPOSITORS)})")
    return COMPOSITORS[name]()

def patch_icon(directory, before, after, apply_label, compositor=None):
    """
    Renames ico_{before}.png to ico_{after}.png, optionally labelling it first.
    Returns the label that was applied, or None.
    """
    directory = Path(directory)
    before_ico = directory / ICON_TEMPLATE.format(before)
    after_ico = directory / ICON_TEMPLATE.format(after)
    if not before_ico.exists():
        out.warn(f"{before_ico.name} is not found, operation is skipped")
        return None

    applied = None
    label = extract_label(after)
    if apply_label and label:
        if compositor is None: compositor = get_compositor("magick")
        compositor.apply(before_ico, label)
        applied = label
        out.ok(f"{before_ico.name} is labeled: {label}")

    before_ico.replace(after_ico)
    out.ok(f"{before_ico.name} is renamed to {after_ico.name}")
    return applied

if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Stamp a label onto a FaceRig model icon")
    parser.add_argument("icon", help="PNG icon to label in place")
    parser.add_argument("label", help="Text to stamp")
    parser.add_argument("--compositor", choices=sorted(COMPOSITORS), default="magick")
    args = parser.parse_args()
    try:
        get_compositor(args.compositor).apply(args.icon, args.label)
    except (subprocess.CalledProcessError, OSError) as e:
        out.fail(f"Labeling failed: {e}")
        sys.exit(1)
    out.ok(f"{Path(args.icon).name} is labeled: {args.label}")
