#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import sys
from dataclasses import dataclass
from pathlib import Path

import chardet

import console_output as out

# --- CONFIGURATION ---
FALLBACK_ENCODING = "utf-8"
UTF8_NAMES = ("utf-8", "utf-8-sig")
LOW_CONFIDENCE = 80  # percent; below this the guess is reported

@dataclass(frozen=True)
class EncodingGuess:
    name: str
    confidence: int  # 0-100

def detect_encodings(path):
    """
    Returns candidate encodings for a file, most likely first.
    Raises OSError if the file cannot be read.
    """
    raw = Path(path).read_bytes()
    guesses = []
    for result in chardet.detect_all(raw):
        if not result.get("encoding"): continue
        guesses.append(EncodingGuess(result["encoding"].lower(), round(result["confidence"] * 100)))
    if not guesses:
        # Empty or undecidable content
        guesses.append(EncodingGuess(FALLBACK_ENCODING, 0))
    guesses.sort(key=lambda g: g.confidence, reverse=True)
    if not raw.isascii() and guesses[0].name not in UTF8_NAMES and is_utf8(raw):
        # Short non-ASCII text that decodes cleanly is far more likely UTF-8
        guesses = [EncodingGuess("utf-8", max(99, guesses[0].confidence))] + [g for g in guesses if g.name not in UTF8_NAMES]
    return guesses

def is_utf8(raw):
    try:
        raw.decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True

def best_encoding(path):
    return detect_encodings(path)[0]

def read_text(path):
    """Decodes a file with its best guessed encoding. Returns (text, guess)."""
    guess = best_encoding(path)
    if guess.confidence < LOW_CONFIDENCE and guess.name != FALLBACK_ENCODING:
        out.warn(f"{Path(path).name}: encoding guessed as {guess.name} with only {guess.confidence}% confidence, "
                 "check the rewritten text (it is saved as UTF-8)")
    return Path(path).read_bytes().decode(guess.name), guess

if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: encoding_detector.py <file> [file...]")
        sys.exit(1)
    for f in sys.argv[1:]:
        for g in detect_encodings(f):
            print(f"{f}: {g.name} ({g.confidence}%)")
