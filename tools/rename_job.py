#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from dataclasses import dataclass, field
from pathlib import Path

class RenameError(Exception):
    """Base class for failures the renamer reports itself."""

class ConfigError(RenameError):
    pass

class OperationCanceled(RenameError):
    pass

@dataclass(frozen=True)
class RenameJob:
    source: Path
    dest: Path
    force: bool = False
    delete_source: bool = False
    icon_label: bool = False
    install: bool = False
    compositor: str = "magick"

    @property
    def old_name(self):
        return Path(self.source).name

    @property
    def new_name(self):
        return Path(self.dest).name

    def validate(self):
        if not self.source:
            raise ConfigError("--src option is mandatory")
        if not self.dest:
            raise ConfigError("--dest option is mandatory")
        source = Path(self.source)
        if not source.exists():
            raise ConfigError(f"Path not found: {source}")
        if not source.is_dir():
            raise ConfigError(f"Is not directory: {source}")
        src_abs = source.resolve()
        dest_abs = Path(self.dest).resolve()
        if dest_abs == src_abs or src_abs in dest_abs.parents:
            raise ConfigError(f"Destination must be outside the source: {self.dest}")
        if dest_abs in src_abs.parents:
            raise ConfigError(f"Destination must not contain the source: {self.dest}")

@dataclass
class RenameReport:
    old_name: str
    new_name: str
    json_values: int = 0
    moved: list = field(default_factory=list)
    cfg_lines: dict = field(default_factory=dict)
    icon_label: str = None
    pruned: int = 0
    source_deleted: bool = False
    installed_to: Path = None
