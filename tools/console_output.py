#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from rich.console import Console
from rich.markup import escape

# Shared terminal output for the renamer tools.
# Messages are escaped: model paths may contain [brackets].
console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

def info(msg):
    console.print(escape(str(msg)))

def ok(msg):
    console.print(f"  ✅ {escape(str(msg))}")

def warn(msg):
    console.print(f"  [bold yellow]⚠️  {escape(str(msg))}[/]")

def fail(msg):
    err_console.print(f"[bold red]❌ {escape(str(msg))}[/]")

def banner(title):
    console.print(f"\n[bold blue]{escape(str(title))}[/]")
    console.print(" ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━")
