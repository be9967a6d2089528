#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from rich.markup import escape
from rich.prompt import Prompt

from console_output import console
from rename_job import OperationCanceled

class Prompter:
    """Asks the user to pick one of a set of single-letter choices."""

    def ask(self, message, choices="yn"):
        raise NotImplementedError

    def confirm(self, message):
        return self.ask(message, "yn") == "y"

class ConsolePrompter(Prompter):
    """Blocks on the terminal until an allowed answer is typed."""

    def ask(self, message, choices="yn"):
        options = list(choices.lower())
        try:
            answer = Prompt.ask(escape(message), choices=options, console=console, case_sensitive=False)
        except (EOFError, KeyboardInterrupt):
            console.print()
            raise OperationCanceled("Operation is canceled")
        return answer.lower()

class ScriptedPrompter(Prompter):
    """Replays canned answers in order; used by tests and non-interactive callers."""

    def __init__(self, answers=()):
        self.answers = list(answers)
        self.asked = []

    def ask(self, message, choices="yn"):
        self.asked.append(message)
        if not self.answers:
            raise OperationCanceled(f"No scripted answer for: {message}")
        return self.answers.pop(0).lower()
