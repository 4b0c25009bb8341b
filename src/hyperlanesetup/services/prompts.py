"""Operator input sources."""

from rich.console import Console
from rich.prompt import Confirm, Prompt


class Prompter:
    """Interface for interactive input. Tests substitute scripted answers."""

    def ask(self, text: str, password: bool = False) -> str:
        raise NotImplementedError

    def confirm(self, text: str) -> bool:
        raise NotImplementedError


class RichPrompter(Prompter):
    def __init__(self, console: Console):
        self.console = console

    def ask(self, text: str, password: bool = False) -> str:
        return Prompt.ask(text, password=password, console=self.console, default="", show_default=False)

    def confirm(self, text: str) -> bool:
        return Confirm.ask(text, console=self.console, default=False)
