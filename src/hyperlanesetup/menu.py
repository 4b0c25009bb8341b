"""Interactive main menu for Hyperlane Validator Setup."""

import enum
import logging

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .errors import SetupError

logger = logging.getLogger("hyperlanesetup")

BANNER = "WibuCrypto"
WELCOME = "Welcome to WibuCrypto Validator Setup!"
CHANNEL = "Find us in telegram channel: https://t.me/wibuairdrop142"
BANNER_FONT = "smblock"
OPTIONS = (
    ("1", "Complete All Steps Automatically"),
    ("2", "View Runtime Logs"),
    ("0", "Exit"),
)


class MenuState(enum.Enum):
    MENU = "menu"
    RUNNING = "running"
    EXITED = "exited"


class MenuController:
    """Finite-state menu loop. At most one action runs at a time."""

    def __init__(self, app, prompter, console: Console, runner=None):
        self.app = app
        self.runner = runner
        self.prompter = prompter
        self.console = console
        self.state = MenuState.MENU
        self.actions = {
            "1": self.app.install_all,
            "2": self.app.view_logs,
        }

    def render(self):
        self.console.clear()
        self.console.print(self.banner())
        self.console.print()
        self.console.print(WELCOME)
        self.console.print(CHANNEL)
        self.console.print()
        self.console.print("Please Select an Option:")
        for key, label in OPTIONS:
            self.console.print(f"{key}) {label}")
        self.console.print()

    def banner(self):
        """Draws the banner with toilet when installed, else a rich panel."""
        if self.runner is not None and self.runner.which("toilet"):
            result = self.runner.run(
                ["toilet", "-f", BANNER_FONT, BANNER],
                check=False,
                capture_output=True,
            )
            if result.returncode == 0 and (result.stdout or "").strip():
                return Text(result.stdout.rstrip("\n"))
        return Panel.fit(f"[bold cyan]{BANNER}[/bold cyan]")

    def run(self) -> int:
        while True:
            self.state = MenuState.MENU
            self.render()
            choice = self.prompter.ask("Enter your choice").strip()

            if choice == "0":
                self.state = MenuState.EXITED
                return 0

            action = self.actions.get(choice)
            if action is None:
                self.console.print("[red]Invalid option, please try again![/red]")
                logger.error("Invalid option, please try again!")
                continue

            self.state = MenuState.RUNNING
            try:
                action()
            except KeyboardInterrupt:
                if choice != "2":
                    raise
                self.console.print()
                logger.info("Stopped viewing logs.")
            except SetupError as exc:
                self.console.print(f"[bold red]Error:[/bold red] {exc}")
                logger.error("Error: %s", exc)
                self.state = MenuState.EXITED
                return 1
