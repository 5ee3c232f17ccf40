from __future__ import annotations

from textual.app import App
from textual.binding import Binding


class NotfisApp(App):
    """Leitor NOTFIS 3.0A TUI application."""

    CSS_PATH = "app.tcss"
    TITLE = "Leitor NOTFIS 3.0A"
    ENABLE_COMMAND_PALETTE = False

    BINDINGS = [
        Binding("q", "quit", "Sair", priority=True),
    ]

    def __init__(self, path: str | None = None):
        super().__init__()
        self.initial_path = path

    def on_mount(self) -> None:
        from notfis.tui.screens.dashboard import DashboardScreen

        self.push_screen(DashboardScreen(path=self.initial_path))
