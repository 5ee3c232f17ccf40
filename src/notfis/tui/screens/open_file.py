from __future__ import annotations

from pathlib import Path

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Static


class OpenFileScreen(ModalScreen[str | None]):
    """Ask for the path of a NOTFIS file. Dismisses with the path or None."""

    BINDINGS = [
        Binding("escape", "go_back", "Voltar"),
    ]

    def __init__(self, path: str = "") -> None:
        super().__init__()
        self._initial_path = path

    def compose(self) -> ComposeResult:
        with Vertical(id="modal-dialog"):
            with Horizontal(id="modal-title-bar"):
                yield Static("Abrir arquivo NOTFIS", id="header-bar")
                yield Button("✕", id="btn-modal-close")
            yield Label("Caminho do arquivo (.txt)", classes="form-label")
            yield Input(
                value=self._initial_path,
                placeholder="/caminho/para/NOTFIS.txt",
                id="path-input",
                tooltip="Arquivo NOTFIS 3.0A em ISO-8859-1",
            )
            yield Label("", id="error-label")
            with Horizontal(classes="button-bar"):
                yield Button("✕ Cancelar", id="btn-voltar", variant="error")
                yield Button("▶ Abrir", id="btn-abrir", variant="primary")

    def on_mount(self) -> None:
        self.query_one("#path-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        match event.button.id:
            case "btn-abrir":
                self._submit()
            case "btn-voltar" | "btn-modal-close":
                self.dismiss(None)

    def _submit(self) -> None:
        raw = self.query_one("#path-input", Input).value.strip()
        error = self.query_one("#error-label", Label)
        if not raw:
            error.update("Informe o caminho do arquivo")
            return
        path = Path(raw).expanduser()
        if not path.is_file():
            error.update(f"Arquivo não encontrado: {raw}")
            return
        self.dismiss(str(path))

    def action_go_back(self) -> None:
        self.dismiss(None)
