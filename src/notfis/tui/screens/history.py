from __future__ import annotations

from datetime import datetime

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, DataTable, Static

from notfis.utils.formatters import format_brl


class HistoryScreen(ModalScreen[str | None]):
    """Recently read files. Dismisses with the chosen path or None."""

    BINDINGS = [
        Binding("escape", "go_back", "Voltar"),
        Binding("c", "clear", "Limpar", show=False),
    ]

    def compose(self) -> ComposeResult:
        with Vertical(id="modal-dialog"):
            with Horizontal(id="modal-title-bar"):
                yield Static("Arquivos recentes", id="header-bar")
                yield Button("✕", id="btn-modal-close")
            yield DataTable(id="history-table", cursor_type="row")
            yield Static("Nenhum arquivo lido ainda.", id="history-empty")
            with Horizontal(classes="button-bar"):
                yield Button("✕ Fechar", id="btn-voltar")
                yield Button("⌫ Limpar", id="btn-limpar", variant="error")
                yield Button("▶ Abrir", id="btn-abrir", variant="primary")

    def on_mount(self) -> None:
        self._load_entries()
        self.query_one("#history-table", DataTable).focus()

    def _load_entries(self) -> None:
        from notfis.utils.history import list_entries

        table = self.query_one("#history-table", DataTable)
        table.clear(columns=True)
        table.add_columns("Arquivo", "Notas", "Valor", "Lido em", "Caminho")
        for entry in list_entries():
            path = entry.get("path", "")
            table.add_row(
                entry.get("file_name", ""),
                str(entry.get("notas", "")),
                format_brl(entry.get("total_valor") or "0"),
                self._format_read_at(entry.get("read_at", "")),
                path,
                key=path,
            )
        has_rows = table.row_count > 0
        table.display = has_rows
        self.query_one("#history-empty", Static).display = not has_rows

    @staticmethod
    def _format_read_at(value: str) -> str:
        try:
            return datetime.fromisoformat(value).astimezone().strftime("%d/%m/%Y %H:%M")
        except (ValueError, TypeError):
            return value

    def _selected_path(self) -> str | None:
        table = self.query_one("#history-table", DataTable)
        if table.row_count == 0:
            return None
        row_key, _ = table.coordinate_to_cell_key(table.cursor_coordinate)
        return str(row_key.value)

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        self.dismiss(str(event.row_key.value))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        match event.button.id:
            case "btn-abrir":
                path = self._selected_path()
                if path is None:
                    self.notify("Nenhum arquivo selecionado", severity="warning", timeout=3)
                    return
                self.dismiss(path)
            case "btn-limpar":
                self.action_clear()
            case "btn-voltar" | "btn-modal-close":
                self.dismiss(None)

    def action_clear(self) -> None:
        from notfis.tui.screens.confirm import ConfirmScreen

        self.app.push_screen(
            ConfirmScreen("Remover todos os arquivos do histórico?", confirm_label="Limpar"),
            callback=self._on_clear_confirmed,
        )

    def _on_clear_confirmed(self, confirmed: bool | None) -> None:
        if confirmed:
            from notfis.utils.history import clear_history

            clear_history()
            self._load_entries()
            self.notify("Histórico removido", timeout=3)

    def action_go_back(self) -> None:
        self.dismiss(None)
