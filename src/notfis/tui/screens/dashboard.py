from __future__ import annotations

import logging

from textual import work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.events import Key
from textual.screen import Screen
from textual.widgets import Button, DataTable, Footer, Label, Static

from notfis.models.invoice import Invoice
from notfis.services.reading import EMPTY_RESULT_MESSAGE, NotfisResult, Totals
from notfis.utils.formatters import format_brl, format_date_br, format_number

logger = logging.getLogger(__name__)


class DashboardScreen(Screen):
    """Main screen: file totals and the invoice table."""

    BINDINGS = [
        Binding("o", "open_file", "Abrir"),
        Binding("r", "history", "Recentes"),
        Binding("d", "detail", "Detalhes", show=False),
        Binding("h", "help", "Ajuda"),
        Binding("q", "quit", "Sair"),
    ]

    def __init__(self, path: str | None = None) -> None:
        super().__init__()
        self._initial_path = path
        self._result: NotfisResult | None = None

    def compose(self) -> ComposeResult:
        with Horizontal(id="top-bar"):
            yield Static("Leitor NOTFIS 3.0A", id="app-title")
            yield Static("Nenhum arquivo carregado", id="file-info")

        with Horizontal(id="info-bar"):
            with Vertical(id="card-notas", classes="info-card"):
                yield Label("Total Notas", classes="card-title")
                yield Label("0", id="total-notas", classes="card-value")
            with Vertical(id="card-cubagem", classes="info-card"):
                yield Label("Cubagem (m³)", classes="card-title")
                yield Label(format_number(0, 3), id="total-cubagem", classes="card-value")
            with Vertical(id="card-valor", classes="info-card"):
                yield Label("Valor da Carga", classes="card-title")
                yield Label(format_brl(0), id="total-valor", classes="card-value")

        with Horizontal(id="action-bar"):
            yield Button(
                "+ Abrir arquivo",
                id="btn-open",
                variant="primary",
                tooltip="Abrir arquivo NOTFIS .txt (o)",
            )
            yield Button(
                "↺ Recentes",
                id="btn-history",
                tooltip="Arquivos lidos anteriormente (r)",
            )
            yield Button(
                "▶ Detalhes",
                id="btn-detail",
                tooltip="Embarcadora, destinatário e chave da nota selecionada (enter)",
            )

        yield Static("", id="error-banner")
        yield Static("Detalhamento das Notas (Registro 313)", id="section-title")
        yield DataTable(id="invoice-table", cursor_type="row")
        yield Static(
            "Nenhum arquivo carregado.\n"
            "Pressione [bold]o[/bold] para abrir um arquivo NOTFIS "
            "ou [bold]r[/bold] para ver os arquivos recentes.",
            id="empty-state",
        )
        yield Footer()

    def on_mount(self) -> None:
        self._populate_table([])
        self.query_one("#invoice-table", DataTable).focus()
        if self._initial_path:
            self.load_file(self._initial_path)

    def on_key(self, event: Key) -> None:
        table = self.query_one("#invoice-table", DataTable)
        match event.key:
            case "j":
                table.action_cursor_down()
            case "k":
                table.action_cursor_up()
            case _:
                return
        event.prevent_default()
        event.stop()

    # --- Loading (threaded) ---

    def load_file(self, path: str) -> None:
        self.notify("Lendo arquivo…", severity="information", timeout=2)
        self._read_file(path)

    @work(thread=True, exclusive=True)
    def _read_file(self, path: str) -> None:
        from notfis.config import load_settings
        from notfis.services.exceptions import NotfisReadError
        from notfis.services.reading import read_notfis
        from notfis.utils.history import add_entry

        try:
            settings = load_settings()
            result = read_notfis(path, settings)
        except NotfisReadError as e:
            self.app.call_from_thread(self._show_error, str(e))
            return
        except Exception as e:
            logger.warning("Failed to process %s", path, exc_info=True)
            self.app.call_from_thread(self._show_error, f"Erro no processamento: {e}")
            return

        if not result.is_empty:
            try:
                add_entry(result, limit=settings.history_limit)
            except Exception:
                logger.warning("Failed to record file in history", exc_info=True)

        self.app.call_from_thread(self._show_result, result)

    def _show_result(self, result: NotfisResult) -> None:
        self._result = result
        self._update_totals(result.totals)
        self._populate_table(result.invoices)

        if result.is_empty:
            self.query_one("#file-info", Static).update("Nenhum arquivo carregado")
            self._set_banner(EMPTY_RESULT_MESSAGE)
            self.notify(EMPTY_RESULT_MESSAGE, severity="warning", timeout=5)
            return

        self.query_one("#file-info", Static).update(
            f"Arquivo: [bold]{result.file_name}[/bold]  [green]✓ Processamento concluído[/green]"
        )
        self._set_banner("")
        self.notify(f"{result.totals.total_notas} nota(s) fiscal(is) encontrada(s)", timeout=3)

    def _show_error(self, msg: str) -> None:
        self._result = None
        self._update_totals(Totals())
        self._populate_table([])
        self.query_one("#file-info", Static).update("Nenhum arquivo carregado")
        self._set_banner(msg)
        self.notify(msg, severity="error", timeout=5)

    # --- Rendering ---

    def _set_banner(self, text: str) -> None:
        banner = self.query_one("#error-banner", Static)
        banner.update(text)
        banner.set_class(bool(text), "visible")

    def _update_totals(self, totals: Totals) -> None:
        self.query_one("#total-notas", Label).update(str(totals.total_notas))
        self.query_one("#total-cubagem", Label).update(format_number(totals.total_cubagem, 3))
        self.query_one("#total-valor", Label).update(format_brl(totals.total_valor))

    def _populate_table(self, invoices: list[Invoice]) -> None:
        table = self.query_one("#invoice-table", DataTable)
        table.clear(columns=True)
        table.add_columns(
            "NF / Série",
            "Emissão",
            "Destinatário",
            "Cidade - UF",
            "Vol.",
            "Peso (kg)",
            "Cub. (m³)",
            "Valor",
        )

        for index, nota in enumerate(invoices):
            table.add_row(
                f"{nota.numero_nf} / {nota.serie}",
                format_date_br(nota.data_emissao),
                nota.consignee.razao_social,
                f"{nota.consignee.cidade} - {nota.consignee.estado}",
                format_number(nota.qtde_volumes, 0),
                format_number(nota.peso_total, 2),
                format_number(nota.cubagem, 3),
                format_brl(nota.valor_total),
                key=str(index),
            )

        has_rows = table.row_count > 0
        table.display = has_rows
        self.query_one("#empty-state", Static).display = not has_rows

    def _selected_invoice(self) -> Invoice | None:
        """Return the invoice on the highlighted row, or None if the table is empty."""
        table = self.query_one("#invoice-table", DataTable)
        if self._result is None or table.row_count == 0:
            return None
        row_key, _ = table.coordinate_to_cell_key(table.cursor_coordinate)
        return self._result.invoices[int(row_key.value)]

    # --- Event handlers ---

    def on_button_pressed(self, event: Button.Pressed) -> None:
        match event.button.id:
            case "btn-open":
                self.action_open_file()
            case "btn-history":
                self.action_history()
            case "btn-detail":
                self.action_detail()

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        self.action_detail()

    def _on_file_chosen(self, path: str | None) -> None:
        if path:
            self.load_file(path)

    # --- Actions ---

    def action_open_file(self) -> None:
        from notfis.tui.screens.open_file import OpenFileScreen

        current = self._result.path if self._result else ""
        self.app.push_screen(OpenFileScreen(path=current), callback=self._on_file_chosen)

    def action_history(self) -> None:
        from notfis.tui.screens.history import HistoryScreen

        self.app.push_screen(HistoryScreen(), callback=self._on_file_chosen)

    def action_detail(self) -> None:
        invoice = self._selected_invoice()
        if invoice is None:
            self.notify("Nenhuma nota selecionada", severity="warning", timeout=3)
            return
        from notfis.tui.screens.detail import InvoiceDetailScreen

        self.app.push_screen(InvoiceDetailScreen(invoice))

    def action_help(self) -> None:
        from notfis.tui.screens.help import HelpScreen

        self.app.push_screen(HelpScreen())

    def action_quit(self) -> None:
        self.app.exit()
