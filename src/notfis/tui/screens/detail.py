from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, RichLog, Static

from notfis.models.invoice import Invoice
from notfis.utils.formatters import format_brl, format_cnpj_cpf, format_date_br, format_number


class InvoiceDetailScreen(ModalScreen):
    """Full data of one invoice: embarcadora, destinatário and chave de acesso."""

    BINDINGS = [
        Binding("escape", "go_back", "Voltar"),
        Binding("q", "go_back", show=False),
    ]

    def __init__(self, invoice: Invoice) -> None:
        super().__init__()
        self._invoice = invoice

    def compose(self) -> ComposeResult:
        nota = self._invoice
        with Vertical(id="modal-dialog"):
            with Horizontal(id="modal-title-bar"):
                yield Static(f"NF {nota.numero_nf} / {nota.serie}", id="header-bar")
                yield Button("✕", id="btn-modal-close")
            yield RichLog(id="detail-content", wrap=True, markup=True)
            with Horizontal(classes="button-bar"):
                yield Button("✕ Fechar", id="btn-voltar")

    def on_mount(self) -> None:
        nota = self._invoice
        log = self.query_one("#detail-content", RichLog)

        log.write("[bold]Nota fiscal[/bold]")
        log.write(f"  Número:   {nota.numero_nf}")
        log.write(f"  Série:    {nota.serie}")
        log.write(f"  Emissão:  {format_date_br(nota.data_emissao)}")
        log.write(f"  Volumes:  {format_number(nota.qtde_volumes, 0)}")
        log.write(f"  Peso:     {format_number(nota.peso_total, 2)} kg")
        log.write(f"  Cubagem:  {format_number(nota.cubagem, 3)} m³")
        log.write(f"  Valor:    {format_brl(nota.valor_total)}")
        log.write("")

        log.write("[bold]Embarcadora[/bold]")
        log.write(f"  {nota.shipper.razao_social}")
        log.write(f"  CNPJ: {format_cnpj_cpf(nota.shipper.cnpj)}")
        log.write("")

        log.write("[bold]Destinatário[/bold]")
        log.write(f"  {nota.consignee.razao_social}")
        log.write(f"  CNPJ/CPF: {format_cnpj_cpf(nota.consignee.cnpj_cpf)}")
        log.write(f"  {nota.consignee.cidade} - {nota.consignee.estado}")
        log.write("")

        log.write("[bold]Chave de acesso[/bold]")
        log.write(f"  {nota.chave_acesso or '[dim]não informada[/dim]'}")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id in ("btn-voltar", "btn-modal-close"):
            self.app.pop_screen()

    def action_go_back(self) -> None:
        self.app.pop_screen()
