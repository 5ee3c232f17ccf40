from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, RichLog, Static


class HelpScreen(ModalScreen):
    """Keyboard shortcuts and a short description of the NOTFIS layout."""

    BINDINGS = [
        Binding("escape", "go_back", "Voltar"),
    ]

    def compose(self) -> ComposeResult:
        with Vertical(id="modal-dialog"):
            with Horizontal(id="modal-title-bar"):
                yield Static("Ajuda", id="header-bar")
                yield Button("✕", id="btn-modal-close")
            yield RichLog(id="help-content", wrap=True, markup=True)
            with Horizontal(classes="button-bar"):
                yield Button("✕ Fechar", id="btn-voltar")

    def on_mount(self) -> None:
        log = self.query_one("#help-content", RichLog)

        log.write("[bold]Leitor NOTFIS 3.0A[/bold]")
        log.write("")
        log.write(
            "Lê arquivos NOTFIS 3.0A (notas fiscais enviadas pela embarcadora à "
            "transportadora), corrige linhas quebradas e lista as notas com os "
            "totais de cubagem e valor da carga."
        )
        log.write("")

        log.write("[bold]Atalhos de teclado[/bold]")
        log.write("")
        log.write("  [bold cyan]o[/bold cyan]  Abrir              Abrir arquivo NOTFIS")
        log.write("  [bold cyan]r[/bold cyan]  Recentes           Arquivos lidos anteriormente")
        log.write("  [bold cyan]h[/bold cyan]  Ajuda              Esta tela")
        log.write("  [bold cyan]q[/bold cyan]  Sair               Encerrar aplicação")
        log.write("")
        log.write("[bold]Navegação na tabela[/bold]")
        log.write("")
        log.write("  [bold cyan]j / ↓[/bold cyan]  Próxima linha")
        log.write("  [bold cyan]k / ↑[/bold cyan]  Linha anterior")
        log.write("  [bold cyan]enter[/bold cyan]   Detalhes da nota selecionada")
        log.write("")

        log.write("[bold]Registros lidos[/bold]")
        log.write("")
        log.write("  [bold]311[/bold]  Embarcadora (CNPJ e razão social)")
        log.write("  [bold]312[/bold]  Destinatário (razão social, CNPJ/CPF, cidade, UF)")
        log.write("  [bold]313[/bold]  Nota fiscal (série, número, emissão, volumes, valor, peso, cubagem, chave)")
        log.write("")
        log.write(
            "Cada nota 313 usa a última embarcadora e o último destinatário lidos. "
            "Notas sem embarcadora ou destinatário, ou com menos de 120 caracteres, "
            "são ignoradas."
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id in ("btn-voltar", "btn-modal-close"):
            self.app.pop_screen()

    def action_go_back(self) -> None:
        self.app.pop_screen()
