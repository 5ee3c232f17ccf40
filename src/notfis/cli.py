from __future__ import annotations

import sys
from importlib.resources import files


def _init_config() -> None:
    """Copy the bundled settings template to the user's config directory."""
    from notfis.config import SETTINGS_FILE, get_config_dir, get_data_dir

    config_dir = get_config_dir()
    data_dir = get_data_dir()
    templates = files("notfis") / "templates"

    config_dir.mkdir(parents=True, exist_ok=True)
    data_dir.mkdir(parents=True, exist_ok=True)

    rel = f"{SETTINGS_FILE}.example"
    dest = config_dir / rel
    if dest.exists():
        print(f"  já existe: {dest}")
        copied = False
    else:
        src = templates / rel
        with src.open("rb") as f:
            dest.write_bytes(f.read())
        print(f"  criado: {dest}")
        copied = True

    print()
    print(f"Configuração: {config_dir}")
    print(f"Dados:   {data_dir}")
    print()
    if copied:
        print("Próximos passos:")
        print(f"  1. cp {dest} {config_dir / SETTINGS_FILE}")
        print("  2. Ajuste a codificação e as opções de leitura, se necessário")
        print("  3. Execute: leitor-notfis ARQUIVO.txt")
    else:
        print("Nenhum arquivo novo criado (todos já existiam).")


def _preflight() -> bool:
    """Prepare the data directory and logging before running a command.

    Returns False with a message when the settings file cannot be loaded.
    """
    from notfis.config import get_data_dir, load_settings, setup_logging

    get_data_dir().mkdir(parents=True, exist_ok=True)
    try:
        settings = load_settings()
    except Exception as e:
        print(f"Erro: configuração inválida — {e}")
        print("Verifique o arquivo notfis.yaml ou execute 'leitor-notfis init'.")
        return False
    setup_logging(settings)
    return True


def _print_summary(path: str) -> int:
    """Print totals and one line per invoice. Returns the process exit code."""
    from notfis.config import load_settings
    from notfis.services.exceptions import NotfisReadError
    from notfis.services.reading import EMPTY_RESULT_MESSAGE, read_notfis
    from notfis.utils.formatters import format_brl, format_date_br, format_number

    try:
        result = read_notfis(path, load_settings())
    except NotfisReadError as e:
        print(f"Erro: {e}")
        return 1

    if result.is_empty:
        print(EMPTY_RESULT_MESSAGE)
        return 0

    totals = result.totals
    print(f"Arquivo: {result.file_name}")
    print(f"Total de notas: {totals.total_notas}")
    print(f"Cubagem (m³):   {format_number(totals.total_cubagem, 3)}")
    print(f"Valor da carga: {format_brl(totals.total_valor)}")
    print()
    for nota in result.invoices:
        print(
            f"  NF {nota.numero_nf}/{nota.serie}  {format_date_br(nota.data_emissao)}  "
            f"{nota.consignee.razao_social} ({nota.consignee.cidade} - {nota.consignee.estado})  "
            f"vol {format_number(nota.qtde_volumes, 0)}  "
            f"peso {format_number(nota.peso_total, 2)} kg  "
            f"cub {format_number(nota.cubagem, 3)} m³  "
            f"{format_brl(nota.valor_total)}"
        )
    return 0


def main() -> None:
    """Entry point for the NOTFIS reader CLI/TUI."""
    args = sys.argv[1:]
    if args and args[0] == "init":
        _init_config()
        return

    if not _preflight():
        sys.exit(1)

    if args and args[0] == "resumo":
        if len(args) < 2:
            print("Uso: leitor-notfis resumo ARQUIVO.txt")
            sys.exit(2)
        sys.exit(_print_summary(args[1]))

    from notfis.tui.app import NotfisApp

    app = NotfisApp(path=args[0] if args else None)
    app.run()


if __name__ == "__main__":
    main()
