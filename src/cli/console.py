import json
from typing import Any

import typer
import yaml

# ANSI colors
RESET = "\033[0m"
BOLD = "\033[1m"

CYAN = "\033[36m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
MAGENTA = "\033[35m"
BLUE = "\033[34m"
RED = "\033[31m"
GREY = "\033[90m"

RULE = GREY + "─────────────────────────────────────────────" + RESET


def echo_structured(data: Any, output: str) -> bool:
    """
    Emite `data` em json/yaml. Retorna False quando o output é texto e
    quem chamou precisa imprimir a versão colorida.
    """
    if output == "json":
        typer.echo(json.dumps(data, indent=2, ensure_ascii=False))
        return True

    if output == "yaml":
        typer.echo(yaml.safe_dump(data, sort_keys=False, allow_unicode=True))
        return True

    return False


def fail(title: str, error: Exception, output: str) -> None:
    """
    Fronteira de erro do CLI: reporta o erro no formato pedido e sai com código 1.
    """
    if not echo_structured({"error": str(error)}, output):
        typer.echo()
        typer.echo(RULE)
        typer.echo(f"{RED}{BOLD}{title}{RESET}")
        typer.echo(RULE)
        typer.echo(f"{MAGENTA}Detalhes:{RESET}")
        typer.echo(f"  {error}")
        typer.echo(RULE)
        typer.echo()

    raise typer.Exit(code=1)
