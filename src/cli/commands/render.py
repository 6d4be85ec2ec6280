import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
import typer_di
import yaml
from jinja2 import TemplateError

from core.arn_ctx import Ctx
from core.engine.mint_engine import mint_arns
from core.models import MintResult

from ..console import BOLD, CYAN, GREY, RESET, RULE, echo_structured, fail
from ..params import ctx_params, output_params


def _load_overrides(json_str: Optional[str], sets: List[str]) -> Dict[str, Any]:
    """
    Carrega overrides a partir de JSON inline e de pares KEY=VALUE (--set ganha).
    """
    data: Dict[str, Any] = {}
    if json_str is not None:
        try:
            loaded = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise typer.BadParameter(f"Invalid JSON: {e}", param_hint="--overrides")
        if not isinstance(loaded, dict):
            raise typer.BadParameter("Expected a JSON object.", param_hint="--overrides")
        data.update(loaded)

    for item in sets:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Esperado KEY=VALUE, recebido: {item!r}", param_hint="--set")
        data[key] = value
    return data


def _print_results(results: List[MintResult], ctx: Ctx, output: str) -> None:
    if echo_structured([r.to_dict() for r in results], output):
        return

    width = max((len(r.service) for r in results), default=0)

    typer.echo()
    typer.echo(RULE)
    typer.echo(
        f"{CYAN}{BOLD}CONTEXT:{RESET} partition={ctx.partition or '-'} "
        f"region={ctx.region or '-'} account={ctx.account or '-'}"
    )
    typer.echo(RULE)
    if not results:
        typer.echo(GREY + "  (no arns)" + RESET)
    for r in results:
        typer.echo(f"  {GREY}{r.service:<{width}}{RESET}  {r.arn}")
    typer.echo(RULE)
    typer.echo()


def render(
    template: Path = typer.Option(
        ...,
        "--template",
        "-t",
        help="Path to template YAML/JSON file.",
    ),
    json_str: Optional[str] = typer.Option(
        None,
        "--overrides",
        help="Inline JSON overrides.",
    ),
    sets: Optional[List[str]] = typer.Option(
        None,
        "--set",
        help="Override KEY=VALUE. Can be passed multiple times.",
    ),
    ctx: Ctx = typer_di.Depends(ctx_params),
    output: str = typer_di.Depends(output_params),
) -> None:
    """
    Gera em lote os ARNs descritos num template (YAML/JSON + Jinja2).

    Ex:
    arnkit render -t arns.yaml --account 123456789012 --region sa-east-1
    arnkit render -t arns.yaml --discover --set env=prd
    """
    overrides = _load_overrides(json_str, sets or [])

    try:
        results = mint_arns(
            template_path=str(template),
            overrides=overrides,
            ctx=ctx,
        )
    except (TemplateError, yaml.YAMLError, ValueError) as e:
        fail("CANNOT RENDER TEMPLATE", e, output)

    _print_results(results, ctx, output)
