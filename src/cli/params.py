from dataclasses import replace
from typing import Optional

import typer
import typer_di

from core.arn_ctx import Ctx
from core.engine.identity_engine import get_arn_ctx
from core.models import AwsIdentityError
from core.region import ctx_for

from .console import fail


def output_params(
    output: str = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: json (default), yaml ou text.",
    ),
    out_json: bool = typer.Option(False, "--json", help="Alias para --output json"),
    out_yaml: bool = typer.Option(False, "--yaml", help="Alias para --output yaml"),
    out_text: bool = typer.Option(False, "--text", help="Alias para --output text"),
) -> str:
    output_options = [
        out_json,
        out_yaml,
        out_text,
        output is not None,  # só conta se o usuário forneceu --output
    ]

    if sum(output_options) > 1:
        raise typer.BadParameter(
            "Use apenas uma opção de output: --json, --yaml, --text ou --output."
        )

    if out_json:
        output = "json"
    elif out_yaml:
        output = "yaml"
    elif out_text:
        output = "text"

    if output not in {"json", "yaml", "text"}:
        output = "json"

    return output


def ctx_params(
    partition: Optional[str] = typer.Option(
        None,
        "--partition",
        help="AWS partition (aws, aws-cn, aws-us-gov...). Default: inferida pela região.",
    ),
    region: Optional[str] = typer.Option(
        None,
        "--region",
        help="AWS region, e.g. sa-east-1.",
    ),
    account: Optional[str] = typer.Option(
        None,
        "--account",
        help="AWS account ID (12 dígitos).",
    ),
    discover: bool = typer.Option(
        False,
        "--discover",
        help="Descobre partition/account via STS (sts:GetCallerIdentity).",
    ),
    profile: Optional[str] = typer.Option(
        None,
        "--profile",
        help="AWS profile name (from ~/.aws/config). Usado com --discover.",
    ),
    output: str = typer_di.Depends(output_params),
) -> Ctx:
    """
    Monta o Ctx dos comandos que geram ARNs. Opções explícitas sempre ganham
    do que foi descoberto via STS.
    """
    if discover:
        try:
            ctx = get_arn_ctx(profile=profile, region=region)
        except AwsIdentityError as e:
            fail("FAILED TO RESOLVE AWS IDENTITY", e, output)
    else:
        ctx = ctx_for(region or "")

    if partition:
        ctx = replace(ctx, partition=partition)
    if region:
        ctx = ctx.in_region(region)
    if account:
        ctx = replace(ctx, account=account)

    return ctx
