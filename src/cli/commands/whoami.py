from dataclasses import asdict
from typing import Optional

import typer
import typer_di

from core.arn import ArnError
from core.arn_ctx import Ctx
from core.engine.identity_engine import get_current_aws_identity
from core.models import AwsIdentity, AwsIdentityError

from ..console import BOLD, CYAN, GREEN, RESET, RULE, echo_structured, fail
from ..params import output_params


def _print_identity(identity: AwsIdentity, ctx: Ctx, output: str) -> None:
    payload = {**asdict(identity), "ctx": asdict(ctx)}

    if echo_structured(payload, output):
        return

    profile = identity.profile or "(no profile / env creds)"
    region = identity.region or "(no default region)"

    typer.echo()
    typer.echo(RULE)
    typer.echo(f"{CYAN}{BOLD}ARNKIT | AWS Identity Context{RESET}")
    typer.echo(RULE)
    typer.echo(f"{CYAN}{BOLD}ACCOUNT:  {RESET} {identity.account}")
    typer.echo(f"{CYAN}{BOLD}ARN:      {RESET} {identity.arn}")
    typer.echo(f"{CYAN}{BOLD}PROFILE:  {RESET} {profile}")
    typer.echo(f"{CYAN}{BOLD}REGION:   {RESET} {region}")
    typer.echo(f"{CYAN}{BOLD}PARTITION:{RESET} {ctx.partition}")
    typer.echo(RULE)
    typer.echo(f"{GREEN}{BOLD}Identity OK: novos ARNs serão ancorados neste contexto.{RESET}")
    typer.echo(RULE)
    typer.echo()


def whoami(
    profile: Optional[str] = typer.Option(
        None,
        "--profile",
        help="AWS profile name (from ~/.aws/config).",
    ),
    region: Optional[str] = typer.Option(
        None,
        "--region",
        help="AWS region, e.g. sa-east-1.",
    ),
    output: str = typer_di.Depends(output_params),
) -> None:
    """
    Mostra a identidade AWS atual (Account ID, User ARN) e o contexto de ARN derivado dela.
    """
    try:
        identity = get_current_aws_identity(profile=profile, region=region)
    except AwsIdentityError as e:
        fail("FAILED TO RESOLVE AWS IDENTITY", e, output)

    try:
        ctx = identity.ctx()
    except ArnError as e:
        fail("INVALID CALLER ARN", e, output)

    _print_identity(identity, ctx, output)
