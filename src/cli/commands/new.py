from typing import List, Optional

import typer
import typer_di

from core.arn import Arn, ArnError
from core.arn_ctx import Ctx

from ..console import BOLD, GREEN, RESET, echo_structured, fail
from ..params import ctx_params, output_params


def print_arn(arn: Arn, output: str) -> None:
    if echo_structured({"arn": str(arn)}, output):
        return
    typer.echo(f"{GREEN}{BOLD}{arn}{RESET}")


def new(
    service: str = typer.Argument(..., help="Serviço AWS (ex.: s3, iam, ec2)."),
    resource: Optional[List[str]] = typer.Argument(
        None,
        help="Partes do resource, concatenadas sem separador (ex.: role/ deployer).",
    ),
    ctx: Ctx = typer_di.Depends(ctx_params),
    output: str = typer_di.Depends(output_params),
) -> None:
    """
    Gera um ARN aplicando as regras de cada serviço (ex.: s3 sem region/account,
    iam sem region, imagens ec2 sem account).

    Ex:
    arnkit new s3 my-bucket
    arnkit new iam role/deployer --account 123456789012
    arnkit new ec2 image/ami-1a2b3c4d --region us-east-1
    """
    try:
        arn = ctx.new(service, *(resource or []))
    except ArnError as e:
        fail("CANNOT BUILD ARN", e, output)

    print_arn(arn, output)
