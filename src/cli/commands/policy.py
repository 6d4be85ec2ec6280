from typing import Optional

import typer
import typer_di

from core.arn import ArnError
from core.iam import managed_policy_arn

from ..console import fail
from ..params import output_params
from .new import print_arn


def policy(
    name: str = typer.Argument(
        ...,
        help="Nome da managed policy (ex.: ViewOnlyAccess, service-role/AWSLambdaRole) ou ARN.",
    ),
    partition: Optional[str] = typer.Option(None, "--partition", help="AWS partition (default: aws)."),
    output: str = typer_di.Depends(output_params),
) -> None:
    """
    Resolve o ARN de uma managed policy da AWS.
    """
    try:
        arn = managed_policy_arn(partition or "", name)
    except ArnError as e:
        fail("CANNOT BUILD ARN", e, output)

    if not arn.raw:
        fail("CANNOT BUILD ARN", ValueError(f"policy name is empty: {name!r}"), output)

    print_arn(arn, output)
