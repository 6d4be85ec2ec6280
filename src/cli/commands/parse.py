import typer
import typer_di

from core.arn import Arn, ArnError
from core.models import ArnDetails

from ..console import BOLD, CYAN, GREY, RESET, RULE, echo_structured, fail
from ..params import output_params


def print_details(details: ArnDetails, output: str) -> None:
    if echo_structured(details.to_dict(), output):
        return

    rows = [
        ("PARTITION", details.partition),
        ("SERVICE", details.service),
        ("REGION", details.region),
        ("ACCOUNT", details.account),
        ("RESOURCE", details.resource),
        ("TYPE", details.resource_type),
        ("PATH", details.path),
        ("NAME", details.name),
    ]
    width = max(len(label) for label, _ in rows)

    typer.echo()
    typer.echo(RULE)
    typer.echo(f"{CYAN}{BOLD}ARN:{RESET} {details.arn}")
    typer.echo(RULE)
    for label, value in rows:
        shown = value if value else f"{GREY}(empty){RESET}"
        typer.echo(f"  {CYAN}{label:<{width}}{RESET}  {shown}")
    typer.echo(RULE)
    typer.echo()


def parse(
    arn: str = typer.Argument(..., help="ARN a ser inspecionado."),
    output: str = typer_di.Depends(output_params),
) -> None:
    """
    Quebra um ARN nos cinco campos e na subestrutura do resource (type/path/name).
    """
    try:
        details = ArnDetails.from_arn(Arn.parse(arn))
    except ArnError as e:
        fail("INVALID ARN", e, output)

    print_details(details, output)
