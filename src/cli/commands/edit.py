from typing import Callable, List, Optional, Tuple

import typer
import typer_di

from core.arn import Arn, ArnError

from ..console import fail
from ..params import output_params
from .new import print_arn


def edit(
    arn: str = typer.Argument(..., help="ARN de partida."),
    partition: Optional[str] = typer.Option(None, "--partition", help="Nova partition."),
    service: Optional[str] = typer.Option(None, "--service", help="Novo service."),
    region: Optional[str] = typer.Option(None, "--region", help="Nova region (\"\" apaga)."),
    account: Optional[str] = typer.Option(None, "--account", help="Novo account (\"\" apaga)."),
    resource: Optional[str] = typer.Option(None, "--resource", help="Novo resource inteiro."),
    path: Optional[str] = typer.Option(None, "--path", help="Novo path do resource (normalizado)."),
    name: Optional[str] = typer.Option(None, "--name", help="Novo nome do recurso."),
    path_name: Optional[str] = typer.Option(None, "--path-name", help="Novo path + nome de uma vez."),
    output: str = typer_di.Depends(output_params),
) -> None:
    """
    Devolve uma cópia do ARN com os campos informados substituídos.

    As edições são aplicadas nesta ordem: partition, service, region, account,
    resource, path, name, path-name.
    """
    steps: List[Tuple[Optional[str], Callable[[Arn, str], Arn]]] = [
        (partition, Arn.with_partition),
        (service, Arn.with_service),
        (region, Arn.with_region),
        (account, Arn.with_account),
        (resource, Arn.with_resource),
        (path, Arn.with_path),
        (name, Arn.with_name),
        (path_name, Arn.with_path_name),
    ]

    try:
        result = Arn.parse(arn)
        for value, step in steps:
            if value is not None:
                result = step(result, value)
    except ArnError as e:
        fail("CANNOT EDIT ARN", e, output)

    print_arn(result, output)
