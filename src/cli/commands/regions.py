from typing import Optional

import typer
import typer_di

from core import region as region_table

from ..console import BOLD, CYAN, GREEN, GREY, RESET, RULE, echo_structured, fail
from ..params import output_params


def regions(
    partition_or_region: Optional[str] = typer.Argument(
        None,
        help="Partition (ex.: aws-cn) ou uma região dela (ex.: cn-north-1). Sem argumento lista todas.",
    ),
    output: str = typer_di.Depends(output_params),
) -> None:
    """
    Lista as regiões conhecidas por partition (dados locais do botocore, sem rede).
    """
    if partition_or_region:
        found = region_table.related(partition_or_region)
        if not found:
            fail("UNKNOWN PARTITION OR REGION", ValueError(partition_or_region), output)
        listing = {region_table.partition_of(found[0]): found}
    else:
        listing = {p: region_table.related(p) for p in region_table.partitions()}

    if echo_structured(listing, output):
        return

    typer.echo()
    for partition, names in listing.items():
        typer.echo(RULE)
        typer.echo(f"{CYAN}{BOLD}{partition}{RESET} {GREY}({len(names)} regions){RESET}")
        typer.echo(RULE)
        for name in names:
            typer.echo(f"  {GREEN}•{RESET} {name}")
        typer.echo()
