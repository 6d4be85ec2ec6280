import logging

import typer
import typer_di

from cli.commands import edit, new, parse, policy, regions, render, whoami
from cli.version import version_callback


app = typer_di.TyperDI(help="Build, inspect and edit AWS ARNs with service-aware context rules.")


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show the version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Liga os logs de debug (descoberta de identidade, tabela de regiões, etc.).",
    ),
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


app.command("parse")(parse)
app.command("new")(new)
app.command("edit")(edit)
app.command("render")(render)
app.command("policy")(policy)
app.command("regions")(regions)
app.command("whoami")(whoami)


if __name__ == "__main__":
    app()
