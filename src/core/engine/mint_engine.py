import logging
from typing import Any, Dict, List

from ..arn_ctx import Ctx
from ..models import MintResult
from ..template_engine import load_template, render_resources

logger = logging.getLogger(__name__)


def ctx_variables(ctx: Ctx) -> Dict[str, str]:
    return {"partition": ctx.partition, "region": ctx.region, "account": ctx.account}


def mint_arns(
    template_path: str,
    overrides: Dict[str, Any],
    ctx: Ctx,
) -> List[MintResult]:
    """
    Gera os ARNs descritos no template, ancorados em `ctx`.

    Variáveis disponíveis no Jinja2: vars do template < partition/region/account
    do contexto < overrides da linha de comando. Uma entrada com `region`
    própria usa ctx.in_region(...) só para ela.
    """
    template = load_template(template_path)
    variables: Dict[str, Any] = {**ctx_variables(ctx), **overrides}

    results: List[MintResult] = []
    for entry in render_resources(template, variables):
        entry_ctx = ctx.in_region(entry["region"]) if "region" in entry else ctx
        arn = entry_ctx.new(entry["service"], *entry["resource"])
        logger.debug("Minted %s for service=%s", arn, entry["service"])

        results.append(
            MintResult(
                service=entry["service"],
                resource="".join(entry["resource"]),
                arn=arn,
            )
        )

    return results
