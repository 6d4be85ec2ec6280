import logging
from functools import lru_cache
from typing import Dict, List, Tuple

import botocore.session

from .arn_ctx import Ctx

logger = logging.getLogger(__name__)

# Entradas de endpoint que não são regiões de verdade
_NOT_REGIONS = {"local", "s3-external-1", "sandbox"}


@lru_cache(maxsize=None)
def _tables() -> Tuple[Dict[str, str], Dict[str, Tuple[str, ...]], Dict[str, frozenset]]:
    """
    Carrega (uma única vez) os mapas region -> partition, partition -> regions
    e service -> endpoints a partir do endpoints.json que vem no botocore.
    Nada aqui faz chamada de rede.
    """
    data = botocore.session.get_session().get_data("endpoints")

    region_part: Dict[str, str] = {}
    part_regions: Dict[str, Tuple[str, ...]] = {}
    svc_regions: Dict[str, set] = {}

    for partition in data.get("partitions", []):
        pid = partition["partition"]
        regions = set(partition.get("regions", {}))

        for service, svc in partition.get("services", {}).items():
            eps = {r for r in svc.get("endpoints", {}) if r not in _NOT_REGIONS}
            svc_regions.setdefault(service, set()).update(eps)

        for r in regions:
            if r in region_part:
                raise RuntimeError(f"region: duplicate name: {r}")
            region_part[r] = pid
        part_regions[pid] = tuple(sorted(regions))

    logger.debug(
        "Loaded %d partitions / %d regions from botocore endpoint data",
        len(part_regions),
        len(region_part),
    )
    return region_part, part_regions, {k: frozenset(v) for k, v in svc_regions.items()}


def partitions() -> List[str]:
    """Todas as partitions conhecidas, em ordem."""
    return sorted(_tables()[1])


def partition_of(region: str) -> str:
    """Partition da região, ou "" se a região for desconhecida."""
    return _tables()[0].get(region, "")


def related(partition_or_region: str) -> List[str]:
    """
    Todas as regiões de uma partition, informada pelo nome ou por qualquer
    uma das suas regiões.
    """
    region_part, part_regions, _ = _tables()
    regions = part_regions.get(partition_or_region)
    if regions is None:
        regions = part_regions.get(region_part.get(partition_or_region, ""), ())
    return list(regions)


def supports(region: str, service: str) -> bool:
    """
    True se o serviço tem endpoint na região. Serviços globais (ex.: iam)
    só aparecem em regiões como aws-global.
    """
    return region in _tables()[2].get(service, frozenset())


def ctx_for(region: str, account: str = "", default_partition: str = "aws") -> Ctx:
    """
    Monta um Ctx resolvendo a partition pela região.
    """
    partition = partition_of(region) or default_partition
    return Ctx(partition=partition, region=region, account=account)
