from dataclasses import dataclass, replace
from typing import Dict, FrozenSet, Optional, Sequence, Tuple

from .arn import Arn, ArnContextError

# Tipo usado quando o serviço não depende do tipo do recurso
ANY_TYPE = "any"


@dataclass(frozen=True)
class OmitRule:
    """
    Quais campos de contexto apagar. `types=None` casa com qualquer tipo.
    """

    types: Optional[FrozenSet[str]] = None
    blank_region: bool = False
    blank_account: bool = False

    def matches(self, resource_type: str) -> bool:
        return self.types is None or resource_type in self.types


@dataclass(frozen=True)
class ServiceRule:
    """
    Regras de um serviço. Quando `sniff` é True o tipo do recurso é lido da
    primeira parte do resource; a primeira OmitRule que casar é aplicada.
    """

    rules: Tuple[OmitRule, ...] = ()
    alias: Optional[str] = None
    sniff: bool = False


def _when(*types: str, region: bool = False, account: bool = False) -> OmitRule:
    return OmitRule(frozenset(types), blank_region=region, blank_account=account)


_GLOBAL = ServiceRule((OmitRule(blank_region=True, blank_account=True),))
_NO_REGION = ServiceRule((OmitRule(blank_region=True),))
_CLOUDWATCH = ServiceRule((_when("dashboard", region=True),), alias="cloudwatch", sniff=True)

SERVICE_RULES: Dict[str, ServiceRule] = {
    "apigateway": ServiceRule((OmitRule(blank_account=True),)),
    "artifact": _GLOBAL,
    "s3": _GLOBAL,
    "cloudfront": _NO_REGION,
    "iam": _NO_REGION,
    "sts": _NO_REGION,
    "waf": _NO_REGION,
    "waf-regional": _NO_REGION,
    "cloudwatch": _CLOUDWATCH,
    "monitoring": _CLOUDWATCH,
    "ec2": ServiceRule((_when("image", "snapshot", account=True),), sniff=True),
    "elasticbeanstalk": ServiceRule((_when("solutionstack", account=True),), sniff=True),
    "health": ServiceRule((_when("event", account=True),), sniff=True),
    "route53": ServiceRule(
        (
            _when("hostedzone", "change", region=True, account=True),
            _when("domain", region=True),
        ),
        sniff=True,
    ),
}


def resource_type_of(parts: Sequence[str]) -> str:
    """
    Prefixo da primeira parte do resource até o primeiro '/' ou ':'.
    Diferente de Arn.resource_type, sem separador devolve a parte inteira.
    """
    if not parts:
        return ""
    first = parts[0]
    for i, ch in enumerate(first):
        if ch in "/:":
            return first[:i]
    return first


@dataclass(frozen=True)
class Ctx:
    """
    Onde os ARNs novos são ancorados: partition, region e account.
    """

    partition: str = ""
    region: str = ""
    account: str = ""

    def in_region(self, region: str) -> "Ctx":
        """
        Cópia do contexto em outra região. Não valida se a região pertence à partition.
        """
        return replace(self, region=region)

    def new(self, service: str, *resource: str) -> Arn:
        """
        Monta um ARN para service/resource, apagando region e/ou account
        conforme as regras do serviço (ver SERVICE_RULES).
        """
        if not service:
            raise ArnContextError("arn: service not specified")

        region, account = self.region, self.account
        resource_type = ANY_TYPE

        rule = SERVICE_RULES.get(service)
        if rule is not None:
            service = rule.alias or service
            if rule.sniff:
                resource_type = resource_type_of(resource)
            for omit in rule.rules:
                if omit.matches(resource_type):
                    if omit.blank_region:
                        region = ""
                    if omit.blank_account:
                        account = ""
                    break

        if not resource_type:
            raise ArnContextError(f"arn: {service} requires resource")

        return Arn.new(self.partition, service, region, account, *resource)
