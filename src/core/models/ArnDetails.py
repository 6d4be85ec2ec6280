from dataclasses import asdict, dataclass
from typing import Dict, Optional

from ..arn import Arn


@dataclass(frozen=True)
class ArnDetails:
    """
    Visão "explodida" de um ARN: os cinco campos mais a subestrutura do resource.
    """

    arn: str
    partition: str
    service: str
    region: str
    account: str
    resource: str
    resource_type: str
    path: str
    name: str
    path_name: Optional[str] = None

    @classmethod
    def from_arn(cls, arn: Arn) -> "ArnDetails":
        path = arn.path
        return cls(
            arn=str(arn),
            partition=arn.partition,
            service=arn.service,
            region=arn.region,
            account=arn.account,
            resource=arn.resource,
            resource_type=arn.resource_type,
            path=path,
            name=arn.name,
            # path_name só existe quando há path
            path_name=arn.path_name if path else None,
        )

    def to_dict(self) -> Dict[str, Optional[str]]:
        return asdict(self)
