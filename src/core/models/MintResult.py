from dataclasses import dataclass

from ..arn import Arn


@dataclass(frozen=True)
class MintResult:
    """
    Um ARN gerado a partir de uma entrada do template.
    """

    service: str
    resource: str
    arn: Arn

    def to_dict(self) -> dict:
        return {"service": self.service, "resource": self.resource, "arn": str(self.arn)}
