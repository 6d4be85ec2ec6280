from dataclasses import dataclass
from typing import Optional

from ..arn import Arn
from ..arn_ctx import Ctx


@dataclass
class AwsIdentity:
    account: str
    arn: str
    user_id: str
    region: Optional[str]
    profile: Optional[str]

    def ctx(self) -> Ctx:
        """
        Contexto para novos ARNs: partition e account vêm do ARN do caller,
        a região vem da sessão (o ARN do STS não tem região).
        """
        caller = Arn.parse(self.arn)
        return Ctx(
            partition=caller.partition,
            region=self.region or "",
            account=caller.account or self.account,
        )


class AwsIdentityError(RuntimeError):
    pass
