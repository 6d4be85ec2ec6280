import logging
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..arn import ArnError
from ..arn_ctx import Ctx
from ..models import AwsIdentity, AwsIdentityError

logger = logging.getLogger(__name__)


def get_current_aws_identity(
    profile: Optional[str] = None,
    region: Optional[str] = None,
) -> AwsIdentity:
    """
    Tenta descobrir a identidade AWS atual usando STS (Security Token Service),
    respeitando profile/region passados explicitamente (se houver).
    """
    session = boto3.session.Session(
        profile_name=profile,
        region_name=region,
    )
    sts = session.client("sts")

    try:
        resp = sts.get_caller_identity()
    except (BotoCoreError, ClientError) as e:
        raise AwsIdentityError(f"Não foi possível obter a identidade AWS atual: {e}") from e

    logger.debug("Caller identity: %s (account %s)", resp["Arn"], resp["Account"])

    return AwsIdentity(
        account=resp["Account"],
        arn=resp["Arn"],
        user_id=resp["UserId"],
        region=session.region_name,
        profile=session.profile_name,
    )


def get_arn_ctx(
    profile: Optional[str] = None,
    region: Optional[str] = None,
) -> Ctx:
    """
    Descobre o Ctx (partition/region/account) da identidade atual.
    """
    identity = get_current_aws_identity(profile=profile, region=region)
    try:
        return identity.ctx()
    except ArnError as e:
        raise AwsIdentityError(f"ARN do caller inválido: {identity.arn}") from e
