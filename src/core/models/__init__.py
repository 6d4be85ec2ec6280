from .ArnDetails import ArnDetails
from .AwsIdentity import AwsIdentity, AwsIdentityError
from .MintResult import MintResult

__all__ = ["ArnDetails", "AwsIdentity", "AwsIdentityError", "MintResult"]
