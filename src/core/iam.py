from .arn import Arn, clean_path

# Managed policies de job function que podem ser referenciadas só pelo nome
JOB_FUNCTIONS = frozenset(
    {
        "Billing",
        "DatabaseAdministrator",
        "DataScientist",
        "NetworkAdministrator",
        "SupportUser",
        "SystemAdministrator",
        "ViewOnlyAccess",
    }
)


def managed_policy_arn(partition: str, resource: str) -> Arn:
    """
    ARN de uma managed policy da AWS.

    - Se `resource` já for um ARN, volta com a partition atualizada (ou "aws"
      se estiver em branco).
    - Job functions podem vir só com o nome; as demais precisam do path.
    - resource vazio devolve Arn("").
    """
    if ":" in resource:
        r = Arn(resource)
        if partition:
            return r.with_partition(partition)
        if not r.partition:
            return r.with_partition("aws")
        return r

    r = resource[len("policy"):] if resource.startswith("policy") else resource
    name = r[r.rfind("/") + 1:]
    if not name:
        return Arn("")
    if name in JOB_FUNCTIONS:
        r = "job-function/" + name

    return Arn.new(partition or "aws", "iam", "", "aws", "policy", clean_path(r))
