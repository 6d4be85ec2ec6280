from core import region
from core.arn_ctx import Ctx


def test_partitions_include_commercial_and_china():
    parts = region.partitions()
    assert "aws" in parts
    assert "aws-cn" in parts
    assert parts == sorted(parts)


def test_partition_of():
    assert region.partition_of("us-east-1") == "aws"
    assert region.partition_of("cn-north-1") == "aws-cn"
    assert region.partition_of("nowhere-1") == ""


def test_related_by_partition_or_region():
    by_name = region.related("aws-cn")
    by_region = region.related("cn-north-1")
    assert "cn-north-1" in by_name
    assert by_name == by_region
    assert region.related("nowhere-1") == []


def test_related_returns_a_copy():
    regions = region.related("aws")
    regions.clear()
    assert region.related("aws")


def test_supports():
    assert region.supports("us-east-1", "ec2")
    assert not region.supports("us-east-1", "not-a-service")


def test_ctx_for_resolves_partition():
    assert region.ctx_for("cn-north-1", "123") == Ctx("aws-cn", "cn-north-1", "123")
    assert region.ctx_for("") == Ctx("aws", "", "")
