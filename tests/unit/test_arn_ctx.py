import pytest

from core.arn import Arn, ArnContextError
from core.arn_ctx import ANY_TYPE, SERVICE_RULES, Ctx, resource_type_of


CTX = Ctx("aws", "us-east-1", "123456789012")


@pytest.mark.parametrize(
    "service, resource, expected",
    [
        (
            "apigateway",
            "/restapis/a123456789012bc3de45678901f23a45/*",
            "arn:aws:apigateway:us-east-1::/restapis/a123456789012bc3de45678901f23a45/*",
        ),
        ("cloudfront", "*", "arn:aws:cloudfront::123456789012:*"),
        ("cloudwatch", "alarm:*", "arn:aws:cloudwatch:us-east-1:123456789012:alarm:*"),
        ("ec2", "dedicated-host/h-12345678", "arn:aws:ec2:us-east-1:123456789012:dedicated-host/h-12345678"),
        ("ec2", "image/ami-1a2b3c4d", "arn:aws:ec2:us-east-1::image/ami-1a2b3c4d"),
        (
            "elasticbeanstalk",
            "solutionstack/32bit Amazon Linux running Tomcat 7",
            "arn:aws:elasticbeanstalk:us-east-1::solutionstack/32bit Amazon Linux running Tomcat 7",
        ),
        ("health", "event/AWS_EC2_EXAMPLE_ID", "arn:aws:health:us-east-1::event/AWS_EC2_EXAMPLE_ID"),
        ("monitoring", "dashboard/MyDashboardName", "arn:aws:cloudwatch::123456789012:dashboard/MyDashboardName"),
        ("route53", "hostedzone/Z148QEXAMPLE8V", "arn:aws:route53:::hostedzone/Z148QEXAMPLE8V"),
        ("route53", "change/C2RDJ5EXAMPLE2", "arn:aws:route53:::change/C2RDJ5EXAMPLE2"),
        ("route53", "domain:example.com", "arn:aws:route53::123456789012:domain:example.com"),
        ("s3", "my_corporate_bucket", "arn:aws:s3:::my_corporate_bucket"),
        ("artifact", "report-package/x", "arn:aws:artifact:::report-package/x"),
        ("iam", "role/deployer", "arn:aws:iam::123456789012:role/deployer"),
        ("sqs", "jobs", "arn:aws:sqs:us-east-1:123456789012:jobs"),
    ],
)
def test_ctx_new_applies_service_rules(service, resource, expected):
    assert CTX.new(service, resource) == Arn(expected)


def test_ctx_new_concatenates_resource_parts():
    assert CTX.new("iam", "role", "/a/", "b").raw == "arn:aws:iam::123456789012:role/a/b"


def test_ctx_new_errors():
    with pytest.raises(ArnContextError, match="service not specified"):
        CTX.new("", "xyz")
    with pytest.raises(ArnContextError, match="cloudwatch requires resource"):
        CTX.new("cloudwatch")
    with pytest.raises(ArnContextError, match="route53 requires resource"):
        CTX.new("route53", "")


def test_ctx_new_without_resource_for_plain_service():
    # serviços sem regra de tipo aceitam resource vazio
    assert CTX.new("sqs").raw == "arn:aws:sqs:us-east-1:123456789012:"


def test_in_region_returns_copy():
    moved = CTX.in_region("us-west-2")
    assert moved == Ctx("aws", "us-west-2", "123456789012")
    assert CTX.region == "us-east-1"


def test_ctx_round_trip_through_arn():
    assert CTX.new("sqs", "jobs").ctx() == CTX


@pytest.mark.parametrize(
    "parts, expected",
    [
        ((), ""),
        (("",), ""),
        (("image/ami-1",), "image"),
        (("domain:example.com",), "domain"),
        (("bucket",), "bucket"),
        (("/restapis",), ""),
    ],
)
def test_resource_type_of(parts, expected):
    assert resource_type_of(parts) == expected


def test_route53_rules_are_ordered():
    rules = SERVICE_RULES["route53"].rules
    assert rules[0].matches("hostedzone") and rules[0].blank_region and rules[0].blank_account
    assert rules[1].matches("domain") and rules[1].blank_region and not rules[1].blank_account
    assert not any(r.matches(ANY_TYPE) for r in rules)
