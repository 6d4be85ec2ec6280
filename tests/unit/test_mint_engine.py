from pathlib import Path

import pytest

from core.arn import Arn, ArnContextError
from core.arn_ctx import Ctx
from core.engine.mint_engine import ctx_variables, mint_arns


CTX = Ctx("aws", "us-east-1", "123456789012")


def _write(tmp_path: Path, text: str) -> str:
    p = tmp_path / "arns.yaml"
    p.write_text(text, encoding="utf-8")
    return str(p)


def test_mint_arns_uses_ctx_rules_and_variables(tmp_path: Path):
    path = _write(
        tmp_path,
        """
vars:
  env: dev
arns:
  - service: iam
    resource: "role/{{ env }}-deployer"
  - service: s3
    resource: ["{{ account }}", "-{{ region }}-logs"]
  - service: sqs
    region: sa-east-1
    resource: "{{ env }}-jobs"
""",
    )

    results = mint_arns(path, {"env": "prd"}, CTX)

    assert [r.arn for r in results] == [
        Arn("arn:aws:iam::123456789012:role/prd-deployer"),
        Arn("arn:aws:s3:::123456789012-us-east-1-logs"),
        Arn("arn:aws:sqs:sa-east-1:123456789012:prd-jobs"),
    ]
    assert results[1].resource == "123456789012-us-east-1-logs"
    assert results[2].to_dict() == {
        "service": "sqs",
        "resource": "prd-jobs",
        "arn": "arn:aws:sqs:sa-east-1:123456789012:prd-jobs",
    }


def test_mint_arns_propagates_rule_violations(tmp_path: Path):
    path = _write(
        tmp_path,
        """
arns:
  - service: route53
    resource: ""
""",
    )
    with pytest.raises(ArnContextError):
        mint_arns(path, {}, CTX)


def test_ctx_variables():
    assert ctx_variables(CTX) == {
        "partition": "aws",
        "region": "us-east-1",
        "account": "123456789012",
    }
