from pathlib import Path

import pytest
from jinja2 import UndefinedError

from core.template_engine import load_template, render_resources


def test_render_resources_ctx_wins_over_template_vars():
    tpl = {
        "vars": {"env": "dev", "account": "from-template"},
        "arns": [
            {"service": "iam", "resource": "role/{{ env }}-deployer"},
            {"service": "s3", "resource": "{{ account }}-logs"},
        ],
    }

    out = render_resources(tpl, {"account": "123"})
    assert out == [
        {"service": "iam", "resource": ["role/dev-deployer"]},
        {"service": "s3", "resource": ["123-logs"]},
    ]


def test_render_resources_accepts_part_lists_and_region():
    tpl = {
        "arns": [
            {"service": "sqs", "region": "{{ r }}", "resource": ["{{ env }}", "-jobs"]},
        ],
    }

    out = render_resources(tpl, {"r": "sa-east-1", "env": "prd"})
    assert out == [{"service": "sqs", "resource": ["prd", "-jobs"], "region": "sa-east-1"}]


def test_render_resources_strict_undefined_raises():
    tpl = {"arns": [{"service": "iam", "resource": "role/{{ missing_var }}"}]}
    with pytest.raises(UndefinedError):
        render_resources(tpl, {})


def test_render_resources_empty_template():
    assert render_resources({}, {"env": "dev"}) == []


def test_load_template_yaml_and_json(tmp_path: Path):
    y = tmp_path / "t.yaml"
    y.write_text(
        """
vars:
  env: dev
arns:
  - service: iam
    resource: "role/{{ env }}"
""",
        encoding="utf-8",
    )
    j = tmp_path / "t.json"
    j.write_text('{"arns": [{"service": "s3", "resource": "b"}]}', encoding="utf-8")

    assert load_template(y)["vars"] == {"env": "dev"}
    assert load_template(str(j))["arns"] == [{"service": "s3", "resource": "b"}]


def test_load_template_empty_file(tmp_path: Path):
    p = tmp_path / "empty.yaml"
    p.write_text("", encoding="utf-8")
    assert load_template(p) == {}


def test_render_resources_null_or_missing_resource_is_empty():
    tpl = {"arns": [{"service": "sqs", "resource": None}, {"service": "sns"}]}

    assert render_resources(tpl, {}) == [
        {"service": "sqs", "resource": []},
        {"service": "sns", "resource": []},
    ]


@pytest.mark.parametrize(
    "entry",
    [
        {"service": "sqs", "resource": {"name": "jobs"}},
        {"service": "sqs", "resource": 42},
    ],
)
def test_render_resources_rejects_invalid_resource(entry):
    with pytest.raises(ValueError, match="expected a string or a list"):
        render_resources({"arns": [entry]}, {})


def test_render_resources_rejects_non_mapping_entry():
    with pytest.raises(ValueError, match="expected a mapping"):
        render_resources({"arns": ["iam role/x"]}, {})
