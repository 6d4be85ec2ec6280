from pathlib import Path
from typing import Any, Dict, List
import yaml
from jinja2 import Environment, StrictUndefined


env = Environment(undefined=StrictUndefined)


def load_template(path: str | Path) -> Dict[str, Any]:
    content = Path(path).read_text(encoding="utf-8")
    # Suporta YAML e JSON (YAML já é superset)
    return yaml.safe_load(content) or {}


def _render(expr: Any, variables: Dict[str, Any]) -> str:
    return env.from_string(str(expr)).render(**variables)


def render_resources(template: Dict[str, Any], ctx: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Espera algo como:
    {
        "vars": {"env": "dev"},
        "arns": [
            {"service": "iam", "resource": "role/{{ env }}-deployer"},
            {"service": "s3", "resource": ["{{ account }}", "-logs"]},
            {"service": "sqs", "region": "sa-east-1", "resource": "jobs"}
        ]
    }

    `resource` pode ser uma string ou uma lista de partes (concatenadas sem
    separador); ausente ou null vira lista vazia. Qualquer outra coisa, ou uma
    entrada que não seja mapping, levanta ValueError.
    Precedência das variáveis: vars < ctx (ctx ganha).
    """
    variables: Dict[str, Any] = {**(template.get("vars", {}) or {}), **ctx}

    rendered: List[Dict[str, Any]] = []
    for entry in template.get("arns", []) or []:
        if not isinstance(entry, dict):
            raise ValueError(f"Invalid template entry (expected a mapping): {entry!r}")

        parts = entry.get("resource")
        if parts is None:
            parts = []
        elif isinstance(parts, str):
            parts = [parts]
        elif not isinstance(parts, list):
            raise ValueError(
                f"Invalid resource for service {entry.get('service')!r} "
                f"(expected a string or a list): {parts!r}"
            )

        item: Dict[str, Any] = {
            "service": _render(entry.get("service", ""), variables),
            "resource": [_render(p, variables) for p in parts],
        }
        if entry.get("region") is not None:
            item["region"] = _render(entry["region"], variables)
        rendered.append(item)

    return rendered
