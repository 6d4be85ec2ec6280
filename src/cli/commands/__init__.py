from .edit import edit
from .new import new
from .parse import parse
from .policy import policy
from .regions import regions
from .render import render
from .whoami import whoami

__all__ = ["edit", "new", "parse", "policy", "regions", "render", "whoami"]
