import posixpath
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from .arn_ctx import Ctx


PREFIX = "arn:"
FIELDS = 5

# Separadores internos do campo resource
_SEPARATORS = "/:"


class ArnError(ValueError):
    """Erro base de tudo que envolve construção/leitura de ARNs."""


class InvalidArnError(ArnError):
    """
    ARN sem o prefixo `arn:` ou sem `:` suficientes para resolver o campo pedido.
    """

    def __init__(self, arn: str, index: Optional[int] = None) -> None:
        self.arn = arn
        self.index = index
        if index is None:
            msg = f"arn: invalid arn: {arn}"
        else:
            msg = f"arn: invalid arn or field index {index}: {arn}"
        super().__init__(msg)


class NoPathError(ArnError):
    """ARN válido, mas o resource não tem uma região de path delimitada por '/'."""

    def __init__(self, arn: str) -> None:
        self.arn = arn
        super().__init__(f"arn: no path: {arn}")


class ArnContextError(ArnError):
    """Violação das regras de contexto (Ctx.new)."""


def _first_of(text: str, chars: str, start: int) -> int:
    hits = [i for i in (text.find(c, start) for c in chars) if i >= 0]
    return min(hits, default=-1)


def _last_of(text: str, chars: str, start: int) -> int:
    return max(text.rfind(c, start) for c in chars)


def _field_range(raw: str, i: int, with_index: bool = True) -> Tuple[int, int]:
    """
    Índices (start, end) do i-ésimo campo. Para i >= 4 o campo vai até o fim
    da string, pulando i - 4 sub-campos separados por ':' dentro do resource.

    Sem o prefixo "arn:" o erro só carrega o índice se `with_index`.
    """
    if not raw.startswith(PREFIX):
        raise InvalidArnError(raw, i if with_index else None)
    if i < 0:
        raise InvalidArnError(raw, i)

    start = len(PREFIX)
    for _ in range(i):
        sep = raw.find(":", start)
        if sep < 0:
            raise InvalidArnError(raw, i)
        start = sep + 1

    if i >= FIELDS - 1:
        return start, len(raw)

    end = raw.find(":", start)
    if end < 0:
        raise InvalidArnError(raw, i)
    return start, end


def _resource_start(raw: str) -> int:
    start, _ = _field_range(raw, FIELDS - 1, with_index=False)
    return start


def _type_range(raw: str) -> Tuple[int, int]:
    start = _resource_start(raw)
    sep = _first_of(raw, _SEPARATORS, start)
    if sep < 0:
        return start, start
    return start, sep


def _path_range(raw: str) -> Tuple[int, int]:
    # O path nunca atravessa um ':', a busca começa depois do último.
    start = _resource_start(raw)
    lo = max(start, raw.rfind(":", start) + 1)
    first = raw.find("/", lo)
    if first < 0:
        return lo, lo
    return first, raw.rfind("/", lo) + 1


def _name_start(raw: str) -> int:
    start = _resource_start(raw)
    return max(start, _last_of(raw, _SEPARATORS, start) + 1)


def clean_path(p: str) -> str:
    """
    Normaliza p para "" ou para um path absoluto sem '/' no final.

    >>> clean_path("a/./b//c/")
    '/a/b/c'
    """
    if not p:
        return ""
    if not p.startswith("/"):
        p = "/" + p
    p = posixpath.normpath(p)
    # normpath preserva exatamente duas barras iniciais (POSIX)
    if p.startswith("//"):
        p = "/" + p.lstrip("/")
    return "" if p == "/" else p


@dataclass(frozen=True)
class Arn:
    """
    Amazon Resource Name imutável, guardado como o texto cru:

        arn:<partition>:<service>:<region>:<account>:<resource>

    Nenhum campo é validado na construção; erros de formato só aparecem
    quando algum campo é lido (InvalidArnError).
    """

    raw: str

    def __str__(self) -> str:
        return self.raw

    @classmethod
    def new(cls, partition: str, service: str, region: str, account: str, *resource: str) -> "Arn":
        """
        Monta um ARN a partir dos campos. As partes de resource são concatenadas
        sem separador; quem chama coloca '/' ou ':' quando precisar.
        """
        return cls(f"{PREFIX}{partition}:{service}:{region}:{account}:" + "".join(resource))

    @classmethod
    def parse(cls, arn: str) -> "Arn":
        r = cls(arn)
        if not r.is_valid():
            raise InvalidArnError(arn)
        return r

    @classmethod
    def from_optional(cls, value: Optional[str]) -> "Arn":
        return cls("" if value is None else value)

    def to_optional(self) -> Optional[str]:
        return self.raw

    def is_valid(self) -> bool:
        return self.raw.startswith(PREFIX) and self.raw.count(":") >= FIELDS

    def field(self, i: int) -> str:
        j, k = _field_range(self.raw, i)
        return self.raw[j:k]

    def with_field(self, i: int, value: str) -> "Arn":
        j, k = _field_range(self.raw, i)
        if self.raw[j:k] == value:
            return self
        return Arn(self.raw[:j] + value + self.raw[k:])

    @property
    def partition(self) -> str:
        return self.field(0)

    @property
    def service(self) -> str:
        return self.field(1)

    @property
    def region(self) -> str:
        return self.field(2)

    @property
    def account(self) -> str:
        return self.field(3)

    @property
    def resource(self) -> str:
        return self.field(4)

    def with_partition(self, value: str) -> "Arn":
        return self.with_field(0, value)

    def with_service(self, value: str) -> "Arn":
        return self.with_field(1, value)

    def with_region(self, value: str) -> "Arn":
        return self.with_field(2, value)

    def with_account(self, value: str) -> "Arn":
        return self.with_field(3, value)

    def with_resource(self, value: str) -> "Arn":
        return self.with_field(4, value)

    def overlay(self, other: "Arn") -> "Arn":
        """
        Novo ARN onde os campos não vazios de `other` substituem os deste.
        """
        fields = [other.field(i) or self.field(i) for i in range(FIELDS)]
        return Arn.new(*fields)

    @property
    def resource_type(self) -> str:
        """
        Prefixo do resource até o primeiro '/' ou ':'. Vazio se nenhum dos dois aparece.
        """
        i, j = _type_range(self.raw)
        return self.raw[i:j]

    @property
    def path(self) -> str:
        """
        Trecho do resource entre o primeiro e o último '/', inclusive. Ignora
        tudo antes do último ':' e fica vazio se não houver '/'.
        """
        i, j = _path_range(self.raw)
        return self.raw[i:j]

    @property
    def name(self) -> str:
        """
        Sufixo do resource depois do último '/' ou ':'. É o resource inteiro se
        nenhum dos dois aparece.
        """
        return self.raw[_name_start(self.raw):]

    @property
    def path_name(self) -> str:
        i, j = _path_range(self.raw)
        if i == j:
            raise NoPathError(self.raw)
        return self.raw[i:]

    def with_path(self, value: str) -> "Arn":
        i, j = _path_range(self.raw)
        if i == j:
            raise NoPathError(self.raw)
        return Arn(self.raw[:i] + clean_path(value) + "/" + self.raw[j:])

    def with_name(self, value: str) -> "Arn":
        return Arn(self.raw[:_name_start(self.raw)] + value)

    def with_path_name(self, value: str) -> "Arn":
        i, j = _path_range(self.raw)
        if i == j:
            raise NoPathError(self.raw)
        sep = value.rfind("/")
        return Arn(self.raw[:i] + clean_path(value[:sep + 1]) + "/" + value[sep + 1:])

    def ctx(self) -> "Ctx":
        from .arn_ctx import Ctx

        return Ctx(partition=self.partition, region=self.region, account=self.account)


BASE = Arn.new("", "", "", "")
