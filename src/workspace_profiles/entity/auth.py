# src/workspace_profiles/entity/auth.py
"""
Sub-entidade de autenticação do servidor.

O auth é uma variante indexada por `type` (esquema). Cada esquema lê apenas
os seus próprios campos; os demais permanecem no valor padrão, de modo que
duas entradas com o mesmo esquema e os mesmos campos relevantes produzem
entidades iguais.

Esquemas suportados (v1):
    - basic  → login, password
    - bearer → token, header_prefix
    - jwt    → algorithm, secret, private_key, secret_base64, header_prefix, payload
    - gce    → (sem campos; credencial obtida do ambiente do Google Compute Engine)

Limites explícitos:
    - Não valida credenciais nem formato de chaves
    - Não aplica a autenticação em nenhuma conexão
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Tuple

from workspace_profiles.core.exceptions import UnsupportedAuthScheme
from workspace_profiles.core.fields import get_bool, get_str, require_mapping


class AuthScheme(str, Enum):
    BASIC = "basic"
    BEARER = "bearer"
    JWT = "jwt"
    GCE = "gce"


@dataclass(frozen=True)
class Auth:
    """Credenciais de acesso ao servidor gRPC."""

    scheme: AuthScheme
    login: str = ""
    password: str = ""
    token: str = ""
    algorithm: str = ""
    secret: str = ""
    private_key: str = ""
    secret_base64: bool = False
    header_prefix: str = ""
    payload: str = ""

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.scheme.value}
        for key in SCHEME_FIELDS[self.scheme]:
            value = getattr(self, key)
            if value:
                out[key] = value
        return out


# Campos lidos por esquema; o tipo vem do extrator associado
_FIELD_READERS: Dict[str, Callable[[Mapping[str, Any], str], Any]] = {
    "login": get_str,
    "password": get_str,
    "token": get_str,
    "algorithm": get_str,
    "secret": get_str,
    "private_key": get_str,
    "secret_base64": get_bool,
    "header_prefix": get_str,
    "payload": get_str,
}

SCHEME_FIELDS: Dict[AuthScheme, Tuple[str, ...]] = {
    AuthScheme.BASIC: ("login", "password"),
    AuthScheme.BEARER: ("token", "header_prefix"),
    AuthScheme.JWT: (
        "algorithm",
        "secret",
        "private_key",
        "secret_base64",
        "header_prefix",
        "payload",
    ),
    AuthScheme.GCE: (),
}


def decode_auth(data: Mapping[str, Any]) -> Auth:
    """
    Decodifica o mapa `auth` em uma entidade `Auth`.

    Raises:
        TypeMismatch: se `data` não for mapa ou algum campo tiver tipo incorreto.
        UnsupportedAuthScheme: se `type` estiver ausente ou for desconhecido.
    """
    data = require_mapping(data, key="auth")

    raw_scheme = get_str(data, "type")
    try:
        scheme = AuthScheme(raw_scheme)
    except ValueError:
        raise UnsupportedAuthScheme(
            scheme=raw_scheme,
            supported=[s.value for s in AuthScheme],
        ) from None

    values = {key: _FIELD_READERS[key](data, key) for key in SCHEME_FIELDS[scheme]}
    return Auth(scheme=scheme, **values)
