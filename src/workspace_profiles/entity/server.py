# src/workspace_profiles/entity/server.py
"""
Entidades de servidor e seus decoders a partir de payloads da UI.

Este módulo monta as entidades de conexão de um workspace gRPC a partir de
mapas chave-valor de tipagem dinâmica:

    - ServerProfile       → como alcançar e autenticar no servidor
    - ServerIdentity      → id / pasta / título + ServerProfile embutido
    - ServerUpdateRequest → atualização do saved query de um método

Política de decodificação (v1):
    - payload None → EmptyPayload
    - campos escalares/listas via `core.fields` (ausência = default)
    - sub-entidades `auth` e `k8s`: None ou mapa vazio → ausente (None)
    - falha em sub-entidade → SubEntityDecodeFailure (aborta a chamada)

Invariantes:
    - Cada chamada produz um grafo de entidades novo e imutável
    - Nenhuma entidade parcial é retornada
    - Ausente e presente-com-defaults permanecem distintos

Limites explícitos:
    - Não realiza I/O de rede
    - Não valida semântica de endereços ou certificados
    - Não persiste nem faz cache de entidades
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, TypeVar

from workspace_profiles.core.config.settings import DecoderSettings
from workspace_profiles.core.exceptions import DecodeError, EmptyPayload, SubEntityDecodeFailure
from workspace_profiles.core.fields import (
    get_bool,
    get_int64,
    get_mapping,
    get_str,
    get_str_list,
    require_mapping,
)

from .auth import Auth, decode_auth
from .fingerprint import fingerprint
from .port_forward import PortForward, decode_port_forward
from .query import SavedQuery, decode_saved_query

log = logging.getLogger(__name__)

T = TypeVar("T")

RequestMap = Mapping[str, Mapping[str, SavedQuery]]


@dataclass(frozen=True)
class ServerProfile:
    """Dados de conexão persistidos de um servidor gRPC."""

    addr: str = ""
    use_reflection: bool = False
    proto_files: Tuple[str, ...] = ()
    import_path: Tuple[str, ...] = ()
    no_tls: bool = False
    insecure: bool = False
    root_certificate: str = ""
    client_certificate: str = ""
    client_key: str = ""
    request: RequestMap = field(default_factory=dict, hash=False)
    auth: Optional[Auth] = None
    port_forward: Optional[PortForward] = None

    def __post_init__(self) -> None:
        # serviço → método → SavedQuery, somente-leitura nos dois níveis
        frozen = {
            service: MappingProxyType(dict(methods)) for service, methods in self.request.items()
        }
        object.__setattr__(self, "request", MappingProxyType(frozen))

    def port_forward_fingerprint(self, settings: Optional[DecoderSettings] = None) -> str:
        settings = settings or DecoderSettings()
        return fingerprint(self.port_forward, algorithm=settings.fingerprint_algorithm)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        scalars = (
            ("addr", self.addr),
            ("use_reflection", self.use_reflection),
            ("proto_files", list(self.proto_files)),
            ("import_path", list(self.import_path)),
            ("no_tls", self.no_tls),
            ("insecure", self.insecure),
            ("root_certificate", self.root_certificate),
            ("client_certificate", self.client_certificate),
            ("client_key", self.client_key),
        )
        for key, value in scalars:
            if value:
                out[key] = value

        out["request"] = {
            service: {method: query.to_dict() for method, query in methods.items()}
            for service, methods in self.request.items()
        }
        out["auth"] = self.auth.to_dict() if self.auth is not None else None
        out["k8s"] = self.port_forward.to_dict() if self.port_forward is not None else None
        return out


@dataclass(frozen=True)
class ServerIdentity:
    """Servidor identificado no workspace (id 0 = novo)."""

    id: int = 0
    folder_id: int = 0
    title: str = ""
    profile: ServerProfile = field(default_factory=ServerProfile)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "id": self.id,
            "folder_id": self.folder_id,
            "title": self.title,
        }
        out.update(self.profile.to_dict())
        return out


@dataclass(frozen=True)
class ServerUpdateRequest:
    """Atualização do saved query de `service/method` no servidor `id`."""

    id: int = 0
    service: str = ""
    method: str = ""
    request: Optional[SavedQuery] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "service": self.service,
            "method": self.method,
            "request": self.request.to_dict() if self.request is not None else None,
        }


# -----------------------------
# Helpers
# -----------------------------
def _require_payload(payload: Any, *, entity: str) -> Mapping[str, Any]:
    if payload is None:
        raise EmptyPayload(entity=entity)
    return require_mapping(payload)


def _decode_sub_entity(
    payload: Mapping[str, Any],
    key: str,
    decoder: Callable[[Mapping[str, Any]], T],
) -> Optional[T]:
    # None e mapa vazio representam "ausente"; TypeMismatch no key externo propaga
    data = get_mapping(payload, key)
    if not data:
        return None
    try:
        return decoder(data)
    except DecodeError as e:
        raise SubEntityDecodeFailure(entity=key, cause=e) from e


def _decode_request_map(payload: Mapping[str, Any]) -> RequestMap:
    services = get_mapping(payload, "request")
    result: Dict[str, Dict[str, SavedQuery]] = {}

    for service, methods in services.items():
        if methods is None:
            continue
        methods = require_mapping(methods, key=f"request.{service}")

        decoded: Dict[str, SavedQuery] = {}
        for method, query in methods.items():
            if query is None:
                continue
            try:
                decoded[method] = decode_saved_query(query)
            except DecodeError as e:
                raise SubEntityDecodeFailure(entity=f"request.{service}.{method}", cause=e) from e
        result[service] = decoded

    return result


# -----------------------------
# Decoders
# -----------------------------
def decode_server_profile(payload: Optional[Mapping[str, Any]]) -> ServerProfile:
    """
    Decodifica um `ServerProfile` a partir do payload da UI.

    Args:
        payload: mapa chave-valor (ex.: JSON decodificado).

    Raises:
        EmptyPayload: payload None.
        TypeMismatch: campo com tipo incorreto.
        SubEntityDecodeFailure: falha em `auth`, `k8s` ou `request`.
    """
    payload = _require_payload(payload, entity="server")

    profile = ServerProfile(
        addr=get_str(payload, "addr"),
        use_reflection=get_bool(payload, "use_reflection"),
        proto_files=get_str_list(payload, "proto_files"),
        import_path=get_str_list(payload, "import_path"),
        no_tls=get_bool(payload, "no_tls"),
        insecure=get_bool(payload, "insecure"),
        root_certificate=get_str(payload, "root_certificate"),
        client_certificate=get_str(payload, "client_certificate"),
        client_key=get_str(payload, "client_key"),
        request=_decode_request_map(payload),
        port_forward=_decode_sub_entity(payload, "k8s", decode_port_forward),
        auth=_decode_sub_entity(payload, "auth", decode_auth),
    )

    log.debug(
        "decoded server profile addr=%r auth=%s k8s_present=%s",
        profile.addr,
        profile.auth.scheme.value if profile.auth is not None else None,
        profile.port_forward is not None,
    )
    return profile


def decode_server_identity(payload: Optional[Mapping[str, Any]]) -> ServerIdentity:
    """Decodifica id/folder_id/title e o `ServerProfile` embutido no mesmo payload."""
    payload = _require_payload(payload, entity="server")

    return ServerIdentity(
        id=get_int64(payload, "id"),
        folder_id=get_int64(payload, "folder_id"),
        title=get_str(payload, "title"),
        profile=decode_server_profile(payload),
    )


def decode_server_update(
    payload: Optional[Mapping[str, Any]],
    *,
    settings: Optional[DecoderSettings] = None,
) -> ServerUpdateRequest:
    """
    Decodifica um `ServerUpdateRequest`.

    Falha no saved query aninhado (`request`):
        - strict_saved_query=True (padrão) → SubEntityDecodeFailure
        - strict_saved_query=False → request=None e warning no log
    """
    settings = settings or DecoderSettings()
    payload = _require_payload(payload, entity="server_update")

    server_id = get_int64(payload, "id")
    service = get_str(payload, "service")
    method = get_str(payload, "method")

    request: Optional[SavedQuery] = None
    if payload.get("request") is not None:
        try:
            request = decode_saved_query(payload["request"])
        except DecodeError as e:
            if settings.strict_saved_query:
                raise SubEntityDecodeFailure(entity="request", cause=e) from e
            log.warning("ignoring undecodable saved query in server update: %s", e)

    return ServerUpdateRequest(
        id=server_id,
        service=service,
        method=method,
        request=request,
    )


# -----------------------------
# Capability query
# -----------------------------
def has_active_port_forward(profile: ServerProfile) -> bool:
    return profile.port_forward is not None and profile.port_forward.enabled
