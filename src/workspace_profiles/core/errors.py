"""
Workspace Profiles — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros de decodificação.
Erros fazem parte do contrato entre o core e a camada externa (UI/RPC),
devendo ser:

- explícitos
- serializáveis
- acionáveis

A camada externa decide a apresentação; o core apenas descreve a falha.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DecodeErrorPayload:
    """
    Payload canônico de erro de decodificação.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida a quem produziu o payload
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

EMPTY_PAYLOAD = "EMPTY_PAYLOAD"
TYPE_MISMATCH = "TYPE_MISMATCH"
SUB_ENTITY_DECODE_FAILURE = "SUB_ENTITY_DECODE_FAILURE"
UNSUPPORTED_AUTH_SCHEME = "UNSUPPORTED_AUTH_SCHEME"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def empty_payload(
    *,
    entity: str,
    hint: str = "Envie um mapa chave-valor (mesmo vazio) em vez de null.",
) -> DecodeErrorPayload:
    return DecodeErrorPayload(
        type=EMPTY_PAYLOAD,
        message="no data",
        details={"entity": entity},
        hint=hint,
    )


def type_mismatch(
    *,
    key: str,
    expected: str,
    actual: str,
    hint: str = "Corrija o tipo do valor na origem do payload; nenhuma coerção é aplicada.",
) -> DecodeErrorPayload:
    return DecodeErrorPayload(
        type=TYPE_MISMATCH,
        message=f"key '{key}' must be {expected}, got {actual}",
        details={
            "key": key,
            "expected": expected,
            "actual": actual,
        },
        hint=hint,
    )


def sub_entity_decode_failure(
    *,
    entity: str,
    cause: DecodeErrorPayload,
    hint: Optional[str] = None,
) -> DecodeErrorPayload:
    return DecodeErrorPayload(
        type=SUB_ENTITY_DECODE_FAILURE,
        message=f"failed to decode '{entity}': {cause.message}",
        details={
            "entity": entity,
            "cause": cause.to_dict(),
        },
        hint=hint if hint is not None else cause.hint,
    )


def unsupported_auth_scheme(
    *,
    scheme: Any,
    supported: list,
    hint: str = "Use um dos esquemas de autenticação suportados.",
) -> DecodeErrorPayload:
    return DecodeErrorPayload(
        type=UNSUPPORTED_AUTH_SCHEME,
        message=f"unsupported auth type: {scheme!r}",
        details={
            "scheme": scheme,
            "supported": list(supported),
        },
        hint=hint,
    )
