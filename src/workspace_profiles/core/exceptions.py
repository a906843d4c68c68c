"""
Workspace Profiles — Canonical Exceptions (v1)

Este módulo define as exceções tipadas levantadas pelos decoders.

Objetivo:
- Permitir que a camada externa distinga falhas por tipo (EmptyPayload,
  TypeMismatch, SubEntityDecodeFailure)
- Facilitar o mapeamento determinístico para DecodeErrorPayload
- Evitar ValueError/KeyError genéricos vazando do core

Regras:
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
- Mensagens vêm do catálogo em `core.errors`.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from . import errors
from .errors import DecodeErrorPayload


class DecodeError(Exception):
    """Base class para falhas de decodificação.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Não embedar stack trace em payloads de erro
    - Mensagem deve ser curta e humana
    """

    error_type: str = "DECODE_ERROR"

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})
        self.hint = hint

    @classmethod
    def _payload_kwargs(cls, payload: DecodeErrorPayload) -> Dict[str, Any]:
        return {"details": payload.details, "hint": payload.hint}

    def to_payload(self) -> DecodeErrorPayload:
        return DecodeErrorPayload(
            type=self.error_type,
            message=self.message,
            details=dict(self.details),
            hint=self.hint,
        )

    def __str__(self) -> str:
        return self.message


class EmptyPayload(DecodeError):
    """Payload recebido é None."""

    error_type = errors.EMPTY_PAYLOAD

    def __init__(self, *, entity: str) -> None:
        payload = errors.empty_payload(entity=entity)
        super().__init__(payload.message, **self._payload_kwargs(payload))
        self.entity = entity


class TypeMismatch(DecodeError):
    """Chave presente com valor de tipo diferente do esperado."""

    error_type = errors.TYPE_MISMATCH

    def __init__(self, *, key: str, expected: str, actual: str) -> None:
        payload = errors.type_mismatch(key=key, expected=expected, actual=actual)
        super().__init__(payload.message, **self._payload_kwargs(payload))
        self.key = key
        self.expected = expected
        self.actual = actual


class UnsupportedAuthScheme(DecodeError):
    """Campo `type` do auth não corresponde a nenhum esquema conhecido."""

    error_type = errors.UNSUPPORTED_AUTH_SCHEME

    def __init__(self, *, scheme: Any, supported: Sequence[str]) -> None:
        payload = errors.unsupported_auth_scheme(scheme=scheme, supported=list(supported))
        super().__init__(payload.message, **self._payload_kwargs(payload))
        self.scheme = scheme


class SubEntityDecodeFailure(DecodeError):
    """Falha ao decodificar uma sub-entidade aninhada (auth, k8s, request)."""

    error_type = errors.SUB_ENTITY_DECODE_FAILURE

    def __init__(self, *, entity: str, cause: DecodeError) -> None:
        payload = errors.sub_entity_decode_failure(entity=entity, cause=cause.to_payload())
        super().__init__(payload.message, **self._payload_kwargs(payload))
        self.entity = entity
        self.cause = cause


class FingerprintError(RuntimeError):
    """Serialização canônica falhou: violação de invariante, não erro do usuário."""
