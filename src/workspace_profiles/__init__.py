# src/workspace_profiles/__init__.py
"""
Workspace Profiles — decodificação tipada de perfis de conexão gRPC.

Este pacote converte payloads chave-valor de tipagem dinâmica (vindos de uma
UI ou fronteira RPC) em entidades imutáveis que descrevem como alcançar e
autenticar em um servidor remoto, e calcula um fingerprint determinístico do
túnel de port-forward para detecção de mudanças.

Arquitetura em alto nível:
    - core.fields     → extração tipada de campos
    - core.errors     → catálogo canônico de erros
    - core.config     → configurações do decoder
    - entity          → entidades, decoders e fingerprint

Limites explícitos:
    - Não realiza I/O de rede
    - Não persiste entidades
    - Não configura handlers de logging
"""

from .core.config import DecoderSettings, load_settings
from .core.exceptions import (
    DecodeError,
    EmptyPayload,
    FingerprintError,
    SubEntityDecodeFailure,
    TypeMismatch,
    UnsupportedAuthScheme,
)
from .entity import (
    Auth,
    AuthScheme,
    PortForward,
    SavedQuery,
    ServerIdentity,
    ServerProfile,
    ServerUpdateRequest,
    canonical_bytes,
    decode_server_identity,
    decode_server_profile,
    decode_server_update,
    fingerprint,
    has_active_port_forward,
)

__all__ = [
    "Auth",
    "AuthScheme",
    "DecodeError",
    "DecoderSettings",
    "EmptyPayload",
    "FingerprintError",
    "PortForward",
    "SavedQuery",
    "ServerIdentity",
    "ServerProfile",
    "ServerUpdateRequest",
    "SubEntityDecodeFailure",
    "TypeMismatch",
    "UnsupportedAuthScheme",
    "canonical_bytes",
    "decode_server_identity",
    "decode_server_profile",
    "decode_server_update",
    "fingerprint",
    "has_active_port_forward",
    "load_settings",
]
