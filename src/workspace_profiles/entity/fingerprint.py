# src/workspace_profiles/entity/fingerprint.py
"""
Fingerprint canônico da sub-entidade de port-forward.

O fingerprint permite detectar se a configuração de túnel aplicada
anteriormente mudou, sem comparação estrutural profunda.

Política de fingerprint (v1):
    - Fase 1: serialização JSON canônica (`canonical_bytes`)
        - todos os campos, sem omissão de valores vazios
        - ordenação estável de chaves
        - separadores compactos
        - codificação UTF-8
        - sub-entidade ausente → b"null"
    - Fase 2: digest criptográfico (`fingerprint`)
        - SHA-256 (padrão, 64 chars hex) ou MD5 (compatibilidade, 32 chars hex)
        - hexadecimal minúsculo

Invariantes:
    - Sub-entidades iguais campo a campo produzem o mesmo fingerprint
    - Qualquer mudança de campo (incluindo `enabled`) altera o fingerprint
    - Ausente e presente-com-defaults produzem fingerprints distintos
    - Nunca retorna digest parcial ou sentinela

Falha de serialização é violação de invariante e levanta `FingerprintError`.
"""

from __future__ import annotations

import hashlib
import json
from typing import Optional

from workspace_profiles.core.config.settings import SUPPORTED_FINGERPRINT_ALGORITHMS
from workspace_profiles.core.exceptions import FingerprintError

from .port_forward import PortForward


def canonical_bytes(port_forward: Optional[PortForward]) -> bytes:
    """Serializa o port-forward em JSON canônico (UTF-8)."""
    data = port_forward.to_dict() if port_forward is not None else None

    try:
        canonical_json = json.dumps(
            data,
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise FingerprintError(f"port forward is not canonically serializable: {e}") from e

    return canonical_json.encode("utf-8")


def fingerprint(port_forward: Optional[PortForward], *, algorithm: str = "sha256") -> str:
    """
    Calcula o digest hexadecimal do port-forward.

    Args:
        port_forward (Optional[PortForward]): sub-entidade (None = ausente).
        algorithm (str): "sha256" ou "md5".

    Returns:
        str: digest hexadecimal minúsculo.

    Raises:
        ValueError: algoritmo não suportado.
        FingerprintError: serialização canônica impossível.
    """
    if algorithm not in SUPPORTED_FINGERPRINT_ALGORITHMS:
        raise ValueError(
            f"unsupported fingerprint algorithm: {algorithm!r} "
            f"(expected one of {SUPPORTED_FINGERPRINT_ALGORITHMS})"
        )

    return hashlib.new(algorithm, canonical_bytes(port_forward)).hexdigest()
