# src/workspace_profiles/core/config/settings.py
"""
Configurações tipadas do decoder.

`DecoderSettings` concentra as decisões de política que não pertencem ao
payload:

    - strict_saved_query: falha ao decodificar o saved query de um
      ServerUpdateRequest é propagada (True, padrão) ou ignorada com
      warning (False, modo best-effort)
    - fingerprint_algorithm: algoritmo do fingerprint do port-forward
      ("sha256" padrão, "md5" para compatibilidade com digests de 32 chars)

Formato do arquivo (YAML ou JSON):

    decoder:
      strict_saved_query: true
      fingerprint_algorithm: sha256
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import ConfigTypeConflictError, InvalidSettingError
from .loader import load_config

log = logging.getLogger(__name__)


SUPPORTED_FINGERPRINT_ALGORITHMS = ("sha256", "md5")

DEFAULT_SETTINGS: Dict[str, Any] = {
    "decoder": {
        "strict_saved_query": True,
        "fingerprint_algorithm": "sha256",
    }
}


@dataclass(frozen=True)
class DecoderSettings:
    """Política de decodificação e fingerprint (imutável)."""

    strict_saved_query: bool = True
    fingerprint_algorithm: str = "sha256"

    def __post_init__(self) -> None:
        if not isinstance(self.strict_saved_query, bool):
            raise InvalidSettingError("decoder.strict_saved_query must be boolean")
        if self.fingerprint_algorithm not in SUPPORTED_FINGERPRINT_ALGORITHMS:
            raise InvalidSettingError(
                "decoder.fingerprint_algorithm must be one of "
                f"{SUPPORTED_FINGERPRINT_ALGORITHMS}, got {self.fingerprint_algorithm!r}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "decoder": {
                "strict_saved_query": self.strict_saved_query,
                "fingerprint_algorithm": self.fingerprint_algorithm,
            }
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DecoderSettings":
        section = data.get("decoder")
        if not isinstance(section, dict):
            raise InvalidSettingError("decoder section must be a mapping")

        known = set(DEFAULT_SETTINGS["decoder"])
        unknown = sorted(set(section) - known)
        if unknown:
            raise InvalidSettingError(f"unknown decoder settings: {unknown}")

        return cls(**section)


def load_settings(
    *,
    path: Optional[str] = None,
    local_path: Optional[str] = None,
) -> DecoderSettings:
    """
    Resolve `DecoderSettings` a partir dos defaults embutidos.

    Ordem de precedência (menor → maior):
        1. DEFAULT_SETTINGS
        2. `path` (obrigatório existir quando informado)
        3. `local_path` (ignorado quando não existe)

    Raises:
        InvalidSettingError: tipo ou valor inválido (inclui conflito de tipo
            com os defaults durante o merge) e chaves desconhecidas.
        ConfigError: demais falhas de carregamento.
    """
    try:
        effective = load_config(DEFAULT_SETTINGS, path=path, local_path=local_path)
    except ConfigTypeConflictError as e:
        raise InvalidSettingError(str(e)) from e

    settings = DecoderSettings.from_dict(effective)
    log.debug("resolved decoder settings: %s", settings.to_dict()["decoder"])
    return settings
