# src/workspace_profiles/entity/query.py
"""
Saved query: template de requisição salvo para um par serviço/método.

É a entidade colaboradora referenciada por `ServerProfile.request` e por
`ServerUpdateRequest.request`.
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from workspace_profiles.core.fields import get_mapping, get_str, get_str_list, require_mapping


@dataclass(frozen=True)
class SavedQuery:
    """Template de requisição (input + metadata) de um método gRPC."""

    name: str = ""
    description: str = ""
    service: str = ""
    method: str = ""
    # JSON livre: fora do hash, exposto como view somente-leitura
    input: Mapping[str, Any] = field(default_factory=dict, hash=False)
    metadata: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.input, MappingProxyType):
            object.__setattr__(self, "input", MappingProxyType(dict(self.input)))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "service": self.service,
            "method": self.method,
            "input": deepcopy(dict(self.input)),
            "metadata": list(self.metadata),
        }


def decode_saved_query(data: Mapping[str, Any]) -> SavedQuery:
    data = require_mapping(data, key="request")
    return SavedQuery(
        name=get_str(data, "name"),
        description=get_str(data, "description"),
        service=get_str(data, "service"),
        method=get_str(data, "method"),
        # input é JSON livre; cópia profunda isola a entidade do payload
        input=deepcopy(get_mapping(data, "input")),
        metadata=get_str_list(data, "metadata"),
    )
