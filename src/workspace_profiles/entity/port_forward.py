# src/workspace_profiles/entity/port_forward.py
"""Sub-entidade de port-forward (túnel k8s) do servidor."""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Mapping

from workspace_profiles.core.fields import get_bool, get_int64, get_str, require_mapping


@dataclass(frozen=True)
class PortForward:
    """
    Parâmetros do túnel local → remoto usado para alcançar o servidor.

    Campos:
    - enabled: túnel ativo
    - kube_config_file: kubeconfig usado para abrir o túnel
    - namespace: namespace do alvo
    - target: recurso alvo (ex.: "pod/api-0", "svc/api")
    - local_port: porta local escutada
    - remote_port: porta no alvo
    """

    enabled: bool = False
    kube_config_file: str = ""
    namespace: str = ""
    target: str = ""
    local_port: int = 0
    remote_port: int = 0

    def to_dict(self) -> Dict[str, Any]:
        # todos os campos sempre presentes: é a forma usada no fingerprint
        return asdict(self)


def decode_port_forward(data: Mapping[str, Any]) -> PortForward:
    data = require_mapping(data, key="k8s")
    return PortForward(
        enabled=get_bool(data, "enabled"),
        kube_config_file=get_str(data, "kube_config_file"),
        namespace=get_str(data, "namespace"),
        target=get_str(data, "target"),
        local_port=get_int64(data, "local_port"),
        remote_port=get_int64(data, "remote_port"),
    )
