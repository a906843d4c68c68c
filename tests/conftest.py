# tests/conftest.py
"""
Fixtures compartilhados para testes do Workspace Profiles.

Este módulo define fixtures reutilizáveis que fornecem:
- payloads de servidor semelhantes aos produzidos pela UI
- payloads de port-forward e auth
- configurações YAML mínimas para o decoder

Decisões arquiteturais:
    - Payloads são dicionários puros, como após `json.loads`
    - Números inteiros chegam como float, igual ao decoder JSON da UI
    - Cada fixture retorna um objeto novo (testes podem mutar livremente)

Invariantes:
    - Nenhuma fixture realiza I/O
    - Nenhuma fixture contém lógica de domínio
"""

import pytest


@pytest.fixture
def full_server_payload() -> dict:
    """
    Payload completo de criação/edição de servidor (todas as chaves).

    Returns:
        dict: payload com identidade, perfil, auth, k8s e saved queries.
    """
    return {
        "id": 12.0,
        "folder_id": 3.0,
        "title": "Billing (staging)",
        "addr": "billing.staging.internal:443",
        "use_reflection": False,
        "proto_files": ["/protos/billing/v1/billing.proto", "/protos/common/money.proto"],
        "import_path": ["/protos"],
        "no_tls": False,
        "insecure": True,
        "root_certificate": "/etc/ssl/staging-ca.pem",
        "client_certificate": "/etc/ssl/client.pem",
        "client_key": "/etc/ssl/client.key",
        "request": {
            "billing.v1.Invoices": {
                "Get": {
                    "name": "get invoice 42",
                    "service": "billing.v1.Invoices",
                    "method": "Get",
                    "input": {"id": 42, "expand": ["lines"]},
                    "metadata": ["x-tenant: acme"],
                },
            },
        },
        "auth": {
            "type": "bearer",
            "token": "s3cr3t",
            "header_prefix": "Bearer",
        },
        "k8s": {
            "enabled": True,
            "kube_config_file": "~/.kube/config",
            "namespace": "billing",
            "target": "svc/billing-api",
            "local_port": 50051.0,
            "remote_port": 8443.0,
        },
    }


@pytest.fixture
def k8s_payload() -> dict:
    return {"enabled": True, "target": "pod/x", "local_port": 8080, "remote_port": 80}


@pytest.fixture
def decoder_settings_yaml() -> str:
    return """\
decoder:
  strict_saved_query: false
  fingerprint_algorithm: md5
"""
