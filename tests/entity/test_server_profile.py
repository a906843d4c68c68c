# tests/entity/test_server_profile.py
"""
Testes do decoder de `ServerProfile` e `ServerIdentity`.

Os testes asseguram que:
- payload None falha com EmptyPayload
- chaves omitidas produzem defaults e sub-entidades ausentes
- `k8s`/`auth` vazios são "ausentes", nunca presentes-com-defaults
- falhas em sub-entidades abortam a chamada com SubEntityDecodeFailure
- `to_dict` é decodificável de volta para a mesma entidade
"""

from __future__ import annotations

import pytest

from workspace_profiles.core.exceptions import (
    EmptyPayload,
    SubEntityDecodeFailure,
    TypeMismatch,
    UnsupportedAuthScheme,
)
from workspace_profiles.entity.auth import Auth, AuthScheme
from workspace_profiles.entity.port_forward import PortForward
from workspace_profiles.entity.query import SavedQuery
from workspace_profiles.entity.server import (
    ServerIdentity,
    ServerProfile,
    decode_server_identity,
    decode_server_profile,
    has_active_port_forward,
)


@pytest.mark.parametrize("decode", [decode_server_profile, decode_server_identity])
def test_none_payload_raises_empty_payload(decode):
    with pytest.raises(EmptyPayload):
        decode(None)


@pytest.mark.parametrize("decode", [decode_server_profile, decode_server_identity])
def test_non_mapping_payload_raises_type_mismatch(decode):
    with pytest.raises(TypeMismatch) as exc:
        decode(["addr", "localhost:50051"])
    assert exc.value.key == "$"


def test_empty_payload_yields_defaults():
    identity = decode_server_identity({})

    assert identity == ServerIdentity()
    assert identity.id == 0
    assert identity.profile == ServerProfile()
    assert identity.profile.auth is None
    assert identity.profile.port_forward is None
    assert identity.profile.request == {}
    assert not has_active_port_forward(identity.profile)


def test_all_null_values_yield_defaults():
    keys = [
        "id", "folder_id", "title", "addr", "use_reflection", "proto_files",
        "import_path", "no_tls", "insecure", "root_certificate",
        "client_certificate", "client_key", "request", "auth", "k8s",
    ]
    assert decode_server_identity({k: None for k in keys}) == ServerIdentity()


def test_prod_scenario_with_empty_k8s():
    identity = decode_server_identity(
        {"id": 5, "title": "Prod", "addr": "localhost:50051", "k8s": {}}
    )

    assert identity.id == 5
    assert identity.title == "Prod"
    assert identity.profile.addr == "localhost:50051"
    assert identity.profile.port_forward is None
    assert has_active_port_forward(identity.profile) is False


def test_enabled_k8s_scenario(k8s_payload):
    profile = decode_server_profile({"k8s": k8s_payload})

    assert profile.port_forward == PortForward(
        enabled=True, target="pod/x", local_port=8080, remote_port=80
    )
    assert has_active_port_forward(profile) is True


def test_disabled_k8s_is_present_but_inactive(k8s_payload):
    k8s_payload["enabled"] = False
    profile = decode_server_profile({"k8s": k8s_payload})

    assert profile.port_forward is not None
    assert has_active_port_forward(profile) is False


def test_empty_auth_is_absent():
    assert decode_server_profile({"auth": {}}).auth is None


def test_full_payload(full_server_payload):
    identity = decode_server_identity(full_server_payload)
    profile = identity.profile

    assert (identity.id, identity.folder_id, identity.title) == (12, 3, "Billing (staging)")
    assert profile.addr == "billing.staging.internal:443"
    assert profile.proto_files == ("/protos/billing/v1/billing.proto", "/protos/common/money.proto")
    assert profile.import_path == ("/protos",)
    assert profile.insecure is True
    assert profile.no_tls is False
    assert profile.client_key == "/etc/ssl/client.key"
    assert profile.auth == Auth(scheme=AuthScheme.BEARER, token="s3cr3t", header_prefix="Bearer")
    assert profile.port_forward.local_port == 50051
    assert profile.port_forward.namespace == "billing"

    query = profile.request["billing.v1.Invoices"]["Get"]
    assert isinstance(query, SavedQuery)
    assert query.input == {"id": 42, "expand": ["lines"]}
    assert query.metadata == ("x-tenant: acme",)


def test_proto_files_non_list_is_type_mismatch():
    with pytest.raises(TypeMismatch) as exc:
        decode_server_profile({"proto_files": "/protos/a.proto"})
    assert exc.value.key == "proto_files"
    assert "proto_files" in str(exc.value)


def test_identity_id_wrong_type():
    with pytest.raises(TypeMismatch) as exc:
        decode_server_identity({"id": "5"})
    assert exc.value.key == "id"


def test_k8s_non_mapping_is_type_mismatch_on_outer_key():
    with pytest.raises(TypeMismatch) as exc:
        decode_server_profile({"k8s": "pod/x"})
    assert exc.value.key == "k8s"


def test_k8s_field_failure_is_tagged_sub_entity_failure():
    with pytest.raises(SubEntityDecodeFailure) as exc:
        decode_server_profile({"addr": "x:1", "k8s": {"local_port": "8080"}})

    err = exc.value
    assert err.entity == "k8s"
    assert isinstance(err.cause, TypeMismatch)
    assert err.cause.key == "local_port"
    assert err.__cause__ is err.cause


def test_auth_unknown_scheme_is_tagged_sub_entity_failure():
    with pytest.raises(SubEntityDecodeFailure) as exc:
        decode_server_profile({"auth": {"type": "kerberos"}})
    assert exc.value.entity == "auth"
    assert isinstance(exc.value.cause, UnsupportedAuthScheme)


def test_bad_saved_query_in_request_map_aborts():
    payload = {"request": {"svc.A": {"Do": {"metadata": "x-a: 1"}}}}
    with pytest.raises(SubEntityDecodeFailure) as exc:
        decode_server_profile(payload)
    assert exc.value.entity == "request.svc.A.Do"
    assert exc.value.cause.key == "metadata"


def test_request_map_skips_null_entries():
    payload = {"request": {"svc.A": {"Do": None, "Get": {"name": "g"}}, "svc.B": None}}
    profile = decode_server_profile(payload)
    assert list(profile.request) == ["svc.A"]
    assert list(profile.request["svc.A"]) == ["Get"]


def test_request_service_entry_must_be_mapping():
    with pytest.raises(TypeMismatch) as exc:
        decode_server_profile({"request": {"svc.A": ["Do"]}})
    assert exc.value.key == "request.svc.A"


def test_decode_does_not_mutate_payload(full_server_payload):
    import copy

    before = copy.deepcopy(full_server_payload)
    decode_server_identity(full_server_payload)
    assert full_server_payload == before


def test_each_decode_returns_fresh_entities(full_server_payload):
    a = decode_server_identity(full_server_payload)
    b = decode_server_identity(full_server_payload)
    assert a == b
    assert a is not b
    assert a.profile.request is not b.profile.request


def test_identity_round_trip(full_server_payload):
    identity = decode_server_identity(full_server_payload)
    assert decode_server_identity(identity.to_dict()) == identity


def test_profile_to_dict_omits_empty_scalars_but_keeps_sub_entity_keys():
    out = ServerProfile(addr="localhost:50051").to_dict()
    assert out == {"addr": "localhost:50051", "request": {}, "auth": None, "k8s": None}
    assert decode_server_profile(out) == ServerProfile(addr="localhost:50051")


def test_decoded_identity_is_hashable(full_server_payload):
    a = decode_server_identity(full_server_payload)
    b = decode_server_identity(full_server_payload)
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_request_map_is_read_only(full_server_payload):
    profile = decode_server_identity(full_server_payload).profile

    with pytest.raises(TypeError):
        profile.request["billing.v1.Invoices"]["Get"] = SavedQuery(name="tampered")
    with pytest.raises(TypeError):
        profile.request["other.v1.Svc"] = {}
    assert profile.request["billing.v1.Invoices"]["Get"].name != "tampered"
