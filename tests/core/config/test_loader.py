# tests/core/config/test_loader.py
"""
Testes do loader de configuração (YAML/JSON + deep-merge).

Os testes asseguram que:
- os defaults em memória são a base e nunca são mutados
- o arquivo de configuração é obrigatório quando informado
- o arquivo local é opcional e tem precedência
- arquivos vazios equivalem a dicionário vazio
- raiz não-dict e extensões desconhecidas são erro explícito
"""

import json
import logging
from pathlib import Path

import pytest

from workspace_profiles.core.config.errors import (
    ConfigFileNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from workspace_profiles.core.config.loader import load_config, load_file


BASE = {"decoder": {"strict_saved_query": True, "fingerprint_algorithm": "sha256"}}


def test_missing_config_file_raises(tmp_path: Path):
    with pytest.raises(ConfigFileNotFoundError):
        load_config(BASE, path=str(tmp_path / "decoder.yaml"))


def test_no_files_returns_copy_of_base():
    cfg = load_config(BASE)
    assert cfg == BASE
    cfg["decoder"]["fingerprint_algorithm"] = "md5"
    assert BASE["decoder"]["fingerprint_algorithm"] == "sha256"


def test_missing_local_is_ok(tmp_path: Path, decoder_settings_yaml):
    path = tmp_path / "decoder.yaml"
    path.write_text(decoder_settings_yaml, encoding="utf-8")

    cfg = load_config(BASE, path=str(path), local_path=str(tmp_path / "local.yaml"))
    assert cfg["decoder"]["fingerprint_algorithm"] == "md5"


def test_file_then_local_precedence(tmp_path: Path, decoder_settings_yaml):
    path = tmp_path / "decoder.yaml"
    local = tmp_path / "local.json"
    path.write_text(decoder_settings_yaml, encoding="utf-8")
    local.write_text(json.dumps({"decoder": {"fingerprint_algorithm": "sha256"}}), encoding="utf-8")

    cfg = load_config(BASE, path=str(path), local_path=str(local))
    assert cfg == {
        "decoder": {
            "strict_saved_query": False,
            "fingerprint_algorithm": "sha256",
        }
    }


def test_empty_file_is_empty_mapping(tmp_path: Path):
    empty = tmp_path / "empty.yml"
    empty.write_text("", encoding="utf-8")
    assert load_file(empty) == {}


def test_invalid_root_type_raises(tmp_path: Path):
    path = tmp_path / "decoder.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(InvalidConfigRootTypeError):
        load_config(BASE, path=str(path))


def test_unsupported_extension_raises(tmp_path: Path):
    path = tmp_path / "decoder.toml"
    path.write_text("[decoder]\n", encoding="utf-8")
    with pytest.raises(UnsupportedConfigFormatError):
        load_config(BASE, path=str(path))


def test_no_files_logs_defaults_only(caplog):
    with caplog.at_level(logging.DEBUG, logger="workspace_profiles.core.config.loader"):
        load_config(BASE)
    assert "using built-in defaults" in caplog.text
