# src/workspace_profiles/core/config/loader.py
"""
Loader de configuração do decoder.

Este módulo carrega arquivos de configuração (YAML ou JSON), valida sua
estrutura mínima e resolve a configuração efetiva via deep-merge.

A configuração é resolvida a partir de:
    - defaults embutidos em memória
    - um arquivo de configuração (obrigatório quando informado)
    - um arquivo local de overrides (opcional; ignorado se não existir)

Princípios fundamentais:
    - Configuração é declarativa e explícita
    - Erros estruturais são tratados como falhas fatais
    - A mesma entrada sempre produz a mesma configuração final

Limites explícitos:
    - Não valida o significado das chaves (ver `settings.py`)
    - Não lê variáveis de ambiente
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml  # PyYAML

from .errors import (
    ConfigFileNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .merge import deep_merge

log = logging.getLogger(__name__)


def load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida sua estrutura básica.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Arquivos vazios são interpretados como dicionários vazios.

    Args:
        path (Path): Caminho para o arquivo de configuração.

    Returns:
        Dict[str, Any]: Conteúdo do arquivo carregado como dicionário.

    Raises:
        ConfigFileNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise ConfigFileNotFoundError(f"config file not found: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"unsupported config format: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"config root must be a mapping, got {type(data).__name__}"
        )

    return data


def load_config(
    base: Dict[str, Any],
    *,
    path: Optional[str] = None,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Resolve a configuração efetiva sobre os defaults em memória.

    Política de resolução (menor → maior precedência):
        - `base`: defaults embutidos (nunca mutados)
        - `path`: obrigatório existir quando informado
        - `local_path`: opcional; ignorado quando não existe

    Raises:
        ConfigFileNotFoundError: Se `path` não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        ConfigTypeConflictError: Se ocorrer conflito estrutural durante o merge.
    """
    effective = deep_merge(base, {})

    if path is not None:
        effective = deep_merge(effective, load_file(Path(path)))
        log.debug("merged config file %s", path)

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, load_file(local_file))
            log.debug("merged local config overrides from %s", local_file)
        else:
            log.debug("local config %s not found, skipping", local_file)

    if path is None and local_path is None:
        log.debug("no config files given, using built-in defaults")

    return effective
