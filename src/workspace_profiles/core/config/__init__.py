# src/workspace_profiles/core/config/__init__.py
"""
Camada de configuração do decoder.

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (YAML/JSON)
    - Resolução da configuração final via deep-merge determinístico
    - Materialização tipada em `DecoderSettings`

Limites explícitos:
    - Não decodifica payloads de entidade
    - Não depende de UI nem de transporte
"""

from .errors import (  # noqa: F401
    ConfigError,
    ConfigFileNotFoundError,
    ConfigTypeConflictError,
    InvalidConfigRootTypeError,
    InvalidSettingError,
    UnsupportedConfigFormatError,
)
from .loader import load_config, load_file  # noqa: F401
from .merge import deep_merge  # noqa: F401
from .settings import DEFAULT_SETTINGS, DecoderSettings, load_settings  # noqa: F401
