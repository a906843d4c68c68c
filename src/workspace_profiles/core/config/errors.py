# src/workspace_profiles/core/config/errors.py
"""
Exceções canônicas da camada de configuração do decoder.

Este módulo define a hierarquia de exceções utilizadas durante o
carregamento, merge e validação das configurações do decoder
(`DecoderSettings`).

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro são claras e direcionadas ao operador

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção de configuração é um `DecodeError` de payload

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende dos decoders de entidade
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do decoder.

    Esta hierarquia permite distinguir falhas de configuração do processo
    (arquivo ausente, formato inválido) de falhas de decodificação de
    payloads vindos da UI.
    """


class ConfigFileNotFoundError(ConfigError):
    """
    Exceção levantada quando um arquivo de configuração obrigatório
    não é encontrado no caminho especificado.

    Limites explícitos:
        - Não tenta inferir ou criar o arquivo automaticamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz da configuração
    não é um dicionário (`dict`).
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"decoder": {"strict_saved_query": true}}
        - override: {"decoder": "lenient"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """


class InvalidSettingError(ConfigError):
    """
    Exceção levantada quando uma chave de `decoder` é desconhecida
    ou possui tipo/valor inválido.
    """
