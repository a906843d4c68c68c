"""
Extração tipada de campos de payloads dinâmicos.

Este módulo implementa o acesso seguro a valores de um mapa
`Mapping[str, Any]` produzido por uma fronteira externa (UI/RPC), em geral
resultado de decodificação JSON genérica.

Cada função cobre exatamente um tipo semântico:
    - get_str       → str
    - get_bool      → bool
    - get_int64     → int (inteiro com sinal de 64 bits)
    - get_str_list  → Tuple[str, ...]
    - get_mapping   → Dict[str, Any]

Política de extração (v1):
    - chave ausente ou valor None → default (valor zero), sem erro
    - valor presente com tipo incorreto → TypeMismatch (fail fast)
    - float em campo inteiro → truncamento em direção a zero

Invariantes:
    - Nenhuma coerção implícita além do truncamento float → int
    - O mapa de entrada nunca é mutado
    - TypeMismatch sempre identifica a chave ofensora

Limites explícitos:
    - Não valida semântica (endereços, certificados, portas)
    - Não conhece entidades; apenas tipos
"""

from __future__ import annotations

import math
from typing import Any, Dict, Mapping, Optional, Tuple

from .exceptions import TypeMismatch


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    return type(value).__name__


def get_str(data: Mapping[str, Any], key: str, default: str = "") -> str:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise TypeMismatch(key=key, expected="string", actual=_type_name(value))
    return value


def get_bool(data: Mapping[str, Any], key: str, default: bool = False) -> bool:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise TypeMismatch(key=key, expected="boolean", actual=_type_name(value))
    return value


def get_int64(data: Mapping[str, Any], key: str, default: int = 0) -> int:
    """
    Extrai um inteiro de 64 bits.

    Números chegam como float quando o payload passou por um decoder JSON
    genérico; nesse caso o valor é truncado em direção a zero (`int()`),
    nunca arredondado.

    Raises:
        TypeMismatch: bool, str, float não finito ou valor fora do intervalo int64.
    """
    value = data.get(key)
    if value is None:
        return default

    # bool é subclasse de int em Python
    if isinstance(value, bool):
        raise TypeMismatch(key=key, expected="int64", actual=_type_name(value))

    if isinstance(value, float):
        if not math.isfinite(value):
            raise TypeMismatch(key=key, expected="int64", actual=f"float({value})")
        value = int(value)
    elif not isinstance(value, int):
        raise TypeMismatch(key=key, expected="int64", actual=_type_name(value))

    if value < INT64_MIN or value > INT64_MAX:
        raise TypeMismatch(key=key, expected="int64", actual="out-of-range integer")

    return value


def get_str_list(
    data: Mapping[str, Any],
    key: str,
    default: Optional[Tuple[str, ...]] = None,
) -> Tuple[str, ...]:
    value = data.get(key)
    if value is None:
        return default if default is not None else ()
    if not isinstance(value, (list, tuple)):
        raise TypeMismatch(key=key, expected="list of strings", actual=_type_name(value))

    for i, item in enumerate(value):
        if not isinstance(item, str):
            raise TypeMismatch(
                key=f"{key}[{i}]",
                expected="string",
                actual=_type_name(item),
            )
    return tuple(value)


def get_mapping(
    data: Mapping[str, Any],
    key: str,
    default: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    value = data.get(key)
    if value is None:
        return dict(default) if default is not None else {}
    if not isinstance(value, Mapping):
        raise TypeMismatch(key=key, expected="mapping", actual=_type_name(value))
    return dict(value)


def require_mapping(payload: Any, *, key: str = "$") -> Mapping[str, Any]:
    """Garante que o payload raiz (ou aninhado) é um mapa."""
    if not isinstance(payload, Mapping):
        raise TypeMismatch(key=key, expected="mapping", actual=_type_name(payload))
    return payload
