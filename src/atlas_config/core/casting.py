# src/atlas_config/core/casting.py
"""
Conversão de valores de variáveis de ambiente para o tipo declarado.

Política de conversão (v1):
    - "number"  → int quando o texto é inteiro, float caso contrário
    - "boolean" → apenas "true", "false", "1" e "0" são aceitos
    - qualquer outro tipo (ou ausente) → string original, sem conversão

Invariantes:
    - A comparação de booleanos é feita sobre a string crua (case-sensitive)
    - String vazia nunca é um número válido
    - "nan" não é aceito como número
"""

import math
from typing import Optional, Union

from .errors import ConfigCastError

CastResult = Union[str, int, float, bool]

NUMBER = "number"
BOOLEAN = "boolean"

_TRUE_VALUES = ("true", "1")
_FALSE_VALUES = ("false", "0")


def _to_number(raw: str) -> Union[int, float]:
    # int() e float() aceitam "1_000"
    if "_" in raw:
        raise ConfigCastError(NUMBER, raw)

    try:
        return int(raw)
    except ValueError:
        pass

    try:
        result = float(raw)
    except ValueError:
        raise ConfigCastError(NUMBER, raw) from None

    if math.isnan(result):
        raise ConfigCastError(NUMBER, raw)

    return result


def _to_boolean(raw: str) -> bool:
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ConfigCastError(BOOLEAN, raw)


def cast_value(type_name: Optional[str], raw: str) -> CastResult:
    """
    Converte `raw` para o tipo declarado em `type_name`.

    Args:
        type_name: Tipo declarado no `env_mapping` ("number", "boolean"
            ou qualquer outro valor para manter a string).
        raw: Valor cru lido do ambiente.

    Returns:
        O valor convertido.

    Raises:
        ConfigCastError: Se o valor não for compatível com o tipo declarado.
    """
    if type_name == NUMBER:
        return _to_number(raw)
    if type_name == BOOLEAN:
        return _to_boolean(raw)
    return raw
