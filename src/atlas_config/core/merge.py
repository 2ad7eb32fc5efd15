# src/atlas_config/core/merge.py
"""
Deep-merge canônico de árvores de configuração.

Política de merge (v1):
    - dict + dict → merge recursivo por chave
    - list        → sobrescrita total (sem merge elemento a elemento)
    - escalar     → sobrescrita direta pelo overlay
    - tipos diferentes → o overlay substitui a base

Princípios fundamentais:
    - O merge é determinístico e puramente funcional
    - Nenhum input é mutado durante o processo

Invariantes:
    - Chaves ausentes do overlay são preservadas da base
    - A mesma entrada sempre produz a mesma saída

Limites explícitos:
    - Não carrega arquivos de configuração
    - Não realiza coerção de tipos
"""

from copy import deepcopy
from typing import Any, Dict


def deep_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """
    Realiza um deep-merge determinístico entre duas árvores de configuração.

    Esta função combina uma árvore base com um overlay (arquivo extra ou
    overrides de ambiente), produzindo uma nova estrutura sem mutar
    nenhum dos inputs. O chamador deve tratar o resultado como substituto
    da base anterior.

    Decisões arquiteturais:
        - Listas do overlay substituem integralmente as listas da base:
          um arquivo de override redefine a lista inteira
        - Divergência de tipo não é erro; o overlay sempre vence

    Args:
        base (Dict[str, Any]): Configuração acumulada até o momento.
        overlay (Dict[str, Any]): Configuração de maior precedência.

    Returns:
        Dict[str, Any]: Nova configuração resultante do deep-merge.

    Raises:
        TypeError: Se `base` ou `overlay` não forem dicionários.
    """

    if not isinstance(base, dict) or not isinstance(overlay, dict):
        raise TypeError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(overlay).__name__}"
        )

    result: Dict[str, Any] = deepcopy(base)

    for key, overlay_value in overlay.items():
        base_value = result.get(key)

        # dict -> merge recursivo
        if isinstance(base_value, dict) and isinstance(overlay_value, dict):
            result[key] = deep_merge(base_value, overlay_value)
            continue

        # list, escalar ou conflito de tipo -> sobrescrita
        result[key] = deepcopy(overlay_value)

    return result
