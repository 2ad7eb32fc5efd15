# src/atlas_config/core/keypath.py
"""
Acesso por caminho pontuado (dotted path) à árvore de configuração.

Sintaxe suportada:
    - `db.port`            → chaves aninhadas
    - `servers[0].host`    → índice de lista
    - `matrix[1][0]`       → índices consecutivos

Decisões arquiteturais:
    - `get_path` nunca levanta erro para caminhos ausentes
    - `set_path` cria containers intermediários (dict, ou list quando o
      próximo segmento é um índice)
    - `unset_path` remove a chave de um dict; em listas o elemento vira
      `None`, preservando os índices seguintes. Ancestrais vazios não
      são podados
    - Segmentos só com dígitos (`a.0`) são tratados como índices ao criar
      containers, como em `a[0]`

Limites explícitos:
    - Não escapa pontos ou colchetes dentro de chaves
    - Não valida tipos de valores
"""

import re
from typing import Any, List, Union

Segment = Union[str, int]

_SEGMENT_RE = re.compile(r"([^.\[\]]+)|\[(\d+)\]")

_MISSING = object()


def parse_key_path(path: str) -> List[Segment]:
    """
    Converte um dotted path em uma lista de segmentos.

    Segmentos entre colchetes viram `int`; os demais, `str`.

    Raises:
        ValueError: Se o caminho for vazio.
    """
    segments: List[Segment] = []
    for match in _SEGMENT_RE.finditer(path):
        key, index = match.groups()
        segments.append(int(index) if index is not None else key)

    if not segments:
        raise ValueError(f"Caminho de configuração vazio: {path!r}")

    return segments


def _child(node: Any, segment: Segment) -> Any:
    if isinstance(node, dict):
        if segment in node:
            return node[segment]
        # `a.0` também endereça listas, como em `a[0]`
        return node.get(str(segment), _MISSING)
    if isinstance(node, list):
        try:
            index = int(segment)
        except ValueError:
            return _MISSING
        if 0 <= index < len(node):
            return node[index]
    return _MISSING


def _is_index(segment: Segment) -> bool:
    return isinstance(segment, int) or segment.isdigit()


def get_path(tree: Any, path: str, default: Any = None) -> Any:
    if not _SEGMENT_RE.search(path):
        return default

    node = tree
    for segment in parse_key_path(path):
        node = _child(node, segment)
        if node is _MISSING:
            return default
    return node


def _new_container(next_segment: Segment) -> Any:
    return [] if _is_index(next_segment) else {}


def _assign(node: Any, segment: Segment, value: Any) -> None:
    if isinstance(node, list):
        index = int(segment)
        if index >= len(node):
            node.extend([None] * (index + 1 - len(node)))
        node[index] = value
    else:
        node[str(segment)] = value


def set_path(tree: dict, path: str, value: Any) -> None:
    """
    Atribui `value` em `path`, criando containers intermediários.

    Um valor intermediário que não é container (escalar ou None)
    é substituído por um container novo.
    """
    segments = parse_key_path(path)
    node: Any = tree

    for segment, next_segment in zip(segments, segments[1:]):
        child = _child(node, segment)
        if not isinstance(child, (dict, list)):
            child = _new_container(next_segment)
            _assign(node, segment, child)
        elif isinstance(child, list) and not _is_index(next_segment):
            child = {}
            _assign(node, segment, child)
        node = child

    _assign(node, segments[-1], value)


def unset_path(tree: dict, path: str) -> bool:
    """
    Remove `path` da árvore.

    Returns:
        bool: True se algo foi removido, False se o caminho não existia.
    """
    segments = parse_key_path(path)
    parent = tree
    for segment in segments[:-1]:
        parent = _child(parent, segment)
        if parent is _MISSING:
            return False

    last = segments[-1]
    if isinstance(parent, dict):
        key = last if last in parent else str(last)
        if key in parent:
            del parent[key]
            return True
        return False

    if isinstance(parent, list):
        try:
            index = int(last)
        except ValueError:
            return False
        if 0 <= index < len(parent):
            parent[index] = None
            return True

    return False
