# src/atlas_config/core/env_overrides.py
"""
Overrides de configuração a partir de variáveis de ambiente.

O arquivo `env_mapping` associa nomes de variáveis de ambiente a destinos
na árvore de configuração. Cada entrada assume uma de duas formas:

    DB_HOST: db.host                 # mapeamento simples (string crua)
    DB_PORT:                         # mapeamento avançado
      key: db.port
      type: number

Decisões arquiteturais:
    - A forma de cada entrada é decidida uma única vez, no parse
      (`SimpleMapping` | `AdvancedMapping`), e não no momento do uso
    - Variáveis ausentes do ambiente não produzem nenhuma entrada
    - Quando duas entradas apontam para o mesmo destino, vence a última
      na ordem de declaração do arquivo

Invariantes:
    - A árvore de overrides é construída do zero a cada chamada
    - Apenas variáveis declaradas no mapeamento são consultadas

Limites explícitos:
    - Não lê arquivos
    - Não realiza merge com a configuração existente
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from .casting import cast_value
from .errors import ConfigCastError, InvalidEnvMappingError
from .keypath import set_path


@dataclass(frozen=True)
class SimpleMapping:
    """Destino da variável; o valor é usado como string crua."""

    key: str


@dataclass(frozen=True)
class AdvancedMapping:
    """Destino da variável com tipo declarado para conversão."""

    key: str
    type: Optional[str] = None


EnvMapping = Union[SimpleMapping, AdvancedMapping]


def _parse_entry(env_var: str, entry: Any) -> EnvMapping:
    if isinstance(entry, str):
        return SimpleMapping(key=entry)

    if isinstance(entry, dict) and isinstance(entry.get("key"), str):
        type_name = entry.get("type")
        return AdvancedMapping(
            key=entry["key"],
            type=None if type_name is None else str(type_name),
        )

    raise InvalidEnvMappingError(
        f"Entrada inválida no env_mapping para {env_var}: esperado string "
        f"ou {{key, type}}, recebido: {entry!r}"
    )


def parse_env_mapping(tree: Mapping[str, Any]) -> Dict[str, EnvMapping]:
    """
    Converte a árvore do arquivo `env_mapping` em entradas tipadas.

    A ordem de declaração do arquivo é preservada.

    Raises:
        InvalidEnvMappingError: Se alguma entrada não tiver forma reconhecida.
    """
    return {
        str(env_var): _parse_entry(str(env_var), entry)
        for env_var, entry in tree.items()
    }


def resolve_env_overrides(
    mappings: Mapping[str, EnvMapping],
    environ: Mapping[str, str],
) -> Dict[str, Any]:
    """
    Produz a árvore de overrides a partir do ambiente informado.

    Args:
        mappings: Entradas tipadas, normalmente vindas de `parse_env_mapping`.
        environ: Ambiente do processo (ex.: `os.environ`).

    Returns:
        Dict[str, Any]: Árvore contendo apenas os destinos cujas variáveis
        estão presentes no ambiente.

    Raises:
        ConfigCastError: Se um valor não puder ser convertido para o tipo
            declarado. O erro identifica a variável de ambiente.
    """
    overrides: Dict[str, Any] = {}

    for env_var, mapping in mappings.items():
        raw = environ.get(env_var)
        if raw is None:
            continue

        if isinstance(mapping, AdvancedMapping):
            try:
                value = cast_value(mapping.type, raw)
            except ConfigCastError as e:
                raise e.for_env_var(env_var) from e
        else:
            value = raw

        set_path(overrides, mapping.key, value)

    return overrides
