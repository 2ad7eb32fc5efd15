# src/atlas_config/core/reader.py
"""
Leitura de arquivos de configuração YAML.

Este módulo lê um único arquivo, identificado por nome lógico, e o
converte em uma árvore de configuração (`dict`).

Modos de leitura:
    - `read_required`: a ausência do arquivo é erro fatal
    - `read_optional`: a ausência do arquivo retorna `None`

Decisões arquiteturais:
    - A leitura é síncrona; cada arquivo é aberto, consumido e fechado
      dentro da operação
    - Arquivos vazios são interpretados como dicionários vazios
    - O conteúdo raiz deve ser um dicionário (`dict`)

Invariantes:
    - Apenas `FileNotFoundError` é convertido em `MissingConfigFileError`
    - Demais erros de I/O e erros de parse YAML propagam sem encapsulamento

Limites explícitos:
    - Não realiza merge
    - Não aplica overrides de ambiente
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml  # PyYAML

from .errors import InvalidConfigRootTypeError, MissingConfigFileError
from .paths import PathLike, resolve_config_path


def _parse_file(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict em {path}, recebido: {type(data).__name__}"
        )

    return data


def read_required(logical_path: PathLike) -> Dict[str, Any]:
    """
    Lê um arquivo de configuração obrigatório.

    Args:
        logical_path: Caminho lógico, com ou sem extensão.

    Returns:
        Dict[str, Any]: Árvore de configuração do arquivo.

    Raises:
        MissingConfigFileError: Se o arquivo resolvido não existir.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    path = resolve_config_path(logical_path)
    try:
        return _parse_file(path)
    except FileNotFoundError as e:
        raise MissingConfigFileError(path) from e


def read_optional(logical_path: PathLike) -> Optional[Dict[str, Any]]:
    """Como `read_required`, mas retorna `None` quando o arquivo não existe."""
    path = resolve_config_path(logical_path)
    try:
        return _parse_file(path)
    except FileNotFoundError:
        return None
