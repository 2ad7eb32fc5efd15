# src/atlas_config/core/paths.py
"""
Resolução de nomes lógicos de configuração para arquivos concretos.

Um nome lógico (ex.: `conf/base`) não carrega extensão. A resolução
testa `.yaml` primeiro e, caso o arquivo não seja legível, assume `.yml`
sem nova verificação: a eventual ausência é reportada na leitura.

Invariantes:
    - Caminhos que já possuem extensão são retornados sem alteração
    - O único efeito colateral é uma verificação de acesso de leitura
"""

import os
from pathlib import Path
from typing import Union

PathLike = Union[str, os.PathLike]


def resolve_config_path(logical_path: PathLike) -> Path:
    path = Path(logical_path)
    if path.suffix:
        return path

    candidate = path.with_name(path.name + ".yaml")
    if os.access(candidate, os.R_OK):
        return candidate

    return path.with_name(path.name + ".yml")
