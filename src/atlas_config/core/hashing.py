# src/atlas_config/core/hashing.py
"""
Hashing canônico da configuração carregada.

O hash representa a identidade estrutural da árvore final e é registrado
pelo store após cada `load()` bem-sucedido, permitindo comparar
configurações entre processos e ambientes.

Política de hashing (v1):
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Codificação UTF-8
    - SHA-256

Invariantes:
    - Árvores estruturalmente equivalentes produzem o mesmo hash,
      independentemente da ordem original das chaves
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
"""

import hashlib
import json
from typing import Any, Dict


def _stringify_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {str(k): _stringify_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_stringify_keys(v) for v in value]
    return value


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera um hash SHA-256 determinístico da árvore de configuração.

    Chaves não textuais (ex.: `404:` no YAML) são convertidas para string
    antes da serialização; valores não serializáveis em JSON (ex.: datas)
    são representados por `str()`.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """

    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        _stringify_keys(config),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
