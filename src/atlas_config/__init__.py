# src/atlas_config/__init__.py
"""
Atlas Config — configuração em camadas para processos Python.

A configuração de um processo é resolvida a partir de:
    - `base.yaml` (obrigatório) no diretório `CONF_DIR` (default `./conf`)
    - arquivos extras listados em `CONF_FILES`, em ordem de precedência
    - overrides de variáveis de ambiente declarados em `env_mapping.yaml`

Uso típico:

    import atlas_config

    port = atlas_config.get("db.port")

O facade deste módulo opera sobre um único `ConfigStore` por processo.
O primeiro acesso (`get`, `set` ou `dump`) executa `load()` uma vez;
chamadas explícitas de `load()` reexecutam o pipeline do zero.

Para testes ou múltiplas instâncias isoladas, use `ConfigStore`
diretamente.
"""

from typing import Any, Dict, Mapping, Optional

from .core import (
    ConfigCastError,
    ConfigError,
    ConfigStore,
    InvalidConfigRootTypeError,
    InvalidEnvMappingError,
    LoaderSettings,
    MissingConfigFileError,
)

_default_store = ConfigStore()


def default_store() -> ConfigStore:
    """Retorna o store do processo, carregando-o no primeiro acesso."""
    if not _default_store.loaded:
        _default_store.load()
    return _default_store


def get(path: str, default: Any = None) -> Any:
    return default_store().get(path, default)


def set(path: str, value: Any) -> None:  # noqa: A001
    default_store().set(path, value)


def dump() -> Dict[str, Any]:
    return default_store().dump()


def load(
    settings: Optional[LoaderSettings] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    return _default_store.load(settings=settings, environ=environ)


__all__ = [
    "ConfigCastError",
    "ConfigError",
    "ConfigStore",
    "InvalidConfigRootTypeError",
    "InvalidEnvMappingError",
    "LoaderSettings",
    "MissingConfigFileError",
    "default_store",
    "dump",
    "get",
    "load",
    "set",
]
