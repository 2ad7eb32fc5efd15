# src/atlas_config/core/__init__.py
"""
Core do Atlas Config.

Componentes:
    - paths          → resolução de nome lógico para arquivo (.yaml / .yml)
    - reader         → leitura obrigatória ou opcional de arquivos YAML
    - casting        → conversão de valores de ambiente (number / boolean)
    - env_overrides  → mapeamento de variáveis de ambiente para a árvore
    - merge          → deep-merge com sobrescrita total de listas
    - loader         → pipeline base → arquivos extras → ambiente
    - store          → árvore viva com get / set / dump / load
    - hashing        → identidade estrutural da configuração carregada
"""

from .errors import (
    ConfigCastError,
    ConfigError,
    InvalidConfigRootTypeError,
    InvalidEnvMappingError,
    MissingConfigFileError,
)
from .loader import LoaderSettings, load_config, parse_conf_files
from .merge import deep_merge
from .store import ConfigStore

__all__ = [
    "ConfigCastError",
    "ConfigError",
    "ConfigStore",
    "InvalidConfigRootTypeError",
    "InvalidEnvMappingError",
    "LoaderSettings",
    "MissingConfigFileError",
    "deep_merge",
    "load_config",
    "parse_conf_files",
]
