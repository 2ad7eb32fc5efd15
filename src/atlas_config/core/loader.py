# src/atlas_config/core/loader.py
"""
Loader canônico de configuração do Atlas Config.

A configuração é resolvida em três estágios, sempre nesta ordem:

    1. base        → `<conf_dir>/base.yaml|.yml` (obrigatório)
    2. arquivos    → cada nome listado em `CONF_FILES` (obrigatórios
                     quando listados), aplicados na ordem da lista
    3. ambiente    → `<conf_dir>/env_mapping.yaml|.yml` (opcional);
                     quando presente, os overrides de ambiente vencem
                     toda configuração vinda de arquivos

Variáveis de ambiente do próprio loader:
    - CONF_DIR:   diretório de configuração (default: `<cwd>/conf`)
    - CONF_FILES: lista separada por vírgulas de arquivos extras

Decisões arquiteturais:
    - Cada estágio termina antes do próximo começar; não há retry
    - Qualquer erro é fatal e interrompe o carregamento imediatamente
    - Nenhum estado global é mantido aqui; o resultado é devolvido ao
      chamador (normalmente o `ConfigStore`)
    - Entradas repetidas em `CONF_FILES` não são deduplicadas: o arquivo
      é aplicado a cada ocorrência

Invariantes:
    - O resultado é sempre um dicionário puro (`dict`)
    - Arquivos posteriores na lista têm precedência sobre os anteriores
      e sobre a base
    - `base` nunca é aplicado como arquivo extra

Limites explícitos:
    - Não valida schema
    - Não observa alterações em disco (sem live-reload)
    - Não suporta fontes remotas
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional

from .env_overrides import parse_env_mapping, resolve_env_overrides
from .merge import deep_merge
from .reader import read_optional, read_required

CONF_DIR_ENV = "CONF_DIR"
CONF_FILES_ENV = "CONF_FILES"

DEFAULT_CONF_DIRNAME = "conf"
BASE_NAME = "base"
ENV_MAPPING_NAME = "env_mapping"

LogFn = Callable[..., None]


def _clean_conf_files(names: List[str]) -> List[str]:
    cleaned = (name.strip() for name in names)
    return [name for name in cleaned if name and name != BASE_NAME]


def parse_conf_files(raw: Optional[str]) -> List[str]:
    """
    Interpreta o valor de `CONF_FILES`.

    Exemplo:
        "local, base ,,local" → ["local", "local"]
    """
    if not raw:
        return []
    return _clean_conf_files(raw.split(","))


@dataclass
class LoaderSettings:
    """
    Parâmetros de um carregamento.

    Campos:
    - conf_dir: diretório onde vivem `base`, extras e `env_mapping`
    - conf_files: nomes lógicos dos arquivos extras, em ordem de precedência
    """

    conf_dir: Path
    conf_files: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.conf_dir = Path(self.conf_dir)
        self.conf_files = _clean_conf_files(list(self.conf_files))

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        cwd: Optional[Path] = None,
    ) -> "LoaderSettings":
        env = os.environ if environ is None else environ

        conf_dir = env.get(CONF_DIR_ENV)
        if not conf_dir:
            conf_dir = Path.cwd() if cwd is None else Path(cwd)
            conf_dir = conf_dir / DEFAULT_CONF_DIRNAME

        return cls(
            conf_dir=Path(conf_dir),
            conf_files=parse_conf_files(env.get(CONF_FILES_ENV)),
        )


def _noop_log(**_: Any) -> None:
    return None


def load_config(
    *,
    settings: Optional[LoaderSettings] = None,
    environ: Optional[Mapping[str, str]] = None,
    log: Optional[LogFn] = None,
) -> Dict[str, Any]:
    """
    Executa o pipeline base → arquivos extras → overrides de ambiente.

    Args:
        settings (Optional[LoaderSettings]): Diretório e arquivos extras.
            Quando omitido, é derivado de `environ` via `LoaderSettings.from_env`.
        environ (Optional[Mapping[str, str]]): Ambiente usado para `CONF_DIR`,
            `CONF_FILES` e para os overrides. Default: `os.environ`.
        log (Optional[LogFn]): Callback de eventos estruturados, chamado com
            `stage`, `level`, `message` e campos extras.

    Returns:
        Dict[str, Any]: Configuração final resolvida.

    Raises:
        MissingConfigFileError: Se `base` ou um arquivo extra não existir.
        InvalidConfigRootTypeError: Se um arquivo não tiver raiz `dict`.
        InvalidEnvMappingError: Se o `env_mapping` tiver entrada inválida.
        ConfigCastError: Se um valor de ambiente não puder ser convertido.
    """
    env = os.environ if environ is None else environ
    if settings is None:
        settings = LoaderSettings.from_env(env)
    emit = log or _noop_log

    # 1. base (obrigatório)
    config = read_required(settings.conf_dir / BASE_NAME)
    emit(stage="base", level="INFO", message="base carregado", conf_dir=str(settings.conf_dir))

    # 2. arquivos extras (obrigatórios quando listados)
    for name in settings.conf_files:
        overlay = read_required(settings.conf_dir / name)
        config = deep_merge(config, overlay)
        emit(stage="files", level="INFO", message=f"arquivo {name} aplicado", file=name)

    # 3. overrides de ambiente (opcional)
    mapping_tree = read_optional(settings.conf_dir / ENV_MAPPING_NAME)
    if mapping_tree is None:
        emit(stage="env", level="INFO", message="env_mapping ausente, overrides ignorados")
    else:
        mappings = parse_env_mapping(mapping_tree)
        overrides = resolve_env_overrides(mappings, env)
        config = deep_merge(config, overrides)
        emit(
            stage="env",
            level="INFO",
            message="overrides de ambiente aplicados",
            variables=[name for name in mappings if name in env],
        )

    return config
