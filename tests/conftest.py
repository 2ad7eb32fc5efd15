# tests/conftest.py
"""
Fixtures compartilhados para testes do Atlas Config.

Este módulo define fixtures reutilizáveis que fornecem:
- conteúdos YAML mínimos e determinísticos (base, local, env_mapping)
- um diretório de configuração temporário (`conf_dir`)
- um helper para escrever arquivos nesse diretório

Decisões arquiteturais:
    - Todo I/O acontece sob `tmp_path`; nenhum teste lê o `./conf` real
    - O ambiente é injetado como `dict` explícito sempre que possível,
      evitando dependência de `os.environ`

Invariantes:
    - Fixtures retornam dados novos a cada teste
    - Nenhuma fixture executa `load()`
"""

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def base_yaml() -> str:
    """
    YAML de configuração base semelhante ao uso real.

    Contém mapas aninhados, uma lista e escalares de todos os tipos
    suportados, servindo de ponto de partida para merges e overrides.
    """

    return """\
app:
  name: atlas
  debug: false
db:
  host: localhost
  port: 5432
  options:
    pool: 5
servers:
  - host: a.internal
  - host: b.internal
features: [search, export]
"""


@pytest.fixture
def local_yaml() -> str:
    return """\
app:
  debug: true
db:
  host: db.local
features: [search]
"""


@pytest.fixture
def env_mapping_yaml() -> str:
    """
    `env_mapping` com entradas simples e avançadas.

    Returns:
        str: Conteúdo YAML mapeando variáveis de ambiente para destinos.
    """

    return """\
DB_HOST: db.host
DB_PORT:
  key: db.port
  type: number
APP_DEBUG:
  key: app.debug
  type: boolean
APP_NAME:
  key: app.name
FIRST_SERVER: servers[0].host
"""


@pytest.fixture
def conf_dir(tmp_path: Path) -> Path:
    path = tmp_path / "conf"
    path.mkdir()
    return path


@pytest.fixture
def write_conf(conf_dir: Path) -> Callable[[str, str], Path]:
    """
    Retorna um helper `write_conf(filename, content)` que grava um arquivo
    no `conf_dir` temporário e devolve o caminho criado.
    """

    def _write(filename: str, content: str) -> Path:
        path = conf_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
