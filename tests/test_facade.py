# tests/test_facade.py
"""
Testes do facade de processo (`atlas_config.get/set/dump/load`).

O facade opera sobre um único store por processo. Cada teste substitui
esse store por uma instância nova e aponta `CONF_DIR` para um diretório
temporário, evitando vazamento de estado entre testes.
"""

from pathlib import Path

import pytest

import atlas_config
from atlas_config import ConfigStore, MissingConfigFileError


@pytest.fixture
def fresh_store(monkeypatch, conf_dir: Path) -> ConfigStore:
    store = ConfigStore()
    monkeypatch.setattr(atlas_config, "_default_store", store)
    monkeypatch.setenv("CONF_DIR", str(conf_dir))
    monkeypatch.delenv("CONF_FILES", raising=False)
    return store


def test_first_access_loads_once(fresh_store, write_conf, base_yaml):
    write_conf("base.yaml", base_yaml)

    assert atlas_config.get("db.port") == 5432
    assert fresh_store.loaded is True

    atlas_config.set("db.port", 1)
    assert atlas_config.get("db.port") == 1
    assert [e["stage"] for e in fresh_store.events].count("done") == 1


def test_explicit_load_reruns_pipeline(fresh_store, write_conf, base_yaml, local_yaml, monkeypatch):
    write_conf("base.yaml", base_yaml)
    write_conf("local.yaml", local_yaml)
    assert atlas_config.get("db.host") == "localhost"

    monkeypatch.setenv("CONF_FILES", "local")
    atlas_config.load()

    assert atlas_config.get("db.host") == "db.local"
    assert atlas_config.dump() is fresh_store.dump()


def test_env_overrides_from_process_environment(fresh_store, write_conf, base_yaml, env_mapping_yaml, monkeypatch):
    write_conf("base.yaml", base_yaml)
    write_conf("env_mapping.yaml", env_mapping_yaml)
    monkeypatch.setenv("DB_PORT", "6543")

    assert atlas_config.get("db.port") == 6543


def test_missing_base_surfaces_on_first_access(fresh_store):
    with pytest.raises(MissingConfigFileError, match="base.yml"):
        atlas_config.get("db.port")
    assert fresh_store.loaded is False
