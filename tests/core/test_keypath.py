# tests/core/test_keypath.py
"""
Testes do acesso por dotted path (`get_path`, `set_path`, `unset_path`).

Os testes asseguram que:
- caminhos aninhados e indexados são lidos corretamente
- caminhos ausentes retornam o default, nunca erro
- `set_path` cria containers intermediários
- `unset_path` remove apenas o caminho pedido
"""

import pytest

from atlas_config.core.keypath import get_path, parse_key_path, set_path, unset_path


def test_parse_key_path_segments():
    assert parse_key_path("servers[0].host") == ["servers", 0, "host"]
    assert parse_key_path("matrix[1][2]") == ["matrix", 1, 2]
    assert parse_key_path("db.port") == ["db", "port"]


def test_parse_empty_path_raises():
    with pytest.raises(ValueError):
        parse_key_path("")


def test_get_nested_and_indexed():
    tree = {"db": {"port": 5432}, "servers": [{"host": "a"}, {"host": "b"}]}
    assert get_path(tree, "db.port") == 5432
    assert get_path(tree, "servers[1].host") == "b"
    assert get_path(tree, "servers.0.host") == "a"


def test_get_missing_returns_default():
    tree = {"db": {"port": 5432}, "servers": []}
    assert get_path(tree, "db.user") is None
    assert get_path(tree, "db.port.value") is None
    assert get_path(tree, "servers[3].host", "fallback") == "fallback"


def test_set_creates_intermediate_containers():
    tree = {}
    set_path(tree, "db.options.pool", 10)
    set_path(tree, "servers[1].host", "b")
    assert tree == {
        "db": {"options": {"pool": 10}},
        "servers": [None, {"host": "b"}],
    }


def test_set_replaces_scalar_ancestor():
    tree = {"db": "sqlite"}
    set_path(tree, "db.port", 1)
    assert tree == {"db": {"port": 1}}


def test_set_into_existing_list():
    tree = {"servers": [{"host": "a"}]}
    set_path(tree, "servers[0].host", "z")
    assert tree == {"servers": [{"host": "z"}]}


def test_unset_removes_key_and_keeps_siblings():
    tree = {"db": {"host": "h", "port": 1}}
    assert unset_path(tree, "db.port") is True
    assert tree == {"db": {"host": "h"}}


def test_unset_list_element_keeps_following_indexes():
    tree = {"features": ["a", "b", "c"]}
    assert unset_path(tree, "features[1]") is True
    assert get_path(tree, "features[1]") is None
    assert get_path(tree, "features[2]") == "c"
    assert len(tree["features"]) == 3


def test_get_empty_path_returns_default():
    assert get_path({"a": 1}, "") is None
    assert get_path({"a": 1}, "", "fallback") == "fallback"


def test_set_digit_segment_creates_list():
    tree = {}
    set_path(tree, "a.0.b", 1)
    assert tree == {"a": [{"b": 1}]}
    assert get_path(tree, "a[0].b") == 1


def test_unset_missing_is_noop():
    tree = {"db": {"host": "h"}}
    assert unset_path(tree, "db.port") is False
    assert unset_path(tree, "cache.ttl") is False
    assert tree == {"db": {"host": "h"}}
