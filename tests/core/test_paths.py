# tests/core/test_paths.py
"""
Testes da resolução de nomes lógicos para arquivos concretos.

Os testes asseguram que:
- caminhos com extensão são retornados sem alteração
- `.yaml` tem prioridade sobre `.yml`
- `.yml` é retornado sem verificação quando `.yaml` não existe
"""

from pathlib import Path

from atlas_config.core.paths import resolve_config_path


def test_explicit_extension_is_kept(conf_dir: Path):
    logical = conf_dir / "settings.json"
    assert resolve_config_path(logical) == logical


def test_yaml_is_preferred_over_yml(write_conf, conf_dir: Path):
    write_conf("base.yaml", "a: 1\n")
    write_conf("base.yml", "a: 2\n")
    assert resolve_config_path(conf_dir / "base") == conf_dir / "base.yaml"


def test_yml_used_when_yaml_missing(write_conf, conf_dir: Path):
    write_conf("base.yml", "a: 2\n")
    assert resolve_config_path(conf_dir / "base") == conf_dir / "base.yml"


def test_yml_returned_even_when_nothing_exists(conf_dir: Path):
    """
    Verifica que a resolução não falha quando nenhum arquivo existe.

    A ausência do arquivo é responsabilidade da leitura, não da
    resolução de caminho.
    """
    assert resolve_config_path(str(conf_dir / "missing")) == conf_dir / "missing.yml"
