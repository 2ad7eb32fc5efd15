# src/atlas_config/core/errors.py
"""
Exceções canônicas do Atlas Config.

Este módulo define a hierarquia oficial de exceções utilizadas durante
a resolução de caminhos, leitura de arquivos, conversão de variáveis de
ambiente e carregamento da configuração.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens identificam o arquivo ou a variável responsável

Invariantes:
    - Todas as exceções do pacote herdam de `ConfigError`
    - Erros de I/O diferentes de "arquivo inexistente" não são encapsulados
    - Erros de parse YAML (`yaml.YAMLError`) não são encapsulados

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não implementa retry
"""

from typing import Any, Optional


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração.

    Todas as exceções levantadas durante o carregamento devem herdar
    desta classe, permitindo captura genérica no startup do processo.
    """


class MissingConfigFileError(ConfigError):
    """
    Exceção levantada quando um arquivo obrigatório não existe.

    Aplica-se ao arquivo `base` e a qualquer arquivo listado em
    `CONF_FILES`. O arquivo `env_mapping` é opcional e nunca gera
    este erro.

    Invariantes:
        - `path` é sempre o caminho concreto (com extensão) testado
    """

    def __init__(self, path: Any) -> None:
        self.path = str(path)
        super().__init__(
            f"Config error: missing file {self.path} (arquivo não encontrado)"
        )


class ConfigCastError(ConfigError):
    """
    Exceção levantada quando um valor de ambiente não pode ser convertido
    para o tipo declarado (`number` ou `boolean`).

    Decisões arquiteturais:
        - Nenhuma coerção tolerante é aplicada
        - A falha aborta o estágio de overrides e, portanto, o `load()`
    """

    def __init__(
        self,
        type_name: str,
        value: str,
        *,
        env_var: Optional[str] = None,
    ) -> None:
        self.type_name = type_name
        self.value = value
        self.env_var = env_var

        article = "an" if type_name[:1] in "aeiou" else "a"
        message = f"Config error: expected {article} {type_name} got {value!r}"
        if env_var is not None:
            message = f"{message} (variável de ambiente {env_var})"
        super().__init__(message)

    def for_env_var(self, env_var: str) -> "ConfigCastError":
        """Retorna uma cópia do erro associada à variável de ambiente."""
        return ConfigCastError(self.type_name, self.value, env_var=env_var)


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz de um arquivo de configuração
    não é um dicionário (`dict`).

    Arquivos vazios são aceitos e interpretados como `{}`; listas ou
    escalares no root são inválidos.
    """


class InvalidEnvMappingError(ConfigError):
    """
    Exceção levantada quando uma entrada do `env_mapping` não é nem uma
    string (mapeamento simples) nem um dicionário com `key` string
    (mapeamento avançado).
    """
