# src/atlas_config/core/store.py
"""
ConfigStore — dono da árvore de configuração viva.

O store mantém a configuração final resolvida e expõe os acessores
`get`, `set` e `dump`, além de `load` para (re)executar o pipeline.

Decisões arquiteturais:
    - O store é um objeto explícito, injetado em quem precisa dele;
      o uso "um por processo" é feito pelo facade do pacote raiz
    - `load()` é atômico: a nova árvore é construída por completo e só
      então substitui a anterior; em caso de erro o store não muda
    - `dump()` retorna a referência viva, não uma cópia
    - Eventos estruturados do carregamento ficam em `events`

Limites explícitos:
    - Não há sincronização interna; chamadas concorrentes de `load()`
      e `get`/`set` devem ser serializadas pelo chamador
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from .hashing import compute_config_hash
from .keypath import get_path, set_path, unset_path
from .loader import LoaderSettings, load_config


@dataclass
class ConfigStore:
    """
    Configuração viva de um processo (ou de um teste isolado).

    Campos:
    - events: log estruturado dos carregamentos
    - config_hash: hash da árvore após o último `load()` bem-sucedido
    - loaded: indica se algum `load()` já terminou com sucesso
    """

    _tree: Dict[str, Any] = field(default_factory=dict, repr=False)
    events: List[Dict[str, Any]] = field(default_factory=list)
    config_hash: Optional[str] = None
    loaded: bool = False

    # -----------------------------
    # Acessores
    # -----------------------------
    def get(self, path: str, default: Any = None) -> Any:
        return get_path(self._tree, path, default)

    def set(self, path: str, value: Any) -> None:
        """Atribui `value` em `path`; `None` remove o caminho."""
        if value is None:
            unset_path(self._tree, path)
        else:
            set_path(self._tree, path, value)

    def dump(self) -> Dict[str, Any]:
        return self._tree

    def replace(self, tree: Dict[str, Any]) -> None:
        self._tree = tree
        self.config_hash = compute_config_hash(tree)

    # -----------------------------
    # Carregamento
    # -----------------------------
    def load(
        self,
        settings: Optional[LoaderSettings] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> Dict[str, Any]:
        """
        Executa o pipeline completo e substitui a árvore viva.

        Chamadas repetidas recomeçam do zero; o resultado não é aditivo.

        Raises:
            ConfigError: Qualquer falha de carregamento (o store permanece
                no estado anterior).
        """
        tree = load_config(settings=settings, environ=environ, log=self.log)
        self.replace(tree)
        self.loaded = True
        self.log(
            stage="done",
            level="INFO",
            message="configuração carregada",
            config_hash=self.config_hash,
        )
        return tree

    # -----------------------------
    # Logging
    # -----------------------------
    def log(self, *, stage: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "stage": stage,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)
