"""
Registry de value objects (cache flyweight)
Um registry por variante de coordenada; garante uma única instância canônica por chave
"""
from threading import RLock
from typing import Any, Callable, Dict, Generic, Optional, Tuple, TypeVar

from geocoords.shared.config.logger_config import get_logger

logger = get_logger(child=True)

T = TypeVar('T')

Key = Tuple[float, ...]


class ValueObjectRegistry(Generic[T]):
    """
    Fábrica memoizada e thread-safe para value objects imutáveis

    A chave de busca é a tupla de componentes, opcionalmente arredondada
    para ``decimal_places``. A mesma chave é usada na busca e no hash, então
    instâncias com a mesma chave são um único valor lógico.

    Também guarda valores derivados de uma instância canônica (conversão,
    identidade). Só funções puras do valor são memoizadas aqui.

    Não há remoção de entradas: o registry vive enquanto o processo viver.
    """

    def __init__(self, name: str, decimal_places: Optional[int] = None):
        self.name = name
        self.decimal_places = decimal_places
        self._instances: Dict[Key, T] = {}
        self._derived: Dict[Tuple[str, Key], Any] = {}
        self._lock = RLock()

    def key_for(self, components: Tuple[float, ...]) -> Key:
        """Chave canônica de uma tupla de componentes"""
        if self.decimal_places is None:
            return tuple(components)
        return tuple(round(component, self.decimal_places) for component in components)

    def get_or_create(self, components: Tuple[float, ...], factory: Callable[[], T]) -> T:
        """
        Retorna a instância canônica dos componentes, criando-a no primeiro pedido

        Busca e inserção acontecem sob o lock do registry, então chamadas
        concorrentes para a mesma chave sempre recebem a mesma instância.

        Args:
            components: Tupla de componentes já validada
            factory: Constrói a instância em caso de cache miss

        Returns:
            A instância canônica compartilhada
        """
        key = self.key_for(components)
        with self._lock:
            instance = self._instances.get(key)
            if instance is None:
                instance = factory()
                self._instances[key] = instance
                logger.debug("Registered canonical coordinate", registry=self.name, key=key)
            return instance

    def derived(self, kind: str, components: Tuple[float, ...]) -> Optional[Any]:
        """Valor memoizado do tipo ``kind`` para o valor com esses componentes, se houver"""
        key = (kind, self.key_for(components))
        with self._lock:
            return self._derived.get(key)

    def remember(self, kind: str, components: Tuple[float, ...], value: Any) -> Any:
        """
        Memoiza um valor derivado

        A primeira escrita vence; chamadas seguintes retornam o valor já guardado.
        """
        key = (kind, self.key_for(components))
        with self._lock:
            return self._derived.setdefault(key, value)

    def __contains__(self, components: Tuple[float, ...]) -> bool:
        key = self.key_for(components)
        with self._lock:
            return key in self._instances

    def __len__(self) -> int:
        with self._lock:
            return len(self._instances)
