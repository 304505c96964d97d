"""
src/layers_core/binding.py
Vinculación Estática: una secuencia de capas fijada una sola vez.
LayerSet expone todas las operaciones del registro sin el argumento de
secuencia. Semántica idéntica a llamar al registro con la tupla capturada.
"""
import logging
from typing import Any, Callable, Hashable, Iterable, Iterator, List, Optional, Tuple

from . import registry
from .errors import LayerWidthError
from .invariants import resolve_width
from .mask import Mask

logger = logging.getLogger(__name__)


class LayerSet:
    """
    Conjunto ordenado e inmutable de capas.
    La posición de cada nombre es su índice de bit.
    """
    __slots__ = ('_names', '_width')

    def __init__(self, names: Iterable[Hashable], width: Any = None):
        self._names: Tuple[Hashable, ...] = tuple(names)
        self._width: Optional[int] = resolve_width(width)

        if self._width is not None and len(self._names) > self._width:
            raise LayerWidthError(len(self._names), self._width)

        logger.debug("LayerSet fijado: %d capas (ancho=%s)",
                     len(self._names), self._width or "ilimitado")

    @property
    def names(self) -> Tuple[Hashable, ...]:
        return self._names

    @property
    def width(self) -> Optional[int]:
        return self._width

    # --- Constructores de Máscara ---
    def new_mask(self) -> Mask:
        return Mask.new()

    def all_enabled(self) -> Mask:
        return Mask.full(len(self._names))

    # --- Registro (delegación pura) ---
    def resolve_index(self, layer):
        return registry.resolve_index(self._names, layer)

    def resolve_index_or_raise(self, layer) -> int:
        return registry.resolve_index_or_raise(self._names, layer)

    def enable(self, mask, layer):
        return registry.enable(self._names, mask, layer)

    def enable_or_raise(self, mask, layer) -> Mask:
        return registry.enable_or_raise(self._names, mask, layer)

    def disable(self, mask, layer):
        return registry.disable(self._names, mask, layer)

    def disable_or_raise(self, mask, layer) -> Mask:
        return registry.disable_or_raise(self._names, mask, layer)

    def is_enabled(self, mask, layer) -> bool:
        return registry.is_enabled(self._names, mask, layer)

    def is_disabled(self, mask, layer) -> bool:
        return registry.is_disabled(self._names, mask, layer)

    def enabled_layers(self, mask) -> List[Hashable]:
        return registry.enabled_layers(self._names, mask)

    def disabled_layers(self, mask) -> List[Hashable]:
        return registry.disabled_layers(self._names, mask)

    def map_enabled(self, mask, fn: Callable) -> List[Any]:
        return registry.map_enabled(self._names, mask, fn)

    def map_layer(self, mask, layer, fn: Callable):
        return registry.map_layer(self._names, mask, layer, fn)

    def map_layer_or(self, mask, layer, default, fn: Callable):
        return registry.map_layer_or(self._names, mask, layer, default, fn)

    # --- PYTHON MAGIC METHODS ---

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._names)

    def __contains__(self, layer) -> bool:
        return layer in self._names

    def __eq__(self, other):
        if not isinstance(other, LayerSet): return False
        return self._names == other._names and self._width == other._width

    def __hash__(self):
        return hash((self._names, self._width))

    def __repr__(self):
        return f"LayerSet{list(self._names)!r}"


class LayerSetBuilder:
    """
    Declaración incremental de capas.
    Equivale a declarar `layer :x` / `layers [...]` una vez y congelar.
    """

    def __init__(self, width: Any = None):
        self._width = width
        self._names: List[Hashable] = []

    def layer(self, name: Hashable) -> 'LayerSetBuilder':
        if name in self._names:
            # Permitido: la resolución usará la primera aparición
            logger.debug("Capa duplicada %r: gana la primera aparición", name)
        self._names.append(name)
        return self

    def layers(self, names: Iterable[Hashable]) -> 'LayerSetBuilder':
        for name in names:
            self.layer(name)
        return self

    def build(self) -> LayerSet:
        return LayerSet(self._names, width=self._width)


def define(*names: Hashable, width: Any = None) -> LayerSet:
    """Atajo: define("r", "g", "b") == LayerSet(("r", "g", "b"))."""
    return LayerSet(names, width=width)
