"""
src/layers_core/registry.py
Registro de Capas: traduce nombres legibles a índices de bit.
Sin estado: la secuencia de capas se pasa en cada llamada y nunca se guarda.

CONTRATO DEL CONSUMIDOR:
Usar SIEMPRE la misma secuencia (mismo orden, mismos miembros) contra una
máscara. Otra secuencia reinterpreta los bits en silencio.
"""
from typing import Any, Callable, Hashable, List, Sequence, TypeVar, Union

from .errors import LayerNotFoundError
from .invariants import is_index, is_group
from .mask import Mask
from .result import Ok, Err, Some, NOTHING

L = TypeVar('L', bound=Hashable)
R = TypeVar('R')

MaskLike = Union[Mask, int]


def _as_mask(mask: MaskLike) -> Mask:
    return Mask.of(mask)

# =============================================================================
# RESOLUCIÓN DE ÍNDICES
# =============================================================================

def resolve_index(layers: Sequence[L], layer: Union[L, int]):
    """
    Índice de una capa.
    Un índice numérico se devuelve tal cual, sin consultar la secuencia.
    Retorna Ok(index) o Err(LayerNotFoundError).
    """
    if is_index(layer):
        return Ok(layer)
    # Búsqueda lineal: gana la primera aparición
    for index, candidate in enumerate(layers):
        if candidate == layer:
            return Ok(index)
    return Err(LayerNotFoundError(layer))

def resolve_index_or_raise(layers: Sequence[L], layer: Union[L, int]) -> int:
    """Como resolve_index, pero lanza LayerNotFoundError."""
    return resolve_index(layers, layer).unwrap()

# =============================================================================
# MUTACIÓN (retorna máscaras nuevas)
# =============================================================================

def enable(layers: Sequence[L], mask: MaskLike, layer: Union[L, int]):
    """Enciende una capa. Ok(Mask) o el Err de la resolución."""
    resolved = resolve_index(layers, layer)
    if resolved.is_err:
        return resolved
    return Ok(_as_mask(mask).enable(resolved.value))

def enable_or_raise(layers: Sequence[L], mask: MaskLike, layer: Union[L, int]) -> Mask:
    return enable(layers, mask, layer).unwrap()

def disable(layers: Sequence[L], mask: MaskLike, layer: Union[L, int]):
    """Apaga una capa. Ok(Mask) o el Err de la resolución."""
    resolved = resolve_index(layers, layer)
    if resolved.is_err:
        return resolved
    return Ok(_as_mask(mask).disable(resolved.value))

def disable_or_raise(layers: Sequence[L], mask: MaskLike, layer: Union[L, int]) -> Mask:
    return disable(layers, mask, layer).unwrap()

# =============================================================================
# PREDICADOS (totales: una capa desconocida cuenta como apagada)
# =============================================================================

def is_enabled(layers: Sequence[L], mask: MaskLike, layer: Any) -> bool:
    """
    True si la capa está encendida.
    Con un grupo (list/set/frozenset): True si AL MENOS UNA lo está.
    Nunca lanza por nombres desconocidos.
    """
    mask = _as_mask(mask)
    if is_group(layer):
        return any(is_enabled(layers, mask, item) for item in layer)

    resolved = resolve_index(layers, layer)
    if resolved.is_err:
        return False
    return mask.is_enabled(resolved.value)

def is_disabled(layers: Sequence[L], mask: MaskLike, layer: Any) -> bool:
    """
    Negación exacta de is_enabled.
    Con un grupo: True solo si TODAS están apagadas (o no existen).
    """
    return not is_enabled(layers, mask, layer)

# =============================================================================
# FILTROS Y MAPEOS (orden de la secuencia, no de activación)
# =============================================================================

def enabled_layers(layers: Sequence[L], mask: MaskLike) -> List[L]:
    mask = _as_mask(mask)
    return [layer for layer in layers if is_enabled(layers, mask, layer)]

def disabled_layers(layers: Sequence[L], mask: MaskLike) -> List[L]:
    mask = _as_mask(mask)
    return [layer for layer in layers if is_disabled(layers, mask, layer)]

def map_enabled(layers: Sequence[L], mask: MaskLike, fn: Callable[[L], R]) -> List[R]:
    """Aplica fn a cada capa encendida. Lista vacía si no hay ninguna."""
    return [fn(layer) for layer in enabled_layers(layers, mask)]

def map_layer(layers: Sequence[L], mask: MaskLike, layer: Union[L, int], fn: Callable[[Any], R]):
    """
    Some(fn(layer)) si la capa está encendida, NOTHING si no.
    fn NO se invoca para capas apagadas.
    """
    if is_enabled(layers, mask, layer):
        return Some(fn(layer))
    return NOTHING

def map_layer_or(layers: Sequence[L], mask: MaskLike, layer: Union[L, int],
                 default: Any, fn: Callable[[Any], R]) -> Any:
    """Como map_layer, pero retorna `default` cuando la capa está apagada."""
    if is_enabled(layers, mask, layer):
        return fn(layer)
    return default
