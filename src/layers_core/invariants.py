"""
src/layers_core/invariants.py
Geometría de la Máscara de Capas y Reglas de Identidad.
Define los anchos soportados y qué cuenta como índice o como grupo.
"""
from enum import Enum
from typing import Any, Dict, Optional

# =============================================================================
# BIT LAYOUT (Máscara de Capas / Entero sin signo)
# =============================================================================
# [n-1 .. 0] : Un bit por capa. Bit 0 = primera capa de la secuencia.
# El entero de Python es de precisión arbitraria: no hay techo físico.
# =============================================================================

MASK_EMPTY    = 0
BINARY_DIGITS = 2

# Anchos nominales (bits). Solo se aplican si el consumidor los pide.
WIDTH_PRESETS: Dict[str, int] = {
    "u8":  8,
    "u16": 16,
    "u32": 32,
    "u64": 64,
}

# None = Sin límite (precisión arbitraria)
DEFAULT_WIDTH: Optional[int] = None

# Contenedores que se interpretan como "varias capas" en los predicados.
# Las tuplas NO están aquí: son hashables y pueden ser nombres de capa.
GROUP_TYPES = (list, set, frozenset)

# =============================================================================
# REGLAS DE IDENTIDAD
# =============================================================================

def is_index(identifier: Any) -> bool:
    """
    Un identificador es un índice si es un int puro.
    bool e IntEnum/IntFlag heredan de int pero son nombres, no posiciones.
    """
    return (isinstance(identifier, int)
            and not isinstance(identifier, (bool, Enum)))

def is_group(identifier: Any) -> bool:
    return isinstance(identifier, GROUP_TYPES)

def resolve_width(width: Any) -> Optional[int]:
    """Normaliza un ancho: None, entero positivo o nombre de preset."""
    if width is None:
        return DEFAULT_WIDTH
    if isinstance(width, str):
        if width not in WIDTH_PRESETS:
            raise ValueError(f"Preset de ancho desconocido: {width!r}")
        return WIDTH_PRESETS[width]
    if not is_index(width) or width <= 0:
        raise ValueError(f"El ancho debe ser un entero positivo, recibido {width!r}")
    return width

def layer_label(layer: Any) -> str:
    """Texto de una capa para mensajes (Enum -> nombre del miembro)."""
    if isinstance(layer, Enum):
        return str(layer.name)
    return str(layer)
