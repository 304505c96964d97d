"""
src/layers_core/errors.py
Errores del Registro de Capas.
"""
from typing import Any

from .invariants import layer_label


class LayerNotFoundError(LookupError):
    """
    El identificador no es un índice y no aparece en la secuencia de capas.
    Conserva la capa original en `.layer` para diagnóstico.
    """

    def __init__(self, layer: Any):
        self.layer = layer
        super().__init__(layer)

    def __str__(self) -> str:
        return "Layer {" + layer_label(self.layer) + "} not found!"


class LayerWidthError(ValueError):
    """La secuencia declarada no cabe en el ancho de máscara pedido."""

    def __init__(self, count: int, width: int):
        self.count = count
        self.width = width
        super().__init__(f"{count} capas no caben en una máscara de {width} bits")
