"""
src/layers_core/mask.py
Máscara de Capas: valor inmutable sobre un entero sin signo.
El bit i representa el estado (encendido/apagado) de la capa con índice i.
No sabe nada de nombres: solo aritmética de bits.

Índices: enteros >= 0. No hay cota superior; el entero de Python crece
sin desbordarse, así que un índice enorme produce una máscara enorme
(comportamiento definido por la plataforma, no un truncado silencioso).
"""
from typing import Iterable, Tuple, Union

from .invariants import MASK_EMPTY, BINARY_DIGITS, is_index

Indices = Union[int, Iterable[int]]


def _check_index(index) -> int:
    if not is_index(index):
        raise TypeError(f"Índice de capa inválido: {index!r} (se esperaba int)")
    if index < 0:
        raise ValueError(f"Índice de capa negativo: {index}")
    return index

def _each_index(indices: Indices):
    """Uno o varios índices, en orden."""
    if is_index(indices):
        yield _check_index(indices)
        return
    for index in indices:
        yield _check_index(index)


class Mask:
    """
    Máscara inmutable. Toda operación retorna una NUEVA máscara.
    Compara igual a otra Mask o a un int con el mismo valor.
    """
    __slots__ = ('value',)

    def __init__(self, value: int = MASK_EMPTY):
        if not is_index(value):
            raise TypeError(f"Una máscara es un entero, recibido {value!r}")
        if value < 0:
            raise ValueError(f"Una máscara no puede ser negativa: {value}")
        object.__setattr__(self, 'value', value)

    def __setattr__(self, name, value):
        raise AttributeError("Mask es inmutable")

    def __delattr__(self, name):
        raise AttributeError("Mask es inmutable")

    # --- Constructores Estáticos ---
    @staticmethod
    def new() -> 'Mask':
        """Todas las capas apagadas."""
        return Mask(MASK_EMPTY)

    @staticmethod
    def of(value: Union[int, 'Mask']) -> 'Mask':
        """Envuelve un entero existente (p.ej. leído de disco por el consumidor)."""
        if isinstance(value, Mask):
            return value
        return Mask(value)

    @staticmethod
    def full(length: int) -> 'Mask':
        """Máscara con los `length` bits bajos encendidos."""
        if not is_index(length):
            raise TypeError(f"Longitud inválida: {length!r}")
        if length < 0:
            raise ValueError(f"Longitud negativa: {length}")
        return Mask((1 << length) - 1)

    # --- Operaciones Globales ---
    def enable_all(self, length: int) -> 'Mask':
        """
        Trata la máscara como `length` capas y las enciende todas.
        Sobrescribe: el valor actual se ignora.
        """
        return Mask.full(length)

    def disable_all(self) -> 'Mask':
        return Mask.new()

    # --- Operaciones por Bit ---
    def enable(self, indices: Indices) -> 'Mask':
        """OR. Acepta un índice o una secuencia de índices."""
        value = self.value
        for index in _each_index(indices):
            value |= 1 << index
        return Mask(value)

    def disable(self, indices: Indices) -> 'Mask':
        """
        Borrado directo de bit: value & ~(1 << i).
        Un índice por encima del ancho actual no cambia nada.
        """
        value = self.value
        for index in _each_index(indices):
            value &= ~(1 << index)
        return Mask(value)

    def toggle(self, indices: Indices) -> 'Mask':
        """XOR secuencial: un índice repetido se invierte dos veces."""
        value = self.value
        for index in _each_index(indices):
            value ^= 1 << index
        return Mask(value)

    def is_enabled(self, index: int) -> bool:
        return (self.value >> _check_index(index)) & 1 == 1

    def is_disabled(self, index: int) -> bool:
        return not self.is_enabled(index)

    # --- Presentación ---
    def bit_length(self) -> int:
        """Bits significativos del valor actual (0 para la máscara vacía)."""
        return self.value.bit_length()

    def format(self) -> Tuple[int, ...]:
        """
        Dígitos binarios, el más significativo primero.
        La máscara vacía se representa como (0,).
        """
        if self.value == MASK_EMPTY:
            return (0,)
        digits = []
        value = self.value
        while value:
            value, digit = divmod(value, BINARY_DIGITS)
            digits.append(digit)
        return tuple(reversed(digits))

    # --- PYTHON MAGIC METHODS ---

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __eq__(self, other):
        """Igualdad por valor. Un int compara directamente."""
        if isinstance(other, Mask): return self.value == other.value
        if is_index(other): return self.value == other
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return f"Mask({bin(self.value)})"
