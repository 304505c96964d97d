"""
src/layers_core/result.py
Valores de Resultado Explícitos.
Ok/Err para operaciones que pueden fallar, Some/NOTHING para presencia opcional.
"""
from typing import Any, Generic, TypeVar

T = TypeVar('T')


class Ok(Generic[T]):
    """Éxito. Envuelve el valor calculado."""
    __slots__ = ('value',)

    is_ok = True
    is_err = False

    def __init__(self, value: T):
        self.value = value

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value

    def __eq__(self, other):
        if not isinstance(other, Ok): return False
        return self.value == other.value

    def __hash__(self):
        return hash((Ok, self.value))

    def __repr__(self):
        return f"Ok({self.value!r})"


class Err:
    """
    Fallo. Envuelve la excepción sin lanzarla.
    unwrap() la lanza tal cual (misma instancia).
    """
    __slots__ = ('error',)

    is_ok = False
    is_err = True

    def __init__(self, error: BaseException):
        self.error = error

    def unwrap(self):
        raise self.error

    def unwrap_or(self, default: Any) -> Any:
        return default

    def __eq__(self, other):
        """Igualdad estructural: mismo tipo de error y mismos argumentos."""
        if not isinstance(other, Err): return False
        return (type(self.error) is type(other.error)
                and self.error.args == other.error.args)

    def __hash__(self):
        return hash((Err, type(self.error), self.error.args))

    def __repr__(self):
        return f"Err({self.error!r})"


class Some(Generic[T]):
    """Presencia explícita. Some(None) es distinto de NOTHING."""
    __slots__ = ('value',)

    is_some = True

    def __init__(self, value: T):
        self.value = value

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value

    def __eq__(self, other):
        if not isinstance(other, Some): return False
        return self.value == other.value

    def __hash__(self):
        return hash((Some, self.value))

    def __repr__(self):
        return f"Some({self.value!r})"


class _Nothing:
    """Ausencia explícita. Singleton."""
    __slots__ = ()

    is_some = False

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def unwrap(self):
        raise ValueError("unwrap() sobre NOTHING")

    def unwrap_or(self, default: Any) -> Any:
        return default

    def __bool__(self):
        return False

    def __repr__(self):
        return "NOTHING"


NOTHING = _Nothing()
