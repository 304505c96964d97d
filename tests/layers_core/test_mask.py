"""
tests/layers_core/test_mask.py
Tests de la Máscara de Capas.
Verifica: Constructores, Aritmética de Bits, Inmutabilidad y Propiedades.
"""
import random
import unittest
from layers_core.mask import Mask

class TestMaskBasics(unittest.TestCase):

    # =========================================================================
    # 1. CONSTRUCTORES
    # =========================================================================

    def test_new_is_empty(self):
        m = Mask.new()
        self.assertEqual(m.value, 0)
        self.assertEqual(m.format(), (0,))

    def test_enable_all(self):
        """enable_all(5) -> cinco unos, ignorando el valor previo."""
        self.assertEqual(Mask.new().enable_all(5).format(), (1, 1, 1, 1, 1))
        self.assertEqual(Mask.of(0b1000000).enable_all(3), 0b111)
        self.assertEqual(Mask.new().enable_all(0), Mask.new())

    def test_enable_all_rejects_negative_length(self):
        with self.assertRaises(ValueError):
            Mask.new().enable_all(-1)

    def test_disable_all(self):
        self.assertEqual(Mask.new().enable_all(5).disable_all().format(), (0,))
        self.assertEqual(Mask.of(12345).disable_all(), 0)

    def test_of_validation(self):
        self.assertEqual(Mask.of(6).value, 6)
        m = Mask.of(3)
        self.assertIs(Mask.of(m), m)
        with self.assertRaises(ValueError):
            Mask.of(-1)
        with self.assertRaises(TypeError):
            Mask.of("3")
        with self.assertRaises(TypeError):
            Mask.of(True)

    def test_constructor_validation(self):
        """El constructor directo aplica las mismas reglas que Mask.of."""
        with self.assertRaises(ValueError):
            Mask(-1)
        with self.assertRaises(TypeError):
            Mask("3")
        with self.assertRaises(TypeError):
            Mask(2.0)
        self.assertEqual(Mask(5).format(), (1, 0, 1))

    def test_value_is_read_only(self):
        """Reasignar el valor corrompería sets y dicts que contienen la máscara."""
        m = Mask.of(1)
        bucket = {m}
        with self.assertRaises(AttributeError):
            m.value = 4
        with self.assertRaises(AttributeError):
            del m.value
        self.assertEqual(m.value, 1)
        self.assertIn(m, bucket)

    # =========================================================================
    # 2. ARITMÉTICA DE BITS
    # =========================================================================

    def test_enable_single_and_many(self):
        self.assertEqual(Mask.new().enable(3).format(), (1, 0, 0, 0))
        self.assertEqual(Mask.new().enable([1, 4]).format(), (1, 0, 0, 1, 0))

    def test_disable_single_and_many(self):
        self.assertEqual(Mask.new().enable_all(4).disable(2).format(), (1, 0, 1, 1))
        self.assertEqual(Mask.new().enable_all(5).disable([1, 3]).format(), (1, 0, 1, 0, 1))

    def test_disable_beyond_width_is_noop(self):
        """Borrar un bit por encima del ancho actual no cambia la máscara."""
        m = Mask.of(0b101)
        self.assertEqual(m.disable(10), m)
        self.assertEqual(m.disable(3), m)

    def test_toggle_sequential(self):
        m = Mask.new().toggle(2)
        self.assertEqual(m.format(), (1, 0, 0))
        self.assertEqual(m.toggle([3, 2]).format(), (1, 0, 0, 0))
        # Índice repetido: se invierte dos veces
        self.assertEqual(m.toggle([0, 0]), m)

    def test_enabled_disabled(self):
        m = Mask.new()
        self.assertFalse(m.is_enabled(0))
        self.assertTrue(m.enable(0).is_enabled(0))
        self.assertTrue(m.is_disabled(2))
        self.assertFalse(m.enable(2).is_disabled(2))

    def test_format_examples(self):
        self.assertEqual(Mask.new().enable(2).enable(4).format(), (1, 0, 1, 0, 0))

    def test_invalid_indices(self):
        m = Mask.new()
        with self.assertRaises(ValueError):
            m.enable(-1)
        with self.assertRaises(TypeError):
            m.enable(1.5)
        with self.assertRaises(TypeError):
            m.toggle(["a"])
        with self.assertRaises(TypeError):
            m.is_enabled(False)

    def test_big_index(self):
        """Precisión arbitraria: no hay desbordamiento ni truncado."""
        m = Mask.new().enable(200)
        self.assertTrue(m.is_enabled(200))
        self.assertEqual(m.bit_length(), 201)
        self.assertEqual(m.disable(200), 0)

    # =========================================================================
    # 3. INMUTABILIDAD E INTEROPERABILIDAD
    # =========================================================================

    def test_immutability(self):
        original = Mask.of(0b10)
        _ = original.enable(0)
        _ = original.toggle(1)
        _ = original.disable(1)
        self.assertEqual(original.value, 0b10)

    def test_int_interop(self):
        m = Mask.of(5)
        self.assertEqual(int(m), 5)
        self.assertEqual(bin(m), "0b101")
        self.assertEqual(m, 5)
        self.assertNotEqual(m, 4)
        self.assertEqual(hash(m), hash(Mask.of(5)))
        self.assertEqual(repr(m), "Mask(0b101)")
        self.assertNotEqual(m, "5")


class TestMaskProperties(unittest.TestCase):
    """Propiedades sobre máscaras e índices aleatorios (semilla fija)."""

    def setUp(self):
        rng = random.Random(1234)
        self.cases = [(Mask.of(rng.getrandbits(rng.randint(0, 96))), rng.randint(0, 100))
                      for _ in range(300)]

    def test_enable_then_query(self):
        for mask, i in self.cases:
            self.assertTrue(mask.enable(i).is_enabled(i))
            self.assertFalse(mask.disable(i).is_enabled(i))

    def test_idempotence(self):
        for mask, i in self.cases:
            self.assertEqual(mask.enable(i).enable(i), mask.enable(i))
            self.assertEqual(mask.disable(i).disable(i), mask.disable(i))

    def test_toggle_self_inverse(self):
        for mask, i in self.cases:
            self.assertEqual(mask.toggle(i).toggle(i), mask)

    def test_disable_is_direct_bit_clear(self):
        for mask, i in self.cases:
            self.assertEqual(mask.disable(i), mask.value & ~(1 << i))
            self.assertGreaterEqual(mask.disable(i).value, 0)

    def test_enable_all_length(self):
        for n in range(1, 70):
            self.assertEqual(Mask.new().enable_all(n).format(), (1,) * n)

    def test_format_matches_bin(self):
        for mask, _ in self.cases:
            expected = tuple(int(c) for c in bin(mask.value)[2:])
            self.assertEqual(mask.format(), expected)

if __name__ == '__main__':
    unittest.main()
