import unittest

import numpy as np

from chemsource.constants import R_GAS
from chemsource.errors import MechanismError
from chemsource.mixture import ChemicalMixture
from chemsource.models import Reaction, Species
from chemsource.rates import ConstantRate


class TestChemicalMixture(unittest.TestCase):
    def setUp(self):
        self.mixture = ChemicalMixture([Species("N2", 0.028), Species("O2", 0.032)])

    def test_indexing(self):
        self.assertEqual(self.mixture.n_species(), 2)
        self.assertEqual(self.mixture.species_index("O2"), 1)
        self.assertEqual(self.mixture.species_name(0), "N2")
        self.assertEqual(self.mixture.species_names(), ["N2", "O2"])
        self.assertEqual(self.mixture.M(1), 0.032)

    def test_unknown_species(self):
        with self.assertRaises(MechanismError):
            self.mixture.species_index("Ar")

    def test_duplicate_species(self):
        with self.assertRaises(MechanismError):
            ChemicalMixture([Species("N2", 0.028), Species("N2", 0.028)])

    def test_molar_masses_are_read_only(self):
        with self.assertRaises(ValueError):
            self.mixture.molar_masses()[0] = 1.0

    def test_mixture_properties(self):
        y = np.array([0.75, 0.25])
        self.assertAlmostEqual(self.mixture.R(0), R_GAS / 0.028)
        self.assertAlmostEqual(self.mixture.R_mix(y), R_GAS * (0.75 / 0.028 + 0.25 / 0.032))
        m_mix = self.mixture.M_mix(y)
        self.assertAlmostEqual(self.mixture.R_mix(y), R_GAS / m_mix)

        x = self.mixture.mole_fractions(y)
        self.assertAlmostEqual(np.sum(x), 1.0)
        np.testing.assert_allclose(self.mixture.molar_densities(2.0, y), 2.0 * y / np.array([0.028, 0.032]))


class TestModels(unittest.TestCase):
    def test_species_needs_positive_molar_mass(self):
        for value in (0.0, -1.0, float("inf"), float("nan")):
            with self.subTest(value=value):
                with self.assertRaises(MechanismError):
                    Species("X", value)

    def test_reaction_accessors(self):
        reaction = Reaction("2A + B -> 3C", ((0, 2), (1, 1)), ((2, 3),), ConstantRate(1.0))
        self.assertEqual(reaction.n_reactants(), 2)
        self.assertEqual(reaction.n_products(), 1)
        self.assertEqual(reaction.reactant_id(1), 1)
        self.assertEqual(reaction.reactant_stoichiometric_coefficient(0), 2)
        self.assertEqual(reaction.product_id(0), 2)
        self.assertEqual(reaction.product_stoichiometric_coefficient(0), 3)
        self.assertEqual(reaction.gamma(), 0)
        self.assertEqual(reaction.species_ids(), frozenset({0, 1, 2}))

    def test_reaction_is_immutable(self):
        reaction = Reaction("A -> B", ((0, 1),), ((1, 1),), ConstantRate(1.0))
        with self.assertRaises(AttributeError):
            reaction.reversible = False

    def test_invalid_stoichiometry(self):
        cases = [
            ((), ((1, 1),)),
            (((0, 1),), ()),
            (((0, 0),), ((1, 1),)),
            (((0, 1.5),), ((1, 1),)),
            (((-1, 1),), ((1, 1),)),
            (((0, True),), ((1, 1),)),
        ]
        for reactants, products in cases:
            with self.subTest(reactants=reactants, products=products):
                with self.assertRaises(MechanismError):
                    Reaction("bad", reactants, products, ConstantRate(1.0))

    def test_efficiencies_are_copied_and_read_only(self):
        eff = {0: 2.0}
        reaction = Reaction("A -> B", ((0, 1),), ((1, 1),), ConstantRate(1.0), efficiencies=eff)
        eff[3] = 9.0
        self.assertEqual(dict(reaction.efficiencies), {0: 2.0})
        self.assertEqual(reaction.species_ids(), frozenset({0, 1}))
        with self.assertRaises(TypeError):
            reaction.efficiencies[0] = 5.0

    def test_reaction_is_hashable(self):
        a = Reaction("A -> B", ((0, 1),), ((1, 1),), ConstantRate(1.0), efficiencies={0: 2.0})
        b = Reaction("A -> B", ((0, 1),), ((1, 1),), ConstantRate(1.0), efficiencies={0: 2.0})
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))

    def test_efficiencies_imply_third_body(self):
        reaction = Reaction("A -> B", ((0, 1),), ((1, 1),), ConstantRate(1.0), efficiencies={2: 0.5})
        self.assertTrue(reaction.third_body)
        self.assertIn(2, reaction.species_ids())


if __name__ == '__main__':
    unittest.main()
