import unittest

from lcterm.pure.varset import VarSet


class VarSetTestCase(unittest.TestCase):

    def test_algebra(self):
        xy = VarSet.of("x", "y")
        yz = VarSet.of("y", "z")

        cases = {
            "union": (xy | yz, VarSet.of("x", "y", "z")),
            "intersection": (xy & yz, VarSet.of("y")),
            "difference": (xy - yz, VarSet.of("x")),
            "reverse difference": (yz - xy, VarSet.of("z")),
            "symmetric difference": (xy ^ yz, VarSet.of("x", "z")),
            "reverse symmetric difference": (yz ^ xy, VarSet.of("x", "z")),
        }
        for case, (result, expected) in cases.items():
            self.assertEqual(expected, result, case)

        self.assertEqual(xy.union(yz), xy | yz)
        self.assertEqual(xy.intersection(yz), xy & yz)
        self.assertEqual(xy.difference(yz), xy - yz)
        self.assertEqual(xy.symmetric_difference(yz), xy ^ yz)

    def test_names(self):
        xy = VarSet.of("x", "y")

        self.assertEqual(VarSet.of("x", "y", "z"), xy.with_name("z"))
        self.assertEqual(VarSet.of("y"), xy.without_name("x"))
        self.assertEqual(VarSet.of("x", "y"), xy.without_name("w"))
        self.assertEqual(VarSet.of("y"), xy - "x")
        self.assertEqual(VarSet.from_name("x"), VarSet.of("x"))

    def test_immutable(self):
        xy = VarSet.of("x", "y")
        xy | VarSet.of("z")
        xy.with_name("w")

        self.assertEqual(VarSet.of("x", "y"), xy)
        with self.assertRaises(AttributeError):
            xy._inner = frozenset()

    def test_queries(self):
        xy = VarSet.of("x", "y")

        self.assertTrue(xy.contains("x"))
        self.assertIn("y", xy)
        self.assertNotIn("z", xy)
        self.assertFalse(xy.is_empty())
        self.assertTrue(VarSet().is_empty())
        self.assertTrue((xy & VarSet.of("z")).is_empty())
        self.assertEqual(2, len(xy))

        # iteration is finite and restartable
        self.assertEqual(["x", "y"], sorted(xy))
        self.assertEqual(["x", "y"], sorted(xy))

    def test_hashable(self):
        self.assertEqual(hash(VarSet.of("x", "y")), hash(VarSet.of("y", "x")))
        self.assertEqual(1, len({VarSet.of("x", "y"), VarSet.of("y", "x")}))
        self.assertEqual(frozenset({"x"}), VarSet.of("x"))
        self.assertEqual("VarSet(['x', 'y'])", repr(VarSet.of("y", "x")))


if __name__ == '__main__':
    unittest.main()
