"""Тесты для relprops — свойства отношений, свидетели, классификация."""
import sys
sys.path.insert(0, str(__import__('pathlib').Path(__file__).resolve().parents[1]))

import io
import json
import unittest
from contextlib import redirect_stdout, redirect_stderr
from itertools import product

from libs.relcore.relcore import make_relation, identity_relation
from projects.relprops import (
    PropertyResult, TransitivityWitness, RelationProperties, Classification,
    check_reflexive, check_symmetric, check_antisymmetric, check_transitive,
    analyze, analyze_pairs,
    classify, is_preorder, equivalence_classes,
    json_properties,
)
from projects.relprops.relprops import main


U3 = ['1', '2', '3']
CHAIN3 = [('1', '1'), ('1', '2'), ('2', '2'), ('1', '3'), ('2', '3'), ('3', '3')]


def _divides(universe):
    """Порядок делимости на числах-строках."""
    return [(a, b) for a, b in product(universe, repeat=2) if int(b) % int(a) == 0]


# ─────────────────────────────────────────────────────────────────────────────
class TestReflexive(unittest.TestCase):

    def test_holds(self):
        res = check_reflexive(make_relation(U3, CHAIN3))
        self.assertTrue(res.holds)
        self.assertIsNone(res.witness)

    def test_removing_diagonal_flips_with_witness(self):
        """Убираем одну (x, x) — свидетелем становится ровно x."""
        for x in U3:
            pairs = [p for p in CHAIN3 if p != (x, x)]
            res = check_reflexive(make_relation(U3, pairs))
            self.assertFalse(res.holds)
            self.assertEqual(res.witness, x)

    def test_first_in_universe_order(self):
        res = check_reflexive(make_relation(['a', 'b', 'c'], [('a', 'a')]))
        self.assertEqual(res.witness, 'b')

    def test_empty_universe(self):
        self.assertTrue(check_reflexive(make_relation([], [])).holds)

    def test_bool_protocol(self):
        self.assertTrue(bool(PropertyResult(True)))
        self.assertFalse(bool(PropertyResult(False, 'x')))


# ─────────────────────────────────────────────────────────────────────────────
class TestSymmetric(unittest.TestCase):

    def test_holds(self):
        rel = make_relation(U3, [('1', '2'), ('2', '1'), ('3', '3')])
        self.assertTrue(check_symmetric(rel).holds)

    def test_loops_never_violate(self):
        self.assertTrue(check_symmetric(identity_relation(U3)).holds)

    def test_witness_first_in_r_order(self):
        rel = make_relation(U3, [('1', '1'), ('2', '3'), ('1', '2')])
        res = check_symmetric(rel)
        self.assertFalse(res.holds)
        self.assertEqual(res.witness, ('2', '3'))

    def test_witness_is_counterexample(self):
        rel = make_relation(U3, CHAIN3)
        a, b = check_symmetric(rel).witness
        self.assertTrue(rel.has(a, b))
        self.assertFalse(rel.has(b, a))


# ─────────────────────────────────────────────────────────────────────────────
class TestAntisymmetric(unittest.TestCase):

    def test_holds_for_order(self):
        self.assertTrue(check_antisymmetric(make_relation(U3, CHAIN3)).holds)

    def test_witness(self):
        rel = make_relation(U3, [('1', '1'), ('1', '2'), ('2', '3'), ('3', '2')])
        res = check_antisymmetric(rel)
        self.assertFalse(res.holds)
        self.assertEqual(res.witness, ('2', '3'))

    def test_witness_is_counterexample(self):
        rel = make_relation(U3, [('1', '2'), ('2', '1')])
        a, b = check_antisymmetric(rel).witness
        self.assertNotEqual(a, b)
        self.assertTrue(rel.has(a, b) and rel.has(b, a))

    def test_loops_allowed(self):
        self.assertTrue(check_antisymmetric(identity_relation(U3)).holds)


# ─────────────────────────────────────────────────────────────────────────────
class TestTransitive(unittest.TestCase):

    def test_holds(self):
        self.assertTrue(check_transitive(make_relation(U3, CHAIN3)).holds)

    def test_witness_structure(self):
        rel = make_relation(U3, [('1', '2'), ('2', '3')])
        res = check_transitive(rel)
        self.assertFalse(res.holds)
        self.assertEqual(res.witness,
                         TransitivityWitness(('1', '2'), ('2', '3'), ('1', '3')))

    def test_witness_is_counterexample(self):
        rel = make_relation(['a', 'b', 'c', 'd'],
                            [('a', 'b'), ('b', 'c'), ('a', 'c'), ('c', 'd'), ('b', 'd')])
        w = check_transitive(rel).witness
        self.assertTrue(rel.has(*w.first))
        self.assertTrue(rel.has(*w.second))
        self.assertEqual(w.first[1], w.second[0])
        self.assertEqual(w.missing, (w.first[0], w.second[1]))
        self.assertFalse(rel.has(*w.missing))

    def test_symmetric_pair_needs_loops(self):
        """(1,2), (2,1) ⇒ нужна (1,1)."""
        res = check_transitive(make_relation(['1', '2'], [('1', '2'), ('2', '1')]))
        self.assertFalse(res.holds)
        self.assertEqual(res.witness.missing, ('1', '1'))

    def test_empty_relation(self):
        self.assertTrue(check_transitive(make_relation(U3, [])).holds)


# ─────────────────────────────────────────────────────────────────────────────
class TestClassification(unittest.TestCase):

    def test_identity_is_both(self):
        cls = classify(analyze(identity_relation(U3)))
        self.assertTrue(cls.is_partial_order)
        self.assertTrue(cls.is_equivalence)
        self.assertEqual(cls.label, 'both')

    def test_chain_is_partial_order(self):
        cls = classify(analyze(make_relation(U3, CHAIN3)))
        self.assertEqual(cls, Classification(True, False))
        self.assertEqual(cls.label, 'partial_order')

    def test_divisibility_is_partial_order(self):
        u = ['1', '2', '3', '4', '6', '12']
        self.assertEqual(classify(analyze_pairs(u, _divides(u))).label, 'partial_order')

    def test_full_relation_is_equivalence(self):
        full = list(product(U3, repeat=2))
        self.assertEqual(classify(analyze_pairs(U3, full)).label, 'equivalence')

    def test_neither(self):
        cls = classify(analyze_pairs(U3, [('1', '2')]))
        self.assertEqual(cls.label, 'neither')

    def test_analyze_returns_bundle(self):
        props = analyze(make_relation(U3, CHAIN3))
        self.assertIsInstance(props, RelationProperties)
        self.assertFalse(props.symmetric.holds)

    def test_is_preorder(self):
        self.assertTrue(is_preorder(analyze_pairs(U3, CHAIN3)))
        self.assertFalse(is_preorder(analyze_pairs(U3, [('1', '2'), ('2', '3')])))


# ─────────────────────────────────────────────────────────────────────────────
class TestEquivalenceClasses(unittest.TestCase):

    def test_mod3_classes(self):
        u = [str(i) for i in range(6)]
        pairs = [(a, b) for a, b in product(u, repeat=2) if int(a) % 3 == int(b) % 3]
        self.assertEqual(equivalence_classes(make_relation(u, pairs)),
                         [['0', '3'], ['1', '4'], ['2', '5']])

    def test_not_equivalence(self):
        self.assertEqual(equivalence_classes(make_relation(U3, CHAIN3)), [])

    def test_identity_singletons(self):
        self.assertEqual(equivalence_classes(identity_relation(U3)),
                         [['1'], ['2'], ['3']])


# ─────────────────────────────────────────────────────────────────────────────
class TestJSON(unittest.TestCase):

    def test_json_properties_serializable(self):
        data = json_properties(make_relation(U3, [('1', '2'), ('2', '3')]))
        json.dumps(data)
        self.assertFalse(data['reflexive']['holds'])
        self.assertEqual(data['reflexive']['witness'], '1')
        self.assertEqual(data['transitive']['witness']['missing'], ['1', '3'])
        self.assertEqual(data['label'], 'neither')

    def test_json_holds_has_null_witness(self):
        data = json_properties(identity_relation(U3))
        self.assertIsNone(data['symmetric']['witness'])
        self.assertEqual(data['equivalence_classes'], [['1'], ['2'], ['3']])


# ── CLI main() ───────────────────────────────────────────────────────────────

class TestCLI(unittest.TestCase):

    def _run(self, args):
        buf = io.StringIO()
        with redirect_stdout(buf):
            main(args)
        return buf.getvalue()

    def test_check_text(self):
        out = self._run(['check', '-u', '1,2,3', '-r', '(1,2) (2,3)'])
        self.assertIn('Рефлексивность', out)
        self.assertIn('✗', out)

    def test_check_partial_order(self):
        out = self._run(['check', '-u', '1 2', '-r', '(1,1) (1,2) (2,2)'])
        self.assertIn('частичный порядок', out)

    def test_check_json(self):
        out = self._run(['--json', 'check', '-u', '1,2', '-r', '(1,1) (2,2)'])
        data = json.loads(out)
        self.assertEqual(data['label'], 'both')

    def test_matrix_json(self):
        out = self._run(['--json', 'matrix', '-u', '2,1', '-r', '(1,2)'])
        data = json.loads(out)
        self.assertEqual(data['order'], ['1', '2'])
        self.assertEqual(data['matrix'], [[0, 1], [0, 0]])

    def test_matrix_text(self):
        out = self._run(['matrix', '-u', '1,2', '-r', '(1,2)'])
        self.assertIn('1', out)

    def test_missing_universe_exits(self):
        with self.assertRaises(SystemExit):
            with redirect_stdout(io.StringIO()), redirect_stderr(io.StringIO()):
                main(['check'])


if __name__ == '__main__':
    unittest.main(verbosity=2)
