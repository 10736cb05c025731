"""Algebraic laws checked on random small automata over {a, b}."""

import random
import unittest
from itertools import product

from automaton import Automaton

ALPHABET = frozenset({"a", "b"})
MAX_LENGTH = 5
SAMPLES = 40

WORDS = [
    "".join(letters)
    for n in range(MAX_LENGTH + 1)
    for letters in product(sorted(ALPHABET), repeat=n)
]


def random_automaton(rng, max_states=4, epsilon=True):
    size = rng.randint(1, max_states)
    symbols = sorted(ALPHABET) + ([None] if epsilon else [])
    transitions = {
        (p, a, q)
        for p in range(size)
        for a in symbols
        for q in range(size)
        if rng.random() < 0.25
    }
    starts = {s for s in range(size) if rng.random() < 0.3} or {0}
    accepting = {s for s in range(size) if rng.random() < 0.4}
    return Automaton.build(ALPHABET, size, starts, accepting, transitions)


def language(aut):
    return frozenset(w for w in WORDS if aut.accepts(w))


def star_language(base):
    """Words up to MAX_LENGTH that split into non-empty pieces of `base`."""
    result = {""}
    for word in WORDS:
        splittable = [True] + [False] * len(word)
        for end in range(1, len(word) + 1):
            splittable[end] = any(
                splittable[start] and word[start:end] in base
                for start in range(end)
            )
        if splittable[-1]:
            result.add(word)
    return frozenset(result)


class PropertyTest(unittest.TestCase):

    def setUp(self):
        self.rng = random.Random(20240917)

    def samples(self, count=SAMPLES, **kwargs):
        for i in range(count):
            yield i, random_automaton(self.rng, **kwargs)

    def pairs(self, count=SAMPLES // 2):
        for i in range(count):
            yield i, random_automaton(self.rng), random_automaton(self.rng)

    def test_determinize_preserves_language(self):
        for i, aut in self.samples():
            with self.subTest(sample=i):
                dfa = aut.determinize()
                self.assertTrue(dfa.is_deterministic)
                self.assertEqual(language(aut), language(dfa))

    def test_minimize_preserves_language_and_is_idempotent(self):
        for i, aut in self.samples():
            with self.subTest(sample=i):
                dfa = aut.determinize().complete()
                minimal = dfa.minimize()
                self.assertEqual(language(aut), language(minimal))
                self.assertLessEqual(minimal.size, dfa.size)
                self.assertEqual(minimal, minimal.minimize())

    def test_trim_preserves_language(self):
        for i, aut in self.samples():
            with self.subTest(sample=i):
                trimmed = aut.trim()
                self.assertEqual(language(aut), language(trimmed))
                self.assertLessEqual(trimmed.size, aut.size)

    def test_accessible_and_co_accessible_shrink(self):
        for i, aut in self.samples():
            with self.subTest(sample=i):
                self.assertLessEqual(aut.accessible().size, aut.size)
                self.assertLessEqual(aut.co_accessible().size, aut.size)
                self.assertEqual(language(aut), language(aut.accessible()))
                self.assertEqual(language(aut), language(aut.co_accessible()))

    def test_complement_is_an_involution(self):
        for i, aut in self.samples():
            with self.subTest(sample=i):
                dfa = aut.determinize().complete()
                self.assertEqual(dfa, dfa.complement().complement())
                self.assertEqual(frozenset(WORDS) - language(aut), language(aut.complement()))

    def test_de_morgan(self):
        for i, a, b in self.pairs():
            with self.subTest(sample=i):
                left = a.union(b).complement()
                right = a.complement().intersection(b.complement())
                self.assertTrue(left.equals(right))

    def test_union_and_intersection_match_set_operations(self):
        for i, a, b in self.pairs():
            with self.subTest(sample=i):
                self.assertEqual(language(a) | language(b), language(a.union(b)))
                self.assertEqual(language(a) & language(b), language(a.intersection(b)))
                self.assertEqual(language(a) - language(b), language(a.difference(b)))

    def test_concatenation(self):
        for i, a, b in self.pairs():
            with self.subTest(sample=i):
                left, right = language(a), language(b)
                expected = frozenset(
                    w
                    for w in WORDS
                    if any(w[:k] in left and w[k:] in right for k in range(len(w) + 1))
                )
                self.assertEqual(expected, language(a.concatenation(b)))

    def test_star(self):
        for i, aut in self.samples():
            with self.subTest(sample=i):
                self.assertEqual(star_language(language(aut)), language(aut.star()))

    def test_reverse(self):
        for i, aut in self.samples():
            with self.subTest(sample=i):
                reversed_words = frozenset(w[::-1] for w in language(aut))
                self.assertEqual(reversed_words, language(aut.reverse()))
                self.assertTrue(aut.reverse().reverse().equals(aut))

    def test_equivalence_is_an_equivalence_relation(self):
        for i, aut in self.samples(count=SAMPLES // 2):
            with self.subTest(sample=i):
                dfa = aut.determinize()
                minimal = aut.minimize()
                self.assertTrue(aut.equals(aut))
                self.assertTrue(aut.equals(dfa) and dfa.equals(aut))
                self.assertTrue(dfa.equals(minimal))
                self.assertTrue(aut.equals(minimal))

    def test_equivalence_agrees_with_enumeration(self):
        for i, a, b in self.pairs(count=SAMPLES):
            with self.subTest(sample=i):
                same = a.equals(b)
                self.assertEqual(same, b.equals(a))
                if same:
                    self.assertEqual(language(a), language(b))
                if language(a) != language(b):
                    self.assertFalse(same)

    def test_equals_matches_mutual_containment(self):
        for i, a, b in self.pairs():
            with self.subTest(sample=i):
                self.assertEqual(a.equals(b), a.contains(b) and b.contains(a))


if __name__ == "__main__":
    unittest.main()
