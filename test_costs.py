import costs
import unittest


from costs import Deletion, Insertion, LEVENSHTEIN, NoAction, Substitution, \
        WeightedCosts


class CostsTestCase(unittest.TestCase):

    def test_levenshtein_prices(self):
        self.assertEqual(LEVENSHTEIN.insertion_cost('a'), 1)
        self.assertEqual(LEVENSHTEIN.deletion_cost('a'), 1)
        self.assertEqual(LEVENSHTEIN.substitution_cost('a', 'a'), 0)
        self.assertEqual(LEVENSHTEIN.substitution_cost('a', 'b'), 1)
        self.assertIs(costs.levenshtein_costs(), LEVENSHTEIN)

    def test_lower_cost(self):
        cases = (
            # Insertion strictly cheapest
            ('a', 'b', 3, 3, 1, Insertion(1)),
            # Insertion tied with substitution wins only on equal elements
            ('a', 'a', 3, 1, 1, Insertion(1)),
            ('a', 'b', 3, 1, 1, Substitution(1)),
            # Insertion cheaper than deletion but substitution cheaper still
            ('a', 'b', 3, 0, 1, Substitution(0)),
            # Deletion strictly cheapest
            ('a', 'b', 1, 3, 3, Deletion(1)),
            # Deletion tied with insertion beats it
            ('a', 'b', 1, 3, 1, Deletion(1)),
            # Deletion tied with substitution wins only on equal elements
            ('a', 'a', 1, 1, 3, Deletion(1)),
            ('a', 'b', 1, 1, 3, Substitution(1)),
            # All equal
            ('a', 'a', 2, 2, 2, Deletion(2)),
            ('a', 'b', 2, 2, 2, Substitution(2)),
            # Substitution cheapest
            ('a', 'a', 2, 0, 2, Substitution(0)),
        )
        for t1, t2, deletion, substitution, insertion, expected in cases:
            self.assertEqual(
                LEVENSHTEIN.lower_cost(t1, t2, deletion, substitution, insertion),
                expected,
                (t1, t2, deletion, substitution, insertion),
            )

    def test_show_cost(self):
        self.assertEqual(costs.show_cost(Insertion(3)), '+ 3')
        self.assertEqual(costs.show_cost(Deletion(2)), '- 2')
        self.assertEqual(costs.show_cost(Substitution(1)), '~ 1')
        self.assertEqual(costs.show_cost(NoAction(0)), 'o 0')

    def test_weighted(self):
        weighted = WeightedCosts(insertion=2, deletion=3, substitution=5)
        self.assertEqual(weighted.insertion_cost('a'), 2)
        self.assertEqual(weighted.deletion_cost('a'), 3)
        self.assertEqual(weighted.substitution_cost('a', 'b'), 5)
        self.assertEqual(weighted.substitution_cost('a', 'a'), 0)
        self.assertEqual(weighted, WeightedCosts(2, 3, 5))
        self.assertNotEqual(weighted, WeightedCosts())

    def test_negative_weights(self):
        with self.assertRaises(ValueError):
            WeightedCosts(deletion=-1)

    def test_abstract_policy(self):
        with self.assertRaises(NotImplementedError):
            costs.Costs().insertion_cost('a')
