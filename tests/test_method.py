import unittest

from saw.method import MethodContext, SAWMethod


class TestSAWMethod(unittest.TestCase):
    def test_compute_scores_ranks_best(self) -> None:
        method = SAWMethod()
        option_scores = {
            "Option A": [10.0, 5.0],
            "Option B": [20.0, 3.0],
            "Option C": [30.0, 1.0],
        }

        ranked = method.compute_scores([0.5, 0.5], option_scores)
        self.assertEqual([name for name, _ in ranked], ["Option C", "Option B", "Option A"])
        self.assertAlmostEqual(ranked[0][1], 1.0, places=3)
        self.assertAlmostEqual(ranked[2][1], 0.2665, places=3)

    def test_pivot_from_context(self) -> None:
        method = SAWMethod()
        option_scores = {
            "Option A": [1.0, 10.0],
            "Option B": [2.0, 5.0],
        }

        ranked = method.compute_scores(
            [0.5, 0.5], option_scores, context=MethodContext(pivot_index=1)
        )
        # Cost: 1/1, 1/2; Quality: 10/10, 5/10
        self.assertEqual(ranked[0][0], "Option A")
        self.assertAlmostEqual(ranked[0][1], 1.0, places=3)
        self.assertAlmostEqual(ranked[1][1], 0.5, places=3)

    def test_empty(self) -> None:
        self.assertEqual(SAWMethod().compute_scores([], {}), [])
