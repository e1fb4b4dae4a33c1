"""
Tests for the random-play evaluation command.
"""

from unittest import TestCase, main
from unittest.mock import patch

from tilemerge.evaluate import evaluate, main as evaluate_main


class TestEvaluate(TestCase):
    """Test random games played to the end."""

    def test_counts_every_game(self):
        """Frequencies add up to the number of games, keyed by power-of-two tiles."""
        result = evaluate(length=3, seed=0)

        self.assertEqual(sum(result.values()), 3)
        for tile in result:
            self.assertGreaterEqual(tile, 4)
            self.assertEqual(tile & (tile - 1), 0)

    def test_seed_reproducibility(self):
        """Same seed plays the same games."""
        self.assertEqual(evaluate(length=2, seed=5), evaluate(length=2, seed=5))

    def test_main_prints_result(self):
        """The command line entry point prints the frequencies."""
        with patch('builtins.print') as mocked:
            evaluate_main(['--length', '1', '--seed', '3'])
        self.assertIn('Highest tiles over 1 games', mocked.call_args[0][0])


if __name__ == '__main__':
    main()
