from __future__ import annotations

import unittest

from tictacchec.engine.types import Color, Difficulty, GameMode
from tictacchec.stats import GameStats


class GameStatsTests(unittest.TestCase):
    def setUp(self) -> None:
        self.stats = GameStats()

    def test_streaks(self) -> None:
        for _ in range(3):
            self.stats.record_game_result(Color.WHITE, Color.WHITE, GameMode.AI, Difficulty.HARD)
        self.stats.record_game_result(Color.BLACK, Color.WHITE, GameMode.AI, Difficulty.HARD)
        self.stats.record_game_result(Color.WHITE, Color.WHITE, GameMode.AI, Difficulty.HARD)
        self.assertEqual(self.stats.wins, 4)
        self.assertEqual(self.stats.losses, 1)
        self.assertEqual(self.stats.win_streak, 1)
        self.assertEqual(self.stats.best_streak, 3)
        self.assertAlmostEqual(self.stats.win_rate, 0.8)

    def test_draw_breaks_streak(self) -> None:
        self.stats.record_game_result(Color.WHITE, Color.WHITE, GameMode.LOCAL)
        self.stats.record_game_result(None, Color.WHITE, GameMode.LOCAL)
        self.assertEqual(self.stats.draws, 1)
        self.assertEqual(self.stats.win_streak, 0)
        self.assertEqual(self.stats.best_streak, 1)
        self.assertEqual(self.stats.games_played, 2)

    def test_difficulty_tallies_only_for_ai_games(self) -> None:
        self.stats.record_game_result(Color.WHITE, Color.WHITE, GameMode.AI, Difficulty.EASY)
        self.stats.record_game_result(Color.BLACK, Color.WHITE, GameMode.AI, Difficulty.EASY)
        self.stats.record_game_result(Color.WHITE, Color.WHITE, GameMode.LOCAL, Difficulty.EASY)
        easy = self.stats.by_difficulty["easy"]
        self.assertEqual((easy.wins, easy.losses), (1, 1))
        self.assertEqual(self.stats.wins, 2)

    def test_empty_record(self) -> None:
        self.assertEqual(self.stats.win_rate, 0.0)
        self.assertEqual(set(self.stats.by_difficulty), {"easy", "medium", "hard"})

    def test_dict_round_trip_and_reset(self) -> None:
        self.stats.record_game_result(Color.BLACK, Color.BLACK, GameMode.AI, Difficulty.MEDIUM)
        restored = GameStats.from_dict(self.stats.to_dict())
        self.assertEqual(restored, self.stats)
        self.assertEqual(restored.by_difficulty["medium"].wins, 1)

        restored.reset()
        self.assertEqual(restored, GameStats())

    def test_from_dict_ignores_unknown_difficulty(self) -> None:
        stats = GameStats.from_dict({"wins": 2, "by_difficulty": {"nightmare": {"wins": 9}}})
        self.assertEqual(stats.wins, 2)
        self.assertNotIn("nightmare", stats.by_difficulty)


if __name__ == "__main__":
    unittest.main()
