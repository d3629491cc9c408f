import unittest

from game import count_games, play_moves


class TestExhaustiveEnumeration(unittest.TestCase):
    def test_given_fresh_game_when_enumerating_then_known_totals(self):
        counts = count_games()
        self.assertEqual(counts.as_dict(), {
            "games": 255168,
            "x_wins": 131184,
            "o_wins": 77904,
            "draws": 46080,
        })
        self.assertEqual(counts.games, counts.x_wins + counts.o_wins + counts.draws)

    def test_given_one_cell_left_when_enumerating_then_single_game(self):
        engine = play_moves([0, 1, 2, 4, 3, 5, 7, 6])
        counts = count_games(engine)
        self.assertEqual(counts.games, 1)
        self.assertEqual(counts.draws, 1)
        # Source engine is untouched
        self.assertEqual(engine.board.grid[8], '')

    def test_given_finished_game_when_enumerating_then_nothing_counted(self):
        counts = count_games(play_moves([0, 3, 1, 4, 2]))
        self.assertEqual(counts.games, 0)


if __name__ == '__main__':
    unittest.main(verbosity=2)
