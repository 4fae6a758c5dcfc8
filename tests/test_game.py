import unittest

from tetris_board import locked_cells
from tetris_config import CONFIG, ROWS
from tetris_game import SPAWN_X, SPAWN_Y, Game
from tetris_input import InputState
from tetris_piece import COLORS, PATTERNS, Piece

I, SQUARE, T = PATTERNS[0], PATTERNS[5], PATTERNS[6]
COLOR = COLORS[1]


def cells(game):
    return sorted((x, y) for x, y, _ in locked_cells(game.board))


class GameTests(unittest.TestCase):
    def setUp(self):
        self.events = []
        self.game = Game(seed=1234)
        self.game.listeners.append(lambda name, data: self.events.append((name, data)))

    def place(self, pattern, x, y):
        self.game.piece = Piece.spawn(pattern, COLOR, x, y)
        self.game.spawn_requested = False
        return self.game.piece

    def test_spawn_on_empty_board(self):
        self.assertEqual((SPAWN_X, SPAWN_Y), (5, ROWS))
        self.assertTrue(self.game.spawn(I, COLOR))
        self.assertEqual(sorted(self.game.piece.positions()), [(5, 17), (5, 18), (5, 19), (5, 20)])
        self.assertEqual(self.game.piece.color, COLOR)
        self.assertFalse(self.game.spawn_requested)
        self.assertEqual(self.events[-1][0], "spawn")

    def test_lock_at_floor_requests_spawn(self):
        self.place(SQUARE, 3, 0)
        self.assertFalse(self.game.fall())
        self.assertEqual(cells(self.game), [(3, 0), (3, 1), (4, 0), (4, 1)])
        self.assertIsNone(self.game.piece)
        self.assertTrue(self.game.spawn_requested)
        self.assertEqual([name for name, _ in self.events], ["lock", "spawn_requested"])

    def test_fall_moves_one_row(self):
        piece = self.place(SQUARE, 3, 4)
        self.assertTrue(self.game.fall())
        self.assertEqual(piece.positions(), [(3, 3), (3, 4), (4, 3), (4, 4)])
        self.assertEqual(cells(self.game), [])

    def test_spawn_collision_is_game_over(self):
        self.game.board[SPAWN_Y][SPAWN_X] = COLOR
        self.assertFalse(self.game.spawn(I, COLOR))
        self.assertTrue(self.game.game_over)
        self.assertIsNone(self.game.piece)
        self.assertEqual(self.events[-1][0], "game_over")

        self.game.restart()
        self.assertEqual(cells(self.game), [])
        self.assertFalse(self.game.game_over)
        self.assertTrue(self.game.spawn_requested)

    def test_restart_announces_spawn_request(self):
        self.game.board[SPAWN_Y][SPAWN_X] = COLOR
        self.game.spawn(I, COLOR)
        self.game.restart()
        names = [name for name, _ in self.events]
        self.assertEqual(names, ["game_over", "spawn_requested"])

    def test_restart_resets_timers(self):
        self.game.tick(0)
        self.game.tick(CONFIG["FALL_MS"] - 10, InputState(left=True))
        self.game.restart()
        self.assertEqual(self.game.fall_timer.elapsed, 0)
        self.assertEqual(self.game.shift_repeat.timer.elapsed, 0)

    def test_tick_restarts_after_game_over(self):
        # every catalog shape covers the spawn anchor
        self.game.board[SPAWN_Y][SPAWN_X] = COLOR
        self.game.board[0][0] = COLOR
        self.game.tick(0)
        self.assertIn("game_over", [name for name, _ in self.events])
        self.assertEqual(cells(self.game), [])
        self.assertIsNotNone(self.game.piece)
        self.assertFalse(self.game.game_over)

    def test_first_tick_spawns(self):
        self.assertIsNone(self.game.piece)
        self.game.tick(0)
        self.assertEqual(len(self.game.piece.cells), 4)

    def test_gravity_interval(self):
        self.game.tick(0)
        before = self.game.piece.positions()
        self.game.tick(CONFIG["FALL_MS"] - 1)
        self.assertEqual(self.game.piece.positions(), before)
        self.game.tick(1)
        self.assertEqual(self.game.piece.positions(), [(x, y - 1) for x, y in before])

    def test_held_shift_repeats_at_input_rate(self):
        self.game.tick(0)
        before = self.game.piece.positions()
        held = InputState(left=True)
        self.game.tick(CONFIG["INPUT_REPEAT_MS"] / 2, held)
        self.assertEqual(self.game.piece.positions(), before)
        self.game.tick(CONFIG["INPUT_REPEAT_MS"] / 2, held)
        self.assertEqual(self.game.piece.positions(), [(x - 1, y) for x, y in before])

    def test_rotate_on_key_down(self):
        piece = self.place(T, 5, 8)
        self.game.tick(0, InputState(rotate=True))
        self.assertEqual(piece.offsets(), [(0, 0), (0, 1), (0, -1), (1, 0)])

    def test_hard_drop_then_next_fall_spawns(self):
        piece = self.place(I, 5, 8)
        self.game.tick(0, InputState(drop=True))
        self.assertTrue(piece.landed)
        self.assertEqual(cells(self.game), [(5, 0), (5, 1), (5, 2), (5, 3)])
        # landed cells are drawn once, from the board
        self.assertEqual(len(self.game.live_cells()), 4)

        self.game.tick(CONFIG["FALL_MS"])
        self.assertIsNotNone(self.game.piece)
        self.assertIsNot(self.game.piece, piece)
        self.assertFalse(self.game.piece.landed)
        self.assertEqual(cells(self.game), [(5, 0), (5, 1), (5, 2), (5, 3)])

    def test_hard_drop_reports_lock_before_rows_clear(self):
        for x in range(10):
            if x != 5:
                self.game.board[0][x] = COLOR
        self.place(I, 5, 8)
        self.game.tick(0, InputState(drop=True))
        self.game.tick(CONFIG["FALL_MS"])
        locks = [data["cells"] for name, data in self.events if name == "lock"]
        self.assertEqual(locks, [[(5, 1), (5, 0), (5, 2), (5, 3)]])
        self.assertIn("spawn_requested", [name for name, _ in self.events])

    def test_drop_completing_row_clears_it(self):
        for x in range(10):
            if x != 5:
                self.game.board[0][x] = COLOR
        self.place(I, 5, 8)
        self.game.tick(0, InputState(drop=True))
        self.assertEqual(cells(self.game), [(5, 0), (5, 1), (5, 2)])
        self.assertIn(("lines", {"count": 1}), self.events)

    def test_lock_and_spawn_in_same_tick(self):
        self.place(SQUARE, 3, 0)
        self.game.tick(CONFIG["FALL_MS"])
        self.assertIsNotNone(self.game.piece)
        self.assertEqual(cells(self.game), [(3, 0), (3, 1), (4, 0), (4, 1)])

    def test_live_cells_include_falling_piece(self):
        self.game.board[0][0] = COLOR
        self.place(SQUARE, 3, 5)
        live = self.game.live_cells()
        self.assertEqual(len(live), 5)
        self.assertIn((3, 5, COLOR), live)

    def test_seeded_games_draw_the_same_pieces(self):
        a, b = Game(seed=7), Game(seed=7)
        for _ in range(10):
            a.spawn()
            b.spawn()
            self.assertEqual(a.piece.offsets(), b.piece.offsets())
            self.assertEqual(a.piece.color, b.piece.color)

    def test_negative_dt_rejected(self):
        with self.assertRaises(ValueError):
            self.game.tick(-1)

    def test_malformed_catalog_rejected(self):
        with self.assertRaises(ValueError):
            Game(patterns=[[(0, 1), (1, 1), (2, 1), (3, 1)]])
        with self.assertRaises(ValueError):
            Game(colors=[])

    def test_input_without_piece_is_ignored(self):
        self.assertFalse(self.game.shift(-1))
        self.assertFalse(self.game.rotate())
        self.assertFalse(self.game.hard_drop())
        self.assertFalse(self.game.fall())


if __name__ == "__main__":
    unittest.main()
