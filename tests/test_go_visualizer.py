import unittest

import pygame

from go_game.consts import CELL_SIZE, STONE_RADIUS
from go_game.go import GoBoard
from go_game.go_visualizer import (
    BOARD_COLOR,
    LINE_COLOR,
    STATUS_HEIGHT,
    board_pixel_size,
    draw_board,
    pixel_to_point,
    point_to_pixel,
    status_text,
)


class TestCoordinates(unittest.TestCase):
    def test_point_to_pixel(self):
        self.assertEqual(point_to_pixel(0, 0), (CELL_SIZE // 2, STATUS_HEIGHT + CELL_SIZE // 2))
        x0, y0 = point_to_pixel(0, 0)
        self.assertEqual(point_to_pixel(2, 3), (x0 + 3 * CELL_SIZE, y0 + 2 * CELL_SIZE))

    def test_pixel_to_point_rounds_to_nearest_intersection(self):
        x, y = point_to_pixel(4, 5)
        self.assertEqual(pixel_to_point((x, y), 9), (4, 5))
        self.assertEqual(pixel_to_point((x + CELL_SIZE // 2 - 1, y - CELL_SIZE // 2), 9), (4, 5))
        self.assertEqual(pixel_to_point((x + CELL_SIZE // 2, y), 9), (4, 6))

    def test_pixel_to_point_off_board(self):
        self.assertIsNone(pixel_to_point((5, 5), 9))
        x, y = point_to_pixel(9, 0)
        self.assertIsNone(pixel_to_point((x, y), 9))
        self.assertEqual(pixel_to_point((x, y), 13), (9, 0))

    def test_board_pixel_size(self):
        self.assertEqual(board_pixel_size(19), CELL_SIZE * 20)


class TestDrawing(unittest.TestCase):
    def setUp(self):
        self.surface = pygame.Surface((400, 400))
        self.board = GoBoard(9)

    def test_draws_stones_and_star_points(self):
        self.board.make_move(0, 0)
        self.board.make_move(8, 8)
        draw_board(self.surface, self.board)
        self.assertEqual(self.surface.get_at(point_to_pixel(0, 0))[:3], (0, 0, 0))
        self.assertEqual(self.surface.get_at(point_to_pixel(8, 8))[:3], (255, 255, 255))
        self.assertEqual(self.surface.get_at(point_to_pixel(4, 4))[:3], LINE_COLOR)
        self.assertEqual(self.surface.get_at((1, STATUS_HEIGHT + 1))[:3], BOARD_COLOR)

    def test_last_move_ring(self):
        self.board.make_move(4, 4)
        draw_board(self.surface, self.board)
        x, y = point_to_pixel(4, 4)
        self.assertEqual(self.surface.get_at((x + STONE_RADIUS + 2, y))[:3], (255, 0, 0))

    def test_hover_preview_only_for_legal_moves(self):
        draw_board(self.surface, self.board)
        plain = self.surface.get_at(point_to_pixel(2, 3))
        draw_board(self.surface, self.board, hover=(2, 3))
        self.assertNotEqual(self.surface.get_at(point_to_pixel(2, 3)), plain)

        self.board.make_move(2, 3)
        draw_board(self.surface, self.board, hover=(2, 3))
        self.assertEqual(self.surface.get_at(point_to_pixel(2, 3))[:3], (0, 0, 0))

    def test_status_text(self):
        self.board.make_move(0, 0)
        self.assertEqual(status_text(self.board),
                         "Current Player: White | Captured - Black: 0, White: 0")


if __name__ == "__main__":
    unittest.main()
