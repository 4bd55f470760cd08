import pygame

from typing import Optional, Tuple

from go_game.consts import CELL_SIZE, STONE_RADIUS, TITLE, WINDOW_SIZE, star_points
from go_game.go import Player, Stone

BOARD_COLOR = (220, 179, 92)
LINE_COLOR = (101, 67, 33)
BLACK_COLOR = (0, 0, 0)
WHITE_COLOR = (255, 255, 255)
BORDER_COLOR = (96, 96, 96)
SHADOW_COLOR = (0, 0, 0, 100)
LAST_MOVE_COLOR = (255, 0, 0)
PREVIEW_COLORS = {
    Player.BLACK: (0, 0, 0, 100),
    Player.WHITE: (255, 255, 255, 150),
}
STATUS_HEIGHT = 40
STAR_RADIUS = 3


def board_pixel_size(size: int) -> int:
    return CELL_SIZE * (size + 1)


def board_origin(top: int = STATUS_HEIGHT) -> Tuple[int, int]:
    """Pixel position of intersection (0, 0)."""
    return CELL_SIZE // 2, top + CELL_SIZE // 2


def point_to_pixel(row: int, col: int, top: int = STATUS_HEIGHT) -> Tuple[int, int]:
    ox, oy = board_origin(top)
    return ox + col * CELL_SIZE, oy + row * CELL_SIZE


def pixel_to_point(pos, size: int, top: int = STATUS_HEIGHT) -> Optional[Tuple[int, int]]:
    """Nearest intersection to *pos*, or None when the click is off the board."""
    ox, oy = board_origin(top)
    x, y = pos[0] - ox + CELL_SIZE // 2, pos[1] - oy + CELL_SIZE // 2
    if x < 0 or y < 0:
        return None
    row, col = y // CELL_SIZE, x // CELL_SIZE
    if row >= size or col >= size:
        return None
    return row, col


def init_display(size: int):
    width = max(WINDOW_SIZE[0], board_pixel_size(size))
    height = max(WINDOW_SIZE[1], board_pixel_size(size) + STATUS_HEIGHT)
    pygame.init()
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption(TITLE)
    return screen


def _draw_stone(surface, pos, stone: Stone) -> None:
    x, y = pos
    shadow = pygame.Surface((2 * STONE_RADIUS + 2, 2 * STONE_RADIUS + 2), pygame.SRCALPHA)
    pygame.draw.circle(shadow, SHADOW_COLOR, (STONE_RADIUS + 1, STONE_RADIUS + 1), STONE_RADIUS)
    surface.blit(shadow, (x - STONE_RADIUS, y - STONE_RADIUS))
    color = BLACK_COLOR if stone is Stone.BLACK else WHITE_COLOR
    pygame.draw.circle(surface, color, pos, STONE_RADIUS)
    pygame.draw.circle(surface, BORDER_COLOR, pos, STONE_RADIUS, 1)


def draw_board(surface, board, hover=None, top: int = STATUS_HEIGHT) -> None:
    """Draw grid, star points and stones of *board* onto *surface*.

    *hover* is the intersection under the mouse; when it is a legal move a
    translucent stone of the player to move is drawn there.
    """
    size = board.size
    surface.fill(BOARD_COLOR)
    extent = (size - 1) * CELL_SIZE

    for i in range(size):
        x0, y0 = point_to_pixel(i, 0, top)
        pygame.draw.line(surface, LINE_COLOR, (x0, y0), (x0 + extent, y0), 1)
        x0, y0 = point_to_pixel(0, i, top)
        pygame.draw.line(surface, LINE_COLOR, (x0, y0), (x0, y0 + extent), 1)

    for r, c in star_points(size):
        if r < size and c < size:
            pygame.draw.circle(surface, LINE_COLOR, point_to_pixel(r, c, top), STAR_RADIUS)

    for r in range(size):
        for c in range(size):
            stone = board.stone_at(r, c)
            if stone is Stone.EMPTY:
                continue
            pos = point_to_pixel(r, c, top)
            _draw_stone(surface, pos, stone)
            if board.last_move == (r, c):
                pygame.draw.circle(surface, LAST_MOVE_COLOR, pos, STONE_RADIUS + 3, 2)

    if hover is not None and board.is_valid_move(*hover):
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        radius = int(STONE_RADIUS * 0.7)
        pygame.draw.circle(overlay, PREVIEW_COLORS[board.current_player],
                           point_to_pixel(hover[0], hover[1], top), radius)
        surface.blit(overlay, (0, 0))


def status_text(board) -> str:
    return (f"Current Player: {board.current_player.name.title()} | "
            f"Captured - Black: {board.captured_black}, White: {board.captured_white}")


def draw_status(surface, board) -> None:
    font = pygame.font.SysFont(None, 24)
    txt = font.render(status_text(board), True, BLACK_COLOR)
    surface.blit(txt, (10, 10))
