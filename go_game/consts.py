VALID_BOARD_SIZES = (9, 13, 19)
DEFAULT_BOARD_SIZE = 19

STAR_POINTS_9X9 = ((2, 2), (2, 6), (4, 4), (6, 2), (6, 6))
STAR_POINTS_13X13 = ((3, 3), (3, 9), (6, 6), (9, 3), (9, 9))
STAR_POINTS_19X19 = (
    (3, 3), (3, 9), (3, 15),
    (9, 3), (9, 9), (9, 15),
    (15, 3), (15, 9), (15, 15),
)

CELL_SIZE = 30
STONE_RADIUS = 12
TITLE = "Go Game"
WINDOW_SIZE = (800, 850)


def star_points(size):
    """Handicap points for *size*; unsupported sizes get the 19x19 set."""
    if size == VALID_BOARD_SIZES[0]:
        return STAR_POINTS_9X9
    if size == VALID_BOARD_SIZES[1]:
        return STAR_POINTS_13X13
    return STAR_POINTS_19X19
