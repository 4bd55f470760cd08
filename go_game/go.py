import enum
import logging
from typing import Iterator, List, Optional, Set, Tuple

from go_game.consts import DEFAULT_BOARD_SIZE

Point = Tuple[int, int]


class Stone(enum.Enum):
    BLACK = "B"
    WHITE = "W"
    EMPTY = "."


class Player(enum.Enum):
    BLACK = "B"
    WHITE = "W"

    def other(self) -> "Player":
        return Player.WHITE if self is Player.BLACK else Player.BLACK

    def to_stone(self) -> Stone:
        return Stone.BLACK if self is Player.BLACK else Stone.WHITE


class GoBoard:
    """Rules engine for a single Go board.

    The board is mutated in place by ``make_move`` and ``pass_turn``.
    Suicide is illegal unless the move captures; the Ko rule is not
    enforced and no scoring is done. Illegal moves are reported by a
    ``False`` return value, never by an exception.

    Capture counters are named after the color of the stones removed:
    ``captured_white`` counts White stones taken off the board (Black's
    captures) and ``captured_black`` counts Black stones (White's captures).

    ``game_over`` is never set by the engine itself; the host sets it,
    for example after a resignation or two consecutive passes.
    """

    def __init__(self, size: int = DEFAULT_BOARD_SIZE):
        if size < 1:
            raise ValueError(f"Board size must be a positive integer, got {size}")
        self.size = size
        self.board: List[List[Stone]] = [[Stone.EMPTY] * size for _ in range(size)]
        self.current_player = Player.BLACK
        self.captured_black = 0
        self.captured_white = 0
        self.game_over = False
        self.last_move: Optional[Point] = None

    def reset(self) -> None:
        """Start over on a fresh board of the default size."""
        self.__init__()
        logging.debug("Board reset to %dx%d", self.size, self.size)

    # ------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------
    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def stone_at(self, row: int, col: int) -> Stone:
        return self.board[row][col]

    def _adjacent(self, row: int, col: int) -> Iterator[Point]:
        # up, down, left, right
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            rr, cc = row + dr, col + dc
            if 0 <= rr < self.size and 0 <= cc < self.size:
                yield rr, cc

    def neighbors(self, row: int, col: int) -> List[Point]:
        return list(self._adjacent(row, col))

    # ------------------------------------------------------------
    # Groups and liberties
    # ------------------------------------------------------------
    def _collect_group(self, row: int, col: int) -> Tuple[Set[Point], Set[Point]]:
        """Return the chain containing (row, col) and the empty points around it."""
        color = self.board[row][col]
        group = set()
        liberties = set()
        stack = [(row, col)]
        seen = set(stack)
        while stack:
            r, c = stack.pop()
            group.add((r, c))
            for nr, nc in self._adjacent(r, c):
                neighbor = self.board[nr][nc]
                if neighbor is Stone.EMPTY and color is not Stone.EMPTY:
                    liberties.add((nr, nc))
                elif neighbor is color and (nr, nc) not in seen:
                    seen.add((nr, nc))
                    stack.append((nr, nc))
        return group, liberties

    def group(self, row: int, col: int) -> Set[Point]:
        """Maximal 4-connected set of stones sharing the color at (row, col)."""
        return self._collect_group(row, col)[0]

    def liberties(self, row: int, col: int) -> Set[Point]:
        if self.board[row][col] is Stone.EMPTY:
            return set()
        return self._collect_group(row, col)[1]

    def has_liberties(self, row: int, col: int) -> bool:
        # An empty point counts as safe.
        if self.board[row][col] is Stone.EMPTY:
            return True
        return bool(self._collect_group(row, col)[1])

    def resolve_captures(self, opponent: Stone) -> int:
        """Remove every group of *opponent* that has no liberties.

        Dead groups are gathered first and cleared afterwards, so removing
        one group cannot hand a liberty to another group that is still
        being examined. Returns the number of stones removed.
        """
        visited = set()
        doomed = set()
        for r in range(self.size):
            for c in range(self.size):
                if self.board[r][c] is opponent and (r, c) not in visited:
                    group, libs = self._collect_group(r, c)
                    visited.update(group)
                    if not libs:
                        doomed.update(group)
        for r, c in doomed:
            self.board[r][c] = Stone.EMPTY
        return len(doomed)

    # ------------------------------------------------------------
    # Legality
    # ------------------------------------------------------------
    def _liberties_without(self, row: int, col: int, excluded: Point) -> Set[Point]:
        _, libs = self._collect_group(row, col)
        libs.discard(excluded)
        return libs

    def would_capture(self, row: int, col: int, player: Player) -> bool:
        """True if playing (row, col) leaves a neighbouring enemy chain without liberties."""
        opponent = player.other().to_stone()
        for nr, nc in self._adjacent(row, col):
            if self.board[nr][nc] is opponent and not self._liberties_without(nr, nc, (row, col)):
                return True
        return False

    def would_be_suicide(self, row: int, col: int, player: Player) -> bool:
        """True if a stone at (row, col) would end up in a chain with no liberties.

        Captures are not taken into account here; ``is_valid_move`` checks
        ``would_capture`` first.
        """
        own = player.to_stone()
        adjacent = self.neighbors(row, col)
        if any(self.board[nr][nc] is Stone.EMPTY for nr, nc in adjacent):
            return False
        for nr, nc in adjacent:
            if self.board[nr][nc] is own and self._liberties_without(nr, nc, (row, col)):
                return False
        return True

    def is_valid_move(self, row: int, col: int) -> bool:
        if self.game_over or self.board[row][col] is not Stone.EMPTY:
            return False
        if self.would_capture(row, col, self.current_player):
            return True
        return not self.would_be_suicide(row, col, self.current_player)

    def legal_moves(self) -> List[Point]:
        return [
            (r, c)
            for r in range(self.size)
            for c in range(self.size)
            if self.is_valid_move(r, c)
        ]

    # ------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------
    def make_move(self, row: int, col: int) -> bool:
        player = self.current_player
        if not self.is_valid_move(row, col):
            logging.debug("Rejected %s move at %s", player.name, (row, col))
            return False
        self.board[row][col] = player.to_stone()
        self.last_move = (row, col)
        captured = self.resolve_captures(player.other().to_stone())
        if player is Player.BLACK:
            self.captured_white += captured
        else:
            self.captured_black += captured
        self.current_player = player.other()
        if captured:
            logging.debug("%s plays %s capturing %d", player.name, (row, col), captured)
        else:
            logging.debug("%s plays %s", player.name, (row, col))
        return True

    def pass_turn(self) -> None:
        logging.debug("%s passes", self.current_player.name)
        self.current_player = self.current_player.other()

    # ------------------------------------------------------------
    # Text output
    # ------------------------------------------------------------
    def board_to_lines(self) -> List[str]:
        return [" ".join(stone.value for stone in row) for row in self.board]

    def print_board(self, out=print) -> None:
        """
        Print the board, top row first. E.g. on a 3x3 board:

        B . .
        . W .
        . . .
        """
        for line in self.board_to_lines():
            out(line)
        out(
            f"{self.current_player.name.title()} to play. "
            f"Captured - Black: {self.captured_black}, White: {self.captured_white}"
        )
