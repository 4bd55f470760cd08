import argparse
import logging
import sys

import pygame

from go_game.consts import VALID_BOARD_SIZES
from go_game.go import GoBoard
from go_game.go_visualizer import draw_board, draw_status, init_display, pixel_to_point
from go_game.size_prompt import get_board_size


def parser():
    p = argparse.ArgumentParser(description="Two-player Go on one screen.")
    p.add_argument("--size", type=int, choices=VALID_BOARD_SIZES,
                   help="board size; asked on the console when omitted")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def handle_event(event, board):
    """Apply one pygame event to *board*. Returns False when the window should close."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return False
        if event.key == pygame.K_p:
            board.pass_turn()
            logging.info("Pass. %s to play.", board.current_player.name.title())
        elif event.key == pygame.K_r:
            board.reset()
            logging.info("New game on a %dx%d board.", board.size, board.size)
    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        point = pixel_to_point(event.pos, board.size)
        if point is not None and not board.make_move(*point):
            logging.info("Illegal move at %s.", point)
    return True


def run(args):
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    size = args.size if args.size is not None else get_board_size()
    logging.info("Starting a %dx%d game. Click to play, P to pass, R to reset.", size, size)

    board = GoBoard(size)
    screen = init_display(size)
    clock = pygame.time.Clock()
    running = True
    while running:
        for event in pygame.event.get():
            if not handle_event(event, board):
                running = False
                break
        hover = pixel_to_point(pygame.mouse.get_pos(), board.size)
        draw_board(screen, board, hover)
        draw_status(screen, board)
        pygame.display.flip()
        clock.tick(30)

    logging.info("Captured - Black: %d, White: %d", board.captured_black, board.captured_white)
    pygame.quit()


def main(argv=None):
    run(parser().parse_args(argv))


if __name__ == "__main__":
    main()
    sys.exit()
