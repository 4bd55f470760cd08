from go_game.consts import DEFAULT_BOARD_SIZE, VALID_BOARD_SIZES

PROMPT = "Please enter a board size of 9, 13, or 19 (press Enter for 19): "


def get_board_size(prompt=PROMPT, read=input, out=print):
    """Ask for a board size until a supported one is given.

    A blank line picks the default size, as does running out of input.
    """
    while True:
        out(prompt)
        try:
            text = read().strip()
        except EOFError:
            out("Proceeding with default board size.")
            return DEFAULT_BOARD_SIZE
        if not text:
            out("Proceeding with default board size.")
            return DEFAULT_BOARD_SIZE
        try:
            size = int(text)
        except ValueError:
            size = None
        if size in VALID_BOARD_SIZES:
            return size
        out("Invalid input. Please enter a valid integer.")
