BOARD_SIZE = 9
BOX_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

EMPTY = 0
MIN_VALUE = 1
MAX_VALUE = 9
