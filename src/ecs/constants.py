import os

BOARD_SIZE = 4
# Value placed on a random empty cell at start and after every effective move.
SPAWN_VALUE = 1
# With 1-valued spawns no 4x4 board can merge past this.
MAX_TILE_VALUE = 1 << (BOARD_SIZE * BOARD_SIZE)

# Window geometry (pixels). The board is centred with SPACING on every side.
TILE_SIZE = 100
SPACING = 10
# Inset applied to every tile rectangle so neighbouring tiles read as separate.
TILE_PADDING = 4
LABEL_FONT_SIZE = 24
WINDOW_TITLE = "2048 Game"

# Palette
BOARD_COLOR = (187, 173, 160)
EMPTY_TILE_COLOR = (205, 192, 180)
TEXT_COLOR = (119, 110, 101)
# Indexed by log2(value); values past the end reuse the last entry.
TILE_COLORS = [
    (238, 228, 218), (237, 224, 200), (242, 177, 121),
    (245, 149, 99), (246, 124, 95), (246, 94, 59),
    (237, 207, 114), (237, 204, 97), (237, 200, 80),
    (237, 197, 63), (237, 194, 46), (60, 58, 50),
]

# Key symbols as reported by arcade (pyglet key codes); kept as ints so systems
# do not need to import arcade.
KEY_LEFT = 65361
KEY_UP = 65362
KEY_RIGHT = 65363
KEY_DOWN = 65364
KEY_W = 119
KEY_A = 97
KEY_S = 115
KEY_D = 100

LOG_LEVEL = os.environ.get("GAME2048_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
