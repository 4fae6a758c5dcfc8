
# Visible playfield. Storage grid is over-provisioned so spawn rows and
# rotation arithmetic above the visible band stay in range.
COLS, ROWS = 10, 18
GRID_SIZE = 25

CONFIG = {
    "CELL_SIZE": 40,
    "MARGIN": 5,
    "FALL_MS": 400,
    "INPUT_REPEAT_MS": 100,
    "SEED": None,
    "LOG_LEVEL": "INFO",
}
