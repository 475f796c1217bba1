
CONFIG = {
    "BOARD_HEIGHT": 16,
    "BOARD_WIDTH": 10,
    "SPAWN_ROW": 1,        # pivot row of a freshly spawned piece
    "PREVIEW_SIDE": 7,
    "INITIAL_SPEED": 1.0,
    "SPEED_INCREMENT": 1.0 / 3.0,
    "SCORE_MODULUS": 1500, # points required for a speed increase
    "SEED": None,
    "CELL_SIZE": 28,
    "PANEL_W": 220,
    "FPS": 60,
}

DEBUG_TUNING = {
    "INITIAL_SPEED": 2.0,
    "SPEED_INCREMENT": 2.0,
    "SCORE_MODULUS": 300,
    "SEED": 0,
}


def apply_debug_tuning():
    CONFIG.update(DEBUG_TUNING)


def spawn_point():
    """Pivot of a piece entering the board, centred on the top rows."""
    return CONFIG["SPAWN_ROW"], CONFIG["BOARD_WIDTH"] // 2


def preview_point():
    side = CONFIG["PREVIEW_SIDE"]
    return side // 2 - 1, side // 2
