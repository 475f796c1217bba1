# tetro_layout.py
from dataclasses import dataclass
from tetro_config import CONFIG


@dataclass
class Dims:
    cell: int
    margin: int
    rows: int
    cols: int
    board_w: int
    board_h: int
    wall: int
    board_x: int
    board_y: int
    preview_x: int
    preview_y: int
    preview_w: int
    panel_x: int
    panel_y: int
    panel_w: int
    total_w: int
    total_h: int


def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    rows, cols = CONFIG["BOARD_HEIGHT"], CONFIG["BOARD_WIDTH"]
    margin = 16
    wall = cell // 2
    panel_w = int(CONFIG["PANEL_W"])
    preview_w = CONFIG["PREVIEW_SIDE"] * cell

    board_w = cols * cell
    board_h = rows * cell

    board_x = margin + wall
    board_y = margin
    preview_x = board_x + board_w + wall + margin
    preview_y = board_y
    panel_x = preview_x + preview_w + margin
    panel_y = margin

    total_w = panel_x + panel_w + margin
    total_h = margin + max(board_h + wall, preview_w) + margin

    return Dims(
        cell=cell, margin=margin, rows=rows, cols=cols,
        board_w=board_w, board_h=board_h, wall=wall,
        board_x=board_x, board_y=board_y,
        preview_x=preview_x, preview_y=preview_y, preview_w=preview_w,
        panel_x=panel_x, panel_y=panel_y, panel_w=panel_w,
        total_w=total_w, total_h=total_h,
    )
