# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG

COLS, ROWS = 10, 20
MARGIN, PANEL_W = 16, 200

@dataclass
class Dims:
    cell: int
    board_x: int = MARGIN
    board_y: int = MARGIN
    panel_w: int = PANEL_W

    @property
    def board_w(self): return COLS * self.cell
    @property
    def board_h(self): return ROWS * self.cell
    @property
    def panel_x(self): return self.board_x + self.board_w + MARGIN
    @property
    def panel_y(self): return self.board_y
    @property
    def total_w(self): return self.panel_x + self.panel_w + MARGIN
    @property
    def total_h(self): return self.board_y + self.board_h + MARGIN

    def to_screen(self, rect):
        """Shift a board-relative (x, y, w, h) rect into window coordinates."""
        x, y, w, h = rect
        return (self.board_x + x, self.board_y + y, w, h)

def compute_dims(config=CONFIG) -> Dims:
    return Dims(cell=int(config["CELL_SIZE"]))
