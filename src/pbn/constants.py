# Board cell footprint in terminal cells.
CELL_WIDTH = 2
CELL_HEIGHT = 1

# Palette panel geometry (terminal cells). The panel sits centered on the bottom rows.
SWATCH_WIDTH = 6
SWATCH_HEIGHT = 3
SWATCHES_PER_ROW = 5
SWATCH_ROWS = 2
PALETTE_PAGE_SIZE = SWATCHES_PER_ROW * SWATCH_ROWS
PALETTE_WIDTH = SWATCH_WIDTH * SWATCHES_PER_ROW
# Rule row above the swatches plus the swatch rows.
PALETTE_HEIGHT = SWATCH_HEIGHT * SWATCH_ROWS + 1
# Horizontal distance between the panel edge and the page arrows.
ARROW_GAP = 3
ARROW_WIDTH = 3
ARROW_HEIGHT = 3

# Status line reserved at the top of the screen.
STATUS_ROWS = 1

# Palette indices are stored as bytes.
MAX_COLORS = 256

FPS = 60

# Board size used when neither an image nor an explicit random size is given.
DEFAULT_RANDOM_COLS = 24
DEFAULT_RANDOM_ROWS = 12

BORDER_COLOR = (0, 0, 0)
UNFILLED_FG = (143, 149, 170)
UNFILLED_BG = None
HIGHLIGHT_FG = (255, 255, 255)
HIGHLIGHT_BG = (60, 63, 72)
STATUS_FG = (220, 220, 220)
STATUS_BG = (30, 30, 40)
COMPLETE_FG = (120, 220, 120)

# Swatch text colors picked by luma of the swatch background.
DARK_TEXT = (0, 0, 0)
DARK_TEXT_DIM = (25, 25, 25)
LIGHT_TEXT = (255, 255, 255)
LIGHT_TEXT_DIM = (229, 229, 229)
LUMA_THRESHOLD = 0.5
