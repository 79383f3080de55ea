GRID_ROWS = 17
GRID_COLS = 10
ROUND_DURATION_SECONDS = 60

# The deadlock and hint scans visit every sub-rectangle (rows^2 * cols^2); boards
# above this many cells are allowed but logged as slow.
LARGE_GRID_CELLS = 400

TARGET_SUM = 10
MIN_SELECTION_TILES = 2
MIN_TILE_VALUE = 1
MAX_TILE_VALUE = 9
POINTS_PER_TILE = 10

# Cumulative thresholds on a single uniform roll, checked in this order.
BOMB_THRESHOLD = 0.01
WILD_THRESHOLD = 0.03
TIME_BONUS_THRESHOLD = 0.06
GOLDEN_THRESHOLD = 0.11

TIME_BONUS_SECONDS = 5
BOMB_RADIUS = 1

# (minimum combo, multiplier), highest tier first.
COMBO_TIERS = (
    (8, 3.0),
    (6, 2.5),
    (4, 2.0),
    (2, 1.5),
    (1, 1.0),
)

DEFAULT_HINT_CHARGES = 3
DEFAULT_FREEZE_CHARGES = 1
DEFAULT_RESHUFFLE_CHARGES = 2

HINT_DURATION_SECONDS = 3.0
FREEZE_DURATION_SECONDS = 5.0
