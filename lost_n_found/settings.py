"""
Tuning constants for Lost-n-Found.

Durations are in seconds. Difficulty values are the level-1 baselines the
curves in difficulty.py scale from.
"""

TITLE = "Lost-n-Found"

# --- Round timing ---
BASE_ROUND_DURATION = 15
ROUND_DURATION_STEP = 2        # seconds removed per difficulty step
ROUND_DURATION_MAX_CUT = 10    # floor duration = 5
ROUND_DURATION_GRACE_LEVELS = 6
ROUND_DURATION_STEP_LEVELS = 3

MESSAGE_DURATION = 3.0         # end-of-round banner
CONFUSION_DURATION = 3.0       # trap effect
CONFUSION_FLICKER_PERIOD = 1.0 # hints flip for the first half of each period

# --- Grid ---
BASE_GRID_SIZE = (15, 10)
GRID_GROWTH_STEP_LEVELS = 3
GRID_MAX_GROWTH = 10

# --- Reveal window ---
REVEAL_DURATION = 4.0
BASE_REVEAL_CAPACITY = 6
REVEAL_CAPACITY_STEP_LEVELS = 5
REVEAL_CAPACITY_MAX_CUT = 5

# Out of 10 equally likely slots
TRAP_SLOTS = 1
EMPTY_SLOTS = 2
HINT_SLOTS = 7
CONTENT_SLOTS = TRAP_SLOTS + EMPTY_SLOTS + HINT_SLOTS

# --- Surface (character cells) ---
CELL_SURFACE_WIDTH = 3
CELL_SURFACE_HEIGHT = 2
CELL_SURFACE_STRIDE_X = CELL_SURFACE_WIDTH + 1  # separator column
CELL_SURFACE_STRIDE_Y = CELL_SURFACE_HEIGHT     # bottom row doubles as separator
