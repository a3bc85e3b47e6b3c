"""Arena dimensions and gameplay constants.

All distances are in pixels, all velocities in pixels per tick.
The tick rate is driven by the host (nominally one per display refresh),
so nothing here is time-scaled.
"""

# Arena (play field)
ARENA_WIDTH = 800
ARENA_HEIGHT = 600

# Paddle, pinned to the bottom edge
PADDLE_WIDTH = 100
PADDLE_HEIGHT = 10

# Ball
BALL_RADIUS = 8
BALL_START_OFFSET = 30  # start this far above the bottom edge
BALL_START_DX = 4.0
BALL_START_DY = -4.0  # negative = moving up

# Brick grid
BRICK_ROWS = 5
BRICK_COLS = 8
BRICK_HEIGHT = 20
BRICK_PADDING = 10
BRICK_TOP_OFFSET = 30  # extra gap above the first row
BRICK_POINTS = 10

# One palette entry per row
BRICK_PALETTE = ["#FF6B6B", "#4ECDC4", "#45B7D1", "#96CEB4", "#FFEEAD"]

# Paddle "English": lateral velocity added per pixel of off-center contact
ENGLISH_FACTOR = 0.05

# Headless match runner safety limit (ticks)
MAX_TICKS = 20000
