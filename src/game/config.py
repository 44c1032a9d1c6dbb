# --- Display ---
WIDTH = 480
HEIGHT = 640
FPS = 60

# --- Bird (all physics is per tick, not per second) ---
BIRD_X_FRAC = 0.2           # bird's fixed x as a fraction of WIDTH
BIRD_SIZE = 25.0            # radius, used for drawing and (shrunk) for collisions
GRAVITY = 0.3               # px/tick^2, positive = down
LIFT = -8.0                 # velocity set by a flap
FLAP_BOOST = 1.1            # lift multiplier when flapping while already going up
TERMINAL_VELOCITY = 10.0    # clamp before drag
DRAG = 0.97                 # multiplicative air resistance per tick
ROTATION_K = 0.1            # rotation = velocity * ROTATION_K, clamped to ±MAX_ROTATION
MAX_ROTATION = 1.0471975511965976  # pi / 3

# --- Pipes ---
PIPE_WIDTH = 80.0
PIPE_GAP = 200.0
PIPE_SPEED = 2.5            # px/tick, leftward
PIPE_MIN_TOP = 50.0         # shortest top segment
PIPE_MARGIN = 150.0         # HEIGHT - PIPE_GAP - PIPE_MARGIN = random span of gap_top
HITBOX_SCALE = 0.7          # bird collision half-size = BIRD_SIZE * HITBOX_SCALE
SPAWN_INTERVAL = 100        # ticks between pipes

# --- Persistence ---
HIGHSCORE_FILE = "highscore.json"

# --- Colors (RGB) ---
COLOR_SKY_TOP = (135, 206, 235)
COLOR_SKY_BOT = (76, 161, 175)
COLOR_PIPE = (46, 204, 113)
COLOR_PIPE_LIP = (39, 174, 96)
COLOR_BIRD = (255, 215, 0)
COLOR_WING = (255, 165, 0)
COLOR_BEAK = (255, 107, 107)
COLOR_FG = (255, 255, 255)
COLOR_OUTLINE = (0, 0, 0)
COLOR_SHADE = (0, 0, 0, 128)

PIPE_LIP_H = 30
PIPE_LIP_W = 10
