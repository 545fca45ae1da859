# --- Display ---
WIDTH = 800
HEIGHT = 320
FPS = 60

# --- Timestep ---
FIXED_DT = 1.0              # one reference frame (1/FPS s); all rates below are per frame

# --- World / Physics ---
GROUND_Y = 250              # player top-y when standing on the ground
GRAVITY = 0.9               # px/frame^2, pulls down
JUMP_VELOCITY = -14.0       # vy set by a jump (px/frame)
MAX_JUMPS = 2               # double jump
SCROLL_SPEED = 4.0          # base scroll speed (px/frame)

# --- Player ---
PLAYER_X = 60               # player's fixed x (world scrolls left)
PLAYER_SIZE = 32

# --- Obstacles ---
OBSTACLE_W = 24
OBSTACLE_BASE_H = 40
OBSTACLE_H_JITTER = 30      # height = base + U[0, jitter)
OBSTACLE_GAP = 240          # spawn once the last obstacle is left of WIDTH - gap
OBSTACLE_HITBOX_INSET = 6   # player box shrinks by this on each side vs obstacles

# --- Power-ups ---
POWERUP_SIZE = 24
POWERUP_OFFSET_Y = 40       # px above GROUND_Y
POWERUP_CHANCE = 0.25       # per obstacle spawn
POWERUP_BOOST = 3.0         # added to SCROLL_SPEED while active
POWERUP_DURATION = 180      # frames

# --- Seeds ---
SEED_DEFAULT = 12345

# --- Ground strip ---
GROUND_STRIP_H = 8

# --- Start / retry button ---
BUTTON_W = 180
BUTTON_H = 48

# --- Colors (RGB) ---
COLOR_BG = (246, 250, 255)
COLOR_GROUND = (188, 223, 241)
COLOR_PLAYER = (79, 140, 255)
COLOR_PLAYER_POWERED = (255, 152, 0)
COLOR_PLAYER_SHADOW = (37, 99, 235)
COLOR_OBSTACLE = (108, 117, 125)
COLOR_POWERUP = (255, 235, 59)
COLOR_POWERUP_RIM = (255, 160, 0)
COLOR_TEXT = (51, 51, 51)
COLOR_DANGER = (255, 82, 82)
COLOR_BUTTON = (40, 60, 90)
COLOR_BUTTON_RIM = (90, 130, 180)
COLOR_BUTTON_TEXT = (220, 235, 255)

# --- Debug ---
DEBUG_SESSION_LOGS = False     # print session transitions to stdout
DEBUG_HITBOX_OVERLAY = False   # draw the inset player hit-box
