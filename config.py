"""
Game tuning knobs.
"""

# Screen + grid
SCREEN_W, SCREEN_H = 640, 420
CELL_SIZE = 20
CELLS_X_LEN = SCREEN_W // CELL_SIZE
CELLS_Y_LEN = SCREEN_H // CELL_SIZE

# Runtime pacing
FPS = 30

# Tick gates (in frames)
MOVE_INTERVAL = 8
DEMO_MOVE_INTERVAL = 15
FOOD_SPAWN_INTERVAL = 30
SCORE_FRAMES = 30  # score = frame // SCORE_FRAMES

# Food
FOOD_ACTIVE_LIMIT = 5
# cumulative upper bounds of a 0..99 draw; order matches FoodColor.spawn_order()
FOOD_COLOR_THRESHOLDS = (40, 75, 95, 100)
FOOD_ENERGY = {
    "red": 10,
    "green": 20,
    "blue": 40,
    "white": 0,  # neutral: shrinks instead
}

# Hazards
POO_EAT_PERIOD = 3       # every Nth eat schedules a hazard
POO_DELAY_FRAMES = 60

# Energy
ENERGY_MAX = 100
ENERGY_START = 100

# Audio
AUDIO_FREQUENCY = 22050
AUDIO_CHUNK_SIZE = 1024
AUDIO_VOLUME = 0.35
