# --- Constants ---
WIDTH, HEIGHT = 1000, 700
FPS = 60

# --- Colors ---
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
BOARD = (196, 160, 112)  # cork
GRID = (186, 150, 102)

# String palette, indexed by connection color % len(STRING_COLORS)
STRING_COLORS = [
    (255, 204, 102),  # warm yellow
    (250, 153, 153),  # coral pink
    (153, 230, 153),  # mint green
    (153, 204, 255),  # sky blue
    (255, 179, 204),  # rose pink
    (230, 204, 255),  # soft purple
]

PIN_RADIUS = 6
PICK_RADIUS = 12
