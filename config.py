# Configuration file for Particle Background
# All configurable parameters are centralized here for easy modification

# =============================================================================
# DISPLAY SETTINGS
# =============================================================================
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
WINDOW_TITLE = "Particle Background"
FPS = 60
BACKGROUND_COLOR = (20, 16, 28)  # Dark purple

# =============================================================================
# FIELD SETTINGS
# =============================================================================
DENSITY = 5  # Particles per 100,000 px^2 of viewport
DENSITY_AREA_FACTOR = 0.00001  # 1 / 100,000 px^2

# =============================================================================
# PHYSICS SETTINGS
# =============================================================================
MIN_SPEED = 5.0   # px per unit of simulation time
MAX_SPEED = 10.0
TIME_STEP = 0.01  # Simulation time advanced on every tick

# Edge repulsion
THRESHOLD = 25.0  # Distance from an edge where the repulsion starts to dominate
SIDE_STRENGTH = 10.0
MIN_EDGE_DISTANCE = 0.1  # Floor for the repulsion divisor, prevents division by zero

# Acceleration applied per unit of force (mass of 1)
FORCE_FACTOR = 2.0

# =============================================================================
# RENDERING SETTINGS
# =============================================================================
DOT_SIZE = 2.0
DOT_COLOR = (255, 195, 215)  # Pink
LINE_COLOR = (255, 195, 215)
LINE_WIDTH = 0.5
MAX_LINE_LENGTH = 60.0  # 0 disables line drawing

# =============================================================================
# RECORDING SETTINGS
# =============================================================================
VIDEO_WIDTH = 1920
VIDEO_HEIGHT = 1080
VIDEO_FPS = 60
VIDEO_DURATION = 20  # seconds
VIDEO_FOURCC = "mp4v"
RECORDINGS_DIR = "recordings"
PROGRESS_INTERVAL = 5  # Print progress every N seconds of video time

# =============================================================================
# CONTROL SETTINGS
# =============================================================================
# Key bindings (using pygame constants)
import pygame

KEY_EXIT = pygame.K_ESCAPE
