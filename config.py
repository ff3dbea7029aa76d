# Configuration file for the Chaos Game
# All configurable parameters are centralized here for easy modification

import math

# =============================================================================
# DISPLAY SETTINGS
# =============================================================================
WINDOW_WIDTH = 1000
WINDOW_HEIGHT = 1000
WINDOW_TITLE = "Chaos Game"
FPS = 60
BACKGROUND_COLOR = (240, 248, 255)  # Alice blue

# =============================================================================
# GEOMETRY SETTINGS
# =============================================================================
CIRCLE_MARGIN = 80  # Subtracted from the smaller window side before halving into the radius
LINE_THICKNESS = 2
TRIANGLE_ANGLE = math.pi / 6  # Angle below the horizontal for the two lower vertices

# =============================================================================
# ORBIT SETTINGS
# =============================================================================
SEED_JITTER = 100  # Max offset from the screen center for the seed point
POINTS_PER_FLUSH = 50  # Points generated between screen updates
RANDOM_SEED = None  # None = different fractal ordering every run

# =============================================================================
# RENDERING SETTINGS
# =============================================================================
CIRCLE_COLOR = (0, 0, 0)  # Black
CIRCLE_WIDTH = LINE_THICKNESS
TRIANGLE_COLOR = (255, 0, 0)  # Red
TRIANGLE_WIDTH = 1
POINT_COLOR = (0, 0, 255)  # Blue
POINT_SIZE = LINE_THICKNESS

# =============================================================================
# UI SETTINGS
# =============================================================================
SHOW_UI = True
UI_FONT_SIZE = 28
UI_TEXT_COLOR = (60, 60, 60)
UI_MARGIN = 10

# =============================================================================
# CONTROL SETTINGS
# =============================================================================
# Key bindings (using pygame constants)
import pygame

KEY_EXIT = pygame.K_ESCAPE

# =============================================================================
# VIDEO SETTINGS
# =============================================================================
VIDEO_FPS = 60
VIDEO_FRAMES = 600  # 10 seconds at 60 fps
VIDEO_POINTS_PER_FRAME = 100
VIDEO_CODEC = "mp4v"
VIDEO_DIR = "videos"
