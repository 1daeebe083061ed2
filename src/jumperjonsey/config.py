"""Tunable constants for JumperJonsey.

Everything size-dependent is expressed as a fraction of the viewport so the
game plays the same at any window size. Generator and speed constants are in
pixels (per second where noted). Environment toggles are read once at import.
"""
from __future__ import annotations

import os

# --- Display ---
TITLE = "JumperJonsey"
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 450
FPS = 60

# --- Player (fractions of viewport height unless noted) ---
PLAYER_SIZE_FRACTION = 0.08
PLAYER_X_FRACTION = 0.1        # of viewport width
GRAVITY_FRACTION = 0.0016      # px per tick, per tick
JUMP_FRACTION = 0.032          # applied upward
TERMINAL_VELOCITY_FRACTION = 0.04
GROUND_FRACTION = 0.02

# Hitbox inset, as fractions of the sprite size
HITBOX_OFFSET_X = 0.125
HITBOX_OFFSET_Y = 0.2
HITBOX_WIDTH_SCALE = 0.75
HITBOX_HEIGHT_SCALE = 0.675

# --- Obstacle generation ---
START_X_FRACTION = 0.6         # of viewport width
GAP_BASE = 420.0
GAP_PER_DIFFICULTY = 60.0
GAP_JITTER = 100.0
MIN_GAP_PLAYER_MULT = 1.6
MIN_GAP_FLOOR = 40.0
BASE_HEIGHT_PLAYER_MULT = 1.05
WIDTH_BASE_MULT = 0.6          # of base height
WIDTH_PER_DIFFICULTY = 8.0
WIDTH_JITTER = 18.0
MAX_WIDTH_PLAYER_MULT = 2.4
TALL_CHANCE = 0.25
TALL_PLAYER_MULT = 2.0
TALL_PER_DIFFICULTY = 4.0
TALL_EXTRA_PER_DIFFICULTY = 6.0

LEVEL_LENGTH_BASE = 800.0
LEVEL_LENGTH_PER_LEVEL = 100.0
LEVEL_DIFFICULTY_STEP = 0.15
INFINITE_DIFFICULTY_STEP = 0.2
INFINITE_DIFFICULTY_SCORE = 500

# Infinite mode streams its course instead of pre-building it
INFINITE_LOOKAHEAD_SCREENS = 3.0
INFINITE_REFILL_SCREENS = 2.0

# --- Speeds (px/s) and scoring ---
LEVEL_SPEED = 250.0
INFINITE_SPEED = 300.0
INFINITE_SPEEDUP = 5.0
INFINITE_SPEEDUP_SCORE = 100
SCORE_RATE = 250.0             # points per second

# --- Levels ---
MAX_LEVEL = 50
LEVEL_GRID_COLUMNS = 10
HIGHLIGHTED_LEVELS = 5

# --- Colours ---
BACKGROUND_COLOR = "#ffffff"
GROUND_COLOR = "#4f3922"
OBSTACLE_COLOR = "#ff0000"
PLAYER_COLOR = "#6666ff"
BUTTON_COLOR = "#4caf50"
LOCKED_BUTTON_COLOR = "#888888"
BUTTON_TEXT_COLOR = "#ffffff"
TEXT_COLOR = "#000000"

# --- Environment toggles ---
LOG_LEVEL = os.getenv("JJ_LOG_LEVEL", "WARNING").upper()
_seed = os.getenv("JJ_SEED")
SEED = int(_seed) if _seed else None
