"""
Central configuration constants for the Wa-Tor simulation.

Defines default values and diagnostic parameters used across
multiple modules.
"""

# ============================================================================
# Default World Configuration
# ============================================================================

DEFAULT_WIDTH = 10   # cells per row
DEFAULT_HEIGHT = 4   # rows

DEFAULT_FISH_COUNT = 10
DEFAULT_SHARK_COUNT = 4


# ============================================================================
# Default Rules
# ============================================================================

# Ticks between fish births (a fish of age N*period breeds when it moves)
DEFAULT_FISH_SPAWN_PERIOD = 25

# Ticks between shark births
DEFAULT_SHARK_SPAWN_PERIOD = 35

# Ticks a shark can go without eating; also its starting health.
# Must not exceed DEFAULT_SHARK_SPAWN_PERIOD.
DEFAULT_SHARK_STARVE_LIMIT = 10


# ============================================================================
# Diagnostics
# ============================================================================

# Glyphs used by the textual grid dump
GLYPH_FISH = "F"
GLYPH_SHARK = "S"
GLYPH_EMPTY = "*"

# Environment variable that enables per-tick invariant assertions
DEBUG_INVARIANTS_ENV = "SIM_DEBUG_INVARIANTS"


# ============================================================================
# Performance Configuration
# ============================================================================

# Tick timing window for rolling average
TICK_TIME_WINDOW = 100  # Number of ticks to average

# Default tick summary interval (print every N ticks)
TICK_SUMMARY_INTERVAL = 100
