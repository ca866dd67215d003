"""Game constants for the forest fire simulation.

Time values are expressed in scheduler ticks. The original game engine runs
at 60 ticks per second, so a fire generation happens once a second and a
water overlay stays on the board for two and a half seconds.
"""

# ============================================================================
# GRID
# ============================================================================

GRID_SIZE: int = 30                                 # Cells per side
INITIAL_FIRES: int = 6                              # Fires seeded at start

# ============================================================================
# TIMING (ticks)
# ============================================================================

TICKS_PER_SECOND: int = 60
FIRE_TICK_INTERVAL: int = 60                        # One generation per second
WATER_DELAY: int = 150                              # Overlay lifetime
WATER_RADIUS: int = 1                               # 3x3 neighbourhood

# ============================================================================
# SOUNDS
# ============================================================================

SPREAD_SOUNDS: tuple[str, ...] = ("fx_blast1", "fx_blast2", "fx_blast3", "fx_blast4")
SAVED_SOUND: str = "fx_tada"
EXTINGUISH_SOUND: str = "fx_drip2"
FIREBREAK_SOUND: str = "fx_pop"

ALL_SOUNDS: tuple[str, ...] = SPREAD_SOUNDS + (SAVED_SOUND, EXTINGUISH_SOUND, FIREBREAK_SOUND)

# ============================================================================
# STATUS MESSAGES
# ============================================================================

START_MESSAGE: str = "Put out the Fire!"
SAVED_MESSAGE: str = "Forest saved: ({percent}%)"
LOST_MESSAGE: str = "The forest is gone."
