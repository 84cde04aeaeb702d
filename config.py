"""
Configuration settings for gamekit (preview app + runtime helpers).
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# Window settings (preview app)
WINDOW_WIDTH = int(os.getenv("WINDOW_WIDTH", "1280"))
WINDOW_HEIGHT = int(os.getenv("WINDOW_HEIGHT", "720"))
FPS = int(os.getenv("FPS", "60"))
GAMEKIT_VERSION = "0.3.0"
PREVIEW_TITLE = f"gamekit easing preview (v{GAMEKIT_VERSION})"

# Preview layout
PREVIEW_COLUMNS = 6
PREVIEW_CELL_PADDING = 10  # pixels
PREVIEW_PLOT_SAMPLES = 64  # polyline points per curve

# Colors
COLOR_BG = (24, 24, 32)
COLOR_CELL_BG = (40, 40, 50)
COLOR_CELL_BORDER = (80, 80, 100)
COLOR_AXIS = (70, 70, 90)
COLOR_CURVE = (120, 200, 255)
COLOR_MARKER = (255, 215, 0)
COLOR_TEXT = (230, 230, 230)
COLOR_PAUSED = (220, 20, 60)

# Determinism knobs
# DETERMINISTIC_SIM: fixed-tick clock + seeded RNG channels.
DETERMINISTIC_SIM = _env_flag("DETERMINISTIC_SIM", False)
SIM_TICK_HZ = int(os.getenv("SIM_TICK_HZ", "60"))
SIM_SEED = int(os.getenv("SIM_SEED", "1"))

# Clock settings
TIME_SCALE = float(os.getenv("TIME_SCALE", "1.0"))

# Easing defaults
EASING_DEFAULT_DURATION = 1.0  # seconds

# Diagnostics (set GAMEKIT_DEBUG=1 to see debug_log output)
GAMEKIT_DEBUG = _env_flag("GAMEKIT_DEBUG", False)
