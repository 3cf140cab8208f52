"""Layout constants and color definitions."""

# Timing
FPS = 60

# Layout dimensions
SCENE_W = 400
SCENE_H = 500
LOG_H = 96
SCREEN_W = SCENE_W
SCREEN_H = SCENE_H + LOG_H

GROUND_Y = 350  # platform tops
HERO_W = 22
HERO_H = 30
STICK_W = 4

# Clouds
CLOUD_W = 70
CLOUD_H = 24
CLOUD_Y_RANGE = (30, 160)
CLOUD_CROSS_MS = (60_000, 80_000)

# Colors
SKY_TOP = (120, 190, 240)
SKY_BOTTOM = (210, 235, 250)
CLOUD_COLOR = (250, 250, 255)
PLATFORM_COLOR = (40, 40, 48)
PLATFORM_EDGE = (230, 80, 60)
STICK_COLOR = (90, 60, 30)
STICK_FAIL_COLOR = (200, 50, 40)
TEXT_COLOR = (30, 30, 40)
TEXT_LIGHT = (240, 240, 245)
COLOR_LOG_BG = (22, 22, 30)
COLOR_TEXT_DIM = (120, 120, 140)

HERO_COLORS: dict[str, tuple[int, int, int]] = {
    "standing": (20, 20, 20),
    "walking": (20, 20, 20),
    "cheering": (40, 160, 70),
    "falling": (180, 40, 40),
}

# Journal event -> log line color
LOG_COLORS: dict[str, tuple[int, int, int]] = {
    "default": (170, 170, 185),
    "round_started": (140, 170, 230),
    "released": (200, 200, 120),
    "max_length": (230, 170, 80),
    "bridge_succeeded": (100, 220, 120),
    "bridge_failed": (230, 110, 90),
    "round_won": (120, 240, 140),
    "game_over": (255, 80, 80),
    "restarted": (200, 160, 240),
}

# Cue name -> tone segments (frequency Hz, seconds, waveform, start offset s)
TONES: dict[str, list[tuple[float, float, str, float]]] = {
    "grow": [(200.0, 0.1, "sine", 0.0)],
    "drop": [(150.0, 0.3, "sawtooth", 0.0)],
    "success": [(400.0, 0.2, "sine", 0.0), (600.0, 0.2, "sine", 0.1)],
    "failure": [(100.0, 0.5, "square", 0.0)],
    "walk": [(300.0, 0.05, "triangle", 0.0)],
}
TONE_GAIN = (0.1, 0.01)  # envelope start/end
