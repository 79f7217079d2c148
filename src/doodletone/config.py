"""Global constants and default settings."""

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
FPS = 60
WINDOW_TITLE = "DoodleTone"

# Stroke lifecycle (milliseconds)
STROKE_LIFESPAN_MS = 5000
FADE_DELAY_MS = 50
NOTE_INTERVAL_MS = 200
LOOP_SILENCE_MS = 1000

# Geometry (pixels)
NOTE_SPACING = 10  # min distance between points that carry a note
DOT_THRESHOLD = 10  # strokes no longer than this are dots

# Pitch grid
ZONES_PER_HALF = 6

# Audio
NOTE_DURATION_MS = 150
MIN_PLAY_INTERVAL_MS = 100
NOTE_VELOCITY = 80
