"""Color palette."""

# RGB tuples
BG = (0, 0, 0)
STROKE = (255, 105, 180)
MARKER = (255, 255, 0)
DIVIDER = (40, 40, 40)
HUD_TEXT = (220, 220, 220)
HINT_TEXT = (120, 120, 140)
AUDIO_ON = (0, 255, 0)
AUDIO_OFF = (255, 0, 0)
