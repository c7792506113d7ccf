# Tunables for the pie indicator and the demo window.

# Animation keys
SPIN_KEY = "spin"
PROGRESS_KEY = "progress"

# Seconds for one full revolution while spinning
SPIN_DURATION = 2.0
# Implicit transition used by animated progress updates
TRANSITION_DURATION = 0.25
TRANSITION_STEP = 0.01

# Slice radius as a fraction of half the width (10% margin)
RADIUS_INSET = 0.9

# Float noise cleanup when stepping progress
PROGRESS_DECIMALS = 9

DEFAULT_TINT = "#000000"

# Demo window
DEMO_TINT = "#ff0000"
INITIAL_PROGRESS = 0.12
INCREMENT_STEP = 0.1
INDICATOR_SIZE = 300
CORNER_RADIUS = 10
BACKGROUND = "#404040"
DARK_THEMES = ("dark_red.xml", "dark_pink.xml", "dark_blue.xml")
LIGHT_THEME = "light_red.xml"
