"""
Guess The Word theme: colors and typography constants.
"""

# Accents
PRIMARY = "#3F51B5"

# Surfaces
SURFACE_MAIN = "#16161F"

# Text
TEXT_PRIMARY = "#F0F0F5"
TEXT_SECONDARY = "#A8A8B8"

# Semantic
DANGER = "#E53935"
SUCCESS = "#43A047"

# Font families
FONT_MONO = '"JetBrains Mono", "Consolas", "Courier New", monospace'
