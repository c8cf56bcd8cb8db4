"""Constants for curve placement, palette, and rendering defaults."""

from pathlib import Path

# ── Viewport placement ─────────────────────────────────────────────────
MARGIN = 20             # px inset on every side for grid curves and fitting
DEFAULT_SIZE = 600      # square viewport edge in px

# Triangle: side = min(w, h) - TRIANGLE_INSET, centre pushed down a little
# so the apex and base sit evenly inside the square.
TRIANGLE_INSET = 80
TRIANGLE_DROP = 20

# Flowsnake: turtle step = (min(w, h) - FLOWSNAKE_INSET) / 3**order
FLOWSNAKE_INSET = 100

# Koch-Flowsnake: hexagon radius = min(w, h) / KOCH_RADIUS_DIVISOR, inner
# flowsnake drawn at KOCH_INNER_SCALE of that radius.
KOCH_RADIUS_DIVISOR = 3
KOCH_INNER_SCALE = 0.6

# ── Turtle ─────────────────────────────────────────────────────────────
TURN_ANGLE = 60.0       # degrees per +/- symbol

# ── Palette (segment colour cycles once over the whole path) ───────────
PALETTE = [
    "#ff6b6b", "#4ecdc4", "#45b7d1", "#96ceb4",
    "#feca57", "#ff9ff3", "#54a0ff", "#5f27cd",
    "#00d2d3", "#ff9f43", "#ee5a24", "#0abde3",
    "#10ac84", "#f9ca24", "#6c5ce7", "#fd79a8",
    "#a29bfe", "#fd79a8", "#fdcb6e", "#6c5ce7",
    "#74b9ff", "#e17055", "#81ecec", "#fab1a0",
]

# ── Rendering ──────────────────────────────────────────────────────────
BACKGROUND = "#000000"
START_MARKER_COLOR = "#ff6b6b"
START_MARKER_RADIUS = 4
CURSOR_MARKER_COLOR = "#ffffff"
CURSOR_MARKER_RADIUS = 3
LINE_WIDTH = 2
DPI = 100
DEFAULT_FPS = 30

OUTPUT_DIR = Path(__file__).parent / "output"
