"""
Constants declarations for mollweidemap
"""

# A pixel is background when every RGB channel exceeds this value
BACKGROUND_THRESHOLD = 230

# Newton-Raphson solve for the Mollweide auxiliary angle
NEWTON_MAX_ITERATIONS = 10
NEWTON_DERIVATIVE_EPSILON = 1e-6
NEWTON_CONVERGENCE_TOLERANCE = 1e-12
POLE_EPSILON = 1e-6

# Marker disc drawn by MarkerOverlay
MARKER_RADIUS = 5
MARKER_BORDER_THICKNESS = 2
MARKER_COLOR = (255, 0, 0)
MARKER_BORDER_COLOR = (0, 0, 0)

# Calibration of the reference Titan map (leftmost_x, rightmost_x, topmost_y, bottommost_y)
DEFAULT_CALIBRATION = (44, 1336, 5, 653)
