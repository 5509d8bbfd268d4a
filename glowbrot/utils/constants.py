BREAKOUT_R2 = 4

DEFAULT_WIDTH = 400
DEFAULT_HEIGHT = 400
DEFAULT_REAL_MIN = -1.8
DEFAULT_REAL_MAX = 0.8
DEFAULT_IMAG_CENTER = 0.0
DEFAULT_ITERATIONS = 1000
# the "darkness" of the area just outside the set
DEFAULT_COLOUR_FACTOR = 300
DEFAULT_THREADS = 8
