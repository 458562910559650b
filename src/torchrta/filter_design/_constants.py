"""Quality factor presets for biquad design."""

import math

# Q = 1/sqrt(2): maximally flat (Butterworth) second-order response
Q_BUTTERWORTH: float = 1.0 / math.sqrt(2.0)  # 0.7071067811865476

# Common Q factor values for audio filters
Q_WIDE: float = 0.5
Q_MEDIUM: float = 1.0
Q_NARROW: float = 2.0
