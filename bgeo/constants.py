"""Library-wide numeric constants.

Every computation in `bgeo` runs in single precision. `EPS` is the tolerance
used for all "fuzzy zero" comparisons; callers working in a different
precision domain pass their own value through the `eps=` keyword.
"""

from __future__ import annotations

import numpy as np

# Working dtype for coordinates and intermediate results.
DTYPE = np.float32

# Smallest distinguishable relative float32 step (~1.19e-7).
EPS: float = float(np.finfo(DTYPE).eps)
