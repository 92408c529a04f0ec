"""
Constant conversion matrices.

Forward matrices are written out once, as published; inverses are computed
numerically at import time instead of being copied from tables, so that a
forward/backward pair composes to the identity up to float rounding and
round trips do not drift. Every array here is read-only.
"""
import numpy as np


def _frozen(rows) -> np.ndarray:
    mat = np.array(rows, dtype=np.float64)
    mat.setflags(write=False)
    return mat


def _frozen_inverse(mat: np.ndarray) -> np.ndarray:
    if abs(np.linalg.det(mat)) < 1e-12:
        raise ValueError("constant matrix is not invertible")
    return _frozen(np.linalg.inv(mat))


# XYZ (D65) -> linear sRGB
XYZ_TO_SRGB = _frozen([
    [3.2406, -1.5372, -0.4986],
    [-0.9689, 1.8758, 0.0415],
    [0.0557, -0.2040, 1.0570],
])
SRGB_TO_XYZ = _frozen_inverse(XYZ_TO_SRGB)

# XYZ (D65) -> linear Adobe RGB (1998)
XYZ_TO_ADOBE_RGB = _frozen([
    [2.04159, -0.56501, -0.34473],
    [-0.96924, 1.87957, 0.04156],
    [0.01344, -0.11836, 1.01517],
])
ADOBE_RGB_TO_XYZ = _frozen_inverse(XYZ_TO_ADOBE_RGB)

# linear ROMM RGB -> XYZ (D50), primaries scaled so (1, 1, 1) is D50 white
ROMM_RGB_TO_XYZ = _frozen([
    [0.7976749, 0.1351917, 0.0313534],
    [0.2880402, 0.7118741, 0.0000857],
    [0.0000000, 0.0000000, 0.8252100],
])
XYZ_TO_ROMM_RGB = _frozen_inverse(ROMM_RGB_TO_XYZ)

# XYZ -> Bradford cone response
BRADFORD = _frozen([
    [0.8951, 0.2664, -0.1614],
    [-0.7502, 1.7135, 0.0367],
    [0.0389, -0.0685, 1.0296],
])
BRADFORD_INV = _frozen_inverse(BRADFORD)


def apply(mat: np.ndarray, vec) -> tuple:
    """Multiply a 3x3 matrix by a 3-vector and return a plain float tuple."""
    out = mat @ np.asarray(vec, dtype=np.float64)
    return float(out[0]), float(out[1]), float(out[2])
