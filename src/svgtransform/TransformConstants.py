# |det| below this and the combined matrix is treated as non-invertible.
DEFAULT_SINGULAR_EPSILON = 1e-12

# Max numeric parameters per transform name (SVG 1.1, section 7.6).
MAX_PARAMS = {
    "scale": 2,
    "translate": 2,
    "rotate": 3,
    "skewX": 1,
    "skewY": 1,
    "matrix": 6,
}
