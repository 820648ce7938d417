"""Configuration settings for probefit."""

# Absolute threshold for degenerate determinants and distances (not scale-aware)
DEGENERACY_TOLERANCE = 1e-10

# Minimum point counts for best-fit operations
MIN_POINTS = {
    "CIRCLE": 3,
    "PLANE": 3,
    "LINE": 2,
}

# Point counts for the exact (closed-form) solvers
EXACT_POINTS = {
    "CIRCLE": 3,
    "LINE": 2,
}

# Units
MM_PER_INCH = 25.4
DEFAULT_UNITS = "mm"
SUPPORTED_UNITS = ("mm", "inches")

# Fixed-point precision used when persisting and displaying results
COORDINATE_DECIMALS = 3
VECTOR_DECIMALS = 4
RESIDUAL_DECIMALS = 4

# CSV layout
CSV_POINT_HEADER = ["Point", "Type", "X", "Y", "Z", "GeometryID", "Timestamp"]
CSV_GEOMETRY_MARKER = "Geometry Calculations"
CSV_GEOMETRY_HEADER = ["ID", "Type", "Details"]
