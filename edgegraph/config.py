"""
Configuration constants for edgegraph.

Defaults for ingestion, sampling, and rendering are defined here.
The log level can be overridden from the environment.
"""

import os

# =============================================================================
# Ingestion Configuration
# =============================================================================

# Lines starting with this marker are treated as comments/headers
COMMENT_MARKER = "#"

# =============================================================================
# Sampling Configuration
# =============================================================================

# Number of nodes kept by the sampling strategies
DEFAULT_SAMPLE_SIZE = 15

# Seed node for connected sampling and BFS; also the anchor of top-N sampling
DEFAULT_SEED_NODE = 0

# Number of BFS-visited nodes shown by the command line summary
BFS_PREVIEW_COUNT = 20

# =============================================================================
# Rendering Configuration
# =============================================================================

# Square canvas size in pixels
CANVAS_SIZE = 800

# Nodes are placed at least this many pixels away from the canvas border
CANVAS_MARGIN = 50

# Node marker radius in pixels
NODE_RADIUS = 5

# Label font size in points
LABEL_FONT_SIZE = 8

DEFAULT_IMAGE_PATH = "graph.png"

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("EDGEGRAPH_LOG_LEVEL", "INFO")
