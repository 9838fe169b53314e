# config.py
import os

# ======= Core search =======
# Run Matrix.check_integrity() before and after every search.
CHECK_INTEGRITY = int(os.getenv("DLX_CHECK_INTEGRITY", "0")) != 0
LOG_LEVEL       = os.getenv("DLX_LOG_LEVEL", "WARNING").upper()

# ======= Pentomino demo =======
PENTOMINO_WIDTH       = int(os.getenv("PENTOMINO_WIDTH", "10"))
PENTOMINO_HEIGHT      = int(os.getenv("PENTOMINO_HEIGHT", "6"))
# Piece kept in one orientation so mirrored/rotated boards are not repeated.
PENTOMINO_FIXED_PIECE = os.getenv("PENTOMINO_FIXED_PIECE", "v")

# 0 means report every solution.
SOLUTION_LIMIT = int(os.getenv("SOLUTION_LIMIT", "0"))
