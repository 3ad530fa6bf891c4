"""
Shared utilities: tuning constants, geometry and colour helpers.

Only the constants are re-exported here; geometry and colors import
domain.models, which itself reads these constants.
"""

from .constants import *
