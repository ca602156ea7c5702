from __future__ import annotations

# Cell cost values
FREE_SPACE: int = 0
INSCRIBED_INFLATED_OBSTACLE: int = 253
LETHAL_OBSTACLE: int = 254
NO_INFORMATION: int = 255

# In-band trajectory scores for illegal outcomes
COLLISION_COST: float = -6.0
OFF_MAP_COST: float = -7.0

# Return codes of the footprint primitive
FOOTPRINT_LETHAL: float = -1.0
FOOTPRINT_UNKNOWN: float = -2.0
FOOTPRINT_OFF_MAP: float = -3.0

# Footprint scaling defaults
SCALING_SPEED_MPS: float = 0.25
MAX_TRANS_VEL_MPS: float = 0.55
MAX_SCALING_FACTOR: float = 0.2
