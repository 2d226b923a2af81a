"""
Swappable strategy implementations (Strategy pattern).

Each strategy type has an ABC and one implementation.
Pass the desired implementation to StateMachine.
"""

from .sectors import (
    SectorDistances,
    analyze,
    min_in_window,
)
from .clearance import (
    ClearancePolicy,
)
from .wall_follow import (
    WallFollowStrategy,
    RandomSideWallFollow,
)
from .approach import (
    ApproachStrategy,
    CircleAlignment,
)
