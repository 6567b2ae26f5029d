"""Type hints used in Swiss Round."""

from typing import List, Literal, Optional, Tuple

# Colour letters as stored in a competitor's colour history string
WHITE = "W"
BLACK = "B"

# Chess color type aliases (for type hints)
W = Literal["W"]
B = Literal["B"]
# Basically, white or black
Colour = Literal["W", "B"]

# Result codes accepted by the lifecycle
ResultCodeValue = Literal["A_WIN", "B_WIN", "DRAW", "BYE_A"]

# A candidate pairing: (competitor-A id, competitor-B id or None for a bye)
PairIDs = Tuple[str, Optional[str]]
# All pairs of one round, in table order
PairingPlan = List[PairIDs]

#  LocalWords:  PairIDs PairingPlan
