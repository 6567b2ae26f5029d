"""Random pairing for the first round."""

# Swiss Round
# Copyright (C) 2025  Swiss Round developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import random
from typing import List, Optional, Sequence

from swissround.pairing.base import RandomPairingStrategy
from swissround.type_hints import PairingPlan
from swissround.utils import setup_logger

logger = setup_logger(__name__)


class ShufflePairingStrategy(RandomPairingStrategy):
    """Uniformly random perfect matching.

    The field is shuffled and consecutive competitors are paired. With an odd
    field, the competitor left over after shuffling gets the bye.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.random = random.Random(seed) if seed is not None else random.Random()

    def pair(self, competitor_ids: Sequence[str]) -> PairingPlan:
        shuffled: List[str] = list(competitor_ids)
        self.random.shuffle(shuffled)

        plan: PairingPlan = []
        for i in range(0, len(shuffled) - 1, 2):
            plan.append((shuffled[i], shuffled[i + 1]))
        if len(shuffled) % 2 == 1:
            plan.append((shuffled[-1], None))

        logger.debug(f"Shuffled {len(shuffled)} competitors into {len(plan)} pairs")
        return plan


class FixedPairingStrategy(RandomPairingStrategy):
    """Pairs competitors in the order given, with no shuffling.

    Useful for reproducing a known first round (or for tests).
    """

    def pair(self, competitor_ids: Sequence[str]) -> PairingPlan:
        ids = list(competitor_ids)
        plan: PairingPlan = [(ids[i], ids[i + 1]) for i in range(0, len(ids) - 1, 2)]
        if len(ids) % 2 == 1:
            plan.append((ids[-1], None))
        return plan
