"""Testing module for Swiss Round.

This module provides:
- A seeded random tournament simulator
- A tournament consistency validator

Use the CLI: python -m swissround.testing
"""

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

from swissround.testing.simulator import (
    SimulationConfig,
    SimulationResult,
    TournamentSimulator,
    simulate_tournament,
)
from swissround.testing.validator import (
    TournamentValidator,
    ValidationReport,
    Violation,
    validate_tournament,
)

__all__ = [
    "SimulationConfig",
    "SimulationResult",
    "TournamentSimulator",
    "TournamentValidator",
    "ValidationReport",
    "Violation",
    "simulate_tournament",
    "validate_tournament",
]
