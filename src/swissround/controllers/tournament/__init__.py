"""Tournament controllers: aggregates, standings and the audit trail.

The round lifecycle lives in
:mod:`swissround.controllers.tournament.round_lifecycle`; it depends on the
pairing package, which in turn uses the standings calculator exported here.
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

from swissround.controllers.tournament.aggregate_recomputer import AggregateRecomputer
from swissround.controllers.tournament.audit_log import AuditLog
from swissround.controllers.tournament.standings_calculator import StandingsCalculator

__all__ = [
    "AggregateRecomputer",
    "AuditLog",
    "StandingsCalculator",
]
