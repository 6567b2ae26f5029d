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

# --- Constants ---
SAVE_FILE_EXTENSION = ".json"

# Reserved competitor id standing in for "no opponent"
BYE_ID = "BYE"

# Game outcome scores
WIN_SCORE = 1.0
DRAW_SCORE = 0.5
LOSS_SCORE = 0.0

# Bye scores (configurable per tournament)
FULL_POINT_BYE_SCORE = 1.0
HALF_POINT_BYE_SCORE = 0.5
ZERO_POINT_BYE_SCORE = 0.0
BYE_SCORE = FULL_POINT_BYE_SCORE

# Hard pairing constraint: maximum score gap between paired competitors
MAX_SCORE_DIFFERENCE = 1.0

# Pairing systems
PAIRING_SWISS = "SWISS"
DEFAULT_PAIRING_SYSTEM = PAIRING_SWISS

# Tournament status values
STATUS_SETUP = "SETUP"
STATUS_ACTIVE = "ACTIVE"
STATUS_COMPLETE = "COMPLETE"

# Policy for recording a result over an already resolved match
RESULT_OVERWRITE = "overwrite"
RESULT_REJECT = "reject"
RESULT_OVERWRITE_POLICIES = (RESULT_OVERWRITE, RESULT_REJECT)

# Audit event types
EVENT_TOURNAMENT_INITIALIZED = "TOURNAMENT_INITIALIZED"
EVENT_COMPETITOR_ADDED = "COMPETITOR_ADDED"
EVENT_ROUND_STARTED = "ROUND_STARTED"
EVENT_MATCH_RESULT_RECORDED = "MATCH_RESULT_RECORDED"
EVENT_MATCH_RESULT_CLEARED = "MATCH_RESULT_CLEARED"
EVENT_ROUND_RESULTS_CLEARED = "ROUND_RESULTS_CLEARED"
EVENT_ROUND_CANCELLED = "ROUND_CANCELLED"
EVENT_ROUND_REVERTED = "ROUND_REVERTED"
