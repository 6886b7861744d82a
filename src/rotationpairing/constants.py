# Rotation Pairing
# Copyright (C) 2026  Rotation Pairing developers
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
HISTORY_CSV_HEADER = ("Left", "Right")
ROSTER_HEADER_NAMES = ("name", "names")
# Handles in exported history files are often written as "@name"
HANDLE_PREFIX = "@"

# Group kinds (for display and serialization)
GROUP_PAIR = "pair"
GROUP_TRIPLE = "triple"
GROUP_SIZES = {GROUP_PAIR: 2, GROUP_TRIPLE: 3}

# Marker for an unmatched vertex in a mate array
UNMATCHED = -1

# Rosters this small never reach the general solver
DIRECT_PAIR_SIZE = 2

# Logging
LOG_LEVEL_ENV_VAR = "ROTATION_PAIRING_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Simulation defaults for the CLI
DEFAULT_SIMULATION_PEOPLE = 5
DEFAULT_SIMULATION_ROUNDS = 6
