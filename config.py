# This file is part of bldcheck.
#
# bldcheck is free software: you can redistribute it and/or modify it under the
# terms of the GNU Affero General Public License as published by the Free
# Software Foundation, either version 3 of the License, or (at your option) any
# later version.
#
# bldcheck is distributed in the hope that it will be useful, but WITHOUT ANY
# WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR
# A PARTICULAR PURPOSE.  See the GNU Affero General Public License for more
# details.
#
# You should have received a copy of the GNU Affero General Public License
# along with bldcheck.  If not, see <https://www.gnu.org/licenses/>.

import os

# SQLAlchemy URL of the algorithm database
DB_PATH = os.environ.get('BLDCHECK_DB', 'sqlite:///bldcheck.db')

LOG_LEVEL = os.environ.get('BLDCHECK_LOG_LEVEL', 'WARNING')

# Buffer slots: UFR for corners, UF for edges
CORNER_BUFFER = 2
EDGE_BUFFER = 6

# How many variants of each kind the combined search report prints
MAX_DISPLAYED_VARIANTS = 10
