# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Geodetic Constants and Numerical Parameters"""

import sys

# Numerical tolerance
EPSILON = sys.float_info.epsilon  # machine epsilon for double precision

# Angle resolution
DG_TO_MAS = 3_600_000           # milliarcseconds per degree
DG_TO_UAS = 3_600_000_000       # microarcseconds per degree

# Length conversion factors (to metres)
M_PER_KM = 1000.0               # metres per kilometre
M_PER_NM = 1852.0               # metres per international nautical mile
M_PER_FT = 0.3048               # metres per international foot

# Speed conversion factors (to metres per second)
KPH_TO_MPS = 1000.0 / 3600.0    # kilometres per hour
KNOTS_TO_MPS = 1852.0 / 3600.0  # knots
FPS_TO_MPS = 0.3048             # feet per second

# Time
SECONDS_PER_MINUTE = 60.0
SECONDS_PER_HOUR = 3600.0

# WGS84 ellipsoid
RE_WGS84 = 6378137.0                    # equatorial radius (m)
RP_WGS84 = 6356752.314245179            # polar radius (m)
ECC_WGS84 = 0.08181919084262157         # eccentricity
FE_WGS84 = 0.0033528106647474805        # flattening

# GRS80 ellipsoid
RE_GRS80 = 6378137.0                    # equatorial radius (m)
RP_GRS80 = 6356752.314140356            # polar radius (m)
ECC_GRS80 = 0.08181919104281514         # eccentricity
FE_GRS80 = 0.003352810681182319         # flattening

# WGS72 ellipsoid
RE_WGS72 = 6378135.0                    # equatorial radius (m)
RP_WGS72 = 6356750.520016094            # polar radius (m)
ECC_WGS72 = 0.08181881066274845         # eccentricity
FE_WGS72 = 0.003352779454167505         # flattening

# Mars Orbiter Laser Altimeter (MOLA) ellipsoid
RE_MOLA = 3396200.0                     # equatorial radius (m)
RP_MOLA = 3376198.822143698             # polar radius (m)
ECC_MOLA = 0.10836918094475001          # eccentricity
FE_MOLA = 0.005889281507656065          # flattening

# Inverse flattening of the reference ellipsoids
INV_FE_WGS84 = 298.257223563
INV_FE_GRS80 = 298.257222101
INV_FE_WGS72 = 298.26
INV_FE_MOLA = 169.8

# Spheres
R_EARTH_IUGG = 6371000.8                # IUGG Earth volumetric radius (m)
R_MOON = 1737400.0                      # Moon mean radius (m)

# Closest point of approach solver
CPA_TOLERANCE_SECONDS = 0.001           # Newton-Raphson tolerance (1 ms)
CPA_MAX_ITERATIONS = 50                 # Newton-Raphson iteration budget
