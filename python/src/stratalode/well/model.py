# SPDX-License-Identifier: GPL-3.0-or-later

# Copyright (C) 2026 Darkmine Pty Ltd

# This file is part of stratalode.

# stratalode is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

# stratalode is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with stratalode.  If not, see <https://www.gnu.org/licenses/>.

"""Well and marker records plus a simple in-memory repository.

The importer only needs ``insert_well`` and ``insert_marker``; any object
providing those two methods can stand in for ``WellRepository``.
"""

from typing import NamedTuple, Optional

import geopandas as gpd
import pandas as pd

from stratalode.datamodel import (
    DATUM, EASTING, ELEVATION, KB, MARKER_NAME, MAX_DEPTH, MD, NORTHING, WELL_NAME,
)
from stratalode.geometry import Point3D


class WellRecord(NamedTuple):
    name: str
    position: Point3D
    kb: Optional[float] = None
    max_depth: Optional[float] = None

    def to_dict(self):
        return {
            WELL_NAME: self.name,
            EASTING: self.position.x,
            NORTHING: self.position.y,
            DATUM: self.position.z,
            KB: self.kb,
            MAX_DEPTH: self.max_depth,
        }


class MarkerRecord(NamedTuple):
    well_name: str
    location: Point3D
    measured_depth: Optional[float]
    marker_name: str

    def to_dict(self):
        return {
            WELL_NAME: self.well_name,
            EASTING: self.location.x,
            NORTHING: self.location.y,
            ELEVATION: self.location.z,
            MD: self.measured_depth,
            MARKER_NAME: self.marker_name,
        }


WELL_COLUMNS = [WELL_NAME, EASTING, NORTHING, DATUM, KB, MAX_DEPTH]
MARKER_COLUMNS = [WELL_NAME, EASTING, NORTHING, ELEVATION, MD, MARKER_NAME]


def _geoframe(records, columns, crs):
    df = pd.DataFrame([rec.to_dict() for rec in records], columns=columns)
    geom = gpd.points_from_xy(df[EASTING], df[NORTHING])
    return gpd.GeoDataFrame(df, geometry=geom, crs=crs)


class WellRepository:
    """Insert-only store for wells and markers.

    Duplicate well names are accepted. Not safe for concurrent inserts;
    importers sharing one instance must serialize.
    """

    def __init__(self):
        self._wells = []
        self._markers = []

    def insert_well(self, name, position, kb=None, max_depth=None):
        self._wells.append(WellRecord(name, Point3D(*position), kb, max_depth))

    def insert_marker(self, well_name, location, measured_depth, marker_name):
        self._markers.append(MarkerRecord(well_name, Point3D(*location), measured_depth, marker_name))

    def wells(self):
        return list(self._wells)

    def markers(self):
        return list(self._markers)

    def markers_for(self, well_name):
        return [m for m in self._markers if m.well_name == well_name]

    def well_names(self):
        seen = {}
        for rec in self._wells:
            seen.setdefault(rec.name, None)
        for rec in self._markers:
            seen.setdefault(rec.well_name, None)
        return list(seen)

    def wells_frame(self, crs=None):
        return _geoframe(self._wells, WELL_COLUMNS, crs)

    def markers_frame(self, crs=None):
        return _geoframe(self._markers, MARKER_COLUMNS, crs)

    def __len__(self):
        return len(self._wells) + len(self._markers)
