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

"""Orientation attribute tables for triangulated surfaces.

Produces the per-triangle columns a shapefile or GeoPackage writer needs
(dip, strike, compass direction, Clar notation). Writing the file itself is
left to geopandas.
"""

import pandas as pd
import shapely.geometry

from stratalode.datamodel import CLAR, COMPASS_DIR, DIP, STRIKE
from stratalode.geometry import Triangle
from stratalode.orientation import Orientation


def _selected_columns(dip, strike, compass_direction, clar):
    flags = [(DIP, dip), (STRIKE, strike), (COMPASS_DIR, compass_direction), (CLAR, clar)]
    return [name for name, enabled in flags if enabled]


def orientation_record(triangle, dip=True, strike=True, compass_direction=True, clar=False):
    orient = Orientation(triangle)
    record = {}
    if dip:
        record[DIP] = orient.dip()
    if strike:
        record[STRIKE] = orient.azimuth()
    if compass_direction:
        record[COMPASS_DIR] = orient.compass_direction()
    if clar:
        record[CLAR] = orient.clar_notation()
    return record


def orientation_attributes(triangles, dip=True, strike=True, compass_direction=True, clar=False):
    """Build a DataFrame with one row of orientation attributes per triangle.

    Parameters
    ----------
    triangles : iterable of Triangle
        Triangles in a projected (or no) coordinate reference system.
    dip, strike, compass_direction, clar : bool
        Select the columns 'dip', 'strike', 'compass_dir' and 'clar'.
        'strike' holds the downslope azimuth in degrees.
    """
    columns = _selected_columns(dip, strike, compass_direction, clar)
    records = [
        orientation_record(tri, dip=dip, strike=strike, compass_direction=compass_direction, clar=clar)
        for tri in triangles
    ]
    return pd.DataFrame(records, columns=columns)


def triangle_from_polygon(polygon, crs=None):
    """Triangle from a shapely polygon with exactly three distinct 3D corners."""
    if not isinstance(polygon, shapely.geometry.Polygon):
        raise ValueError(f"Expected a triangular Polygon, got {polygon.geom_type}")
    if not polygon.has_z:
        raise ValueError("Triangle polygon has no z coordinates")
    coords = list(polygon.exterior.coords)
    if coords and coords[0] == coords[-1]:
        coords = coords[:-1]
    if len(coords) != 3:
        raise ValueError(f"Expected 3 corner points, got {len(coords)}")
    return Triangle(*coords, crs=crs)


def triangles_from_geodataframe(gdf):
    return [triangle_from_polygon(geom, crs=gdf.crs) for geom in gdf.geometry]


def attach_orientation(gdf, dip=True, strike=True, compass_direction=True, clar=False):
    """Return a copy of ``gdf`` with orientation columns for its triangle geometries."""
    out = gdf.copy()
    attrs = orientation_attributes(
        triangles_from_geodataframe(gdf),
        dip=dip,
        strike=strike,
        compass_direction=compass_direction,
        clar=clar,
    )
    for col in attrs.columns:
        out[col] = attrs[col].values
    return out
