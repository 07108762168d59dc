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

import geopandas as gpd
import pytest
from shapely.geometry import Point, Polygon

from stratalode import attributes
from stratalode.errors import CrsIncompatibilityError
from stratalode.geometry import Triangle


def _tin():
    return gpd.GeoDataFrame(
        {"tri_id": [1, 2]},
        geometry=[
            Polygon([(0, 0, 0), (1, 0, 0), (0, 1, 1)]),
            Polygon([(420000, 5800000, 100), (420100, 5800000, 110), (419900, 5800100, 100)]),
        ],
        crs="EPSG:25832",
    )


def test_orientation_attributes_default_columns():
    tris = [Triangle((0, 0, 0), (1, 0, 0), (0, 1, 0)), Triangle((0, 0, 0), (1, 0, 0), (0, 1, 1))]
    df = attributes.orientation_attributes(tris)
    assert list(df.columns) == ["dip", "strike", "compass_dir"]
    assert df["compass_dir"].tolist() == ["-", "S"]
    assert df["dip"].iloc[1] == pytest.approx(45.0)
    assert df["strike"].iloc[1] == pytest.approx(180.0)


def test_orientation_attributes_column_selection():
    df = attributes.orientation_attributes(
        [Triangle((0, 0, 0), (1, 0, 0), (0, 1, 1))], dip=False, strike=False, clar=True,
    )
    assert list(df.columns) == ["compass_dir", "clar"]
    assert df["clar"].iloc[0] == "180/45"


def test_orientation_attributes_empty():
    df = attributes.orientation_attributes([])
    assert df.empty
    assert list(df.columns) == ["dip", "strike", "compass_dir"]


def test_attach_orientation_to_geodataframe():
    out = attributes.attach_orientation(_tin(), clar=True)
    assert out["clar"].tolist() == ["180/45", "225/8"]
    assert out["tri_id"].tolist() == [1, 2]
    assert "clar" not in _tin().columns


def test_attach_orientation_rejects_geographic_crs():
    tin = _tin().set_crs("EPSG:4326", allow_override=True)
    with pytest.raises(CrsIncompatibilityError):
        attributes.attach_orientation(tin)


def test_triangle_from_polygon_validation():
    with pytest.raises(ValueError, match="no z"):
        attributes.triangle_from_polygon(Polygon([(0, 0), (1, 0), (0, 1)]))
    with pytest.raises(ValueError, match="3 corner points"):
        attributes.triangle_from_polygon(Polygon([(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)]))
    with pytest.raises(ValueError, match="triangular Polygon"):
        attributes.triangle_from_polygon(Point(0, 0, 0))
