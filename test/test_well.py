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

import pathlib

import pandas as pd
import pytest

from stratalode.geometry import Point3D
from stratalode.well import data, validate
from stratalode.well.model import WellRepository

DATA_DIR = pathlib.Path(__file__).parent / "data"
WELLS_TXT = DATA_DIR / "well_locations_sample.txt"
MARKERS_TXT = DATA_DIR / "markers_sample.txt"


def test_repository_accepts_duplicate_names():
    repo = WellRepository()
    repo.insert_well("W1", (1.0, 2.0, 3.0))
    repo.insert_well("W1", (4.0, 5.0, 6.0), kb=1.0, max_depth=100.0)
    repo.insert_marker("W1", (1.0, 2.0, -10.0), None, "Top")
    assert len(repo) == 3
    assert repo.wells()[1].position == Point3D(4.0, 5.0, 6.0)
    assert repo.well_names() == ["W1"]
    assert repo.markers_for("W1")[0].measured_depth is None


def test_empty_repository_frames():
    repo = WellRepository()
    assert repo.wells_frame().empty
    assert repo.markers_frame().empty


def test_load_wells_geodataframe():
    wells = data.load_wells(WELLS_TXT, crs="EPSG:25832")
    assert list(wells.columns[:6]) == ["well_name", "easting", "northing", "datum", "kb", "max_depth"]
    assert len(wells) == 4
    assert wells.crs.to_epsg() == 25832
    assert wells.geometry.iloc[0].x == pytest.approx(420000.0)
    assert wells.attrs["import_report"]["issues"][0]["type"] == "missing_coordinates"


def test_load_markers_geodataframe():
    markers = data.load_markers(MARKERS_TXT)
    assert len(markers) == 5
    assert markers["marker_name"].tolist()[2] == "Base Cretaceous"
    assert markers["elevation"].tolist()[0] == pytest.approx(95.0)


def test_load_wells_rejects_marker_file():
    with pytest.raises(ValueError, match="expected well_location"):
        data.load_wells(MARKERS_TXT)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def test_validate_wells_duplicates():
    wells = data.load_wells(WELLS_TXT)
    issues = validate.validate_wells(wells)
    assert issues == [{"well_name": "Well A", "type": "duplicate_well", "count": 2}]


def test_validate_markers_against_wells():
    wells = data.load_wells(WELLS_TXT)
    markers = data.load_markers(MARKERS_TXT)
    issues = validate.validate_markers(wells, markers)
    types = [(i["well_name"], i["type"]) for i in issues]
    assert ("B-12 Top Zechstein", "unknown_well") in types
    assert ("Ghost", "unknown_well") in types
    assert ("Well A", "md_exceeds_max_depth") in types
    assert not any(t == "surface_mismatch" for _, t in types)


def test_validate_surface_marker_mismatch():
    wells = pd.DataFrame({
        "well_name": ["W1"],
        "datum": [100.0],
        "max_depth": [None],
    })
    markers = pd.DataFrame({
        "well_name": ["W1", "W1"],
        "elevation": [97.5, 50.0],
        "md": [2.5, 50.0],
        "marker_name": ["Surface", "Top"],
    })
    issues = validate.validate_markers(wells, markers)
    assert len(issues) == 1
    assert issues[0]["type"] == "surface_mismatch"
    assert issues[0]["value"] == pytest.approx(-2.5)
