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

"""Reader for space separated well exports (e.g. written by GOCAD).

The first line holds the field names. Two field sequences are supported:

- ``WELLNAME X Y DATUM KB MAXIMUM_DEPTH`` for well locations
- ``WellName X Y Z MD MarkerName`` for marker data

Well and marker names may contain blanks, so columns cannot be taken from the
header positions. Instead every data line is scanned for the first pair of
adjacent coordinate-like numbers (absolute value >= 100000, i.e. UTM-like
eastings/northings). Everything before that pair is the well name, the scalar
fields follow at fixed offsets, and for markers the rest of the line is the
marker name. Repeated blanks inside names collapse to one. Only the space character
separates fields; tabs stay part of their token.

Lines that do not fit are skipped and reported as issues; unexpected failures
abort the import with the line number reached.
"""

import enum
import logging
import math

from stratalode.datamodel import MARKER_HEADER, WELL_LOCATION_HEADER
from stratalode.errors import ParseError, ResourceError
from stratalode.geometry import Point3D
from stratalode.well.model import MarkerRecord, WellRecord, WellRepository

logger = logging.getLogger(__name__)

COORDINATE_THRESHOLD = 100000.0


class FieldKind(enum.Enum):
    TEXT = "text"
    INTEGER = "integer"
    FLOAT = "float"
    COORDINATE = "coordinate"


class Schema(enum.Enum):
    WELL_LOCATION = "well_location"
    MARKER = "marker"
    UNKNOWN = "unknown"


class ImportReport:
    def __init__(self, source=None, repository=None):
        self.source = source
        self.repository = repository
        self.schema = Schema.UNKNOWN
        self.line_count = 0
        self.wells_inserted = 0
        self.markers_inserted = 0
        self.issues = []

    @property
    def records_inserted(self):
        return self.wells_inserted + self.markers_inserted

    def issue_types(self):
        return [issue["type"] for issue in self.issues]

    def to_dict(self):
        return {
            "source": self.source,
            "schema": self.schema.value,
            "line_count": self.line_count,
            "wells_inserted": self.wells_inserted,
            "markers_inserted": self.markers_inserted,
            "issues": list(self.issues),
        }


def scan_tokens(line):
    """Split a line on the space character, dropping empty tokens."""
    return [tok for tok in line.rstrip("\r\n").split(" ") if tok]


def _is_number_literal(token):
    # float()/int() also accept digit separators and non-ASCII digits
    return token.isascii() and "_" not in token


def _to_float(token):
    if not _is_number_literal(token):
        return None
    try:
        value = float(token)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def _is_integer(token):
    if not _is_number_literal(token):
        return False
    try:
        int(token)
    except ValueError:
        return False
    return True


def classify_token(token, threshold=COORDINATE_THRESHOLD):
    value = _to_float(token)
    if value is not None and abs(value) >= threshold:
        return FieldKind.COORDINATE
    if _is_integer(token):
        return FieldKind.INTEGER
    if value is not None:
        return FieldKind.FLOAT
    return FieldKind.TEXT


def classify_tokens(tokens, threshold=COORDINATE_THRESHOLD):
    return [classify_token(tok, threshold) for tok in tokens]


def _header_matches(tokens, expected):
    return all(tok.upper() == name for tok, name in zip(tokens, expected))


def detect_schema(tokens):
    """Determine the record schema from the header tokens."""
    if tokens is None or len(tokens) < len(WELL_LOCATION_HEADER):
        return Schema.UNKNOWN
    if _header_matches(tokens, WELL_LOCATION_HEADER):
        return Schema.WELL_LOCATION
    if _header_matches(tokens, MARKER_HEADER):
        return Schema.MARKER
    return Schema.UNKNOWN


def find_coordinate_anchor(kinds):
    """Index of the first coordinate immediately followed by another one, or None.

    A single large number may be part of a name, so a pair is required.
    """
    for i in range(len(kinds) - 1):
        if kinds[i] is FieldKind.COORDINATE and kinds[i + 1] is FieldKind.COORDINATE:
            return i
    return None


def _join(tokens, start, stop=None):
    parts = tokens[start:stop]
    if not parts:
        return None
    return " ".join(parts)


def _float_at(tokens, pos):
    if pos >= len(tokens):
        return None
    return _to_float(tokens[pos])


def _issue(line_number, kind, message, text=None):
    return {"line": line_number, "type": kind, "message": message, "text": text}


def parse_line(tokens, schema, line_number=None, threshold=COORDINATE_THRESHOLD):
    """Turn the tokens of one data line into a record.

    Returns ``(record, issue)``: exactly one of them is None. Missing optional
    fields (KB, maximum depth, measured depth) stay None on the record.
    """
    text = " ".join(tokens)
    anchor = find_coordinate_anchor(classify_tokens(tokens, threshold))
    if anchor is None:
        return None, _issue(line_number, "missing_coordinates",
                            "Could not find two adjacent coordinates", text)

    well_name = _join(tokens, 0, anchor)
    x = _float_at(tokens, anchor)
    y = _float_at(tokens, anchor + 1)

    if schema is Schema.WELL_LOCATION:
        datum = _float_at(tokens, anchor + 2)
        kb = _float_at(tokens, anchor + 3)
        max_depth = _float_at(tokens, anchor + 4)
        required = {"well name": well_name, "x": x, "y": y, "datum": datum}
        record = WellRecord(well_name, Point3D(x, y, datum), kb, max_depth)
    elif schema is Schema.MARKER:
        z = _float_at(tokens, anchor + 2)
        md = _float_at(tokens, anchor + 3)
        marker_name = _join(tokens, anchor + 4)
        required = {"well name": well_name, "x": x, "y": y, "z": z, "marker name": marker_name}
        record = MarkerRecord(well_name, Point3D(x, y, z), md, marker_name)
    else:
        raise ValueError(f"Cannot parse data lines for schema {schema}")

    missing = [name for name, value in required.items() if value is None]
    if missing:
        return None, _issue(line_number, "missing_required_field",
                            f"Could not parse {', '.join(missing)}", text)
    return record, None


def _store(record, repository, report):
    if isinstance(record, WellRecord):
        repository.insert_well(record.name, record.position, record.kb, record.max_depth)
        report.wells_inserted += 1
    else:
        repository.insert_marker(record.well_name, record.location, record.measured_depth, record.marker_name)
        report.markers_inserted += 1


def import_lines(lines, repository=None, source=None, threshold=COORDINATE_THRESHOLD):
    """Import well or marker records from an iterable of text lines.

    The first line is the header. Records go to ``repository`` (a new
    WellRepository if omitted) via insert_well/insert_marker.

    Returns an ImportReport. Lines that cannot be parsed are skipped and
    listed in ``report.issues``; an unexpected error raises ParseError with
    the 1-based line number.
    """
    repository = repository if repository is not None else WellRepository()
    report = ImportReport(source=source, repository=repository)
    line_number = 0

    try:
        for line in lines:
            line_number += 1
            report.line_count = line_number
            tokens = scan_tokens(line)

            if line_number == 1:
                report.schema = detect_schema(tokens)
                logger.debug(f"Field names: {tokens}")
                logger.debug(f"Detected schema: {report.schema.value}")
                if report.schema is Schema.UNKNOWN:
                    report.issues.append(_issue(1, "unknown_schema",
                                                "Header matches no supported field sequence", line.rstrip("\r\n")))
                    logger.warning(f"Unsupported header in {source or '<lines>'}: {tokens}")
                continue

            if report.schema is Schema.UNKNOWN or not tokens:
                continue

            record, issue = parse_line(tokens, report.schema, line_number, threshold)
            if issue is not None:
                report.issues.append(issue)
                logger.warning(f"Skipping line {line_number} of {source or '<lines>'}: {issue['message']}")
                continue
            _store(record, repository, report)
    except (ResourceError, ParseError):
        raise
    except OSError as exc:
        raise ResourceError(f"Could not read \"{source}\": {exc}", path=source) from exc
    except Exception as exc:
        where = f"\"{source}\"" if source else "input"
        raise ParseError(f"Parser error in {where}:{line_number}", line_number=line_number, source=source) from exc

    if line_number == 0:
        report.issues.append(_issue(None, "empty_file", "No header line found"))
        logger.warning(f"No header line in {source or '<lines>'}")

    logger.info(f"Read {report.line_count} lines from \"{source or '<lines>'}\".")
    return report


def import_wells(path, repository=None, encoding="utf-8", threshold=COORDINATE_THRESHOLD):
    """Import a well location or marker file into ``repository``.

    Raises ResourceError if the file is missing or unreadable.
    """
    source = str(path)
    try:
        handle = open(path, "r", encoding=encoding)
    except FileNotFoundError as exc:
        raise ResourceError(f"Could not access file \"{source}\".", path=source) from exc
    except OSError as exc:
        raise ResourceError(f"Could not open \"{source}\": {exc}", path=source) from exc

    with handle:
        return import_lines(handle, repository=repository, source=source, threshold=threshold)


def read_wells(path, encoding="utf-8"):
    """Return the WellRecord list of a well location file."""
    report = import_wells(path, encoding=encoding)
    return report.repository.wells()
