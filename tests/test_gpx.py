import io

import gpxpy.gpx
import pytest

from routegeom.geometry import Coordinate
from routegeom.gpx import load_gpx, load_gpx_file

TRACK_GPX = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">
  <trk>
    <trkseg>
      <trkpt lat="37.983" lon="23.721"><ele>100</ele></trkpt>
      <trkpt lat="37.984" lon="23.722"><ele>101</ele></trkpt>
    </trkseg>
    <trkseg>
      <trkpt lat="37.985" lon="23.723"></trkpt>
    </trkseg>
  </trk>
</gpx>
"""

ROUTE_GPX = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">
  <rte>
    <rtept lat="1.0" lon="2.0"></rtept>
    <rtept lat="3.0" lon="4.0"></rtept>
  </rte>
</gpx>
"""


def test_load_gpx_concatenates_segments():
    coords = load_gpx(io.StringIO(TRACK_GPX))
    assert coords == [
        Coordinate(37.983, 23.721),
        Coordinate(37.984, 23.722),
        Coordinate(37.985, 23.723),
    ]


def test_load_gpx_falls_back_to_route_points():
    coords = load_gpx(io.StringIO(ROUTE_GPX))
    assert coords == [Coordinate(1.0, 2.0), Coordinate(3.0, 4.0)]


def test_load_gpx_rejects_malformed_data():
    with pytest.raises(gpxpy.gpx.GPXException):
        load_gpx(io.StringIO("<gpx><trk>"))


def test_load_gpx_file(tmp_path):
    path = tmp_path / "track.gpx"
    path.write_text(TRACK_GPX, encoding="utf-8")
    assert len(load_gpx_file(str(path))) == 3


def test_load_gpx_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_gpx_file(str(tmp_path / "missing.gpx"))
