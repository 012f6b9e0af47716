import os

from routegeom.file_utils import generate_output_filename


def test_generates_name_from_input(tmp_path):
    input_path = str(tmp_path / "morning ride.gpx")
    output = generate_output_filename(input_path)
    assert output == str(tmp_path / "morning ride.wkt")
    assert os.path.exists(output)


def test_numbers_existing_outputs(tmp_path):
    input_path = str(tmp_path / "track.GPX")
    first = generate_output_filename(input_path)
    second = generate_output_filename(input_path)
    third = generate_output_filename(input_path)
    assert first == str(tmp_path / "track.wkt")
    assert second == str(tmp_path / "track (1).wkt")
    assert third == str(tmp_path / "track (2).wkt")


def test_custom_extension(tmp_path):
    output = generate_output_filename(str(tmp_path / "route.txt"), extension=".csv")
    assert output == str(tmp_path / "route.csv")
