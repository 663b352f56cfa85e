import pytest

from app.services.camera_name import parse_camera_name


@pytest.mark.parametrize(
    "description, expected",
    [
        ("Lapangan 1 kiri camera", "kiri"),
        ("Left side camera of Court 1", "side"),
        ("north CAMERA feed", "north"),
        ("first camera then second camera", "first"),
        ("  padded   kanan    camera  ", "kanan"),
    ],
)
def test_token_before_camera(description, expected):
    assert parse_camera_name(description) == expected


@pytest.mark.parametrize(
    "description",
    [
        None,
        "",
        "camera near the net",
        "north-camera feed",
        "kiri camera, wide angle",
        "cameras everywhere",
        "no keyword here",
    ],
)
def test_no_camera_name(description):
    assert parse_camera_name(description) is None
