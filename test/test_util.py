from __future__ import annotations
from pathlib import PurePosixPath, PureWindowsPath
import pytest
from powerprompt.info import cwdstr
from powerprompt.util import format_duration


@pytest.mark.parametrize(
    "millis,s",
    [
        (0, "0.00s"),
        (55, "0.06s"),
        (100, "0.10s"),
        (0.99 * 1000, "0.99s"),
        (1.00 * 1000, "1.00s"),
        (9990, "9.99s"),
        (9999, "10.0s"),
        (10000, "10.0s"),
        (59900, "59.9s"),
        (59960, "1.00m"),
        (60000, "1.00m"),
        (9.99 * 60 * 1000, "9.99m"),
        (10.0 * 60 * 1000, "10.0m"),
        (59.9 * 60 * 1000, "59.9m"),
        (60.0 * 60 * 1000, "60.0m"),
        (99.9 * 60 * 1000, "99.9m"),
        (5999999, "100m"),
        (100.0 * 60 * 1000, "100m"),
        (999.9 * 60 * 1000, "1000m"),
        (7 * 24 * 60 * 60 * 1000, "10080m"),
    ],
)
def test_format_duration(millis: float, s: str) -> None:
    assert format_duration(millis) == s


@pytest.mark.parametrize(
    "path,home,s",
    [
        ("/home/u/proj/", "/home/u", "~/proj"),
        ("/home/u/proj/src", "/home/u", "~/proj/src"),
        ("/home/u", "/home/u", "~"),
        ("/home/u/", "/home/u/", "~"),
        ("/home/user2/proj", "/home/u", "/home/user2/proj"),
        ("/var/data", "/home/u", "/var/data"),
        ("/var/data/", "/home/u", "/var/data"),
        ("/var/data", None, "/var/data"),
        ("/", "/home/u", "/"),
        ("/", None, "/"),
    ],
)
def test_cwdstr(path: str, home: str | None, s: str) -> None:
    assert (
        cwdstr(PurePosixPath(path), None if home is None else PurePosixPath(home))
        == s
    )


@pytest.mark.parametrize(
    "path,home,s",
    [
        (r"C:\Users\u\proj", r"C:\Users\u", "~/proj"),
        ("C:\\Users\\u\\proj\\", "C:\\Users\\u", "~/proj"),
        (r"C:\Users\u", r"C:\Users\u", "~"),
        (r"D:\data\logs", r"C:\Users\u", "D:/data/logs"),
        ("C:\\", r"C:\Users\u", "C:/"),
    ],
)
def test_cwdstr_windows(path: str, home: str, s: str) -> None:
    assert cwdstr(PureWindowsPath(path), PureWindowsPath(home)) == s
