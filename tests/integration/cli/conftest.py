from pathlib import Path

import pytest

DAY1 = "\n".join("L68 L30 R48 L5 R60 L55 L1 L99 R14 L82".split()) + "\n"

DAY2 = (
    "11-22,95-115,998-1012,1188511880-1188511890,222220-222224,"
    "1698522-1698528,446443-446449,38593856-38593862,565653-565659,"
    "824824821-824824827,2121212118-2121212124\n"
)

DAY3 = """\
987654321111111
811111111111119
234234234234278
818181911112111
"""

DAY4 = """\
..@@.@@@@.
@@@.@.@@@@
@@@@@.@.@@
@.@@@@..@.
@@.@@@@.@@
.@@@@@@@.@
.@.@.@.@@@
@.@@@.@@@@
.@@@@@@@@.
@.@.@@@.@.
"""


@pytest.fixture(scope="module")
def inputs_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Write the worked example of every day once per module."""
    dir_path: Path = tmp_path_factory.mktemp("inputs")

    for day, content in enumerate((DAY1, DAY2, DAY3, DAY4), start=1):
        (dir_path / f"day{day:02d}.txt").write_text(content)

    return dir_path
