import pytest

from aoc_kit.solvers.day01 import (
    START_POSITION,
    TRACK_SIZE,
    Rotation,
    part1,
    part2,
    zero_crossings,
)

EXAMPLE = [
    Rotation.from_str(line)
    for line in "L68 L30 R48 L5 R60 L55 L1 L99 R14 L82".split()
]


class TestRotationFromStr:
    def test_right(self) -> None:
        assert Rotation.from_str("R5") == Rotation("R", 5)

    def test_left(self) -> None:
        assert Rotation.from_str("L10") == Rotation("L", 10)

    def test_large_number(self) -> None:
        assert Rotation.from_str("R999") == Rotation("R", 999)

    def test_signed(self) -> None:
        assert Rotation("L", 3).signed == -3
        assert Rotation("R", 3).signed == 3

    def test_empty_string(self) -> None:
        with pytest.raises(ValueError, match="Empty string"):
            Rotation.from_str("")

    def test_invalid_direction(self) -> None:
        with pytest.raises(ValueError, match="Invalid turn direction 'X'"):
            Rotation.from_str("X5")

    def test_invalid_number(self) -> None:
        with pytest.raises(ValueError, match="Failed to parse rotation amount"):
            Rotation.from_str("Rabc")

    def test_missing_number(self) -> None:
        with pytest.raises(ValueError):
            Rotation.from_str("R")

    @pytest.mark.parametrize("text", ["L-4", "R+4", "R1_000", "R 5", "R5 "])
    def test_amount_must_be_plain_digits(self, text: str) -> None:
        with pytest.raises(ValueError, match="Failed to parse rotation amount"):
            Rotation.from_str(text)


class TestPart1:
    def test_example(self) -> None:
        assert part1(EXAMPLE) == 3

    def test_single_turn_hits_zero(self) -> None:
        assert part1([Rotation("R", 50)]) == 1

    def test_wraps_around(self) -> None:
        assert part1([Rotation("R", 150)]) == 1

    def test_left_turn(self) -> None:
        assert part1([Rotation("L", 50)]) == 1

    def test_no_rotations(self) -> None:
        assert part1([]) == 0


class TestPart2:
    def test_example(self) -> None:
        assert part2(EXAMPLE) == 6

    def test_single_step_misses_zero(self) -> None:
        assert part2([Rotation("R", 1)]) == 0

    def test_crosses_zero_once(self) -> None:
        assert part2([Rotation("R", 50)]) == 1

    def test_multiple_laps(self) -> None:
        assert part2([Rotation("R", 250)]) == 3

    def test_left_from_zero_needs_full_lap(self) -> None:
        assert part2([Rotation("L", 50), Rotation("L", 99)]) == 1
        assert part2([Rotation("L", 50), Rotation("L", 100)]) == 2


@pytest.mark.parametrize("position", [0, 1, 37, 50, 99])
@pytest.mark.parametrize("rotation", ["R0", "R1", "R99", "R100", "R250", "L1", "L50", "L100", "L321"])
def test_zero_crossings_matches_step_walk(position: int, rotation: str) -> None:
    turn = Rotation.from_str(rotation)
    step = 1 if turn.direction == "R" else -1

    current = position
    expected = 0
    for _ in range(turn.amount):
        current = (current + step) % TRACK_SIZE
        expected += current == 0

    assert zero_crossings(position, turn) == expected


def test_constants() -> None:
    assert TRACK_SIZE == 100
    assert START_POSITION == 50
