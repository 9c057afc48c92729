import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from ancestryplot import CategoryStyle, Observation, left_join  # noqa: E402


def _obs(individual: str, population: str) -> Observation:
    return Observation(
        individual=individual,
        population=population,
        components={"PC1": 0.0, "PC2": 0.0, "PC3": 0.0, "PC4": 0.0},
    )


def test_join_fans_out_duplicate_style_rows() -> None:
    left = [_obs("a", "X"), _obs("b", "Y")]
    right = [
        CategoryStyle(population="X", color="red", symbol=16),
        CategoryStyle(population="X", color="blue", symbol=16),
        CategoryStyle(population="Y", color="green", symbol=17),
    ]

    joined = left_join(left, right)

    assert [(item.individual, item.population, item.color) for item in joined] == [
        ("a", "X", "red"),
        ("a", "X", "blue"),
        ("b", "Y", "green"),
    ]


def test_unmatched_observation_is_kept_once_without_style() -> None:
    left = [_obs("a", "X"), _obs("b", "Z")]
    right = [CategoryStyle(population="X", color="red", symbol=16)]

    joined = left_join(left, right)

    assert len(joined) == 2
    assert joined[1].individual == "b"
    assert joined[1].style is None
    assert joined[1].color is None
    assert joined[1].symbol is None


def test_row_count_matches_right_multiplicity_per_left_row() -> None:
    left = [_obs("a", "X"), _obs("b", "Y"), _obs("c", "X"), _obs("d", "W")]
    right = [
        CategoryStyle(population="Y", color="1", symbol=1),
        CategoryStyle(population="X", color="2", symbol=2),
        CategoryStyle(population="X", color="3", symbol=3),
        CategoryStyle(population="X", color="4", symbol=4),
    ]
    multiplicity = {"X": 3, "Y": 1, "W": 1}

    joined = left_join(left, right)

    assert len(joined) == sum(multiplicity[item.population] for item in left)
    for observation in left:
        produced = [item for item in joined if item.individual == observation.individual]
        assert len(produced) == multiplicity[observation.population]
        assert all(item.observation is observation for item in produced)


def test_join_never_reorders_left_rows() -> None:
    left = [_obs("a", "Z"), _obs("b", "X"), _obs("c", "Z"), _obs("d", "M")]
    right = [
        CategoryStyle(population="M", color="red", symbol=1),
        CategoryStyle(population="X", color="red", symbol=1),
        CategoryStyle(population="Z", color="red", symbol=1),
        CategoryStyle(population="Z", color="blue", symbol=1),
    ]

    joined = left_join(left, right)

    first_seen_joined = list(dict.fromkeys(item.population for item in joined))
    first_seen_left = list(dict.fromkeys(item.population for item in left))
    assert first_seen_joined == first_seen_left == ["Z", "X", "M"]
    assert [item.individual for item in joined] == ["a", "a", "b", "c", "c", "d"]


def test_join_does_not_mutate_inputs() -> None:
    left = [_obs("a", "X")]
    right = [CategoryStyle(population="X", color="red", symbol=16)]
    left_copy = list(left)
    right_copy = list(right)

    left_join(left, right)

    assert left == left_copy
    assert right == right_copy
