"""Test the optimise command produces the correct output."""

import pytest

import landuse

import landuse.scripts.landuse_optimise as landuse_optimise


FAST = ["--initial-temperature", "2.0",
        "--final-temperature", "1.0",
        "--cooling-rate", "0.1"]


def test_version(capsys):
    with pytest.raises(SystemExit):
        landuse_optimise.main(["--version"])
    out, err = capsys.readouterr()
    assert landuse.__version__ in out + err


@pytest.mark.parametrize("kernel", ["python", "delta"])
def test_reference_layout(capsys, kernel):
    assert landuse_optimise.main(["--seed", "1", "--kernel", kernel] +
                                 FAST) == 0
    out, err = capsys.readouterr()

    assert "Initial Grid:" in out
    assert "Optimised Grid:" in out
    assert "Initial Score:" in out
    assert "Optimised Score:" in out
    assert "Distance Maps Computation Time:" in out
    assert "Optimisation Time:" in out

    # Both grids are printed in full, landmarks included
    lines = out.splitlines()
    first = lines.index("Initial Grid:") + 1
    assert lines[first].split()[3:6] == ["P", "P", "P"]
    assert "." not in lines[first].split()
    optimised = lines.index("Optimised Grid:") + 1
    assert lines[optimised].split()[3:6] == ["P", "P", "P"]
    assert len(lines[optimised].split()) == 12


def test_deterministic(capsys):
    landuse_optimise.main(["--seed", "7"] + FAST)
    first, _ = capsys.readouterr()
    landuse_optimise.main(["--seed", "7"] + FAST)
    second, _ = capsys.readouterr()

    def grids(out):
        return [line for line in out.splitlines() if "Time" not in line]
    assert grids(first) == grids(second)


def test_random_layout(capsys):
    assert landuse_optimise.main(["--seed", "1", "--random-layout",
                                  "--rows", "6", "--cols", "8"] + FAST) == 0
    out, err = capsys.readouterr()
    lines = out.splitlines()
    first = lines.index("Initial Grid:") + 1
    assert len(lines[first].split()) == 8
    assert "." not in lines[first].split()


@pytest.mark.parametrize("args", [
    # Bad schedules
    ["--cooling-rate", "1.5"],
    ["--initial-temperature", "1.0", "--final-temperature", "2.0"],
    ["--initial-temperature", "nan"],
    ["--initial-temperature", "inf"],
    ["--final-temperature", "nan"],
    # Too small to hold two agents
    ["--random-layout", "--rows", "1", "--cols", "1"],
    ["--random-layout", "--rows", "0", "--cols", "4"],
])
def test_configuration_errors(capsys, args):
    assert landuse_optimise.main(["--seed", "1"] + args) == 1
    out, err = capsys.readouterr()
    assert "error:" in err


def test_bad_progress_interval(capsys):
    with pytest.raises(SystemExit):
        landuse_optimise.main(["--progress-interval", "0"])
