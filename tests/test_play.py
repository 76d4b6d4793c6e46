import numpy as np
import pytest

from gridsnake.game import create_session
from gridsnake.render import render
from play import main, parse_args, run_headless


def test_parse_args_defaults():
    args = parse_args([])
    assert args.size == 27
    assert args.ups == 8
    assert not args.headless


@pytest.mark.parametrize(
    "argv",
    [
        ["--ups", "0"],
        ["--ups", "-4"],
        ["--fps", "0"],
        ["--size", "0"],
        ["--ticks", "0"],
        ["--window", "0", "600"],
    ],
)
def test_parse_args_rejects_non_positive(argv):
    with pytest.raises(SystemExit):
        parse_args(argv)


def test_run_headless_records_frames():
    session = create_session(9, seed=3)
    renderer = run_headless(session, 50, seed=3)
    assert 1 <= len(renderer.frames) <= 50
    assert all(frame.shape == (3, 9, 9) for frame in renderer.frames)
    assert np.array_equal(renderer.frames[-1], render(session).to_array())
    assert session.started


def test_main_headless(capsys):
    main(["--headless", "--size", "9", "--ticks", "20", "--seed", "1"])
    assert capsys.readouterr().out.startswith("Ran ")
