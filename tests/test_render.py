from gridsnake.board import Cell, Direction
from gridsnake.game import GameSession
from gridsnake.render import HeadlessRenderer, RenderModel, layout, render


def test_render_snapshot():
    session = GameSession(size=5, snake=[Cell(2, 2), Cell(2, 3)], fruit=Cell(4, 4))
    model = render(session)
    assert model.size == 5
    assert model.snake == (Cell(2, 2), Cell(2, 3))
    assert model.fruit == Cell(4, 4)
    assert not model.lost


def test_snapshot_is_not_affected_by_later_ticks():
    session = GameSession(size=5, snake=[Cell(2, 2)], fruit=Cell(0, 0))
    model = render(session)
    session.set_pending_direction(Direction.LEFT)
    session.tick()
    assert model.snake == (Cell(2, 2),)
    assert render(session).snake == (Cell(1, 2),)


def test_fillers_are_midpoints():
    model = RenderModel(size=5, snake=(Cell(1, 1), Cell(2, 1), Cell(2, 2)), fruit=Cell(0, 0), lost=False, score=0)
    assert model.fillers() == [(1.5, 1.0), (2.0, 1.5)]


def test_single_cell_has_no_fillers():
    model = RenderModel(size=5, snake=(Cell(1, 1),), fruit=Cell(0, 0), lost=False, score=0)
    assert model.fillers() == []


def test_to_array_channels():
    model = RenderModel(size=4, snake=(Cell(1, 2), Cell(1, 3)), fruit=Cell(3, 0), lost=False, score=0)
    grid = model.to_array()
    assert grid.shape == (3, 4, 4)
    assert grid[0].sum() == 2
    assert grid[0, 2, 1] == 1.0 and grid[0, 3, 1] == 1.0
    assert grid[1].sum() == 1 and grid[1, 2, 1] == 1.0
    assert grid[2].sum() == 1 and grid[2, 0, 3] == 1.0


def test_layout_centres_square_board():
    geometry = layout((800, 600), 4)
    assert geometry.smaller_side == 600
    assert geometry.origin == (100.0, 0.0)
    assert geometry.square_width == 150.0
    assert geometry.marker_side == 75.0
    assert geometry.marker_position(0, 0) == (137.5, 37.5)
    assert geometry.marker_position(1.5, 1) == (362.5, 187.5)


def test_headless_renderer_keeps_recent_frames():
    session = GameSession(size=5, snake=[Cell(2, 2)], fruit=Cell(0, 0))
    renderer = HeadlessRenderer(max_frames=2)
    session.set_pending_direction(Direction.LEFT)
    for _ in range(3):
        session.tick()
        renderer.draw(render(session))
    assert len(renderer.frames) == 2
    assert renderer.last.snake == (Cell(0, 2),)
    assert renderer.frames[-1][1, 2, 0] == 1.0
    renderer.close()
    assert renderer.frames == []
