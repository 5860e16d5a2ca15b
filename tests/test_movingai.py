import pytest

from raplab.movingai import (
    Experiment,
    GridMap,
    GridMapParser,
    MapParseError,
    ScenarioManager,
    ScenarioParseError,
    State,
    traversable,
)

MAP_TEXT = """type octile
height 3
width 4
map
.@..
.T..
....
"""

SCEN_TEXT = """version 1
0\tmaps/tiny.map\t4\t3\t0\t0\t3\t2\t3.82842712
1\tmaps/tiny.map\t4\t3\t0\t2\t3\t0\t3.0
"""


@pytest.fixture
def map_file(tmp_path):
    path = tmp_path / "tiny.map"
    path.write_text(MAP_TEXT)
    return path


@pytest.fixture
def scen_file(tmp_path):
    path = tmp_path / "tiny.map.scen"
    path.write_text(SCEN_TEXT)
    return path


def _write(tmp_path, text, name="m.map"):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_traversable():
    for ch in "SWT@O":
        assert traversable(ch) is False
    assert traversable(".") is True
    assert traversable("G") is True


def test_parse_map_dimensions_and_obstacles(map_file):
    g = GridMap.from_file(map_file)
    assert g.height == 3
    assert g.width == 4
    rows = [
        "".join(str(int(g.is_obstacle(State(x, y)))) for x in range(g.width))
        for y in range(g.height)
    ]
    assert rows == ["0100", "0100", "0000"]


def test_out_of_bounds_is_obstacle(map_file):
    g = GridMap.from_file(map_file)
    assert g.is_obstacle(State(-1, 0)) is True
    assert g.is_obstacle(State(4, 0)) is True
    assert g.is_obstacle(State(0, 3)) is True


def test_parser_tiles(map_file):
    parser = GridMapParser(map_file)
    assert parser.num_tiles() == 12
    assert parser.header.type == "octile"
    assert parser.tile_at(1) == "@"
    with pytest.raises(IndexError):
        parser.tile_at(12)


def test_empty_map_and_labels():
    g = GridMap(2, 3)
    assert not any(g.is_obstacle(State(x, y)) for x in range(3) for y in range(2))
    g.set_label(State(2, 1), True)
    assert g.get_label(State(2, 1)) is True
    assert g.is_obstacle(State(2, 1)) is True
    g.set_label(State(2, 1), False)
    assert g.get_label(State(2, 1)) is False


def test_neighbours_are_free_and_adjacent(map_file):
    g = GridMap.from_file(map_file)
    assert set(g.get_neighbours(State(0, 0))) == {State(0, 1)}
    for n in g.get_neighbours(State(2, 1)):
        assert not g.is_obstacle(n)
        assert max(abs(n.x - 2), abs(n.y - 1)) == 1


def test_wrong_type_rejected(tmp_path):
    path = _write(tmp_path, MAP_TEXT.replace("octile", "tile"))
    with pytest.raises(MapParseError):
        GridMap.from_file(path)


def test_zero_height_rejected(tmp_path):
    path = _write(tmp_path, MAP_TEXT.replace("height 3", "height 0"))
    with pytest.raises(MapParseError):
        GridMap.from_file(path)


def test_missing_tiles_rejected(tmp_path):
    path = _write(tmp_path, MAP_TEXT.replace("....\n", ""))
    with pytest.raises(MapParseError):
        GridMap.from_file(path)


def test_extra_tiles_rejected(tmp_path):
    path = _write(tmp_path, MAP_TEXT + "....\n")
    with pytest.raises(MapParseError):
        GridMap.from_file(path)


def test_truncated_header_rejected(tmp_path):
    path = _write(tmp_path, "type octile\nheight")
    with pytest.raises(MapParseError):
        GridMap.from_file(path)


def test_missing_map_file(tmp_path):
    with pytest.raises(MapParseError):
        GridMap.from_file(tmp_path / "absent.map")


def test_load_scenario(scen_file):
    mgr = ScenarioManager()
    mgr.load_scenario(scen_file)
    assert mgr.num_experiments() == 2
    assert mgr.last_file_loaded == str(scen_file)
    e0 = mgr.get_experiment(0)
    assert (e0.mapheight, e0.mapwidth) == (3, 4)
    assert (e0.startx, e0.starty, e0.goalx, e0.goaly) == (0, 0, 3, 2)
    assert e0.distance == pytest.approx(3.82842712)
    assert e0.precision == 8
    assert e0.map_name == "maps/tiny.map"
    e1 = mgr.get_experiment(1)
    assert (e1.startx, e1.starty, e1.goalx, e1.goaly) == (0, 2, 3, 0)
    assert e1.precision == 1


def test_get_experiment_out_of_range(scen_file):
    mgr = ScenarioManager()
    mgr.load_scenario(scen_file)
    assert mgr.get_experiment(2) is None
    assert mgr.get_experiment(-1) is None


def test_add_experiment():
    mgr = ScenarioManager()
    exp = Experiment(1, 2, 3, 4, 10, 10, 5.0, "maps/x.map")
    mgr.add_experiment(exp)
    assert mgr.num_experiments() == 1
    assert mgr.get_experiment(0) is exp
    assert exp.precision == 4


def test_invalid_version_rejected(tmp_path):
    path = _write(tmp_path, SCEN_TEXT.replace("version 1", "version 2"), "s.scen")
    with pytest.raises(ScenarioParseError):
        ScenarioManager().load_scenario(path)


def test_missing_scenario_file(tmp_path):
    with pytest.raises(ScenarioParseError):
        ScenarioManager().load_scenario(tmp_path / "absent.scen")


def test_loading_twice_appends(scen_file):
    mgr = ScenarioManager()
    mgr.load_scenario(scen_file)
    mgr.load_scenario(scen_file)
    assert mgr.num_experiments() == 4
    assert mgr.get_experiment(2) == mgr.get_experiment(0)