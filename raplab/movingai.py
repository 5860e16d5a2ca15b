"""Readers for grid maps and scenario files in the MovingAI benchmark format."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from itertools import islice, product
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

_WORD = re.compile(r"\S+")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_MAP_WHITESPACE = frozenset(" \t\n\r")
_BLOCKED_TERRAIN = frozenset("SWT@O")


class MapParseError(ValueError):
    """Raised when a map file cannot be read or is malformed."""


class ScenarioParseError(ValueError):
    """Raised when a scenario file cannot be read or is malformed."""


def traversable(c: str) -> bool:
    """Whether the terrain character ``c`` can be walked on."""
    return c not in _BLOCKED_TERRAIN


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _strtod(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


@dataclass(frozen=True)
class State:
    """A cell coordinate: ``x`` is the column, ``y`` the row."""

    x: int
    y: int


@dataclass
class GridHeader:
    """Header fields of a map file."""

    height: int = 0
    width: int = 0
    type: str = ""


class GridMapParser:
    """Parses an ``octile`` map file into its header and raw tile characters."""

    def __init__(self, filename: str | Path) -> None:
        try:
            text = Path(filename).read_text(encoding="latin-1")
        except OSError as exc:
            raise MapParseError(f"cannot open map file: {filename}") from exc
        words = _WORD.finditer(text)
        self.header = self._parse_header(words)
        self._tiles = self._parse_map(text, words)

    @staticmethod
    def _parse_header(words) -> GridHeader:
        contents: dict[str, str] = {}
        for _ in range(3):
            hfield = next(words, None)
            if hfield is None:
                raise MapParseError("map load failed. format looks wrong.")
            hvalue = next(words, None)
            if hvalue is None:
                raise MapParseError(
                    f"map load failed. could not read header. {hfield.group()}"
                )
            contents[hfield.group()] = hvalue.group()

        map_type = contents.get("type", "")
        if map_type != "octile":
            raise MapParseError(f"map type {map_type} is unknown. known types: octile")
        height = _atoi(contents.get("height", ""))
        if height <= 0:
            raise MapParseError("map file specifies invalid height.")
        width = _atoi(contents.get("width", ""))
        if width <= 0:
            raise MapParseError("map file specifies invalid width.")
        return GridHeader(height=height, width=width, type=map_type)

    def _parse_map(self, text: str, words) -> list[str]:
        keyword = next(words, None)
        if keyword is None or keyword.group() != "map":
            logger.error("map load failed. missing 'map' keyword.")
        start = keyword.end() if keyword is not None else len(text)
        tiles = [ch for ch in text[start:] if ch not in _MAP_WHITESPACE]
        max_tiles = self.header.height * self.header.width
        if len(tiles) != max_tiles:
            raise MapParseError(f"expected {max_tiles} tiles; read {len(tiles)} tiles.")
        return tiles

    def num_tiles(self) -> int:
        """Number of tiles read from the file."""
        return len(self._tiles)

    def tile_at(self, index: int) -> str:
        """The tile character at a row-major index."""
        if not 0 <= index < len(self._tiles):
            raise IndexError(f"invalid tile index {index}")
        return self._tiles[index]


class GridMap:
    """A rectangular occupancy map; each cell is either free or an obstacle."""

    def __init__(self, height: int, width: int) -> None:
        self.height = height
        self.width = width
        self.filename = ""
        self.db: list[bool] = [False] * (height * width)

    @classmethod
    def from_file(cls, filename: str | Path) -> "GridMap":
        """Load a map from a MovingAI ``.map`` file."""
        parser = GridMapParser(filename)
        grid = cls(parser.header.height, parser.header.width)
        grid.filename = str(filename)
        grid.db = [not traversable(parser.tile_at(i)) for i in range(len(grid.db))]
        return grid

    def _in_bounds(self, c: State) -> bool:
        return 0 <= c.x < self.width and 0 <= c.y < self.height

    def get_neighbours(self, c: State) -> list[State]:
        """Free cells of the 8-connected neighbourhood of ``c``."""
        return [
            State(c.x + dx, c.y + dy)
            for dy, dx in product((-1, 0, 1), repeat=2)
            if (dx, dy) != (0, 0) and not self.is_obstacle(State(c.x + dx, c.y + dy))
        ]

    def is_obstacle(self, c: State) -> bool:
        """True for obstacle cells and for anything outside the map."""
        if not self._in_bounds(c):
            return True
        return self.get_label(c)

    def set_label(self, c: State, label: bool) -> None:
        """Mark cell ``c`` as obstacle (True) or free (False)."""
        if not self._in_bounds(c):
            raise IndexError(f"cell {c} is outside the map")
        self.db[c.y * self.width + c.x] = bool(label)

    def get_label(self, c: State) -> bool:
        """The obstacle flag stored for cell ``c``."""
        if not self._in_bounds(c):
            raise IndexError(f"cell {c} is outside the map")
        return self.db[c.y * self.width + c.x]


@dataclass
class Experiment:
    """One start/goal query from a scenario file."""

    startx: int
    starty: int
    goalx: int
    goaly: int
    mapwidth: int
    mapheight: int
    distance: float
    map_name: str
    precision: int = 4


@dataclass
class ScenarioManager:
    """Holds the experiments loaded from one or more scenario files."""

    mapfile: str = ""
    experiments: list[Experiment] = field(default_factory=list)
    version: int = 1
    last_file_loaded: str = ""

    def get_experiment(self, which: int) -> Optional[Experiment]:
        """The experiment at ``which``, or None when there is none."""
        if 0 <= which < len(self.experiments):
            return self.experiments[which]
        return None

    def add_experiment(self, experiment: Experiment) -> None:
        """Append an experiment."""
        self.experiments.append(experiment)

    def num_experiments(self) -> int:
        """Number of experiments held."""
        return len(self.experiments)

    def load_scenario(self, filelocation: str | Path) -> None:
        """Read a version 0 or 1 scenario file and append its experiments."""
        try:
            text = Path(filelocation).read_text(encoding="latin-1")
        except OSError as exc:
            raise ScenarioParseError(f"Invalid scenario file: {filelocation}") from exc
        self.last_file_loaded = str(filelocation)

        words = text.split()
        pos = 1 if words and words[0] == "version" else 0
        try:
            version = float(words[pos])
        except (IndexError, ValueError):
            # An unreadable version number leaves nothing further to read.
            return
        if version not in (0.0, 1.0):
            raise ScenarioParseError("scenario has invalid version number.")
        self._load_v1(words[pos + 1:])

    def _load_v1(self, words: list[str]) -> None:
        it = iter(words)
        while True:
            record = list(islice(it, 9))
            if len(record) < 9:
                return
            _bucket, map_name, size_x, size_y, xs, ys, xg, yg, dist = record
            try:
                int(_bucket)
                numbers = [int(v) for v in (size_x, size_y, xs, ys, xg, yg)]
            except ValueError:
                return
            width, height, sx, sy, gx, gy = numbers
            dot = dist.find(".")
            precision = len(dist) - (dot + 1) if dot >= 0 else 0
            self.experiments.append(
                Experiment(
                    startx=sx,
                    starty=sy,
                    goalx=gx,
                    goaly=gy,
                    mapwidth=width,
                    mapheight=height,
                    distance=_strtod(dist),
                    map_name=map_name,
                    precision=precision,
                )
            )