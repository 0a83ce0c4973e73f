import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from tscn_level.errors import RecordNotFoundError

# Background tiles are 32x32 pixels; bg offsets are expressed in pixels.
TILE_SIZE = 32

# Named constants
DEFAULT_BG_COLOR = (0.23, 0.39, 0.15, 1.0)  # grass green, RGBA in [0, 1]
BG_MARGIN = 2                                # extra tiles around the prop bounding box
ANIMAL_ORIGIN_EPSILON = 0.00001              # x used for animals placed exactly at (0, 0)

# Animals at exactly (0, 0) are treated as unplaced by the game.


class Objective(enum.IntEnum):
    KILL_ENEMIES = 1
    DESTROY_BUILDINGS = 2
    SAVE_ANIMALS = 3
    KILL_BOSSES = 4

    @property
    def tag(self) -> str:
        return self.name.lower()


class EntityKind(enum.Enum):
    BUILDING = 'building'
    ANIMAL = 'animal'
    ENEMY = 'enemy'


@dataclass(frozen=True)
class Record:
    """One bracketed section of a scene file and its raw string properties."""
    kind: str
    properties: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, 'properties',
                           MappingProxyType(dict(self.properties)))

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.properties.get(key, default)

    def __contains__(self, key):
        return key in self.properties

    @property
    def id(self) -> Optional[str]:
        return self.properties.get('id')

    @property
    def path(self) -> Optional[str]:
        return self.properties.get('path')

    @property
    def instance(self) -> Optional[str]:
        return self.properties.get('instance')


@dataclass(frozen=True)
class Prop:
    type_name: str
    position: Tuple[int, int]    # tile coordinates, (x, y)


@dataclass(frozen=True)
class Entity:
    kind: EntityKind
    type_name: str
    position: Tuple[float, float]  # pixels, (x, y)


@dataclass(frozen=True)
class Level:
    objective: Objective
    objective_count: int
    bg_color: Tuple[float, float, float, float]
    bg_size: Tuple[int, int]      # tiles
    bg_offset: Tuple[int, int]    # pixels
    props: Tuple[Prop, ...]
    buildings: Tuple[Entity, ...]
    animals: Tuple[Entity, ...]
    enemies: Tuple[Entity, ...]

    def __post_init__(self):
        for name in ('props', 'buildings', 'animals', 'enemies'):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    def entities(self, kind: EntityKind) -> Tuple[Entity, ...]:
        return {
            EntityKind.BUILDING: self.buildings,
            EntityKind.ANIMAL: self.animals,
            EntityKind.ENEMY: self.enemies,
        }[kind]

    def to_dict(self) -> Dict:
        def _entities(items):
            return [{'type': e.type_name, 'position': list(e.position)}
                    for e in items]
        return {
            'objective': self.objective.tag,
            'objective_count': self.objective_count,
            'bg_color': list(self.bg_color),
            'bg_size': list(self.bg_size),
            'bg_offset': list(self.bg_offset),
            'props': [{'type': p.type_name, 'position': list(p.position)}
                      for p in self.props],
            'buildings': _entities(self.buildings),
            'animals': _entities(self.animals),
            'enemies': _entities(self.enemies),
        }


@dataclass(frozen=True)
class PathConvention:
    """How a template path under `prefix` reduces to a name-table key.

    `strip` is removed from the front of the path (it may include a
    resolution folder such as ``128/``) and `suffix` from its end.
    """
    prefix: str
    strip: str
    suffix: str


@dataclass(frozen=True)
class ResourceCategory:
    kind: EntityKind
    convention: PathConvention
    names: Mapping[str, Optional[str]]


@dataclass(frozen=True)
class LevelTables:
    props: Mapping[int, Optional[str]]       # tile id -> prop name, None = no prop
    categories: Tuple[ResourceCategory, ...]
    scenario_path: str

    def category(self, kind: EntityKind) -> ResourceCategory:
        for c in self.categories:
            if c.kind == kind:
                return c
        raise KeyError(f"No resource category for {kind}")


def find_record(records, predicate, description):
    """
    First record in document order satisfying `predicate`.

    Raises RecordNotFoundError(description) when nothing matches.
    """
    for record in records:
        if predicate(record):
            return record
    raise RecordNotFoundError(description)
