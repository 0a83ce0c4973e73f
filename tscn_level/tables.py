"""
Static lookup tables: scene resource names → game type names.

Versioned with the game: a new prop, building, animal or enemy scene must be
added here before levels using it can be converted.
"""
from types import MappingProxyType

from tscn_level.data_model import (
    EntityKind, PathConvention, ResourceCategory, LevelTables,
)


SCENARIO_PATH = 'res://scenarios/base_scenario.tscn'

# ── Tile id → Prop variant (None: tile draws no prop) ─────────────────

PROPS_MAP = MappingProxyType({
    0: 'Grass1',
    1: 'Grass2',
    2: 'Grass3',
    3: 'FlowerWhite',
    7: 'FlowerYellow',
    23: 'FlowerRed',
    24: 'FlowerBlack',
    20: 'Gravel1',
    21: 'Gravel2',
    22: 'Gravel3',
    4: 'Mud',
    5: None,
    6: None,
    11: 'Hay',
    12: None,
    13: None,
    14: None,
    15: None,
    16: None,
    17: None,
    18: None,
    19: None,
    25: 'Eggplant',
})

# ── Scene file name → entity Variant ──────────────────────────────────

BUILDINGS_MAP = MappingProxyType({
    'barn': 'Barn',
    'car': 'Car',
    'concrete_wall_h': 'ConcreteWallH',
    'concrete_wall_v': 'ConcreteWallV',
    'down_with_horses': 'DownWithHorses',
    'feeding_trough': 'FeedingTrough',
    'fence': 'FenceH',
    'fence_v': 'FenceV',
    'garage': 'Garage',
    'hay_bale_v': 'HayBaleH',
    'hay_bale_h': 'HayBaleV',
    'horse_crossing_sign': 'HorseCrossingSign',
    'house_1': 'House1',
    'house_2': 'House2',
    'oil_barrel': 'OilBarrel',
    'outhouse': 'Outhouse',
    'portapotty': 'Portapotty',
    'stable': 'Stable',
    'stable_double': 'StableDouble',
    'stable_wide': 'StableWide',
    'stop_sign': 'StopSign',
    'yield_sign': 'YieldSign',
})

ANIMALS_MAP = MappingProxyType({
    'cat': 'Cat',
    'dog': 'Dog',
    'duck': 'Duck',
    'brown_horse': 'Horse',
    'kuma': 'Kuma',
    'loaf': 'Loaf',
    'mouse': 'Mouse',
    'poop': 'Poop',
    'rabbit': 'Rabbit',
    'rubber_ducky': 'RubberDucky',
    'snail': 'Snail',
    'snake': 'Snake',
    'turtle': 'Turtle',
})

ENEMIES_MAP = MappingProxyType({
    'demon': 'Demon',
    'demon_boss': 'DemonBoss',
    'farmer': 'Farmer',
    'police': 'Police',
    'snowman': 'Snowman',
    'soldier': 'Soldier',
})

# Buildings are exported at two resolutions; only the 128px scenes are
# referenced by levels.
BUILDINGS = ResourceCategory(
    kind=EntityKind.BUILDING,
    convention=PathConvention(
        prefix='res://entities/buildings/',
        strip='res://entities/buildings/128/',
        suffix='_128.tscn'),
    names=BUILDINGS_MAP,
)

ANIMALS = ResourceCategory(
    kind=EntityKind.ANIMAL,
    convention=PathConvention(
        prefix='res://entities/player/',
        strip='res://entities/player/',
        suffix='.tscn'),
    names=ANIMALS_MAP,
)

ENEMIES = ResourceCategory(
    kind=EntityKind.ENEMY,
    convention=PathConvention(
        prefix='res://entities/enemies/',
        strip='res://entities/enemies/',
        suffix='.tscn'),
    names=ENEMIES_MAP,
)

DEFAULT_TABLES = LevelTables(
    props=PROPS_MAP,
    categories=(BUILDINGS, ANIMALS, ENEMIES),
    scenario_path=SCENARIO_PATH,
)
