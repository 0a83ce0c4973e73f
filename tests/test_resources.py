import pytest

from tscn_level.data_model import EntityKind, Record
from tscn_level.errors import RecordFieldError, UnknownIdentifierError
from tscn_level.resources import (
    resource_token, path_key, lookup_type, build_resource_table,
    build_resource_index,
)
from tscn_level.tables import BUILDINGS, ANIMALS, ENEMIES, DEFAULT_TABLES


def _ext(path, rid):
    return Record('ext_resource', {'path': path, 'type': 'PackedScene', 'id': rid})


def test_resource_token():
    assert resource_token('7') == 'ExtResource(7)'


def test_path_key():
    assert path_key('res://entities/buildings/128/house_1_128.tscn',
                    BUILDINGS.convention) == 'house_1'
    assert path_key('res://entities/player/rubber_ducky.tscn',
                    ANIMALS.convention) == 'rubber_ducky'
    assert path_key('res://entities/enemies/demon_boss.tscn',
                    ENEMIES.convention) == 'demon_boss'


def test_table_sizes():
    assert len(BUILDINGS.names) == 22
    assert len(ANIMALS.names) == 13
    assert len(ENEMIES.names) == 6


def test_lookup_type():
    assert lookup_type('res://entities/player/brown_horse.tscn', ANIMALS) == 'Horse'
    assert lookup_type('res://entities/buildings/128/fence_128.tscn',
                       BUILDINGS) == 'FenceH'


def test_build_resource_table():
    records = [
        _ext('res://scenarios/base_scenario.tscn', '1'),
        _ext('res://entities/buildings/128/barn_128.tscn', '2'),
        _ext('res://entities/player/cat.tscn', '3'),
        _ext('res://entities/buildings/128/stop_sign_128.tscn', '4'),
    ]
    table = build_resource_table(records, BUILDINGS)
    assert table == {'ExtResource(2)': 'Barn', 'ExtResource(4)': 'StopSign'}


def test_unknown_building():
    records = [_ext('res://entities/buildings/128/castle_128.tscn', '2')]
    with pytest.raises(UnknownIdentifierError) as exc_info:
        build_resource_table(records, BUILDINGS)
    assert exc_info.value.category == 'building'
    assert exc_info.value.value == 'res://entities/buildings/128/castle_128.tscn'
    assert 'Unknown building' in str(exc_info.value)


def test_only_128_building_variant_is_known():
    records = [_ext('res://entities/buildings/256/barn_256.tscn', '2')]
    with pytest.raises(UnknownIdentifierError):
        build_resource_table(records, BUILDINGS)


def test_unknown_enemy_and_animal():
    with pytest.raises(UnknownIdentifierError, match='Unknown enemy'):
        build_resource_table([_ext('res://entities/enemies/ghost.tscn', '1')],
                             ENEMIES)
    with pytest.raises(UnknownIdentifierError, match='Unknown animal'):
        build_resource_table([_ext('res://entities/player/cow.tscn', '1')],
                             ANIMALS)


def test_resource_without_id():
    records = [Record('ext_resource', {'path': 'res://entities/player/cat.tscn'})]
    with pytest.raises(RecordFieldError):
        build_resource_table(records, ANIMALS)


def test_build_resource_index(scene_records):
    index = build_resource_index(scene_records, DEFAULT_TABLES)
    assert index.table(EntityKind.BUILDING) == {'ExtResource(2)': 'Barn'}
    assert index.table(EntityKind.ANIMAL) == {'ExtResource(3)': 'Cat'}
    assert index.table(EntityKind.ENEMY) == {'ExtResource(4)': 'Farmer'}

    assert index.resolve(EntityKind.ANIMAL, 'ExtResource(3)') == 'Cat'
    assert index.resolve(EntityKind.BUILDING, 'ExtResource(3)') is None
    assert index.resolve(EntityKind.ENEMY, None) is None
