"""Shared test fixtures and constants for tscn_level tests."""
import pytest

from tscn_level.parser import parse_scene_text


# A small level in the Godot 3 text format, as the editor writes it.
# Tiles decode to (-1, -2) Grass1, (1, 0) FlowerWhite, (2, 1) <no prop>,
# (2, 2) Eggplant.
SCENE_TEXT = """\
[gd_scene load_steps=7 format=2]

[ext_resource path="res://scenarios/base_scenario.tscn" type="PackedScene" id=1]
[ext_resource path="res://entities/buildings/128/barn_128.tscn" type="PackedScene" id=2]
[ext_resource path="res://entities/player/cat.tscn" type="PackedScene" id=3]
[ext_resource path="res://entities/enemies/farmer.tscn" type="PackedScene" id=4]
[ext_resource path="res://tilesets/props.tres" type="TileSet" id=5]

[node name="Scenario1" instance=ExtResource( 1 )]
background_color = Color( 0.2, 0.4, 0.1, 1 )
objective = 2
objective_count = 3

[node name="TileMap" parent="." index="0"]
tile_set = ExtResource( 5 )
cell_size = Vector2( 32, 32 )
format = 1
tile_data = PoolIntArray( -65537, 0, 0, 1, 3, 0, 65538, 5, 0, 131074, 25, 0 )

[node name="Barn" parent="." instance=ExtResource( 2 )]
position = Vector2( 320, 192.5 )

[node name="Cat" parent="." instance=ExtResource( 3 )]

[node name="Farmer" parent="." instance=ExtResource( 4 )]
position = Vector2( -64, 128 )
"""


def make_scene(*, objective='1', objective_count='1', background_color=None,
               tile_data='', extra=''):
    """Build a minimal convertible scene; `extra` is appended verbatim."""
    color_line = (f'background_color = {background_color}\n'
                  if background_color else '')
    return (
        '[gd_scene load_steps=2 format=2]\n'
        '\n'
        '[ext_resource path="res://scenarios/base_scenario.tscn" '
        'type="PackedScene" id=1]\n'
        '\n'
        '[node name="Level" instance=ExtResource( 1 )]\n'
        f'{color_line}'
        f'objective = {objective}\n'
        f'objective_count = {objective_count}\n'
        '\n'
        '[node name="TileMap" parent="."]\n'
        f'tile_data = PoolIntArray( {tile_data} )\n'
        '\n'
        f'{extra}'
    )


@pytest.fixture
def scene_records():
    return parse_scene_text(SCENE_TEXT)


@pytest.fixture
def scene_file(tmp_path):
    path = tmp_path / 'scenario.tscn'
    path.write_text(SCENE_TEXT, encoding='utf-8')
    return path
