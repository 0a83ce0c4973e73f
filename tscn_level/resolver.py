"""
Resolver: interprets parsed scene Records as a Level.

Every lookup takes the first matching record in document order; a missing
record, unknown identifier or malformed literal aborts the conversion.
"""
from typing import List, Tuple

from tscn_level.data_model import (
    Entity, EntityKind, Level, LevelTables, Objective,
    DEFAULT_BG_COLOR, ANIMAL_ORIGIN_EPSILON, find_record,
)
from tscn_level.errors import RecordFieldError, UnknownIdentifierError
from tscn_level.parser import (
    parse_scene, parse_scene_text, parse_vector2, parse_color, parse_int,
)
from tscn_level.resources import (
    ResourceIndex, build_resource_index, resource_token,
)
from tscn_level.tables import DEFAULT_TABLES
from tscn_level.tiles import decode_tiles

ORIGIN_LITERAL = 'Vector2(0, 0)'


def resolve_objective(records) -> Tuple[Objective, int]:
    record = find_record(
        records,
        lambda r: 'objective' in r and 'objective_count' in r,
        'record with objective and objective_count')
    code = parse_int(record.get('objective'), 'objective code')
    count = parse_int(record.get('objective_count'), 'objective count')
    try:
        objective = Objective(code)
    except ValueError:
        raise UnknownIdentifierError('objective', code) from None
    return objective, count


def resolve_background_color(records, scenario_path=DEFAULT_TABLES.scenario_path):
    """
    Background color of the level's scenario node.

    The scenario template is an external resource; the level's scenario is
    the node instancing it. Without a background_color override the
    default grass color is used.
    """
    template = find_record(records, lambda r: r.path == scenario_path,
                           f'resource with path {scenario_path!r}')
    if template.id is None:
        raise RecordFieldError(template, 'id')
    token = resource_token(template.id)
    scenario = find_record(records, lambda r: r.instance == token,
                           f'node with instance={token}')

    value = scenario.get('background_color')
    if value is None:
        return DEFAULT_BG_COLOR
    return parse_color(value)


def resolve_entities(records, index: ResourceIndex, kind: EntityKind) -> List[Entity]:
    """Instance records whose resource resolves to a `kind` entity in `index`."""
    entities = []
    for record in records:
        type_name = index.resolve(kind, record.instance)
        if type_name is None:
            continue
        x, y = parse_vector2(record.get('position', ORIGIN_LITERAL))
        if kind == EntityKind.ANIMAL and x == 0 and y == 0:
            x = ANIMAL_ORIGIN_EPSILON
        entities.append(Entity(kind=kind, type_name=type_name, position=(x, y)))
    return entities


def convert_level(records, tables: LevelTables = DEFAULT_TABLES) -> Level:
    """
    Resolve parsed Records into a Level.

    Args:
        records: Records in document order (see parser.parse_scene_text)
        tables: static prop / entity lookup tables

    Returns:
        Level
    """
    records = list(records)

    objective, objective_count = resolve_objective(records)
    bg_color = resolve_background_color(records, tables.scenario_path)
    layout = decode_tiles(records, tables.props)

    index = build_resource_index(records, tables)
    entities = {
        kind: resolve_entities(records, index, kind)
        for kind in EntityKind
    }

    return Level(
        objective=objective,
        objective_count=objective_count,
        bg_color=tuple(bg_color),
        bg_size=layout.bg_size,
        bg_offset=layout.bg_offset,
        props=layout.props,
        buildings=entities[EntityKind.BUILDING],
        animals=entities[EntityKind.ANIMAL],
        enemies=entities[EntityKind.ENEMY],
    )


def convert_scene_text(scene_text, tables: LevelTables = DEFAULT_TABLES) -> Level:
    return convert_level(parse_scene_text(scene_text), tables)


def convert_scene_file(scene_file, tables: LevelTables = DEFAULT_TABLES) -> Level:
    return convert_level(parse_scene(scene_file), tables)
