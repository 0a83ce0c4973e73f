"""
Renderer: emits the Rust `levels/<name>.rs` module that builds a Level with
the game's macroquad types.
"""
import math

import numpy as np

from tscn_level.data_model import EntityKind, Level


def rust_float(value) -> str:
    """Format a number as a Rust float literal: always a '.', never an exponent."""
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"Cannot render non-finite float: {value}")
    return np.format_float_positional(value, trim='0')


def rust_vec2(position) -> str:
    x, y = position
    return f'vec2({rust_float(x)}, {rust_float(y)})'


def _push_lines(var, ctor, entities):
    return '\n    '.join(
        f'{var}.push(|idx| {ctor}::new({e.type_name}, idx, res, '
        f'{rust_vec2(e.position)}));'
        for e in entities
    )


def render_level(level: Level) -> str:
    objective = f'{level.objective.tag}({level.objective_count})'
    color = ','.join(rust_float(c) for c in level.bg_color)
    width, height = level.bg_size
    props = '\n    '.join(
        f'(({x}, {y}), {p.type_name}),'
        for p in level.props
        for x, y in [p.position]
    )

    return f"""
use macroquad::prelude::*;

use crate::{{
    animals::{{ Animal, Variant::* }},
    background::{{Background, Prop::*}},
    buildings::{{ Building, Variant::* }},
    enemies::{{ Enemy, Variant::*}},
    entities::Entities,
    levels::LevelData,
    objectives::Objective,
    Resources,
}};

pub fn init(res: &mut Resources) -> LevelData {{
    let objective = Objective::{objective};

    let background =
        Background::builder(Color::new({color}),
        ({width}, {height}))
        .offset({rust_vec2(level.bg_offset)})
        .set_props(&[
    {props}
        ])
            .build(res);

    let mut animals = Entities::new();
    {_push_lines('animals', 'Animal', level.entities(EntityKind.ANIMAL))}

    let mut buildings = Entities::new();
    {_push_lines('buildings', 'Building', level.entities(EntityKind.BUILDING))}

    let mut enemies = Entities::new();
    {_push_lines('enemies', 'Enemy', level.entities(EntityKind.ENEMY))}

    LevelData {{
        objective,
        background,
        animals,
        buildings,
        enemies,
    }}
}}
"""
