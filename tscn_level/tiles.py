"""
Tile decoder: turns a TileMap's packed `tile_data` into background props.

Godot packs each cell as three ints: (index, tile_id, flags). `index` holds
the cell coordinate as y in the high 16 bits and x as a signed 16-bit value
in the low bits, so negative coordinates need floor semantics throughout.
"""
import warnings
from dataclasses import dataclass
from typing import List, Mapping, Optional, Tuple

import jax
import jax.numpy as jnp
import flax.struct
import numpy as np

from tscn_level.data_model import (
    Prop, TILE_SIZE, BG_MARGIN, find_record,
)
from tscn_level.errors import MalformedLiteralError, UnknownIdentifierError
from tscn_level.parser import parse_int_array
from tscn_level.tables import PROPS_MAP

T15 = 2 ** 15
T16 = 2 ** 16
ENTRY_WIDTH = 3  # (index, tile_id, flags)


@flax.struct.dataclass
class TileLayer:
    positions: jnp.ndarray  # [n, 2] int32, (x, y) in tiles
    tile_ids: jnp.ndarray   # [n] int32


@dataclass
class TileLayout:
    props: List[Prop]
    bg_size: Tuple[int, int]
    bg_offset: Tuple[int, int]


# ── Coordinate packing ────────────────────────────────────────────────

@jax.jit
def decode_tile_index(index):
    """
    Packed cell index → (x, y). Works elementwise on arrays.

    x is the low 16 bits read as a signed value in [-2**15, 2**15);
    y is the floor quotient by 2**16.
    """
    index = jnp.asarray(index, dtype=jnp.int32)
    x = jnp.remainder(index + T15, T16) - T15
    y = jnp.floor_divide(index, T16)
    return x, y


@jax.jit
def encode_tile_index(x, y):
    """Inverse of decode_tile_index for x in [-2**15, 2**15)."""
    x = jnp.asarray(x, dtype=jnp.int32)
    y = jnp.asarray(y, dtype=jnp.int32)
    return y * T16 + jnp.remainder(x, T16)


def index_to_xy(index) -> Tuple[int, int]:
    x, y = decode_tile_index(index)
    return int(x), int(y)


# ── Decoding ──────────────────────────────────────────────────────────

def decode_tile_data(values) -> TileLayer:
    """Split a flat packed array into decoded cell positions and tile ids."""
    values = np.asarray(values, dtype=np.int32)
    if values.ndim != 1 or values.size % ENTRY_WIDTH != 0:
        raise MalformedLiteralError(
            f'tile data ({ENTRY_WIDTH} ints per cell)', values.tolist())
    entries = values.reshape(-1, ENTRY_WIDTH)
    x, y = decode_tile_index(entries[:, 0])
    return TileLayer(
        positions=jnp.stack([x, y], axis=-1),
        tile_ids=jnp.asarray(entries[:, 1], dtype=jnp.int32),
    )


def place_props(layer: TileLayer,
                prop_table: Mapping[int, Optional[str]] = PROPS_MAP) -> List[Prop]:
    """Map each cell's tile id to a prop; cells whose tile draws nothing are dropped."""
    props = []
    positions = np.asarray(layer.positions).tolist()
    tile_ids = np.asarray(layer.tile_ids).tolist()
    for (x, y), tile_id in zip(positions, tile_ids):
        if tile_id not in prop_table:
            raise UnknownIdentifierError('prop', tile_id)
        prop_type = prop_table[tile_id]
        if prop_type is not None:
            props.append(Prop(type_name=prop_type, position=(x, y)))
    return props


def bounding_box(positions):
    """Min and max corners of [n, 2] positions, always including the origin."""
    positions = jnp.asarray(positions, dtype=jnp.int32).reshape(-1, 2)
    lo = jnp.min(positions, axis=0, initial=0)
    hi = jnp.max(positions, axis=0, initial=0)
    return lo, hi


def layout_props(props: List[Prop]) -> TileLayout:
    """
    Shift props so the bounding box starts at the origin and size the
    background to cover it.

    bg_size and bg_offset come from the unshifted extremes.
    """
    lo, hi = bounding_box([p.position for p in props])
    min_x, min_y = (int(v) for v in lo)
    max_x, max_y = (int(v) for v in hi)

    shifted = [
        Prop(type_name=p.type_name,
             position=(p.position[0] - min_x, p.position[1] - min_y))
        for p in props
    ]
    return TileLayout(
        props=shifted,
        bg_size=(max_x - min_x + BG_MARGIN, max_y - min_y + BG_MARGIN),
        bg_offset=(min_x * TILE_SIZE, min_y * TILE_SIZE),
    )


def find_tile_record(records):
    """First record carrying tile_data; later tile maps are ignored with a warning."""
    records = list(records)
    tilemap = find_record(records, lambda r: 'tile_data' in r,
                          'record with tile_data')
    n_tilemaps = sum(1 for r in records if 'tile_data' in r)
    if n_tilemaps > 1:
        warnings.warn(f"Scene has {n_tilemaps} tile maps; only the first "
                      "is converted")
    return tilemap


def decode_tiles(records, prop_table: Mapping[int, Optional[str]] = PROPS_MAP):
    """
    Locate the tile map record and decode its props.

    Args:
        records: parsed scene Records
        prop_table: tile id → prop name (None: no prop)

    Returns:
        TileLayout
    """
    tilemap = find_tile_record(records)
    values = parse_int_array(tilemap.get('tile_data'))
    layer = decode_tile_data(values)
    return layout_props(place_props(layer, prop_table))
