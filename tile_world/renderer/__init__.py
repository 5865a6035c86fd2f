"""Rendering boundary.

The core never draws anything. This subpackage is the narrow surface a
rendering collaborator consumes:

* :mod:`tile_world.renderer.records` flattens tile entities into ordered
    ``TileRecord`` values, converts grid cells to world-space points and
    reports which entities moved during the last step.
* :mod:`tile_world.renderer.hover` toggles the display-only highlight flag
    when a pointer enters or leaves a record.

Nothing here feeds back into the tile map or the agent position.
"""
