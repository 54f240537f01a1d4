from __future__ import annotations

# Facade module that re-exports the bubble shooter core.
# Used by the Flask app and the tests; single-responsibility modules live
# under bubbles_core/*.

# Prefer the relative import when this module is loaded as part of a package,
# fall back to the top-level package otherwise.
try:
    from .bubbles_core.errors import ConfigError, NoLandingSlot, NoSuchSlot  # type: ignore
    from .bubbles_core.config import GameConfig, config_from_env  # type: ignore
    from .bubbles_core.geometry import (  # type: ignore
        PLAYGROUND_HEIGHT,
        PLAYGROUND_WIDTH,
        SCALE,
        SlotKey,
        Vec2,
        canvas_to_math,
        key_of,
        math_to_canvas,
        position_for_slot,
        slot_of,
    )
    from .bubbles_core.grid import BubbleGrid, Color, create_grid  # type: ignore
    from .bubbles_core.cluster import (  # type: ignore
        explode,
        nearest_empty_slot,
        neighbor_keys,
        neighbors_of,
        same_color_cluster,
    )
    from .bubbles_core.trajectory import (  # type: ignore
        GUN_ORIGIN,
        Bullet,
        Shot,
        ShotState,
        find_collision,
        out_of_bounds,
    )
    from .bubbles_core.gun import Gun  # type: ignore
    from .bubbles_core.controller import RoundController, ScoreSink, SessionState  # type: ignore
except ImportError:
    from bubbles_core.errors import ConfigError, NoLandingSlot, NoSuchSlot  # type: ignore
    from bubbles_core.config import GameConfig, config_from_env  # type: ignore
    from bubbles_core.geometry import (  # type: ignore
        PLAYGROUND_HEIGHT,
        PLAYGROUND_WIDTH,
        SCALE,
        SlotKey,
        Vec2,
        canvas_to_math,
        key_of,
        math_to_canvas,
        position_for_slot,
        slot_of,
    )
    from bubbles_core.grid import BubbleGrid, Color, create_grid  # type: ignore
    from bubbles_core.cluster import (  # type: ignore
        explode,
        nearest_empty_slot,
        neighbor_keys,
        neighbors_of,
        same_color_cluster,
    )
    from bubbles_core.trajectory import (  # type: ignore
        GUN_ORIGIN,
        Bullet,
        Shot,
        ShotState,
        find_collision,
        out_of_bounds,
    )
    from bubbles_core.gun import Gun  # type: ignore
    from bubbles_core.controller import RoundController, ScoreSink, SessionState  # type: ignore


def main() -> None:
    # CLI driver delegated to bubbles_core.cli
    try:
        from .bubbles_core.cli import main as _main  # type: ignore
    except ImportError:
        from bubbles_core.cli import main as _main  # type: ignore
    _main()


if __name__ == '__main__':
    main()
