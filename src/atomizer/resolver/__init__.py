from atomizer.resolver.resolver import (
    direction_map,
    load_configuration,
    require_settings,
    resolve,
)

__all__ = ["resolve", "load_configuration", "require_settings", "direction_map"]
