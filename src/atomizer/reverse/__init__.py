from atomizer.reverse.builder import ConfigBuilder, build_config
from atomizer.reverse.values import decode_value

__all__ = ["ConfigBuilder", "build_config", "decode_value"]
