from .loader import CapacityConfig, EngineConfig, load_config

__all__ = ["CapacityConfig", "EngineConfig", "load_config"]
