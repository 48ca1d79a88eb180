from .loader import StrataConfig, load_config_from_path

__all__ = ["StrataConfig", "load_config_from_path"]
