from .addon import StremioAddonWrapper, get_addon_streams
from .torbox import TorboxWrapper

__all__ = [
    "StremioAddonWrapper",
    "TorboxWrapper",
    "get_addon_streams",
]
