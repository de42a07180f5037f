from .core.gvr import GVR, GVRs, GroupVersion, GroupVersionResource
from .core.capabilities import VERB_MAP, can, map_verb, allowed_actions
from .core.exceptions import GVRParseError, UnknownActionError, ConfigError
from .core.sortorder import natural_less
from .config.aliases import Aliases
__all__ = [
    "GVR",
    "GVRs",
    "GroupVersion",
    "GroupVersionResource",
    "VERB_MAP",
    "can",
    "map_verb",
    "allowed_actions",
    "GVRParseError",
    "UnknownActionError",
    "ConfigError",
    "natural_less",
    "Aliases",
]
