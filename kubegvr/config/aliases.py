import logging
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from ..core import exceptions
from ..core.gvr import GVR

logger = logging.getLogger(__name__)

DEFAULT_ALIASES = "~/.kube/aliases.yaml"


class Aliases:
    """Short names for resources. Example `dp` -> `apps/v1/deployments`"""
    alias: Dict[str, GVR]

    def __init__(self, alias: Dict[str, GVR] = None, fname=None):
        self.alias = dict(alias) if alias else {}
        self.fname = Path(fname) if fname else None

    @classmethod
    def from_dict(cls, conf: Dict, fname=None):
        """Creates an Aliases instance from the content of a dictionary structure.

        **Parameters**

        * **conf**: Configuration structure with a single `aliases` attribute, mapping each alias to a GVR string.
        * **fname**: File path from where this configuration has been loaded.
        """
        conf = conf or {}
        if not isinstance(conf, dict):
            raise exceptions.ConfigError("Aliases configuration must be a mapping")
        section = conf.get('aliases') or {}
        if not isinstance(section, dict):
            raise exceptions.ConfigError("Attribute 'aliases' must be a mapping of alias to resource")
        alias = {}
        for name, gvr in section.items():
            if not isinstance(gvr, str):
                raise exceptions.ConfigError(f"Alias '{name}': expected a resource string, got {gvr!r}")
            try:
                alias[str(name)] = GVR.parse(gvr)
            except exceptions.GVRParseError as e:
                raise exceptions.ConfigError(f"Alias '{name}': {e}") from e
        logger.debug("loaded %d aliases", len(alias))
        return cls(alias, fname=fname)

    @classmethod
    def from_file(cls, fname=DEFAULT_ALIASES):
        """Creates an instance of the Aliases class from a file in YAML format.

        **Parameters**

         * **fname**: Path to the aliases file. Default `~/.kube/aliases.yaml`.
        """
        filepath = Path(fname).expanduser()
        if not filepath.is_file():
            raise exceptions.ConfigError(f"Aliases file {fname} not found")
        with filepath.open() as f:
            return cls.from_dict(yaml.safe_load(f.read()), fname=filepath)

    def define(self, gvr: GVR, *aliases: str):
        for name in aliases:
            self.alias[name] = gvr

    def get(self, name: str) -> Optional[GVR]:
        return self.alias.get(name)

    def resolve(self, name: str) -> GVR:
        """Returns the resource for the alias `name`, or parses `name` as a GVR string when it's not an alias"""
        gvr = self.get(name)
        if gvr is not None:
            return gvr
        return GVR.parse(name)

    def aliases_for(self, gvr: GVR) -> List[str]:
        return sorted(name for name, target in self.alias.items() if target == gvr)
