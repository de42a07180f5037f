import posixpath
from dataclasses import dataclass
from typing import NamedTuple, Tuple, Type

from lightkube.core.resource import Resource, api_info
from lightkube.models.meta_v1 import APIResource

from .exceptions import GVRParseError
from .sortorder import natural_key, natural_less


def path_join(*parts: str) -> str:
    """Joins path segments with `/`, skipping empty segments and cleaning the result"""
    joined = "/".join(p for p in parts if p)
    if not joined:
        return ""
    cleaned = posixpath.normpath(joined)
    # normpath keeps exactly two leading slashes
    if cleaned.startswith("//"):
        cleaned = cleaned[1:]
    return cleaned


class GroupVersion(NamedTuple):
    group: str
    version: str

    @property
    def api_version(self):
        return f"{self.group}/{self.version}" if self.group else self.version


class GroupVersionResource(NamedTuple):
    group: str
    version: str
    resource: str


@dataclass(frozen=True)
class GVR:
    """Kubernetes resource schema, written as `group/version/resource` with an optional `:subresource` suffix.

    Use one of the class method constructors instead of creating instances directly.
    """
    raw: str
    group: str = ""
    version: str = ""
    resource: str = ""
    sub_resource: str = ""

    @classmethod
    def parse(cls, gvr: str) -> 'GVR':
        """Parse a resource identifier string.

        **parameters**

        * **gvr** - Identifier in one of the forms `group/version/resource`, `version/resource` or `resource`,
          optionally followed by `:subresource`. Example `apps/v1/deployments`, `v1/pods:log`

        **returns** A new `GVR`. `str()` of the result is always the original `gvr` string.

        **raises** `GVRParseError` if the path doesn't contain 1 to 3 `/` separated tokens.
        """
        path, sr = gvr, ""
        tokens = gvr.split(":")
        if len(tokens) == 2:
            path, sr = tokens

        tokens = path.split("/")
        if len(tokens) == 3:
            g, v, r = tokens
        elif len(tokens) == 2:
            g, (v, r) = "", tokens
        elif len(tokens) == 1:
            g, v, r = "", "", tokens[0]
        else:
            raise GVRParseError(gvr)

        return cls(raw=gvr, group=g, version=v, resource=r, sub_resource=sr)

    @classmethod
    def from_meta(cls, api_resource: APIResource) -> 'GVR':
        """Build a `GVR` from resource discovery metadata.

        **parameters**

        * **api_resource** - Object with `group`, `version` and `name` attributes, normally an instance of
          `lightkube.models.meta_v1.APIResource`. Missing group or version are treated as empty.
        """
        g, v, r = api_resource.group or "", api_resource.version or "", api_resource.name
        return cls(raw=path_join(g, v, r), group=g, version=v, resource=r)

    @classmethod
    def from_resource(cls, resource: Type[Resource]) -> 'GVR':
        """Build a `GVR` from a lightkube resource class.

        **parameters**

        * **resource** - Resource class. Example `lightkube.resources.apps_v1.Deployment`. Sub-resources
          like `Deployment.Scale` keep the group and version of their parent and set `sub_resource`.
        """
        info = api_info(resource)
        base = info.parent if info.parent is not None else info.resource
        raw = path_join(base.group, base.version, info.plural)
        if info.action:
            raw = f"{raw}:{info.action}"
        return cls(raw=raw, group=base.group, version=base.version, resource=info.plural,
                   sub_resource=info.action or "")

    @classmethod
    def from_gv_and_r(cls, gv: str, r: str) -> 'GVR':
        """Build a `GVR` from a group/version string (Example `apps/v1`) and a resource name"""
        return cls.parse(path_join(gv, r))

    def __str__(self):
        return self.raw

    def as_resource_name(self) -> str:
        """Returns a `.` separated descriptor in the shape of `resource.version.group`"""
        return f"{self.resource}.{self.version}.{self.group}"

    def as_gv(self) -> GroupVersion:
        return GroupVersion(group=self.group, version=self.version)

    def as_gvr(self) -> GroupVersionResource:
        return GroupVersionResource(group=self.group, version=self.version, resource=self.resource)

    def r_and_g(self) -> Tuple[str, str]:
        return self.resource, self.group


class GVRs(list):
    """List of `GVR` ordered by group name in natural order"""

    def swap(self, i: int, j: int):
        self[i], self[j] = self[j], self[i]

    def less(self, i: int, j: int) -> bool:
        return natural_less(self[i].group, self[j].group)

    def sort(self, *, key=None, reverse=False):
        if key is None:
            key = _group_key
        super().sort(key=key, reverse=reverse)

    def sorted(self, reverse: bool = False) -> 'GVRs':
        """Returns a new `GVRs` sorted by group"""
        return GVRs(sorted(self, key=_group_key, reverse=reverse))


def _group_key(gvr: GVR):
    return natural_key(gvr.group)
