from pathlib import Path

import pytest

from kubegvr import Aliases, GVR, ConfigError, GVRParseError


@pytest.fixture()
def aliases():
    fname = Path(__file__).parent.joinpath("test_aliases.yaml")
    return Aliases.from_file(fname)


def test_from_file(aliases):
    assert aliases.get("dp") == GVR.parse("apps/v1/deployments")
    assert aliases.get("po") == GVR.parse("v1/pods")
    assert aliases.get("logs").sub_resource == "log"
    assert aliases.get("nd") == GVR.parse("nodes")
    assert aliases.get("missing") is None
    assert aliases.fname.name == "test_aliases.yaml"


def test_from_file_missing(tmp_path):
    with pytest.raises(ConfigError):
        Aliases.from_file(tmp_path.joinpath("nope.yaml"))


def test_from_dict():
    a = Aliases.from_dict({"aliases": {"cj": "batch/v1/cronjobs"}})
    assert a.get("cj").as_resource_name() == "cronjobs.v1.batch"
    assert a.fname is None

    assert Aliases.from_dict({}).alias == {}
    assert Aliases.from_dict(None).alias == {}


def test_from_dict_bad_gvr():
    with pytest.raises(ConfigError) as exc_info:
        Aliases.from_dict({"aliases": {"bad": "a/b/c/d"}})
    assert "bad" in str(exc_info.value)


def test_resolve(aliases):
    assert aliases.resolve("dp") == GVR.parse("apps/v1/deployments")
    assert aliases.resolve("batch/v1/jobs") == GVR.parse("batch/v1/jobs")
    with pytest.raises(GVRParseError):
        aliases.resolve("a/b/c/d")


def test_define_and_aliases_for():
    a = Aliases()
    cm = GVR.parse("v1/configmaps")
    a.define(cm, "cm", "configmap")
    assert a.get("cm") is cm
    assert a.aliases_for(cm) == ["cm", "configmap"]
    assert a.aliases_for(GVR.parse("v1/secrets")) == []


def test_aliases_for(aliases):
    assert aliases.aliases_for(GVR.parse("apps/v1/deployments")) == ["deploy", "dp"]


@pytest.mark.parametrize("value", [None, 3, ["v1/pods"], {"gvr": "v1/pods"}])
def test_from_dict_alias_not_a_string(value):
    with pytest.raises(ConfigError) as exc_info:
        Aliases.from_dict({"aliases": {"po": value}})
    assert "po" in str(exc_info.value)


@pytest.mark.parametrize("section", [["po"], "po: v1/pods", 1])
def test_from_dict_aliases_not_a_mapping(section):
    with pytest.raises(ConfigError):
        Aliases.from_dict({"aliases": section})


def test_from_file_null_alias(tmp_path):
    fname = tmp_path.joinpath("aliases.yaml")
    fname.write_text("aliases:\n  po: ~\n")
    with pytest.raises(ConfigError):
        Aliases.from_file(fname)


def test_bad_gvr_error_is_chained():
    with pytest.raises(ConfigError) as exc_info:
        Aliases.from_dict({"aliases": {"bad": "a/b/c/d"}})
    assert isinstance(exc_info.value.__cause__, GVRParseError)


def test_from_dict_not_a_mapping():
    with pytest.raises(ConfigError):
        Aliases.from_dict(["aliases"])
