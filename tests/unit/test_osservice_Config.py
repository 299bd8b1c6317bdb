"""Unit tests for osservice.Config."""

import pytest
from pydantic import ValidationError

from osservice.Config import Config
from osservice.Options import Options


def test_config_defaults():
    cfg = Config(name="worker")

    assert cfg.display_name == ""
    assert cfg.arguments == ()
    assert cfg.env_vars == {}
    assert isinstance(cfg.option, Options)
    assert len(cfg.option) == 0


def test_config_wraps_option_dict():
    cfg = Config(name="worker", option={Options.KEEP_ALIVE: False})

    assert isinstance(cfg.option, Options)
    assert cfg.option.get_bool(Options.KEEP_ALIVE, True) is False


def test_config_does_not_validate_option_types():
    # Option types are checked when a system builds the service
    cfg = Config(name="worker", option={Options.KEEP_ALIVE: "no"})
    assert cfg.option[Options.KEEP_ALIVE] == "no"


@pytest.mark.parametrize("name", ["", "my service", "a/b", "a\\b"])
def test_config_rejects_bad_names(name):
    with pytest.raises(ValidationError):
        Config(name=name)


def test_config_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        Config(name="worker", chroot="/srv")  # type: ignore[call-arg]


def test_config_is_frozen():
    cfg = Config(name="worker")
    with pytest.raises(ValidationError):
        cfg.name = "other"  # type: ignore[misc]


def test_config_collections_are_read_only():
    cfg = Config(
        name="worker",
        arguments=["--queue", "default"],
        dependencies=["network-online.target"],
        env_vars={"MODE": "prod"},
    )

    assert cfg.arguments == ("--queue", "default")
    assert cfg.dependencies == ("network-online.target",)
    assert cfg.env_vars == {"MODE": "prod"}
    with pytest.raises(AttributeError):
        cfg.arguments.append("--verbose")  # type: ignore[attr-defined]
    with pytest.raises(TypeError):
        cfg.env_vars["MODE"] = "dev"  # type: ignore[index]


def test_config_copies_caller_collections():
    env = {"MODE": "prod"}
    args = ["--queue"]
    cfg = Config(name="worker", arguments=args, env_vars=env)

    env["MODE"] = "dev"
    args.append("default")

    assert cfg.env_vars["MODE"] == "prod"
    assert cfg.arguments == ("--queue",)
