"""Tests for TerminatorConfig defaults and validation."""

import pytest
from pydantic import ValidationError

from hardassert.schemas import HardAssertBaseModel, StackFrame, TerminatorConfig

pytestmark = pytest.mark.unit


def test_defaults():
    """Defaults capture 50 frames with source labels on stderr."""
    config = TerminatorConfig()
    assert config.max_frames == 50
    assert config.show_source is True
    assert config.source_encoding is None
    assert config.stream == "stderr"


def test_max_frames_must_be_positive():
    with pytest.raises(ValidationError):
        TerminatorConfig(max_frames=0)


def test_unknown_field_rejected():
    with pytest.raises(ValidationError):
        TerminatorConfig(exit_code=2)


def test_stream_normalized():
    assert TerminatorConfig(stream=" STDOUT ").stream == "stdout"


def test_stream_restricted():
    with pytest.raises(ValidationError):
        TerminatorConfig(stream="syslog")


def test_config_is_frozen():
    config = TerminatorConfig()
    with pytest.raises(ValidationError):
        config.max_frames = 10


def test_model_validate_from_dict():
    config = TerminatorConfig.model_validate({"max_frames": 3, "show_source": False})
    assert config.max_frames == 3
    assert config.show_source is False


def test_forced_source_encoding():
    assert TerminatorConfig(source_encoding="latin-1").source_encoding == "latin-1"


def test_subclasses_inherit_strict_base_config():
    """Subclasses only add frozen=True on top of the strict base."""
    assert "use_enum_values" not in HardAssertBaseModel.model_config
    for model in (TerminatorConfig, StackFrame):
        assert model.model_config["extra"] == "forbid"
        assert model.model_config["validate_assignment"] is True
        assert model.model_config["frozen"] is True
