import pytest
from pydantic import ValidationError

from exprtree import ExprTreeConfig


def test_config_defaults():
    config = ExprTreeConfig()
    assert config.default_capacity == 128
    assert config.truncation_marker == "$"
    assert config.verbose is False


@pytest.mark.parametrize(
    "kwargs",
    [
        {"default_capacity": 0},
        {"default_capacity": -1},
        {"truncation_marker": ""},
        {"truncation_marker": "$$"},
    ],
)
def test_config_validation(kwargs):
    with pytest.raises(ValidationError):
        ExprTreeConfig(**kwargs)
