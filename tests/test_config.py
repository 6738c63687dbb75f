import pytest
from pydantic import ValidationError

from nestmpl import RenderOptions
from nestmpl.config import DEFAULT_MAX_DEPTH


def test_defaults():
    assert RenderOptions().max_depth == DEFAULT_MAX_DEPTH


def test_max_depth_must_be_positive():
    with pytest.raises(ValidationError):
        RenderOptions(max_depth=0)


def test_options_are_frozen():
    options = RenderOptions(max_depth=4)
    with pytest.raises(ValidationError):
        options.max_depth = 5
