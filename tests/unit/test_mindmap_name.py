"""Unit tests for MindMapName value object."""

import pytest

from mindmaps.domain.exceptions import ValidationError
from mindmaps.domain.value_objects import MindMapName


@pytest.mark.parametrize("name", ["Trip Plan", "a", "проект", "v1.2 draft", ".hidden", "x" * 250, "я" * 125])
def test_mindmap_name_valid(name: str) -> None:
    assert MindMapName(name).value == name
    assert str(MindMapName(name)) == name


@pytest.mark.parametrize("name", ["", "   ", ".", "..", "a/b", "..\\evil", "nul\x00byte", "x" * 251, "я" * 126, "\ud800"])
def test_mindmap_name_invalid(name: str) -> None:
    with pytest.raises(ValidationError):
        MindMapName(name)
