"""
Tests for settings validation.
"""

import pytest
from pydantic import ValidationError

from eventdesk.core.config import Settings


def test_default_seed_offsets():
    assert Settings().SEED_EVENT_OFFSETS_DAYS == [7, 14, 3]


@pytest.mark.parametrize("offsets", [[1], [1, 2], [1, 2, 3, 4]])
def test_seed_offsets_need_one_per_event(offsets):
    """Every seeded event needs its own offset; none may be dropped."""
    with pytest.raises(ValidationError):
        Settings(SEED_EVENT_OFFSETS_DAYS=offsets)
