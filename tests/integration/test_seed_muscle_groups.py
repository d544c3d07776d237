"""
Integration test for the muscle group seed script.

Covered:
- a fresh database gets every default muscle group
- rerunning adds nothing; existing names are left alone
"""

import pytest

from liftlog.core.constants import DEFAULT_MUSCLE_GROUPS
from liftlog.repositories import MuscleGroupRepository
from scripts.seed_muscle_groups import seed

pytestmark = pytest.mark.integration


async def test_seed_is_idempotent(session, quadriceps):
    added = await seed(session)
    assert added == len(DEFAULT_MUSCLE_GROUPS) - 1

    assert await seed(session) == 0
    names = [m.name for m in await MuscleGroupRepository(session).find_all()]
    assert len(names) == len(DEFAULT_MUSCLE_GROUPS)
    assert names.count("Quadriceps") == 1
