from typing import List

import pytest

from cpu_scheduler.models import Process, build_processes


@pytest.fixture
def three_processes() -> List[Process]:
    """arrival=[0,1,2], burst=[5,3,8], priority=[2,1,3]."""
    return build_processes([(0, 5, 2), (1, 3, 1), (2, 8, 3)])


@pytest.fixture
def idle_gap_processes() -> List[Process]:
    return build_processes([(3, 2, 2), (10, 4, 1), (11, 1, 3)])
