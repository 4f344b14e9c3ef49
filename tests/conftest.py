from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from modscaffold.config import ScaffoldConfig  # noqa: E402
from modscaffold.scaffold import ScaffoldPlan, plan  # noqa: E402


@pytest.fixture()
def default_config() -> ScaffoldConfig:
    return ScaffoldConfig.from_options()


@pytest.fixture()
def default_plan(default_config: ScaffoldConfig) -> ScaffoldPlan:
    return plan(default_config)
