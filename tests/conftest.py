"""Shared fixtures: logger state and a small base-color set."""

import pytest

from chromokinesis.shared.logger import set_quiet


@pytest.fixture(autouse=True)
def loud_logger():
    set_quiet(False)
    yield
    set_quiet(False)


@pytest.fixture()
def base_colors():
    return {
        "red": "#ff0000",
        "sky": "oklch(0.75 0.12 230)",
        "olive": "olive",
    }
