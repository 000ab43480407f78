from __future__ import annotations

import pytest

from jsonapi_fixtures.fixtures import jsonapi_server, jsonapi_server_config  # noqa: F401
from records import Owner, Widget


@pytest.fixture()
def widget() -> Widget:
    return Widget(id="42", name="bolt", weight=1.5, owner=Owner(id="7", name="ada"))
