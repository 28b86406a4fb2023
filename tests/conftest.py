from __future__ import annotations

import pytest


class ExplodingRecord:
    def to_dict(self) -> dict:
        payload: dict = {"command": "up"}
        return {"command": payload["command"], "status": payload["status"]}


def _cyclic() -> dict:
    record: dict = {"command": "up"}
    record["self"] = record
    return record


@pytest.fixture(
    params=[
        pytest.param(_cyclic, id="cyclic"),
        pytest.param(lambda: {"command": "up", "value": object()}, id="object-value"),
        pytest.param(lambda: {"command": "up", "duration": float("nan")}, id="nan"),
        pytest.param(lambda: {"command": "up", "duration": float("inf")}, id="inf"),
        pytest.param(ExplodingRecord, id="raising-to-dict"),
    ]
)
def unencodable_record(request):
    return request.param()
