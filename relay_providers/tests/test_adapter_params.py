"""Tests for the AdapterParams DTO.

Covers:
- Field validation ranges.
- Conversion to the ``ModelConfig`` an adapter binds to.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from relay_providers.base.dto.adapter_params import AdapterParams
from relay_providers.base.models import ModelConfig


def test_adapter_params_round_trip():
    params = AdapterParams(model="gpt-4o", base_url="https://api.example.com", temperature=0.5)
    dumped = params.model_dump(exclude_none=True)
    assert dumped == {"model": "gpt-4o", "base_url": "https://api.example.com", "temperature": 0.5}  # nosec B101 - test assertion


def test_to_model_config_uses_default_when_model_missing():
    cfg = AdapterParams(max_tokens=10, context_limit=4096).to_model_config("gpt-4o")
    assert cfg == ModelConfig("gpt-4o", context_limit=4096, max_tokens=10)  # nosec B101 - test assertion


@pytest.mark.parametrize(
    "kwargs",
    [
        {"temperature": -0.1},
        {"temperature": 2.5},
        {"max_tokens": 0},
        {"context_limit": -1},
        {"model": ""},
    ],
)
def test_adapter_params_rejects_out_of_range_values(kwargs):
    with pytest.raises(ValidationError):
        AdapterParams(**kwargs)
