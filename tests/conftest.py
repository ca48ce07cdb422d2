"""Shared pytest fixtures and configuration for the warp-route-id test suite.

Guidelines
----------
* No network access in any test.
* Core tests must be pure — no side effects.
* Golden vectors live in ``golden_vectors.py``.
"""

from __future__ import annotations

import pytest

from golden_vectors import DEPLOYER_FF, WETH, ZERO_WARP_ROUTE_ID
from warp_route_id.core.hex_bytes import Address, Hash32


@pytest.fixture
def zero_address() -> Address:
    return Address(bytes(20))


@pytest.fixture
def weth() -> Address:
    return Address.from_hex(WETH)


@pytest.fixture
def deployer() -> Address:
    return Address.from_hex(DEPLOYER_FF)


@pytest.fixture
def zero_warp_route_id() -> Hash32:
    return Hash32.from_hex(ZERO_WARP_ROUTE_ID)
