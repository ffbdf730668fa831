"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

ASSET_DIR = Path(__file__).parent / "assets"

# sha1("GitHub")
GITHUB_HASH = "5442e2b64fa09764b9f593867e59a97292c84059"

ALL_ZERO_HASH = "0" * 40
ALL_F_HASH = "f" * 40


def load_asset(name: str) -> str:
    return (ASSET_DIR / f"{name}.svg").read_text(encoding="utf-8")


@pytest.fixture
def github_hash() -> str:
    return GITHUB_HASH
