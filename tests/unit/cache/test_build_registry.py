from __future__ import annotations

from pathlib import Path

import pytest

from tw_index.cache import BuildInProgressError, BuildRegistry


def test_overlapping_claim_for_same_cache_dir_is_rejected(tmp_path: Path) -> None:
    registry = BuildRegistry()

    with registry.claim(tmp_path / "cache"):
        with pytest.raises(BuildInProgressError) as error:
            with registry.claim(tmp_path / "other" / ".." / "cache"):
                pass

    assert error.value.cache_dir == (tmp_path / "cache").resolve()
    assert "already in progress" in str(error.value)


def test_claims_for_different_dirs_coexist_and_release(tmp_path: Path) -> None:
    registry = BuildRegistry()

    with registry.claim(tmp_path / "a"), registry.claim(tmp_path / "b"):
        assert registry.in_flight() == ((tmp_path / "a").resolve(), (tmp_path / "b").resolve())

    assert registry.in_flight() == ()
    with registry.claim(tmp_path / "a"):
        pass


def test_claim_is_released_when_build_raises(tmp_path: Path) -> None:
    registry = BuildRegistry()

    with pytest.raises(RuntimeError):
        with registry.claim(tmp_path / "a"):
            raise RuntimeError("boom")

    assert registry.in_flight() == ()
