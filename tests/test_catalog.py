"""Tests for the global repository snapshot and settings."""

from pathlib import Path

import pytest

from tmdr.acronyms import DatasetLoadError
from tmdr.acronyms.catalog import (
    get_repository,
    load_repository,
    reload_repository,
    reset_repository,
)
from tmdr.config import BUNDLED_DATASET, Settings


@pytest.mark.usefixtures("clean_catalog")
class TestCatalog:
    """Tests for the process-wide repository."""

    def test_bundled_dataset_loads(self) -> None:
        """Test the packaged CSV loads with its well-known entries."""
        repo = load_repository(BUNDLED_DATASET)

        assert len(repo) >= 40
        assert repo.find("ABG").full_form == "Arterial Blood Gas"
        assert "carbon dioxide" in repo.find("ABG").definition

    def test_get_repository_is_cached(self) -> None:
        """Test the same snapshot is returned on repeated access."""
        assert get_repository() is get_repository()

    def test_reload_swaps_snapshot(self, sample_csv: Path) -> None:
        """Test reload replaces the global snapshot without touching the old one."""
        before = get_repository()
        size_before = len(before)

        after = reload_repository(sample_csv)

        assert get_repository() is after
        assert after is not before
        assert len(after) == 6
        assert len(before) == size_before

    def test_failed_reload_keeps_snapshot(self, tmp_path: Path) -> None:
        """Test a load error leaves the current snapshot in place."""
        current = get_repository()

        with pytest.raises(DatasetLoadError):
            reload_repository(tmp_path / "missing.csv")

        assert get_repository() is current

    def test_reset(self) -> None:
        """Test reset forces a fresh load on next access."""
        first = get_repository()
        reset_repository()

        assert get_repository() is not first


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default settings use the bundled dataset."""
        monkeypatch.delenv("TMDR_DATA_PATH", raising=False)
        monkeypatch.delenv("TMDR_MAX_RESULTS", raising=False)
        s = Settings(_env_file=None)

        assert s.dataset_path == BUNDLED_DATASET
        assert s.max_results == 3
        assert s.delimiter == "–"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch, sample_csv: Path) -> None:
        """Test TMDR_ prefixed variables override defaults."""
        monkeypatch.setenv("TMDR_DATA_PATH", str(sample_csv))
        monkeypatch.setenv("TMDR_MAX_RESULTS", "5")
        s = Settings(_env_file=None)

        assert s.dataset_path == sample_csv
        assert s.max_results == 5
