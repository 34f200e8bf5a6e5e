"""Pytest configuration and fixtures."""

from collections.abc import Generator
from pathlib import Path

import pytest

from tmdr.acronyms import Acronym, AcronymRepository
from tmdr.acronyms.catalog import reset_repository

SAMPLE_CSV = """Acronym,Definition
ABG,"Arterial Blood Gas – A blood test measuring oxygen, carbon dioxide and pH."
HIV,Human Immunodeficiency Virus – A virus that attacks the immune system.
HIB,Haemophilus Influenzae Type B – A bacterium that can cause meningitis.
HIT,Heparin-Induced Thrombocytopenia – A drop in platelets caused by heparin.
COPD,Chronic Obstructive Pulmonary Disease – A progressive lung disease.
CBC,Complete Blood Count
"""


@pytest.fixture
def sample_csv(tmp_path: Path) -> Path:
    """Write the sample dataset to a temporary CSV file."""
    path = tmp_path / "acronyms.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path


@pytest.fixture
def repository(sample_csv: Path) -> AcronymRepository:
    """Repository loaded from the sample dataset."""
    return AcronymRepository.from_csv(sample_csv)


@pytest.fixture
def hi_entries() -> list[Acronym]:
    """Three codes that tie on score for the query 'HI'."""
    return [
        Acronym("HIV", "Human Immunodeficiency Virus"),
        Acronym("HIB", "Haemophilus Influenzae Type B"),
        Acronym("HIT", "Heparin-Induced Thrombocytopenia"),
    ]


@pytest.fixture
def clean_catalog() -> Generator[None, None, None]:
    """Reset the global repository before and after a test."""
    reset_repository()
    yield
    reset_repository()
