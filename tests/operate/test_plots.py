from pathlib import Path

import pandas as pd
import pytest

from mqclean.core.maxquant.protein_groups import clean_protein_groups
from mqclean.operate.plots import (
    plot_log2_intensity_distribution,
    plot_qvalue_distribution,
)

TEST_DATA_ROOT = Path(__file__).parents[1] / "examples"

PROTEIN_GROUPS_FILE = TEST_DATA_ROOT / "maxquant/proteinGroups.txt"


def test_plot_qvalue_distribution(tmp_path):
    df = clean_protein_groups(PROTEIN_GROUPS_FILE)
    save_path = tmp_path / "plots" / "qvalue.svg"
    plot_qvalue_distribution(df, save_path)
    assert save_path.exists()
    assert save_path.stat().st_size > 0


def test_plot_log2_intensity_distribution(tmp_path):
    df = clean_protein_groups(PROTEIN_GROUPS_FILE, zero_policy="inf")
    save_path = tmp_path / "log2.png"
    plot_log2_intensity_distribution(df, save_path)
    assert save_path.exists()


def test_plot_log2_without_log_columns(tmp_path):
    df = pd.DataFrame({"Q.value": ["0.01"]})
    with pytest.raises(ValueError, match="No columns starting with 'LOG2.'"):
        plot_log2_intensity_distribution(df, tmp_path / "log2.png")
