"""
Utility functions for protein intensity values.

This module provides the scalar log2 transform used for LFQ intensities and a
small distribution summary used for diagnostics (Q-value, intensities).
"""

import math
from typing import Dict, Iterable

import numpy as np
import pandas as pd

from mqclean.core.common import (
    ZERO_POLICIES,
    ZERO_POLICY_INF,
    ZERO_POLICY_MISSING,
    ZERO_POLICY_RAISE,
)


class NonPositiveIntensityError(ValueError):
    """Raised when a zero or negative intensity is log-transformed under the raise policy."""


def check_zero_policy(policy: str) -> str:
    if policy not in ZERO_POLICIES:
        raise ValueError(
            f"Unknown zero intensity policy '{policy}', expected one of {ZERO_POLICIES}"
        )
    return policy


def log2_intensity(value: float, policy: str = ZERO_POLICY_MISSING) -> float:
    """
    Calculate the base-2 logarithm of a single intensity.

    Args:
        value: Intensity value, NaN for proteins not detected in the sample
        policy: How zero and negative intensities are handled
            ("missing", "inf" or "raise")

    Returns:
        log2(value) for positive values, NaN for NaN input.
        Zero gives NaN ("missing") or -inf ("inf"); negative values give NaN.
    """
    check_zero_policy(policy)
    if value is None or math.isnan(value):
        return float("nan")
    if value > 0:
        return math.log2(value)
    if policy == ZERO_POLICY_RAISE:
        raise NonPositiveIntensityError(
            f"Cannot log-transform non-positive intensity {value}"
        )
    if value == 0 and policy == ZERO_POLICY_INF:
        return float("-inf")
    return float("nan")


def log2_series(series: pd.Series, policy: str = ZERO_POLICY_MISSING) -> pd.Series:
    """
    Vectorized version of log2_intensity for a float column.

    Raises NonPositiveIntensityError under the "raise" policy when the series
    holds any value <= 0; the message names the column and the number of rows.
    """
    check_zero_policy(policy)
    values = series.to_numpy(dtype="float64")
    non_positive = values <= 0

    if policy == ZERO_POLICY_RAISE and non_positive.any():
        raise NonPositiveIntensityError(
            f"Column '{series.name}' has {int(non_positive.sum())} zero or negative "
            f"intensities, cannot log-transform"
        )

    with np.errstate(divide="ignore", invalid="ignore"):
        result = np.log2(values)

    if policy == ZERO_POLICY_MISSING:
        result[non_positive] = np.nan
    else:
        result[values < 0] = np.nan

    return pd.Series(result, index=series.index, dtype="float64")


def summarize_distribution(values: Iterable[float]) -> Dict[str, float]:
    """
    Summarize a set of values as min / median / max.

    NaN values are ignored. Returns NaN for every statistic and a count of 0
    when no valid value is left.
    """
    series = pd.Series(list(values), dtype="float64").dropna()
    if series.empty:
        return {
            "count": 0,
            "min": float("nan"),
            "median": float("nan"),
            "max": float("nan"),
        }
    return {
        "count": int(series.size),
        "min": float(series.min()),
        "median": float(series.median()),
        "max": float(series.max()),
    }
