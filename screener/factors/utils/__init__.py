#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Factor Utilities

Math utilities for factor calculations including:
- Period and daily returns
- Annualized volatility
- Moving averages, true range and Wilder smoothing
- Cross-sectional percentile and ordinal ranks
"""

from screener.factors.utils.math_utils import (
    TRADING_DAYS_PER_YEAR,
    period_return,
    simple_returns,
    annualized_volatility,
    moving_average,
    true_range,
    wilder_smooth,
    percentile_rank,
    ordinal_rank,
    to_float_array,
)

__all__ = [
    'TRADING_DAYS_PER_YEAR',
    'period_return',
    'simple_returns',
    'annualized_volatility',
    'moving_average',
    'true_range',
    'wilder_smooth',
    'percentile_rank',
    'ordinal_rank',
    'to_float_array',
]
