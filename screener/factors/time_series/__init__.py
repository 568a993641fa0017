#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Time Series Factors

Single-instrument factors computed independently for each instrument.
"""

from screener.factors.time_series.base import (
    TimeSeriesFactorBase,
    TimeSeriesFactor,
    bars_frame,
)

# Returns
from screener.factors.time_series.returns import (
    ReturnCalculator,
    RETURN_HORIZONS,
)

# Volatility
from screener.factors.time_series.volatility import (
    VolatilityCalculator,
)

# Moving averages / ATR
from screener.factors.time_series.technical import (
    TechnicalIndicators,
    average_true_range,
    selling_threshold,
)

__all__ = [
    # Base
    'TimeSeriesFactorBase',
    'TimeSeriesFactor',
    'bars_frame',
    # Returns
    'ReturnCalculator',
    'RETURN_HORIZONS',
    # Volatility
    'VolatilityCalculator',
    # Technical
    'TechnicalIndicators',
    'average_true_range',
    'selling_threshold',
]
