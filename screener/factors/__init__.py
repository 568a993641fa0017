#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Factors Module

Provides all factor implementations organized by type:
- time_series: Single-instrument returns, volatility and technicals
- cross_sectional: Working-set value scoring
"""

from screener.factors.base import (
    FactorBase,
    FactorType,
)

from screener.factors.registry import (
    FactorRegistry,
    default_registry,
)

from screener.factors.time_series.base import (
    TimeSeriesFactorBase,
    TimeSeriesFactor,
)

from screener.factors.cross_sectional.base import (
    CrossSectionalFactorBase,
    CrossSectionalFactor,
)

__all__ = [
    # Base classes
    'FactorBase',
    'FactorType',

    # Registry
    'FactorRegistry',
    'default_registry',

    # Time series
    'TimeSeriesFactorBase',
    'TimeSeriesFactor',

    # Cross sectional
    'CrossSectionalFactorBase',
    'CrossSectionalFactor',
]
