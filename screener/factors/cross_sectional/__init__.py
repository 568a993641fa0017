#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Cross-Sectional Factors

Factors that score instruments relative to the whole working set.
"""

from screener.factors.cross_sectional.base import (
    CrossSectionalFactorBase,
    CrossSectionalFactor,
    universe_frame,
)

# Value
from screener.factors.cross_sectional.value import (
    ValueScorer,
)

__all__ = [
    'CrossSectionalFactorBase',
    'CrossSectionalFactor',
    'universe_frame',
    'ValueScorer',
]
