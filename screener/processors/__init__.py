#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Processors Module

Configuration, scoring orchestration and presentation:
- ScreenerConfigLoader: YAML configuration with validated accessors
- SignalNormalizer: cross-sectional percentile normalization
- MomentumScorer / SharpeScorer / CombinedScorer: composite scores
- Ranker: ordinal ranks over the working set
- ScoringPipeline: full recalculation pass
- WorkingSet: mutable set of instruments, rescored on every change
- DisplayFilter: type / dedup / AUM / risk-free filtering and sorting
"""

from screener.processors.config_loader import (
    DEFAULT_CONFIG,
    ScreenerConfigLoader,
    load_config,
    validate_weights,
)

from screener.processors.display_filter import (
    DisplayFilter,
    DisplaySettings,
    beats_risk_free,
)

from screener.processors.normalizer import (
    SignalNormalizer,
)

from screener.processors.combiner import (
    MomentumScorer,
    SharpeScorer,
    CombinedScorer,
    CombinedScore,
)

from screener.processors.ranker import Ranker

from screener.processors.factor_engine import (
    ScoringPipeline,
    ScoringSummary,
)

from screener.processors.working_set import WorkingSet

__all__ = [
    # Config
    'DEFAULT_CONFIG',
    'ScreenerConfigLoader',
    'load_config',
    'validate_weights',

    # Display
    'DisplayFilter',
    'DisplaySettings',
    'beats_risk_free',

    # Normalization
    'SignalNormalizer',

    # Scoring
    'MomentumScorer',
    'SharpeScorer',
    'CombinedScorer',
    'CombinedScore',
    'Ranker',
    'ScoringPipeline',
    'ScoringSummary',

    # Working set
    'WorkingSet',
]
