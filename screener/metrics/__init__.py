#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Metrics Module

Ranking report export and display formatting:
- RankingReport: CSV/Excel ranking report of the displayed instruments
- fmt_*: console formatters for AUM, percentages, ratios and scores
"""

from screener.metrics.ranking_report import (
    MISSING,
    RankingReport,
    fmt_aum,
    fmt_ter,
    fmt_pct,
    fmt_ratio,
    fmt_score,
    fmt_vola,
    fmt_pe,
    fmt_ey,
)

__all__ = [
    'MISSING',
    'RankingReport',
    'fmt_aum',
    'fmt_ter',
    'fmt_pct',
    'fmt_ratio',
    'fmt_score',
    'fmt_vola',
    'fmt_pe',
    'fmt_ey',
]
