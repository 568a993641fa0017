#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Core Module

Main components:
- dedup: Exposure deduplication (name normalization, classification, grouping)
- factors: Factor implementations (returns, volatility, technicals, value)
- processors: Scoring pipeline, configuration, ranking and display filtering
- data: Boundary adapters for provider records
- metrics: Ranking report export
"""

__version__ = "1.0.0"
