#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Test Suite

Test categories:
- dedup: Name normalization, exposure classification and grouping
- scoring: Factors, scorers, ranking and the scoring pipeline
- boundary: Records, configuration, working set, display and report
- regression: End-to-end determinism on the sample instruments
"""
