#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Regression Tests

Runs dedup and scoring on examples/sample_instruments.json and checks
that repeated runs produce identical instruments.
"""
