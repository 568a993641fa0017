#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Exceptions

Errors raised at the boundary only (configuration and input records).
The dedup and scoring engines never raise for data problems; they
degrade to None instead.
"""


class ScreenerError(Exception):
    """所有筛选器异常的基类"""


class ConfigurationError(ScreenerError, ValueError):
    """配置值无效 (负权重、负 AUM 下限、非正 ATR 倍数等)"""


class RecordError(ScreenerError, ValueError):
    """输入记录格式错误 (缺少 ISIN、价格数组长度不一致等)"""
