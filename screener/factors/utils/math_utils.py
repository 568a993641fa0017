#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
因子数学工具模块

提供因子计算中常用的数学函数，包括：
- 收益率计算
- 年化波动率
- 移动平均与 Wilder 平滑
- 真实波幅 (True Range)
- 截面百分位与序数排名
"""

from typing import List, Optional, Sequence

import numpy as np
import pandas as pd
from scipy.stats import rankdata

# 年化交易日
TRADING_DAYS_PER_YEAR = 252


def period_return(closes: Sequence[float], horizon: int) -> Optional[float]:
    """
    计算 horizon 个交易日的区间收益率

    Args:
        closes: 收盘价序列 (旧 -> 新)
        horizon: 回看交易日数

    Returns:
        (last - base) / base，数据不足或基准价为 0 时返回 None
    """
    n = len(closes)
    target = n - 1 - horizon
    if n < 2 or target < 0:
        return None
    base = closes[target]
    if base is None or pd.isna(base) or base == 0:
        return None
    last = closes[-1]
    return float((last - base) / base)


def simple_returns(prices: np.ndarray) -> np.ndarray:
    """
    计算日简单收益率，跳过前值非正的位置

    Args:
        prices: 价格数组

    Returns:
        收益率数组 (长度 <= len(prices) - 1)
    """
    prices = np.asarray(prices, dtype=float)
    if len(prices) < 2:
        return np.array([])
    prev = prices[:-1]
    curr = prices[1:]
    mask = prev > 0
    return (curr[mask] - prev[mask]) / prev[mask]


def annualized_volatility(returns: np.ndarray, periods: int = TRADING_DAYS_PER_YEAR) -> float:
    """样本标准差 (ddof=1) 年化"""
    return float(np.std(returns, ddof=1) * np.sqrt(periods))


def moving_average(data: np.ndarray, window: int) -> np.ndarray:
    """
    计算简单移动平均

    Args:
        data: 输入数据数组
        window: 窗口大小

    Returns:
        移动平均数组 (长度 = len(data) - window + 1)
    """
    if len(data) < window:
        return np.array([])
    return np.convolve(data, np.ones(window) / window, mode='valid')


def true_range(
    close: np.ndarray,
    high: Optional[np.ndarray] = None,
    low: Optional[np.ndarray] = None
) -> np.ndarray:
    """
    逐根 K 线真实波幅 (从第二根开始)

    TR = max(high - low, |high - prev_close|, |low - prev_close|)
    当日 high 或 low 缺失时退化为 |close - prev_close|

    Args:
        close: 收盘价数组
        high: 最高价数组 (可含 NaN)
        low: 最低价数组 (可含 NaN)

    Returns:
        长度为 len(close) - 1 的 TR 数组
    """
    close = np.asarray(close, dtype=float)
    if len(close) < 2:
        return np.array([])

    prev_close = close[:-1]
    close_only = np.abs(close[1:] - prev_close)
    if high is None or low is None:
        return close_only

    h = np.asarray(high, dtype=float)[1:]
    l = np.asarray(low, dtype=float)[1:]
    full = np.maximum.reduce([h - l, np.abs(h - prev_close), np.abs(l - prev_close)])
    has_range = ~np.isnan(h) & ~np.isnan(l)
    return np.where(has_range, full, close_only)


def wilder_smooth(values: np.ndarray, period: int) -> Optional[float]:
    """
    Wilder 平滑 (alpha = 1 / period)

    以前 period 个值的简单均值作为种子，之后
    s = (s * (period - 1) + x) / period

    Returns:
        最后一个平滑值，长度不足返回 None
    """
    if len(values) < period:
        return None
    smoothed = float(np.mean(values[:period]))
    for x in values[period:]:
        smoothed = (smoothed * (period - 1) + float(x)) / period
    return smoothed


def percentile_rank(values: pd.Series) -> pd.Series:
    """
    截面百分位排名，最大值为 1.0，最小值为 0.0

    并列取平均排名: percentile = (avg_rank - 1) / (n - 1)；
    NaN 保持 NaN，只有一个有效值时其百分位为 1.0

    Args:
        values: 原始值 Series

    Returns:
        与输入同索引的百分位 Series
    """
    result = pd.Series(np.nan, index=values.index, dtype=float)
    valid = values.dropna()
    n = len(valid)
    if n == 0:
        return result
    if n == 1:
        result.loc[valid.index] = 1.0
        return result

    ranks = rankdata(valid.to_numpy(dtype=float), method='average')
    result.loc[valid.index] = (ranks - 1) / (n - 1)
    return result


def ordinal_rank(values: pd.Series, ascending: bool = False) -> pd.Series:
    """
    1 起始的序数排名 (并列按原顺序先后)，NaN 不参与排名

    Args:
        values: 原始值 Series
        ascending: True 时最小值排第 1

    Returns:
        排名 Series (Int64，缺失为 <NA>)
    """
    return values.rank(method='first', ascending=ascending).astype('Int64')


def to_float_array(values: Optional[List[Optional[float]]], length: int) -> Optional[np.ndarray]:
    """将可能含 None 的列表转换为 float 数组 (None -> NaN)，长度不符返回 None"""
    if values is None or len(values) != length:
        return None
    return np.array([np.nan if v is None else v for v in values], dtype=float)
