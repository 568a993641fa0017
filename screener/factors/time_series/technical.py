#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Technical Indicators

Per-instrument trend and stop-level indicators:
- Simple moving averages MA(10/50/100/200) and price-above-MA flags
- ATR(20) with Wilder smoothing, seeded by the SMA of the first 20 TRs
- Selling threshold: last close - multiplier x ATR(20)

True range falls back to |close - prev_close| on bars missing high or low.
"""

from typing import Any, Dict, Optional, Sequence

import numpy as np
import pandas as pd

from screener.factors.time_series.base import HIGH, LOW, TimeSeriesFactorBase
from screener.factors.utils.math_utils import moving_average, true_range, wilder_smooth
from screener.instrument import MA_PERIODS

DEFAULT_ATR_PERIOD = 20
DEFAULT_ATR_MULTIPLIER = 4.0


def trailing_mean(closes: np.ndarray, period: int) -> Optional[float]:
    """最近 period 个收盘价的均值，不足返回 None"""
    ma = moving_average(closes[-period:], period)
    if len(ma) == 0:
        return None
    return float(ma[-1])


def average_true_range(
    closes: np.ndarray,
    highs: Optional[np.ndarray] = None,
    lows: Optional[np.ndarray] = None,
    period: int = DEFAULT_ATR_PERIOD
) -> Optional[float]:
    """
    ATR (Wilder)

    Args:
        closes: 收盘价
        highs: 最高价 (可含 NaN)
        lows: 最低价 (可含 NaN)
        period: ATR 周期

    Returns:
        最新 ATR，少于 period + 1 根 K 线返回 None
    """
    if len(closes) < period + 1:
        return None
    return wilder_smooth(true_range(closes, highs, lows), period)


def selling_threshold(
    last_close: Optional[float],
    atr: Optional[float],
    multiplier: float = DEFAULT_ATR_MULTIPLIER
) -> Optional[float]:
    """卖出阈值 = last - multiplier * ATR"""
    if last_close is None or atr is None:
        return None
    return float(last_close - multiplier * atr)


class TechnicalIndicators(TimeSeriesFactorBase):
    """
    技术指标 (均线 + ATR 止损位)

    Parameters:
        ma_periods: 均线周期，默认 (10, 50, 100, 200)
        atr_period: ATR 周期，默认 20
        atr_multiplier: 卖出阈值的 ATR 倍数，默认 4
    """

    def __init__(
        self,
        name: str = "TechnicalIndicators",
        ma_periods: Sequence[int] = MA_PERIODS,
        atr_period: int = DEFAULT_ATR_PERIOD,
        atr_multiplier: float = DEFAULT_ATR_MULTIPLIER,
        **kwargs
    ):
        super().__init__(
            name=name,
            window=atr_period + 1,
            ma_periods=tuple(ma_periods),
            atr_period=atr_period,
            atr_multiplier=atr_multiplier,
            **kwargs
        )

    def calculate(self, data: pd.DataFrame, **kwargs) -> Dict[str, Any]:
        """
        计算均线、ATR 与卖出阈值

        Args:
            data: 单标的 DataFrame (close / high / low)

        Returns:
            {'ma10': .., 'above_ma10': .., ..., 'atr20': .., 'selling_threshold': ..}
        """
        result: Dict[str, Any] = {}
        has_data = self.validate_inputs(data, min_length=1)
        closes = self._closes(data) if has_data else np.array([])
        last = float(closes[-1]) if len(closes) else None

        for period in self.ma_periods:
            ma = trailing_mean(closes, period)
            result[f'ma{period}'] = ma
            result[f'above_ma{period}'] = None if ma is None else bool(last > ma)

        atr = None
        if has_data:
            highs = data[HIGH].to_numpy(dtype=float) if HIGH in data.columns else None
            lows = data[LOW].to_numpy(dtype=float) if LOW in data.columns else None
            atr = average_true_range(closes, highs, lows, self.atr_period)

        result['atr20'] = atr
        result['selling_threshold'] = selling_threshold(last, atr, self.atr_multiplier)
        return result
