#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Annualized Volatility

Sample standard deviation of trailing daily simple returns, annualized
with sqrt(252).

Constraints:
- at least 22 closes (one month)
- only the trailing 127 closes are used (six months of returns)
- returns are skipped where the previous close is not positive
- at least 10 daily returns
"""

from typing import Optional

import pandas as pd

from screener.factors.time_series.base import TimeSeriesFactorBase
from screener.factors.utils.math_utils import (
    TRADING_DAYS_PER_YEAR,
    annualized_volatility,
    simple_returns,
)


class VolatilityCalculator(TimeSeriesFactorBase):
    """
    年化波动率

    Parameters:
        window: 使用的最近收盘价数量 (默认 127)
        min_points: 最少收盘价数量 (默认 22)
        min_returns: 最少日收益率数量 (默认 10)
    """

    def __init__(
        self,
        name: str = "VolatilityCalculator",
        window: int = 127,
        min_points: int = 22,
        min_returns: int = 10,
        **kwargs
    ):
        super().__init__(
            name=name,
            window=window,
            min_points=min_points,
            min_returns=min_returns,
            **kwargs
        )

    def calculate(self, data: pd.DataFrame, **kwargs) -> Optional[float]:
        """
        计算年化波动率

        Args:
            data: 单标的 DataFrame (需含 close 列)

        Returns:
            年化波动率，数据不足返回 None
        """
        if not self.validate_inputs(data, min_length=self.min_points):
            return None

        closes = self._closes(data)[-self.window:]
        returns = simple_returns(closes)
        if len(returns) < self.min_returns:
            return None

        return annualized_volatility(returns, TRADING_DAYS_PER_YEAR)
