#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Period Returns

Trailing simple returns over fixed trading-day horizons:
- r1m: 21 trading days
- r3m: 63 trading days
- r6m: 125 trading days

Horizons are slightly shorter than calendar months to tolerate holidays
and missing days.
"""

from typing import Dict, Optional

import pandas as pd

from screener.factors.time_series.base import TimeSeriesFactorBase
from screener.factors.utils.math_utils import period_return

# 各周期对应的交易日数
RETURN_HORIZONS = {
    'r1m': 21,
    'r3m': 63,
    'r6m': 125,
}


class ReturnCalculator(TimeSeriesFactorBase):
    """
    区间收益率

    r_h = (last - closes[n-1-h]) / closes[n-1-h]

    少于 h+1 个数据点或基准价为 0 时该周期为 None。

    Parameters:
        horizons: {字段名: 交易日数}，默认 RETURN_HORIZONS
    """

    def __init__(
        self,
        name: str = "ReturnCalculator",
        horizons: Optional[Dict[str, int]] = None,
        **kwargs
    ):
        horizons = dict(RETURN_HORIZONS if horizons is None else horizons)
        super().__init__(name=name, window=max(horizons.values()) + 1, horizons=horizons, **kwargs)

    def calculate(self, data: pd.DataFrame, **kwargs) -> Dict[str, Optional[float]]:
        """
        计算各周期收益率

        Args:
            data: 单标的 DataFrame (需含 close 列)

        Returns:
            {'r1m': ..., 'r3m': ..., 'r6m': ...}
        """
        if not self.validate_inputs(data, min_length=2):
            return {field_name: None for field_name in self.horizons}

        closes = self._closes(data)
        return {
            field_name: period_return(closes, horizon)
            for field_name, horizon in self.horizons.items()
        }
