#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Time Series Factor Base Class

Base class for single-instrument factors that compute values
independently for each instrument from its own bar history.

Input: Single instrument DataFrame with close / high / low columns
Output: Optional[float] or a dict of named values (None when data is short)
"""

from abc import abstractmethod
from typing import Any, Dict, Optional, Union

import numpy as np
import pandas as pd

from screener.factors.base import FactorBase, FactorType
from screener.factors.utils.math_utils import to_float_array
from screener.instrument import Instrument

CLOSE = 'close'
HIGH = 'high'
LOW = 'low'


def bars_frame(instrument: Instrument) -> pd.DataFrame:
    """
    将 Instrument 的 K 线序列转换为 DataFrame

    high/low 缺失或长度与 closes 不一致时整列为 NaN。

    Args:
        instrument: 标的

    Returns:
        DataFrame with columns [close, high, low]，旧 -> 新
    """
    n = len(instrument.closes)
    empty = np.full(n, np.nan)
    highs = to_float_array(instrument.highs, n)
    lows = to_float_array(instrument.lows, n)
    return pd.DataFrame({
        CLOSE: np.asarray(instrument.closes, dtype=float),
        HIGH: highs if highs is not None else empty,
        LOW: lows if lows is not None else empty,
    })


class TimeSeriesFactorBase(FactorBase):
    """
    时序因子基类

    时序因子对单一标的独立计算，不依赖其他标的数据。
    典型应用：区间收益率、年化波动率、均线、ATR。

    输入格式:
        DataFrame with columns:
        - close: 收盘价
        - high: 最高价 (可为 NaN)
        - low: 最低价 (可为 NaN)

    输出格式:
        Optional[float] 或 Dict[str, Optional[...]]
        数据不足时返回 None (或字段为 None)
    """

    factor_type: FactorType = FactorType.TIME_SERIES

    def __init__(self, name: str, window: int = 20, **kwargs):
        """
        Args:
            name: 因子名称
            window: 回看窗口
            **kwargs: 其他参数
        """
        super().__init__(name=name, window=window)

        # 存储额外参数
        for key, value in kwargs.items():
            setattr(self, key, value)
            self._params[key] = value

    @abstractmethod
    def calculate(self, data: pd.DataFrame, **kwargs) -> Union[Optional[float], Dict[str, Any]]:
        """
        计算时序因子值

        Args:
            data: 单标的历史数据 DataFrame
            **kwargs: 额外参数

        Returns:
            Optional[float] 或 Dict
        """
        pass

    def calculate_for(self, instrument: Instrument, **kwargs) -> Union[Optional[float], Dict[str, Any]]:
        """对 Instrument 直接计算"""
        return self.calculate(bars_frame(instrument), **kwargs)

    def validate_inputs(self, data: pd.DataFrame, min_length: Optional[int] = None, **kwargs) -> bool:
        """
        验证输入数据有效性

        Args:
            data: 输入数据
            min_length: 最少行数 (默认 window)

        Returns:
            bool: 数据是否有效
        """
        if data is None or data.empty:
            return False

        if CLOSE not in data.columns:
            return False

        required = self.window if min_length is None else min_length
        return len(data) >= required

    def _closes(self, data: pd.DataFrame) -> np.ndarray:
        """收盘价数组"""
        return data[CLOSE].to_numpy(dtype=float)


# Alias
TimeSeriesFactor = TimeSeriesFactorBase
