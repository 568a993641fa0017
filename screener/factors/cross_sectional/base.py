#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Cross-Sectional Factor Base Class

Base class for factors that score each instrument relative to the whole
working set (XS_GLOBAL):
- Input: DataFrame indexed by ISIN, one row per instrument
- Output: pd.Series / pd.DataFrame indexed by ISIN
"""

from abc import abstractmethod
from typing import Sequence, Union

import pandas as pd

from screener.factors.base import FactorBase, FactorType
from screener.factors.utils.math_utils import ordinal_rank
from screener.instrument import Instrument

# 截面输入列
UNIVERSE_COLUMNS = (
    'asset_class', 'pe', 'pb', 'ebitda', 'enterprise_value', 'return_on_assets',
)


def universe_frame(instruments: Sequence[Instrument]) -> pd.DataFrame:
    """
    构建截面输入 DataFrame

    Args:
        instruments: 工作集

    Returns:
        以 ISIN 为索引的 DataFrame，数值列缺失为 NaN
    """
    rows = []
    for inst in instruments:
        row = {'isin': inst.isin, 'asset_class': inst.asset_class}
        for col in UNIVERSE_COLUMNS[1:]:
            value = getattr(inst, col)
            row[col] = float('nan') if value is None else float(value)
        rows.append(row)
    frame = pd.DataFrame(rows, columns=('isin',) + UNIVERSE_COLUMNS)
    return frame.set_index('isin')


class CrossSectionalFactorBase(FactorBase):
    """
    全局截面因子基类 (XS_GLOBAL)

    在工作集内对标的排名或评分。
    典型应用：价值评分 (盈利收益率、账面收益率排名)。

    输入格式:
        DataFrame (index: ISIN, columns: UNIVERSE_COLUMNS)

    输出格式:
        pd.Series / pd.DataFrame (index: ISIN)
    """

    factor_type: FactorType = FactorType.XS_GLOBAL

    def __init__(self, name: str, window: int = 1, **kwargs):
        """
        Args:
            name: 因子名称
            window: 回看窗口 (截面因子通常为 1)
            **kwargs: 其他参数
        """
        super().__init__(name=name, window=window)

        for key, value in kwargs.items():
            setattr(self, key, value)
            self._params[key] = value

    @abstractmethod
    def calculate(self, universe: pd.DataFrame, **kwargs) -> Union[pd.Series, pd.DataFrame]:
        """
        计算全局截面因子值

        Args:
            universe: 截面输入 DataFrame
            **kwargs: 额外参数

        Returns:
            以 ISIN 为索引的结果
        """
        pass

    def calculate_for(self, instruments: Sequence[Instrument], **kwargs) -> Union[pd.Series, pd.DataFrame]:
        """对 Instrument 列表直接计算"""
        return self.calculate(universe_frame(instruments), **kwargs)

    def validate_inputs(self, universe: pd.DataFrame, **kwargs) -> bool:
        """验证输入数据"""
        return universe is not None and not universe.empty

    def _rank_desc(self, series: pd.Series) -> pd.Series:
        """
        1 起始降序排名 (最大值排第 1)，NaN 不参与

        Args:
            series: 原始因子值

        Returns:
            pd.Series: 排名 (Int64)
        """
        return ordinal_rank(series.dropna(), ascending=False)


# Alias
CrossSectionalFactor = CrossSectionalFactorBase
