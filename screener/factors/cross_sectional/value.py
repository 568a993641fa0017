#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Value Scorer

截面价值评分，分数越低越便宜。

包含:
- ETF/ETC 模型 ('etf'): 盈利收益率 1/PE 与账面收益率 1/PB 的降序排名之和；
  只有一个排名时取其两倍
- 股票模型 ('magic-formula'): EBITDA/EV 与 ROA 的降序排名之和；
  任一缺失则为 None

ETF 与股票分别在各自群体内排名。
"""

import numpy as np
import pandas as pd

from screener.factors.cross_sectional.base import CrossSectionalFactorBase
from screener.instrument import InstrumentType, ValueModel

SCORE = 'value_score'
MODEL = 'value_score_model'


def _positive_inverse(series: pd.Series) -> pd.Series:
    """1/x，仅保留 x > 0"""
    return 1.0 / series.where(series > 0)


class ValueScorer(CrossSectionalFactorBase):
    """
    价值评分因子

    Parameters:
        single_rank_multiplier: ETF 只有一个排名时的放大倍数 (默认 2)
    """

    def __init__(
        self,
        name: str = "ValueScorer",
        single_rank_multiplier: int = 2,
        **kwargs
    ):
        super().__init__(name=name, single_rank_multiplier=single_rank_multiplier, **kwargs)

    def calculate(self, universe: pd.DataFrame, **kwargs) -> pd.DataFrame:
        """
        计算价值评分

        Args:
            universe: 截面输入 (index: ISIN)

        Returns:
            DataFrame(index: ISIN, columns: [value_score, value_score_model])，
            未评分为 NaN / None
        """
        result = pd.DataFrame(
            {SCORE: np.nan, MODEL: None},
            index=universe.index if universe is not None else pd.Index([], name='isin'),
        )
        if not self.validate_inputs(universe):
            return result

        funds = universe[universe['asset_class'].map(lambda t: t.is_fund)]
        stocks = universe[universe['asset_class'] == InstrumentType.STOCK]

        etf_scores = self._etf_scores(funds)
        result.loc[etf_scores.index, SCORE] = etf_scores
        result.loc[etf_scores.index, MODEL] = ValueModel.ETF

        stock_scores = self._magic_formula_scores(stocks)
        result.loc[stock_scores.index, SCORE] = stock_scores
        result.loc[stock_scores.index, MODEL] = ValueModel.MAGIC_FORMULA

        return result

    def _etf_scores(self, funds: pd.DataFrame) -> pd.Series:
        """ETF/ETC: EY 排名 + BY 排名，单一排名乘以倍数"""
        if funds.empty:
            return pd.Series(dtype=float)

        ey_rank = self._rank_desc(_positive_inverse(funds['pe'])).reindex(funds.index)
        by_rank = self._rank_desc(_positive_inverse(funds['pb'])).reindex(funds.index)

        both = ey_rank.notna() & by_rank.notna()
        only_ey = ey_rank.notna() & by_rank.isna()
        only_by = ey_rank.isna() & by_rank.notna()

        scores = pd.Series(np.nan, index=funds.index, dtype=float)
        scores[both] = (ey_rank[both] + by_rank[both]).astype(float)
        scores[only_ey] = (ey_rank[only_ey] * self.single_rank_multiplier).astype(float)
        scores[only_by] = (by_rank[only_by] * self.single_rank_multiplier).astype(float)
        return scores.dropna()

    def _magic_formula_scores(self, stocks: pd.DataFrame) -> pd.Series:
        """股票: EBITDA/EV 排名 + ROA 排名，任一缺失为 None"""
        if stocks.empty:
            return pd.Series(dtype=float)

        ev = stocks['enterprise_value'].where(stocks['enterprise_value'] > 0)
        earnings_yield = stocks['ebitda'] / ev
        ey_rank = self._rank_desc(earnings_yield).reindex(stocks.index)
        roa_rank = self._rank_desc(stocks['return_on_assets']).reindex(stocks.index)

        both = ey_rank.notna() & roa_rank.notna()
        return (ey_rank[both] + roa_rank[both]).astype(float)
