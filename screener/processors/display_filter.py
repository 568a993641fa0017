#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Display Filter

Turns the scored working set into the rows shown to the user:
1. Type filter (all / etf / stock)
2. Dedup filter: hide exchange-list funds that lost their dedup group
3. AUM floor: with dedup hidden rows shown, still hide tiny exchange-list funds
4. Risk-free filter: hide instruments whose annualized return trails the rate
5. Sort by a column, nulls last
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Sequence

from screener.dedup.grouper import DEFAULT_AUM_FLOOR
from screener.instrument import Instrument, InstrumentType, Provenance

logger = logging.getLogger(__name__)

TYPE_FILTERS = ('all', 'etf', 'stock')
SORT_DIRECTIONS = ('asc', 'desc')
DEFAULT_RISK_FREE_RATE = 0.035


@dataclass(frozen=True)
class DisplaySettings:
    """
    展示设置

    Attributes:
        type_filter: 'all' / 'etf' / 'stock'
        show_deduped: 是否显示去重落选的交易所列表 ETF
        filter_below_risk_free: 是否隐藏收益低于无风险利率的标的
        sort_column: 排序字段 (Instrument 属性名)
        sort_direction: 'asc' / 'desc'
        risk_free_rate: 年化无风险利率
        aum_floor: AUM 下限
    """
    type_filter: str = 'all'
    show_deduped: bool = False
    filter_below_risk_free: bool = True
    sort_column: str = 'sharpe_score'
    sort_direction: str = 'desc'
    risk_free_rate: float = DEFAULT_RISK_FREE_RATE
    aum_floor: float = DEFAULT_AUM_FLOOR

    def with_overrides(self, **kwargs) -> 'DisplaySettings':
        """返回覆盖了非 None 参数的新设置"""
        return replace(self, **{k: v for k, v in kwargs.items() if v is not None})


def _sort_value(value):
    return value.value if isinstance(value, Enum) else value


def beats_risk_free(instrument: Instrument, risk_free_rate: float) -> bool:
    """
    年化收益是否不低于无风险利率

    优先使用 r6m * 2，否则 r3m * 4；两者都缺失时保留。
    """
    if instrument.r6m is not None:
        return instrument.r6m * 2 >= risk_free_rate
    if instrument.r3m is not None:
        return instrument.r3m * 4 >= risk_free_rate
    return True


class DisplayFilter:
    """
    展示过滤器

    使用方式:
        rows = DisplayFilter(settings).apply(instruments)
    """

    def __init__(self, settings: Optional[DisplaySettings] = None):
        self.settings = settings or DisplaySettings()

    def _type_matches(self, instrument: Instrument) -> bool:
        type_filter = self.settings.type_filter
        if type_filter == 'etf':
            return instrument.asset_class in (InstrumentType.ETF, InstrumentType.ETC)
        if type_filter == 'stock':
            return instrument.is_stock
        return True

    def _visible(self, instrument: Instrument) -> bool:
        if not self._type_matches(instrument):
            return False

        from_exchange_list = instrument.source == Provenance.EXCHANGE_LIST and not instrument.is_stock
        if from_exchange_list:
            if not self.settings.show_deduped and instrument.is_dedup_winner is False:
                return False
            if self.settings.show_deduped and instrument.aum is not None \
                    and instrument.aum < self.settings.aum_floor:
                return False

        if self.settings.filter_below_risk_free:
            return beats_risk_free(instrument, self.settings.risk_free_rate)
        return True

    def sort(self, instruments: Sequence[Instrument]) -> List[Instrument]:
        """按 sort_column 排序，空值总在末尾"""
        column = self.settings.sort_column
        reverse = self.settings.sort_direction == 'desc'

        present = [i for i in instruments if getattr(i, column, None) is not None]
        missing = [i for i in instruments if getattr(i, column, None) is None]
        present.sort(key=lambda i: _sort_value(getattr(i, column)), reverse=reverse)
        return present + missing

    def apply(self, instruments: Sequence[Instrument]) -> List[Instrument]:
        """
        过滤并排序

        Args:
            instruments: 已评分的工作集

        Returns:
            List[Instrument]: 展示行
        """
        visible = [i for i in instruments if self._visible(i)]
        logger.debug("Display filter kept %d of %d instruments", len(visible), len(instruments))
        return self.sort(visible)
