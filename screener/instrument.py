#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Instrument Data Model

Defines the record that flows through both engines:
- Identity and provenance (ISIN, local code, ticker, asset class)
- Market data (close/high/low series, oldest first)
- Fundamentals and fund data (P/E, P/B, EBITDA, EV, ROA, AUM, TER)
- Dedup annotations and computed score fields

Engines never mutate an Instrument in place; they return updated copies
built with dataclasses.replace().
"""

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, Dict, List, Optional


class InstrumentType(Enum):
    """资产类别标签"""
    ETF = "ETF"
    ETC = "ETC"
    ETN = "ETN"
    STOCK = "Stock"
    UNKNOWN = "Unknown"

    @property
    def is_fund(self) -> bool:
        """ETF/ETC 参与去重与 ETF 价值模型"""
        return self in (InstrumentType.ETF, InstrumentType.ETC)


class Provenance(Enum):
    """记录来源"""
    MANUAL = "manual"
    EXCHANGE_LIST = "exchange-list"


class ValueModel(Enum):
    """价值评分模型"""
    ETF = "etf"
    MAGIC_FORMULA = "magic-formula"


@dataclass(frozen=True)
class MomentumWeights:
    """动量权重 (1M / 3M / 6M)，在可用周期上重新归一化"""
    w1m: float = 1 / 3
    w3m: float = 1 / 3
    w6m: float = 1 / 3

    def as_tuple(self) -> tuple:
        return (self.w1m, self.w3m, self.w6m)


# 均线周期
MA_PERIODS = (10, 50, 100, 200)


@dataclass
class Instrument:
    """
    筛选对象 (ETF / ETC / 股票)

    ISIN 为主键。计算字段在每次评分时从头重算，
    去重字段在每次去重时重新赋值。
    """

    # Identity
    isin: str
    local_code: Optional[str] = None
    mnemonic: Optional[str] = None
    ticker: str = ""
    asset_class: InstrumentType = InstrumentType.UNKNOWN
    source: Provenance = Provenance.MANUAL
    currency: Optional[str] = None
    exchange_group: Optional[str] = None

    # Names
    exchange_name: Optional[str] = None
    long_name: Optional[str] = None
    display_name: str = ""

    # Market data (oldest first)
    closes: List[float] = field(default_factory=list)
    highs: Optional[List[Optional[float]]] = None
    lows: Optional[List[Optional[float]]] = None
    timestamps: List[int] = field(default_factory=list)
    price_error: Optional[str] = None

    # Fundamentals
    pe: Optional[float] = None
    pb: Optional[float] = None
    ebitda: Optional[float] = None
    enterprise_value: Optional[float] = None
    return_on_assets: Optional[float] = None

    # Fund data
    aum: Optional[float] = None
    ter: Optional[float] = None

    # Dedup
    dedup_group: Optional[str] = None
    is_dedup_winner: Optional[bool] = None
    dedup_candidates: Optional[List[str]] = None

    # Returns / risk
    r1m: Optional[float] = None
    r3m: Optional[float] = None
    r6m: Optional[float] = None
    volatility: Optional[float] = None

    # Scores
    momentum_score: Optional[float] = None
    sharpe_score: Optional[float] = None
    combined_score: Optional[float] = None
    value_score: Optional[float] = None
    value_score_model: Optional[ValueModel] = None
    earnings_yield: Optional[float] = None

    # Moving averages
    ma10: Optional[float] = None
    ma50: Optional[float] = None
    ma100: Optional[float] = None
    ma200: Optional[float] = None
    above_ma10: Optional[bool] = None
    above_ma50: Optional[bool] = None
    above_ma100: Optional[bool] = None
    above_ma200: Optional[bool] = None

    # ATR & selling threshold
    atr20: Optional[float] = None
    selling_threshold: Optional[float] = None

    # Ranks
    momentum_rank: Optional[int] = None
    sharpe_rank: Optional[int] = None
    combined_rank: Optional[int] = None
    value_rank: Optional[int] = None

    @property
    def name(self) -> str:
        """用于分类的名称: long_name > display_name > exchange_name"""
        return self.long_name or self.display_name or self.exchange_name or ""

    @property
    def is_stock(self) -> bool:
        return self.asset_class == InstrumentType.STOCK

    @property
    def last_close(self) -> Optional[float]:
        return self.closes[-1] if self.closes else None

    def to_dict(self) -> Dict[str, Any]:
        """转换为可序列化字典 (枚举输出其值)"""
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Enum):
                value = value.value
            elif isinstance(value, list):
                value = list(value)
            result[f.name] = value
        return result


# 评分流程每次重算的字段
SCORE_FIELDS = (
    'r1m', 'r3m', 'r6m', 'volatility',
    'momentum_score', 'sharpe_score', 'combined_score',
    'value_score', 'value_score_model', 'earnings_yield',
    'ma10', 'ma50', 'ma100', 'ma200',
    'above_ma10', 'above_ma50', 'above_ma100', 'above_ma200',
    'atr20', 'selling_threshold',
    'momentum_rank', 'sharpe_rank', 'combined_rank', 'value_rank',
)


def clear_scores(instrument: Instrument) -> Instrument:
    """返回清空所有计算字段的副本"""
    return replace(instrument, **{name: None for name in SCORE_FIELDS})
