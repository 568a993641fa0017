#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Score Combiner

Combines per-instrument returns and volatility into composite scores:
- MomentumScorer: weighted mean of r1m / r3m / r6m, weights renormalized
  over the periods that are available
- SharpeScorer: momentum / volatility
- CombinedScorer: mean of the cross-sectional percentiles of momentum
  and Sharpe, or whichever one exists
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from screener.instrument import Instrument, MomentumWeights
from screener.processors.normalizer import SignalNormalizer


class MomentumScorer:
    """
    动量评分

    score = Σ(r_p * w_p) / Σ(w_p)，仅对非空周期求和

    使用方式:
        scorer = MomentumScorer(MomentumWeights(0.2, 0.3, 0.5))
        scorer.score(r1m=0.02, r3m=None, r6m=0.10)
    """

    def __init__(self, weights: Optional[MomentumWeights] = None):
        self.weights = weights or MomentumWeights()

    def score(
        self,
        r1m: Optional[float],
        r3m: Optional[float],
        r6m: Optional[float]
    ) -> Optional[float]:
        """
        Args:
            r1m, r3m, r6m: 各周期收益率 (可为 None)

        Returns:
            动量分数；无可用周期或可用权重之和为 0 时为 None
        """
        available = [
            (value, weight)
            for value, weight in zip((r1m, r3m, r6m), self.weights.as_tuple())
            if value is not None
        ]
        if not available:
            return None

        total_weight = sum(weight for _, weight in available)
        if total_weight == 0:
            return None

        return sum(value * (weight / total_weight) for value, weight in available)


class SharpeScorer:
    """风险调整动量 = momentum / volatility"""

    @staticmethod
    def score(momentum: Optional[float], volatility: Optional[float]) -> Optional[float]:
        if momentum is None or volatility is None or volatility == 0:
            return None
        return momentum / volatility


@dataclass
class CombinedScore:
    """组合分数及其构成"""
    score: Optional[float]
    momentum_percentile: Optional[float] = None
    sharpe_percentile: Optional[float] = None


class CombinedScorer:
    """
    组合评分

    在整个工作集内将动量与 Sharpe 转换为百分位 (并列取平均)，
    两者都有时取均值，否则取存在的一个，均缺失为 None。

    使用方式:
        combined = CombinedScorer().score_all(instruments)
        # {isin: CombinedScore}
    """

    def __init__(self, normalizer: Optional[SignalNormalizer] = None):
        self.normalizer = normalizer or SignalNormalizer()

    @staticmethod
    def combine(momentum_pct: Optional[float], sharpe_pct: Optional[float]) -> Optional[float]:
        parts: List[float] = [p for p in (momentum_pct, sharpe_pct) if p is not None]
        if not parts:
            return None
        return sum(parts) / len(parts)

    def score_all(self, instruments: Sequence[Instrument]) -> Dict[str, CombinedScore]:
        """
        Args:
            instruments: 已计算 momentum_score / sharpe_score 的工作集

        Returns:
            {isin: CombinedScore}
        """
        momentum_pct = self.normalizer.normalize({i.isin: i.momentum_score for i in instruments})
        sharpe_pct = self.normalizer.normalize({i.isin: i.sharpe_score for i in instruments})

        result: Dict[str, CombinedScore] = {}
        for inst in instruments:
            m = momentum_pct.get(inst.isin)
            s = sharpe_pct.get(inst.isin)
            result[inst.isin] = CombinedScore(score=self.combine(m, s), momentum_percentile=m, sharpe_percentile=s)
        return result
