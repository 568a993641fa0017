#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Scoring Pipeline

Pure orchestration layer for scoring the working set:
- No factor logic (factors live in screener.factors)
- Instantiates factors through the registry with configured params
- Runs per-instrument factors, then cross-sectional scorers, then ranks

Every pass starts from a cleared copy of each instrument, so repeated
passes over the same input give identical output.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from screener.factors.cross_sectional.value import MODEL, SCORE
from screener.factors.registry import FactorRegistry, default_registry
from screener.factors.time_series.base import bars_frame
from screener.instrument import Instrument, MomentumWeights, clear_scores
from screener.processors.combiner import CombinedScorer, MomentumScorer, SharpeScorer
from screener.processors.config_loader import ScreenerConfigLoader, validate_atr_multiplier
from screener.processors.ranker import Ranker

logger = logging.getLogger(__name__)


@dataclass
class ScoringSummary:
    """单次评分的统计"""
    total: int = 0
    with_prices: int = 0
    with_momentum: int = 0
    with_sharpe: int = 0
    with_value: int = 0


class ScoringPipeline:
    """
    评分流水线

    流程:
    1. 清空计算字段
    2. 时序因子: 收益率、波动率、均线、ATR、卖出阈值
    3. 动量分数、Sharpe 分数、盈利收益率
    4. 截面: 组合分数、价值分数
    5. 排名

    使用方式:
        pipeline = ScoringPipeline(config)
        scored = pipeline.recalculate_all(instruments, weights=MomentumWeights(0.2, 0.3, 0.5))
    """

    def __init__(
        self,
        config: ScreenerConfigLoader = None,
        registry: FactorRegistry = None,
        combined_scorer: CombinedScorer = None,
        ranker: Ranker = None
    ):
        """
        Args:
            config: 配置加载器
            registry: 因子注册表
            combined_scorer: 组合评分器
            ranker: 排名器
        """
        if config is None:
            config = ScreenerConfigLoader()
            config.load()

        self.config = config
        self.registry = registry or default_registry()
        self.combined_scorer = combined_scorer or CombinedScorer()
        self.ranker = ranker or Ranker()

        self.weights = config.get_momentum_weights()
        self.atr_multiplier = config.get_atr_multiplier()
        self.last_summary: Optional[ScoringSummary] = None

    def _factor(self, name: str, **overrides):
        params = {**self.config.get_factor_params(name), **overrides}
        return self.registry.get_or_create(name, **params)

    def recalculate_all(
        self,
        instruments: Sequence[Instrument],
        weights: Optional[MomentumWeights] = None,
        atr_multiplier: Optional[float] = None
    ) -> List[Instrument]:
        """
        重新计算所有分数与排名

        Args:
            instruments: 工作集 (不会被修改)
            weights: 动量权重 (None 使用配置)
            atr_multiplier: ATR 倍数 (None 使用配置)

        Returns:
            List[Instrument]: 新的已评分对象，顺序与输入一致
        """
        weights = weights or self.weights
        multiplier = self.atr_multiplier if atr_multiplier is None else validate_atr_multiplier(atr_multiplier)

        returns_factor = self._factor('ReturnCalculator')
        vol_factor = self._factor('VolatilityCalculator')
        tech_factor = self._factor('TechnicalIndicators', atr_multiplier=multiplier)
        value_factor = self._factor('ValueScorer')
        momentum_scorer = MomentumScorer(weights)

        summary = ScoringSummary(total=len(instruments))
        scored: List[Instrument] = []

        for inst in instruments:
            updates: Dict[str, Any] = {}
            fresh = clear_scores(inst)

            if fresh.closes:
                summary.with_prices += 1
                data = bars_frame(fresh)

                updates.update(returns_factor.calculate(data))
                updates['volatility'] = vol_factor.calculate(data)
                updates['momentum_score'] = momentum_scorer.score(updates['r1m'], updates['r3m'], updates['r6m'])
                updates['sharpe_score'] = SharpeScorer.score(updates['momentum_score'], updates['volatility'])
                updates.update(tech_factor.calculate(data))

            if fresh.pe is not None and fresh.pe > 0:
                updates['earnings_yield'] = 1.0 / fresh.pe

            scored.append(replace(fresh, **updates))

        combined = self.combined_scorer.score_all(scored)
        values = value_factor.calculate_for(scored)

        result: List[Instrument] = []
        for inst in scored:
            value_score = None
            value_model = None
            if inst.isin in values.index and not pd.isna(values.at[inst.isin, MODEL]):
                value_score = float(values.at[inst.isin, SCORE])
                value_model = values.at[inst.isin, MODEL]

            result.append(replace(
                inst,
                combined_score=combined[inst.isin].score,
                value_score=value_score,
                value_score_model=value_model,
            ))

        result = self.ranker.apply(result)

        summary.with_momentum = sum(1 for i in result if i.momentum_score is not None)
        summary.with_sharpe = sum(1 for i in result if i.sharpe_score is not None)
        summary.with_value = sum(1 for i in result if i.value_score is not None)
        self.last_summary = summary

        logger.info(
            "Scored %d instruments (%d with prices, %d momentum, %d sharpe, %d value)",
            summary.total, summary.with_prices, summary.with_momentum,
            summary.with_sharpe, summary.with_value
        )
        return result
