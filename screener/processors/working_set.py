#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Working Set

Holds the current instruments together with the scoring settings. Every
mutation produces a fresh snapshot. Changes to membership or fund data
re-run exposure dedup, and every change re-runs the scoring pipeline.
"""

import logging
from dataclasses import replace
from typing import Iterable, List, Optional, Sequence

from screener.data.records import FundRecord, PriceRecord, merge_fund_records, merge_price_records
from screener.dedup.grouper import DedupGrouper
from screener.instrument import Instrument, MomentumWeights, Provenance
from screener.processors.config_loader import (
    ScreenerConfigLoader,
    validate_atr_multiplier,
    validate_aum_floor,
    validate_weights,
)
from screener.processors.display_filter import DisplayFilter, DisplaySettings
from screener.processors.factor_engine import ScoringPipeline

logger = logging.getLogger(__name__)


class WorkingSet:
    """
    工作集 (按 ISIN 唯一)

    使用方式:
        ws = WorkingSet(config)
        ws.add(load_instruments('instruments.json'))
        ws.set_aum_floor(5e7)
        ws.set_weights(MomentumWeights(0.2, 0.3, 0.5))
        rows = ws.rows()
    """

    def __init__(
        self,
        config: ScreenerConfigLoader = None,
        pipeline: ScoringPipeline = None,
        instruments: Optional[Sequence[Instrument]] = None
    ):
        """
        Args:
            config: 配置加载器
            pipeline: 评分流水线 (默认按配置创建)
            instruments: 初始对象
        """
        if config is None:
            config = ScreenerConfigLoader()
            config.load()

        self.config = config
        self.pipeline = pipeline or ScoringPipeline(config)

        self.weights: MomentumWeights = config.get_momentum_weights()
        self.atr_multiplier: float = config.get_atr_multiplier()
        dedup = config.get_dedup_settings()
        self.aum_floor: float = dedup['aum_floor']
        self.preferred_currency: str = dedup['preferred_currency']
        self.risk_free_rate: float = config.get_risk_free_rate()

        self._instruments: List[Instrument] = []
        if instruments:
            self.add(instruments)

    # ========== Access ==========

    @property
    def instruments(self) -> List[Instrument]:
        """当前快照 (副本列表)"""
        return list(self._instruments)

    def get(self, isin: str) -> Optional[Instrument]:
        for inst in self._instruments:
            if inst.isin == isin:
                return inst
        return None

    def __len__(self) -> int:
        return len(self._instruments)

    def __contains__(self, isin: str) -> bool:
        return self.get(isin) is not None

    # ========== Mutations ==========

    def _rescore(self, instruments: Sequence[Instrument]) -> None:
        self._instruments = self.pipeline.recalculate_all(
            instruments,
            weights=self.weights,
            atr_multiplier=self.atr_multiplier,
        )

    def add(self, instruments: Iterable[Instrument]) -> int:
        """
        添加对象，已存在的 ISIN 被跳过

        Returns:
            int: 实际添加的数量
        """
        known = {inst.isin for inst in self._instruments}
        added = []
        for inst in instruments:
            if inst.isin in known:
                continue
            known.add(inst.isin)
            added.append(inst)

        if added:
            logger.info("Added %d instruments", len(added))
            self._regroup(self._instruments + added)
        return len(added)

    def update(self, isin: str, **changes) -> bool:
        """
        合并单个对象的字段更新

        Returns:
            bool: ISIN 是否存在
        """
        if isin not in self:
            return False
        self._regroup([replace(i, **changes) if i.isin == isin else i for i in self._instruments])
        return True

    def remove(self, isin: str) -> bool:
        """按 ISIN 删除"""
        if isin not in self:
            return False
        self._regroup([i for i in self._instruments if i.isin != isin])
        return True

    def clear_exchange_list(self) -> int:
        """删除所有来自交易所列表的对象"""
        kept = [i for i in self._instruments if i.source != Provenance.EXCHANGE_LIST]
        removed = len(self._instruments) - len(kept)
        if removed:
            logger.info("Cleared %d exchange-list instruments", removed)
            self._regroup(kept)
        return removed

    def merge_prices(self, records: Iterable[PriceRecord]) -> None:
        """合并价格/基本面记录并重新评分"""
        self._rescore(merge_price_records(self._instruments, records))

    def merge_funds(self, records: Iterable[FundRecord]) -> None:
        """合并 AUM/TER 记录，重新去重并评分"""
        self._regroup(merge_fund_records(self._instruments, records))

    # ========== Settings ==========

    def set_weights(self, weights: MomentumWeights) -> None:
        """设置动量权重 (负权重抛出 ConfigurationError)"""
        self.weights = validate_weights(weights.w1m, weights.w3m, weights.w6m)
        self._rescore(self._instruments)

    def set_atr_multiplier(self, multiplier: float) -> None:
        self.atr_multiplier = validate_atr_multiplier(multiplier)
        self._rescore(self._instruments)

    def set_aum_floor(self, aum_floor: float) -> None:
        """设置 AUM 下限并重新去重"""
        self.aum_floor = validate_aum_floor(aum_floor)
        self.run_dedup()

    def set_risk_free_rate(self, rate: float) -> None:
        """仅影响展示过滤"""
        self.risk_free_rate = float(rate)

    # ========== Dedup ==========

    def _regroup(self, instruments: Sequence[Instrument]) -> None:
        """对候选集重新去重后再评分"""
        grouper = DedupGrouper(aum_floor=self.aum_floor, preferred_currency=self.preferred_currency)
        funds = [i for i in instruments if i.asset_class.is_fund]
        deduped = {i.isin: i for i in grouper.run(funds)}

        result = []
        for inst in instruments:
            if inst.isin in deduped:
                result.append(deduped[inst.isin])
            else:
                result.append(replace(inst, dedup_group=None, is_dedup_winner=None, dedup_candidates=None))
        self._rescore(result)

    def run_dedup(self) -> None:
        """
        对 ETF/ETC 运行去重

        股票不参与去重，其去重字段保持为空。
        成员或 AUM 变化时 add/update/remove/merge_funds 会自动重新去重。
        """
        self._regroup(self._instruments)

    # ========== Display ==========

    def display_settings(self, **overrides) -> DisplaySettings:
        """配置中的展示设置，叠加当前 AUM 下限、无风险利率与覆盖参数"""
        settings = self.config.get_display_settings()
        settings = replace(settings, aum_floor=self.aum_floor, risk_free_rate=self.risk_free_rate)
        return settings.with_overrides(**overrides)

    def rows(self, settings: Optional[DisplaySettings] = None) -> List[Instrument]:
        """展示行"""
        return DisplayFilter(settings or self.display_settings()).apply(self._instruments)

    def __repr__(self) -> str:
        return f"WorkingSet(size={len(self._instruments)}, weights={self.weights.as_tuple()})"
