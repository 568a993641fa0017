#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Exposure Classifier

Maps a normalized fund name to a structured ExposureVector:
- COMMODITY: commodity vocabulary hit or ETC tag (short-circuits)
- BOND: any bond signal; type defaults to AGGREGATE
- EQUITY: default path with region / subregion / factors / sector

ESG and currency-hedge overlays apply to bond and equity vectors.
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional

from screener.dedup.normalizer import NameNormalizer
from screener.dedup.tokenizer import AliasTable, Tokens, signal_table
from screener.dedup.vocabulary import (
    BOND_DURATION_TABLE,
    BOND_SIGNALS,
    BOND_TYPE_TABLE,
    COMMODITY_BASKET_SIGNALS,
    COMMODITY_MODIFIER_TABLE,
    COMMODITY_TABLE,
    DEFAULT_BOND_TYPE,
    ESG_SIGNALS,
    FACTOR_TABLE,
    HEDGE_SIGNALS,
    REGION_TABLE,
    SECTOR_TABLE,
    SUBREGION_TABLE,
)
from screener.instrument import Instrument, InstrumentType


class ExposureClass(Enum):
    """暴露大类"""
    EQUITY = "EQUITY"
    BOND = "BOND"
    COMMODITY = "COMMODITY"


@dataclass(frozen=True)
class ExposureVector:
    """
    结构化暴露指纹 (仅用于生成分组键，不存储在 Instrument 上)

    Attributes:
        asset_class: EQUITY / BOND / COMMODITY
        region, subregion: 地区与子地区
        factors: 因子倾斜集合 (可为空)
        sector: 行业；商品路径下为具体商品，一篮子商品为 None
        bond_type, bond_duration: 仅债券路径
        esg, hedged: 叠加标记
        modifiers: 商品修饰词 (HEDGED/2X/SHORT/MINERS)，仅作信息用途
    """
    asset_class: ExposureClass
    region: Optional[str] = None
    subregion: Optional[str] = None
    factors: FrozenSet[str] = frozenset()
    sector: Optional[str] = None
    bond_type: Optional[str] = None
    bond_duration: Optional[str] = None
    esg: bool = False
    hedged: bool = False
    modifiers: FrozenSet[str] = frozenset()


class ExposureClassifier:
    """
    暴露分类器

    使用方式:
        classifier = ExposureClassifier()
        vector = classifier.classify_name('iShares Core MSCI World UCITS ETF')
        # vector.region -> 'WORLD'
    """

    def __init__(self, normalizer: Optional[NameNormalizer] = None):
        self.normalizer = normalizer or NameNormalizer()

        self._regions = AliasTable(REGION_TABLE)
        self._subregions = AliasTable(SUBREGION_TABLE)
        self._factors = AliasTable(FACTOR_TABLE)
        self._sectors = AliasTable(SECTOR_TABLE)
        self._bond_types = AliasTable(BOND_TYPE_TABLE)
        self._durations = AliasTable(BOND_DURATION_TABLE)
        self._commodities = AliasTable(COMMODITY_TABLE)
        self._modifiers = AliasTable(COMMODITY_MODIFIER_TABLE)
        self._baskets = signal_table(COMMODITY_BASKET_SIGNALS)
        self._bond_signals = signal_table(BOND_SIGNALS)
        self._esg = signal_table(ESG_SIGNALS)
        self._hedge = signal_table(HEDGE_SIGNALS)

    def classify(self, instrument: Instrument) -> ExposureVector:
        """
        对 Instrument 分类 (名称优先 long_name，其次 display_name)

        Args:
            instrument: 待分类对象

        Returns:
            ExposureVector
        """
        is_etc = instrument.asset_class == InstrumentType.ETC
        return self.classify_name(instrument.name, is_etc=is_etc)

    def classify_name(self, name: Optional[str], is_etc: bool = False) -> ExposureVector:
        """对原始名称分类"""
        tokens = self.normalizer.normalize(name).tokens
        return self.classify_tokens(tokens, is_etc=is_etc)

    def classify_tokens(self, tokens: Tokens, is_etc: bool = False) -> ExposureVector:
        """对已标准化的 token 分类"""
        commodity = self._commodities.first(tokens)
        if commodity is not None or is_etc or self._baskets.any(tokens):
            modifiers = frozenset(self._modifiers.all(tokens))
            return ExposureVector(
                asset_class=ExposureClass.COMMODITY,
                sector=commodity,
                hedged='HEDGED' in modifiers,
                modifiers=modifiers,
            )

        esg = self._esg.any(tokens)
        hedged = self._hedge.any(tokens)

        if self._bond_signals.any(tokens):
            return ExposureVector(
                asset_class=ExposureClass.BOND,
                region=self._regions.first(tokens),
                subregion=self._subregions.first(tokens),
                bond_type=self._bond_types.first(tokens) or DEFAULT_BOND_TYPE,
                bond_duration=self._durations.first(tokens),
                esg=esg,
                hedged=hedged,
            )

        return ExposureVector(
            asset_class=ExposureClass.EQUITY,
            region=self._regions.first(tokens),
            subregion=self._subregions.first(tokens),
            factors=frozenset(self._factors.all(tokens)),
            sector=self._sectors.first(tokens),
            esg=esg,
            hedged=hedged,
        )
