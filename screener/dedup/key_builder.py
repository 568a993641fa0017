#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Exposure Key Builder

Serializes an ExposureVector into the canonical dedup key:
    COMMODITY:<sector|UNKNOWN>[|HEDGED]
    BOND|R:..|SR:..|BT:..|DUR:..[|ESG][|HEDGED]
    R:..|SR:..|F:<factors joined by +, or _>|S:..[|ESG][|HEDGED]

Absent dimensions render as '_'. Stocks are keyed by their ISIN.
"""

from typing import List, Optional

from screener.dedup.classifier import ExposureClass, ExposureClassifier, ExposureVector
from screener.instrument import Instrument

MISSING = '_'


def _dim(value: Optional[str]) -> str:
    return value if value else MISSING


class ExposureKeyBuilder:
    """
    分组键生成器

    使用方式:
        builder = ExposureKeyBuilder()
        builder.build_key(instrument)   # 'R:WORLD|SR:_|F:_|S:_'
    """

    def __init__(self, classifier: Optional[ExposureClassifier] = None):
        self.classifier = classifier or ExposureClassifier()

    @staticmethod
    def vector_to_key(vector: ExposureVector) -> str:
        """
        向量 -> 键

        Args:
            vector: 暴露向量

        Returns:
            str: 分组键
        """
        if vector.asset_class == ExposureClass.COMMODITY:
            parts = [f"COMMODITY:{vector.sector or 'UNKNOWN'}"]
            if vector.hedged:
                parts.append('HEDGED')
            return '|'.join(parts)

        if vector.asset_class == ExposureClass.BOND:
            parts: List[str] = [
                'BOND',
                f"R:{_dim(vector.region)}",
                f"SR:{_dim(vector.subregion)}",
                f"BT:{_dim(vector.bond_type)}",
                f"DUR:{_dim(vector.bond_duration)}",
            ]
        else:
            factors = '+'.join(sorted(vector.factors)) if vector.factors else MISSING
            parts = [
                f"R:{_dim(vector.region)}",
                f"SR:{_dim(vector.subregion)}",
                f"F:{factors}",
                f"S:{_dim(vector.sector)}",
            ]

        if vector.esg:
            parts.append('ESG')
        if vector.hedged:
            parts.append('HEDGED')
        return '|'.join(parts)

    def build_key(self, instrument: Instrument) -> str:
        """Instrument -> 键 (股票直接使用 ISIN)"""
        if instrument.is_stock:
            return instrument.isin
        return self.vector_to_key(self.classifier.classify(instrument))
