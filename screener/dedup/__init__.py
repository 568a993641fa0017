#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Exposure Deduplication Engine

Pipeline: NameNormalizer -> ExposureClassifier -> ExposureKeyBuilder -> DedupGrouper
"""

from screener.dedup.tokenizer import tokenize, PhraseTable, AliasTable
from screener.dedup.normalizer import NameNormalizer, NormalizedName
from screener.dedup.classifier import ExposureClass, ExposureClassifier, ExposureVector
from screener.dedup.key_builder import ExposureKeyBuilder
from screener.dedup.grouper import DedupGroup, DedupGrouper, DEFAULT_AUM_FLOOR

__all__ = [
    'tokenize',
    'PhraseTable',
    'AliasTable',
    'NameNormalizer',
    'NormalizedName',
    'ExposureClass',
    'ExposureClassifier',
    'ExposureVector',
    'ExposureKeyBuilder',
    'DedupGroup',
    'DedupGrouper',
    'DEFAULT_AUM_FLOOR',
]
