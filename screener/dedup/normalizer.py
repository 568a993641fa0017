#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Name Normalizer

Turns a raw fund name into a canonical token sequence:
1. Provider strip: detect the issuer alias, remove it, remember its priority
2. Abbreviation expansion: longest phrase at each position wins

Normalizing an already normalized name is a no-op.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from screener.dedup.tokenizer import PhraseTable, Tokens, remove_phrase, tokenize
from screener.dedup.vocabulary import (
    ABBREVIATIONS,
    PROVIDER_ALIASES,
    PROVIDER_PRIORITY,
    UNKNOWN_PROVIDER_PRIORITY,
)


@dataclass(frozen=True)
class NormalizedName:
    """
    标准化结果

    Attributes:
        text: 标准化后的大写名称 (token 以空格连接)
        tokens: token 元组
        issuer: 识别出的发行商标准名 (未识别为 None)
        priority: 发行商优先级 (未识别为 99)
    """
    text: str
    tokens: Tokens
    issuer: Optional[str]
    priority: int


class NameNormalizer:
    """
    基金名称标准化器

    使用方式:
        normalizer = NameNormalizer()
        result = normalizer.normalize('iShares Core S&P 500 UCITS ETF')
        # result.tokens -> ('CORE', 'SP500', 'UCITS', 'ETF'), result.priority -> 1
    """

    def __init__(
        self,
        provider_aliases: Iterable[Tuple[str, str]] = PROVIDER_ALIASES,
        abbreviations: Iterable[Tuple[str, str]] = ABBREVIATIONS,
        provider_priority: Optional[dict] = None
    ):
        self._priority = dict(PROVIDER_PRIORITY if provider_priority is None else provider_priority)
        self._aliases = tuple(
            (tokenize(alias), canonical)
            for alias, canonical in provider_aliases
            if canonical in self._priority and tokenize(alias)
        )
        self._abbreviations = PhraseTable(abbreviations)

    def detect_provider(self, tokens: Tokens) -> Optional[Tuple[Tokens, str]]:
        """
        检测发行商别名

        字符数最长的别名胜出，等长时取表中靠前者。

        Returns:
            (alias_tokens, canonical) 或 None
        """
        best = None
        best_len = -1
        for alias, canonical in self._aliases:
            size = len(alias)
            if not any(tokens[i:i + size] == alias for i in range(len(tokens) - size + 1)):
                continue
            alias_len = len(' '.join(alias))
            if alias_len > best_len:
                best = (alias, canonical)
                best_len = alias_len
        return best

    def strip_provider(self, tokens: Tokens) -> Tuple[Tokens, Optional[str], int]:
        """
        剥离发行商

        Returns:
            (剩余 tokens, 发行商标准名, 优先级)
        """
        hit = self.detect_provider(tokens)
        if hit is None:
            return tokens, None, UNKNOWN_PROVIDER_PRIORITY
        alias, canonical = hit
        return remove_phrase(tokens, alias), canonical, self._priority[canonical]

    def expand(self, tokens: Tokens) -> Tokens:
        """缩写展开"""
        return self._abbreviations.replace_longest(tokens)

    def normalize(self, name: Optional[str]) -> NormalizedName:
        """
        标准化名称

        Args:
            name: 原始名称

        Returns:
            NormalizedName
        """
        stripped, issuer, priority = self.strip_provider(tokenize(name))
        tokens = self.expand(stripped)
        return NormalizedName(
            text=' '.join(tokens),
            tokens=tokens,
            issuer=issuer,
            priority=priority,
        )

    def provider_priority(self, name: Optional[str]) -> int:
        """仅返回发行商优先级 (用于去重排序)"""
        return self.strip_provider(tokenize(name))[2]
