#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Name Tokenizer

Splits fund names into upper-case tokens and matches vocabulary phrases
token by token:
- tokenize(): whitespace and punctuation are separators
- PhraseTable: phrase -> value lookup with longest-match replacement
- AliasTable: ordered (aliases -> canonical) dimension lookup

All matching is whole-token, so 'US' never matches inside 'AUSTRALIA'.
"""

import re
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

Tokens = Tuple[str, ...]

# 非字母数字字符 (含下划线) 均视为分隔符
_SEPARATORS = re.compile(r'[\W_]+')


def tokenize(text: Optional[str]) -> Tokens:
    """
    将名称拆分为大写 token

    Args:
        text: 原始名称 (可为 None)

    Returns:
        Tokens: token 元组，空名称返回 ()
    """
    if not text:
        return ()
    return tuple(t for t in _SEPARATORS.split(text.upper()) if t)


def find_phrase(tokens: Sequence[str], phrase: Sequence[str], start: int = 0) -> int:
    """返回 phrase 在 tokens 中首次出现的位置，未找到返回 -1"""
    size = len(phrase)
    if size == 0:
        return -1
    for i in range(start, len(tokens) - size + 1):
        if tuple(tokens[i:i + size]) == tuple(phrase):
            return i
    return -1


def contains_phrase(tokens: Sequence[str], phrase: Sequence[str]) -> bool:
    return find_phrase(tokens, phrase) >= 0


def remove_phrase(tokens: Sequence[str], phrase: Sequence[str]) -> Tokens:
    """删除 phrase 的全部出现"""
    result: List[str] = []
    size = len(phrase)
    i = 0
    while i < len(tokens):
        if size and tuple(tokens[i:i + size]) == tuple(phrase):
            i += size
            continue
        result.append(tokens[i])
        i += 1
    return tuple(result)


class PhraseTable:
    """
    短语表

    按首 token 建立索引，每个首 token 下的候选短语按 token 数、
    字符长度降序排列，使同一位置总是优先匹配最长短语。

    使用方式:
        table = PhraseTable([('S&P 500', 'SP500'), ('EURO STOXX', 'EUROSTOXX')])
        table.replace_longest(tokenize('iShares Core S&P 500'))
    """

    def __init__(self, entries: Iterable[Tuple[str, str]]):
        self._by_head: Dict[str, List[Tuple[Tokens, str]]] = {}
        for text, value in entries:
            phrase = tokenize(text)
            if not phrase:
                continue
            self._by_head.setdefault(phrase[0], []).append((phrase, value))

        for candidates in self._by_head.values():
            candidates.sort(key=lambda item: (len(item[0]), len(''.join(item[0]))), reverse=True)

    def match_at(self, tokens: Sequence[str], index: int) -> Optional[Tuple[Tokens, str]]:
        """返回 index 位置上的最长匹配 (phrase, value)"""
        for phrase, value in self._by_head.get(tokens[index], ()):
            if tuple(tokens[index:index + len(phrase)]) == phrase:
                return phrase, value
        return None

    def replace_longest(self, tokens: Sequence[str]) -> Tokens:
        """
        从左到右扫描，将每个位置上的最长匹配替换为其标准 token

        Args:
            tokens: 输入 token 序列

        Returns:
            Tokens: 替换后的 token 元组
        """
        result: List[str] = []
        i = 0
        while i < len(tokens):
            hit = self.match_at(tokens, i)
            if hit is None:
                result.append(tokens[i])
                i += 1
            else:
                phrase, value = hit
                result.extend(tokenize(value))
                i += len(phrase)
        return tuple(result)


class AliasTable:
    """
    维度查找表: 有序的 (别名组 -> 标准值)

    first() 返回第一个命中的条目 (按表顺序)，
    all() 按表顺序收集全部命中。
    """

    def __init__(self, entries: Iterable[Tuple[Sequence[str], str]]):
        self._entries: Tuple[Tuple[Tuple[Tokens, ...], str], ...] = tuple(
            (tuple(tokenize(alias) for alias in aliases), canonical)
            for aliases, canonical in entries
        )

    def _hits(self, tokens: Sequence[str], aliases: Tuple[Tokens, ...]) -> bool:
        return any(contains_phrase(tokens, alias) for alias in aliases)

    def first(self, tokens: Sequence[str]) -> Optional[str]:
        for aliases, canonical in self._entries:
            if self._hits(tokens, aliases):
                return canonical
        return None

    def all(self, tokens: Sequence[str]) -> List[str]:
        found: List[str] = []
        for aliases, canonical in self._entries:
            if canonical not in found and self._hits(tokens, aliases):
                found.append(canonical)
        return found

    def any(self, tokens: Sequence[str]) -> bool:
        return self.first(tokens) is not None


def signal_table(signals: Iterable[str], canonical: str = 'HIT') -> AliasTable:
    """将平铺的信号词列表包装为单条目 AliasTable"""
    return AliasTable([(tuple(signals), canonical)])
