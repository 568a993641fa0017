#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Dedup Grouper

Groups instruments with identical exposure keys and picks one canonical
winner per group:
1. Partition by key (stocks are singletons keyed by ISIN)
2. Sort candidates: issuer priority, preferred currency, AUM desc,
   TER asc, input order
3. Revoke a provisional winner whose known AUM is below the floor
4. Promote the first candidate with unknown AUM or AUM >= floor
5. Annotate every instrument with group key, winner flag and siblings
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Sequence

from screener.dedup.key_builder import ExposureKeyBuilder
from screener.instrument import Instrument

logger = logging.getLogger(__name__)

DEFAULT_AUM_FLOOR = 100_000_000
DEFAULT_PREFERRED_CURRENCY = 'EUR'


@dataclass
class DedupGroup:
    """
    去重分组

    Attributes:
        key: 分组键
        candidates: 按优先级排序的候选
        winner: 胜出者 (可能因 AUM 过低被撤销而为 None)
    """
    key: str
    candidates: List[Instrument] = field(default_factory=list)
    winner: Optional[Instrument] = None

    @property
    def isins(self) -> List[str]:
        return [c.isin for c in self.candidates]


def _nulls_last(value: Optional[float], descending: bool = False) -> tuple:
    if value is None:
        return (1, 0.0)
    return (0, -value if descending else value)


class DedupGrouper:
    """
    暴露去重器

    使用方式:
        grouper = DedupGrouper(aum_floor=1e8)
        groups = grouper.group(instruments)
        annotated = grouper.apply(instruments, groups)
    """

    def __init__(
        self,
        aum_floor: float = DEFAULT_AUM_FLOOR,
        preferred_currency: str = DEFAULT_PREFERRED_CURRENCY,
        key_builder: Optional[ExposureKeyBuilder] = None
    ):
        """
        Args:
            aum_floor: AUM 下限，低于该值的胜出者被撤销
            preferred_currency: 优先币种
            key_builder: 分组键生成器
        """
        self.aum_floor = aum_floor
        self.preferred_currency = preferred_currency
        self.key_builder = key_builder or ExposureKeyBuilder()

    @property
    def normalizer(self):
        return self.key_builder.classifier.normalizer

    def _sort_key(self, instrument: Instrument, position: int) -> tuple:
        priority = self.normalizer.provider_priority(instrument.name)
        currency_rank = 0 if instrument.currency == self.preferred_currency else 1
        return (
            priority,
            currency_rank,
            _nulls_last(instrument.aum, descending=True),
            _nulls_last(instrument.ter),
            position,
        )

    def _below_floor(self, instrument: Instrument) -> bool:
        if instrument.is_stock:
            return False
        return instrument.aum is not None and instrument.aum < self.aum_floor

    def group(self, instruments: Sequence[Instrument]) -> List[DedupGroup]:
        """
        分组并选出胜出者

        Args:
            instruments: 待去重列表

        Returns:
            List[DedupGroup]: 按首次出现顺序排列的分组
        """
        buckets: Dict[str, List[tuple]] = {}
        for position, instrument in enumerate(instruments):
            key = self.key_builder.build_key(instrument)
            buckets.setdefault(key, []).append((self._sort_key(instrument, position), instrument))

        groups: List[DedupGroup] = []
        revoked = 0
        promoted = 0
        for key, members in buckets.items():
            ordered = [inst for _, inst in sorted(members, key=lambda item: item[0])]
            group = DedupGroup(key=key, candidates=ordered, winner=ordered[0])

            if self._below_floor(group.winner):
                logger.debug("Revoked winner %s in %s (AUM %.0f)", group.winner.isin, key, group.winner.aum)
                group.winner = None
                revoked += 1

            groups.append(group)

        # 按原排序顺序补选
        for group in groups:
            if group.winner is not None:
                continue
            for candidate in group.candidates:
                if not self._below_floor(candidate):
                    group.winner = candidate
                    promoted += 1
                    logger.debug("Promoted %s in %s", candidate.isin, group.key)
                    break

        logger.info(
            "Dedup: %d instruments -> %d groups (%d revoked, %d promoted)",
            len(instruments), len(groups), revoked, promoted
        )
        return groups

    def apply(self, instruments: Sequence[Instrument], groups: Sequence[DedupGroup]) -> List[Instrument]:
        """
        将分组结果写回 (返回新对象)

        不在任何分组中的对象的去重字段被清空。
        """
        winners = {g.winner.isin for g in groups if g.winner is not None}
        membership: Dict[str, DedupGroup] = {}
        for g in groups:
            for c in g.candidates:
                membership[c.isin] = g

        result = []
        for inst in instruments:
            g = membership.get(inst.isin)
            if g is None:
                result.append(replace(inst, dedup_group=None, is_dedup_winner=None, dedup_candidates=None))
                continue
            result.append(replace(
                inst,
                dedup_group=g.key,
                is_dedup_winner=inst.isin in winners,
                dedup_candidates=[isin for isin in g.isins if isin != inst.isin],
            ))
        return result

    def run(self, instruments: Sequence[Instrument]) -> List[Instrument]:
        """group() + apply()"""
        return self.apply(instruments, self.group(instruments))
