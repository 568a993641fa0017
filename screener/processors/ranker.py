#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Ranker

Assigns 1-based ordinal ranks over the full working set:
- momentum_rank, sharpe_rank, combined_rank: higher score ranks first
- value_rank: lower score ranks first

Only non-null scores are ranked; ties keep working-set order.
"""

from dataclasses import replace
from typing import Dict, List, Sequence

import numpy as np
import pandas as pd

from screener.factors.utils.math_utils import ordinal_rank
from screener.instrument import Instrument

# (分数字段, 排名字段, 是否升序)
RANK_SPECS = (
    ('momentum_score', 'momentum_rank', False),
    ('sharpe_score', 'sharpe_rank', False),
    ('combined_score', 'combined_rank', False),
    ('value_score', 'value_rank', True),
)


class Ranker:
    """
    排名器

    使用方式:
        ranked = Ranker().apply(instruments)
    """

    def __init__(self, specs=RANK_SPECS):
        self.specs = tuple(specs)

    def ranks(self, instruments: Sequence[Instrument]) -> Dict[str, List]:
        """
        计算各排名字段

        Returns:
            {rank_field: [rank or None, ...]} (与输入顺序一致)
        """
        result: Dict[str, List] = {}
        for score_field, rank_field, ascending in self.specs:
            scores = pd.Series(
                [np.nan if getattr(i, score_field) is None else float(getattr(i, score_field))
                 for i in instruments],
                dtype=float,
            )
            ranked = ordinal_rank(scores, ascending=ascending)
            result[rank_field] = [None if pd.isna(r) else int(r) for r in ranked]
        return result

    def apply(self, instruments: Sequence[Instrument]) -> List[Instrument]:
        """返回写入排名字段的新对象"""
        ranks = self.ranks(instruments)
        return [
            replace(inst, **{rank_field: values[idx] for rank_field, values in ranks.items()})
            for idx, inst in enumerate(instruments)
        ]
