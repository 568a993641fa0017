#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Signal Normalizer

Cross-sectional percentile normalization of raw scores across the
working set. Average-tie percentile in [0, 1], best value = 1.0.

Missing values stay missing; they never take a percentile slot.
"""

from typing import Dict, Optional, Union

import numpy as np
import pandas as pd

from screener.factors.utils.math_utils import percentile_rank


class SignalNormalizer:
    """
    截面信号正则化器

    percentile = 1 - avg_rank_index / (n - 1)，其中 avg_rank_index 为降序
    排列中的 0 起始位置 (并列取平均)。只有一个有效值时为 1.0。
    """

    def normalize(
        self,
        values: Union[pd.Series, Dict[str, Optional[float]]]
    ) -> Union[pd.Series, Dict[str, Optional[float]]]:
        """
        正则化信号值

        Args:
            values: Series 或 {isin: value}

        Returns:
            与输入类型一致的结果，缺失值为 NaN / None
        """
        if isinstance(values, dict):
            series = pd.Series(
                {k: (np.nan if v is None else float(v)) for k, v in values.items()},
                dtype=float,
            )
            normalized = self._normalize_series(series)
            return {k: (None if pd.isna(v) else float(v)) for k, v in normalized.items()}

        return self._normalize_series(values)

    @staticmethod
    def _normalize_series(series: pd.Series) -> pd.Series:
        if series.empty:
            return series.astype(float)
        return percentile_rank(series.astype(float))

    def __repr__(self) -> str:
        return "SignalNormalizer(method=percentile)"
