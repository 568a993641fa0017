#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Unified Factor Base Classes

Provides the abstract base class for all scoring factors with:
- Unified calculate() interface
- Factor type classification (TIME_SERIES, XS_GLOBAL)
- Parameter get/set for config-driven construction

Factors are pure: they read their inputs and return values, never
mutating the data they are given. Unmet preconditions yield None.
"""

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Any, Dict, Optional, Union

import pandas as pd


class FactorType(Enum):
    """
    因子计算范式枚举

    - TIME_SERIES: 时序因子，对单一标的独立计算 (收益率、波动率、均线、ATR)
    - XS_GLOBAL: 全局截面因子，在整个工作集内排名或评分 (价值评分)
    """
    TIME_SERIES = auto()      # 单标的 → Optional[float] 或 Dict
    XS_GLOBAL = auto()        # N 个标的 → pd.Series / pd.DataFrame


class FactorBase(ABC):
    """
    所有评分因子的抽象基类

    Attributes:
        name (str): 因子名称
        window (int): 回看窗口长度
        factor_type (FactorType): 因子类型 (子类必须声明)
        _params (Dict): 当前参数缓存
    """

    # 子类必须声明因子类型
    factor_type: FactorType = NotImplemented

    def __init__(self, name: str, window: int = 20):
        """
        Args:
            name (str): 因子名称 (例如: 'ATR_20')
            window (int): 回看窗口长度 (例如: 20)
        """
        self.name = name
        self.window = window
        self._params: Dict[str, Any] = {
            'name': name,
            'window': window
        }

    @abstractmethod
    def calculate(self, *args, **kwargs) -> Union[Optional[float], Dict, pd.Series, pd.DataFrame]:
        """
        核心计算方法

        Returns:
            - TIME_SERIES: Optional[float] 或 {字段: 值}
            - XS_GLOBAL: 以 ISIN 为索引的 pd.Series / pd.DataFrame
        """
        pass

    def get_params(self) -> Dict[str, Any]:
        """
        获取当前因子参数

        Returns:
            Dict[str, Any]: 参数字典的副本
        """
        return self._params.copy()

    def validate_inputs(self, *args, **kwargs) -> bool:
        """
        验证输入数据的有效性

        子类可以覆盖此方法添加特定验证逻辑。
        """
        return True

    def __repr__(self) -> str:
        params_str = ', '.join(f'{k}={v}' for k, v in self._params.items())
        return f"{self.__class__.__name__}({params_str})"
