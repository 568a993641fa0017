#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Factor Registry

Provides name-based factor instantiation:
- FactorRegistry: maps factor names to classes and default params
- Lazy class loading from module path
- default_registry(): a fresh registry holding the built-in factors

Registries are plain objects; nothing is cached at module level.
"""

import importlib
import logging
from typing import Dict, List, Optional, Type

from screener.factors.base import FactorBase, FactorType

logger = logging.getLogger(__name__)

# 内置因子: (名称, 类路径, 默认参数)
BUILTIN_FACTORS = (
    ('ReturnCalculator', 'screener.factors.time_series.returns.ReturnCalculator', {}),
    ('VolatilityCalculator', 'screener.factors.time_series.volatility.VolatilityCalculator', {}),
    ('TechnicalIndicators', 'screener.factors.time_series.technical.TechnicalIndicators', {}),
    ('ValueScorer', 'screener.factors.cross_sectional.value.ValueScorer', {}),
)


class FactorRegistry:
    """
    因子注册表

    功能:
    1. 通过名称或类路径注册因子
    2. 按名称创建因子实例 (合并默认参数)
    3. 管理因子元数据

    使用方式:
        registry = default_registry()
        factor = registry.get_or_create('VolatilityCalculator', window=127)
    """

    def __init__(self):
        # 因子类注册表: {name: class}
        self._classes: Dict[str, Type[FactorBase]] = {}

        # 因子元数据: {name: metadata}
        self._metadata: Dict[str, Dict] = {}

        # 类路径映射: {name: module_path}
        self._class_paths: Dict[str, str] = {}

    def register_from_path(self, name: str, class_path: str, metadata: Dict = None) -> None:
        """
        通过类路径注册因子 (延迟加载)

        Args:
            name: 因子名称
            class_path: 类路径 (如 'screener.factors.time_series.volatility.VolatilityCalculator')
            metadata: 元数据
        """
        self._class_paths[name] = class_path
        self._metadata[name] = metadata or {}

    def get_class(self, name: str) -> Optional[Type[FactorBase]]:
        """
        获取因子类

        Args:
            name: 因子名称

        Returns:
            因子类或 None
        """
        if name in self._classes:
            return self._classes[name]

        if name in self._class_paths:
            factor_class = self._load_class(self._class_paths[name])
            if factor_class:
                self._classes[name] = factor_class
                return factor_class

        return None

    def _load_class(self, class_path: str) -> Optional[Type[FactorBase]]:
        """从模块路径动态加载类"""
        try:
            module_path, class_name = class_path.rsplit('.', 1)
            module = importlib.import_module(module_path)
            return getattr(module, class_name, None)

        except (ImportError, AttributeError, ValueError) as e:
            logger.warning("Failed to load factor class '%s': %s", class_path, e)
            return None

    def get_or_create(self, name: str, **kwargs) -> Optional[FactorBase]:
        """
        创建因子实例

        Args:
            name: 因子名称
            **kwargs: 因子参数 (覆盖默认参数)

        Returns:
            因子实例，未注册时返回 None
        """
        factor_class = self.get_class(name)
        if factor_class is None:
            logger.warning("Factor '%s' not found", name)
            return None

        default_params = self._metadata.get(name, {}).get('default_params', {})
        merged_params = {**default_params, **kwargs}
        return factor_class(name=name, **merged_params)

    def list_factors(self, factor_type: FactorType = None) -> List[str]:
        """
        列出所有注册的因子

        Args:
            factor_type: 可选过滤类型

        Returns:
            因子名称列表
        """
        all_names = set(self._classes) | set(self._class_paths)

        if factor_type is None:
            return sorted(all_names)

        result = []
        for name in all_names:
            factor_class = self.get_class(name)
            if factor_class is not None and getattr(factor_class, 'factor_type', None) == factor_type:
                result.append(name)
        return sorted(result)

    def __contains__(self, name: str) -> bool:
        return name in self._classes or name in self._class_paths

    def __len__(self) -> int:
        return len(set(self._classes) | set(self._class_paths))

    def __repr__(self) -> str:
        return f"FactorRegistry(factors={len(self)})"


def default_registry() -> FactorRegistry:
    """创建包含内置因子的注册表"""
    registry = FactorRegistry()
    for name, class_path, default_params in BUILTIN_FACTORS:
        registry.register_from_path(name, class_path, {'default_params': dict(default_params)})
    return registry
