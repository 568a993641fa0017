#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Configuration Loader

Reads config/screener_config.yaml with four sections:
- scoring: momentum weights, ATR multiplier, risk-free rate, factor params
- dedup: AUM floor and preferred currency
- display: type filter, dedup visibility, risk-free filter, sort order
- logging: log level

Missing files or keys fall back to the built-in defaults. Values are
validated here, never inside the engines.
"""

import copy
import numbers
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from screener.exceptions import ConfigurationError
from screener.instrument import Instrument, MomentumWeights
from screener.processors.display_filter import (
    SORT_DIRECTIONS,
    TYPE_FILTERS,
    DisplaySettings,
)

DEFAULT_CONFIG: Dict[str, Any] = {
    'scoring': {
        'momentum_weights': {'w1m': 1 / 3, 'w3m': 1 / 3, 'w6m': 1 / 3},
        'atr_multiplier': 4.0,
        'risk_free_rate': 0.035,
        'factors': {
            'ReturnCalculator': {},
            'VolatilityCalculator': {'window': 127, 'min_points': 22, 'min_returns': 10},
            'TechnicalIndicators': {'atr_period': 20},
            'ValueScorer': {},
        },
    },
    'dedup': {
        'aum_floor': 100_000_000,
        'preferred_currency': 'EUR',
    },
    'display': {
        'type_filter': 'all',
        'show_deduped': False,
        'filter_below_risk_free': True,
        'sort_column': 'sharpe_score',
        'sort_direction': 'desc',
    },
    'logging': {
        'level': 'INFO',
    },
}


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """递归合并，override 覆盖 base"""
    result = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def _number(value: Any, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigurationError(f"'{key}' must be a number, got {value!r}")
    return float(value)


def validate_weights(w1m: Any, w3m: Any, w6m: Any) -> MomentumWeights:
    """
    校验动量权重 (必须非负，全 0 合法)

    Raises:
        ConfigurationError: 非数值或负权重
    """
    values = {
        'w1m': _number(w1m, 'momentum_weights.w1m'),
        'w3m': _number(w3m, 'momentum_weights.w3m'),
        'w6m': _number(w6m, 'momentum_weights.w6m'),
    }
    negative = [k for k, v in values.items() if v < 0]
    if negative:
        raise ConfigurationError(f"Momentum weights must be non-negative: {', '.join(negative)}")
    return MomentumWeights(**values)


def validate_aum_floor(value: Any) -> float:
    floor = _number(value, 'dedup.aum_floor')
    if floor < 0:
        raise ConfigurationError(f"AUM floor must be non-negative, got {floor}")
    return floor


def validate_atr_multiplier(value: Any) -> float:
    multiplier = _number(value, 'scoring.atr_multiplier')
    if multiplier <= 0:
        raise ConfigurationError(f"ATR multiplier must be positive, got {multiplier}")
    return multiplier


class ScreenerConfigLoader:
    """
    筛选器配置加载器

    使用方式:
        config = ScreenerConfigLoader('config/screener_config.yaml')
        weights = config.get_momentum_weights()
        floor = config.get('dedup.aum_floor')
    """

    def __init__(self, config_path: str = None):
        """
        Args:
            config_path: 配置文件路径，默认为 config/screener_config.yaml
        """
        if config_path is None:
            # 从 processors/ 目录相对定位到 config/
            base_dir = Path(__file__).parent.parent.parent
            config_path = base_dir / "config" / "screener_config.yaml"

        self.config_path = Path(config_path)
        self._config: Dict = {}
        self._loaded = False

    def load(self) -> Dict:
        """
        加载配置文件 (与默认配置合并)

        Returns:
            Dict: 完整配置字典

        Raises:
            ConfigurationError: 文件不是 YAML 映射
        """
        if self._loaded:
            return self._config

        if not self.config_path.exists():
            self._config = copy.deepcopy(DEFAULT_CONFIG)
            self._loaded = True
            return self._config

        with open(self.config_path, 'r', encoding='utf-8') as f:
            try:
                raw = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {self.config_path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigurationError(f"Config root must be a mapping: {self.config_path}")

        self._config = _deep_merge(DEFAULT_CONFIG, raw)
        self._loaded = True
        return self._config

    def reload(self) -> Dict:
        """强制重新加载配置"""
        self._loaded = False
        return self.load()

    def get(self, key: str, default: Any = None) -> Any:
        """
        获取配置值（支持点号分隔的路径）

        Args:
            key: 配置键 (如 'scoring.momentum_weights.w1m')
            default: 默认值

        Returns:
            配置值的副本或默认值
        """
        self.load()
        value = self._config

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return copy.deepcopy(value)

    # ========== Scoring ==========

    def get_momentum_weights(self) -> MomentumWeights:
        """动量权重"""
        weights = self.get('scoring.momentum_weights', {})
        if not isinstance(weights, dict):
            raise ConfigurationError("'scoring.momentum_weights' must be a mapping")
        return validate_weights(weights.get('w1m', 0), weights.get('w3m', 0), weights.get('w6m', 0))

    def get_atr_multiplier(self) -> float:
        return validate_atr_multiplier(self.get('scoring.atr_multiplier'))

    def get_risk_free_rate(self) -> float:
        return _number(self.get('scoring.risk_free_rate'), 'scoring.risk_free_rate')

    def get_factor_params(self, factor_name: str) -> Dict:
        """
        获取因子参数

        Args:
            factor_name: 因子注册名

        Returns:
            参数字典 (未配置时为空)
        """
        params = self.get(f'scoring.factors.{factor_name}', {}) or {}
        if not isinstance(params, dict):
            raise ConfigurationError(f"'scoring.factors.{factor_name}' must be a mapping")
        return params

    # ========== Dedup ==========

    def get_aum_floor(self) -> float:
        return validate_aum_floor(self.get('dedup.aum_floor'))

    def get_dedup_settings(self) -> Dict:
        """去重设置 {'aum_floor', 'preferred_currency'}"""
        return {
            'aum_floor': self.get_aum_floor(),
            'preferred_currency': str(self.get('dedup.preferred_currency', 'EUR')).upper(),
        }

    # ========== Display ==========

    def get_display_settings(self) -> DisplaySettings:
        """
        展示设置

        Raises:
            ConfigurationError: 未知的类型过滤、排序方向或排序字段
        """
        display = self.get('display', {})
        type_filter = str(display.get('type_filter', 'all')).lower()
        if type_filter not in TYPE_FILTERS:
            raise ConfigurationError(f"Unknown type filter '{type_filter}', expected one of {TYPE_FILTERS}")

        direction = str(display.get('sort_direction', 'desc')).lower()
        if direction not in SORT_DIRECTIONS:
            raise ConfigurationError(f"Unknown sort direction '{direction}', expected one of {SORT_DIRECTIONS}")

        sort_column = display.get('sort_column', 'sharpe_score')
        if sort_column not in {f.name for f in fields(Instrument)}:
            raise ConfigurationError(f"Unknown sort column '{sort_column}'")

        return DisplaySettings(
            type_filter=type_filter,
            show_deduped=bool(display.get('show_deduped', False)),
            filter_below_risk_free=bool(display.get('filter_below_risk_free', True)),
            sort_column=sort_column,
            sort_direction=direction,
            risk_free_rate=self.get_risk_free_rate(),
            aum_floor=self.get_aum_floor(),
        )

    # ========== Logging ==========

    def get_log_level(self) -> str:
        return str(self.get('logging.level', 'INFO')).upper()

    def __repr__(self) -> str:
        return f"ScreenerConfigLoader(path={self.config_path}, loaded={self._loaded})"


# 便捷函数
def load_config(config_path: Optional[str] = None) -> ScreenerConfigLoader:
    """
    便捷函数：加载配置

    Args:
        config_path: 配置文件路径

    Returns:
        ScreenerConfigLoader 实例
    """
    loader = ScreenerConfigLoader(config_path)
    loader.load()
    return loader
