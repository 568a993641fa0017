#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Test script for ScreenerConfigLoader.

Tests:
1. Built-in defaults when the file is missing
2. Partial YAML merged over defaults
3. Validation errors (weights, floor, multiplier, display)
4. Malformed files
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from screener.exceptions import ConfigurationError
from screener.instrument import MomentumWeights
from screener.processors import DEFAULT_CONFIG, ScreenerConfigLoader, load_config, validate_weights


def write_config(tmp_path, text):
    path = tmp_path / 'screener_config.yaml'
    path.write_text(text, encoding='utf-8')
    return path


def test_defaults_when_file_missing(tmp_path):
    config = load_config(tmp_path / 'missing.yaml')

    weights = config.get_momentum_weights()
    assert weights.as_tuple() == pytest.approx((1 / 3, 1 / 3, 1 / 3))
    assert config.get_aum_floor() == 100_000_000
    assert config.get_atr_multiplier() == 4.0
    assert config.get_risk_free_rate() == pytest.approx(0.035)
    assert config.get_dedup_settings() == {'aum_floor': 100_000_000, 'preferred_currency': 'EUR'}
    assert config.get_log_level() == 'INFO'


def test_repository_config_loads():
    config = load_config(project_root / 'config' / 'screener_config.yaml')
    assert config.get_atr_multiplier() == 4.0
    assert config.get_factor_params('VolatilityCalculator')['window'] == 127
    assert config.get_display_settings().sort_column == 'sharpe_score'


def test_partial_yaml_is_merged(tmp_path):
    path = write_config(tmp_path, """
scoring:
  momentum_weights:
    w1m: 0.2
    w3m: 0.3
    w6m: 0.5
dedup:
  aum_floor: 50000000
""")
    config = load_config(path)

    assert config.get_momentum_weights() == MomentumWeights(0.2, 0.3, 0.5)
    assert config.get_aum_floor() == 50_000_000
    # untouched sections keep their defaults
    assert config.get_atr_multiplier() == 4.0
    assert config.get('dedup.preferred_currency') == 'EUR'


def test_get_returns_copies(tmp_path):
    config = load_config(tmp_path / 'missing.yaml')
    weights = config.get('scoring.momentum_weights')
    weights['w1m'] = 99
    assert config.get('scoring.momentum_weights.w1m') == pytest.approx(1 / 3)
    assert config.get('scoring.unknown.key', 'fallback') == 'fallback'
    assert DEFAULT_CONFIG['scoring']['momentum_weights']['w1m'] == pytest.approx(1 / 3)


def test_negative_weight_rejected(tmp_path):
    path = write_config(tmp_path, """
scoring:
  momentum_weights: {w1m: -0.1, w3m: 0.5, w6m: 0.5}
""")
    with pytest.raises(ConfigurationError):
        load_config(path).get_momentum_weights()


def test_zero_weights_allowed():
    assert validate_weights(0, 0, 0) == MomentumWeights(0.0, 0.0, 0.0)


def test_non_numeric_weight_rejected():
    with pytest.raises(ConfigurationError):
        validate_weights('a', 0.3, 0.3)
    with pytest.raises(ConfigurationError):
        validate_weights(True, 0.3, 0.3)


def test_invalid_floor_and_multiplier(tmp_path):
    path = write_config(tmp_path, """
scoring:
  atr_multiplier: 0
dedup:
  aum_floor: -1
""")
    config = load_config(path)
    with pytest.raises(ConfigurationError):
        config.get_atr_multiplier()
    with pytest.raises(ConfigurationError):
        config.get_aum_floor()


def test_display_settings_validation(tmp_path):
    path = write_config(tmp_path, """
display:
  type_filter: bonds
""")
    with pytest.raises(ConfigurationError):
        load_config(path).get_display_settings()

    path = write_config(tmp_path, """
display:
  sort_column: no_such_field
""")
    with pytest.raises(ConfigurationError):
        load_config(path).get_display_settings()


def test_display_settings_values(tmp_path):
    path = write_config(tmp_path, """
display:
  type_filter: ETF
  show_deduped: true
  sort_column: combined_score
  sort_direction: asc
""")
    settings = load_config(path).get_display_settings()
    assert settings.type_filter == 'etf'
    assert settings.show_deduped is True
    assert settings.sort_column == 'combined_score'
    assert settings.sort_direction == 'asc'
    assert settings.aum_floor == 100_000_000


def test_configuration_error_is_value_error():
    assert issubclass(ConfigurationError, ValueError)


def test_malformed_yaml(tmp_path):
    path = write_config(tmp_path, "scoring: [unclosed\n")
    with pytest.raises(ConfigurationError):
        ScreenerConfigLoader(path).load()


def test_non_mapping_root(tmp_path):
    path = write_config(tmp_path, "- just\n- a list\n")
    with pytest.raises(ConfigurationError):
        ScreenerConfigLoader(path).load()


def test_reload_picks_up_changes(tmp_path):
    path = write_config(tmp_path, "scoring:\n  atr_multiplier: 2.0\n")
    config = load_config(path)
    assert config.get_atr_multiplier() == 2.0

    path.write_text("scoring:\n  atr_multiplier: 3.0\n", encoding='utf-8')
    assert config.get_atr_multiplier() == 2.0
    config.reload()
    assert config.get_atr_multiplier() == 3.0
