#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Test script for RankingReport.

Tests:
1. Cell formatters
2. DataFrame columns and nullable ranks
3. CSV / Excel export
4. Summary statistics
"""

import sys
from pathlib import Path

import pandas as pd
import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from screener.instrument import Instrument, InstrumentType, ValueModel
from screener.metrics import (
    MISSING,
    RankingReport,
    fmt_aum,
    fmt_ey,
    fmt_pct,
    fmt_pe,
    fmt_score,
    fmt_ter,
    fmt_vola,
)


@pytest.fixture
def instruments():
    return [
        Instrument(
            isin='IE00B4L5Y983', display_name='iShares Core MSCI World UCITS ETF',
            asset_class=InstrumentType.ETF, ticker='EUNL.DE', currency='EUR',
            momentum_score=0.12, momentum_rank=1, sharpe_score=0.8, sharpe_rank=1,
            r1m=0.02, r3m=0.05, r6m=0.12, volatility=0.15, aum=95e9, ter=0.2,
            pe=20.0, earnings_yield=0.05, value_score=2.0, value_rank=1,
            value_score_model=ValueModel.ETF, dedup_group='R:GLOBAL|SR:_|F:_|S:_', is_dedup_winner=True,
        ),
        Instrument(
            isin='DE0007164600', display_name='SAP SE', asset_class=InstrumentType.STOCK,
            momentum_score=None, sharpe_score=0.4, sharpe_rank=2,
        ),
    ]


# ========== Formatters ==========

def test_formatters():
    assert fmt_aum(95e9) == '€95.00B'
    assert fmt_aum(1.5e12) == '€1.50T'
    assert fmt_aum(250e6) == '€250M'
    assert fmt_aum(5000) == '€5000'
    assert fmt_ter(0.2) == '0.20%'
    assert fmt_pct(0.1) == '10.0%'
    assert fmt_pct(-0.0512, 2) == '-5.12%'
    assert fmt_vola(0.153) == '15.3%'
    assert fmt_pe(18.04) == '18.0'
    assert fmt_ey(0.05) == '5.00%'
    assert fmt_score(0.1234) == '0.123'
    assert fmt_score(0.1234, 2) == '0.123 (2)'


def test_formatters_missing_values():
    for formatter in (fmt_aum, fmt_ter, fmt_pct, fmt_vola, fmt_pe, fmt_ey, fmt_score):
        assert formatter(None) == MISSING
        assert formatter(float('nan')) == MISSING


# ========== DataFrame ==========

def test_to_dataframe(instruments):
    report = RankingReport()
    report.add_instruments(instruments)
    df = report.to_dataframe()

    assert list(df.columns) == RankingReport.COLUMNS
    assert len(df) == 2
    assert df.loc[0, 'Type'] == 'ETF'
    assert df.loc[0, 'Value_Model'] == 'etf'
    assert str(df['Momentum_Rank'].dtype) == 'Int64'
    assert pd.isna(df.loc[1, 'Momentum_Rank'])
    assert df.loc[1, 'Sharpe_Rank'] == 2


def test_empty_dataframe_has_columns():
    df = RankingReport().to_dataframe()
    assert df.empty
    assert list(df.columns) == RankingReport.COLUMNS


def test_display_frame(instruments):
    report = RankingReport()
    report.add_instruments(instruments)
    view = report.to_display_frame(top=1)

    assert list(view.columns) == RankingReport.DISPLAY_COLUMNS
    assert len(view) == 1
    assert view.loc[0, 'Momentum'] == '0.120 (1)'
    assert view.loc[0, 'AUM'] == '€95.00B'
    assert view.loc[0, '6M'] == '12.0%'

    full = report.to_display_frame()
    assert full.loc[1, 'Momentum'] == MISSING
    assert full.loc[1, 'AUM'] == MISSING


# ========== Export ==========

def test_save_csv(tmp_path, instruments):
    """CSV export round-trips ISINs and raw scores."""
    print("\n" + "=" * 60)
    print("Test: Ranking report CSV export")
    print("=" * 60)

    report = RankingReport(output_dir=str(tmp_path))
    report.add_instruments(instruments)
    path = report.save('ranking.csv')
    print(f"  saved: {path}")

    assert Path(path) == tmp_path / 'ranking.csv'
    loaded = pd.read_csv(path, encoding='utf-8-sig')
    assert list(loaded['ISIN']) == ['IE00B4L5Y983', 'DE0007164600']
    assert loaded.loc[0, 'Momentum'] == pytest.approx(0.12)
    assert pd.isna(loaded.loc[1, 'Momentum'])

    print("\n[PASS] CSV export test passed!")


def test_save_into_nested_path(tmp_path, instruments):
    report = RankingReport(output_dir='unused')
    report.add_instruments(instruments)
    path = report.save(str(tmp_path / 'out' / 'report.csv'))
    assert Path(path).exists()


def test_save_excel(tmp_path, instruments):
    pytest.importorskip('openpyxl')

    report = RankingReport(output_dir=str(tmp_path))
    report.add_instruments(instruments)
    path = report.save('ranking.xlsx')

    loaded = pd.read_excel(path, sheet_name='Ranking')
    assert list(loaded['ISIN']) == ['IE00B4L5Y983', 'DE0007164600']


def test_save_unknown_format(tmp_path, instruments):
    report = RankingReport(output_dir=str(tmp_path))
    report.add_instruments(instruments)
    with pytest.raises(ValueError):
        report.save('ranking.json', format='json')


# ========== Summary ==========

def test_summary(instruments):
    report = RankingReport()
    assert report.summary() == {'total': 0}

    report.add_instruments(instruments)
    summary = report.summary()
    assert summary['total'] == 2
    assert summary['types'] == {'ETF': 1, 'Stock': 1}
    assert summary['with_momentum'] == 1
    assert summary['with_value'] == 1
    assert summary['avg_sharpe'] == pytest.approx(0.6)

    report.clear()
    assert report.summary() == {'total': 0}
