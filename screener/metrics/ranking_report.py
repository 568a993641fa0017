#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Ranking Report Module

Builds a tabular report of the displayed instruments and exports it as
CSV or Excel.

Report Structure:
- Identity: ISIN, Name, Type, Ticker, Currency
- Scores: Momentum, Sharpe, Combined, Value with their ranks
- Returns & risk: 1M, 3M, 6M, annualized volatility
- Fund data & fundamentals: AUM, TER, P/E, P/B, earnings yield
- Technicals: MA200 flag, ATR(20), selling threshold
- Dedup: exposure key and winner flag

Raw values go to the saved file; fmt_* helpers produce the console view.
"""

import logging
import math
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pandas as pd

from screener.instrument import Instrument

logger = logging.getLogger(__name__)

MISSING = '—'


# =============================================================================
# Formatters
# =============================================================================

def _missing(value) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def fmt_aum(value: Optional[float]) -> str:
    """€1.23T / €4.56B / €789M / €1234"""
    if _missing(value):
        return MISSING
    if value >= 1e12:
        return f"€{value / 1e12:.2f}T"
    if value >= 1e9:
        return f"€{value / 1e9:.2f}B"
    if value >= 1e6:
        return f"€{value / 1e6:.0f}M"
    return f"€{value:.0f}"


def fmt_ter(value: Optional[float]) -> str:
    """TER 已是百分数: 0.2 -> '0.20%'"""
    if _missing(value):
        return MISSING
    return f"{value:.2f}%"


def fmt_pct(value: Optional[float], decimals: int = 1) -> str:
    """小数 -> 百分比: 0.1 -> '10.0%'"""
    if _missing(value):
        return MISSING
    return f"{value * 100:.{decimals}f}%"


def fmt_ratio(value: Optional[float], decimals: int = 1) -> str:
    if _missing(value):
        return MISSING
    return f"{value:.{decimals}f}"


def fmt_score(value: Optional[float], rank: Optional[int] = None) -> str:
    """分数 (3 位小数)，有排名时附加 ' (rank)'"""
    if _missing(value):
        return MISSING
    text = f"{value:.3f}"
    if rank is not None:
        return f"{text} ({rank})"
    return text


def fmt_vola(value: Optional[float]) -> str:
    return fmt_pct(value, 1)


def fmt_pe(value: Optional[float]) -> str:
    return fmt_ratio(value, 1)


def fmt_ey(value: Optional[float]) -> str:
    return fmt_pct(value, 2)


# =============================================================================
# Report
# =============================================================================

class RankingReport:
    """
    排名报告

    使用方式:
        report = RankingReport(output_dir='Reports')
        report.add_instruments(rows)
        report.save('ranking.csv')
    """

    COLUMNS = [
        'ISIN',                # 标识
        'Name',                # 名称
        'Type',                # 类型
        'Ticker',              # 行情代码
        'Currency',            # 币种
        'Momentum',            # 动量分数
        'Momentum_Rank',
        'Sharpe',              # 风险调整动量
        'Sharpe_Rank',
        'Combined',            # 组合分数
        'Combined_Rank',
        'R1M',
        'R3M',
        'R6M',
        'Volatility',          # 年化波动率
        'AUM',
        'TER',
        'PE',
        'PB',
        'Earnings_Yield',
        'Value',               # 价值分数 (越低越好)
        'Value_Rank',
        'Value_Model',
        'Above_MA200',
        'ATR20',
        'Selling_Threshold',
        'Dedup_Group',
        'Dedup_Winner',
    ]

    # 控制台视图的列与格式
    DISPLAY_COLUMNS = ['Name', 'Type', 'Momentum', 'Sharpe', '1M', '3M', '6M', 'Vola', 'AUM', 'TER', 'P/E', 'EY', 'Value']

    def __init__(self, output_dir: str = "Reports"):
        """
        Args:
            output_dir: 默认输出目录
        """
        self.output_dir = Path(output_dir)
        self._rows: List[Dict] = []
        self._instruments: List[Instrument] = []

    @staticmethod
    def _row(inst: Instrument) -> Dict:
        return {
            'ISIN': inst.isin,
            'Name': inst.display_name or inst.name,
            'Type': inst.asset_class.value,
            'Ticker': inst.ticker,
            'Currency': inst.currency,
            'Momentum': inst.momentum_score,
            'Momentum_Rank': inst.momentum_rank,
            'Sharpe': inst.sharpe_score,
            'Sharpe_Rank': inst.sharpe_rank,
            'Combined': inst.combined_score,
            'Combined_Rank': inst.combined_rank,
            'R1M': inst.r1m,
            'R3M': inst.r3m,
            'R6M': inst.r6m,
            'Volatility': inst.volatility,
            'AUM': inst.aum,
            'TER': inst.ter,
            'PE': inst.pe,
            'PB': inst.pb,
            'Earnings_Yield': inst.earnings_yield,
            'Value': inst.value_score,
            'Value_Rank': inst.value_rank,
            'Value_Model': inst.value_score_model.value if inst.value_score_model else None,
            'Above_MA200': inst.above_ma200,
            'ATR20': inst.atr20,
            'Selling_Threshold': inst.selling_threshold,
            'Dedup_Group': inst.dedup_group,
            'Dedup_Winner': inst.is_dedup_winner,
        }

    def add_instruments(self, instruments: Sequence[Instrument]) -> None:
        """按给定顺序追加行"""
        for inst in instruments:
            self._instruments.append(inst)
            self._rows.append(self._row(inst))

    def to_dataframe(self) -> pd.DataFrame:
        """
        原始数值表

        Returns:
            DataFrame (列顺序为 COLUMNS)，排名列为可空整数
        """
        if not self._rows:
            return pd.DataFrame(columns=self.COLUMNS)

        df = pd.DataFrame(self._rows, columns=self.COLUMNS)
        for col in ('Momentum_Rank', 'Sharpe_Rank', 'Combined_Rank', 'Value_Rank'):
            df[col] = df[col].astype('Int64')
        return df

    def to_display_frame(self, top: Optional[int] = None) -> pd.DataFrame:
        """
        格式化后的控制台视图

        Args:
            top: 仅保留前 N 行
        """
        instruments = self._instruments if top is None else self._instruments[:top]
        rows = [
            {
                'Name': inst.display_name or inst.name,
                'Type': inst.asset_class.value,
                'Momentum': fmt_score(inst.momentum_score, inst.momentum_rank),
                'Sharpe': fmt_score(inst.sharpe_score, inst.sharpe_rank),
                '1M': fmt_pct(inst.r1m),
                '3M': fmt_pct(inst.r3m),
                '6M': fmt_pct(inst.r6m),
                'Vola': fmt_vola(inst.volatility),
                'AUM': fmt_aum(inst.aum),
                'TER': fmt_ter(inst.ter),
                'P/E': fmt_pe(inst.pe),
                'EY': fmt_ey(inst.earnings_yield),
                'Value': fmt_score(inst.value_score, inst.value_rank),
            }
            for inst in instruments
        ]
        return pd.DataFrame(rows, columns=self.DISPLAY_COLUMNS)

    def save(self, filename: str = "ranking.csv", format: Optional[str] = None) -> str:
        """
        保存报告

        Args:
            filename: 文件名 (可含目录)
            format: 'csv' 或 'excel'，None 时按扩展名判断

        Returns:
            实际保存路径
        """
        filepath = Path(filename)
        if filepath.parent == Path('.'):
            filepath = self.output_dir / filepath
        filepath.parent.mkdir(parents=True, exist_ok=True)

        if format is None:
            format = 'excel' if filepath.suffix.lower() == '.xlsx' else 'csv'

        df = self.to_dataframe()
        if df.empty:
            logger.warning("Ranking report is empty")

        if format == 'csv':
            df.to_csv(filepath, index=False, encoding='utf-8-sig')
        elif format == 'excel':
            if filepath.suffix.lower() != '.xlsx':
                filepath = filepath.with_suffix('.xlsx')
            df.to_excel(filepath, index=False, sheet_name='Ranking')
        else:
            raise ValueError(f"Unknown report format: {format}")

        logger.info("Report saved to: %s", filepath)
        return str(filepath)

    def clear(self) -> None:
        self._rows = []
        self._instruments = []

    def summary(self) -> Dict:
        """
        报告统计

        Returns:
            {'total', 'types', 'with_momentum', 'with_value', 'avg_sharpe', 'generated_at'}
        """
        df = self.to_dataframe()
        if df.empty:
            return {'total': 0}

        sharpe = pd.to_numeric(df['Sharpe'], errors='coerce')
        return {
            'total': len(df),
            'types': df['Type'].value_counts().to_dict(),
            'with_momentum': int(df['Momentum'].notna().sum()),
            'with_value': int(df['Value'].notna().sum()),
            'avg_sharpe': float(sharpe.mean()) if sharpe.notna().any() else None,
            'generated_at': datetime.now().strftime('%Y-%m-%d %H:%M:%S'),
        }
