#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Shared builders for screener tests.
"""

import sys
from pathlib import Path
from typing import List, Optional

import numpy as np

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from screener.instrument import Instrument, InstrumentType, Provenance


def make_fund(
    isin: str,
    name: str,
    aum: Optional[float] = None,
    ter: Optional[float] = None,
    currency: str = 'EUR',
    asset_class: InstrumentType = InstrumentType.ETF,
    source: Provenance = Provenance.EXCHANGE_LIST,
    **kwargs
) -> Instrument:
    """Create a fund record named by its long name."""
    return Instrument(
        isin=isin,
        long_name=name,
        display_name=name,
        aum=aum,
        ter=ter,
        currency=currency,
        asset_class=asset_class,
        source=source,
        **kwargs
    )


def make_stock(isin: str, name: str = 'Test AG', **kwargs) -> Instrument:
    """Create a manually added stock."""
    return Instrument(
        isin=isin,
        long_name=name,
        display_name=name,
        asset_class=InstrumentType.STOCK,
        source=Provenance.MANUAL,
        currency='EUR',
        **kwargs
    )


def flat_then_jump(n: int = 126, base: float = 100.0, last: float = 110.0) -> List[float]:
    """n closes: flat at base, last close at `last`."""
    return [base] * (n - 1) + [last]


def trending_closes(n: int = 130, start: float = 100.0, drift: float = 0.001, seed: int = 42) -> List[float]:
    """Deterministic noisy uptrend."""
    rng = np.random.default_rng(seed)
    returns = drift + rng.normal(0.0, 0.01, n - 1)
    closes = start * np.cumprod(np.concatenate([[1.0], 1.0 + returns]))
    return [float(c) for c in closes]
