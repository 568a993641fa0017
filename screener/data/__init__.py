#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Data Module

Boundary adapters that turn provider records into Instrument objects.
"""

from screener.data.records import (
    PriceRecord,
    FundRecord,
    merge_price_records,
    merge_fund_records,
    resolve_instrument_type,
    to_display_name,
    instrument_from_listing_row,
    instrument_from_record,
    load_instruments,
)

__all__ = [
    'PriceRecord',
    'FundRecord',
    'merge_price_records',
    'merge_fund_records',
    'resolve_instrument_type',
    'to_display_name',
    'instrument_from_listing_row',
    'instrument_from_record',
    'load_instruments',
]
