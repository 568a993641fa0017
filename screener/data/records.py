#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Boundary Records

Adapters between provider payloads and Instrument records:
- PriceRecord / merge_price_records: bars and fundamentals keyed by ticker
- FundRecord / merge_fund_records: AUM, TER and fund name keyed by ISIN
- resolve_instrument_type / to_display_name: identifier lookup mapping
- instrument_from_listing_row: exchange instrument list row -> Instrument
- load_instruments: JSON seed file -> List[Instrument]

Malformed input raises RecordError; provider-side failures travel as the
record's `error` field and simply clear the affected fields.
"""

import json
import logging
import math
import re
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from screener.exceptions import RecordError
from screener.instrument import Instrument, InstrumentType, Provenance

logger = logging.getLogger(__name__)

# 标题化后需要恢复的缩写
DISPLAY_ACRONYMS = {
    'ETF': 'ETF', 'ETC': 'ETC', 'UCITS': 'UCITS', 'MSCI': 'MSCI', 'FTSE': 'FTSE',
    'ESR': 'ESR', 'SRI': 'SRI', 'PAB': 'PAB', 'ESG': 'ESG', 'US': 'US', 'USA': 'USA',
    'EU': 'EU', 'EUR': 'EUR', 'USD': 'USD', 'GBP': 'GBP', 'DR': 'DR',
    'ACC': 'Acc', 'DIST': 'Dist',
}

# 交易所列表中的类型代码
LISTING_TYPES = {
    'ETF': InstrumentType.ETF,
    'ETC': InstrumentType.ETC,
    'CS': InstrumentType.STOCK,
}

LISTING_TICKER_SUFFIX = '.DE'

_WORD = re.compile(r'[^\W_]+')

FUNDAMENTAL_FIELDS = ('pe', 'pb', 'ebitda', 'enterprise_value', 'return_on_assets')


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


@dataclass
class PriceRecord:
    """
    价格/基本面记录 (按 ticker)

    Attributes:
        ticker: 行情代码
        closes, highs, lows, timestamps: K 线数组 (旧 -> 新)，需等长
        pe, pb, ebitda, enterprise_value, return_on_assets: 基本面
        error: 非空表示该记录的数据缺失
    """
    ticker: str
    closes: List[Optional[float]] = field(default_factory=list)
    highs: Optional[List[Optional[float]]] = None
    lows: Optional[List[Optional[float]]] = None
    timestamps: Optional[List[int]] = None
    pe: Optional[float] = None
    pb: Optional[float] = None
    ebitda: Optional[float] = None
    enterprise_value: Optional[float] = None
    return_on_assets: Optional[float] = None
    error: Optional[str] = None


@dataclass
class FundRecord:
    """
    基金数据记录 (按 ISIN)

    Attributes:
        isin: ISIN
        aum: 资产规模
        ter: 总费率
        name: 基金名称 (可选)
        error: 非空表示查询失败
    """
    isin: str
    aum: Optional[float] = None
    ter: Optional[float] = None
    name: Optional[str] = None
    error: Optional[str] = None


def _aligned(values: Optional[Sequence], keep: Sequence[int], length: int) -> Optional[list]:
    if values is None or len(values) != length:
        return None
    return [None if _is_missing(values[i]) else values[i] for i in keep]


def _apply_price_record(instrument: Instrument, record: PriceRecord) -> Instrument:
    if record.error:
        return replace(
            instrument,
            closes=[], highs=None, lows=None, timestamps=[],
            price_error=record.error,
            **{name: None for name in FUNDAMENTAL_FIELDS}
        )

    raw = record.closes or []
    keep = [i for i, close in enumerate(raw) if not _is_missing(close)]
    timestamps = _aligned(record.timestamps, keep, len(raw))

    return replace(
        instrument,
        closes=[float(raw[i]) for i in keep],
        highs=_aligned(record.highs, keep, len(raw)),
        lows=_aligned(record.lows, keep, len(raw)),
        timestamps=timestamps if timestamps is not None else [],
        price_error=None,
        **{name: getattr(record, name) for name in FUNDAMENTAL_FIELDS}
    )


def merge_price_records(instruments: Sequence[Instrument], records: Iterable[PriceRecord]) -> List[Instrument]:
    """
    按 ticker 合并价格记录

    带 error 的记录清空价格与基本面字段；收盘价缺失的 K 线被丢弃，
    high/low/timestamp 保持对齐。

    Args:
        instruments: 工作集
        records: 价格记录

    Returns:
        List[Instrument]: 新对象列表
    """
    by_ticker: Dict[str, PriceRecord] = {r.ticker: r for r in records if r.ticker}
    result = []
    for inst in instruments:
        record = by_ticker.get(inst.ticker) if inst.ticker else None
        result.append(inst if record is None else _apply_price_record(inst, record))
    logger.debug("Merged %d price records", len(by_ticker))
    return result


def merge_fund_records(instruments: Sequence[Instrument], records: Iterable[FundRecord]) -> List[Instrument]:
    """
    按 ISIN 合并 AUM/TER

    没有 long_name 时，记录中的名称成为展示名称。
    """
    by_isin: Dict[str, FundRecord] = {r.isin: r for r in records if r.isin}
    result = []
    for inst in instruments:
        record = by_isin.get(inst.isin)
        if record is None:
            result.append(inst)
            continue
        display_name = inst.display_name if inst.long_name else (record.name or inst.display_name)
        result.append(replace(inst, aum=record.aum, ter=record.ter, display_name=display_name))
    return result


def resolve_instrument_type(
    security_type: Optional[str],
    security_type2: Optional[str],
    isin: str
) -> InstrumentType:
    """
    根据标识符查询服务的证券类型推断资产类别

    Args:
        security_type: 证券类型 (如 'ETP')
        security_type2: 证券子类型 (如 'Common Stock', 'ETF', 'Mutual Fund')
        isin: ISIN (XS 开头的通常为 ETC)

    Returns:
        InstrumentType
    """
    if security_type2 == 'Common Stock':
        return InstrumentType.STOCK
    if security_type2 == 'ETF':
        return InstrumentType.ETF
    if security_type2 == 'ETC':
        return InstrumentType.ETC
    if security_type == 'ETP':
        return InstrumentType.ETF
    if security_type2 == 'Mutual Fund':
        return InstrumentType.ETF
    if (isin or '').upper().startswith('XS'):
        return InstrumentType.ETC
    return InstrumentType.UNKNOWN


def _title_word(match) -> str:
    word = match.group(0)
    return DISPLAY_ACRONYMS.get(word.upper(), word[:1].upper() + word[1:])


def to_display_name(long_name: Optional[str], fallback: str) -> str:
    """
    将全大写名称转换为标题格式，保留金融缩写

    Args:
        long_name: 原始名称 (通常全大写)
        fallback: long_name 为空时的返回值

    Returns:
        str: 展示名称
    """
    if not long_name:
        return fallback
    return _WORD.sub(_title_word, long_name.lower()).strip()


def instrument_from_listing_row(row: Mapping[str, Any]) -> Instrument:
    """
    交易所列表行 -> Instrument

    Args:
        row: 含 isin / instrument / wkn / mnemonic / instrument_type / group / currency

    Returns:
        Instrument (source = exchange-list)

    Raises:
        RecordError: 缺少 ISIN
    """
    isin = (row.get('isin') or '').strip()
    if not isin:
        raise RecordError(f"Listing row without ISIN: {dict(row)!r}")

    mnemonic = (row.get('mnemonic') or '').strip()
    name = (row.get('instrument') or '').strip()
    return Instrument(
        isin=isin,
        local_code=row.get('wkn') or None,
        mnemonic=mnemonic or None,
        ticker=f"{mnemonic}{LISTING_TICKER_SUFFIX}" if mnemonic else '',
        asset_class=LISTING_TYPES.get(row.get('instrument_type') or '', InstrumentType.UNKNOWN),
        source=Provenance.EXCHANGE_LIST,
        currency=row.get('currency') or None,
        exchange_group=row.get('group') or None,
        exchange_name=name or None,
        display_name=name or isin,
    )


_INSTRUMENT_FIELDS = {f.name for f in fields(Instrument)}


def instrument_from_record(record: Mapping[str, Any]) -> Instrument:
    """
    种子记录 (dict) -> Instrument

    Raises:
        RecordError: 缺少 ISIN、类型未知或 K 线数组长度不一致
    """
    if not isinstance(record, Mapping):
        raise RecordError(f"Seed record must be an object, got {type(record).__name__}")

    isin = record.get('isin')
    if not isin or not isinstance(isin, str):
        raise RecordError(f"Seed record without ISIN: {dict(record)!r}")

    unknown = sorted(set(record) - _INSTRUMENT_FIELDS)
    if unknown:
        logger.debug("Ignoring unknown fields for %s: %s", isin, ', '.join(unknown))

    values = {k: v for k, v in record.items() if k in _INSTRUMENT_FIELDS}
    try:
        if 'asset_class' in values:
            values['asset_class'] = InstrumentType(values['asset_class'])
        if 'source' in values:
            values['source'] = Provenance(values['source'])
    except ValueError as e:
        raise RecordError(f"{isin}: {e}") from e

    closes = values.get('closes') or []
    for name in ('highs', 'lows'):
        series = values.get(name)
        if series is not None and len(series) != len(closes):
            raise RecordError(f"{isin}: '{name}' has {len(series)} bars, 'closes' has {len(closes)}")
    if any(_is_missing(c) for c in closes):
        raise RecordError(f"{isin}: 'closes' contains missing values")

    instrument = Instrument(**values)
    if not instrument.display_name:
        instrument = replace(instrument, display_name=to_display_name(instrument.long_name, instrument.exchange_name or isin))
    return instrument


def load_instruments(path: Union[str, Path]) -> List[Instrument]:
    """
    从 JSON 文件加载种子记录

    Args:
        path: JSON 文件路径 (对象数组)

    Returns:
        List[Instrument]

    Raises:
        RecordError: 文件格式错误或 ISIN 重复
    """
    path = Path(path)
    with open(path, 'r', encoding='utf-8') as f:
        try:
            payload = json.load(f)
        except json.JSONDecodeError as e:
            raise RecordError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(payload, list):
        raise RecordError(f"{path}: expected a JSON array of instrument records")

    instruments = []
    seen = set()
    for record in payload:
        instrument = instrument_from_record(record)
        if instrument.isin in seen:
            raise RecordError(f"{path}: duplicate ISIN {instrument.isin}")
        seen.add(instrument.isin)
        instruments.append(instrument)

    logger.info("Loaded %d instruments from %s", len(instruments), path)
    return instruments
