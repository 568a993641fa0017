#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Test script for DedupGrouper.

Tests:
1. Issuer priority, preferred currency, AUM and TER ordering
2. AUM floor revocation and promotion
3. Uniqueness of winners and group membership
4. Stocks as singleton groups
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from screener.dedup import DedupGrouper
from tests.helpers import make_fund, make_stock

WORLD_KEY = 'R:WORLD|SR:_|F:_|S:_'


@pytest.fixture
def grouper():
    return DedupGrouper(aum_floor=100_000_000)


def test_issuer_priority_beats_aum(grouper):
    """iShares (5B) wins over Xtrackers (6B) on issuer priority."""
    print("\n" + "=" * 60)
    print("Test: Issuer priority")
    print("=" * 60)

    ishares = make_fund('IE00B4L5Y983', 'iShares Core MSCI World UCITS ETF', aum=5e9, ter=0.20)
    xtrackers = make_fund('IE00BJ0KDQ92', 'Xtrackers MSCI World UCITS ETF 1C', aum=6e9, ter=0.19)

    groups = grouper.group([xtrackers, ishares])
    assert len(groups) == 1

    group = groups[0]
    print(f"  Key: {group.key}")
    print(f"  Candidates: {group.isins}")
    print(f"  Winner: {group.winner.isin}")

    assert group.key == WORLD_KEY
    assert group.winner.isin == 'IE00B4L5Y983'
    assert group.isins == ['IE00B4L5Y983', 'IE00BJ0KDQ92']

    print("\n[PASS] Issuer priority test passed!")


def test_preferred_currency_then_aum_then_ter(grouper):
    usd = make_fund('A1', 'iShares Core MSCI World UCITS ETF', aum=50e9, currency='USD')
    eur_small = make_fund('A2', 'iShares MSCI World UCITS ETF', aum=1e9, ter=0.20)
    eur_large = make_fund('A3', 'iShares MSCI World UCITS ETF Dist', aum=2e9, ter=0.50)
    eur_cheap = make_fund('A4', 'iShares MSCI World UCITS ETF (Acc)', aum=2e9, ter=0.10)

    group = grouper.group([usd, eur_small, eur_large, eur_cheap])[0]
    assert group.isins == ['A4', 'A3', 'A2', 'A1']
    assert group.winner.isin == 'A4'


def test_input_order_breaks_full_ties(grouper):
    first = make_fund('B1', 'iShares MSCI World UCITS ETF', aum=1e9, ter=0.2)
    second = make_fund('B2', 'iShares MSCI World UCITS ETF', aum=1e9, ter=0.2)
    assert grouper.group([first, second])[0].winner.isin == 'B1'
    assert grouper.group([second, first])[0].winner.isin == 'B2'


def test_unknown_aum_sorts_last_but_qualifies(grouper):
    known = make_fund('C1', 'iShares MSCI World UCITS ETF', aum=50e6)
    unknown = make_fund('C2', 'iShares MSCI World UCITS ETF Dist', aum=None)

    group = grouper.group([unknown, known])[0]
    assert group.isins == ['C1', 'C2']
    assert group.winner.isin == 'C2'


def test_below_floor_winner_is_replaced(grouper):
    """Winner below the AUM floor is revoked, next qualifying candidate promoted."""
    tiny = make_fund('D1', 'iShares Core MSCI World UCITS ETF', aum=50e6)
    large = make_fund('D2', 'Xtrackers MSCI World UCITS ETF 1C', aum=200e6)

    annotated = grouper.run([tiny, large])
    by_isin = {i.isin: i for i in annotated}

    assert by_isin['D1'].is_dedup_winner is False
    assert by_isin['D2'].is_dedup_winner is True
    assert by_isin['D1'].dedup_group == WORLD_KEY


def test_group_without_qualifying_candidate_has_no_winner(grouper):
    a = make_fund('E1', 'iShares Core MSCI World UCITS ETF', aum=10e6)
    b = make_fund('E2', 'Xtrackers MSCI World UCITS ETF 1C', aum=20e6)

    group = grouper.group([a, b])[0]
    assert group.winner is None
    assert all(i.is_dedup_winner is False for i in grouper.apply([a, b], [group]))


def test_lower_floor_keeps_original_winner():
    a = make_fund('F1', 'iShares Core MSCI World UCITS ETF', aum=50e6)
    b = make_fund('F2', 'Xtrackers MSCI World UCITS ETF 1C', aum=200e6)
    assert DedupGrouper(aum_floor=10e6).group([a, b])[0].winner.isin == 'F1'


def test_winner_uniqueness_and_candidates(grouper):
    instruments = [
        make_fund('G1', 'iShares Core MSCI World UCITS ETF', aum=5e9),
        make_fund('G2', 'Xtrackers MSCI World UCITS ETF 1C', aum=6e9),
        make_fund('G3', 'Vanguard MSCI World ETF', aum=1e9),
        make_fund('G4', 'iShares Core MSCI EM IMI UCITS ETF', aum=2e9),
        make_fund('G5', 'WisdomTree Physical Gold', aum=3e9),
        make_stock('DE0007164600', 'SAP SE'),
    ]
    groups = grouper.group(instruments)
    annotated = grouper.apply(instruments, groups)

    # every instrument in exactly one group
    members = [isin for g in groups for isin in g.isins]
    assert sorted(members) == sorted(i.isin for i in instruments)

    for g in groups:
        winners = [i for i in annotated if i.dedup_group == g.key and i.is_dedup_winner]
        assert len(winners) <= 1

    by_isin = {i.isin: i for i in annotated}
    assert by_isin['G1'].dedup_candidates == ['G3', 'G2']
    assert by_isin['G2'].dedup_candidates == ['G1', 'G3']
    assert by_isin['G4'].dedup_candidates == []
    assert by_isin['G4'].is_dedup_winner is True


def test_stocks_are_singleton_winners(grouper):
    a = make_stock('DE0007164600', 'SAP SE')
    b = make_stock('US8030542042', 'SAP SE')

    annotated = grouper.run([a, b])
    assert [i.dedup_group for i in annotated] == ['DE0007164600', 'US8030542042']
    assert all(i.is_dedup_winner for i in annotated)


def test_dedup_does_not_mutate_input(grouper):
    fund = make_fund('H1', 'iShares Core MSCI World UCITS ETF', aum=5e9)
    grouper.run([fund])
    assert fund.dedup_group is None
    assert fund.is_dedup_winner is None


def test_dedup_is_deterministic(grouper):
    instruments = [
        make_fund('J1', 'iShares Core MSCI World UCITS ETF', aum=5e9),
        make_fund('J2', 'Xtrackers MSCI World UCITS ETF 1C', aum=6e9),
        make_fund('J3', 'Invesco Bloomberg Commodity UCITS ETF', aum=1e9),
    ]
    assert grouper.run(instruments) == grouper.run(instruments)
