#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Test script for NameNormalizer and the token matcher.

Tests:
1. Tokenization and whole-token phrase matching
2. Provider detection (longest alias wins) and priority
3. Abbreviation expansion
4. Idempotence of normalization
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from screener.dedup import NameNormalizer, PhraseTable, tokenize
from screener.dedup.tokenizer import AliasTable, contains_phrase, remove_phrase
from screener.dedup.vocabulary import UNKNOWN_PROVIDER_PRIORITY


@pytest.fixture
def normalizer():
    return NameNormalizer()


def test_tokenize_splits_on_punctuation():
    """Whitespace, punctuation and underscores are separators."""
    assert tokenize('iShares Core S&P 500 (Acc)') == ('ISHARES', 'CORE', 'S', 'P', '500', 'ACC')
    assert tokenize('ISHSIII-CORE MSCI WLD') == ('ISHSIII', 'CORE', 'MSCI', 'WLD')
    assert tokenize('') == ()
    assert tokenize(None) == ()


def test_phrase_matching_is_whole_token():
    tokens = tokenize('Amundi MSCI Australia')
    assert not contains_phrase(tokens, ('US',))
    assert contains_phrase(tokens, ('AUSTRALIA',))
    assert remove_phrase(('A', 'B', 'A', 'C'), ('A',)) == ('B', 'C')


def test_phrase_table_prefers_longest_match():
    table = PhraseTable([
        ('EURO STOXX', 'EUROSTOXX'),
        ('EURO STOXX 50', 'EUROSTOXX50'),
    ])
    assert table.replace_longest(tokenize('Euro Stoxx 50 ETF')) == ('EUROSTOXX50', 'ETF')
    assert table.replace_longest(tokenize('Euro Stoxx Banks')) == ('EUROSTOXX', 'BANKS')


def test_alias_table_order():
    table = AliasTable([(('EM', 'EMERGING'), 'EM'), (('WORLD',), 'WORLD')])
    tokens = tokenize('World Emerging')
    assert table.first(tokens) == 'EM'
    assert table.all(tokens) == ['EM', 'WORLD']
    assert not table.any(tokenize('Japan'))


def test_provider_strip(normalizer):
    """Detect the issuer and remove every occurrence of its alias."""
    print("\n" + "=" * 60)
    print("Test: Provider strip")
    print("=" * 60)

    result = normalizer.normalize('iShares Core S&P 500 UCITS ETF')
    print(f"  {result}")
    assert result.tokens == ('CORE', 'SP500', 'UCITS', 'ETF')
    assert result.issuer == 'ISHARES'
    assert result.priority == 1

    truncated = normalizer.normalize('ISHSIII-CORE MSCI WLD')
    assert truncated.issuer == 'ISHARES'
    assert truncated.text == 'CORE MSCI WORLD'

    print("\n[PASS] Provider strip test passed!")


def test_longest_provider_alias_wins(normalizer):
    result = normalizer.normalize('SS SPDR S&P 500')
    assert result.issuer == 'SPDR'
    assert result.priority == 5
    assert result.tokens == ('SP500',)


def test_unknown_provider_priority(normalizer):
    result = normalizer.normalize('Acme Global Robotics ETF')
    assert result.issuer is None
    assert result.priority == UNKNOWN_PROVIDER_PRIORITY
    assert normalizer.provider_priority('Acme Global Robotics ETF') == UNKNOWN_PROVIDER_PRIORITY


def test_provider_priority_order(normalizer):
    assert normalizer.provider_priority('iShares Core MSCI World') < normalizer.provider_priority('Vanguard MSCI World')
    assert normalizer.provider_priority('Vanguard MSCI World') < normalizer.provider_priority('Xtrackers MSCI World')


def test_abbreviation_expansion(normalizer):
    assert normalizer.normalize('Vanguard FTSE All-World UCITS ETF').tokens == ('ALLWORLD', 'WORLD', 'UCITS', 'ETF')
    assert normalizer.normalize('iShares Edge MSCI World Minimum Volatility').tokens == (
        'EDGE', 'MSCI', 'WORLD', 'MINVOL'
    )
    assert normalizer.normalize('iShares $ Treasury Bond 20+yr UCITS ETF').tokens == (
        'GOVBOND', 'BOND', 'LONGDURATION', 'UCITS', 'ETF'
    )


@pytest.mark.parametrize('name', [
    'iShares Core MSCI World UCITS ETF',
    'Xtrackers MSCI Emerging Markets UCITS ETF 1C',
    'Vanguard FTSE All-World UCITS ETF',
    'SPDR S&P 500 ESG Leaders',
    'ISHSIII-CORE MSCI WLD',
    'Amundi Euro Stoxx 50 II UCITS ETF Acc',
    'WisdomTree Physical Gold',
    'iShares $ Treasury Bond 20+yr UCITS ETF',
])
def test_normalize_is_idempotent(normalizer, name):
    once = normalizer.normalize(name)
    twice = normalizer.normalize(once.text)
    assert twice.tokens == once.tokens
    assert twice.text == once.text
