#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Unified Entry Point

Pipeline:
1. Load configuration (YAML) and seed instruments (JSON)
2. Deduplicate ETFs/ETCs by exposure
3. Score and rank the working set
4. Apply the display filter and print / save the ranking

Usage:
    # Rank with the default configuration
    python run.py --input examples/sample_instruments.json

    # Override momentum weights and save the report
    python run.py --input data.json --weights 0.2 0.3 0.5 --output Reports/ranking.csv

    # List the registered factors
    python run.py --list-factors
"""

import sys
import argparse
import logging
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

logger = logging.getLogger("screener.run")


def main():
    parser = argparse.ArgumentParser(
        description='ETFScreener - Exposure Dedup and Momentum Ranking',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default ranking
  python run.py --input examples/sample_instruments.json

  # Custom weights, ETFs only, top 20
  python run.py --input data.json --weights 0.2 0.3 0.5 --type etf --top 20

  # Include dedup losers and save as Excel
  python run.py --input data.json --show-deduped --output Reports/ranking.xlsx
        """
    )

    # Configuration
    parser.add_argument(
        '--config', '-c',
        type=str,
        help='Path to screener configuration YAML file'
    )

    parser.add_argument(
        '--input', '-i',
        type=str,
        help='Path to instruments JSON file'
    )

    # Scoring overrides
    parser.add_argument(
        '--weights', '-w',
        type=float,
        nargs=3,
        metavar=('W1M', 'W3M', 'W6M'),
        help='Momentum weights for 1M / 3M / 6M returns'
    )

    parser.add_argument(
        '--atr-multiplier',
        type=float,
        help='ATR multiplier for the selling threshold'
    )

    parser.add_argument(
        '--aum-floor',
        type=float,
        help='Minimum AUM for a dedup winner'
    )

    # Display overrides
    parser.add_argument(
        '--type', '-t',
        type=str,
        choices=['all', 'etf', 'stock'],
        help='Instrument type filter'
    )

    parser.add_argument(
        '--show-deduped',
        action='store_true',
        help='Show exchange-list funds that lost their dedup group'
    )

    parser.add_argument(
        '--sort',
        type=str,
        help='Sort column (Instrument field, e.g. combined_score)'
    )

    parser.add_argument(
        '--top', '-n',
        type=int,
        default=25,
        help='Number of rows to print'
    )

    # Output options
    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Save the ranking report (.csv or .xlsx)'
    )

    parser.add_argument(
        '--log-level',
        type=str,
        help='Log level (DEBUG, INFO, WARNING)'
    )

    parser.add_argument(
        '--list-factors',
        action='store_true',
        help='List all registered factors'
    )

    args = parser.parse_args()

    if args.list_factors:
        list_factors()
        return

    if not args.input:
        print("Error: Must specify --input")
        print("Use --help for usage information")
        sys.exit(1)

    run_screener(args)


def list_factors():
    """List all registered factors."""
    from screener.factors import FactorType
    from screener.factors.registry import default_registry

    registry = default_registry()

    print("\n" + "=" * 60)
    print("Available Factors in ETFScreener")
    print("=" * 60)

    print("\n[Time Series Factors] 时序因子")
    for name in registry.list_factors(FactorType.TIME_SERIES):
        print(f"  - {name}")

    print("\n[Cross-Sectional Factors] 截面因子")
    for name in registry.list_factors(FactorType.XS_GLOBAL):
        print(f"  - {name}")

    print("\n" + "=" * 60)


def run_screener(args):
    """Load, dedup, score, filter and report."""
    from screener.data import load_instruments
    from screener.exceptions import ScreenerError
    from screener.instrument import MomentumWeights
    from screener.log_config import setup_logging
    from screener.metrics import RankingReport
    from screener.processors import ScreenerConfigLoader, WorkingSet

    config = ScreenerConfigLoader(args.config)
    if args.config and not config.config_path.exists():
        print(f"Error: Config file not found: {args.config}")
        sys.exit(1)

    try:
        config.load()
        setup_logging(args.log_level or config.get_log_level())

        ws = WorkingSet(config)
        ws.add(load_instruments(args.input))

        if args.weights:
            ws.set_weights(MomentumWeights(*args.weights))
        if args.atr_multiplier is not None:
            ws.set_atr_multiplier(args.atr_multiplier)
        if args.aum_floor is not None:
            ws.set_aum_floor(args.aum_floor)
        else:
            ws.run_dedup()

        settings = ws.display_settings(
            type_filter=args.type,
            show_deduped=True if args.show_deduped else None,
            sort_column=args.sort,
        )
        rows = ws.rows(settings)
    except (ScreenerError, OSError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    report = RankingReport()
    report.add_instruments(rows)

    _print_ranking(report, len(ws), args.top)

    if args.output:
        report.save(args.output)


def _print_ranking(report, total: int, top: int):
    """Print the top rows."""
    summary = report.summary()

    print(f"\n{'='*60}")
    print("ETFScreener - Ranking")
    print(f"{'='*60}")
    print(f"Working set: {total}  Displayed: {summary.get('total', 0)}")
    for type_name, count in summary.get('types', {}).items():
        print(f"  {type_name}: {count}")
    print(f"{'='*60}\n")

    frame = report.to_display_frame(top=top)
    if frame.empty:
        print("(no instruments to display)")
    else:
        print(frame.to_string(index=False))

    print(f"\n{'='*60}")


if __name__ == '__main__':
    main()
