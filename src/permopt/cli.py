"""
Command-line runner for permopt.

Loads a work item fixture, runs the random benchmark and the genetic search
on every candidate set, and prints the results as tables.

Usage:
    permopt --data tests/data/work_items.json --property WorkItemsTestDataCollection --sets
    permopt --data items.json --iterations 100 --config config/genetic.yaml --seed 7
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np
from pydantic import ValidationError

from .data.fixture_loader import load_work_item_sets, load_work_items
from .data.work_items import COST_FUNCTIONS, WorkItem
from .optimization.config import GeneticSearchConfig
from .optimization.genetic import GeneticOptimizer
from .optimization.random_search import RandomSearchOptimizer
from .utils.result_table import format_result

logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Find a low-cost ordering of work items with random and genetic search",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run on every candidate set stored under a property
  permopt --data tests/data/work_items.json --property WorkItemsTestDataCollection --sets

  # Single collection, 100 random iterations, custom genetic config
  permopt --data items.json --iterations 100 --config config/genetic.yaml
        """
    )

    parser.add_argument(
        "--data",
        type=str,
        required=True,
        help="Path to the JSON work item fixture"
    )

    parser.add_argument(
        "--property",
        type=str,
        default=None,
        help="Property holding the work items (default: top-level value)"
    )

    parser.add_argument(
        "--sets",
        action="store_true",
        default=False,
        help="The fixture holds a list of candidate sets rather than one set"
    )

    parser.add_argument(
        "--iterations",
        type=int,
        default=25,
        help="Random search iterations (default: 25)"
    )

    parser.add_argument(
        "--cost",
        type=str,
        default="time",
        choices=sorted(COST_FUNCTIONS),
        help="Cost function to minimize (default: time)"
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to genetic search config YAML (default: built-in defaults)"
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for both optimizers (overrides the config seed)"
    )

    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory for JSON run logs of the genetic search (optional)"
    )

    return parser.parse_args(argv)


def load_genetic_config(config_path: Optional[str], seed: Optional[int]) -> GeneticSearchConfig:
    """Load the genetic config from YAML if given, applying a seed override."""
    if config_path:
        path = Path(config_path)
        if path.exists():
            config = GeneticSearchConfig.from_yaml(path)
            logger.info(f"Loaded genetic config from: {path}")
        else:
            logger.warning(f"Config file not found: {path}, using defaults")
            config = GeneticSearchConfig()
    else:
        config = GeneticSearchConfig()

    if seed is not None:
        config.seed = seed

    return config


def run_candidate_set(
    index: int,
    items: List[WorkItem],
    cost_name: str,
    iterations: int,
    config: GeneticSearchConfig,
    output_dir: Optional[Path] = None
) -> Dict[str, int]:
    """
    Run both optimizers on one candidate set and print their results.

    Returns:
        Dictionary with the random and genetic best costs
    """
    cost_function = COST_FUNCTIONS[cost_name]
    rng = np.random.default_rng(config.seed)

    random_result = RandomSearchOptimizer().optimize(items, cost_function, iterations, rng=rng)
    print(format_result(f"Random Benchmark Result (set {index})", random_result))
    print()

    run_id = f"{index}_{datetime.now().strftime('%Y%m%d_%H%M%S')}" if output_dir else None
    genetic = GeneticOptimizer(config, output_dir=output_dir, run_id=run_id)
    genetic_result = genetic.optimize(items, cost_function, rng=rng)
    print(format_result(f"Genetic Result (set {index})", genetic_result))
    print()

    return {
        "random_cost": random_result.best_cost,
        "genetic_cost": genetic_result.best_cost,
    }


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    logger.info(f"Data: {args.data}")
    logger.info(f"Property: {args.property or '(top level)'}")
    logger.info(f"Random iterations: {args.iterations}")
    logger.info(f"Cost function: {args.cost}")

    try:
        config = load_genetic_config(args.config, args.seed)

        if args.sets:
            if not args.property:
                logger.error("--sets requires --property")
                return 2
            item_sets = load_work_item_sets(Path(args.data), args.property)
        else:
            item_sets = [load_work_items(Path(args.data), args.property)]

        output_dir = Path(args.output_dir) if args.output_dir else None

        summaries = [
            run_candidate_set(index, items, args.cost, args.iterations, config, output_dir)
            for index, items in enumerate(item_sets, 1)
        ]

        for index, summary in enumerate(summaries, 1):
            logger.info(
                f"Set {index}: random={summary['random_cost']}, genetic={summary['genetic_cost']}"
            )

        return 0

    except ValidationError as e:
        logger.error(f"At least one data row failed validation. {e}")
        return 1
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
