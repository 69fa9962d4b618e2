#!/usr/bin/env python3
"""
permopt: ordering optimization for work item schedules.

Main entry point for running both optimizers on a work item fixture.

Usage:
    python run_optimization.py --data tests/data/work_items.json --property WorkItemsTestDataCollection --sets
    python run_optimization.py --data items.json --iterations 100 --config config/genetic.yaml
"""

import sys

from permopt.cli import main


if __name__ == "__main__":
    sys.exit(main())
