#!/usr/bin/env python3
"""
Convenience wrapper to benchmark a callable from the command line.

Usage examples:
    python scripts/run_benchmark.py json:dumps '{"a": 1}' --label "json.dumps"
    python scripts/run_benchmark.py mypkg.work:run --iterations 50 --log-file bench.log
    python scripts/run_benchmark.py mypkg.work:run --track
"""

import sys

from benchmarker.cli import main


if __name__ == "__main__":
    sys.exit(main())
