"""Command-line entry point: benchmark a ``module:callable`` target."""

import argparse
import importlib
from typing import Any, Callable, List, Optional

from .benchmarks.config import BenchmarkConfig, ConfigurationError, load_config
from .benchmarks.runner import run_benchmark
from .benchmarks.tracker import PerformanceTracker


def resolve_target(spec: str) -> Callable[..., Any]:
    """Import ``package.module:attr.path`` and return the callable."""
    module_name, sep, attr_path = spec.partition(':')
    if not sep or not module_name or not attr_path:
        raise ConfigurationError(f"Target must look like 'module:callable', got {spec!r}")

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(f"Cannot import module {module_name!r}: {exc}") from exc

    for attr in attr_path.split('.'):
        try:
            target = getattr(target, attr)
        except AttributeError as exc:
            raise ConfigurationError(f"{module_name!r} has no attribute {attr_path!r}") from exc

    if not callable(target):
        raise ConfigurationError(f"{spec!r} is not callable")
    return target


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Run a calibrated microbenchmark')
    parser.add_argument('target', help='Callable to benchmark, as package.module:function')
    parser.add_argument('args', nargs='*', help='String arguments passed to the target')
    parser.add_argument('--config', help='Path to benchmark config JSON')
    parser.add_argument('--iterations', type=int, help='Explicit iteration count (skips calibration)')
    parser.add_argument('--label', help='Report heading')
    parser.add_argument('--verbose', action='store_true', default=None,
                        help='Print every iteration')
    parser.add_argument('--keep-outliers', action='store_true',
                        help='Do not trim the lowest/highest samples')
    parser.add_argument('--log-file', help='Append the report to this file')
    parser.add_argument('--warmup', type=int, help='Warm-up runs before calibration')
    parser.add_argument('--track', action='store_true',
                        help='Run the target once under a PerformanceTracker instead')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        target = resolve_target(args.target)
        base = load_config(args.config) if args.config else BenchmarkConfig()
        config = base.with_overrides(
            iterations=args.iterations,
            label=args.label,
            verbose=args.verbose,
            remove_outliers=False if args.keep_outliers else None,
            log_file=args.log_file,
            warmup_iterations=args.warmup,
        )
    except ConfigurationError as exc:
        parser.error(str(exc))

    operation_args = list(args.args)

    def operation() -> Any:
        return target(*operation_args)

    if args.track:
        with PerformanceTracker(args.label or args.target):
            operation()
        return 0

    run_benchmark(operation, config)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
