"""Command line entry point: ``python -m demos [names...]``."""
import argparse
import sys
from utils.exceptions import PatternDemoError
from .catalog import DemoFactory
from .runner import DemoRunner, build_settings


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="demos",
        description="Run design-pattern demonstrations."
    )
    parser.add_argument("names", nargs="*", help="demos to run (default: all configured)")
    parser.add_argument("--config", help="YAML or JSON settings file")
    parser.add_argument("--list", action="store_true", help="list registered demos and exit")
    parser.add_argument("--log-level", help="override logging.log_level")
    args = parser.parse_args(argv)

    if args.list:
        for name in DemoFactory.list_available():
            print(name)
        return 0

    overrides = {'logging': {'log_level': args.log_level.upper()}} if args.log_level else None

    try:
        runner = DemoRunner(build_settings(config_path=args.config, overrides=overrides))
        runner.configure_logging()
        runner.run(args.names or None)
    except PatternDemoError as e:
        print(f"error: {e.message}", file=sys.stderr)
        for detail in e.details.get('errors', []):
            print(f"  {detail}", file=sys.stderr)
        for key in ('available_demos', 'available_types'):
            if key in e.details:
                print(f"  available: {', '.join(e.details[key])}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
