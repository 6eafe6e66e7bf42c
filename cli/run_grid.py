"""Command-line driver: run a component layout for a number of ticks."""
import argparse
import logging
import sys

from shipgrid.core.event_bus import EventBus
from shipgrid.factory import build_manager
from shipgrid.loader import LayoutLoader
from shipgrid.telemetry import LedgerRecorder
from shipgrid.utils.errors import SimulationError, format_error, format_success
from utils.logger import setup_logging

logger = logging.getLogger(__name__)


def run(layout, ticks, quiet=False, out=None):
    """Tick a layout and print the manager status after each tick.

    Returns:
        tuple: (ComponentManager, Resources, LedgerRecorder)
    """
    out = out or sys.stdout
    event_bus = EventBus()
    recorder = LedgerRecorder(event_bus)
    manager, resources = build_manager(layout, event_bus=event_bus)

    print(f"initial state: {manager}", file=out)
    for _ in range(ticks):
        manager.update(resources)
        if not quiet:
            print(f"{manager} {resources}", file=out)
    print(f"Done! End state is {resources}", file=out)
    return manager, resources, recorder


def main(argv=None):
    parser = argparse.ArgumentParser(description="Ship resource grid driver")
    parser.add_argument("--layout", default="layouts/reactor_demo.yaml", help="Layout file (.yaml or .json)")
    parser.add_argument("--ticks", type=int, default=40, help="Number of ticks to run")
    parser.add_argument("--log-file", default=None, help="Log file or directory")
    parser.add_argument("--no-log-file", action="store_true", help="Log to the console only")
    parser.add_argument("--debug", action="store_true", help="Log every resolution phase")
    parser.add_argument("--quiet", action="store_true", help="Only print the final state")
    args = parser.parse_args(argv)

    setup_logging(debug=args.debug, quiet=args.quiet, log_file=args.log_file,
                  to_file=not args.no_log_file)

    try:
        layout = LayoutLoader.load(args.layout)
        _, _, recorder = run(layout, args.ticks, quiet=args.quiet)
    except SimulationError as e:
        print(format_error("LAYOUT", str(e), "Check the layout file"))
        return 1

    print(format_success(f"Ran {len(recorder)} ticks", recorder.summary()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
