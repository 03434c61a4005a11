import os
import sys
import argparse

import config
from utils import setup_logging
from analyzer.chart import render_chart, format_edges
from analyzer.plot import save_entropy_plot
from analyzer.reporter import ScanReporter
from analyzer.session import EntropyScan
from dashboard.server import create_app


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Plot the Shannon entropy of a file per block and locate entropy edges"
    )
    parser.add_argument("input_file", help="File to analyze")
    parser.add_argument(
        "-b", "--block-size",
        type=int,
        default=config.BLOCK_SIZE,
        help="Bytes per block (default: %(default)s)",
    )
    parser.add_argument("--width", type=int, default=config.CHART_WIDTH,
                        help="Chart width (default: %(default)s)")
    parser.add_argument("--height", type=int, default=config.CHART_HEIGHT,
                        help="Chart height (default: %(default)s)")
    parser.add_argument(
        "-y", "--y-max",
        type=float,
        default=config.Y_MAX,
        help="Chart ceiling in bits/byte (default: highest block entropy)",
    )
    parser.add_argument("--high", type=float, default=config.HIGH_THRESHOLD,
                        help="Normalized threshold for rising edges (default: %(default)s)")
    parser.add_argument("--low", type=float, default=config.LOW_THRESHOLD,
                        help="Normalized threshold for falling edges (default: %(default)s)")
    parser.add_argument(
        "--precision",
        choices=config.SUPPORTED_PRECISIONS,
        default=config.PRECISION,
        help="Floating point precision of the computation (default: %(default)s)",
    )
    parser.add_argument("--edges", action="store_true", help="Print detected edges")
    parser.add_argument("--plot", metavar="PATH", help="Save a PNG plot to PATH")
    parser.add_argument("--report", action="store_true",
                        help=f"Write a JSON report to {config.REPORT_DIR}")
    parser.add_argument("--serve", action="store_true",
                        help="Serve the dashboard after scanning")
    return parser.parse_args(argv)


def apply_args(args):
    config.BLOCK_SIZE = args.block_size
    config.CHART_WIDTH = args.width
    config.CHART_HEIGHT = args.height
    config.Y_MAX = args.y_max
    config.HIGH_THRESHOLD = args.high
    config.LOW_THRESHOLD = args.low
    config.PRECISION = args.precision


def main(argv=None):
    args = parse_args(argv)
    apply_args(args)

    try:
        config.validate_config()
    except ValueError as e:
        print(e)
        sys.exit(1)

    setup_logging(config.LOG_DIR)

    if not os.path.isfile(args.input_file):
        print(f"Couldn't open file {args.input_file}.")
        sys.exit(1)

    session = EntropyScan(config)
    try:
        result = session.scan(args.input_file)
    except OSError as e:
        print(f"Could not read from file {args.input_file}, got error {e}")
        sys.exit(1)

    print(render_chart(result.samples, config.CHART_WIDTH, config.CHART_HEIGHT, config.Y_MAX))

    if args.edges:
        print()
        print(format_edges(result.edges))

    if args.plot:
        path = save_entropy_plot(
            result, args.plot, config.HIGH_THRESHOLD, config.LOW_THRESHOLD
        )
        print(f"[ANALYZER] Plot saved: {path}")

    if args.report:
        reporter = ScanReporter(config.REPORT_DIR)
        path = reporter.generate_report(result, session.event_store.get_all())
        print(f"[ANALYZER] Report saved: {path}")

    if args.serve:
        app = create_app(session, report_dir=config.REPORT_DIR)
        print(f"[ANALYZER] Dashboard: http://{config.DASHBOARD_HOST}:{config.DASHBOARD_PORT}")
        print("[ANALYZER] Press Ctrl+C to stop.\n")
        app.run(
            host=config.DASHBOARD_HOST,
            port=config.DASHBOARD_PORT,
            debug=False,
            use_reloader=False,
        )


if __name__ == "__main__":
    main()
