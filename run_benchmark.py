import sys
import time
import argparse
from tabulate import tabulate

from search_benchmark.searches import SEARCH_ALGORITHMS
from search_benchmark.harness import BenchmarkConfig, run_benchmark, summarize_results
from search_benchmark.results_writer import write_search_results, draw_result_graph


def run(config: BenchmarkConfig, csv_path: str, chart_path: str) -> int:
    """
    Generates the arrays, runs every search method on them, prints the averaged
    results and writes them to the CSV file and the chart.
    Returns the process exit code: 1 if any output could not be written.
    """
    print("--- Search Algorithm Complexity Benchmark ---")
    config.validate()

    # 1. Generate sorted arrays, shortest first, and search each one
    print(f"\n1. Generating {config.num_arrays} sorted arrays "
          f"(lengths {config.min_len}-{config.max_len - 1}, value step {config.value_step}) "
          f"and running {len(config.algorithms)} search methods...")
    start_time = time.perf_counter()
    results = run_benchmark(config)
    elapsed = (time.perf_counter() - start_time) * 1e3  # in milliseconds
    print(f"Generated and searched {len(results)} arrays in {elapsed:.2f} ms")

    # 2. Summary table
    print("\n\n--- Averaged Benchmark Results ---")
    summary = summarize_results(results)
    headers = ["Search Method", "Avg Comparisons", "Median Comparisons", "Max Comparisons", "Success Rate"]
    table_data = [
        [row['Search Method'], f"{row['Avg Comparisons']:.2f}", f"{row['Median Comparisons']:.1f}",
         row['Max Comparisons'], f"{row['Success Rate']:.1f}%"]
        for _, row in summary.iterrows()
    ]
    print(tabulate(table_data, headers=headers, tablefmt="grid"))

    # 3. Write outputs. A failed output is reported but does not stop the other one.
    exit_code = 0
    try:
        write_search_results(results, csv_path)
        print(f"\nSearch results successfully written to {csv_path}")
    except OSError as e:
        print(f"\nFailed to write search results:\n{e}")
        exit_code = 1

    try:
        draw_result_graph(results, chart_path)
        print(f"Graph successfully drawn to {chart_path}")
    except OSError as e:
        print(f"Failed to draw search result graph:\n{e}")
        exit_code = 1

    print("-" * 80)
    return exit_code


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Count the comparisons binary, interpolation and interpolated binary search "
                    "need on randomly generated sorted arrays.",
        epilog="Output formats: the CSV is in long form, one row per (search method, array) with the "
               "columns algorithm, sequence_length, comparison_count, found_index and target. "
               "The chart is an interactive HTML page (plotly), not an SVG image.")
    parser.add_argument("--num-arrays", type=int, default=1000,
                        help="Number of sorted arrays to generate.")
    parser.add_argument("--min-len", type=int, default=2,
                        help="Minimum array length (inclusive).")
    parser.add_argument("--max-len", type=int, default=500,
                        help="Maximum array length (exclusive).")
    parser.add_argument("--value-step", type=int, default=10,
                        help="Width of the value window each successive element is drawn from.")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducible runs.")
    parser.add_argument("--algorithms", nargs="+", choices=list(SEARCH_ALGORITHMS),
                        default=list(SEARCH_ALGORITHMS), metavar="NAME",
                        help="Search methods to run. Choices: " + ", ".join(f'"{n}"' for n in SEARCH_ALGORITHMS))
    parser.add_argument("--csv", default="search_results.csv",
                        help="Path of the CSV results file (long form: one row per search method and array).")
    parser.add_argument("--chart", default="search_results.html",
                        help="Path of the chart, written as standalone interactive HTML.")
    parser.add_argument("--no-progress", action="store_true",
                        help="Hide the progress bar.")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    config = BenchmarkConfig(
        num_arrays=args.num_arrays,
        min_len=args.min_len,
        max_len=args.max_len,
        value_step=args.value_step,
        seed=args.seed,
        show_progress=not args.no_progress,
        algorithms=args.algorithms,
    )
    try:
        return run(config, args.csv, args.chart)
    except ValueError as e:
        print(f"Invalid configuration: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
