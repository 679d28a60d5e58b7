import pandas as pd
import pytest

from search_benchmark import harness

import run_benchmark


def test_main_writes_outputs(tmp_path, capsys):
    csv_path = tmp_path / "results.csv"
    chart_path = tmp_path / "chart.html"
    exit_code = run_benchmark.main([
        "--num-arrays", "20", "--max-len", "50", "--seed", "1",
        "--csv", str(csv_path), "--chart", str(chart_path), "--no-progress",
    ])
    assert exit_code == 0
    assert len(pd.read_csv(csv_path)) == 20 * 3
    assert chart_path.exists()

    out = capsys.readouterr().out
    assert "Averaged Benchmark Results" in out
    assert "Interpolated binary search" in out
    assert "Search results successfully written" in out


def test_main_reports_failed_output_and_continues(tmp_path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    chart_path = tmp_path / "chart.html"
    exit_code = run_benchmark.main([
        "--num-arrays", "5", "--max-len", "20", "--seed", "1",
        "--csv", str(blocker / "results.csv"), "--chart", str(chart_path), "--no-progress",
    ])
    assert exit_code == 1
    assert chart_path.exists()
    assert "Failed to write search results" in capsys.readouterr().out


def test_main_rejects_invalid_lengths(tmp_path, capsys):
    exit_code = run_benchmark.main([
        "--min-len", "10", "--max-len", "10",
        "--csv", str(tmp_path / "r.csv"), "--chart", str(tmp_path / "c.html"), "--no-progress",
    ])
    assert exit_code == 2
    assert "Invalid configuration" in capsys.readouterr().out


def test_algorithm_selection():
    args = run_benchmark.parse_args(["--algorithms", "Binary search", "Interpolation search"])
    assert args.algorithms == ["Binary search", "Interpolation search"]


def test_cli_results_match_the_harness(tmp_path):
    csv_path = tmp_path / "results.csv"
    run_benchmark.main([
        "--num-arrays", "15", "--max-len", "40", "--seed", "8",
        "--csv", str(csv_path), "--chart", str(tmp_path / "chart.html"), "--no-progress",
    ])
    config = harness.BenchmarkConfig(num_arrays=15, max_len=40, seed=8)
    expected = harness.run_benchmark(config).to_dataframe()
    written = pd.read_csv(csv_path)
    assert list(written['sequence_length']) == list(expected['sequence_length'])
    assert list(written['comparison_count']) == list(expected['comparison_count'])
    assert list(written['target']) == list(expected['target'])


def test_help_describes_output_formats(capsys):
    with pytest.raises(SystemExit):
        run_benchmark.parse_args(["--help"])
    out = capsys.readouterr().out
    assert "HTML" in out
    assert "sequence_length" in out
