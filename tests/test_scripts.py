import csv

import demo
import experiments


def test_run_one_metrics():
    _, text = experiments.generate_dataset("english_like", 4096, seed=1)
    row = experiments.run_one(text)

    assert row.correctness_ok == 1
    assert row.text_length == 4096
    assert row.encoded_bits <= row.fixed_width_bits
    assert row.compression_ratio <= 1.0
    assert row.entropy_bits <= row.bits_per_symbol < row.entropy_bits + 1


def test_run_one_single_symbol():
    row = experiments.run_one("aaaa")
    assert row.unique_symbols == 1
    assert row.encoded_bits == 4
    assert row.fixed_width_bits == 4
    assert row.correctness_ok == 1


def test_generators_are_seeded():
    for name in experiments.GENERATOR_REGISTRY:
        assert experiments.generate_dataset(name, 256, 7) == experiments.generate_dataset(name, 256, 7)


def test_unknown_generator_falls_back_to_uniform():
    name, text = experiments.generate_dataset("nonsense", 100, seed=3)
    assert name == "nonsense_fallback_uniform"
    assert len(text) == 100


def test_experiments_main_writes_csv(tmp_path, capsys):
    rc = experiments.main([
        "--outdir", str(tmp_path),
        "--runs", "2",
        "--exp1_size_kb", "1",
        "--exp1_generators", "uniform,zipf",
        "--exp2_min_kb", "1",
        "--exp2_max_kb", "2",
        "--exp2_generators", "english_like",
        "--no_exp3",
        "--no_plots",
    ])
    assert rc == 0

    with (tmp_path / "metrics.csv").open(newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    # exp1: 2 generators x 2 runs, exp2: 2 sizes x 2 runs
    assert len(rows) == 8
    assert all(r["correctness_ok"] == "1" for r in rows)

    with (tmp_path / "summary.csv").open(newline="", encoding="utf-8") as f:
        summary = list(csv.DictReader(f))
    assert len(summary) == 4
    assert all(r["n_runs"] == "2" for r in summary)
    assert "Correctness rate across all runs: 1.000" in capsys.readouterr().out


def test_experiments_main_draws_charts(tmp_path):
    rc = experiments.main([
        "--outdir", str(tmp_path),
        "--runs", "1",
        "--exp1_size_kb", "1",
        "--exp1_generators", "uniform",
        "--exp2_min_kb", "1",
        "--exp2_max_kb", "1",
        "--exp2_generators", "uniform",
        "--no_exp3",
    ])
    assert rc == 0
    assert (tmp_path / "exp1_compression_ratio.png").exists()
    assert (tmp_path / "exp2_time_uniform.png").exists()


def test_demo_round_trips_files(tmp_path, capsys):
    src = tmp_path / "simpleText.txt"
    src.write_text("abracadabra\nalakazam\n", encoding="utf-8")

    rc = demo.main([str(src), "--show-tree", "--preview", "0"])
    out = capsys.readouterr().out

    assert rc == 0
    assert (tmp_path / "simpleText.txt.enc").exists()
    assert "\nabracadabra\nalakazam" in out
    assert "single symbol: 9 bits -> 'aaaaaaaaa'" in out
    assert "empty text: ''" in out


def test_demo_builtin_only():
    assert demo.main([]) == 0
