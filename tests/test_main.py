import pytest

import main


def test_transform_path():
    assert main.transform_path(0) == "radix-2 FFT"
    assert main.transform_path(2) == "radix-2 FFT"
    assert main.transform_path(1024) == "radix-2 FFT"
    assert main.transform_path(3) == "Bluestein chirp-z"
    assert main.transform_path(1000) == "Bluestein chirp-z"


def test_describe_size():
    assert main.describe_size(12) == "N=12 = 2^2 * 3"
    assert main.describe_size(17) == "N=17 = 17"
    assert main.describe_size(1) == "N=1"


@pytest.mark.parametrize("mode", ["forward", "roundtrip", "shift", "all"])
def test_single_size(mode, capsys):
    assert main.main([mode, "12", "--num-tests", "1"]) == 0
    out = capsys.readouterr().out
    assert "✓ PASS" in out
    assert "✅ PASS" in out


def test_all_sizes(capsys):
    assert main.main(["shift", "--all"]) == 0
    out = capsys.readouterr().out
    for N in main.ALL_SIZES:
        assert f"N={N}" in out


def test_verbose_prints_factorization(capsys):
    assert main.main(["forward", "24", "-v", "--num-tests", "1"]) == 0
    out = capsys.readouterr().out
    assert "N=24 = 2^3 * 3" in out
    assert "Bluestein chirp-z" in out


def test_benchmark_mode(capsys):
    assert main.main(["benchmark", "--min-N", "1", "--max-N", "8", "--num-runs", "1"]) == 0
    out = capsys.readouterr().out
    for N in (1, 2, 3, 4, 5, 8):
        assert any(line.split()[:1] == [str(N)] for line in out.splitlines())


def test_benchmark_empty_range():
    assert main.main(["benchmark", "--min-N", "10", "--max-N", "5"]) == 1


def test_missing_size_is_an_error():
    with pytest.raises(SystemExit):
        main.main(["forward"])


def test_size_and_all_conflict():
    with pytest.raises(SystemExit):
        main.main(["forward", "8", "--all"])


def test_negative_size():
    assert main.main(["forward", "-4"]) == 1
