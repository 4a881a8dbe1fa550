import gzip
import os
import tempfile

from click.testing import CliRunner

from spigotloom.cli import main


def test_pi_prints_digits():
    r = CliRunner().invoke(main, ["pi", "15"])
    assert r.exit_code == 0
    assert r.output == "3.14159265358979\n"


def test_pi_single_digit():
    r = CliRunner().invoke(main, ["pi", "1"])
    assert r.exit_code == 0
    assert r.output == "3\n"


def test_pi_chunked():
    r = CliRunner().invoke(main, ["pi", "15", "--chunk", "4", "--no-flush"])
    assert r.exit_code == 0
    assert r.output == "3.14159265358979\n"


def test_pi_usage_errors():
    r = CliRunner().invoke(main, ["pi", "abc"])
    assert r.exit_code == 2
    r = CliRunner().invoke(main, ["pi"])
    assert r.exit_code == 2


def test_pi_non_positive():
    for arg in ("0", "-5"):
        r = CliRunner().invoke(main, ["pi", arg])
        assert r.exit_code == 1
        assert "digit count must be positive" in r.output


def test_pi_over_limit():
    r = CliRunner().invoke(main, ["pi", str(10**30)])
    assert r.exit_code == 1
    assert "maximum digit count is" in r.output


def test_pi_settles_tail_by_default():
    r = CliRunner().invoke(main, ["pi", "32"])
    assert r.exit_code == 0
    assert r.output == "3.1415926535897932384626433832795\n"


def test_pi_lookahead_from_environment():
    r = CliRunner().invoke(main, ["pi", "32"], auto_envvar_prefix="SPIGOTLOOM", env={"SPIGOTLOOM_PI_LOOKAHEAD": "0"})
    assert r.exit_code == 0
    assert r.output == "3.1415926535897932384626433832794\n"


def test_write_gzip():
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "pi.txt")
        r = CliRunner().invoke(main, ["write", "51", "--out", path, "--compression", "gzip", "--chunk", "8"])
        assert r.exit_code == 0
        assert r.output.strip() == path + ".gz"
        with gzip.open(path + ".gz", "rt", encoding="ascii") as f:
            assert f.read() == "3.14159265358979323846264338327950288419716939937510\n"


def test_verify_ok():
    r = CliRunner().invoke(main, ["verify", "120"])
    assert r.exit_code == 0
    assert "ok: 120 digits" in r.output


def test_verify_reports_unsettled_tail():
    r = CliRunner().invoke(main, ["verify", "32", "--lookahead", "0"])
    assert r.exit_code == 1
    assert "verification failed at character 32" in r.output


def test_limits():
    r = CliRunner().invoke(main, ["limits", "--array-limit", "34", "--lookahead", "0"])
    assert r.exit_code == 0
    assert "maximum digits: 10" in r.output
    assert "array size at maximum: 34" in r.output


def test_limits_reserve_lookahead():
    r = CliRunner().invoke(main, ["limits", "--array-limit", "34"])
    assert r.exit_code == 0
    assert "maximum digits: 2" in r.output
    assert "array size at maximum: 34" in r.output
