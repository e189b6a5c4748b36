from typer.testing import CliRunner
from idcheck.__main__ import main
from idcheck.cli import app

runner = CliRunner()

def test_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "check-digit validator" in result.stdout

def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "idcheck" in result.stdout

def test_schemes_lists_catalogue():
    result = runner.invoke(app, ["schemes"])
    assert result.exit_code == 0
    assert "iban" in result.stdout
    assert "kvnr" in result.stdout

def test_check_exit_codes():
    assert runner.invoke(app, ["check", "iban", "DE89370400440532013000"]).exit_code == 0
    assert runner.invoke(app, ["check", "iban", "DE89370400440532013001"]).exit_code == 1
    assert runner.invoke(app, ["check", "pid", "T22000129"]).exit_code == 2

def test_check_unknown_scheme():
    result = runner.invoke(app, ["check", "ssn", "123456789"])
    assert result.exit_code != 0

def test_identify():
    result = runner.invoke(app, ["identify", "65180539W001"])
    assert result.exit_code == 0
    assert "vsnr" in result.stdout
    assert runner.invoke(app, ["identify", "nothing"]).exit_code == 1

def test_batch_with_report(tmp_path):
    src = tmp_path / "codes.txt"
    src.write_text("40123455\n4006381333931\n")
    report = tmp_path / "report.html"
    result = runner.invoke(app, ["batch", "ean", str(src), "--report", str(report)])
    assert result.exit_code == 0
    assert "2 valid" in result.stdout
    assert report.exists()

def test_batch_with_invalid_line(tmp_path):
    src = tmp_path / "codes.txt"
    src.write_text("40123455\n41223455\n")
    result = runner.invoke(app, ["batch", "ean", str(src)])
    assert result.exit_code == 1

def test_config_option(tmp_path):
    cfg = tmp_path / ".idcheck.yaml"
    cfg.write_text("schemes:\n  enabled: [isbn13]\n")
    result = runner.invoke(app, ["--config", str(cfg), "identify", "9780306406157"])
    assert result.exit_code == 0
    assert "isbn13" in result.stdout
    assert "ean" not in result.stdout

def test_bad_config_option(tmp_path):
    cfg = tmp_path / ".idcheck.yaml"
    cfg.write_text("schemes:\n  enabled: [nope]\n")
    result = runner.invoke(app, ["--config", str(cfg), "schemes"])
    assert result.exit_code != 0

def test_main_is_callable():
    assert callable(main)

def test_check_prints_status():
    result = runner.invoke(app, ["check", "vsnr", "65180539W001"])
    assert result.exit_code == 0
    assert "valid" in result.stdout
    result = runner.invoke(app, ["check", "kvnr", "A123456789"])
    assert result.exit_code == 2
    assert "unsupported" in result.stdout

def test_batch_undecodable_file(tmp_path):
    src = tmp_path / "codes.txt"
    src.write_bytes(b"40123455\n\xff\xfe\n")
    result = runner.invoke(app, ["batch", "ean", str(src)])
    assert result.exit_code == 2
    assert not isinstance(result.exception, UnicodeDecodeError)

def test_batch_report_is_escaped(tmp_path):
    src = tmp_path / "codes.txt"
    src.write_text("<script>x</script>\n")
    report = tmp_path / "report.html"
    result = runner.invoke(app, ["batch", "ean", str(src), "--report", str(report)])
    assert result.exit_code == 1
    html = report.read_text(encoding="utf-8")
    assert "<script>" not in html
    assert "&lt;script&gt;" in html
