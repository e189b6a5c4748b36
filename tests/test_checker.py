import pytest

from idcheck.config import IdcheckConfig, SUPPORTED_SCHEMES
from idcheck.engine.checker import Checker, SCHEMES, Status, get_scheme
from idcheck.exceptions import IdcheckError, UnknownSchemeError


@pytest.fixture
def checker():
    return Checker()


def test_catalogue_matches_config_scheme_list():
    supported = [name for name, s in SCHEMES.items() if s.supported]
    assert supported == SUPPORTED_SCHEMES


def test_catalogue_is_read_only():
    with pytest.raises(TypeError):
        SCHEMES["new"] = SCHEMES["iban"]  # type: ignore[index]


def test_unfinished_schemes_are_flagged():
    assert not get_scheme("kvnr").supported
    assert not get_scheme("pid").supported


def test_check_valid_and_invalid(checker):
    ok = checker.check("iban", "DE89370400440532013000")
    assert ok.status is Status.valid and ok.ok
    bad = checker.check("iban", "DE89370400440532013001")
    assert bad.status is Status.invalid and not bad.ok


def test_check_unsupported_is_not_invalid(checker):
    result = checker.check("kvnr", "A123456789")
    assert result.status is Status.unsupported
    assert not result.ok


def test_check_unknown_scheme_raises(checker):
    with pytest.raises(UnknownSchemeError) as exc:
        checker.check("ssn", "123-45-6789")
    assert isinstance(exc.value, IdcheckError)
    assert isinstance(exc.value, KeyError)
    assert "ssn" in str(exc.value)


def test_identify(checker):
    assert "ean" in checker.identify("40123455")
    assert checker.identify("DE89370400440532013000") == ["iban"]
    assert checker.identify("not an identifier") == []


def test_identify_respects_enabled_schemes():
    cfg = IdcheckConfig(schemes={"enabled": ["isbn13"]})
    assert Checker(cfg).identify("9780306406157") == ["isbn13"]


def test_check_lines_counts_and_skips_blanks(checker):
    lines = ["40123455\n", "\n", "  4006381333931  \n", "41223455\r\n"]
    batch = checker.check_lines("ean", lines)
    assert batch.total == 3
    assert batch.valid == 2
    assert batch.invalid == 1
    assert [r.value for r in batch.results] == ["40123455", "4006381333931", "41223455"]


def test_check_lines_without_strip():
    cfg = IdcheckConfig(batch={"strip": False, "skip_blank": False})
    batch = Checker(cfg).check_lines("ean", [" 40123455\n", "\n"])
    assert [r.value for r in batch.results] == [" 40123455", ""]
    assert batch.valid == 0


def test_check_path(tmp_path, checker):
    p = tmp_path / "codes.txt"
    p.write_text("9780306406157\n9780306406158\n", encoding="utf-8")
    batch = checker.check_path("isbn13", p)
    assert batch.scheme == "isbn13"
    assert (batch.total, batch.valid, batch.invalid) == (2, 1, 1)


def test_check_lines_records_source_line(checker):
    batch = checker.check_lines("ean", ["40123455\n", "\n", "41223455\n"])
    assert [r.line for r in batch.results] == [1, 3]
    assert checker.check("ean", "40123455").line == 0
