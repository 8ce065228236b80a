import json

from scripts.check_catalog import main
from conftest import TWO_MOVIES


def test_check_bundled_catalog(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert 'Catalog OK: 12 movies' in out
    assert '[1] The Prison Escape (1994) - Drama' in out


def test_check_catalog_file(write_catalog, capsys):
    assert main([str(write_catalog(TWO_MOVIES))]) == 0
    out = capsys.readouterr().out
    assert 'Catalog OK: 2 movies' in out
    assert '[2] The Family Boss (1972) - Crime/Drama' in out


def test_check_broken_catalog(write_catalog, capsys):
    assert main([str(write_catalog('oops'))]) == 1
    assert 'Catalog check failed: Invalid JSON' in capsys.readouterr().out
