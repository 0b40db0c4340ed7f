"""Tests for os-release parsing."""

from goatfetch.modules.osrelease import parse_os_release, read_os_release


class TestParseOsRelease:
    """Test distribution name extraction."""

    def test_pretty_name_preferred(self):
        text = 'NAME="Foo"\nPRETTY_NAME="Foo Bar"\nID=foo\n'
        assert parse_os_release(text) == "Foo Bar"

    def test_pretty_name_preferred_regardless_of_order(self):
        text = 'PRETTY_NAME="Foo Bar"\nNAME="Foo"\n'
        assert parse_os_release(text) == "Foo Bar"

    def test_name_only(self):
        assert parse_os_release('NAME="Foo"\n') == "Foo"

    def test_neither_key(self):
        text = 'DISTRIB_ID="OpenWrt"\nDISTRIB_RELEASE="23.05"\n'
        assert parse_os_release(text) == ""
        assert parse_os_release("") == ""

    def test_unquoted_and_single_quoted_values(self):
        assert parse_os_release("NAME=Alpine\n") == "Alpine"
        assert parse_os_release("PRETTY_NAME='Void Linux'\n") == "Void Linux"

    def test_similar_keys_not_confused(self):
        text = 'CPE_NAME="cpe:/o:foo"\nVERSION_CODENAME=bar\nNAME="Foo"\n'
        assert parse_os_release(text) == "Foo"


class TestReadOsRelease:
    """Test reading release files from disk."""

    def test_reads_file(self, tmp_path):
        path = tmp_path / "os-release"
        path.write_text('NAME="Debian GNU/Linux"\nPRETTY_NAME="Debian GNU/Linux 12 (bookworm)"\n')

        assert read_os_release(str(path)) == "Debian GNU/Linux 12 (bookworm)"

    def test_missing_file(self, tmp_path):
        assert read_os_release(str(tmp_path / "missing")) == ""

    def test_directory_instead_of_file(self, tmp_path):
        assert read_os_release(str(tmp_path)) == ""
