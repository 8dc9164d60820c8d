"""Tests for npm2stage exceptions."""

from npm2stage.exceptions import BadInstallationError
from npm2stage.exceptions import BadProjectError
from npm2stage.exceptions import FsActionError
from npm2stage.exceptions import LeftoversError
from npm2stage.exceptions import NoTargetError
from npm2stage.exceptions import Npm2StageError
from npm2stage.exceptions import WrongVersionError
from npm2stage.models import ErrorCode


class TestLeftoversError:
    """Tests for LeftoversError."""

    def test_formats_message_with_few_items(self):
        """Test that error message lists all items when 3 or fewer."""
        error = LeftoversError(["install_ORIG.js", "download.js"])

        assert "install_ORIG.js" in str(error)
        assert "download.js" in str(error)
        assert "..." not in str(error)
        assert str(error).startswith("evidence of previous npm-two-stage installation")

    def test_formats_message_with_many_items(self):
        """Test that error message truncates and shows count when > 3 items."""
        error = LeftoversError([f"file{i}.js" for i in range(5)])

        assert "..." in str(error)
        assert "(5 total)" in str(error)
        assert "file3.js" not in str(error)

    def test_keeps_items(self):
        """Test that the full item list is available to callers."""
        items = ["a.js", "b.js", "c.js", "d.js"]

        assert LeftoversError(items).items == items


class TestWrongVersionError:
    """Tests for WrongVersionError."""

    def test_carries_both_versions(self):
        """Test that expected and found versions are kept for diagnostics."""
        error = WrongVersionError("6.13.4", "7.0.0")

        assert error.expected == "6.13.4"
        assert error.found == "7.0.0"
        assert "found 7.0.0" in str(error)
        assert "expected 6.13.4" in str(error)


class TestExitCodes:
    """Tests for the exit codes carried by errors."""

    def test_codes_are_distinct_and_nonzero(self):
        """Test that each error code is unique and usable as a failure status."""
        values = [code.value for code in ErrorCode]

        assert len(set(values)) == len(values)
        assert all(0 < value < 256 for value in values)

    def test_errors_carry_their_codes(self):
        """Test the code attached to each error class."""
        assert NoTargetError("x").exit_code == ErrorCode.NO_NPM
        assert WrongVersionError("1", "2").exit_code == ErrorCode.WRONG_NPM_VER
        assert BadInstallationError("x").exit_code == ErrorCode.BAD_NPM_INST
        assert BadProjectError("x").exit_code == ErrorCode.BAD_PROJECT
        assert LeftoversError(["x"]).exit_code == ErrorCode.LEFTOVERS
        assert FsActionError("x").exit_code == ErrorCode.FS_ACTION_FAIL
        assert Npm2StageError("x").exit_code == 1

    def test_bad_project_is_a_bad_installation(self):
        """Test that an incomplete source is handled like a bad installation."""
        assert isinstance(BadProjectError("x"), BadInstallationError)
