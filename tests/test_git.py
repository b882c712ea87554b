"""Tests for the git remote URL resolver."""
import pytest
from unittest.mock import patch, Mock
import subprocess

from gitremote.git import get_remote_url


def completed(stdout):
    return Mock(stdout=stdout, returncode=0)


@pytest.mark.unit
class TestGetRemoteUrl:
    """Test get_remote_url."""

    @patch('subprocess.run')
    def test_returns_url(self, mock_run):
        mock_run.return_value = completed("https://example.com/repo.git\n")

        assert get_remote_url() == "https://example.com/repo.git"
        args, kwargs = mock_run.call_args
        assert args[0] == ['git', 'remote', 'get-url', 'origin']
        assert kwargs['cwd'] is None
        assert kwargs['check'] is True

    @patch('subprocess.run')
    def test_passes_cwd(self, mock_run):
        mock_run.return_value = completed("git@example.com:org/repo.git\n")

        assert get_remote_url('/work/repo') == "git@example.com:org/repo.git"
        assert mock_run.call_args[1]['cwd'] == '/work/repo'

    @patch('subprocess.run')
    def test_skips_blank_lines(self, mock_run):
        mock_run.return_value = completed("\n   \nhttps://example.com/repo.git\r\nother\n")

        assert get_remote_url() == "https://example.com/repo.git"

    @patch('subprocess.run')
    def test_empty_output(self, mock_run):
        mock_run.return_value = completed("  \n\n")

        assert get_remote_url() is None

    @patch('subprocess.run')
    def test_git_error(self, mock_run):
        mock_run.side_effect = subprocess.CalledProcessError(
            2, ['git', 'remote', 'get-url', 'origin'],
            stderr="error: No such remote 'origin'")

        assert get_remote_url() is None

    @patch('subprocess.run')
    def test_git_missing(self, mock_run):
        mock_run.side_effect = FileNotFoundError("git")

        assert get_remote_url() is None
