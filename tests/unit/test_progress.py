from __future__ import annotations

from unittest.mock import Mock, patch

from batch_transfer.services.progress import RowProgress, is_tty_enabled


def test_is_tty_enabled_returns_stdout_isatty():
    with patch('sys.stdout.isatty', return_value=True):
        assert is_tty_enabled() is True

    with patch('sys.stdout.isatty', return_value=False):
        assert is_tty_enabled() is False


class TestRowProgress:
    """Test cases for RowProgress class."""

    def test_init_with_tty_enabled(self):
        with patch('batch_transfer.services.progress.is_tty_enabled', return_value=True), \
             patch('batch_transfer.services.progress.tqdm') as mock_tqdm:

            progress = RowProgress(5, description="Validating")

            assert progress.total_rows == 5
            assert progress.enabled is True
            mock_tqdm.assert_called_once_with(
                total=5,
                desc="Validating",
                unit="row",
                leave=False,
                ncols=80,
                ascii=True,
            )

    def test_init_with_tty_disabled(self):
        with patch('batch_transfer.services.progress.is_tty_enabled', return_value=False):
            progress = RowProgress(5)

            assert progress.enabled is False
            assert progress.pbar is None

    def test_advance_updates_bar_and_counts_rejections(self):
        mock_pbar = Mock()

        with patch('batch_transfer.services.progress.is_tty_enabled', return_value=True), \
             patch('batch_transfer.services.progress.tqdm', return_value=mock_pbar):

            progress = RowProgress(3)
            progress.advance()
            progress.advance(rejected=True)

            assert progress.processed == 2
            assert progress.rejected == 1
            assert mock_pbar.update.call_count == 2
            mock_pbar.set_postfix.assert_called_once_with(rejected=1)

    def test_advance_with_tty_disabled_still_counts(self):
        with patch('batch_transfer.services.progress.is_tty_enabled', return_value=False):
            progress = RowProgress(2)
            progress.advance(rejected=True)
            progress.advance()

            assert progress.processed == 2
            assert progress.rejected == 1

    def test_context_manager_closes_bar(self):
        mock_pbar = Mock()

        with patch('batch_transfer.services.progress.is_tty_enabled', return_value=True), \
             patch('batch_transfer.services.progress.tqdm', return_value=mock_pbar):

            with RowProgress(1) as progress:
                progress.advance()

            mock_pbar.close.assert_called_once()
            assert progress.pbar is None
