import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from dirlet.core.orchestrator import MirrorOrchestrator
from dirlet.infrastructure.error_handler import DirectoryCreateError, InvalidURLError
from dirlet.models import MirrorConfig, MirrorStatus
from dirlet.services import DownloadService, GitHubAPIService

from fakes import FakeGitHub, tree_snapshot


# --- Test Fixtures for Setup ---

@pytest.fixture
def mock_services():
    """Creates mock objects for services used by the orchestrator."""
    github_service = MagicMock()
    download_service = MagicMock()
    github_service.get_directory_listing = AsyncMock(return_value=[])
    github_service.api_calls = 1
    download_service.ensure_directory = AsyncMock()
    download_service.download_file = AsyncMock(return_value=128)
    return github_service, download_service


# --- Test Cases ---

class TestMirrorOrchestrator:

    def test_initialization_uses_default_config(self, mock_services):
        orchestrator = MirrorOrchestrator(*mock_services)
        assert orchestrator.config.max_concurrent_downloads == 5
        assert orchestrator.config.fail_fast is True

    @pytest.mark.asyncio
    async def test_invalid_url_raises_before_any_io(self, mock_services, tmp_path):
        github_service, download_service = mock_services
        orchestrator = MirrorOrchestrator(
            github_service, download_service, MirrorConfig(destination=tmp_path)
        )

        with pytest.raises(InvalidURLError):
            await orchestrator.execute(
                "https://api.github.com/repos/tesseract-ocr/tesseract/contents/m4?ref=4.0"
            )

        download_service.ensure_directory.assert_not_awaited()
        github_service.get_directory_listing.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_execute_creates_root_and_walks(self, mock_services, tmp_path):
        github_service, download_service = mock_services
        orchestrator = MirrorOrchestrator(
            github_service, download_service, MirrorConfig(destination=tmp_path)
        )

        result = await orchestrator.execute("https://github.com/tesseract-ocr/tesseract/tree/4.0/m4")

        download_service.ensure_directory.assert_awaited_once_with(tmp_path / "m4")
        github_service.get_directory_listing.assert_awaited_once_with(
            "https://api.github.com/repos/tesseract-ocr/tesseract/contents/m4?ref=4.0"
        )
        assert result.status == MirrorStatus.COMPLETED
        assert result.is_successful
        assert result.local_root == "m4"
        assert result.api_calls_made == 1

    @pytest.mark.asyncio
    async def test_root_directory_failure_fails_run(self, mock_services, tmp_path):
        github_service, download_service = mock_services
        download_service.ensure_directory.side_effect = DirectoryCreateError("read-only")
        orchestrator = MirrorOrchestrator(
            github_service, download_service, MirrorConfig(destination=tmp_path)
        )

        result = await orchestrator.execute("https://github.com/o/r/tree/main/src")

        assert result.status == MirrorStatus.FAILED
        assert result.error_message == "read-only"
        assert result.failed_files == {"src": "read-only"}
        github_service.get_directory_listing.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failure_is_logged(self, mock_services, tmp_path):
        github_service, download_service = mock_services
        download_service.ensure_directory.side_effect = DirectoryCreateError("nope")
        orchestrator = MirrorOrchestrator(
            github_service, download_service, MirrorConfig(destination=tmp_path)
        )

        with patch('dirlet.core.orchestrator.logger') as mock_logger:
            await orchestrator.execute("https://github.com/o/r/tree/main/src")

        assert mock_logger.error.called


@pytest.mark.asyncio
async def test_end_to_end_against_fake_github(fake_github, tmp_path):
    async with fake_github.client() as client:
        orchestrator = MirrorOrchestrator(
            GitHubAPIService(client),
            DownloadService(client),
            MirrorConfig(destination=tmp_path)
        )
        result = await orchestrator.execute(fake_github.browse_url("lib/tools"))

    assert result.is_successful
    assert result.downloaded_files == sorted([
        "tools/README.md",
        "tools/data/nested/barış.png",
        "tools/data/nested/deep.txt",
        "tools/data/sample.csv",
        "tools/run.py",
    ])
    assert result.created_directories == ["tools", "tools/data", "tools/data/nested"]
    assert result.total_bytes == sum(
        len(body) for path, body in fake_github.files.items() if path.startswith("lib/tools/")
    )
    assert result.api_calls_made == 3
    assert "tools/run.py" in tree_snapshot(tmp_path)
    assert not any("lib/other" in url for url in fake_github.requests)


@pytest.mark.asyncio
async def test_end_to_end_reports_first_failure(tmp_path):
    fake = FakeGitHub(
        {"pkg/ok.txt": b"ok", "pkg/bad.txt": b"bad"},
        failing={"pkg/bad.txt"},
    )
    async with fake.client() as client:
        orchestrator = MirrorOrchestrator(
            GitHubAPIService(client),
            DownloadService(client),
            MirrorConfig(destination=tmp_path)
        )
        result = await orchestrator.execute(fake.browse_url("pkg"))

    assert result.status == MirrorStatus.FAILED
    assert list(result.failed_files) == ["pkg/bad.txt"]
    assert "HTTP 500" in result.error_message
    assert result.downloaded_files == ["pkg/ok.txt"]


@pytest.mark.asyncio
async def test_end_to_end_missing_directory(tmp_path):
    fake = FakeGitHub({"pkg/ok.txt": b"ok"})
    async with fake.client() as client:
        orchestrator = MirrorOrchestrator(
            GitHubAPIService(client),
            DownloadService(client),
            MirrorConfig(destination=tmp_path)
        )
        result = await orchestrator.execute(fake.browse_url("nope"))

    assert result.status == MirrorStatus.FAILED
    assert "HTTP 404" in result.error_message
    assert (tmp_path / "nope").is_dir()
