from unittest.mock import MagicMock, patch

import pytest
from docker.errors import DockerException as DockerSDKException

from core.docker_client import DockerManager
from core.exceptions import DockerConnectionException, DockerNotInitializedException


def test_init_uses_given_base_url_and_timeout(monkeypatch):
    # settings in the environment are not consulted
    monkeypatch.setenv("PURGE_SCHEDULE", "garbage")
    manager = DockerManager()

    with patch("core.docker_client.APIClient") as api_client:
        manager.init("tcp://docker:2375", 15)

    api_client.assert_called_once_with(base_url="tcp://docker:2375", timeout=15)
    assert manager.get_api() is api_client.return_value


def test_init_without_base_url_reads_docker_environment():
    manager = DockerManager()

    with patch("core.docker_client.docker.from_env") as from_env:
        manager.init(timeout=30)

    from_env.assert_called_once_with(timeout=30)
    assert manager.get_api() is from_env.return_value.api


def test_init_wraps_sdk_errors():
    manager = DockerManager()

    with (
        patch("core.docker_client.docker.from_env", side_effect=DockerSDKException("no socket")),
        pytest.raises(DockerConnectionException),
    ):
        manager.init()

    with pytest.raises(DockerNotInitializedException):
        manager.get_api()


def test_close_releases_client():
    manager = DockerManager()
    api = MagicMock()

    with patch("core.docker_client.APIClient", return_value=api):
        manager.init("unix:///var/run/docker.sock")
    manager.close()

    api.close.assert_called_once_with()
    with pytest.raises(DockerNotInitializedException):
        manager.get_api()
