import subprocess
from unittest.mock import patch

from sfx.audio_player import spawn_detached


@patch("subprocess.Popen")
def test_spawn_is_detached_and_silent(mock_popen):
    process = spawn_detached(["paplay", "/s/a.wav"])

    assert process is mock_popen.return_value
    args, kwargs = mock_popen.call_args
    assert args[0] == ["paplay", "/s/a.wav"]
    assert kwargs["stdin"] is subprocess.DEVNULL
    assert kwargs["stdout"] is subprocess.DEVNULL
    assert kwargs["stderr"] is subprocess.DEVNULL


@patch("subprocess.Popen", side_effect=FileNotFoundError("paplay"))
def test_launch_failure_goes_to_callback(mock_popen):
    errors = []

    assert spawn_detached(["paplay", "/s/a.wav"], on_error=errors.append) is None
    assert len(errors) == 1
    assert isinstance(errors[0], FileNotFoundError)


@patch("subprocess.Popen", side_effect=PermissionError("denied"))
def test_launch_failure_without_callback_is_quiet(mock_popen):
    assert spawn_detached(["/opt/player", "/s/a.wav"]) is None
