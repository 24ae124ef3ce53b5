import io
import os
import subprocess
import sys

import pytest

from utilbox import sysutil


def test_exec_cmd_returns_output():
    out = sysutil.exec_cmd(sys.executable, ["-c", "print('OK')"])
    assert out.strip() == "OK"


def test_exec_cmd_work_dir(tmp_path):
    out = sysutil.exec_cmd(sys.executable, ["-c", "import os; print(os.getcwd())"], str(tmp_path))
    assert os.path.realpath(out.strip()) == os.path.realpath(str(tmp_path))


def test_exec_cmd_failure_raises():
    with pytest.raises(subprocess.CalledProcessError) as info:
        sysutil.exec_cmd(sys.executable, ["-c", "import sys; sys.exit(3)"])
    assert info.value.returncode == 3


def test_shell_exec():
    assert sysutil.shell_exec("echo OK").strip() == "OK"
    assert sysutil.shell_exec("echo OK", "sh").strip() == "OK"


def test_shell_exec_failure():
    with pytest.raises(subprocess.CalledProcessError):
        sysutil.shell_exec("exit 2")


def test_find_executable():
    assert os.path.samefile(sysutil.find_executable(sys.executable), sys.executable)
    assert sysutil.has_executable(sys.executable) is True
    with pytest.raises(FileNotFoundError):
        sysutil.executable("no-such-binary-xyz-123")
    assert sysutil.has_executable("no-such-binary-xyz-123") is False


def test_has_shell_env():
    assert sysutil.has_shell_env("sh") is True
    assert sysutil.has_shell_env("no-such-shell-xyz") is False


def test_current_shell_name_matches_path():
    full = sysutil.current_shell(False)
    assert sysutil.current_shell(True) == os.path.basename(full)


def test_os_checks():
    assert sum([sysutil.is_win(), sysutil.is_mac(), sysutil.is_linux()]) <= 1
    assert sysutil.is_win() == sysutil.is_windows()


def test_is_msys(monkeypatch):
    monkeypatch.setenv("MSYSTEM", "MINGW64")
    assert sysutil.is_msys() is True
    monkeypatch.delenv("MSYSTEM")
    assert sysutil.is_msys() is False


def test_is_console(tmp_path):
    assert sysutil.is_console(sys.__stdout__) is True
    assert sysutil.is_console(sys.__stderr__) is True
    assert sysutil.is_console(io.StringIO()) is False
    with open(tmp_path / "f.txt", "w") as fh:
        assert sysutil.is_console(fh) is False


def test_is_terminal_on_file(tmp_path):
    with open(tmp_path / "f.txt", "w") as fh:
        assert sysutil.is_terminal(fh.fileno()) is False


@pytest.mark.parametrize("char", ["*", "#", "$", "@", "!", "?", "-", "0", "9"])
def test_is_shell_special_var_true(char):
    assert sysutil.is_shell_special_var(char) is True


def test_is_shell_special_var_other():
    assert sysutil.is_shell_special_var("a") is False
    assert sysutil.is_shell_special_var(ord("#")) is True


def test_hostname():
    import socket

    assert sysutil.hostname() == socket.gethostname()


def test_workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert os.path.realpath(sysutil.workdir()) == os.path.realpath(str(tmp_path))


def test_bin_file_and_dir(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["/usr/local/bin/app"])
    assert sysutil.bin_file() == "/usr/local/bin/app"
    assert sysutil.bin_dir() == "/usr/local/bin"
    monkeypatch.setattr(sys, "argv", ["app"])
    assert sysutil.bin_dir() == "."


def test_process_exists():
    assert sysutil.process_exists(os.getpid()) is True
    assert sysutil.process_exists(2**31 - 1) is False


def test_pid():
    assert sysutil.pid() == os.getpid()
    assert sysutil.pid() > 0


def test_kill_missing_process():
    with pytest.raises((ProcessLookupError, NotImplementedError)) as info:
        sysutil.kill(2**31 - 1, 0)
    expected = NotImplementedError if sysutil.is_win() else ProcessLookupError
    assert info.type is expected


def test_user_dirs():
    assert "/sub-path" in sysutil.user_dir("sub-path")
    assert ".cache/my-logs" in sysutil.user_cache_dir("my-logs")
    assert ".config/my-conf" in sysutil.user_config_dir("my-conf")


def test_home_dirs_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    assert sysutil.user_home_dir() == str(tmp_path)
    assert sysutil.home_dir() == str(tmp_path)
    assert sysutil.user_dir("x") == str(tmp_path) + "/x"


def test_expand_path(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    assert sysutil.expand_path("~/x") == os.path.join(str(tmp_path), "x")
    assert sysutil.expand_path("/abs/path") == "/abs/path"
    assert sysutil.expand_path("") == ""
    assert sysutil.expand_path("~other/x") == ""


def test_login_user_lookup():
    cu = sysutil.login_user()
    assert cu.username == sysutil.current_user().username
    fu = sysutil.must_find_user(cu.username)
    assert fu.uid == cu.uid


def test_must_find_user_unknown():
    with pytest.raises(LookupError):
        sysutil.must_find_user("no-such-user-xyz-123")