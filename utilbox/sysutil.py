"""Running commands and querying the operating system, processes and users."""

from __future__ import annotations

import getpass
import os
import shutil
import signal
import socket
import subprocess
import sys
from dataclasses import dataclass
from typing import Sequence

import psutil

try:
    import pwd
except ImportError:  # not available on Windows
    pwd = None

__all__ = [
    "exec_cmd",
    "shell_exec",
    "find_executable",
    "executable",
    "has_executable",
    "hostname",
    "is_win",
    "is_windows",
    "is_mac",
    "is_linux",
    "is_msys",
    "is_console",
    "is_terminal",
    "std_is_terminal",
    "current_shell",
    "has_shell_env",
    "is_shell_special_var",
    "workdir",
    "bin_dir",
    "bin_file",
    "kill",
    "process_exists",
    "pid",
    "must_find_user",
    "login_user",
    "current_user",
    "user_home_dir",
    "uhome_dir",
    "home_dir",
    "user_dir",
    "user_cache_dir",
    "user_config_dir",
    "expand_path",
    "change_user_by_name",
    "change_user_uid_gid",
]

_SHELL_SPECIAL_CHARS = frozenset("*#$@!?-0123456789")

_cur_shell = ""


@dataclass(frozen=True)
class _SystemUser:
    """A system account."""

    username: str
    uid: str
    gid: str
    name: str
    home_dir: str


# ----- running commands


def exec_cmd(bin_name: str, args: Sequence[str] = (), work_dir: str | None = None) -> str:
    """Run a program and return its standard output.

    Raises subprocess.CalledProcessError on a non-zero exit status.
    """
    result = subprocess.run(
        [bin_name, *args],
        cwd=work_dir,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


def shell_exec(cmd_line: str, shell: str = "sh") -> str:
    """Run a command line through ``shell -c`` and return its standard output."""
    result = subprocess.run(
        [shell, "-c", cmd_line],
        stdout=subprocess.PIPE,
        text=True,
        check=True,
    )
    return result.stdout


def find_executable(bin_name: str) -> str:
    """Path of an executable on PATH; raises FileNotFoundError if there is none."""
    path = shutil.which(bin_name)
    if path is None:
        raise FileNotFoundError(f'exec: "{bin_name}": executable file not found in $PATH')
    return path


def executable(bin_name: str) -> str:
    return find_executable(bin_name)


def has_executable(bin_name: str) -> bool:
    return shutil.which(bin_name) is not None


# ----- system environment


def hostname() -> str:
    return socket.gethostname()


def is_win() -> bool:
    return sys.platform.startswith("win")


def is_windows() -> bool:
    return is_win()


def is_mac() -> bool:
    return sys.platform == "darwin"


def is_linux() -> bool:
    return sys.platform.startswith("linux")


def is_msys() -> bool:
    """True when running in an MSYS (MINGW) environment."""
    return bool(os.environ.get("MSYSTEM"))


def is_console(out) -> bool:
    """True if ``out`` is a file on the stdin, stdout or stderr descriptor."""
    try:
        fd = out.fileno()
    except (AttributeError, OSError, ValueError):
        return False
    return fd in (0, 1, 2)


def is_terminal(fd: int) -> bool:
    return os.isatty(fd)


def std_is_terminal() -> bool:
    """True if the standard output descriptor is a terminal."""
    return os.isatty(1)


def current_shell(only_name: bool) -> str:
    """The user's shell, e.g. "/bin/bash", or just "bash" with ``only_name``.

    The result is cached; "" is returned if it cannot be found.
    """
    global _cur_shell
    if not _cur_shell:
        try:
            path = shell_exec("echo $SHELL")
        except (OSError, subprocess.SubprocessError):
            return ""
        _cur_shell = path.strip()
    path = _cur_shell
    if only_name and path:
        path = os.path.basename(path)
    return path


def has_shell_env(shell: str) -> bool:
    """True if ``shell`` can run a simple command."""
    try:
        out = shell_exec("echo OK", shell)
    except (OSError, subprocess.SubprocessError):
        return False
    return out.strip() == "OK"


def is_shell_special_var(c) -> bool:
    """True for characters naming a special shell variable such as $*."""
    char = chr(c) if isinstance(c, int) else c
    return char in _SHELL_SPECIAL_CHARS and len(char) == 1


def workdir() -> str:
    try:
        return os.getcwd()
    except OSError:
        return ""


def bin_file() -> str:
    return sys.argv[0] if sys.argv else ""


def bin_dir() -> str:
    return os.path.dirname(bin_file()) or "."


# ----- processes


def kill(pid: int, sig: int = signal.SIGTERM) -> None:
    """Send a signal to a process; not supported on Windows."""
    if is_win():
        raise NotImplementedError("not support")
    os.kill(pid, sig)


def process_exists(pid: int) -> bool:
    """True if a process with this id exists and can be signalled."""
    if is_win():
        return psutil.pid_exists(pid)
    try:
        os.kill(pid, 0)
    except (OSError, OverflowError):
        return False
    return True


def pid() -> int:
    """Id of the current process."""
    return os.getpid()


# ----- users


def _from_passwd(entry) -> _SystemUser:
    return _SystemUser(
        username=entry.pw_name,
        uid=str(entry.pw_uid),
        gid=str(entry.pw_gid),
        name=entry.pw_gecos.split(",", 1)[0],
        home_dir=entry.pw_dir,
    )


def must_find_user(name: str) -> _SystemUser:
    """Look a user up by name; raises LookupError if there is none."""
    if pwd is None:
        if name == getpass.getuser():
            return current_user()
        raise LookupError(f"user: unknown user {name}")
    try:
        return _from_passwd(pwd.getpwnam(name))
    except KeyError:
        raise LookupError(f"user: unknown user {name}") from None


def current_user() -> _SystemUser:
    """The user running this process; raises LookupError if unknown."""
    if pwd is None:
        username = getpass.getuser()
        return _SystemUser(username, "", "", username, os.path.expanduser("~"))
    uid = os.getuid()
    try:
        return _from_passwd(pwd.getpwuid(uid))
    except KeyError:
        raise LookupError(f"user: unknown userid {uid}") from None


def login_user() -> _SystemUser:
    return current_user()


def user_home_dir() -> str:
    """Home directory from the environment, or ""."""
    return os.environ.get("USERPROFILE" if is_win() else "HOME", "")


def uhome_dir() -> str:
    """Home directory of the current user account, or ""."""
    try:
        return current_user().home_dir
    except LookupError:
        return ""


def home_dir() -> str:
    """The user's home directory, or "" if it cannot be found."""
    home = os.path.expanduser("~")
    return "" if home == "~" else home


def user_dir(sub_path: str) -> str:
    return home_dir() + "/" + sub_path


def user_cache_dir(sub_path: str) -> str:
    return home_dir() + "/.cache/" + sub_path


def user_config_dir(sub_path: str) -> str:
    return home_dir() + "/.config/" + sub_path


def expand_path(path: str) -> str:
    """Expand a leading "~" to the home directory.

    "~user" forms are not supported and give "".
    """
    if not path or path[0] != "~":
        return path
    if len(path) > 1 and path[1] not in "/\\":
        return ""
    home = home_dir()
    if not home:
        return ""
    return os.path.join(home, path[1:].lstrip("/\\"))


def change_user_uid_gid(uid: int, gid: int) -> None:
    """Switch the process to another uid and gid; does nothing on Windows."""
    if is_win():
        return
    if uid > 0:
        os.setuid(uid)
        if gid > 0:
            os.setgid(gid)


def change_user_by_name(name: str) -> None:
    """Switch the process to the named user; does nothing on Windows."""
    if is_win():
        change_user_uid_gid(0, 0)
        return
    user = must_find_user(name)
    change_user_uid_gid(int(user.uid), int(user.gid))