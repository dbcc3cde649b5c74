from ado import __version__
from ado.backend.environment import EnvironmentScope
from ado.cli.dispatcher import Dispatcher
from ado.cli.parser import LaunchRequest, parse_arguments
from ado.config import AdoConfig, MAX_COMMAND_LINE

from conftest import FakeLauncher

COMSPEC = r"C:\Windows\system32\cmd.exe"


def dispatch(argv, launcher, environment):
    return Dispatcher(launcher, environment).dispatch(parse_arguments(argv))


def test_help_prints_usage(launcher, environment, capsys):
    assert dispatch(["-?"], launcher, environment) == 0

    out = capsys.readouterr().out
    assert f"Administrator Do {__version__}" in out
    assert "-wait\tWaits until prog terminates" in out
    assert launcher.calls == []


def test_help_wins_over_other_actions(launcher, environment, capsys):
    assert dispatch(["-i", "-?", "-u"], launcher, environment) == 0
    assert "Usage:" in capsys.readouterr().out
    assert not (environment.data_dir / "Ado").exists()


def test_launch_passes_request_through(launcher, environment):
    assert dispatch(["-wait", "myprog.exe", "arg1", "arg2"], launcher, environment) == 0
    assert launcher.calls == [("myprog.exe", "arg1 arg2", True)]


def test_launch_failure_is_reported(environment, capsys):
    launcher = FakeLauncher(error="The operation was canceled by the user.")

    assert dispatch(["notepad.exe"], launcher, environment) == 1
    err = capsys.readouterr().err
    assert "notepad.exe could not be launched: The operation was canceled by the user." in err


def test_child_exit_code_is_not_propagated(environment):
    launcher = FakeLauncher(exit_code=3)
    assert dispatch(["-wait", "prog"], launcher, environment) == 0
    assert launcher.calls == [("prog", "", True)]


def test_comspec_is_resolved(launcher, environment):
    environment.set_variable("COMSPEC", COMSPEC, EnvironmentScope.PROCESS)

    assert dispatch(["-k", "echo", "hello"], launcher, environment) == 0
    assert launcher.calls == [(COMSPEC, '/K "echo hello"', False)]


def test_comspec_rewrite_leaves_parsed_request_untouched(launcher, environment):
    environment.set_variable("COMSPEC", COMSPEC, EnvironmentScope.PROCESS)
    request = parse_arguments(["-k", "dir"])

    resolved = Dispatcher(launcher, environment).resolve_comspec(request)

    assert resolved.application_name == COMSPEC
    assert request.application_name is None
    assert request.command_line == "dir"


def test_missing_comspec(launcher, environment, capsys):
    assert dispatch(["-k", "echo", "hello"], launcher, environment) == 1
    assert "COMSPEC is not defined" in capsys.readouterr().err
    assert launcher.calls == []


def test_empty_comspec_counts_as_missing(launcher, environment, capsys):
    environment.set_variable("COMSPEC", "", EnvironmentScope.PROCESS)
    assert dispatch(["-k", "dir"], launcher, environment) == 1
    assert "is not defined" in capsys.readouterr().err


def test_comspec_command_line_limit(launcher, environment, capsys):
    environment.set_variable("COMSPEC", COMSPEC, EnvironmentScope.PROCESS)
    # '/K ""' adds five characters
    fits = "x" * (MAX_COMMAND_LINE - 5)

    assert dispatch(["-k", fits], launcher, environment) == 0
    assert dispatch(["-k", fits + "x"], launcher, environment) == 1
    assert "Creating command line failed" in capsys.readouterr().err
    assert len(launcher.calls) == 1


def test_install_wins_over_uninstall(launcher, environment, capsys):
    assert dispatch(["-i", "-u"], launcher, environment) == 0

    assert (environment.data_dir / "Ado" / "ado.exe").exists()
    out = capsys.readouterr().out
    assert "Program installed successfully" in out
    assert "uninstalled" not in out


def test_uninstall_wins_over_launch(launcher, environment):
    request = LaunchRequest(uninstall=True, application_name="prog")
    assert Dispatcher(launcher, environment).dispatch(request) == 0
    assert launcher.calls == []


def test_install_reports_path_update(launcher, environment, capsys):
    assert dispatch(["-i"], launcher, environment) == 0

    install_dir = environment.data_dir / "Ado"
    out = capsys.readouterr().out
    assert f"Added to PATH: {install_dir}" in out
    assert environment.get_variable("PATH", EnvironmentScope.USER) == str(install_dir)


def test_install_failure(launcher, environment, capsys):
    environment.executable = environment.executable.with_name("missing.exe")

    assert dispatch(["-i"], launcher, environment) == 1
    assert "Installation failed:" in capsys.readouterr().err


def test_uninstall_failure(launcher, environment, capsys):
    def fail(name, scope=EnvironmentScope.PROCESS):
        raise OSError("registry unavailable")

    environment.get_variable = fail

    assert dispatch(["-u"], launcher, environment) == 1
    assert "Uninstallation failed: registry unavailable" in capsys.readouterr().err


def test_install_root_from_config(launcher, environment, tmp_path):
    root = tmp_path / "custom"
    dispatcher = Dispatcher(launcher, environment, AdoConfig(install_root=root))

    assert dispatcher.dispatch(parse_arguments(["-i"])) == 0
    assert (root / "Ado" / "ado.exe").exists()


def test_launch_forwards_argument_tokens(launcher, environment):
    assert dispatch(["vim", "/etc/my file", "it's"], launcher, environment) == 0
    assert launcher.arguments == [("/etc/my file", "it's")]


def test_comspec_arguments_keep_command_together(launcher, environment):
    environment.set_variable("COMSPEC", COMSPEC, EnvironmentScope.PROCESS)

    assert dispatch(["-k", "echo", "hello"], launcher, environment) == 0
    assert launcher.arguments == [("/K", "echo hello")]


def test_launch_does_not_query_privileges(launcher, environment, monkeypatch):
    from ado.utils import platform_check

    def fail():
        raise AssertionError("platform queried during launch")

    # is_admin() looks the OS up through get_os_type()
    monkeypatch.setattr(platform_check, "get_os_type", fail)

    assert dispatch(["prog"], launcher, environment) == 0
