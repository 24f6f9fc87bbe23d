import json

from click.testing import CliRunner

from afsctl._tests.fakes import (
    COMMANDS,
    script_running_client,
    script_stopped_client,
)
from afsctl.cli import cli


def invoke(runner, *args):
    return CliRunner().invoke(cli, list(args), obj={'runner': runner})


def test_status_command(runner):
    script_running_client(runner)

    result = invoke(runner, 'status')

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        'Client: example.com',
        'Token(s):',
        'ID 1234, example.com, Expires: Jan  1 12:00',
        'ID 5678, other.example.org, Expires: Feb 14 08:30',
        'Autostart on Boot: On',
    ]


def test_status_command_json(runner):
    script_stopped_client(runner)

    result = invoke(runner, 'status', '--json')

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload['client'] == 'not-running'
    assert payload['tokens'] == []
    assert payload['autostart'] == 'disabled'


def test_status_command_uses_unit_option(runner):
    result = invoke(runner, '--unit', 'afs-test', 'status')

    assert result.exit_code == 0, result.output
    assert ['/usr/bin/systemctl', 'is-active', 'afs-test'] in runner.calls
    assert 'Client: Unknown' in result.output


def test_tokens_command(runner):
    script_running_client(runner)

    result = invoke(runner, 'tokens')

    assert result.exit_code == 0, result.output
    assert result.output.startswith('Token(s):')


def test_tokens_command_error(runner):
    result = invoke(runner, 'tokens')

    assert result.exit_code == 1
    assert 'Error:' in result.output


def test_start_command(runner):
    runner.respond(COMMANDS.start())

    result = invoke(runner, 'start')

    assert result.exit_code == 0, result.output
    assert 'OpenAFS client started' in result.output


def test_stop_command_failure(runner):
    runner.respond(COMMANDS.stop(), returncode=5, stderr='Access denied')
    script_running_client(runner)

    result = invoke(runner, 'stop')

    assert result.exit_code == 1
    assert 'Access denied' in result.output
    assert runner.count(COMMANDS.is_active()) == 1


def test_autostart_toggle_command(runner):
    runner.respond(COMMANDS.is_enabled(), 'enabled\n')
    runner.respond(COMMANDS.is_enabled(), 'disabled\n', returncode=1)
    runner.respond(COMMANDS.set_autostart(False))

    result = invoke(runner, 'autostart', 'toggle')

    assert result.exit_code == 0, result.output
    assert 'Autostart disabled successfully' in result.output


def test_autostart_enable_when_enabled(runner):
    runner.respond(COMMANDS.is_enabled(), 'enabled\n')

    result = invoke(runner, 'autostart', 'enable')

    assert result.exit_code == 0, result.output
    assert 'already enabled' in result.output
    assert runner.count(COMMANDS.set_autostart(True)) == 0


def test_watch_command_stops_after_count(runner):
    script_running_client(runner)

    result = invoke(runner, '--interval', '0.01', 'watch', '--count', '2')

    assert result.exit_code == 0, result.output
    assert result.output.count('Client: example.com') >= 2


def test_invalid_interval_is_rejected(runner):
    result = invoke(runner, '--interval', '0', 'status')

    assert result.exit_code == 2
