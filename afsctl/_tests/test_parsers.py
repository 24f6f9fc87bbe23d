import pytest

from afsctl._tests.fakes import EMPTY_TOKENS_OUTPUT, TOKENS_OUTPUT
from afsctl.openafs.models import CellInfo, TokenEntry
from afsctl.openafs.parsers import (
    autostart_state_from_result,
    client_state_from_result,
    iter_tokens,
    parse_autostart_state,
    parse_cell_name,
    parse_client_state,
    parse_tokens,
)
from afsctl.openafs.types import AutostartState, CellStatus, ClientState
from afsctl.process.models import CommandResult


@pytest.mark.parametrize(
    ('raw', 'expected'),
    [
        ('active\n', ClientState.RUNNING),
        ('activating\n', ClientState.STARTING),
        ('deactivating\n', ClientState.STOPPING),
        ('failed\n', ClientState.FAILED),
        ('inactive\n', ClientState.NOT_RUNNING),
        ('  active  ', ClientState.RUNNING),
    ],
)
def test_parse_client_state_maps_activation_states(raw, expected):
    assert parse_client_state(raw) is expected


@pytest.mark.parametrize('raw', ['', 'reloading', 'unknown', 'Active', 'garbage\nmore'])
def test_parse_client_state_unrecognized_is_not_running(raw):
    assert parse_client_state(raw) is ClientState.NOT_RUNNING


def test_client_state_spawn_failure_is_unknown_not_failed():
    result = CommandResult(
        argv=['/usr/bin/systemctl', 'is-active', 'openafs-client'],
        spawn_error='No such file or directory',
    )
    assert client_state_from_result(result) is ClientState.UNKNOWN


def test_client_state_ignores_exit_status():
    result = CommandResult(
        argv=['/usr/bin/systemctl', 'is-active', 'openafs-client'],
        returncode=3,
        stdout='inactive\n',
    )
    assert client_state_from_result(result) is ClientState.NOT_RUNNING


def test_parse_cell_name():
    assert parse_cell_name('example.com\n') == CellInfo.available('example.com')


@pytest.mark.parametrize('raw', ['', '   \n', 'not recognized\n', "fs: 'wscell' not recognized"])
def test_parse_cell_name_not_available(raw):
    cell = parse_cell_name(raw)
    assert cell.status is CellStatus.NOT_AVAILABLE
    assert cell.name is None


def test_parse_tokens_single_entry():
    raw = 'AFS ID 1234 for example.com [Expires Thu Jan 1 2026]'
    assert parse_tokens(raw) == [
        TokenEntry(afs_id=1234, cell='example.com', expires_at='Thu Jan 1 2026'),
    ]


def test_parse_tokens_real_output_in_order():
    tokens = parse_tokens(TOKENS_OUTPUT)
    assert tokens == [
        TokenEntry(afs_id=1234, cell='example.com', expires_at='Jan  1 12:00'),
        TokenEntry(
            afs_id=5678,
            cell='other.example.org',
            expires_at='Feb 14 08:30',
        ),
    ]


@pytest.mark.parametrize(
    'raw',
    [
        '',
        EMPTY_TOKENS_OUTPUT,
        'tokens: command not found',
        'AFS ID abc for example.com [Expires never]',
        'AFS ID 1234 for example.com',
    ],
)
def test_parse_tokens_without_match_is_empty(raw):
    assert parse_tokens(raw) == []


def test_parse_tokens_is_idempotent():
    assert parse_tokens(TOKENS_OUTPUT) == parse_tokens(TOKENS_OUTPUT)


def test_iter_tokens_is_lazy():
    tokens = iter_tokens(TOKENS_OUTPUT)
    assert next(tokens).afs_id == 1234
    assert next(tokens).afs_id == 5678
    assert next(tokens, None) is None


@pytest.mark.parametrize(
    ('raw', 'expected'),
    [
        ('enabled\n', AutostartState.ENABLED),
        ('disabled\n', AutostartState.DISABLED),
        ('static\n', AutostartState.DISABLED),
        ('', AutostartState.DISABLED),
    ],
)
def test_parse_autostart_state(raw, expected):
    assert parse_autostart_state(raw) is expected


def test_autostart_spawn_failure_is_unknown():
    result = CommandResult(
        argv=['/usr/bin/systemctl', 'is-enabled', 'openafs-client'],
        spawn_error='Permission denied',
    )
    assert autostart_state_from_result(result) is AutostartState.UNKNOWN
