import json
import logging
import random

import pytest

import guessing_game
from exit_codes import ExitCode
from game_log import remove_handlers


@pytest.fixture(autouse=True)
def detach_log_handlers():
    yield
    remove_handlers()


@pytest.fixture
def game_files(tmp_path):
    config = tmp_path / 'game.cfg'
    config.write_text('debug = no\nhidden_range_start = 1\nhidden_range_end = 100\nsb_rec_nr = 5\n', encoding='utf-8')
    return {
        'config': config,
        'scoreboard': tmp_path / 'scoreboard.db',
        'logs': tmp_path / 'logs',
    }


def cli_args(files, *extra):
    return ['--config', str(files['config']), '--scoreboard', str(files['scoreboard']),
            '--log-dir', str(files['logs']), *extra]


def read_log(files):
    (log_file,) = files['logs'].glob('game_*.log')
    return log_file.read_text(encoding='utf-8')


def test_full_game_then_clean_exit(game_files, feed_input, monkeypatch):
    monkeypatch.setattr(random.Random, 'randint', lambda self, a, b: 42)
    feed_input('1', 'Alice', '10', '42', 'n', 'Y')

    assert guessing_game.main(cli_args(game_files)) == 0
    assert game_files['scoreboard'].read_text(encoding='utf-8') == 'Alice 2\n'
    log = read_log(game_files)
    assert '[OK]' in log and 'clean exit' in log


def test_interrupt_is_routed_to_shutdown(game_files, feed_input):
    feed_input(KeyboardInterrupt())
    assert guessing_game.main(cli_args(game_files)) == 130
    log = read_log(game_files)
    assert '[WARN]' in log
    assert 'class = 0x00, major = 0x01, minor = 0x01' in log


def test_end_of_input_counts_as_interrupt(game_files, feed_input):
    feed_input('9')
    assert guessing_game.main(cli_args(game_files)) == 130


def test_missing_config_is_fatal(game_files, capsys):
    game_files['config'].unlink()
    assert guessing_game.main(cli_args(game_files)) == 1
    assert 'Error' in capsys.readouterr().err
    assert 'class = 0x01, major = 0x01, minor = 0x01' in read_log(game_files)


def test_unreadable_scoreboard_is_fatal(game_files):
    game_files['scoreboard'].mkdir()
    assert guessing_game.main(cli_args(game_files)) == 1
    assert '[ERROR]' in read_log(game_files)


def test_show_scoreboard_json(game_files, capsys):
    game_files['scoreboard'].write_text('Bob 9\nAmy 3\nCid 5\n', encoding='utf-8')
    assert guessing_game.main(cli_args(game_files, '--show-scoreboard', '--format', 'json', '--top', '2')) == 0
    rows = json.loads(capsys.readouterr().out)
    assert rows == [
        {'position': 1, 'name': 'Amy', 'tries': 3},
        {'position': 2, 'name': 'Cid', 'tries': 5},
    ]


def test_show_scoreboard_text_uses_config_rows(game_files, capsys):
    game_files['scoreboard'].write_text(''.join(f'P{i} {i}\n' for i in range(1, 9)), encoding='utf-8')
    assert guessing_game.main(cli_args(game_files, '--show-scoreboard')) == 0
    out = capsys.readouterr().out
    assert 'P5' in out and 'P6' not in out


def test_show_scoreboard_logs_clean_exit(game_files, capsys):
    game_files['scoreboard'].write_text('Amy 3\n', encoding='utf-8')
    assert guessing_game.main(cli_args(game_files, '--show-scoreboard', '--format', 'json')) == 0
    assert json.loads(capsys.readouterr().out) == [{'position': 1, 'name': 'Amy', 'tries': 3}]
    log = read_log(game_files)
    assert '[OK]' in log and 'clean exit' in log


def test_debug_flag_overrides_config(game_files, feed_input, capsys):
    feed_input('5')
    assert guessing_game.main(cli_args(game_files, '--debug')) == 0
    assert 'game menu open' in capsys.readouterr().out


def test_run_translates_game_errors(make_ctx, feed_input, monkeypatch):
    def broken(self):
        raise guessing_game.GameError(ExitCode.MENU_CASE_SLIP, 'slip')
    monkeypatch.setattr(guessing_game.MenuController, 'run', broken)
    assert guessing_game.run(make_ctx()) is ExitCode.MENU_CASE_SLIP


def test_shutdown_logs_error_severity(make_ctx, caplog):
    ctx = make_ctx()
    with caplog.at_level(logging.INFO):
        status = guessing_game.shutdown(ExitCode.MENU_CASE_SLIP, ctx.console)
    assert status == 1
    assert any(r.levelno == logging.ERROR and '0x02' in r.getMessage() for r in caplog.records)
