"""
应用程序与命令行测试
Application and Command Line Tests
"""
import io

import pytest

from fair_rps import main as main_module
from fair_rps.app import Application
from fair_rps.game import commit, verify_commitment, hmac_key
from fair_rps.utils.exceptions import EntropyException


def _run(moves, answer, random_source=None, config_path=None):
    stdout, stderr = io.StringIO(), io.StringIO()
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        if isinstance(answer, BaseException):
            raise answer
        return answer

    app = Application(config_path=config_path, random_source=random_source,
                      input_func=fake_input, stdout=stdout, stderr=stderr)
    code = app.run(moves)
    return code, stdout.getvalue(), stderr.getvalue(), prompts


def test_startup_menu(rps_moves, make_random):
    random_source = make_random(index=0)
    code, out, err, prompts = _run(rps_moves, "0", random_source)

    lines = out.splitlines()
    assert code == 0
    assert lines[0] == f"HMAC: {commit(hmac_key(random_source.key), 'rock')}"
    assert lines[1:7] == ["Available moves:", "1 - rock", "2 - paper", "3 - scissors",
                          "0 - exit", "? - help"]
    assert prompts == ["Enter your move: "]
    assert err == ""


def test_exit_prints_no_result(rps_moves, fake_random):
    code, out, err, _ = _run(rps_moves, "0", fake_random)
    assert code == 0
    assert "Your move" not in out
    assert "Computer move" not in out
    assert "HMAC key" not in out


def test_eof_is_treated_as_exit(rps_moves, fake_random):
    code, out, _, _ = _run(rps_moves, EOFError(), fake_random)
    assert code == 0
    assert "HMAC key" not in out


def test_help_prints_rules(rps_moves, fake_random):
    code, out, _, _ = _run(rps_moves, "?", fake_random)
    assert code == 0
    assert "\nRules:\n" in out
    rules = out.split("Rules:\n", 1)[1].splitlines()
    assert rules[0].split() == rps_moves
    assert rules[1].split() == ["rock", "Draw", "Win", "Lose"]
    assert "HMAC key" not in out


def test_played_round_output_and_verification(rps_moves, make_random):
    code, out, err, _ = _run(rps_moves, "1", make_random(index=1))
    lines = out.splitlines()

    assert code == 0
    assert "Your move: rock" in lines
    assert "Computer move: paper" in lines
    assert "You win!" in lines

    shown = lines[0].split(": ", 1)[1]
    key_line = [line for line in lines if line.startswith("HMAC key: ")][0]
    revealed = key_line.split(": ", 1)[1]
    # 公开的密钥文本直接作为HMAC密钥即可复算
    assert verify_commitment(shown, revealed.encode("ascii"), "paper")


def test_invalid_move_goes_to_stderr(rps_moves, fake_random):
    code, out, err, _ = _run(rps_moves, "7", fake_random)
    assert code == 0
    assert "Error: Invalid move. Please enter a valid move number." in err
    assert "HMAC key" not in out
    assert "Computer move" not in out


def test_very_long_number_is_invalid_move(rps_moves, fake_random):
    """超长数字串按无效招式处理，而不是转换失败"""
    code, out, err, _ = _run(rps_moves, "1" * 5000, fake_random)
    assert code == 0
    assert "Error: Invalid move. Please enter a valid move number." in err
    assert "HMAC key" not in out


@pytest.mark.parametrize("moves", [[], ["rock"], ["rock", "paper"], ["a", "b", "c", "d"]])
def test_bad_argument_count_is_usage_error(moves, fake_random):
    code, out, err, prompts = _run(moves, "1", fake_random)
    assert code == 1
    assert out == ""
    assert prompts == []
    assert "odd number >= 3" in err
    assert "Example: fair-rps rock paper scissors" in err
    assert fake_random.key_calls == 0


def test_duplicate_moves_are_usage_error(fake_random):
    code, _, err, _ = _run(["rock", "paper", "rock"], "1", fake_random)
    assert code == 1
    assert "must not repeat" in err


def test_duplicates_allowed_by_config(tmp_path, fake_random):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("game:\n  require_unique_moves: false\n", encoding="utf-8")
    code, out, _, _ = _run(["rock", "paper", "rock"], "0", fake_random, config_path=str(config_file))
    assert code == 0
    assert "3 - rock" in out


def test_custom_prompt_from_config(tmp_path, rps_moves, fake_random):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("game:\n  prompt: 'Your pick: '\n", encoding="utf-8")
    _, _, _, prompts = _run(rps_moves, "0", fake_random, config_path=str(config_file))
    assert prompts == ["Your pick: "]


def test_entropy_failure_exits_nonzero(rps_moves):
    class BrokenSource:
        def next_key(self):
            raise EntropyException("no entropy")

        def next_index(self, n):
            raise AssertionError("should not be reached")

    code, out, err, _ = _run(rps_moves, "1", BrokenSource())
    assert code == 1
    assert out == ""
    assert "no entropy" in err


def test_main_exit_status_for_bad_arguments(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main_module.main(["rock", "paper"])
    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert "odd number >= 3" in captured.err
    assert captured.out == ""


def test_main_plays_a_round(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt: "2")
    with pytest.raises(SystemExit) as exc_info:
        main_module.main(["rock", "paper", "scissors", "lizard", "spock"])
    assert exc_info.value.code == 0

    out = capsys.readouterr().out
    assert "Your move: paper" in out
    assert "HMAC key: " in out


def test_main_missing_config_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main_module.main(["--config", str(tmp_path / "missing.yaml"), "rock", "paper", "scissors"])
    assert exc_info.value.code == 1
    assert "missing.yaml" in capsys.readouterr().err


def test_parser_accepts_separator_for_dash_moves():
    args = main_module.build_parser().parse_args(["--log-level", "DEBUG", "--", "-a", "b", "c"])
    assert args.moves == ["-a", "b", "c"]
    assert args.log_level == "DEBUG"
