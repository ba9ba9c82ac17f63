import pytest

from pracollections.robot import RoboticArm, main


def test_new_arm_is_not_holding():
    arm = RoboticArm(1.0, 2.0, 3.0)
    assert arm.holding is False
    assert (arm.x, arm.y, arm.z) == (1.0, 2.0, 3.0)


def test_grab_and_release():
    arm = RoboticArm(0, 0, 0)
    arm.grab()
    assert arm.holding is True
    arm.release()
    assert arm.holding is False


def test_move_is_relative_and_reversible():
    arm = RoboticArm(1, 2, 3)
    arm.move(5, -7, 11)
    assert (arm.x, arm.y, arm.z) == (6, -5, 14)
    arm.move(-5, 7, -11)
    assert (arm.x, arm.y, arm.z) == (1, 2, 3)


def test_move_keeps_grip():
    arm = RoboticArm(0, 0, 0)
    arm.grab()
    arm.move(1, 1, 1)
    assert arm.holding is True


def test_main_from_arguments(capsys):
    assert main(["0", "0", "0"]) == 0
    out = capsys.readouterr().out
    assert "holding" in out
    assert out.strip().endswith("3.2 2.4 6.7")


def test_main_from_prompt(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "0 0 0")
    assert main([]) == 0
    assert "3.2 2.4 6.7" in capsys.readouterr().out


def test_main_rejects_wrong_count():
    with pytest.raises(SystemExit):
        main(["1", "2"])


def test_main_rejects_non_numbers(monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt="": "a b c")
    with pytest.raises(SystemExit):
        main([])