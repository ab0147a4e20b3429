import io
import os
import signal
from unittest import mock

import pytest

from labkit.signals import (
    BitReceiver,
    message_bits,
    receiver_main,
    send_message,
    sender_main,
)


def _decoding_kill(receiver, results):
    """A stand-in for os.kill that feeds each signal into a receiver."""

    def kill(pid, sig):
        results.append(receiver.push(1 if sig == signal.SIGUSR2 else 0))

    return kill


def test_message_bits_extremes():
    assert message_bits(0) == [0] * 8
    assert message_bits(255) == [1] * 8


def test_message_bits_keeps_low_byte():
    assert message_bits(256 + 3) == message_bits(3)
    assert message_bits(-1) == message_bits(255)


def test_receiver_truncates_to_byte():
    receiver = BitReceiver()
    results = [receiver.push(bit) for bit in message_bits(300)]
    assert results[-1] == 300 & 0xFF


def test_receiver_rejects_bad_bit():
    receiver = BitReceiver()
    with pytest.raises(ValueError):
        receiver.push(2)
    assert receiver.count == 0


def test_receiver_rejects_extra_bits():
    receiver = BitReceiver()
    for bit in message_bits(7):
        receiver.push(bit)
    with pytest.raises(RuntimeError):
        receiver.push(1)


@mock.patch("labkit.signals.time.sleep")
def test_send_message_signals_per_bit(sleep):
    receiver = BitReceiver()
    results = []
    with mock.patch(
        "labkit.signals.os.kill", side_effect=_decoding_kill(receiver, results)
    ) as kill:
        send_message(4242, 255, 0.5)
    assert results == [None] * 7 + [255]
    assert kill.call_args_list == [mock.call(4242, signal.SIGUSR2)] * 8
    assert sleep.call_args_list == [mock.call(0.5)] * 8


@mock.patch("labkit.signals.time.sleep")
def test_send_message_zero_uses_sigusr1(sleep):
    receiver = BitReceiver()
    results = []
    with mock.patch(
        "labkit.signals.os.kill", side_effect=_decoding_kill(receiver, results)
    ) as kill:
        send_message(4242, 0)
    assert results[-1] == 0
    assert kill.call_args_list == [mock.call(4242, signal.SIGUSR1)] * 8


@mock.patch("labkit.signals.time.sleep")
def test_send_message_order_matches_bits(sleep):
    receiver = BitReceiver()
    results = []
    with mock.patch(
        "labkit.signals.os.kill", side_effect=_decoding_kill(receiver, results)
    ) as kill:
        send_message(99, 0x81)
    assert results[-1] == 0x81
    sent = [call.args[1] for call in kill.call_args_list]
    assert sent[0] == signal.SIGUSR2
    assert sent[-1] == signal.SIGUSR2
    assert set(sent[1:-1]) == {signal.SIGUSR1}


@mock.patch("labkit.signals.time.sleep")
@mock.patch("labkit.signals.os.kill")
def test_sender_main_reads_pid_and_message(kill, sleep, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4242\n255\n"))
    assert sender_main([]) == 0
    assert kill.call_args_list == [mock.call(4242, signal.SIGUSR2)] * 8
    assert "Enter receiver PID: " in capsys.readouterr().out


@mock.patch("labkit.signals.time.sleep")
@mock.patch("labkit.signals.os.kill")
def test_sender_main_rejects_bad_input(kill, sleep, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert sender_main([]) == 1
    assert kill.call_count == 0


@mock.patch("labkit.signals.time.sleep")
@mock.patch("labkit.signals.os.kill", side_effect=ProcessLookupError(3, "No such process"))
def test_sender_main_reports_kill_failure(kill, sleep, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4242 1\n"))
    assert sender_main([]) == 1
    assert "No such process" in capsys.readouterr().err


def test_receiver_main_decodes_signals(capsys):
    before = (signal.getsignal(signal.SIGUSR1), signal.getsignal(signal.SIGUSR2))

    def deliver(_seconds):
        for bit in message_bits(77):
            os.kill(os.getpid(), signal.SIGUSR2 if bit else signal.SIGUSR1)
        raise AssertionError("receiver did not finish")

    with mock.patch("labkit.signals.time.sleep", side_effect=deliver):
        status = receiver_main([])

    out = capsys.readouterr().out
    assert status == 0
    assert f"My PID is {os.getpid()}" in out
    assert "Received 77" in out
    assert (signal.getsignal(signal.SIGUSR1), signal.getsignal(signal.SIGUSR2)) == before