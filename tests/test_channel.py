import socket

import pytest

from wordduel.errors import HandshakeError
from wordduel.game.settings import Difficulty, Language
from wordduel.net import channel as channel_mod
from wordduel.net import GameConfig, GuessChannel, receive_config, receive_hello, send_config, send_hello


class FakeSocket:
    """
    Scripted socket: recv() pops the next item (bytes are returned, exceptions
    raised) and would-block once the script runs out.
    """

    def __init__(self, script=(), send_script=()):
        self.script = list(script)
        self.send_script = list(send_script)
        self.sent = bytearray()
        self.blocking = True

    def setblocking(self, flag):
        self.blocking = flag

    def recv(self, bufsize):
        if not self.script:
            raise BlockingIOError()
        item = self.script.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    def send(self, data):
        if self.send_script:
            item = self.send_script.pop(0)
            if isinstance(item, BaseException):
                raise item
            n = min(item, len(data))
        else:
            n = len(data)
        self.sent.extend(bytes(data[:n]))
        return n


@pytest.fixture
def sleeps(monkeypatch):
    calls = []
    monkeypatch.setattr(channel_mod.time, "sleep", lambda s: calls.append(s))
    return calls


def test_channel_switches_socket_to_non_blocking():
    sock = FakeSocket()
    GuessChannel(sock)
    assert sock.blocking is False


def test_receive_polls_while_would_block(sleeps):
    sock = FakeSocket([BlockingIOError(), BlockingIOError(), b"GARDENS\n"])
    ch = GuessChannel(sock)
    assert ch.receive_remote_guess() == "GARDENS\n"
    assert sleeps == [0.1, 0.1]


def test_receive_waits_for_split_multibyte_character(sleeps):
    data = "maçãs".encode("utf-8")
    sock = FakeSocket([data[:3], BlockingIOError(), data[3:]])
    ch = GuessChannel(sock)
    assert ch.receive_remote_guess() == "maçãs"


def test_invalid_bytes_do_not_block_later_messages(sleeps):
    sock = FakeSocket([b"\xff", BlockingIOError(), b"garnets\n"])
    ch = GuessChannel(sock)
    assert ch.receive_remote_guess() == "\ufffd"
    assert ch.receive_remote_guess() == "garnets\n"


def test_invalid_byte_before_a_split_character_is_replaced(sleeps):
    sock = FakeSocket([b"\xffma\xc3"])
    ch = GuessChannel(sock)
    assert ch.receive_remote_guess() == "\ufffdma\ufffd"


def test_buffer_is_cleared_between_messages(sleeps):
    sock = FakeSocket([b"garnets", BlockingIOError(), b"kitchen"])
    ch = GuessChannel(sock)
    assert ch.receive_remote_guess() == "garnets"
    assert ch.receive_remote_guess() == "kitchen"


def test_clean_close_aborts(sleeps):
    ch = GuessChannel(FakeSocket([BlockingIOError(), b""]))
    with pytest.raises(ConnectionAbortedError):
        ch.receive_remote_guess()


def test_other_socket_errors_propagate(sleeps):
    ch = GuessChannel(FakeSocket([ConnectionResetError("reset")]))
    with pytest.raises(ConnectionResetError):
        ch.receive_remote_guess()


def test_optional_timeout():
    ch = GuessChannel(FakeSocket(), poll_interval=0.01, timeout=0.05)
    with pytest.raises(TimeoutError):
        ch.receive_remote_guess()


def test_line_leftovers_are_served_by_next_read(sleeps):
    sock = FakeSocket([b'{"type": "hello"}\nGARD', b"ENS"])
    ch = GuessChannel(sock)
    assert ch.receive_line() == '{"type": "hello"}'
    # No framing: whatever decodes is one message
    assert ch.receive_remote_guess() == "GARD"


def test_send_retries_on_would_block_and_partial_sends(sleeps):
    sock = FakeSocket(send_script=[BlockingIOError(), 3])
    ch = GuessChannel(sock)
    ch.send_local_input("limões\n")
    assert sock.sent.decode("utf-8") == "limões\n"
    assert sleeps == [0.1]


# --- handshake over a real socket pair ---

def test_handshake_roundtrip():
    a, b = socket.socketpair()
    with GuessChannel(a, poll_interval=0.01, timeout=2) as host, \
            GuessChannel(b, poll_interval=0.01, timeout=2) as peer:
        send_hello(peer, "Bia")
        assert receive_hello(host) == "Bia"

        cfg = GameConfig("Ana", "Bia", Language.PORTUGUESE, Difficulty.HARD, "ABÓBORAS")
        send_config(host, cfg)
        host.send_local_input("trabalho\n")
        assert receive_config(peer) == cfg
        assert peer.receive_remote_guess() == "trabalho\n"


def test_handshake_rejects_unexpected_record():
    a, b = socket.socketpair()
    with GuessChannel(a, timeout=2) as host, GuessChannel(b, timeout=2) as peer:
        peer.send_line("not json")
        with pytest.raises(HandshakeError):
            receive_hello(host)
        peer.send_line('{"type": "config"}')
        with pytest.raises(HandshakeError):
            receive_hello(host)


def test_handshake_rejects_undecodable_record():
    a, b = socket.socketpair()
    with GuessChannel(a, poll_interval=0.01, timeout=2) as host:
        b.sendall(b'{"type": "hello", "name": "\xff"}\n')
        with pytest.raises(HandshakeError):
            receive_hello(host)
    b.close()


def test_config_record_requires_known_values():
    rec = GameConfig("Ana", "Bia", Language.ENGLISH, Difficulty.EASY, "GARDEN").to_record()
    rec["difficulty"] = "extreme"
    with pytest.raises(HandshakeError):
        GameConfig.from_record(rec)
