import contextlib
import json
import random
import threading
import urllib.error
import urllib.request
from http.server import ThreadingHTTPServer

import pytest

from practicebox.rps_web import GameResponse, make_handler, play_round

BEATS = {"rock": "scissors", "paper": "rock", "scissors": "paper"}


@contextlib.contextmanager
def serving(template, static):
    httpd = ThreadingHTTPServer(
        ("127.0.0.1", 0), make_handler(str(template), str(static), random.Random(1))
    )
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{httpd.server_address[1]}"
    finally:
        httpd.shutdown()
        httpd.server_close()


@pytest.fixture
def site(tmp_path):
    template = tmp_path / "index.html"
    template.write_text("<h1>Play</h1>")
    static = tmp_path / "static"
    static.mkdir()
    (static / "app.js").write_text("let x = 1;")
    with serving(template, static) as base:
        yield base


def check_consistent(response):
    player, computer = response.player_choice, response.computer_choice
    assert computer in BEATS
    if player == computer:
        assert (response.result, response.message) == ("draw", "It's a draw!")
    elif BEATS[player] == computer:
        assert (response.result, response.message) == ("win", "You win!")
    else:
        assert (response.result, response.message) == ("lose", "Computer wins!")


def test_play_round_is_consistent():
    for seed in range(30):
        response = play_round(b'{"playerChoice": "paper"}', random.Random(seed))
        assert response.player_choice == "paper"
        check_consistent(response)


def test_play_round_reaches_every_result():
    results = {
        play_round('{"playerChoice":"rock"}', random.Random(seed)).result
        for seed in range(60)
    }
    assert results == {"win", "lose", "draw"}


def test_play_round_key_is_case_insensitive():
    response = play_round(b'{"PLAYERCHOICE": "scissors"}', random.Random(2))
    assert response.player_choice == "scissors"


@pytest.mark.parametrize("body", [b"not json", b"", b"[1]", b'{"playerChoice": 3}'])
def test_play_round_rejects_bad_body(body):
    with pytest.raises(ValueError, match="Invalid request body"):
        play_round(body, random.Random(0))


@pytest.mark.parametrize("body", [b'{"playerChoice": "lizard"}', b"{}", b"null"])
def test_play_round_rejects_bad_choice(body):
    with pytest.raises(ValueError, match="Invalid choice"):
        play_round(body, random.Random(0))


def test_to_json_round_trip():
    response = GameResponse("rock", "scissors", "win", "You win!")
    data = json.loads(response.to_json())
    assert data == {
        "playerChoice": "rock",
        "computerChoice": "scissors",
        "result": "win",
        "message": "You win!",
    }
    assert list(data) == ["playerChoice", "computerChoice", "result", "message"]


def test_home_page_served(site):
    with urllib.request.urlopen(site + "/") as reply:
        assert reply.read() == b"<h1>Play</h1>"
        assert reply.headers["Content-Type"] == "text/html; charset=utf-8"


def test_play_requires_post(site):
    with pytest.raises(urllib.error.HTTPError) as caught:
        urllib.request.urlopen(site + "/play")
    assert caught.value.code == 405
    assert caught.value.read() == b"Method not allowed\n"


def test_play_returns_json(site):
    request = urllib.request.Request(
        site + "/play", data=b'{"playerChoice": "rock"}', method="POST"
    )
    with urllib.request.urlopen(request) as reply:
        assert reply.headers["Content-Type"] == "application/json"
        data = json.loads(reply.read())
    check_consistent(
        GameResponse(
            data["playerChoice"], data["computerChoice"], data["result"], data["message"]
        )
    )
    assert data["playerChoice"] == "rock"


def test_play_rejects_invalid_choice(site):
    request = urllib.request.Request(
        site + "/play", data=b'{"playerChoice": "spock"}', method="POST"
    )
    with pytest.raises(urllib.error.HTTPError) as caught:
        urllib.request.urlopen(request)
    assert caught.value.code == 400
    assert caught.value.read() == b"Invalid choice\n"


def test_static_file_served(site):
    with urllib.request.urlopen(site + "/static/app.js") as reply:
        assert reply.read() == b"let x = 1;"


def test_static_missing_file(site):
    with pytest.raises(urllib.error.HTTPError) as caught:
        urllib.request.urlopen(site + "/static/missing.js")
    assert caught.value.code == 404


def test_missing_template_is_server_error(tmp_path):
    with serving(tmp_path / "absent.html", tmp_path) as base:
        with pytest.raises(urllib.error.HTTPError) as caught:
            urllib.request.urlopen(base + "/")
    assert caught.value.code == 500