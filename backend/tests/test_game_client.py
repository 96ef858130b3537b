import json
import logging

import httpx

from game_client import GameSession, RelayNotifier, SessionOutcome


class FakeRelay:
    def __init__(self, status_code=200, error=None):
        self.status_code = status_code
        self.error = error
        self.payloads = []

    def handler(self, request):
        assert request.url.path == '/api/line-notify'
        self.payloads.append(json.loads(request.content))
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json={'success': self.status_code == 200})


def make_session(relay, screens):
    notifier = RelayNotifier('http://relay.test', transport=httpx.MockTransport(relay.handler))
    return GameSession(
        'u1',
        notifier,
        show_game_over_screen=lambda: screens.append('gameOver'),
        show_clear_screen=lambda: screens.append('clear'),
    )


def test_game_over_reports_zero_and_shows_screen():
    relay, screens = FakeRelay(), []
    session = make_session(relay, screens)
    session.add_points(120)
    task = session.game_over()
    task.join(timeout=5)
    assert screens == ['gameOver']
    assert session.is_game_over is True
    assert session.game_state == 'gameOver'
    assert session.score == 0
    assert relay.payloads == [{'userId': 'u1', 'score': 0, 'isGameOver': True}]


def test_game_over_screen_shown_when_relay_unreachable(caplog):
    relay, screens = FakeRelay(error=httpx.ConnectError('network down')), []
    session = make_session(relay, screens)
    with caplog.at_level(logging.ERROR, logger='game_client'):
        task = session.game_over()
        task.join(timeout=5)
    assert screens == ['gameOver']
    assert any('request error' in r.getMessage() for r in caplog.records)


def test_game_over_screen_shown_when_relay_rejects(caplog):
    relay, screens = FakeRelay(status_code=404), []
    session = make_session(relay, screens)
    with caplog.at_level(logging.ERROR, logger='game_client'):
        session.game_over().join(timeout=5)
    assert screens == ['gameOver']
    assert any('relay responded 404' in r.getMessage() for r in caplog.records)


def test_game_over_screen_shown_when_dispatch_fails():
    class BrokenNotifier:
        def dispatch(self, outcome):
            raise RuntimeError('cannot start thread')

    screens = []
    session = GameSession('u1', BrokenNotifier(), show_game_over_screen=lambda: screens.append('gameOver'))
    assert session.game_over() is None
    assert screens == ['gameOver']


def test_clear_reports_accumulated_score():
    relay, screens = FakeRelay(), []
    session = make_session(relay, screens)
    session.add_points(100)
    session.add_points(50)
    session.clear().join(timeout=5)
    assert screens == ['clear']
    assert session.game_state == 'cleared'
    assert relay.payloads == [{'userId': 'u1', 'score': 150, 'isGameOver': False}]
    # Points after the round ends are ignored
    session.add_points(10)
    assert session.score == 150


def test_send_returns_delivery_flag():
    ok = RelayNotifier('http://relay.test', transport=httpx.MockTransport(FakeRelay().handler))
    failing = RelayNotifier('http://relay.test', transport=httpx.MockTransport(FakeRelay(status_code=500).handler))
    outcome = SessionOutcome('u1', 0, True)
    assert ok.send(outcome) is True
    assert failing.send(outcome) is False
    ok.close()
    failing.close()


def test_game_over_end_to_end_through_relay(flask_app, add_user, line_api):
    add_user('u1', line_user_id='L1')
    notifier = RelayNotifier('http://relay.test', transport=httpx.WSGITransport(app=flask_app))
    screens = []
    session = GameSession('u1', notifier, show_game_over_screen=lambda: screens.append('gameOver'))
    session.add_points(40)
    session.game_over().join(timeout=5)
    assert screens == ['gameOver']
    assert len(line_api.pushes) == 1
    assert line_api.pushes[0]['to'] == 'L1'
    assert 'スコア: 0点' in line_api.pushes[0]['messages'][0]['text']
    notifier.close()
