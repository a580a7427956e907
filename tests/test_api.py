from guesser.core.config import settings
from guesser.core.deps import SerializedGuard, get_guard, hosted_guard
from guesser.core.rate_limit import rate_limiter


def guess(client, value: str):
    return client.post("/guard/match", json={"guess": value})


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_correct_guess(client):
    r = guess(client, "Secret")
    assert r.status_code == 200
    assert r.json() == {"matched": True, "remaining": 3}


def test_wrong_guess_is_unauthorized(client):
    r = guess(client, "Secrett")
    assert r.status_code == 401

    r = client.get("/guard/remaining")
    assert r.status_code == 200
    assert r.json() == {"remaining": 2}


def test_locked_and_wrong_look_the_same(client):
    # лочим по дистанции
    locked = guess(client, "Secretttt")
    after_lock = guess(client, "Secret")

    assert locked.status_code == after_lock.status_code == 401
    assert locked.json() == after_lock.json()


def test_exhaustion_over_http(client):
    for _ in range(3):
        assert guess(client, "Secrett").status_code == 401

    assert guess(client, "Secret").status_code == 401
    assert client.get("/guard/remaining").json() == {"remaining": 0}


def test_missing_guess_is_rejected(client):
    r = client.post("/guard/match", json={})
    assert r.status_code == 422


def test_empty_guess_is_valid_input(client):
    r = guess(client, "")
    assert r.status_code == 401


def test_rate_limit_does_not_spend_attempts(client, guard):
    hit_429 = False
    for _ in range(settings.RATE_LIMIT_MAX_REQUESTS + 5):
        r = client.get("/guard/remaining")
        if r.status_code == 429:
            hit_429 = True
            break

    assert hit_429 is True
    assert guess(client, "Secrett").status_code == 429
    assert guard.remaining() == 3

    rate_limiter.reset()
    assert guess(client, "Secret").status_code == 200


def test_default_dependency_is_hosted_guard():
    assert get_guard() is hosted_guard
    assert isinstance(hosted_guard, SerializedGuard)
