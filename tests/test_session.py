from __future__ import annotations

from pyplaces.session import SessionTokenManager


def test_current_is_lazy_and_stable() -> None:
    tokens = SessionTokenManager()
    assert not tokens.has_token

    first = tokens.current()

    assert tokens.has_token
    assert tokens.current() is first
    assert tokens.rotations == 0


def test_rotate_never_reuses_a_token() -> None:
    tokens = SessionTokenManager()
    seen = {tokens.current().id}

    for _ in range(5):
        seen.add(tokens.rotate().id)

    assert len(seen) == 6
    assert tokens.rotations == 5
    assert tokens.current().id in seen


def test_managers_do_not_share_tokens() -> None:
    assert SessionTokenManager().current().id != SessionTokenManager().current().id
