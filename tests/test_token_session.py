import time

from conftest import make_token
from topup_admin.schemas import TokenPair
from topup_admin.services import token_session


def test_decode_token_reads_claims_without_signature_check():
    claims = token_session.decode_token(make_token(identifier='erlanzh.gg@gmail.com', role='admin', user_id=42))

    assert claims.identifier == 'erlanzh.gg@gmail.com'
    assert claims.role == 'admin'
    assert claims.id == 42


def test_decode_token_returns_none_for_garbage():
    assert token_session.decode_token('not-a-jwt') is None
    assert token_session.decode_token('') is None
    assert token_session.decode_token(None) is None


def test_is_token_expired():
    assert not token_session.is_token_expired(make_token(expires_in=60))
    assert token_session.is_token_expired(make_token(expires_in=-60))
    assert token_session.is_token_expired('garbage')


def test_is_token_expired_uses_given_clock():
    token = make_token(expires_in=60)

    assert token_session.is_token_expired(token, now=time.time() + 3600)


def test_initials():
    assert token_session.initials(None) == 'U'
    assert token_session.initials('') == 'U'
    assert token_session.initials('hoyakap@gmail.com') == 'H'
    assert token_session.initials('79001234567') == '79'
    assert token_session.initials('admin') == 'AD'


def test_save_and_clear_tokens(app):
    with app.test_request_context():
        claims = token_session.save_tokens(TokenPair(
            access_token=make_token(identifier='hoyakap@gmail.com', user_id=3),
            refresh_token='refresh',
        ))

        assert claims.identifier == 'hoyakap@gmail.com'
        assert token_session.is_authenticated()
        assert not token_session.is_current_token_expired()
        assert token_session.get_refresh_token() == 'refresh'
        assert token_session.user_info() == {'id': 3, 'identifier': 'hoyakap@gmail.com', 'role': 'admin'}

        token_session.clear_tokens()

        assert not token_session.is_authenticated()
        assert token_session.user_info() == {'id': None, 'identifier': None, 'role': None}
