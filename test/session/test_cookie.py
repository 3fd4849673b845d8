import time

import pytest
from itsdangerous import TimestampSigner

from sessioncookie.session import SessionCookie
from sessioncookie.support import SessionConfig


class TestSessionCookie:
    def test_serialize_includes_all_attributes(self):
        config = SessionConfig(secrets=('s',), cookie_name='sid', path='/app',
                               domain='example.com', same_site='strict', max_age=60)
        header = SessionCookie(config).serialize({'a': 1})

        parts = header.split('; ')
        assert parts[0].startswith('sid=')
        assert 'Path=/app' in parts
        assert 'Domain=example.com' in parts
        assert 'Max-Age=60' in parts
        assert 'SameSite=Strict' in parts
        assert 'Secure' in parts
        assert 'HttpOnly' in parts
        assert any(p.lower().startswith('expires=') and p.endswith('GMT') for p in parts)

    def test_flags_can_be_disabled(self):
        config = SessionConfig(secrets=('s',), secure=False, http_only=False)
        header = SessionCookie(config).serialize({})
        assert 'Secure' not in header.split('; ')
        assert 'HttpOnly' not in header.split('; ')
        assert 'Domain=' not in header

    def test_parse_round_trip(self):
        cookie = SessionCookie(SessionConfig(secrets=('s',)))
        header = cookie.serialize({'b': [1, 2], 'a': 'x'})
        assert cookie.parse(header.split(';')[0]) == {'a': 'x', 'b': [1, 2]}

    def test_parse_ignores_other_cookies(self):
        cookie = SessionCookie(SessionConfig(secrets=('s',), cookie_name='sid'))
        value = cookie.encode({'a': 1})
        assert cookie.parse(f'other=zzz; sid={value}; more=1') == {'a': 1}
        assert cookie.parse('other=zzz') is None

    def test_clear_expires_immediately(self):
        cookie = SessionCookie(SessionConfig(secrets=('s',), cookie_name='sid'))
        header = cookie.clear()
        parts = header.split('; ')
        assert parts[0].startswith('sid=')
        assert 'Max-Age=0' in parts
        assert any(p.lower().startswith('expires=') and '1970' in p for p in parts)
        assert cookie.parse(parts[0]) is None

    def test_parse_uses_first_value_sent_under_name(self):
        cookie = SessionCookie(SessionConfig(secrets=('s',), cookie_name='sid'))
        first = cookie.encode({'n': 1})
        second = cookie.encode({'n': 2})
        assert cookie.parse(f'sid={first}; sid={second}') == {'n': 1}

    def test_parse_tolerates_whitespace_and_empty_header(self):
        cookie = SessionCookie(SessionConfig(secrets=('s',), cookie_name='sid'))
        value = cookie.encode({'a': 1})
        assert cookie.parse(f'  other=1;   sid={value} ;') == {'a': 1}
        assert cookie.parse('') is None
        assert cookie.parse(None) is None

    def test_payload_is_signed_not_encrypted_by_default(self):
        cookie = SessionCookie(SessionConfig(secrets=('s',)))
        assert cookie.is_signed
        assert cookie.cipher is None

    def test_encrypted_payload_hides_values(self):
        config = SessionConfig(secrets=('s',), encrypt=True)
        cookie = SessionCookie(config)
        value = cookie.encode({'secretData': 'plain-marker'})

        plain = SessionCookie(SessionConfig(secrets=('s',))).decode(value)
        assert isinstance(plain, str)
        assert 'plain-marker' not in plain
        assert cookie.decode(value) == {'secretData': 'plain-marker'}

    def test_expires_tracks_max_age(self):
        cookie = SessionCookie(SessionConfig(secrets=('s',), max_age=120))
        remaining = cookie.expires.timestamp() - time.time()
        assert 100 < remaining <= 120

    def test_expired_cookie_is_rejected(self, monkeypatch):
        cookie = SessionCookie(SessionConfig(secrets=('s',), max_age=60))
        with monkeypatch.context() as m:
            m.setattr(TimestampSigner, 'get_timestamp', lambda self: int(time.time()) - 3600)
            value = cookie.encode({'a': 1})

        assert cookie.decode(value) is None

    @pytest.mark.parametrize('raw', ['garbage', 'a.b.c', '....', '%%%'])
    def test_garbage_never_raises(self, raw):
        cookie = SessionCookie(SessionConfig(secrets=('s',)))
        assert cookie.decode(raw) is None
