import pytest

from access_dashboard.components.auth.service import AuthService, clean_code
from access_dashboard.core.auth import normalize_user
from access_dashboard.core.errors import BackendError, SessionExpiredError, ValidationError

BACKEND_USER = {
    'nomUsuario': 'Ana Torres',
    'docUsuario': '55667788',
    'emaUsuario': 'ana@example.com',
    'rol': {'nomRol': 'admin'},
    'habilitado2FA': True,
}


class StubBackend:
    """Backend client double returning canned bodies"""

    def __init__(self, **responses):
        self.responses = responses
        self.calls = []

    def _reply(self, name, *args, **kwargs):
        self.calls.append((name, args, kwargs))
        response = self.responses.get(name, {})
        if isinstance(response, Exception):
            raise response
        return response

    def register_user(self, fields, photo=None):
        return self._reply('register_user', fields, photo=photo)

    def verify_2fa(self, email, code):
        return self._reply('verify_2fa', email, code)

    def login_user(self, email, password):
        return self._reply('login_user', email, password)

    def verify_login_2fa(self, email, code):
        return self._reply('verify_login_2fa', email, code)

    def get_user_profile(self, token):
        return self._reply('get_user_profile', token)

    def ping(self):
        return self._reply('ping')


def _service(**responses):
    stub = StubBackend(**responses)
    return AuthService('http://backend.test/api', {'admin': 1, 'usuario': 2}, client=stub), stub


REGISTRATION = {
    'name': ' Ana Torres ',
    'document': ' 55667788 ',
    'email': ' Ana@Example.com ',
    'password': 'secret',
    'confirm_password': 'secret',
    'role': 'usuario',
}


def test_clean_code_strips_whitespace():
    assert clean_code(' 123 456 ') == '123456'


@pytest.mark.parametrize('code', ['', '12345', '1234567', 'abcdef'])
def test_clean_code_rejects_malformed_codes(code):
    with pytest.raises(ValidationError) as exc_info:
        clean_code(code)
    assert exc_info.value.code == 'two_factor.invalid_code_format'


def test_normalize_user_maps_backend_fields():
    user = normalize_user(BACKEND_USER)
    assert user == {
        'name': 'Ana Torres',
        'document': '55667788',
        'email': 'ana@example.com',
        'photo_url': None,
        'role': 'admin',
        'two_factor_enabled': True,
    }


def test_register_normalizes_fields_and_maps_role():
    service, stub = _service(register_user={'message': 'ok'})

    result = service.register(REGISTRATION)

    fields = stub.calls[0][1][0]
    assert fields == {
        'name': 'Ana Torres',
        'document': '55667788',
        'email': 'ana@example.com',
        'password': 'secret',
        'role': '2',
    }
    assert result == {'email': 'ana@example.com', 'qr_code': None, 'message': 'ok'}


def test_register_password_mismatch_makes_no_request():
    service, stub = _service()

    with pytest.raises(ValidationError) as exc_info:
        service.register(dict(REGISTRATION, confirm_password='other'))

    assert exc_info.value.code == 'register.password_mismatch'
    assert stub.calls == []


def test_register_rejects_unknown_role():
    service, _ = _service()
    with pytest.raises(ValidationError) as exc_info:
        service.register(dict(REGISTRATION, role='root'))
    assert exc_info.value.code == 'register.invalid_role'


def test_login_requiring_2fa_returns_no_token():
    service, _ = _service(login_user={'requires2FA': True, 'email': 'ana@example.com'})

    result = service.login('ana@example.com', 'pw')

    assert result == {'requires_2fa': True, 'email': 'ana@example.com'}


def test_login_without_token_is_an_error():
    service, _ = _service(login_user={'message': 'weird'})
    with pytest.raises(BackendError, match='weird'):
        service.login('ana@example.com', 'pw')


def test_profile_normalizes_user():
    service, _ = _service(get_user_profile={'message': 'ok', 'user': BACKEND_USER})
    assert service.profile('tok')['name'] == 'Ana Torres'


# Routes

def _install(app, **responses):
    stub = StubBackend(**responses)
    app.extensions['auth'].client = stub
    return stub


def test_login_page_renders(client):
    response = client.get('/login')
    assert response.status_code == 200
    assert b'name="password"' in response.data


def test_login_stores_token_and_user(app, client):
    _install(app, login_user={'token': 'tok', 'user': BACKEND_USER})

    response = client.post('/login', data={'email': 'ana@example.com', 'password': 'pw'})

    assert response.status_code == 302
    with client.session_transaction() as sess:
        assert sess['token'] == 'tok'
        assert sess['user']['role'] == 'admin'


def test_login_failure_shows_backend_message(app, client):
    _install(app, login_user=BackendError('Credenciales inválidas', status_code=401))

    response = client.post('/login', data={'email': 'ana@example.com', 'password': 'bad'})

    assert response.status_code == 401
    assert 'Credenciales inválidas' in response.get_data(as_text=True)


def test_two_factor_login_handshake(app, client):
    stub = _install(app,
                    login_user={'requires2FA': True, 'email': 'ana@example.com'},
                    verify_login_2fa={'token': 'tok', 'user': BACKEND_USER})

    response = client.post('/login', data={'email': 'ana@example.com', 'password': 'pw'})
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/login/verify')
    with client.session_transaction() as sess:
        assert 'token' not in sess
        assert sess['pending_2fa_email'] == 'ana@example.com'

    response = client.post('/login/verify', data={'code': '123 456'})

    assert response.status_code == 302
    assert stub.calls[-1] == ('verify_login_2fa', ('ana@example.com', '123456'), {})
    with client.session_transaction() as sess:
        assert sess['token'] == 'tok'
        assert 'pending_2fa_email' not in sess


def test_two_factor_login_rejects_bad_code_locally(app, client):
    stub = _install(app, login_user={'requires2FA': True, 'email': 'ana@example.com'})
    client.post('/login', data={'email': 'ana@example.com', 'password': 'pw'})

    response = client.post('/login/verify', data={'code': '12'})

    assert response.status_code == 401
    assert [c[0] for c in stub.calls] == ['login_user']
    with client.session_transaction() as sess:
        assert 'token' not in sess


def test_two_factor_login_backend_rejection_allows_retry(app, client):
    _install(app,
             login_user={'requires2FA': True, 'email': 'ana@example.com'},
             verify_login_2fa=BackendError('Código inválido', status_code=401))
    client.post('/login', data={'email': 'ana@example.com', 'password': 'pw'})

    response = client.post('/login/verify', data={'code': '123456'})

    assert response.status_code == 401
    assert 'Código inválido' in response.get_data(as_text=True)
    with client.session_transaction() as sess:
        assert sess['pending_2fa_email'] == 'ana@example.com'
        assert 'token' not in sess


def test_enrolment_backend_rejection_keeps_qr_for_retry(app, client):
    _install(app,
             register_user={'message': 'ok', 'qrCodeDataUrl': 'data:image/png;base64,QR=='},
             verify_2fa=BackendError('Código inválido', status_code=401))
    client.post('/register', data=REGISTRATION)

    response = client.post('/register/verify', data={'code': '654321'})

    page = response.get_data(as_text=True)
    assert response.status_code == 401
    assert 'Código inválido' in page
    assert 'data:image/png;base64,QR==' in page
    with client.session_transaction() as sess:
        assert sess['pending_enrolment']['email'] == 'ana@example.com'
        assert 'token' not in sess


def test_verify_without_pending_login_redirects(client):
    response = client.get('/login/verify')
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/login')


def test_register_with_enrolment_shows_qr(app, client):
    stub = _install(app,
                    register_user={'message': 'ok', 'qrCodeDataUrl': 'data:image/png;base64,QR=='},
                    verify_2fa={'message': '2FA enabled'})

    response = client.post('/register', data=REGISTRATION)
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/register/verify')

    page = client.get('/register/verify')
    assert b'data:image/png;base64,QR==' in page.data

    response = client.post('/register/verify', data={'code': '654321'})
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/login')
    assert stub.calls[-1] == ('verify_2fa', ('ana@example.com', '654321'), {})


def test_register_without_enrolment_goes_to_login(app, client):
    _install(app, register_user={'message': 'ok'})

    response = client.post('/register', data=REGISTRATION)

    assert response.status_code == 302
    assert response.headers['Location'].endswith('/login')


def test_logout_keeps_language(admin_client):
    with admin_client.session_transaction() as sess:
        sess['language'] = 'en'

    admin_client.post('/logout')

    with admin_client.session_transaction() as sess:
        assert 'token' not in sess
        assert sess['language'] == 'en'


def test_profile_expired_session_logs_out(app, admin_client):
    _install(app, get_user_profile=SessionExpiredError('expired', status_code=401))

    response = admin_client.get('/dashboard/profile')

    assert response.status_code == 302
    with admin_client.session_transaction() as sess:
        assert 'token' not in sess


def test_profile_renders_backend_user(app, admin_client):
    _install(app, get_user_profile={'user': BACKEND_USER})

    response = admin_client.get('/dashboard/profile')

    assert response.status_code == 200
    assert '55667788' in response.get_data(as_text=True)


def test_pages_require_login(client):
    response = client.get('/dashboard/vehicles')
    assert response.status_code == 302
    assert '/login' in response.headers['Location']


def test_api_requires_login_with_json(client):
    response = client.get('/api/vehicles')
    assert response.status_code == 401
    assert 'error' in response.get_json()
