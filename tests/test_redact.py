from access_dashboard.core.redact import redact_for_log


def test_redact_for_log_redacts_credentials():
    payload = {
        'email': 'ana@example.com',
        'password': 'pw',
        'twoFactorCode': '123456',
        'nested': {'token': 'abc', 'plate': 'ABC123'},
    }

    redacted = redact_for_log(payload)

    assert redacted['email'] == 'ana@example.com'
    assert redacted['password'] == '<redacted>'
    assert redacted['twoFactorCode'] == '<redacted>'
    assert redacted['nested']['token'] == '<redacted>'
    assert redacted['nested']['plate'] == 'ABC123'


def test_redact_for_log_truncates_long_strings_and_bytes():
    redacted = redact_for_log({'image': 'x' * 600, 'raw': b'\x00' * 20}, max_string=10)

    assert redacted['image'] == 'x' * 10 + '...<truncated>'
    assert redacted['raw'] == '<bytes:20b>'


def test_redact_for_log_leaves_original_untouched():
    payload = {'password': 'secret'}
    redact_for_log(payload)
    assert payload['password'] == 'secret'
