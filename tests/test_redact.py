from __future__ import annotations

from pyvehreg._redact import redact_for_log, short_principal


def test_short_principal_abbreviates_long_identities() -> None:
    assert short_principal("ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM") == "ST1PQH…GZGM"


def test_short_principal_keeps_short_values() -> None:
    assert short_principal("owner-1") == "owner-1"


def test_redact_for_log_shortens_identity_keys() -> None:
    payload = {
        "owner": "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM",
        "model": "Test Car",
        "capacity": 4,
        "nested": {"sender": "ST2PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"},
    }

    redacted = redact_for_log(payload)
    assert redacted["owner"] == "ST1PQH…GZGM"
    assert redacted["model"] == "Test Car"
    assert redacted["capacity"] == 4
    assert redacted["nested"]["sender"] == "ST2PQH…GZGM"


def test_redact_for_log_truncates_long_strings() -> None:
    long_value = "x" * 600
    redacted = redact_for_log({"value": long_value}, max_string=10)
    assert redacted["value"].startswith("x" * 10)
    assert "<truncated>" in redacted["value"]
