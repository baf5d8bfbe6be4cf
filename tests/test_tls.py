import ssl

import pytest

from nacossdk.tls import new_tls


def test_without_ca_skips_verification():
    config = new_tls()
    assert config.insecure_skip_verify is True
    assert config.context.verify_mode == ssl.CERT_NONE
    assert config.context.check_hostname is False


def test_server_name_ignored_without_ca():
    config = new_tls(server_name_override="example.com")
    assert config.server_name == ""


def test_certificate_needs_both_files(tmp_path):
    config = new_tls(cert_file=str(tmp_path / "missing.pem"))
    assert config.insecure_skip_verify is True


def test_missing_certificate_files_raise(tmp_path):
    with pytest.raises(OSError):
        new_tls(cert_file=str(tmp_path / "cert.pem"), key_file=str(tmp_path / "key.pem"))


def test_missing_ca_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        new_tls(ca_file=str(tmp_path / "ca.pem"))


def test_ca_file_without_certificates_raises(tmp_path):
    ca = tmp_path / "ca.pem"
    ca.write_text("not a certificate\n")
    with pytest.raises(ValueError, match="failed to append certificates"):
        new_tls(ca_file=str(ca))