import asyncio
import logging
import random

import pytest

import main_cipher
from config.settings import CipherConfig, Config
from main_cipher import ShadowCipherApplication
from utils.exceptions import FileReadError, TableEncryptionError


def _config(tmp_path, **overrides):
    config = Config()
    config.cipher = CipherConfig(
        input_path=str(tmp_path / "message.txt"),
        encrypted_path=str(tmp_path / "out" / "encrypted_message.txt"),
        decrypted_path=str(tmp_path / "out" / "decrypted_message.txt"),
        key_size=2048,
        **overrides,
    )
    return config


def test_pipeline_writes_both_outputs(tmp_path, key_pair):
    (tmp_path / "message.txt").write_text("Hello World", encoding="utf-8")
    app = ShadowCipherApplication(_config(tmp_path), key_pair=key_pair, rng=random.Random(7))

    result = asyncio.run(app.run())

    encrypted = (tmp_path / "out" / "encrypted_message.txt").read_text(encoding="utf-8")
    decrypted = (tmp_path / "out" / "decrypted_message.txt").read_text(encoding="utf-8")
    assert encrypted == result.encoded_message
    assert decrypted == "HELLO WORLD"
    assert result.message == "Hello World"
    assert result.table.is_complete
    assert encrypted.count("$") == len("Hello World") - 1


def test_pipeline_tagged_format(tmp_path, key_pair):
    (tmp_path / "message.txt").write_text("Pay $5", encoding="utf-8")
    app = ShadowCipherApplication(_config(tmp_path, codec_format="tagged"), key_pair=key_pair)

    result = asyncio.run(app.run())

    assert result.decoded_message == "PAY $5"
    assert result.encoded_message.startswith("N")


def test_missing_input_writes_nothing(tmp_path, key_pair):
    app = ShadowCipherApplication(_config(tmp_path), key_pair=key_pair)

    with pytest.raises(FileReadError):
        asyncio.run(app.run())

    assert not (tmp_path / "out").exists()


def test_encryption_failure_writes_nothing(tmp_path, small_key_pair):
    (tmp_path / "message.txt").write_text("Hello", encoding="utf-8")
    app = ShadowCipherApplication(_config(tmp_path), key_pair=small_key_pair)

    with pytest.raises(TableEncryptionError):
        asyncio.run(app.run())

    assert not (tmp_path / "out").exists()


def test_main_reports_failure(tmp_path, monkeypatch):
    monkeypatch.setenv("SHADOW_INPUT_PATH", str(tmp_path / "missing.txt"))
    monkeypatch.setenv("SHADOW_ENCRYPTED_PATH", str(tmp_path / "enc.txt"))
    monkeypatch.setenv("SHADOW_DECRYPTED_PATH", str(tmp_path / "dec.txt"))
    monkeypatch.setenv("RSA_KEY_SIZE", "2048")
    monkeypatch.delenv("CODEC_FORMAT", raising=False)
    monkeypatch.delenv("DECODE_STRICT", raising=False)

    assert asyncio.run(main_cipher.main()) == 1
    assert not (tmp_path / "enc.txt").exists()
    assert not (tmp_path / "dec.txt").exists()


def test_main_reports_invalid_configuration(monkeypatch):
    monkeypatch.setenv("RSA_KEY_SIZE", "1024")
    assert asyncio.run(main_cipher.main()) == 1


def test_main_reports_pipeline_value_error_as_unexpected(monkeypatch, caplog):
    for name in ("SHADOW_INPUT_PATH", "RSA_KEY_SIZE", "CODEC_FORMAT", "DECODE_STRICT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(main_cipher, "setup_logging", lambda level: None)

    async def failing_run(self):
        raise ValueError("boom")

    monkeypatch.setattr(ShadowCipherApplication, "run", failing_run)

    with caplog.at_level(logging.INFO):
        assert asyncio.run(main_cipher.main()) == 1

    assert "Unexpected error: boom" in caplog.text
    assert "Configuration validation error" not in caplog.text
