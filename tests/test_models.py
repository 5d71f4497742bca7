from envcrypt import (
    CryptOptions,
    DecryptOptions,
    EncryptResult,
    decrypt_options,
    encrypt_options,
)


def test_options_from_camel_case_blob(reference):
    options = DecryptOptions.from_dict(reference)
    assert options.iv == reference["iv"]
    assert options.envs == reference["envs"]
    result = decrypt_options(options)
    assert result.decrypted_envs == reference["plaintext"]


def test_encrypt_options_round_trip(secret, iv):
    options = CryptOptions.from_dict(
        {"algorithm": "aes-256-cbc", "envs": '{"ABC":"123"}', "encoding": "utf8", "input": "hex", "secret": secret, "iv": iv}
    )
    encrypted = encrypt_options(options)
    assert encrypted.encrypted_envs == "d4706e5798c2214a0722e015cbf00ac3"

    decrypted = decrypt_options(DecryptOptions(envs=encrypted.encrypted_envs, secret=secret, iv=encrypted.iv))
    assert decrypted.decrypted_result == {"ABC": "123"}


def test_from_dict_ignores_unknown_keys(secret):
    options = CryptOptions.from_dict({"envs": "{}", "secret": secret, "verbose": True})
    assert options.algorithm is None


def test_encrypt_result_as_dict():
    result = EncryptResult("00ff", "507e1b56bd09de07")
    assert result.as_dict() == {"encryptedEvs": "00ff", "iv": "507e1b56bd09de07"}
    assert EncryptResult(**{"encrypted_envs": "00ff", "iv": "x"}).encrypted_envs == "00ff"
