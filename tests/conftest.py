import pytest

SECRET = "abcdefghijklmnopqrstuv1234567890"
IV = "507e1b56bd09de07"

# produced by an existing deployment; decrypts to REFERENCE_PLAINTEXT
REFERENCE_CIPHERTEXT = (
    "d4b6baef6ae9313a17b3f736a4e28ba35f4f23a74397a06f75fefe7acc777b81"
    "570a12ccee82ff4e2c05f148dce3b17c"
)
REFERENCE_PLAINTEXT = '{"ABC":"123","DEF":"678","HIJ":"$ABC$DEF"}'


@pytest.fixture
def secret():
    return SECRET


@pytest.fixture
def iv():
    return IV


@pytest.fixture
def reference():
    return {
        "algorithm": "aes-256-cbc",
        "envs": REFERENCE_CIPHERTEXT,
        "encoding": "utf8",
        "input": "hex",
        "iv": IV,
        "secret": SECRET,
        "plaintext": REFERENCE_PLAINTEXT,
    }
