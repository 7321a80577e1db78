import pytest

from cryptokit.sha import (
    sha1_hash_string,
    sha1_hash_string_without_error,
    sha256_hash_string,
    sha256_hash_string_without_error,
)

LONG_TEXT = "这是一段较长的文本，用于测试SHA256哈希函数对长文本的处理能力。SHA256会生成固定长度的哈希值，无论输入多长。"
ONE_MB_ZEROS = "\x00" * (1024 * 1024)

SHA256_CASES = [
    ("", "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"),
    ("hello world", "b94d27b9934d3e08a52e52d7da7dabfac484efe37a5380ee9088f7ace2efcde9"),
    ("12345", "5994471abb01112afcc18159f6cc74b4f511b99806da59b3caf5a9c173cacfc5"),
    ("你好，世界", "46932f1e6ea5216e77f58b1908d72ec9322ed129318c6d4bd4450b5eaab9d7e7"),
    ("!@#$%^&*()_+", "36d3e1bc65f8b67935ae60f542abef3e55c5bbbd547854966400cc4f022566cb"),
    (LONG_TEXT, "d9a75fbb24d37240199f1d719f497de5b5028fe611bdbff0fc50a997d0f2b48e"),
    (ONE_MB_ZEROS, "30e14955ebf1352266dc2ff8067e68104607e750abb9d3b36582b8af909fcb58"),
]

SHA1_CASES = [
    ("", "da39a3ee5e6b4b0d3255bfef95601890afd80709"),
    ("hello world", "2aae6c35c94fcfb415dbe95f408b9ce91ee846ed"),
    ("12345", "8cb2237d0679ca88db6464eac60da96345513964"),
    ("你好，世界", "3becb03b015ed48050611c8d7afe4b88f70d5a20"),
    ("!@#$%^&*()_+", "d0b9abafaf5a393954f53e47715c833f0c18075d"),
    (LONG_TEXT, "ddff78fe3dc4b7bbad08f1b6e3ee15b2a268c572"),
    (ONE_MB_ZEROS, "3b71f43ff30f4b15b5cd85dd9e95ebc7e84eb5a3"),
]


@pytest.mark.parametrize("message, expected", SHA256_CASES)
def test_sha256_hash_string(message, expected):
    assert sha256_hash_string(message) == expected


@pytest.mark.parametrize("message, expected", SHA256_CASES)
def test_sha256_hash_string_without_error(message, expected):
    assert sha256_hash_string_without_error(message) == expected


def test_sha256_test_word():
    assert (
        sha256_hash_string_without_error("test")
        == "9f86d081884c7d659a2feaa0c55ad015a3bf4f1b2b0b822cd15d6c15b0f00a08"
    )


@pytest.mark.parametrize("message, expected", SHA1_CASES)
def test_sha1_hash_string(message, expected):
    assert sha1_hash_string(message) == expected


@pytest.mark.parametrize("message, expected", SHA1_CASES)
def test_sha1_hash_string_without_error(message, expected):
    assert sha1_hash_string_without_error(message) == expected


def test_bytes_input_matches_text():
    assert sha256_hash_string(b"hello world") == SHA256_CASES[1][1]
    assert sha1_hash_string(b"hello world") == SHA1_CASES[1][1]


def test_unencodable_text_raises():
    with pytest.raises(UnicodeEncodeError):
        sha256_hash_string("\ud800")
    with pytest.raises(UnicodeEncodeError):
        sha1_hash_string("\ud800")


def test_without_error_returns_empty_on_failure():
    assert sha256_hash_string_without_error("\ud800") == ""
    assert sha1_hash_string_without_error("\ud800") == ""