import pytest

from cryptokit.md5 import hash_string, hash_string_without_error

LONG_TEXT = "这是一段较长的文本，用于测试MD5哈希函数对长文本的处理能力。MD5会生成固定长度的哈希值，无论输入多长。"

CASES = [
    ("", "d41d8cd98f00b204e9800998ecf8427e"),
    ("hello world", "5eb63bbbe01eeed093cb22bb8f5acdc3"),
    ("12345", "827ccb0eea8a706c4c34a16891f84e7b"),
    ("你好，世界", "dbefd3ada018615b35588a01e216ae6e"),
    ("!@#$%^&*()_+", "04dde9f462255fe14b5160bbf2acffe8"),
    (LONG_TEXT, "5c0e8af370c5eb91dd3b408010d13b20"),
    ("\x00" * (1024 * 1024), "b6d81b360a5672d80c27430f39153e2c"),
]


@pytest.mark.parametrize("source, expected", CASES)
def test_hash_string(source, expected):
    assert hash_string(source) == expected


@pytest.mark.parametrize("source, expected", CASES)
def test_hash_string_without_error(source, expected):
    assert hash_string_without_error(source) == expected


def test_hash_string_test_word():
    assert hash_string_without_error("test") == "098f6bcd4621d373cade4e832627b4f6"


def test_hash_bytes_matches_text():
    assert hash_string(b"hello world") == "5eb63bbbe01eeed093cb22bb8f5acdc3"


def test_hash_string_unencodable_raises():
    with pytest.raises(UnicodeEncodeError):
        hash_string("\ud800")


def test_hash_string_without_error_returns_empty_on_failure():
    assert hash_string_without_error("\ud800") == ""


@pytest.mark.parametrize("source", ["", "hello world", "12345", "你好，世界", "!@#$%^&*()_+"])
def test_functions_agree(source):
    assert hash_string(source) == hash_string_without_error(source)