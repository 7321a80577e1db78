[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cryptokit"
version = "0.1.0"
description = "Small helpers for AES-GCM, DES-CBC, RSA PKCS#1 v1.5, MD5 and SHA hashing with hex and Base64 encodings"
requires-python = ">=3.10"
keywords = ["aes", "gcm", "des", "cbc", "rsa", "pkcs1", "md5", "sha256", "sha1", "crypto"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]
dependencies = [
    "pycryptodome",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cryptokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
