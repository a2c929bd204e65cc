[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smppkit"
version = "0.1.0"
description = "SMPP 3.4 building blocks: GSM 7-bit text encoding, PDU headers and TCP connections"
requires-python = ">=3.10"
dependencies = []
keywords = ["smpp", "sms", "gsm", "gsm7", "telephony", "pdu", "short message"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Telephony",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["smppkit"]

[tool.hatch.build.targets.sdist]
include = ["smppkit", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
files = ["smppkit"]
