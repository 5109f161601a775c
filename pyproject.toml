[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blynkcore"
version = "1.0.0"
description = "Building blocks of a Blynk IoT client: parameter buffers, FIFOs, NTP packets, logging, LED indication and device provisioning helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["blynk", "iot", "home-automation", "provisioning", "ntp", "fifo"]
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
    "Topic :: Home Automation",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["blynkcore"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
