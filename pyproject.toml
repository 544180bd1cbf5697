[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tonomaly"
version = "0.1.0"
description = "Small modular building blocks for sound synthesis: sine and square oscillators, ADSR envelopes and voices."
requires-python = ">=3.10"
dependencies = []
keywords = ["synthesizer", "audio", "oscillator", "adsr", "envelope", "sound"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tonomaly"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
