[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "practicebox"
version = "0.1.0"
description = "Small console programs, games and language demonstrations for learners: Eliza, Bitcoin Miner, rock-paper-scissors and more."
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "games", "eliza", "rock-paper-scissors", "console", "examples"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
practicebox-eliza = "practicebox.eliza:main"
practicebox-keys = "practicebox.terminal:main"
practicebox-bitcoin-miner = "practicebox.bitcoin_miner:main"
practicebox-rps = "practicebox.rps:main"
practicebox-rps-web = "practicebox.rps_web:main"
practicebox-prompts = "practicebox.prompts:main"
practicebox-coffee = "practicebox.coffee:main"
practicebox-guess = "practicebox.guess:main"
practicebox-staff = "practicebox.staff:main"
practicebox-basics = "practicebox.basics:main"
practicebox-vehicles = "practicebox.vehicles:main"
practicebox-builtins = "practicebox.builtins_demo:main"
practicebox-strings = "practicebox.strings_demo:main"
practicebox-concurrency = "practicebox.concurrency:main"

[tool.hatch.build.targets.wheel]
packages = ["practicebox"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
