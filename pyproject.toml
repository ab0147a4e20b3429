[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labkit"
version = "0.1.0"
description = "Small command-line exercises: Mandelbrot membership, shortest paths, maximum subarrays, signal messaging and a text phonebook."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "mandelbrot",
    "dijkstra",
    "max-subarray",
    "kadane",
    "signals",
    "phonebook",
    "exercises",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labkit-mandelbrot = "labkit.mandelbrot:main"
labkit-mandelbrot-prompt = "labkit.mandelbrot_prompt:main"
labkit-max-subarray = "labkit.max_subarray:main"
labkit-add2pb = "labkit.phonebook:add_main"
labkit-find-phone = "labkit.phonebook:find_main"
labkit-dijkstra = "labkit.dijkstra:main"
labkit-signal-receiver = "labkit.signals:receiver_main"
labkit-signal-sender = "labkit.signals:sender_main"

[tool.hatch.build.targets.wheel]
packages = ["labkit"]

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
warn_redundant_casts = true
