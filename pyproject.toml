[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "colormed"
version = "0.1.0"
description = "Colour-coded medication alarm clock: alarm book, OLED frame buffer, buzzer tunes and LED matrix colours"
requires-python = ">=3.10"
dependencies = []
keywords = ["alarm", "medication", "reminder", "ssd1306", "oled", "led-matrix", "buzzer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
colormed = "colormed.app:main"

[tool.hatch.build.targets.wheel]
packages = ["colormed"]

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
warn_unused_ignores = true
