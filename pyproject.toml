[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "inputcodes"
version = "0.5.0"
description = "Keyboard and mouse event types with key code tables for X11, Windows, macOS, Android, USB HID and browser key codes."
requires-python = ">=3.10"
dependencies = []
keywords = ["input", "keyboard", "mouse", "keycode", "scancode", "usb-hid", "x11"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["inputcodes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
