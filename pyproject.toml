[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ggshare"
version = "0.1.0"
description = "A small desktop file-sharing manager with in-memory sign-up, login, upload and delete"
requires-python = ">=3.10"
dependencies = []
keywords = ["file sharing", "tkinter", "desktop", "accounts"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: File Sharing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.gui-scripts]
ggshare = "ggshare.ui:main"

[tool.hatch.build.targets.wheel]
packages = ["ggshare"]

[tool.pytest.ini_options]
addopts = "-ra"
