[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ipcosd"
version = "0.1.0"
description = "Building blocks for IP camera on-screen display overlays: INI parameters, BMP images, text rendering, borders and region geometry"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["osd", "overlay", "ip-camera", "ini", "bmp", "argb8888", "video"]
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
    "Topic :: Multimedia :: Video",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ipcosd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
