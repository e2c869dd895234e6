[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelplay"
version = "0.1.0"
description = "Generate, merge and display raw RGB and YUV420P frames"
requires-python = ">=3.10"
keywords = ["rgb", "yuv", "yuv420p", "i420", "pixels", "frames", "pygame", "image"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Multimedia :: Video :: Display",
]
dependencies = [
    "numpy",
    "pillow",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixelplay = "pixelplay.display:main"

[tool.hatch.build.targets.wheel]
packages = ["pixelplay"]

[tool.pytest.ini_options]
addopts = "-ra"
