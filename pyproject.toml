[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vgatron"
version = "0.1.0"
description = "A simulated DE10-Lite / DE1-SoC VGA pixel buffer with RGB565 colour bars and a Tron light-cycle game"
requires-python = ">=3.10"
dependencies = []
keywords = ["vga", "framebuffer", "tron", "rgb565", "fpga", "light-cycle", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vgatron-bars = "vgatron.framebuffer:main"
vgatron-tron = "vgatron.tron:main"

[tool.hatch.build.targets.wheel]
packages = ["vgatron"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
