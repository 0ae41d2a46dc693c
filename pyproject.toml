[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "samplekit"
version = "0.1.0"
description = "Small worked programs: text tools, conversions, S-expression encoding, images, bzip2, tiny web servers and HTTP clients"
requires-python = ">=3.10"
keywords = [
    "examples",
    "s-expressions",
    "palindrome",
    "mandelbrot",
    "lissajous",
    "bzip2",
    "temperature",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
samplekit-echo = "samplekit.echo:main"
samplekit-lines = "samplekit.lines:main"
samplekit-cf = "samplekit.tempconv:main"
samplekit-bzipper = "samplekit.bzip:main"
samplekit-lissajous = "samplekit.lissajous:main"
samplekit-mandelbrot = "samplekit.mandelbrot:main"
samplekit-jpeg = "samplekit.jpeg:main"
samplekit-server = "samplekit.servers:main"
samplekit-fetch = "samplekit.fetch:main"
samplekit-hash = "samplekit.hashing:main"

[tool.hatch.build.targets.wheel]
packages = ["samplekit"]

[tool.pytest.ini_options]
addopts = "-ra"
