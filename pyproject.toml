[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heshen"
version = "0.1.0"
description = "A small software renderer (vectors and matrices, cameras, scene nodes, a line rasterizer) with a WAVE file reader"
requires-python = ">=3.10"
dependencies = []
keywords = ["rendering", "rasterizer", "software-renderer", "matrix", "camera", "scene-graph", "wav"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["heshen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
